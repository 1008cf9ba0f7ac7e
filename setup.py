###############################################################################
############################### LIBRARY IMPORTS ###############################
###############################################################################

import re

from pathlib import Path
from setuptools import setup
from setuptools import find_packages

# read without importing the package (its dependencies may not be installed)
version = re.search(
    r"^__version__ = '([^']+)'",
    (Path(__file__).parent / 'convertxyz' / '__init__.py').read_text(),
    re.MULTILINE
).group(1)

###############################################################################
#################################### SETUP ####################################
###############################################################################

setup(
    name = 'convertxyz',
    version = version,
    author = 'The ConvertXYZ Developers',
    description = 'Conversion between standard and computem .xyz files',
    license = 'GPL',
    packages = find_packages(exclude = ['tests', 'tests.*']),
    package_data = {
        'convertxyz.configs': ['*.yaml']
    },
    python_requires = '>=3.9',
    install_requires = [
        'numpy',
        'ase',
        'pyyaml',
        'tqdm',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points = {
        'console_scripts': [
            'convertxyz = convertxyz.cli:main',
        ],
    }
)
