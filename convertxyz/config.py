"""
CONVERTXYZ
Copyright (C) 2025  The ConvertXYZ Developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either Version 3 of the License, or (at your option) any later
version.

This program is distributed in the hope that it will be useful, but WITHOUT ANY
WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
PARTICULAR PURPOSE. See the GNU General Public License for more details.

You should have received a copy of the GNU General Public License along with
this program.  If not, see <https://www.gnu.org/licenses/>.
"""

###############################################################################
############################### LIBRARY IMPORTS ###############################
###############################################################################

import yaml
from pathlib import Path
from typing import TextIO, Union
from importlib import resources
from . import configs
from .records import ConversionOptions

###############################################################################
################################# CONSTANTS ###################################
###############################################################################

DEFAULT_CONFIG = 'convertxyz.yaml'

LOOKUP_ERROR_POLICIES = ('abort', 'skip')

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

def load_config(config_f: Union[str, Path]) -> dict:
    """
    Loads a .yaml configuration file (`config_f`). An attempt is made to load
    the .yaml file from the filesystem; if it is not found, an attempt is made
    to load the .yaml file as a packaged resource from `convertxyz:configs`.
    In the event that both attempts fail, a `FileNotFoundError` is raised.

    Args:
        config_f (Union[str, Path]): Path to a .yaml configuration file.

    Raises:
        FileNotFoundError: If the .yaml configuration file is not found.
        ValueError: If the .yaml configuration file can't be parsed.

    Returns:
        dict: Parsed .yaml configuration file as a dictionary.
    """

    config_f = Path(config_f)

    if config_f.is_file():
        with config_f.open() as f:
            return _safe_load(f, config_f)

    try:
        with resources.files(configs).joinpath(config_f.name).open('r') as f:
            return _safe_load(f, config_f)
    except FileNotFoundError:
        raise FileNotFoundError(
            f'{config_f} was not found and is not an available configuration '
            'file through convertxyz:configs'
        ) from None

def options_from_config(
    config: dict,
    **overrides
) -> ConversionOptions:
    """
    Builds conversion options from a configuration dictionary (e.g. loaded
    with `load_config()`); keyword arguments override the configuration
    values unless they are None. Options that are missing (or None) in both
    take their default values.

    Args:
        config (dict): Configuration dictionary.
        **overrides: Option/value pairs overriding the configuration.

    Raises:
        ValueError: If the configuration dictionary or the overrides contain
            an unrecognised option, or if the policy for unknown elements is
            not one of 'abort' or 'skip'.

    Returns:
        ConversionOptions: Conversion options.
    """

    if not isinstance(config, dict):
        raise ValueError(
            f'expected a dictionary of options; got {type(config).__name__}'
        )

    options = {k: v for k, v in config.items() if v is not None}
    options.update({k: v for k, v in overrides.items() if v is not None})

    unknown = set(options) - set(ConversionOptions._fields)
    if unknown:
        raise ValueError(
            f'unrecognised option(s): {", ".join(sorted(unknown))}'
        )

    if options.get('output_directory') is not None:
        options['output_directory'] = Path(options['output_directory'])

    # a cell size given in .yaml format as a list, e.g. [10, 10, 10]
    if isinstance(options.get('cell_size'), (list, tuple)):
        options['cell_size'] = ','.join(str(v) for v in options['cell_size'])

    if options.get('thermal_vibration') is not None:
        options['thermal_vibration'] = float(options['thermal_vibration'])

    if options.get('lookup_errors', 'abort') not in LOOKUP_ERROR_POLICIES:
        raise ValueError(
            f'lookup_errors should be one of {LOOKUP_ERROR_POLICIES}; got '
            f'{options["lookup_errors"]!r}'
        )

    return ConversionOptions(**options)

def _safe_load(
    f: TextIO,
    config_f: Path
) -> dict:

    try:
        return yaml.safe_load(f) or {}
    except yaml.YAMLError as err:
        raise ValueError(
            f'{config_f} is not a valid .yaml configuration file: {err}'
        ) from None
