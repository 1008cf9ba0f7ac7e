import pytest
from pathlib import Path


STANDARD_XYZ = """3
silicon oxycarbide fragment
Si 0.0 0.0 0.0
O 5.0 1.0 1.1

C 2.5 3.2 0.5
"""

COMPUTEM_XYZ = """silicon oxycarbide fragment
  5.0   3.2   1.1
14   0.0   0.0   0.0   1   0.08

8   5.0   1.0   1.1   1   0.08
6   2.5   3.2   0.5   1   0.08
-1
79   9.0   9.0   9.0   1   0.08
"""


def write_xyz(path: Path, text: str) -> Path:

    path.write_text(text)
    return path


@pytest.fixture
def standard_f(tmp_path):

    return write_xyz(tmp_path / 'fragment.xyz', STANDARD_XYZ)


@pytest.fixture
def computem_f(tmp_path):

    return write_xyz(tmp_path / 'fragment.xyz', COMPUTEM_XYZ)
