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

from pathlib import Path
from typing import Iterable
from .parsers import read_xyz
from .records import FileRecordSet

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

def load_lines(xyz_f: Path) -> list:
    # loads all of the lines of a text file without line endings

    with open(xyz_f, 'r', encoding = 'utf-8-sig') as f:
        return f.read().splitlines()

def load_xyz(xyz_f: Path, computem: bool = False) -> FileRecordSet:
    # loads a record set from a standard (computem == False) or computem
    # (computem == True) .xyz file

    return read_xyz(load_lines(xyz_f), computem = computem)

def save_lines(xyz_f: Path, lines: Iterable[str]):
    # saves lines to a text file, terminating each line with a newline; the
    # parent directory is created if it doesn't exist

    xyz_f = Path(xyz_f)
    xyz_f.parent.mkdir(parents = True, exist_ok = True)

    with open(xyz_f, 'w', encoding = 'utf-8') as f:
        for line in lines:
            f.write(f'{line}\n')

    return 0

def remove_file(xyz_f: Path):
    # removes a file if it exists

    Path(xyz_f).unlink(missing_ok = True)

    return 0
