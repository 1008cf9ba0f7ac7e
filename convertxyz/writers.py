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
from typing import Optional
from .parsers import COMPUTEM_SENTINEL
from .records import AtomRecord, CellBounds, FileRecordSet

###############################################################################
################################# CONSTANTS ###################################
###############################################################################

FIELD_SEP = '   '
COMMENT_SEP = ', '
CELL_INDENT = '  '

STANDARD_SUFFIX = '-std.xyz'
COMPUTEM_SUFFIX = '-computem.xyz'

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

def format_computem_atom(
    atom: AtomRecord
) -> str:
    # formats an atom record as a line of a computem .xyz file; the occupancy
    # is always written as 1

    return FIELD_SEP.join([
        str(atom.atomic_number),
        *atom.coordinate_tokens,
        '1',
        str(atom.thermal_vibration)
    ])

def format_standard_atom(
    atom: AtomRecord
) -> str:
    # formats an atom record as a line of a standard .xyz file

    return FIELD_SEP.join([atom.element, *atom.coordinate_tokens])

def format_cell(
    cell: CellBounds
) -> str:
    # formats the unit cell dimensions as the second line of a computem .xyz
    # file

    return CELL_INDENT + FIELD_SEP.join(cell.tokens())

def render_computem(
    records: FileRecordSet,
    cell: CellBounds
) -> list:
    """
    Renders a (transformed) record set as the lines of a computem .xyz file:
    the header lines joined into a single comment line, the unit cell
    dimensions, one line per atom, and the `-1` end-of-data line.

    Args:
        records (FileRecordSet): Record set with atomic numbers.
        cell (CellBounds): Unit cell dimensions.

    Returns:
        list: Lines of the computem .xyz file.
    """

    return [
        COMMENT_SEP.join(records.comment_lines),
        format_cell(cell),
        *(format_computem_atom(atom) for atom in records.atoms),
        COMPUTEM_SENTINEL
    ]

def render_standard(
    records: FileRecordSet
) -> list:
    """
    Renders a (transformed) record set as the lines of a standard .xyz file:
    the number of atoms, the first header line as the comment line, and one
    line per atom.

    Args:
        records (FileRecordSet): Record set with chemical symbols.

    Returns:
        list: Lines of the standard .xyz file.
    """

    return [
        str(records.n_atoms),
        records.comment_lines[0],
        *(format_standard_atom(atom) for atom in records.atoms)
    ]

def output_path(
    input_f: Path,
    reverse: bool = False,
    output_dir: Optional[Path] = None
) -> Path:
    """
    Returns the output file path for an input file; the output file is named
    `<stem>-computem.xyz` (forward conversion) or `<stem>-std.xyz` (reverse
    conversion) and placed in the output directory, or beside the input file
    if no output directory is given.

    Args:
        input_f (Path): Path to the input file.
        reverse (bool, optional): If True, name the output file for reverse
            conversion. Defaults to False.
        output_dir (Path, optional): Path to the output directory.
            Defaults to None.

    Returns:
        Path: Path to the output file.
    """

    input_f = Path(input_f)

    suffix = STANDARD_SUFFIX if reverse else COMPUTEM_SUFFIX
    parent = Path(output_dir) if output_dir else input_f.parent

    return parent / (input_f.stem + suffix)
