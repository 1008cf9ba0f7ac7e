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

from typing import Generator, Optional, Sequence
from .errors import HeaderError, MalformedLineError
from .records import AtomRecord, FileRecordSet

###############################################################################
################################# CONSTANTS ###################################
###############################################################################

N_HEADER_LINES = 2

STANDARD_N_FIELDS = 4
COMPUTEM_N_FIELDS = 6

# marks the end of the atom records in a computem .xyz file
COMPUTEM_SENTINEL = '-1'

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

def read_standard(
    lines: Sequence[str]
) -> FileRecordSet:
    """
    Reads the lines of a standard .xyz file into a record set; the first line
    (number of atoms) and second line (comment) are kept as the header lines,
    and each following non-blank line is expected to be `symbol x y z`.

    Args:
        lines (Sequence[str]): Lines of a standard .xyz file.

    Raises:
        HeaderError: If there are fewer than two lines.
        MalformedLineError: If a body line doesn't have four fields.

    Returns:
        FileRecordSet: Header lines and atom records.
    """

    header, body = _split_header(lines)

    atoms = tuple(
        AtomRecord(
            *_to_floats(fields[1:4]),
            element = fields[0],
            xyz_text = tuple(fields[1:4])
        ) for fields in _read_fields(body, STANDARD_N_FIELDS)
    )

    return FileRecordSet(header, atoms)

def read_computem(
    lines: Sequence[str]
) -> FileRecordSet:
    """
    Reads the lines of a computem .xyz file into a record set; the first two
    lines are kept as the header lines, and each following non-blank line up
    to the `-1` end-of-data line is expected to be
    `atomic_number x y z occupancy thermal_vibration`. Lines after the `-1`
    end-of-data line are ignored.

    Args:
        lines (Sequence[str]): Lines of a computem .xyz file.

    Raises:
        HeaderError: If there are fewer than two lines.
        MalformedLineError: If a body line doesn't have six fields.

    Returns:
        FileRecordSet: Header lines and atom records.
    """

    header, body = _split_header(lines)

    atoms = tuple(
        AtomRecord(
            *_to_floats(fields[1:4]),
            atomic_number = int(fields[0]),
            occupancy = float(fields[4]),
            thermal_vibration = float(fields[5]),
            xyz_text = tuple(fields[1:4])
        ) for fields in _read_fields(
            body, COMPUTEM_N_FIELDS, sentinel = COMPUTEM_SENTINEL
        )
    )

    return FileRecordSet(header, atoms)

def read_xyz(
    lines: Sequence[str],
    computem: bool = False
) -> FileRecordSet:
    # reads a standard (computem == False) or computem (computem == True)
    # .xyz file

    return read_computem(lines) if computem else read_standard(lines)

def _split_header(
    lines: Sequence[str]
) -> tuple:

    if len(lines) < N_HEADER_LINES:
        raise HeaderError(
            f'expected {N_HEADER_LINES} header lines but found {len(lines)}'
        )

    return tuple(lines[:N_HEADER_LINES]), lines[N_HEADER_LINES:]

def _read_fields(
    lines: Sequence[str],
    n_fields: int,
    sentinel: Optional[str] = None
) -> Generator[list, None, None]:
    """
    Yields the whitespace-separated fields of each line; blank lines are
    skipped and, if a sentinel is given, reading stops at the first line
    matching it (after stripping whitespace).

    Args:
        lines (Sequence[str]): Lines to read.
        n_fields (int): Number of fields expected on each line.
        sentinel (str, optional): End-of-data marker. Defaults to None.

    Raises:
        MalformedLineError: If a line doesn't have `n_fields` fields.

    Yields:
        list: Fields of the line.
    """

    for line in lines:
        line_ = line.strip()
        if sentinel is not None and line_ == sentinel:
            return
        if not line_:
            continue
        fields = line_.split()
        if len(fields) != n_fields:
            raise MalformedLineError(line, n_fields)
        yield fields

def _to_floats(
    fields: Sequence[str]
) -> list:

    return [float(field) for field in fields]
