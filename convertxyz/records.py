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
from typing import NamedTuple, Optional

###############################################################################
################################## CLASSES ####################################
###############################################################################

class AtomRecord(NamedTuple):
    """
    A single atom entry from an .xyz file.

    Standard .xyz records carry the chemical symbol (`element`); computem .xyz
    records carry the atomic number (`atomic_number`), the occupancy, and the
    RMS thermal vibration coefficient (`thermal_vibration`). The coordinate
    tokens are kept as read (`xyz_text`) so that they can be written out
    unchanged.
    """

    x: float
    y: float
    z: float
    element: Optional[str] = None
    atomic_number: Optional[int] = None
    occupancy: float = 1.0
    thermal_vibration: Optional[float] = None
    xyz_text: Optional[tuple] = None

    @property
    def position(
        self
    ) -> tuple:
        """
        Returns:
            tuple: Cartesian coordinates (x, y, z) of the atom.
        """

        return (self.x, self.y, self.z)

    @property
    def coordinate_tokens(
        self
    ) -> tuple:
        """
        Returns:
            tuple: Cartesian coordinates of the atom as strings; the tokens
                are returned as read if available, otherwise the coordinates
                are converted to strings.
        """

        if self.xyz_text is not None:
            return tuple(self.xyz_text)
        return tuple(str(v) for v in self.position)

class FileRecordSet(NamedTuple):
    """
    The parsed contents of one .xyz file: the two header lines
    (`comment_lines`) and the atom records (`atoms`) in input order.
    """

    comment_lines: tuple
    atoms: tuple

    @property
    def n_atoms(
        self
    ) -> int:

        return len(self.atoms)

class CellBounds(NamedTuple):
    """
    Unit cell dimensions for a computem .xyz file; the cell is anchored at the
    origin, so each dimension is the maximum coordinate along that axis. If
    the dimensions were supplied by the user, the literal text (`text`) is
    kept and written out in place of the numbers.
    """

    max_x: float
    max_y: float
    max_z: float
    text: Optional[tuple] = None

    def tokens(
        self
    ) -> tuple:
        """
        Returns:
            tuple: Cell dimensions as strings.
        """

        if self.text is not None:
            return tuple(self.text)
        return tuple(str(v) for v in (self.max_x, self.max_y, self.max_z))

class ConversionOptions(NamedTuple):
    """
    Options controlling a conversion run.

    Attributes:
        reverse (bool): If True, convert computem .xyz to standard .xyz;
            otherwise convert standard .xyz to computem .xyz.
        output_directory (Path): Directory for all output files; if None,
            output files are placed beside the input files.
        verbose (bool): If True, echo every converted atom line.
        thermal_vibration (float): RMS thermal vibration coefficient in
            Angstroem; forward conversion only.
        cell_size (str): Unit cell dimensions as three comma-separated numbers
            (e.g. '10,10,10'); forward conversion only. If None, the cell is
            sized from the atomic coordinates.
        lookup_errors (str): 'abort' to stop the run on an unknown element,
            or 'skip' to skip the file containing it.
        progress (bool): If True, show a progress bar over the input files.
    """

    reverse: bool = False
    output_directory: Optional[Path] = None
    verbose: bool = False
    thermal_vibration: float = 0.08
    cell_size: Optional[str] = None
    lookup_errors: str = 'abort'
    progress: bool = True

    @property
    def mode(
        self
    ) -> str:

        return 'reverse' if self.reverse else 'forward'
