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

import numpy as np
from typing import Optional, Union
from .templates import BaseTransformer
from .periodic import lookup_atomic_number, lookup_symbol
from .records import AtomRecord, CellBounds, ConversionOptions, FileRecordSet

###############################################################################
################################## CLASSES ####################################
###############################################################################

class ForwardTransformer(BaseTransformer):
    """
    Transforms standard .xyz records into computem .xyz records: chemical
    symbols are replaced with atomic numbers, every atom is given an occupancy
    of 1 and the same RMS thermal vibration coefficient, and the unit cell is
    sized to hold all of the atoms (unless the cell size is set explicitly).
    """

    def __init__(
        self,
        thermal_vibration: float = 0.08,
        cell_size: Optional[str] = None
    ):
        """
        Args:
            thermal_vibration (float, optional): RMS thermal vibration
                coefficient in Angstroem; generally, 0.05-0.1.
                Defaults to 0.08.
            cell_size (str, optional): Unit cell dimensions as three
                comma-separated numbers (e.g. '10,10,10'); if None, or if the
                dimensions can't be parsed, the unit cell is sized from the
                atomic coordinates. Defaults to None.
        """

        self.thermal_vibration = thermal_vibration
        self.cell_size = cell_size
        self.cell_override = parse_cell_size(cell_size)

    def transform_atom(
        self,
        atom: AtomRecord
    ) -> AtomRecord:

        return atom._replace(
            element = None,
            atomic_number = lookup_atomic_number(atom.element).unwrap(),
            occupancy = 1.0,
            thermal_vibration = self.thermal_vibration
        )

    def cell_bounds(
        self,
        records: FileRecordSet
    ) -> CellBounds:
        """
        Returns the unit cell dimensions for a record set; these are the
        dimensions set explicitly on initialisation if available, otherwise
        they are computed from the atomic coordinates.

        Args:
            records (FileRecordSet): Record set.

        Returns:
            CellBounds: Unit cell dimensions.
        """

        if self.cell_override is not None:
            return self.cell_override

        return compute_cell_bounds(records)

    @property
    def cell_size_invalid(
        self
    ) -> bool:
        # True if a cell size was set explicitly but couldn't be parsed

        return self.cell_size is not None and self.cell_override is None

    @property
    def source_format(
        self
    ) -> str:

        return 'standard'

    @property
    def target_format(
        self
    ) -> str:

        return 'computem'

class ReverseTransformer(BaseTransformer):
    """
    Transforms computem .xyz records into standard .xyz records: atomic
    numbers are replaced with chemical symbols, and the occupancies and RMS
    thermal vibration coefficients are dropped.
    """

    def transform_atom(
        self,
        atom: AtomRecord
    ) -> AtomRecord:

        return AtomRecord(
            atom.x,
            atom.y,
            atom.z,
            element = lookup_symbol(atom.atomic_number).unwrap(),
            xyz_text = atom.xyz_text
        )

    @property
    def source_format(
        self
    ) -> str:

        return 'computem'

    @property
    def target_format(
        self
    ) -> str:

        return 'standard'

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

def get_transformer(
    options: ConversionOptions
) -> Union[ForwardTransformer, ReverseTransformer]:
    """
    Returns the transformer for the direction of conversion set in the
    conversion options.

    Args:
        options (ConversionOptions): Conversion options.

    Returns:
        Union[ForwardTransformer, ReverseTransformer]: Transformer.
    """

    if options.reverse:
        return ReverseTransformer()

    return ForwardTransformer(
        thermal_vibration = options.thermal_vibration,
        cell_size = options.cell_size
    )

def compute_cell_bounds(
    records: FileRecordSet
) -> CellBounds:
    """
    Computes the unit cell dimensions for a record set; the unit cell is
    anchored at the origin, so the dimensions are the maximum x, y, and z
    coordinates. An empty record set has zero-sized cell dimensions.

    Args:
        records (FileRecordSet): Record set.

    Returns:
        CellBounds: Unit cell dimensions.
    """

    if not records.atoms:
        return CellBounds(0.0, 0.0, 0.0)

    xyz = np.sort(
        np.array([atom.position for atom in records.atoms], dtype = float),
        axis = 0
    )

    return CellBounds(*(float(v) for v in xyz[-1]))

def parse_cell_size(
    cell_size: Optional[str]
) -> Optional[CellBounds]:
    """
    Parses unit cell dimensions supplied as three comma-separated numbers
    (e.g. '10,10,10'); the literal text of each dimension is kept so it can
    be written out as supplied. The dimensions are written to the unit cell
    line as three space-separated fields (e.g. `  10   10   10`), not as the
    comma-separated string, so that the output remains a valid computem .xyz
    file.

    Args:
        cell_size (str, optional): Unit cell dimensions.

    Returns:
        Optional[CellBounds]: Unit cell dimensions, or None if `cell_size` is
            None or doesn't contain exactly three numbers.
    """

    if cell_size is None:
        return None

    text = tuple(v.strip() for v in str(cell_size).split(','))
    if len(text) != 3:
        return None

    try:
        return CellBounds(*(float(v) for v in text), text = text)
    except ValueError:
        return None
