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

from abc import ABC, abstractmethod
from .records import AtomRecord, FileRecordSet

###############################################################################
################################## CLASSES ####################################
###############################################################################

class BaseTransformer(ABC):
    """
    An abstract base class for transformers used in, e.g., `core.py` to
    transform record sets read from one .xyz format into record sets ready to
    be written in the other .xyz format.

    This class defines a template for compatible transformers; subclasses are
    expected to implement the `.transform_atom()` method to carry out the
    atom -> atom transformation (as the exact transformation will be
    format-specific) and the `.source_format` and `.target_format` properties
    to name the .xyz formats read and written.
    """

    def __init__(self):

        pass

    def transform(
        self,
        records: FileRecordSet
    ) -> FileRecordSet:
        """
        Transforms a record set atom-by-atom; the header lines and the order
        of the atoms are preserved.

        Args:
            records (FileRecordSet): Record set to transform.

        Returns:
            FileRecordSet: Transformed record set.
        """

        return FileRecordSet(
            records.comment_lines,
            tuple(self.transform_atom(atom) for atom in records.atoms)
        )

    @abstractmethod
    def transform_atom(
        self,
        atom: AtomRecord
    ) -> AtomRecord:
        """
        Transforms an atom record; the exact transformation will be
        format-specific.

        Args:
            atom (AtomRecord): Atom record to transform.

        Returns:
            AtomRecord: Transformed atom record.
        """

        pass

    @property
    @abstractmethod
    def source_format(
        self
    ) -> str:
        """
        Returns:
            str: Name of the .xyz format read (e.g. 'standard').
        """

        pass

    @property
    @abstractmethod
    def target_format(
        self
    ) -> str:
        """
        Returns:
            str: Name of the .xyz format written (e.g. 'computem').
        """

        pass
