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
################################## CLASSES ####################################
###############################################################################

class ConversionError(Exception):
    """
    Base class for errors raised while converting an .xyz file.
    """

class FormatError(ConversionError, ValueError):
    """
    Raised when an .xyz file does not have the layout expected for its format;
    format errors only affect the file in which they are found.
    """

class HeaderError(FormatError):
    """
    Raised when an .xyz file is missing one or both of its header lines.
    """

class MalformedLineError(FormatError):
    """
    Raised when a line in the body of an .xyz file does not split into the
    number of fields expected for its format.

    Attributes:
        line (str): The offending line.
        n_fields (int): Number of fields expected.
    """

    def __init__(
        self,
        line: str,
        n_fields: int
    ):

        self.line = line
        self.n_fields = n_fields
        super().__init__(
            f'file format is wrong; expected {n_fields} fields but can\'t '
            f'process this line: {line}'
        )

class ElementLookupError(ConversionError, LookupError):
    """
    Raised when a chemical symbol or atomic number can't be found in the
    periodic table.

    Attributes:
        lookup (Lookup): The failed periodic table lookup.
    """

    def __init__(
        self,
        lookup
    ):

        self.lookup = lookup
        super().__init__(
            f'{lookup.status.value}: {lookup.key!r}'
        )
