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

from enum import Enum
from typing import Any, NamedTuple
from ase.data import atomic_numbers, chemical_symbols
from .errors import ElementLookupError

###############################################################################
################################## CLASSES ####################################
###############################################################################

class LookupStatus(Enum):

    FOUND = 'found'
    UNKNOWN_SYMBOL = 'unknown chemical symbol'
    NOT_AN_ELEMENT = 'not an element'
    OUT_OF_RANGE = 'atomic number out of range'

class Lookup(NamedTuple):
    """
    The result of a periodic table lookup; `value` is the atomic number or
    chemical symbol found for `key`, or None if the lookup failed (in which
    case `status` says why).
    """

    key: Any
    value: Any
    status: LookupStatus

    @property
    def found(
        self
    ) -> bool:

        return self.status is LookupStatus.FOUND

    def unwrap(
        self
    ) -> Any:
        """
        Returns the value found for the key.

        Raises:
            ElementLookupError: If the lookup failed.

        Returns:
            Any: Atomic number or chemical symbol.
        """

        if not self.found:
            raise ElementLookupError(self)
        return self.value

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

# index 0 of `ase.data.chemical_symbols` is the dummy atom 'X'
MAX_ATOMIC_NUMBER = len(chemical_symbols) - 1

def lookup_atomic_number(
    symbol: str
) -> Lookup:
    """
    Looks up the atomic number for a chemical symbol; the lookup is
    case-sensitive, i.e. 'Si' is found but 'SI' and 'si' are not.

    Args:
        symbol (str): Chemical symbol.

    Returns:
        Lookup: Periodic table lookup; the atomic number is `Lookup.value`.
    """

    try:
        z = atomic_numbers[symbol]
    except KeyError:
        return Lookup(symbol, None, LookupStatus.UNKNOWN_SYMBOL)

    if z < 1:
        return Lookup(symbol, None, LookupStatus.NOT_AN_ELEMENT)

    return Lookup(symbol, z, LookupStatus.FOUND)

def lookup_symbol(
    z: int
) -> Lookup:
    """
    Looks up the chemical symbol for an atomic number.

    Args:
        z (int): Atomic number.

    Returns:
        Lookup: Periodic table lookup; the chemical symbol is `Lookup.value`.
    """

    if z < 1:
        return Lookup(z, None, LookupStatus.NOT_AN_ELEMENT)

    if z > MAX_ATOMIC_NUMBER:
        return Lookup(z, None, LookupStatus.OUT_OF_RANGE)

    return Lookup(z, chemical_symbols[z], LookupStatus.FOUND)
