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

from typing import Iterable

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

def format_dict(
    dict_: dict,
    key_width: int = 25,
    val_width: int = 25
) -> list:
    """
    Formats a table of `key`:`val` pairs contained in a dictionary; values
    that are lists or tuples are written as comma-separated strings.

    Args:
        dict_ (dict): Dictionary.
        key_width (int, optional): Width of the column containing dictionary
            keys (`key`). Defaults to 25.
        val_width (int, optional): Width of the column containing dictionary
            values (`val`). Defaults to 25.

    Returns:
        list: Lines of the formatted table, including the rules above and
            below the `key`:`val` pairs.
    """

    rule = '-' * (key_width + val_width)

    lines = [rule]
    for key, val in dict_.items():
        if isinstance(val, (list, tuple)):
            val = _iterable_to_str(val)
        lines.append(f'{key:<{key_width}}{str(val):>{val_width}}')
    lines.append(rule)

    return lines

def _iterable_to_str(
    iterable: Iterable
) -> str:
    """
    Converts an iterable (e.g., list, tuple, etc.) to a comma-separated string.

    Args:
        iterable (Iterable): Iterable to convert to a comma-separated string.

    Returns:
        str: Comma-separated string with each of the items in the iterable.
    """

    return ', '.join(str(item) for item in iterable)
