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

from tqdm import tqdm

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

# messages are written with `tqdm.write` so that they don't break up the
# progress bar over the input files

def _write(tag: str, msg: str):

    tqdm.write(f'[{tag}] {msg}')

def info(msg: str):

    _write('INFO', msg)

def warning(msg: str):

    _write('WARNING', msg)

def error(msg: str):

    _write('ERROR', msg)

def verbose(msg: str):

    _write('VERBOSE', msg)
