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

__version__ = '1.0.0'

from .records import AtomRecord, FileRecordSet, CellBounds, ConversionOptions
from .errors import (
    ConversionError,
    FormatError,
    HeaderError,
    MalformedLineError,
    ElementLookupError
)
from .parsers import read_standard, read_computem, read_xyz
from .transformers import ForwardTransformer, ReverseTransformer
from .writers import render_standard, render_computem, output_path
from .config import load_config, options_from_config
from .core import convert, convert_file, BatchResult, FileResult, FileStatus
