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
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Union
from tqdm import tqdm

from . import __version__
from . import console
from .errors import ElementLookupError, FormatError
from .io import load_xyz, remove_file, save_lines
from .records import ConversionOptions
from .templates import BaseTransformer
from .transformers import get_transformer
from .utils import format_dict
from .writers import output_path, render_computem, render_standard

###############################################################################
################################## CLASSES ####################################
###############################################################################

class FileStatus(Enum):

    CONVERTED = 'converted'
    SKIPPED = 'skipped'

class FileResult(NamedTuple):
    """
    The outcome of converting a single input file; skipped files have no
    output file and carry the reason they were skipped (`message`).
    """

    input_f: Path
    output_f: Optional[Path]
    status: FileStatus
    n_atoms: int = 0
    message: Optional[str] = None

    @property
    def ok(
        self
    ) -> bool:

        return self.status is FileStatus.CONVERTED

class BatchResult(NamedTuple):
    """
    The outcome of converting a batch of input files; `fatal` carries the
    reason the batch was stopped early, if it was.
    """

    results: tuple = ()
    fatal: Optional[str] = None

    @property
    def ok(
        self
    ) -> bool:

        return self.fatal is None and all(r.ok for r in self.results)

    @property
    def converted(
        self
    ) -> list:

        return [r for r in self.results if r.ok]

    @property
    def skipped(
        self
    ) -> list:

        return [r for r in self.results if not r.ok]

    def add(
        self,
        result: FileResult
    ) -> 'BatchResult':

        return self._replace(results = self.results + (result,))

    def abort(
        self,
        reason: str
    ) -> 'BatchResult':

        return self._replace(fatal = reason)

###############################################################################
################################## FUNCTIONS ##################################
###############################################################################

def convert_file(
    input_f: Union[str, Path],
    options: ConversionOptions = ConversionOptions(),
    transformer: Optional[BaseTransformer] = None
) -> FileResult:
    """
    Converts a single .xyz file from standard to computem format (forward
    conversion) or from computem to standard format (reverse conversion) and
    writes the converted file to disk. Any existing output file is removed
    before the input file is read.

    Format errors (a missing header line or a line with the wrong number of
    fields) only affect this file: the file is skipped and no output file is
    written. Unknown elements are handled in the same way if
    `options.lookup_errors` is 'skip'; otherwise, they are raised.

    Args:
        input_f (Union[str, Path]): Path to the input .xyz file.
        options (ConversionOptions, optional): Conversion options.
            Defaults to ConversionOptions().
        transformer (BaseTransformer, optional): Transformer to use; if None,
            the transformer is chosen according to the conversion options.
            Defaults to None.

    Raises:
        OSError: If the input file can't be read or the output file can't be
            written.
        ValueError: If a numeric field can't be read as a number.
        ElementLookupError: If an element can't be found in the periodic
            table and `options.lookup_errors` is 'abort'.

    Returns:
        FileResult: Outcome of the conversion.
    """

    input_f = Path(input_f)

    if transformer is None:
        transformer = get_transformer(options)

    console.info(f'Processing file: {input_f}')

    output_f = output_path(
        input_f,
        reverse = options.reverse,
        output_dir = options.output_directory
    )
    remove_file(output_f)

    try:
        records = load_xyz(input_f, computem = options.reverse)
        records = transformer.transform(records)
    except FormatError as err:
        return _skip(input_f, err)
    except ElementLookupError as err:
        if options.lookup_errors != 'skip':
            raise
        return _skip(input_f, err)

    if options.reverse:
        lines = render_standard(records)
        atom_lines = lines[2:]
    else:
        lines = render_computem(records, transformer.cell_bounds(records))
        atom_lines = lines[2:-1]

    if options.verbose:
        for line in atom_lines:
            console.verbose(line)

    console.info(f'Writing file to: {output_f}')
    save_lines(output_f, lines)

    return FileResult(
        input_f, output_f, FileStatus.CONVERTED, n_atoms = records.n_atoms
    )

def convert(
    input_fs: Iterable[Union[str, Path]],
    options: ConversionOptions = ConversionOptions()
) -> BatchResult:
    """
    Converts a batch of .xyz files one after another in the order given; see
    `convert_file()`. A file that is skipped doesn't stop the batch, but any
    other error does: the error is reported and no further files are
    converted. The batch always finishes with a summary line stating whether
    any errors occurred.

    Args:
        input_fs (Iterable[Union[str, Path]]): Paths to the input .xyz files.
        options (ConversionOptions, optional): Conversion options.
            Defaults to ConversionOptions().

    Returns:
        BatchResult: Outcome of the conversion for each input file.
    """

    input_fs = [Path(f) for f in input_fs]

    transformer = get_transformer(options)

    console.info(
        f'ConvertXYZ {__version__} operating in the {options.mode} mode, '
        f'converting from {transformer.source_format} to '
        f'{transformer.target_format} xyz.'
    )

    if options.verbose:
        for line in format_dict(options._asdict()):
            console.verbose(line)

    if not options.reverse and transformer.cell_size_invalid:
        console.warning(
            f'cell size {options.cell_size!r} is not three comma-separated '
            'numbers; the unit cell will be sized from the atomic coordinates'
        )

    batch = BatchResult()

    spooler = tqdm(
        input_fs, unit = 'file', disable = not options.progress, leave = False
    )
    for input_f in spooler:
        try:
            result = convert_file(
                input_f, options = options, transformer = transformer
            )
        except (OSError, ValueError, LookupError) as err:
            console.error(str(err))
            batch = batch.abort(str(err))
            break
        batch = batch.add(result)
    spooler.close()

    console.info('All tasks completed.')
    if batch.ok:
        console.info('No error detected.')
    else:
        console.error('There were error(s) during the conversion.')

    return batch

def _skip(
    input_f: Path,
    err: Exception
) -> FileResult:

    console.error(str(err))
    console.error('This file is skipped.')

    return FileResult(input_f, None, FileStatus.SKIPPED, message = str(err))
