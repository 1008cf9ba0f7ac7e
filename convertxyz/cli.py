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

import sys
import datetime
import convertxyz as cx
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Optional, Sequence
from . import console
from .config import DEFAULT_CONFIG, load_config, options_from_config

###############################################################################
############################## ARGUMENT PARSING ###############################
###############################################################################

def parse_args(argv: Optional[Sequence[str]] = None) -> Namespace:
    """
    Parses command line arguments for `convertxyz:cli.py`.

    Args:
        argv (Sequence[str], optional): Command line arguments; if None, the
            arguments are taken from `sys.argv`. Defaults to None.

    Returns:
        argparse.Namespace: Parsed command line arguments as an
        argparse.Namespace object that holds the arguments as attributes.
    """

    p = ArgumentParser(
        description = 'convert between standard and computem .xyz files'
    )

    p.add_argument(
        '--version', action = 'version', version = cx.__version__
    )
    p.add_argument(
        'input_fs', type = Path, nargs = '+',
        help = 'one or more .xyz file(s) to convert'
    )
    p.add_argument(
        '-r', '--reverse', action = 'store_true', default = None,
        help = ('reverse processing: computem .xyz to standard .xyz; the '
            'default is forward processing (standard .xyz to computem .xyz)')
    )
    p.add_argument(
        '-o', '--outdir', type = Path, default = None,
        help = ('output directory (for all files processed); by default, '
            'output files are placed in the same directory as the input files')
    )
    p.add_argument(
        '-v', '--verbose', action = 'store_true', default = None,
        help = 'print every line of the converted .xyz records to the screen'
    )
    p.add_argument(
        '-t', '--thermal', type = float, default = None,
        help = ('RMS thermal vibration coefficient in Angstroem (generally, '
            '0.05-0.1); only used in forward processing; defaults to 0.08')
    )
    p.add_argument(
        '-s', '--cell', type = str, default = None,
        help = ('unit cell dimensions as three comma-separated numbers (e.g. '
            '\'10,10,10\'); only used in forward processing; by default, the '
            'unit cell is sized from the atomic coordinates')
    )
    p.add_argument(
        '-c', '--config', type = Path, default = None,
        help = 'path to a .yaml configurational file'
    )
    p.add_argument(
        '--skip-unknown-elements', action = 'store_true',
        help = ('skip files containing unknown elements instead of stopping '
            'the run')
    )
    p.add_argument(
        '--no-progress', action = 'store_true',
        help = 'don\'t show a progress bar over the input files'
    )

    args = p.parse_args(argv)

    return args

###############################################################################
################################ MAIN FUNCTION ################################
###############################################################################

def main(argv: Optional[Sequence[str]] = None) -> int:

    args = parse_args(argv)

    datetime_ = datetime.datetime.now()
    console.info(f'launched @ {datetime_.strftime("%H:%M:%S (%Y-%m-%d)")}')

    try:
        config = load_config(
            args.config if args.config is not None else DEFAULT_CONFIG
        )
        options = options_from_config(
            config,
            reverse = args.reverse,
            output_directory = args.outdir,
            verbose = args.verbose,
            thermal_vibration = args.thermal,
            cell_size = args.cell,
            lookup_errors = 'skip' if args.skip_unknown_elements else None,
            progress = False if args.no_progress else None
        )
    except (OSError, ValueError, TypeError) as err:
        console.error(str(err))
        return 1

    batch = cx.convert(args.input_fs, options = options)

    datetime_ = datetime.datetime.now()
    console.info(f'finished @ {datetime_.strftime("%H:%M:%S (%Y-%m-%d)")}')

    return 0 if batch.ok else 1

################################################################################
############################## PROGRAM STARTS HERE #############################
################################################################################

if __name__ == '__main__':
    sys.exit(main())

################################################################################
############################### PROGRAM ENDS HERE ##############################
################################################################################
