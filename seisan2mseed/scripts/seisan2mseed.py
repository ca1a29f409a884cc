#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Convert SEISAN waveform data to Mini-SEED.

Both the SEISAN 7.0 and later binary format (either byte order) and the
format written on the PC by SEISAN 6.0 and earlier are supported. Input
files given as ``@listfile`` are read from a list file containing one file
name per line.

Supported Mini-SEED encoding formats:

*  1: 16-bit integers (only works if samples can be represented in 16-bits)
*  3: 32-bit integers
* 10: Steim 1 compression
* 11: Steim 2 compression

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging
import sys
import warnings
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from seisan2mseed import __version__
from seisan2mseed.core.config import ConversionConfig
from seisan2mseed.core.converter import Converter
from seisan2mseed.core.util.types import ConfigurationError
from seisan2mseed.io.seisan.channel import parse_channel_map


logger = logging.getLogger('seisan2mseed')

FORMAT = "%(name)s - %(levelname)s: %(message)s"


def _setup_logging(verbosity):
    """
    Sends log messages and warnings of the package to standard error.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    for name in ('seisan2mseed', 'py.warnings'):
        log = logging.getLogger(name)
        log.setLevel(level)
        log.addHandler(handler)
        # Prevent propagating to higher loggers.
        log.propagate = 0
    logging.captureWarnings(True)
    warnings.simplefilter('always')
    return handler


def _teardown_logging(handler):
    logging.captureWarnings(False)
    for name in ('seisan2mseed', 'py.warnings'):
        log = logging.getLogger(name)
        log.removeHandler(handler)
        log.setLevel(logging.NOTSET)
        log.propagate = 1


def expand_file_list(files):
    """
    Expands ``@listfile`` entries into the file names they list.

    Empty lines and lines starting with ``#`` are ignored.

    :type files: list of str
    :rtype: list of str
    """
    filenames = []
    for name in files:
        if not name.startswith('@') or len(name) == 1:
            filenames.append(name)
            continue
        with open(name[1:], 'r') as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                filenames.append(line)
    return filenames


def main(argv=None):
    parser = ArgumentParser(prog='seisan2mseed',
                            description=__doc__.strip(),
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument('-V', '--version', action='version',
                        version='%(prog)s ' + __version__)
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Be more verbose, multiple flags can be used.')
    parser.add_argument('-S', '--sample-rate-blockette', action='store_true',
                        help='Include SEED blockette 100 for very irrational '
                             'sample rates (not supported).')
    parser.add_argument('-B', '--buffer-all', action='store_true',
                        help='Buffer all input data into memory and pack '
                             'once at the end, requires -o.')
    parser.add_argument('-n', '--network', default=None,
                        help='SEED network code, default is blank.')
    parser.add_argument('-l', '--location', default=None,
                        help='SEED location code, default is derived from '
                             'the component.')
    parser.add_argument('-r', '--record-length', type=int, default=4096,
                        help='Record length in bytes for packing, '
                             'default: %(default)s.')
    parser.add_argument('-e', '--encoding', type=int, default=11,
                        help='SEED encoding format for packing, '
                             'default: %(default)s (Steim2).')
    parser.add_argument('-b', '--byteorder', type=int, default=1,
                        help='Byte order for packing, MSBF: 1 (default), '
                             'LSBF: 0.')
    parser.add_argument('-o', '--output', default=None,
                        help="Output file, '-' for standard output. Default "
                             "is the input file name with '.mseed' appended.")
    parser.add_argument('-T', '--translate', action='append', default=[],
                        metavar='COMP=CHAN',
                        help="Component-channel mapping, can be used many "
                             "times, e.g.: '-T SBIZ=SHZ -T SBIN=SHN'.")
    parser.add_argument('-Y', '--retain-future-year', action='store_true',
                        help='Keep years beyond 2050 instead of clamping '
                             'them to 2050.')
    parser.add_argument('files', nargs='+',
                        help='Files of SEISAN input data, @file for a list '
                             'file.')
    args = parser.parse_args(argv)

    handler = _setup_logging(args.verbose)
    try:
        logger.info("seisan2mseed version: %s", __version__)
        if args.sample_rate_blockette:
            logger.warning("Blockette 100 is not supported, ignoring -S")
        try:
            config = ConversionConfig(
                network=args.network, location=args.location,
                channel_map=parse_channel_map(args.translate),
                retain_future_year=args.retain_future_year,
                buffer_all=args.buffer_all,
                record_length=args.record_length, encoding=args.encoding,
                byteorder=args.byteorder, output=args.output,
                verbosity=args.verbose)
            converter = Converter(config)
            filenames = expand_file_list(args.files)
        except (ConfigurationError, ValueError, OSError) as e:
            logger.error(str(e))
            return 1
        if not filenames:
            logger.error("No input files were specified")
            return 1
        totals = converter.convert(filenames)
        print(totals, file=sys.stderr)
    finally:
        _teardown_logging(handler)
    return 0


if __name__ == "__main__":
    # It is not possible to add the code of main directly to here.
    # This script is automatically installed with name seisan2mseed by
    # setup.py to the Scripts or bin directory of your Python distribution
    # setup.py needs a function to which it's scripts can be linked.
    sys.exit(main())
