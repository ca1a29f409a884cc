# -*- coding: utf-8 -*-
"""
Conversion of SEISAN files into Mini-SEED.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import contextlib
import logging
import sys
import warnings

from seisan2mseed.core.config import ConversionConfig
from seisan2mseed.core.trace import TraceGroup
from seisan2mseed.core.util.types import Seisan2MSEEDReadingError
from seisan2mseed.io.mseed import MSEEDPackingError
from seisan2mseed.io.mseed.packer import MSEEDPacker
from seisan2mseed.io.seisan import SampleCountMismatchWarning
from seisan2mseed.io.seisan.core import read_seisan_blocks


logger = logging.getLogger(__name__)


class PackTotals(object):
    """
    Running totals of packed traces, samples and records.

    >>> totals = PackTotals()
    >>> totals.add(3, 1000)
    >>> print(totals)
    Packed 1 trace(s) of 1000 samples into 3 records
    """
    def __init__(self, traces=0, samples=0, records=0):
        self.traces = traces
        self.samples = samples
        self.records = records

    def __eq__(self, other):
        if not isinstance(other, PackTotals):
            return False
        return (self.traces, self.samples, self.records) == \
            (other.traces, other.samples, other.records)

    def __repr__(self):
        return "PackTotals(traces=%d, samples=%d, records=%d)" % (
            self.traces, self.samples, self.records)

    def __str__(self):
        return "Packed %d trace(s) of %d samples into %d records" % (
            self.traces, self.samples, self.records)

    def add(self, records, samples):
        """
        Adds the result of packing a single trace, a trace without records
        is not counted.
        """
        if not records:
            return
        self.traces += 1
        self.records += records
        self.samples += samples


def default_output_filename(filename):
    """
    Name of the output file for an input file if none is given.

    >>> default_output_filename('2001-01-13-1742-24S.KONO__004')
    '2001-01-13-1742-24S.KONO__004.mseed'
    """
    return str(filename) + '.mseed'


@contextlib.contextmanager
def open_output(filename):
    """
    Opens an output file for writing, ``'-'`` is standard output which is
    not closed afterwards.
    """
    if filename == '-':
        yield sys.stdout.buffer
        sys.stdout.buffer.flush()
        return
    with open(filename, 'wb') as fh:
        yield fh


class LazyOutputFile(object):
    """
    Output file which is only created on the first write.

    Input files without any packable data therefore leave no empty output
    file behind.
    """
    def __init__(self, filename):
        self.filename = filename
        self.written = False
        self._fh = None

    def write(self, data):
        if self._fh is None:
            self._fh = open(self.filename, 'wb')
        self.written = True
        return self._fh.write(data)

    def close(self):
        if self._fh is not None:
            self._fh.close()
            self._fh = None


class Converter(object):
    """
    Drives the conversion of SEISAN files into Mini-SEED.

    Every decoded channel block is added to a
    :class:`~seisan2mseed.core.trace.TraceGroup`. Unless ``buffer_all`` is
    set in the configuration all pending traces are packed right after each
    block, otherwise packing is deferred until :meth:`finish`.

    :type config: :class:`~seisan2mseed.core.config.ConversionConfig`,
        optional
    :param config: Settings of the run.
    :type packer: :class:`~seisan2mseed.io.mseed.packer.MSEEDPacker`,
        optional
    :param packer: Packer used for all input files. If not given the packer
        is created by :meth:`convert` for the configured output.
    """
    def __init__(self, config=None, packer=None):
        if config is None:
            config = ConversionConfig()
        elif not isinstance(config, ConversionConfig):
            config = ConversionConfig(config)
        config.validate(has_output=packer is not None)
        self.config = config
        self.packer = packer
        self.traces = TraceGroup()
        self.totals = PackTotals()

    def convert(self, filenames):
        """
        Converts all given SEISAN files and returns the pack totals.

        Errors in single input files are logged and the conversion continues
        with the next file.

        :type filenames: list of str
        :rtype: :class:`PackTotals`
        """
        if self.packer is not None:
            self._convert_files(filenames)
        elif self.config.output:
            with open_output(self.config.output) as fh:
                self._convert_files(filenames, fh)
        else:
            for filename in filenames:
                output = default_output_filename(filename)
                with contextlib.closing(LazyOutputFile(output)) as fh:
                    self._convert_files([filename], fh)
                if not fh.written:
                    logger.info("Nothing packed from %s, no output written",
                                filename)
        return self.totals

    def _convert_files(self, filenames, fh=None):
        if fh is not None:
            self.packer = MSEEDPacker(fh, **self.config.packing_options())
        try:
            for filename in filenames:
                self.convert_file(filename)
            self.finish()
        finally:
            if fh is not None:
                self.packer = None

    def convert_file(self, filename):
        """
        Reads a single SEISAN file and adds its blocks to the trace group.

        A corrupted file is logged, all blocks read before the corruption
        are kept.

        :type filename: str
        :rtype: int
        :return: Number of decoded channel blocks.
        """
        logger.info("Reading %s", filename)
        nblocks = 0
        try:
            with open(filename, 'rb') as fh:
                for block in read_seisan_blocks(
                        fh, **self.config.reading_options()):
                    self.add_block(block, filename)
                    nblocks += 1
        except Seisan2MSEEDReadingError as e:
            logger.error("[%s] %s", filename, e)
        except OSError as e:
            logger.error("Cannot read input file: %s (%s)", filename,
                         e.strerror or e)
        return nblocks

    def add_block(self, block, filename='<stream>'):
        """
        Adds a decoded block and applies the flush policy.
        """
        header, samples = block
        if header.sample_count != len(samples):
            msg = ("[%s] Number of samples in channel header != data "
                   "section: %d != %d") % (filename, header.sample_count,
                                           len(samples))
            warnings.warn(msg, SampleCountMismatchWarning)
        self.traces.add_block(block)
        if not self.config.buffer_all:
            self.flush()
        else:
            logger.debug("Buffering %d samples in %d trace(s)",
                         self.traces.npts, len(self.traces))

    def flush(self):
        """
        Packs all pending traces and empties the trace group.
        """
        if not len(self.traces):
            return
        if self.packer is None:
            msg = "No packer available to flush traces to"
            raise MSEEDPackingError(msg)
        for trace in self.traces:
            try:
                records, samples = self.packer.pack(trace, flush=True)
            except MSEEDPackingError as e:
                logger.error("Error packing data: %s", e)
                continue
            self.totals.add(records, samples)
        self.traces.clear()

    def finish(self):
        """
        Packs everything still buffered.
        """
        self.flush()
        logger.info(str(self.totals))
