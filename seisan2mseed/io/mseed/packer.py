# -*- coding: utf-8 -*-
"""
Mini-SEED packer writing traces to an open output file.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import io
import logging

import numpy as np
from obspy import Stream, Trace
from obspy.core.compatibility import from_buffer

from seisan2mseed.core.config import BYTEORDERS, ENCODINGS
from seisan2mseed.core.util.base import VALID_RECORD_LENGTHS
from seisan2mseed.core.util.types import ConfigurationError
from seisan2mseed.io.mseed import MSEEDPackingError


logger = logging.getLogger(__name__)

# offsets within the fixed section of data header
NUMBER_OF_SAMPLES_OFFSET = 30
DATA_QUALITY_FLAGS_OFFSET = 38
# [Bit 7] Time tag is questionable
TIME_TAG_QUESTIONABLE = 0x80

INT16_MIN = -2 ** 15
INT16_MAX = 2 ** 15 - 1


class MSEEDPacker(object):
    """
    Packs traces into Mini-SEED records and writes them to a file.

    :type fh: file
    :param fh: File-like object opened for writing in binary mode.
    :type record_length: int, optional
    :param record_length: Record length in bytes, a power of two between 256
        and 1048576.
    :type encoding: int, optional
    :param encoding: Data encoding, ``1`` (INT16), ``3`` (INT32), ``10``
        (STEIM1) or ``11`` (STEIM2).
    :type byteorder: int, optional
    :param byteorder: ``1`` for big endian, ``0`` for little endian records.

    .. rubric:: Example

    >>> import io
    >>> import numpy as np
    >>> from obspy import Trace
    >>> buf = io.BytesIO()
    >>> packer = MSEEDPacker(buf, record_length=512)
    >>> tr = Trace(data=np.arange(1000, dtype=np.int32))
    >>> packer.pack(tr)  # doctest: +SKIP
    (2, 1000)
    """
    def __init__(self, fh, record_length=4096, encoding=11, byteorder=1):
        if record_length not in VALID_RECORD_LENGTHS:
            msg = "Invalid record length %s" % record_length
            raise ConfigurationError(msg)
        if encoding not in ENCODINGS:
            msg = "Unsupported encoding %s" % encoding
            raise ConfigurationError(msg)
        if byteorder not in BYTEORDERS:
            msg = "Invalid byte order %s" % byteorder
            raise ConfigurationError(msg)
        self.fh = fh
        self.record_length = record_length
        self.encoding = encoding
        self.byteorder = byteorder

    def _prepare_data(self, trace):
        data = trace.data
        if self.encoding == 1:
            if data.size and (data.min() < INT16_MIN or
                              data.max() > INT16_MAX):
                msg = ("Samples of %s exceed the range of 16 bit integers, "
                       "cannot use encoding INT16") % trace.id
                raise MSEEDPackingError(msg)
            return data.astype(np.int16)
        return np.require(data, np.int32)

    def _count_samples(self, records):
        dtype = self.byteorder and '>u2' or '<u2'
        samples = 0
        for start in range(0, len(records), self.record_length):
            offset = start + NUMBER_OF_SAMPLES_OFFSET
            samples += int(from_buffer(records[offset:offset + 2],
                                       dtype=dtype)[0])
        return samples

    def pack(self, trace, flush=True):
        """
        Packs a trace into Mini-SEED records and writes them.

        The time tag questionable flag of all records is set if the
        ``stats.seisan.time_tag_questionable`` attribute of the trace is set.

        :type trace: :class:`~obspy.core.trace.Trace`
        :param trace: Trace to pack.
        :type flush: bool, optional
        :param flush: If ``False`` only completely filled records are
            written.
        :rtype: tuple(int, int)
        :return: Number of records and number of samples written.
        """
        if not trace.stats.npts:
            return 0, 0
        data = self._prepare_data(trace)
        stats = trace.stats.copy()
        stats.pop('seisan', None)
        buf = io.BytesIO()
        try:
            Stream([Trace(data=data, header=stats)]).write(
                buf, format='MSEED', reclen=self.record_length,
                encoding=ENCODINGS[self.encoding],
                byteorder=self.byteorder, flush=flush)
        except Exception as e:
            msg = "Error packing data of %s: %s" % (trace.id, e)
            raise MSEEDPackingError(msg)
        records = bytearray(buf.getvalue())
        seisan = trace.stats.get('seisan', {})
        if seisan.get('time_tag_questionable', False):
            for start in range(0, len(records), self.record_length):
                records[start + DATA_QUALITY_FLAGS_OFFSET] |= \
                    TIME_TAG_QUESTIONABLE
        nrecords = len(records) // self.record_length
        nsamples = self._count_samples(records)
        self.fh.write(records)
        logger.debug("Packed %d samples of %s into %d records", nsamples,
                     trace.id, nrecords)
        return nrecords, nsamples
