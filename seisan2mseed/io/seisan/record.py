# -*- coding: utf-8 -*-
"""
Reader for the length prefixed records of unformatted Fortran files.

Every write of the Fortran program producing a SEISAN file is preceded and
terminated by the number of bytes in the write. The trailing copy (the
"mirror") is used to detect corrupted files.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging
import os
import warnings
from collections import namedtuple

import numpy as np
from obspy.core.compatibility import from_buffer

from seisan2mseed.io.seisan import (FramingMismatchError, RecordLengthError,
                                    RecordLengthRepairWarning,
                                    TruncatedRecordError)
from seisan2mseed.io.seisan.headers import FormatVariant, LEGACY_SIGNATURE


logger = logging.getLogger(__name__)

#: A single physical record. ``offset`` is the position of the length prefix.
RawRecord = namedtuple('RawRecord', ['data', 'length', 'offset'])


class RecordReader(object):
    """
    Iterates over the physical records of an open, seekable SEISAN file.

    :type fh: file
    :param fh: File-like object opened in binary mode.
    :type variant: :class:`~seisan2mseed.io.seisan.headers.FormatVariant`
    :param variant: Record framing of the file.
    :type byteorder: :class:`~seisan2mseed.io.seisan.headers.ByteOrder`
    :param byteorder: Byte order of the length prefixes.

    The reader is exhausted at the end of the file; a corrupted record raises
    one of the :class:`~seisan2mseed.io.seisan.SeisanReadingError` subclasses
    after which no further records should be requested.
    """
    def __init__(self, fh, variant, byteorder):
        self.fh = fh
        self.variant = variant
        self.byteorder = byteorder
        if variant is FormatVariant.LEGACY_PC:
            self._dtype = np.dtype('u1')
        else:
            self._dtype = np.dtype(byteorder.char + 'i4')
        self._buffer = bytearray()
        # determine size of file
        position = fh.tell()
        fh.seek(0, os.SEEK_END)
        self._size = fh.tell()
        fh.seek(position, os.SEEK_SET)
        # version <= 6 starts with first byte K
        if variant is FormatVariant.LEGACY_PC and position == 0:
            signature = fh.read(1)
            if signature != LEGACY_SIGNATURE:
                msg = "Missing signature byte %r, found %r" % (
                    LEGACY_SIGNATURE, signature)
                raise TruncatedRecordError(msg, offset=0)

    def __iter__(self):
        while True:
            record = self.read_record()
            if record is None:
                return
            yield record

    def _read_length(self, offset, what):
        width = self._dtype.itemsize
        raw = self.fh.read(width)
        if not raw and what == 'length':
            return None
        if len(raw) < width:
            msg = "Short read of record %s, only read %d of %d bytes" % (
                what, len(raw), width)
            raise TruncatedRecordError(msg, offset=offset)
        # convert to int32 / unsigned int8
        return int(from_buffer(raw, dtype=self._dtype)[0])

    def read_record(self, max_length=None):
        """
        Reads the next record.

        :type max_length: int, optional
        :param max_length: Largest length the record may have to still fit
            into the logical unit it is part of.
        :rtype: :class:`RawRecord` or ``None``
        :return: The next record or ``None`` at the end of the file.
        """
        offset = self.fh.tell()
        length = self._read_length(offset, 'length')
        if length is None:
            return None
        if length < 0:
            msg = "Invalid negative record length %d" % length
            raise RecordLengthError(msg, offset=offset)
        declared = length
        logger.debug("Reading next record of length %d bytes from offset %d",
                     length, offset)

        if max_length is not None and length > max_length:
            width = self._dtype.itemsize
            record_end = offset + width + (length - 1) + width
            if length - 1 == max_length and record_end == self._size:
                msg = ("Record length at byte offset %d is %d but only %d "
                       "bytes expected and present, corrected to %d") % (
                    offset, length, max_length, max_length)
                warnings.warn(msg, RecordLengthRepairWarning)
                length -= 1
            else:
                msg = ("Record length %d exceeds the expected maximum of %d "
                       "bytes") % (length, max_length)
                raise RecordLengthError(msg, offset=offset)

        # make sure the buffer is large enough
        if len(self._buffer) < length:
            self._buffer = bytearray(length)
        with memoryview(self._buffer) as view:
            read = self.fh.readinto(view[:length]) or 0
            if read < length:
                msg = "Short read, only read %d of %d bytes" % (read, length)
                raise TruncatedRecordError(msg, offset=offset)
            data = bytes(view[:length])

        mirror = self._read_length(offset, 'length mirror')
        if mirror != declared and mirror != length:
            msg = ("Next and previous record length values do not match: "
                   "%d != %d") % (declared, mirror)
            raise FramingMismatchError(msg, offset=offset)
        return RawRecord(data, length, offset)
