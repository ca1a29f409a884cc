# -*- coding: utf-8 -*-
"""
seisan2mseed.io.seisan - SEISAN binary waveform reader
=======================================================
This module reads the binary waveform files of the SEISAN earthquake analysis
software package and turns them into a sequence of decoded channel blocks,
each consisting of a channel header and a normalized ``int32`` sample array.

Two historical flavours of the format exist:

* files written on the PC by SEISAN 6.0 and earlier (Microsoft Fortran) start
  with the signature byte ``K`` and frame every write with one byte giving its
  length; writes of more than 128 bytes are split into records of 128 bytes,
  always little endian.
* files written by SEISAN 7.0 and later frame every write with 4 bytes giving
  its length, in the byte order of the writing machine.

Both flavours and their byte order are detected automatically by
:func:`~seisan2mseed.io.seisan.core.detect_format`.

.. rubric:: Example

>>> from seisan2mseed.io.seisan.core import read_seisan_blocks
>>> for block in read_seisan_blocks("2001-01-13-1742-24S.KONO__004"):
...     print(block.header.station, block.header.channel, len(block.samples))
... # doctest: +SKIP
KONO B0Z 6000

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from seisan2mseed.core.util.types import (Seisan2MSEEDReadingError,
                                          Seisan2MSEEDWarning)


class SeisanReadingError(Seisan2MSEEDReadingError):
    pass


class UnrecognizedFormatError(SeisanReadingError):
    pass


class FramingMismatchError(SeisanReadingError):
    pass


class RecordLengthError(SeisanReadingError):
    pass


class TruncatedRecordError(SeisanReadingError):
    pass


class HeaderOverflowError(SeisanReadingError):
    pass


class HeaderDecodingError(SeisanReadingError):
    pass


class DataOverflowError(SeisanReadingError):
    pass


class UnsupportedSampleWidthError(SeisanReadingError):
    pass


class SeisanWarning(Seisan2MSEEDWarning):
    pass


class RecordLengthRepairWarning(SeisanWarning):
    pass


class SampleCountMismatchWarning(SeisanWarning):
    pass


class GainNotAppliedWarning(SeisanWarning):
    pass


__all__ = ['SeisanReadingError', 'UnrecognizedFormatError',
           'FramingMismatchError', 'RecordLengthError',
           'TruncatedRecordError', 'HeaderOverflowError',
           'HeaderDecodingError', 'DataOverflowError',
           'UnsupportedSampleWidthError', 'SeisanWarning',
           'RecordLengthRepairWarning', 'SampleCountMismatchWarning',
           'GainNotAppliedWarning']
