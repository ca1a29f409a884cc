# -*- coding: utf-8 -*-
"""
SEISAN format detection and block reading.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging

from obspy import Stream
from obspy.core.compatibility import from_buffer

from seisan2mseed.core.trace import TraceGroup
from seisan2mseed.core.util.base import NATIVE_BYTEORDER, swap_int32
from seisan2mseed.core.util.decorator import _open_file
from seisan2mseed.io.seisan import (SeisanReadingError,
                                    UnrecognizedFormatError)
from seisan2mseed.io.seisan.decoder import ChannelHeaderDecoder, DecodedBlock
from seisan2mseed.io.seisan.headers import (ByteOrder, FormatVariant,
                                            LEGACY_SIGNATURE, STANDARD_IDENT)
from seisan2mseed.io.seisan.record import RecordReader
from seisan2mseed.io.seisan.samples import normalize_samples


logger = logging.getLogger(__name__)


def detect_format(fh):
    """
    Detects record framing and byte order of an open SEISAN file.

    The file position is restored afterwards.

    From the SEISAN documentation::

        On the PC, Seisan version 6.0 and earlier using Microsoft Fortran,
        the first 2 bytes in the file are the ASCII character "KP". [...]
        From version 7.0, the Linux and PC file structures are exactly the
        same. On Sun the structure is the same except that the bytes are
        swapped. [...] Since there is always 80 characters in the first
        write, character one in the Linux and PC file will be the character
        P (which is represented by 80) while on Sun character 4 is P.

    :type fh: file
    :param fh: Seekable file-like object opened in binary mode.
    :rtype: tuple(:class:`~seisan2mseed.io.seisan.headers.FormatVariant`,
        :class:`~seisan2mseed.io.seisan.headers.ByteOrder`)

    .. rubric:: Example

    >>> import io
    >>> detect_format(io.BytesIO(b'KP' + b' ' * 80))
    ... # doctest: +ELLIPSIS
    (<FormatVariant.LEGACY_PC: 'legacy_pc'>, <ByteOrder...>)
    """
    position = fh.tell()
    try:
        data = fh.read(4)
    finally:
        fh.seek(position)

    if data[:1] == LEGACY_SIGNATURE:
        # files of version <= 6 are always little endian
        if NATIVE_BYTEORDER == '<':
            return FormatVariant.LEGACY_PC, ByteOrder.NATIVE
        return FormatVariant.LEGACY_PC, ByteOrder.SWAPPED

    if len(data) == 4:
        ident = int(from_buffer(data, dtype=NATIVE_BYTEORDER + 'i4')[0])
        if ident == STANDARD_IDENT:
            logger.debug("Swapping NOT needed")
            return FormatVariant.STANDARD, ByteOrder.NATIVE
        if swap_int32(ident) == STANDARD_IDENT:
            logger.debug("Swapping needed")
            return FormatVariant.STANDARD, ByteOrder.SWAPPED

    msg = "Could not detect format and byte order of data, first bytes %r" % (
        data)
    raise UnrecognizedFormatError(msg, offset=position)


def _is_seisan(filename):
    """
    Checks whether a file is a SEISAN waveform file or not.

    :type filename: str
    :param filename: Name of the SEISAN file to be checked.
    :rtype: bool
    :return: ``True`` if a SEISAN file.

    .. rubric:: Example

    >>> _is_seisan("/path/to/1996-06-03-1917-52S.TEST__002")  #doctest: +SKIP
    True
    """
    try:
        with open(filename, 'rb') as fh:
            detect_format(fh)
    except (OSError, SeisanReadingError):
        return False
    return True


def read_seisan_blocks(fh, **kwargs):
    """
    Generator of the decoded channel blocks of an open SEISAN file.

    :type fh: file
    :param fh: Seekable file-like object opened in binary mode, positioned
        at the start of the SEISAN file.
    :rtype: :class:`~seisan2mseed.io.seisan.decoder.DecodedBlock`

    All keyword arguments are passed on to
    :func:`~seisan2mseed.io.seisan.decoder.decode_channel_header`.

    A corrupted file raises a
    :class:`~seisan2mseed.io.seisan.SeisanReadingError` after all blocks
    preceding the corruption have been generated.
    """
    variant, byteorder = detect_format(fh)
    logger.debug("Detected %s format with %s byte order", variant.name,
                 byteorder.name)
    reader = RecordReader(fh, variant, byteorder)
    for header, data in ChannelHeaderDecoder(reader, **kwargs):
        samples = normalize_samples(data, header.sample_width, byteorder)
        yield DecodedBlock(header, samples)


@_open_file
def _read_seisan(filename, **kwargs):
    """
    Reads a SEISAN file and returns an ObsPy Stream object.

    Contiguous blocks of the same channel are merged into a single trace.

    :type filename: str or file
    :param filename: SEISAN file to be read.
    :rtype: :class:`~obspy.core.stream.Stream`
    """
    group = TraceGroup()
    for block in read_seisan_blocks(filename, **kwargs):
        group.add_block(block)
    return Stream(traces=list(group))


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
