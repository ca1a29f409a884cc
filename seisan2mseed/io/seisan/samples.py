# -*- coding: utf-8 -*-
"""
Conversion of SEISAN sample payloads into native 32 bit integer arrays.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import warnings

import numpy as np
from obspy.core.compatibility import from_buffer

from seisan2mseed.io.seisan import (SampleCountMismatchWarning,
                                    UnsupportedSampleWidthError)


SAMPLE_WIDTHS = (2, 4)


def normalize_samples(raw, sample_width, byteorder):
    """
    Converts raw sample bytes into a native byte order ``int32`` array.

    :type raw: bytes
    :param raw: Sample payload of a data block.
    :type sample_width: int
    :param sample_width: Size of a single sample in bytes, ``2`` or ``4``.
    :type byteorder: :class:`~seisan2mseed.io.seisan.headers.ByteOrder`
    :param byteorder: Byte order of the payload relative to the host.
    :rtype: :class:`numpy.ndarray`
    :return: Independent, writeable ``int32`` array in host byte order.

    .. rubric:: Example

    >>> import numpy as np
    >>> from seisan2mseed.io.seisan.headers import ByteOrder
    >>> raw = np.array([1, -1, 32767], dtype='=i2').tobytes()
    >>> normalize_samples(raw, 2, ByteOrder.NATIVE).tolist()
    [1, -1, 32767]
    >>> normalize_samples(raw, 2, ByteOrder.SWAPPED).tolist()
    [256, -1, -129]
    """
    if sample_width not in SAMPLE_WIDTHS:
        msg = "Unsupported sample width of %s bytes" % sample_width
        raise UnsupportedSampleWidthError(msg)
    npts, remainder = divmod(len(raw), sample_width)
    if remainder:
        msg = ("Data block of %d bytes is no multiple of the sample width, "
               "dropping %d trailing byte(s)") % (len(raw), remainder)
        warnings.warn(msg, SampleCountMismatchWarning)
        raw = raw[:npts * sample_width]
    dtype = np.dtype(byteorder.char + 'i%d' % sample_width)
    data = from_buffer(raw, dtype=dtype)
    # convert to system byte order
    data = np.require(data, '=i%d' % sample_width)
    if sample_width == 2:
        data = data.astype(np.int32)
    return np.require(data, np.int32, ['C_CONTIGUOUS', 'WRITEABLE',
                                       'OWNDATA'])
