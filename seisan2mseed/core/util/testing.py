# -*- coding: utf-8 -*-
"""
Testing utilities for seisan2mseed.

Helpers to build small synthetic SEISAN waveform files in both record
framings and byte orders.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import numpy as np

from seisan2mseed.io.seisan.headers import (CHANNEL_HEADER_LENGTH,
                                            FormatVariant, LEGACY_SIGNATURE)


# records of files written by SEISAN <= 6 hold at most 128 bytes
LEGACY_BLOCK_SIZE = 128


def frame_record(payload, variant=FormatVariant.STANDARD, byteorder='<',
                 length=None, mirror=None):
    """
    Frames a payload with a length prefix and a trailing mirror.

    Legacy PC payloads of more than 128 bytes are split into blocks of 128
    bytes. ``length`` and ``mirror`` allow to write corrupted framing.

    >>> frame_record(b'abc', byteorder='>')
    b'\\x00\\x00\\x00\\x03abc\\x00\\x00\\x00\\x03'
    >>> frame_record(b'abc', variant=FormatVariant.LEGACY_PC)
    b'\\x03abc\\x03'
    """
    if variant is FormatVariant.LEGACY_PC:
        if length is None and mirror is None and \
                len(payload) > LEGACY_BLOCK_SIZE:
            return b''.join(
                frame_record(payload[i:i + LEGACY_BLOCK_SIZE], variant)
                for i in range(0, len(payload), LEGACY_BLOCK_SIZE))
        dtype = np.dtype('u1')
    else:
        dtype = np.dtype(byteorder + 'i4')
    if length is None:
        length = len(payload)
    if mirror is None:
        mirror = length
    return (np.array([length], dtype=dtype).tobytes() + payload +
            np.array([mirror], dtype=dtype).tobytes())


def make_channel_header(station='TEST', component='S  Z', year=101,
                        julday=13, hour=17, minute=45, second=1.999,
                        sampling_rate=20.0, npts=100, sample_width=4,
                        uncertain_time=False, gain=None):
    """
    Builds a 1040 byte SEISAN channel header.

    ``year`` is the three character year field, i.e. the year minus 1900.
    """
    header = bytearray(b' ' * CHANNEL_HEADER_LENGTH)

    def put(offset, text):
        text = text.encode('ascii')
        header[offset:offset + len(text)] = text

    put(0, '%-5s' % station[:5])
    put(5, '%-4s' % component[:4])
    put(9, '%3d' % year)
    put(13, '%3d' % julday)
    put(23, '%2d' % hour)
    put(26, '%2d' % minute)
    if uncertain_time:
        put(28, 'E')
    put(29, '%6.3f' % second)
    put(36, '%7.2f' % sampling_rate)
    put(43, '%7d' % npts)
    put(76, '%d' % sample_width)
    if gain is not None:
        put(75, 'G')
        put(147, '%12.5f' % gain)
    return bytes(header)


def make_event_header(nchannels=1):
    """
    Builds the 80 character lines of a SEISAN event file header.
    """
    lines = [(' %-29s%3d' % ('SYNTHETIC', nchannels)).ljust(80),
             ' ' * 80]
    nlines = max(10, nchannels // 3 + (nchannels % 3 and 1))
    lines.extend([' ' * 80] * nlines)
    return [line.encode('ascii') for line in lines]


def make_seisan_file(channels, variant=FormatVariant.STANDARD,
                     byteorder='<'):
    """
    Builds a complete SEISAN waveform file.

    :type channels: list of tuple(dict, :class:`numpy.ndarray`)
    :param channels: Keyword arguments for :func:`make_channel_header` and
        the samples of each channel. ``npts`` and ``sample_width`` default
        to length and item size of the samples.
    :type variant: :class:`~seisan2mseed.io.seisan.headers.FormatVariant`
    :type byteorder: str
    :param byteorder: ``'<'`` or ``'>'``, ignored for legacy PC files which
        are always little endian.
    :rtype: bytes
    """
    if variant is FormatVariant.LEGACY_PC:
        byteorder = '<'
    records = make_event_header(len(channels))
    for kwargs, samples in channels:
        samples = np.asarray(samples)
        kwargs = dict(kwargs)
        kwargs.setdefault('npts', len(samples))
        kwargs.setdefault('sample_width', samples.dtype.itemsize)
        records.append(make_channel_header(**kwargs))
        dtype = byteorder + 'i%d' % kwargs['sample_width']
        records.append(samples.astype(dtype).tobytes())
    data = b''.join(frame_record(r, variant, byteorder) for r in records)
    if variant is FormatVariant.LEGACY_PC:
        data = LEGACY_SIGNATURE + data
    return data
