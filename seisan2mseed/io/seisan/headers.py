# -*- coding: utf-8 -*-
"""
Constants and enumerations of the SEISAN binary waveform format.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import enum

from seisan2mseed.core.util.base import NATIVE_BYTEORDER, SWAPPED_BYTEORDER


# first byte of files written by SEISAN 6.0 and earlier on the PC
LEGACY_SIGNATURE = b'K'
# every SEISAN file starts with a write of 80 characters
STANDARD_IDENT = 80

# size of a logical channel header
CHANNEL_HEADER_LENGTH = 1040

# years beyond this are considered broken two digit years and get clamped
MAX_YEAR = 2050

# (start, end) byte ranges of the channel header fields
HEADER_FIELDS = {
    'station': (0, 5),
    'component': (5, 9),
    'year': (9, 12),
    'julday': (13, 16),
    'hour': (23, 25),
    'minute': (26, 28),
    'second': (29, 35),
    'sampling_rate': (36, 43),
    'npts': (43, 50),
    'gain': (147, 159),
}
UNCERTAIN_TIME_FLAG_OFFSET = 28
GAIN_FLAG_OFFSET = 75
SAMPLE_WIDTH_FLAG_OFFSET = 76


class FormatVariant(enum.Enum):
    """
    Record framing flavour of a SEISAN file.
    """
    LEGACY_PC = 'legacy_pc'
    STANDARD = 'standard'

    @property
    def prefix_width(self):
        """
        Number of bytes of the record length prefix and of its mirror.
        """
        if self is FormatVariant.LEGACY_PC:
            return 1
        return 4


class ByteOrder(enum.Enum):
    """
    Byte order of the multi-byte integers of a file relative to the host.
    """
    NATIVE = 'native'
    SWAPPED = 'swapped'

    @property
    def char(self):
        """
        Byte order character (``'<'`` or ``'>'``) of the data on disk as
        understood by :class:`numpy.dtype`.
        """
        if self is ByteOrder.NATIVE:
            return NATIVE_BYTEORDER
        return SWAPPED_BYTEORDER

    @classmethod
    def from_char(cls, char):
        """
        Returns the byte order of data stored with the given numpy byte order
        character.

        >>> ByteOrder.from_char('=')
        <ByteOrder.NATIVE: 'native'>
        """
        if char in ('=', '|', NATIVE_BYTEORDER):
            return cls.NATIVE
        if char == SWAPPED_BYTEORDER:
            return cls.SWAPPED
        raise ValueError("Invalid byte order character '%s'" % char)
