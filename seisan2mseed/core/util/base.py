# -*- coding: utf-8 -*-
"""
Base utilities and constants for seisan2mseed.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import re
import sys

import numpy as np

from obspy import UTCDateTime


# The native byte order of the host as numpy dtype character.
NATIVE_BYTEORDER = sys.byteorder == 'little' and '<' or '>'
SWAPPED_BYTEORDER = NATIVE_BYTEORDER == '<' and '>' or '<'

# Valid Mini-SEED record lengths, 2 ** 8 up to 2 ** 20.
VALID_RECORD_LENGTHS = [2 ** _i for _i in range(8, 21)]

_SEED_TIME_SEPARATORS = re.compile(r'[,:T]')


def swap_int16(value):
    """
    Swaps the byte order of a 2-byte signed integer.

    >>> swap_int16(1)
    256
    >>> swap_int16(-1)
    -1
    """
    return int(np.array([value], dtype=np.int16).byteswap()[0])


def swap_int32(value):
    """
    Swaps the byte order of a 4-byte signed integer.

    >>> swap_int32(80)
    1342177280
    >>> swap_int32(1342177280)
    80
    """
    return int(np.array([value], dtype=np.int32).byteswap()[0])


def clean_code(code, length):
    """
    Returns at most ``length`` characters of ``code`` with all spaces removed.

    Mirrors the way SEED identifiers are cleaned before being put into a
    fixed header, ``None`` is treated as an empty code.

    >>> clean_code('TEST ', 5)
    'TEST'
    >>> clean_code(' X Y ', 2)
    'X'
    >>> clean_code(None, 2)
    ''
    """
    if not code:
        return ''
    return code[:length].replace(' ', '')


def seed_time_string_to_utcdatetime(timestring):
    """
    Converts a SEED time string into a UTCDateTime.

    The accepted format is ``YYYY[,DDD,HH:MM:SS.FFFFFF]``, trailing
    components may be omitted and default to their lowest value.

    :type timestring: str
    :rtype: :class:`~obspy.core.utcdatetime.UTCDateTime`

    >>> seed_time_string_to_utcdatetime('2001,013,17:45:01.999')
    UTCDateTime(2001, 1, 13, 17, 45, 1, 999000)
    >>> seed_time_string_to_utcdatetime('1999,365')
    UTCDateTime(1999, 12, 31, 0, 0)
    """
    fields = _SEED_TIME_SEPARATORS.split(timestring.strip())
    if not fields or not fields[0]:
        msg = "Cannot parse SEED time string '%s'" % timestring
        raise ValueError(msg)
    fields += [''] * (5 - len(fields))
    try:
        year = int(fields[0])
        julday = int(fields[1] or 1)
        hour = int(fields[2] or 0)
        minute = int(fields[3] or 0)
        seconds = float(fields[4] or 0.0)
    except ValueError:
        msg = "Cannot parse SEED time string '%s'" % timestring
        raise ValueError(msg)
    dt = UTCDateTime(year=year, julday=julday, hour=hour, minute=minute)
    return dt + seconds


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
