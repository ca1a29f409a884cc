# -*- coding: utf-8 -*-
"""
seisan2mseed.core.util - Various utilities for seisan2mseed

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from seisan2mseed.core.util.base import (  # NOQA
    NATIVE_BYTEORDER, SWAPPED_BYTEORDER, VALID_RECORD_LENGTHS, clean_code,
    seed_time_string_to_utcdatetime, swap_int16, swap_int32)
from seisan2mseed.core.util.types import (  # NOQA
    ConfigurationError, Seisan2MSEEDException, Seisan2MSEEDReadingError,
    Seisan2MSEEDWarning)
