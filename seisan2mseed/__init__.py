# -*- coding: utf-8 -*-
"""
seisan2mseed: Conversion of SEISAN waveform files to Mini-SEED
==============================================================

seisan2mseed reads the binary waveform files of the SEISAN earthquake
analysis software, both the format written by SEISAN 7.0 and later and the
one written on the PC by earlier versions, normalizes the channel samples to
32 bit integers and packs them into Mini-SEED records with ObsPy.

.. rubric:: Example

>>> from seisan2mseed import ConversionConfig, Converter
>>> config = ConversionConfig(network='XX', output='out.mseed')
>>> totals = Converter(config).convert(['9701-30-1048-54S.MVO_21_1'])
... # doctest: +SKIP
>>> print(totals)  # doctest: +SKIP
Packed 21 trace(s) of 77175 samples into 84 records

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
# don't change order
from seisan2mseed.core.util.version import get_version
__version__ = get_version()
from seisan2mseed.core.util.types import (  # NOQA
    Seisan2MSEEDException, Seisan2MSEEDReadingError)
from seisan2mseed.core.config import ConversionConfig  # NOQA
from seisan2mseed.core.converter import Converter, PackTotals  # NOQA


__all__ = ["__version__", "ConversionConfig", "Converter", "PackTotals",
           "Seisan2MSEEDException", "Seisan2MSEEDReadingError"]
