# -*- coding: utf-8 -*-
"""
seisan2mseed.io.mseed - Mini-SEED packing of accumulated traces
================================================================
Traces are packed into Mini-SEED records by the ObsPy Mini-SEED writer, which
uses libmseed internally. The
:class:`~seisan2mseed.io.mseed.packer.MSEEDPacker` adds the record and sample
bookkeeping of a conversion run and marks the records of traces with
questionable time tags in their data quality flags.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from seisan2mseed.core.util.types import Seisan2MSEEDException


class MSEEDPackingError(Seisan2MSEEDException):
    pass


__all__ = ['MSEEDPackingError']
