# -*- coding: utf-8 -*-
"""
seisan2mseed.core - Conversion core of seisan2mseed
===================================================
The core package ties the SEISAN reader to the Mini-SEED packer. It contains
the per channel trace accumulation
(:class:`~seisan2mseed.core.trace.TraceGroup`), the conversion settings
(:class:`~seisan2mseed.core.config.ConversionConfig`) and the driver of a
conversion run (:class:`~seisan2mseed.core.converter.Converter`).

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
