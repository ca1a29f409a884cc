# -*- coding: utf-8 -*-
"""
Accumulation of decoded channel blocks into per channel traces.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging
from collections import namedtuple

import numpy as np
from obspy import Trace
from obspy.core import AttribDict, Stats


logger = logging.getLogger(__name__)

TraceKey = namedtuple('TraceKey', ['network', 'station', 'location',
                                   'channel'])


def trace_key(obj):
    """
    Returns the :class:`TraceKey` of a trace, its stats or a channel header.
    """
    stats = getattr(obj, 'stats', obj)
    return TraceKey(stats.network, stats.station, stats.location,
                    stats.channel)


class TraceGroup(object):
    """
    Collection of traces built up from decoded channel blocks.

    A block is appended to (or prepended to) an existing trace of the same
    channel if the sampling rates agree and the block continues the trace
    without gap or overlap, otherwise a new trace is started.

    :type rate_tolerance: float, optional
    :param rate_tolerance: Relative tolerance of sampling rates.
    :type time_tolerance: float, optional
    :param time_tolerance: Tolerance of the expected start or end time of a
        block in sample periods.

    .. rubric:: Example

    >>> import numpy as np
    >>> from obspy import UTCDateTime
    >>> from seisan2mseed.io.seisan.decoder import DecodedBlock
    >>> class Header(object):
    ...     network, station, location, channel = 'XX', 'TEST', '00', 'SHZ'
    ...     sampling_rate, uncertain_time = 1.0, False
    ...     component = 'S  Z'
    ...     starttime = UTCDateTime(2000, 1, 1)
    >>> group = TraceGroup()
    >>> tr = group.add_block(DecodedBlock(Header, np.arange(10)))
    >>> Header.starttime += 10
    >>> tr = group.add_block(DecodedBlock(Header, np.arange(5)))
    >>> print(group)  # doctest: +ELLIPSIS
    1 Trace(s) in TraceGroup:
    XX.TEST.00.SHZ | 2000-01-01T00:00:00.000000Z - ... | 1.0 Hz, 15 samples
    """
    def __init__(self, rate_tolerance=1e-4, time_tolerance=0.5):
        self.traces = []
        self.rate_tolerance = rate_tolerance
        self.time_tolerance = time_tolerance

    def __iter__(self):
        return iter(self.traces)

    def __len__(self):
        return len(self.traces)

    def __str__(self):
        out = "%d Trace(s) in TraceGroup:" % len(self.traces)
        return "\n".join([out] + [str(tr) for tr in self.traces])

    @property
    def npts(self):
        """
        Total number of samples of all traces.
        """
        return sum(tr.stats.npts for tr in self.traces)

    def clear(self):
        self.traces = []

    def _same_rate(self, trace, sampling_rate):
        rate = trace.stats.sampling_rate
        if rate <= 0 or sampling_rate <= 0:
            return False
        return abs(rate - sampling_rate) <= self.rate_tolerance * rate

    def _find_trace(self, key, header, npts):
        """
        Returns a matching trace and whether to append (``True``) or prepend
        (``False``) the block, or ``(None, None)``.
        """
        for trace in self.traces:
            if trace_key(trace) != key:
                continue
            if not self._same_rate(trace, header.sampling_rate):
                continue
            delta = 1.0 / header.sampling_rate
            tolerance = self.time_tolerance * delta
            # block starts right after the end of the trace
            if abs(trace.stats.endtime + delta - header.starttime) <= \
                    tolerance:
                return trace, True
            # block ends right before the start of the trace
            endtime = header.starttime + (npts - 1) * delta
            if abs(endtime + delta - trace.stats.starttime) <= tolerance:
                return trace, False
        return None, None

    def add_block(self, block):
        """
        Adds a decoded block and returns the trace it has been merged into.

        Blocks without samples are skipped and ``None`` is returned.

        :type block: :class:`~seisan2mseed.io.seisan.decoder.DecodedBlock`
        :rtype: :class:`~obspy.core.trace.Trace`
        """
        header, samples = block
        npts = len(samples)
        if not npts:
            logger.debug("Skipping empty block of %s_%s", header.station,
                         header.component)
            return None
        key = trace_key(header)
        trace, append = self._find_trace(key, header, npts)
        if trace is None:
            stats = Stats()
            stats.network = key.network
            stats.station = key.station
            stats.location = key.location
            stats.channel = key.channel
            stats.sampling_rate = header.sampling_rate
            stats.starttime = header.starttime
            # Stats defaults npts to 0, which Trace would not override
            stats.npts = npts
            stats.seisan = AttribDict({'component': header.component})
            trace = Trace(data=np.require(samples, np.int32), header=stats)
            self.traces.append(trace)
        elif append:
            samples = np.require(samples, np.int32)
            trace.data = np.concatenate((trace.data, samples))
        else:
            samples = np.require(samples, np.int32)
            trace.data = np.concatenate((samples, trace.data))
            trace.stats.starttime = header.starttime
        trace.stats.seisan.time_tag_questionable = header.uncertain_time
        logger.debug("%d samps @ %.6f Hz for %s", npts, header.sampling_rate,
                     trace.id)
        return trace
