# -*- coding: utf-8 -*-
"""
The mseed.packer test suite.
"""
import io

import numpy as np
import pytest
from obspy import Trace, UTCDateTime, read
from obspy.core import AttribDict

from seisan2mseed.core.util.types import ConfigurationError
from seisan2mseed.io.mseed import MSEEDPackingError
from seisan2mseed.io.mseed.packer import (DATA_QUALITY_FLAGS_OFFSET,
                                          MSEEDPacker, TIME_TAG_QUESTIONABLE)


def _trace(npts=5000, questionable=None, data=None):
    if data is None:
        data = (np.sin(np.arange(npts) / 10.0) * 1000).astype(np.int32)
    tr = Trace(data=data)
    tr.stats.network = 'XX'
    tr.stats.station = 'TEST'
    tr.stats.location = '00'
    tr.stats.channel = 'SHZ'
    tr.stats.sampling_rate = 20.0
    tr.stats.starttime = UTCDateTime(2001, 1, 13, 17, 45, 1, 999000)
    if questionable is not None:
        tr.stats.seisan = AttribDict(
            {'time_tag_questionable': questionable, 'component': 'S  Z'})
    return tr


def _records(data, record_length):
    return [data[i:i + record_length]
            for i in range(0, len(data), record_length)]


class TestMSEEDPacker():
    """
    Test cases for packing traces into Mini-SEED records.
    """
    @pytest.mark.parametrize('encoding', [1, 3, 10, 11])
    def test_pack(self, encoding):
        buf = io.BytesIO()
        packer = MSEEDPacker(buf, record_length=512, encoding=encoding)
        tr = _trace()
        nrecords, nsamples = packer.pack(tr)
        assert nsamples == 5000
        assert nrecords == len(buf.getvalue()) // 512
        assert len(buf.getvalue()) % 512 == 0
        buf.seek(0)
        st = read(buf)
        st.merge()
        assert len(st) == 1
        assert st[0].id == 'XX.TEST.00.SHZ'
        assert st[0].stats.starttime == tr.stats.starttime
        assert st[0].stats.mseed.encoding == {
            1: 'INT16', 3: 'INT32', 10: 'STEIM1', 11: 'STEIM2'}[encoding]
        np.testing.assert_array_equal(st[0].data, tr.data)

    @pytest.mark.parametrize('byteorder, char', [(0, '<'), (1, '>')])
    def test_byteorder(self, byteorder, char):
        buf = io.BytesIO()
        MSEEDPacker(buf, byteorder=byteorder).pack(_trace(100))
        buf.seek(0)
        assert read(buf)[0].stats.mseed.byteorder == char

    def test_pack_appends_to_file(self):
        buf = io.BytesIO()
        packer = MSEEDPacker(buf, record_length=256)
        first = packer.pack(_trace(1000))
        second = packer.pack(_trace(1000))
        assert len(buf.getvalue()) == (first[0] + second[0]) * 256

    def test_questionable_time_tag(self):
        buf = io.BytesIO()
        packer = MSEEDPacker(buf, record_length=256)
        nrecords, _ = packer.pack(_trace(questionable=True))
        assert nrecords > 1
        for record in _records(buf.getvalue(), 256):
            assert record[DATA_QUALITY_FLAGS_OFFSET] & TIME_TAG_QUESTIONABLE
        buf.seek(0)
        st = read(buf)
        assert sum(tr.stats.npts for tr in st) == 5000

    def test_time_tag_not_questionable(self):
        buf = io.BytesIO()
        packer = MSEEDPacker(buf, record_length=256)
        packer.pack(_trace(questionable=False))
        packer.pack(_trace())
        for record in _records(buf.getvalue(), 256):
            assert not record[DATA_QUALITY_FLAGS_OFFSET] & \
                TIME_TAG_QUESTIONABLE

    def test_int16_out_of_range(self):
        buf = io.BytesIO()
        packer = MSEEDPacker(buf, encoding=1)
        data = np.array([0, 40000, 1], dtype=np.int32)
        with pytest.raises(MSEEDPackingError):
            packer.pack(_trace(data=data))
        assert buf.getvalue() == b''

    def test_empty_trace(self):
        buf = io.BytesIO()
        tr = _trace(data=np.array([], dtype=np.int32))
        assert MSEEDPacker(buf).pack(tr) == (0, 0)
        assert buf.getvalue() == b''

    def test_trace_is_not_modified(self):
        tr = _trace(100, questionable=True)
        MSEEDPacker(io.BytesIO()).pack(tr)
        assert tr.stats.seisan.time_tag_questionable
        assert 'mseed' not in tr.stats
        assert tr.data.dtype == np.int32

    @pytest.mark.parametrize('kwargs', [
        {'record_length': 1000}, {'encoding': 5}, {'byteorder': -1}])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ConfigurationError):
            MSEEDPacker(io.BytesIO(), **kwargs)
