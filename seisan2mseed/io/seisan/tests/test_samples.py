# -*- coding: utf-8 -*-
"""
The seisan.samples test suite.
"""
import numpy as np
import pytest

from seisan2mseed.io.seisan import (SampleCountMismatchWarning,
                                    UnsupportedSampleWidthError)
from seisan2mseed.io.seisan.headers import ByteOrder
from seisan2mseed.io.seisan.samples import normalize_samples


class TestNormalizeSamples():
    """
    Test cases for the conversion to native 32 bit samples.
    """
    def test_16bit_native(self):
        raw = np.array([1, -1, 32767], dtype='=i2').tobytes()
        data = normalize_samples(raw, 2, ByteOrder.NATIVE)
        assert data.tolist() == [1, -1, 32767]
        assert data.dtype == np.dtype('=i4')

    def test_16bit_swapped(self):
        """
        Each sample is byte reversed before it is widened.
        """
        raw = np.array([1, -1, 32767], dtype='=i2').tobytes()
        data = normalize_samples(raw, 2, ByteOrder.SWAPPED)
        assert data.tolist() == [256, -1, -129]

    @pytest.mark.parametrize('char', ['<', '>'])
    def test_16bit_explicit_byte_order(self, char):
        values = [-32768, -2, 0, 7, 32767]
        raw = np.array(values, dtype=char + 'i2').tobytes()
        data = normalize_samples(raw, 2, ByteOrder.from_char(char))
        assert data.tolist() == values
        assert data.dtype.isnative

    @pytest.mark.parametrize('char', ['<', '>'])
    def test_32bit(self, char):
        values = [-2 ** 31, -1, 0, 1, 2 ** 31 - 1]
        raw = np.array(values, dtype=char + 'i4').tobytes()
        data = normalize_samples(raw, 4, ByteOrder.from_char(char))
        assert data.tolist() == values
        assert data.dtype == np.int32
        assert data.dtype.isnative

    def test_32bit_swapped(self):
        raw = np.array([80], dtype='=i4').tobytes()
        data = normalize_samples(raw, 4, ByteOrder.SWAPPED)
        assert data.tolist() == [1342177280]

    def test_result_is_independent(self):
        raw = bytearray(np.array([1, 2, 3], dtype='=i4').tobytes())
        data = normalize_samples(raw, 4, ByteOrder.NATIVE)
        raw[:] = b'\x00' * len(raw)
        assert data.tolist() == [1, 2, 3]
        assert data.flags.writeable
        assert data.flags.owndata
        data[0] = 5

    def test_empty(self):
        data = normalize_samples(b'', 4, ByteOrder.NATIVE)
        assert len(data) == 0
        assert data.dtype == np.int32

    @pytest.mark.parametrize('width', [0, 1, 3, 8])
    def test_unsupported_width(self, width):
        with pytest.raises(UnsupportedSampleWidthError):
            normalize_samples(b'\x00' * 8, width, ByteOrder.NATIVE)

    def test_trailing_bytes(self):
        raw = np.array([1, 2], dtype='=i4').tobytes() + b'\x01\x02'
        with pytest.warns(SampleCountMismatchWarning):
            data = normalize_samples(raw, 4, ByteOrder.NATIVE)
        assert data.tolist() == [1, 2]
