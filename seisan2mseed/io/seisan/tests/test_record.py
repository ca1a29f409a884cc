# -*- coding: utf-8 -*-
"""
The seisan.record test suite.
"""
import io

import pytest

from seisan2mseed.core.util.testing import frame_record
from seisan2mseed.io.seisan import (FramingMismatchError, RecordLengthError,
                                    RecordLengthRepairWarning,
                                    TruncatedRecordError)
from seisan2mseed.io.seisan.headers import ByteOrder, FormatVariant
from seisan2mseed.io.seisan.record import RecordReader


def _reader(data, variant=FormatVariant.STANDARD, byteorder='<'):
    return RecordReader(io.BytesIO(data), variant,
                        ByteOrder.from_char(byteorder))


class TestRecordReader():
    """
    Test cases for the length prefixed record framing.
    """
    @pytest.mark.parametrize('byteorder', ['<', '>'])
    def test_framing_round_trip(self, byteorder):
        """
        Framed payloads come back unchanged in both byte orders.
        """
        payloads = [b'P' * 80, b'', b'\x00\x01\x02', b'x' * 5000, b' ' * 80]
        data = b''.join(frame_record(p, byteorder=byteorder)
                        for p in payloads)
        records = list(_reader(data, byteorder=byteorder))
        assert [r.data for r in records] == payloads
        assert [r.length for r in records] == [len(p) for p in payloads]
        assert records[0].offset == 0
        assert records[1].offset == 88
        assert records[2].offset == 96

    def test_legacy_pc_records(self):
        """
        Legacy PC files use one byte prefixes and start with a signature.
        """
        data = b'K' + frame_record(b'P' * 80, FormatVariant.LEGACY_PC) + \
            frame_record(b'y' * 300, FormatVariant.LEGACY_PC)
        reader = _reader(data, FormatVariant.LEGACY_PC)
        records = list(reader)
        assert [r.length for r in records] == [80, 128, 128, 44]
        assert records[0].offset == 1
        assert b''.join(r.data for r in records[1:]) == b'y' * 300

    def test_legacy_pc_missing_signature(self):
        data = frame_record(b'P' * 80, FormatVariant.LEGACY_PC)
        with pytest.raises(TruncatedRecordError):
            _reader(data, FormatVariant.LEGACY_PC)

    def test_read_record_at_end_of_file(self):
        reader = _reader(frame_record(b'abc'))
        assert reader.read_record().data == b'abc'
        assert reader.read_record() is None
        assert reader.read_record() is None

    def test_buffer_is_reused(self):
        """
        Returned data stays intact when the internal buffer is overwritten.
        """
        data = frame_record(b'a' * 100) + frame_record(b'b' * 10)
        reader = _reader(data)
        first = reader.read_record()
        second = reader.read_record()
        assert first.data == b'a' * 100
        assert second.data == b'b' * 10

    def test_mirror_mismatch(self):
        data = frame_record(b'abcd') + frame_record(b'efgh', mirror=5)
        reader = _reader(data)
        reader.read_record()
        with pytest.raises(FramingMismatchError) as e:
            reader.read_record()
        assert e.value.offset == 12
        assert '4 != 5' in str(e.value)
        assert 'byte offset 12' in str(e.value)

    def test_short_data(self):
        data = frame_record(b'abcdef')[:-6]
        with pytest.raises(TruncatedRecordError):
            _reader(data).read_record()

    def test_missing_mirror(self):
        data = frame_record(b'abcdef')[:-2]
        with pytest.raises(TruncatedRecordError):
            _reader(data).read_record()

    def test_partial_length_prefix(self):
        with pytest.raises(TruncatedRecordError):
            _reader(b'\x01\x00').read_record()

    def test_negative_length(self):
        data = frame_record(b'', length=-4)
        with pytest.raises(RecordLengthError):
            _reader(data).read_record()

    def test_length_within_limit(self):
        reader = _reader(frame_record(b'x' * 10))
        assert reader.read_record(max_length=10).length == 10

    def test_repair_one_byte_excess_at_end_of_file(self):
        """
        A record declaring one byte more than expected and present is
        corrected if it ends the file.
        """
        data = frame_record(b'abc') + frame_record(b'x' * 40, length=41)
        reader = _reader(data)
        reader.read_record()
        with pytest.warns(RecordLengthRepairWarning):
            record = reader.read_record(max_length=40)
        assert record.length == 40
        assert record.data == b'x' * 40
        assert reader.read_record() is None

    def test_repair_with_repaired_mirror(self):
        data = frame_record(b'x' * 40, length=41, mirror=40)
        with pytest.warns(RecordLengthRepairWarning):
            record = _reader(data).read_record(max_length=40)
        assert record.length == 40

    def test_no_repair_before_end_of_file(self):
        data = frame_record(b'x' * 40, length=41) + frame_record(b'abc')
        with pytest.raises(RecordLengthError):
            _reader(data).read_record(max_length=40)

    def test_no_repair_of_larger_excess(self):
        data = frame_record(b'x' * 40, length=42)
        with pytest.raises(RecordLengthError):
            _reader(data).read_record(max_length=40)

    def test_no_repair_without_limit(self):
        """
        Without an expected length the declared length is trusted.
        """
        data = frame_record(b'x' * 40, length=41)
        with pytest.raises(TruncatedRecordError):
            _reader(data).read_record()
