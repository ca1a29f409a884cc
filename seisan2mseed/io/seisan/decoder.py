# -*- coding: utf-8 -*-
"""
Decoding of SEISAN channel headers and assembly of their data blocks.

A SEISAN waveform file consists of an event file header (80 character lines,
each starting with a blank) followed by one channel header and one data block
per channel. The channel header always is 1040 bytes long, the data block
holds ``npts`` samples of 2 or 4 bytes each. Both may be split into several
physical records.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import enum
import logging
import re
import warnings
from collections import namedtuple

from seisan2mseed.core.util.base import (clean_code,
                                         seed_time_string_to_utcdatetime)
from seisan2mseed.io.seisan import (DataOverflowError, GainNotAppliedWarning,
                                    HeaderDecodingError, HeaderOverflowError,
                                    TruncatedRecordError)
from seisan2mseed.io.seisan.channel import translate_channel
from seisan2mseed.io.seisan.headers import (CHANNEL_HEADER_LENGTH,
                                            GAIN_FLAG_OFFSET, HEADER_FIELDS,
                                            MAX_YEAR,
                                            SAMPLE_WIDTH_FLAG_OFFSET,
                                            UNCERTAIN_TIME_FLAG_OFFSET)


logger = logging.getLogger(__name__)

_FLOAT_PATTERN = re.compile(r'\s*([+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)')
_UINT_PATTERN = re.compile(r'\s*\+?(\d+)')


_CHANNEL_HEADER_FIELDS = [
    'network', 'station', 'location', 'channel', 'component', 'starttime',
    'time_string', 'uncertain_time', 'sampling_rate', 'sample_count',
    'sample_width', 'gain_flag', 'gain']


class ChannelHeader(namedtuple('ChannelHeader', _CHANNEL_HEADER_FIELDS)):
    """
    Decoded SEISAN channel header.

    The gain is parsed for reporting only, it is never applied to the data.
    """
    __slots__ = ()

    @property
    def expected_data_length(self):
        """
        Length in bytes of the data block following this header.
        """
        return self.sample_count * self.sample_width


#: A channel header with its samples converted to native ``int32``.
DecodedBlock = namedtuple('DecodedBlock', ['header', 'samples'])


class DecoderState(enum.Enum):
    AWAITING_HEADER = 'awaiting_header'
    AWAITING_DATA = 'awaiting_data'


def _parse_float(text):
    """
    Parses the leading floating point number of a text field, ``0.0`` if
    there is none.

    >>> _parse_float('  20.00')
    20.0
    >>> _parse_float(' 1.5e1x')
    15.0
    >>> _parse_float('   ')
    0.0
    """
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def _parse_uint(text):
    """
    Parses the leading unsigned integer of a text field, ``0`` if there is
    none.

    >>> _parse_uint('   6000')
    6000
    >>> _parse_uint(' 99')
    99
    >>> _parse_uint('  x')
    0
    """
    match = _UINT_PATTERN.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def _field(text, name):
    start, end = HEADER_FIELDS[name]
    return text[start:end]


def decode_channel_header(data, network=None, location=None,
                          channel_map=None, retain_future_year=False):
    """
    Decodes a 1040 byte SEISAN channel header.

    :type data: bytes
    :param data: The complete channel header.
    :type network: str, optional
    :param network: Network code to use, the format carries none.
    :type location: str, optional
    :param location: Location code replacing the one derived from the
        component.
    :type channel_map: dict, optional
    :param channel_map: Ordered mapping of component to channel codes, see
        :func:`~seisan2mseed.io.seisan.channel.translate_channel`.
    :type retain_future_year: bool, optional
    :param retain_future_year: Keep years beyond 2050 instead of clamping
        them to 2050.
    :rtype: :class:`ChannelHeader`
    """
    if len(data) != CHANNEL_HEADER_LENGTH:
        msg = "Channel header must be %d bytes long, got %d" % (
            CHANNEL_HEADER_LENGTH, len(data))
        raise HeaderDecodingError(msg)
    # latin-1 keeps a one to one mapping of bytes and characters
    text = bytes(data).decode('latin-1')

    station = clean_code(_field(text, 'station'), 5)
    component = _field(text, 'component')
    channel, derived_location = translate_channel(component, channel_map)
    if location is not None:
        derived_location = clean_code(location, 2)

    year = _parse_uint(_field(text, 'year')) + 1900
    if year > MAX_YEAR and not retain_future_year:
        logger.warning("Year %d of station %s is in the future, using %d",
                       year, station, MAX_YEAR)
        year = MAX_YEAR
    time_string = "%4d,%s,%s:%s:%s" % (
        year, _field(text, 'julday'), _field(text, 'hour'),
        _field(text, 'minute'), _field(text, 'second'))
    time_string = time_string.replace(' ', '')
    try:
        starttime = seed_time_string_to_utcdatetime(time_string)
    except ValueError as e:
        msg = "Invalid start time '%s' of station %s: %s" % (
            time_string, station, e)
        raise HeaderDecodingError(msg)

    uncertain_time = text[UNCERTAIN_TIME_FLAG_OFFSET] == 'E'
    sampling_rate = _parse_float(_field(text, 'sampling_rate'))
    sample_count = _parse_uint(_field(text, 'npts'))

    gain_flag = text[GAIN_FLAG_OFFSET] == 'G'
    gain = 1.0
    if gain_flag:
        gain = _parse_float(_field(text, 'gain'))
        msg = "Gain of %f detected for station %s, gain NOT applied" % (
            gain, station)
        warnings.warn(msg, GainNotAppliedWarning)

    if text[SAMPLE_WIDTH_FLAG_OFFSET] == '4':
        sample_width = 4
    else:
        sample_width = 2

    return ChannelHeader(
        network=clean_code(network, 2), station=station,
        location=derived_location, channel=channel, component=component,
        starttime=starttime, time_string=time_string,
        uncertain_time=uncertain_time, sampling_rate=sampling_rate,
        sample_count=sample_count, sample_width=sample_width,
        gain_flag=gain_flag, gain=gain)


class ChannelHeaderDecoder(object):
    """
    Assembles channel headers and data blocks from the records of a file.

    Iterating over the decoder yields ``(header, data)`` tuples of a decoded
    :class:`ChannelHeader` and the raw bytes of its data block.

    :type reader: :class:`~seisan2mseed.io.seisan.record.RecordReader`
    :param reader: Source of physical records.

    All other keyword arguments are passed on to
    :func:`decode_channel_header`.
    """
    def __init__(self, reader, **kwargs):
        self.reader = reader
        self.options = kwargs
        self.state = DecoderState.AWAITING_HEADER
        self._header_buffer = bytearray()
        self._data_buffer = bytearray()
        self._header = None

    @property
    def name(self):
        return getattr(self.reader.fh, 'name', '<stream>')

    def __iter__(self):
        while True:
            if self.state is DecoderState.AWAITING_HEADER:
                if not self._read_header():
                    return
            else:
                block = self._read_data()
                if block is None:
                    return
                yield block

    def _read_header(self):
        """
        Collects records until a complete channel header has been decoded.

        Returns ``False`` at the end of the file.
        """
        while True:
            max_length = None
            if self._header_buffer:
                max_length = CHANNEL_HEADER_LENGTH - len(self._header_buffer)
            record = self.reader.read_record(max_length)
            if record is None:
                if self._header_buffer:
                    msg = ("End of file within channel header, got %d of %d "
                           "bytes") % (len(self._header_buffer),
                                       CHANNEL_HEADER_LENGTH)
                    raise TruncatedRecordError(msg)
                return False
            if not self._header_buffer and (
                    not record.data or record.data[:1] == b' '):
                # event file header lines or continuation sections
                logger.debug("Skipping record of %d bytes at offset %d",
                             record.length, record.offset)
                continue
            if len(self._header_buffer) + record.length > \
                    CHANNEL_HEADER_LENGTH:
                msg = ("Channel header exceeds %d bytes, got %d bytes "
                       "more") % (CHANNEL_HEADER_LENGTH, record.length)
                raise HeaderOverflowError(msg, offset=record.offset)
            self._header_buffer += record.data
            if len(self._header_buffer) < CHANNEL_HEADER_LENGTH:
                continue
            try:
                header = decode_channel_header(self._header_buffer,
                                               **self.options)
            except HeaderDecodingError as e:
                e.offset = record.offset
                raise
            self._header_buffer = bytearray()
            logger.info("[%s] '%s_%s' (%s): %s%s, %d samps @ %.4f Hz",
                        self.name, header.station, header.component,
                        header.channel, header.time_string,
                        header.uncertain_time and ' [UNCERTAIN]' or '',
                        header.sample_count, header.sampling_rate)
            self._header = header
            self._data_buffer = bytearray()
            self.state = DecoderState.AWAITING_DATA
            return True

    def _read_data(self):
        """
        Collects records until the data block of the current header is
        complete.

        Returns ``None`` at the end of the file if no data is pending.
        """
        expected = self._header.expected_data_length
        while len(self._data_buffer) < expected:
            record = self.reader.read_record(
                expected - len(self._data_buffer))
            if record is None:
                break
            if len(self._data_buffer) + record.length > expected:
                msg = "Data block exceeds the expected %d bytes" % expected
                raise DataOverflowError(msg, offset=record.offset)
            self._data_buffer += record.data
        if len(self._data_buffer) < expected:
            if not self._data_buffer:
                logger.warning("[%s] End of file, no data for channel %s",
                               self.name, self._header.channel)
                self.state = DecoderState.AWAITING_HEADER
                return None
            logger.warning("[%s] End of file within data block, got %d of "
                           "%d bytes", self.name, len(self._data_buffer),
                           expected)
        block = (self._header, bytes(self._data_buffer))
        self._header = None
        self._data_buffer = bytearray()
        self.state = DecoderState.AWAITING_HEADER
        return block
