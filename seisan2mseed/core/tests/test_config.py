# -*- coding: utf-8 -*-
"""
The core.config test suite.
"""
import pytest

from seisan2mseed.core.config import ConversionConfig
from seisan2mseed.core.util.types import ConfigurationError
from seisan2mseed.io.seisan.channel import parse_channel_map


class TestConversionConfig():
    def test_defaults(self):
        config = ConversionConfig()
        assert config.network is None
        assert config.location is None
        assert config.channel_map is None
        assert not config.retain_future_year
        assert not config.buffer_all
        assert config.record_length == 4096
        assert config.encoding == 11
        assert config.byteorder == 1
        assert config.output is None
        config.validate()

    def test_reading_options(self):
        config = ConversionConfig(
            network='XX', location='10', retain_future_year=True,
            channel_map=parse_channel_map(['S  Z=HHZ', 'S  N=HHN']))
        options = config.reading_options()
        assert options['network'] == 'XX'
        assert options['location'] == '10'
        assert options['retain_future_year']
        assert list(options['channel_map'].items()) == [
            ('S  Z', 'HHZ'), ('S  N', 'HHN')]

    def test_packing_options(self):
        config = ConversionConfig(record_length=512, encoding=3,
                                  byteorder=0)
        assert config.packing_options() == {
            'record_length': 512, 'encoding': 3, 'byteorder': 0}

    @pytest.mark.parametrize('kwargs', [
        {'record_length': 100}, {'record_length': 2 ** 21},
        {'encoding': 4}, {'byteorder': 2},
        {'buffer_all': True}, {'buffer_all': True, 'output': ''}])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            ConversionConfig(**kwargs).validate()

    def test_buffer_all_with_other_output(self):
        ConversionConfig(buffer_all=True).validate(has_output=True)
        ConversionConfig(buffer_all=True, output='-').validate()
