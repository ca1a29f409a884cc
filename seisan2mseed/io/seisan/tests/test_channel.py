# -*- coding: utf-8 -*-
"""
The seisan.channel test suite.
"""
from collections import OrderedDict

import pytest

from seisan2mseed.io.seisan.channel import (parse_channel_map,
                                            translate_channel)


class TestTranslateChannel():
    """
    Test cases for the component to channel translation.
    """
    @pytest.mark.parametrize('component, expected', [
        ('S  Z', ('SHZ', '00')),
        ('SS Z', ('SSZ', '00')),
        ('S IZ', ('SHZ', 'I0')),
        ('SBIZ', ('SBZ', 'I0')),
        ('B  E', ('BHE', '00')),
        ('L  N', ('LHN', '00')),
    ])
    def test_default_translation(self, component, expected):
        assert translate_channel(component) == expected

    def test_blanks_are_kept(self):
        """
        'H' is only substituted if first and fourth character are set.
        """
        assert translate_channel('S   ') == ('S  ', '00')
        assert translate_channel('   Z') == ('  Z', '00')

    def test_override_wins(self):
        channel_map = OrderedDict([('S IZ', 'EHZ'), ('S  Z', 'BHZ')])
        assert translate_channel('S IZ', channel_map) == ('EHZ', '00')
        assert translate_channel('S  Z', channel_map) == ('BHZ', '00')
        # no match, default translation
        assert translate_channel('SBIZ', channel_map) == ('SBZ', 'I0')

    def test_override_needs_exact_match(self):
        channel_map = {'S Z': 'BHZ'}
        assert translate_channel('S  Z', channel_map) == ('SHZ', '00')

    def test_parse_channel_map(self):
        mapping = parse_channel_map(['SBIZ=SHZ', 'SBIN=SHN', 'SBIZ=XXX'])
        assert list(mapping.items()) == [('SBIZ', 'SHZ'), ('SBIN', 'SHN')]
        assert translate_channel('SBIZ', mapping) == ('SHZ', '00')
        assert parse_channel_map(None) == OrderedDict()

    def test_parse_channel_map_keeps_blanks(self):
        mapping = parse_channel_map(['S  Z=HHZ'])
        assert translate_channel('S  Z', mapping) == ('HHZ', '00')

    def test_parse_channel_map_invalid(self):
        with pytest.raises(ValueError):
            parse_channel_map(['SBIZ'])
