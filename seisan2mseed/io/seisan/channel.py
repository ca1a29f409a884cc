# -*- coding: utf-8 -*-
"""
Translation of SEISAN component codes to SEED channel and location codes.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from collections import OrderedDict


DEFAULT_LOCATION = '00'


def translate_channel(component, channel_map=None):
    """
    Translates a four character SEISAN component into a SEED channel and
    location code.

    User defined translations in ``channel_map`` are checked first, in order,
    and the first exact match wins. Otherwise the channel is built from the
    first, second and fourth character of the component, substituting ``'H'``
    for a blank second character if the first and fourth are not blank. The
    third character of the component, if not blank, becomes the first
    character of the location code.

    :type component: str
    :param component: Four character SEISAN component, e.g. ``'S  Z'``.
    :type channel_map: dict, optional
    :param channel_map: Ordered mapping of component to channel codes.
    :rtype: tuple(str, str)
    :return: Channel and location code.

    .. rubric:: Example

    >>> translate_channel('S  Z')
    ('SHZ', '00')
    >>> translate_channel('SBIZ')
    ('SBZ', 'I0')
    >>> translate_channel('SBIZ', {'SBIZ': 'SHZ'})
    ('SHZ', '00')
    """
    if channel_map:
        for key, channel in channel_map.items():
            if key == component:
                return channel, DEFAULT_LOCATION
    component = component.ljust(4)
    channel = [component[0], component[1], component[3]]
    if channel[1] == ' ' and channel[0] != ' ' and channel[2] != ' ':
        channel[1] = 'H'
    location = DEFAULT_LOCATION
    if component[2] != ' ':
        location = component[2] + DEFAULT_LOCATION[1]
    return ''.join(channel), location


def parse_channel_map(entries):
    """
    Builds an ordered component to channel mapping from ``key=value`` strings.

    If a component is given more than once the first entry is kept, as only
    the first matching translation is ever used.

    >>> list(parse_channel_map(['SBIZ=SHZ', 'SBIN=SHN']).items())
    [('SBIZ', 'SHZ'), ('SBIN', 'SHN')]
    >>> parse_channel_map(['SBIZ'])
    Traceback (most recent call last):
    ...
    ValueError: Cannot find '=' in mapping 'SBIZ'
    """
    mapping = OrderedDict()
    for entry in entries or []:
        if '=' not in entry:
            msg = "Cannot find '=' in mapping '%s'" % entry
            raise ValueError(msg)
        key, channel = entry.split('=', 1)
        mapping.setdefault(key, channel)
    return mapping
