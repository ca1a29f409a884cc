# -*- coding: utf-8 -*-
"""
Settings of a conversion run.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from obspy.core import AttribDict

from seisan2mseed.core.util.base import VALID_RECORD_LENGTHS
from seisan2mseed.core.util.types import ConfigurationError


#: Supported Mini-SEED encodings for packing.
ENCODINGS = {1: 'INT16', 3: 'INT32', 10: 'STEIM1', 11: 'STEIM2'}

#: Supported Mini-SEED byte orders for packing.
BYTEORDERS = {0: 'little endian', 1: 'big endian'}


class ConversionConfig(AttribDict):
    """
    Settings of a conversion run.

    ``network``
        SEED network code, the SEISAN format carries none. Defaults to blank.
    ``location``
        SEED location code replacing the one derived from the component.
    ``channel_map``
        Ordered mapping of SEISAN components to SEED channels.
    ``retain_future_year``
        Keep years beyond 2050 instead of clamping them.
    ``buffer_all``
        Buffer all input and pack once at the end instead of packing after
        every channel. Requires ``output``.
    ``record_length``, ``encoding``, ``byteorder``
        Mini-SEED packing parameters.
    ``output``
        Output file name, ``'-'`` for standard output. By default every
        input file is converted into ``<input>.mseed``.
    ``verbosity``
        Level of diagnostic output.

    >>> config = ConversionConfig(network='XX')
    >>> config.encoding
    11
    >>> config.reading_options()['network']
    'XX'
    """
    defaults = {
        'network': None,
        'location': None,
        'channel_map': None,
        'retain_future_year': False,
        'buffer_all': False,
        'record_length': 4096,
        'encoding': 11,
        'byteorder': 1,
        'output': None,
        'verbosity': 0,
    }

    def validate(self, has_output=False):
        """
        Checks the settings for consistency.

        :type has_output: bool, optional
        :param has_output: ``True`` if an output destination is given other
            than via ``output``.
        :raises: :class:`~seisan2mseed.core.util.types.ConfigurationError`
        """
        if self.record_length not in VALID_RECORD_LENGTHS:
            msg = ("Invalid record length %s, must be a power of two between "
                   "%d and %d") % (self.record_length,
                                   VALID_RECORD_LENGTHS[0],
                                   VALID_RECORD_LENGTHS[-1])
            raise ConfigurationError(msg)
        if self.encoding not in ENCODINGS:
            msg = "Unsupported encoding %s, choose one of %s" % (
                self.encoding, sorted(ENCODINGS))
            raise ConfigurationError(msg)
        if self.byteorder not in BYTEORDERS:
            msg = "Invalid byte order %s, choose 0 or 1" % self.byteorder
            raise ConfigurationError(msg)
        if self.buffer_all and not (self.output or has_output):
            msg = "Need an output file when buffering all input"
            raise ConfigurationError(msg)

    def reading_options(self):
        """
        Keyword arguments for reading SEISAN files.
        """
        return {
            'network': self.network,
            'location': self.location,
            'channel_map': self.channel_map,
            'retain_future_year': self.retain_future_year,
        }

    def packing_options(self):
        """
        Keyword arguments for the Mini-SEED packer, see
        :class:`~seisan2mseed.io.mseed.packer.MSEEDPacker`.
        """
        return {
            'record_length': self.record_length,
            'encoding': self.encoding,
            'byteorder': self.byteorder,
        }
