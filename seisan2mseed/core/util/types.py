# -*- coding: utf-8 -*-
"""
Exception and warning types used throughout seisan2mseed.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""


class Seisan2MSEEDException(Exception):
    pass


class Seisan2MSEEDReadingError(Seisan2MSEEDException):
    """
    Base class for all errors aborting the reading of a single input file.

    :type offset: int, optional
    :param offset: Byte offset in the input file the error relates to.
    """
    def __init__(self, msg, offset=None):
        super(Seisan2MSEEDReadingError, self).__init__(msg)
        self.offset = offset

    def __str__(self):
        msg = super(Seisan2MSEEDReadingError, self).__str__()
        if self.offset is None:
            return msg
        return "%s (at byte offset %d)" % (msg, self.offset)


class ConfigurationError(Seisan2MSEEDException, ValueError):
    pass


class Seisan2MSEEDWarning(UserWarning):
    pass
