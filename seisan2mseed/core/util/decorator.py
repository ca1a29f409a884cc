# -*- coding: utf-8 -*-
"""
Decorator used in seisan2mseed.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import decorator


@decorator.decorator
def _open_file(func, *args, **kwargs):
    """
    Ensure a binary file buffer is passed as first argument to the
    decorated function.

    Paths are opened (and closed again on every exit path of the decorated
    function), file-like objects are passed through untouched.

    :param func: callable that takes at least one argument;
        the first argument must be treated as a buffer.
    :return: callable
    """
    first_arg = args[0]
    if hasattr(first_arg, 'read'):
        return func(*args, **kwargs)
    with open(first_arg, 'rb') as fh:
        args = tuple([fh] + list(args[1:]))
        return func(*args, **kwargs)
