# -*- coding: utf-8 -*-
"""
Version handling of seisan2mseed.

The version string is kept in the ``RELEASE-VERSION`` file next to the
package ``__init__.py`` so it can be read by ``setup.py`` without importing
the package (which would require all dependencies at install time).

Any .py files that are used at install time must not import anything from
seisan2mseed or third party packages.
"""
import os


VERSION_FILE = os.path.join(os.path.dirname(os.path.dirname(
    os.path.dirname(os.path.abspath(__file__)))), 'RELEASE-VERSION')


def read_release_version():
    try:
        with open(VERSION_FILE, "r") as fh:
            version = fh.readlines()[0]
        return version.strip()
    except Exception:
        return None


def get_version():
    return read_release_version() or '0.0.0+unknown'


if __name__ == "__main__":
    print(get_version())
