#! /usr/bin/env python
# -*- coding: utf-8 -*-
"""
seisan2mseed - conversion of SEISAN waveform files to Mini-SEED.

seisan2mseed reads the binary waveform files written by the SEISAN
earthquake analysis software, both the format of SEISAN 7.0 and later (in
either byte order) and the format written on the PC by earlier versions.
Channel samples are normalized to 32 bit integers, contiguous blocks of a
channel are merged and the resulting traces are packed into Mini-SEED
records with ObsPy.

:copyright:
    The ObsPy Development Team (devs@obspy.org)
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""

import inspect
import os
import shutil
import sys

from setuptools import find_packages, setup


# The minimum python version which can be used to run seisan2mseed
MIN_PYTHON_VERSION = (3, 8)

# Fail fast if the user is on an unsupported version of python.
if sys.version_info < MIN_PYTHON_VERSION:
    msg = ("seisan2mseed requires python version >= {}".format(
           MIN_PYTHON_VERSION) +
           " you are using python version {}".format(sys.version_info))
    print(msg, file=sys.stderr)
    sys.exit(1)

# Directory of the current file in the (hopefully) most reliable way
# possible, according to krischer
SETUP_DIRECTORY = os.path.dirname(os.path.abspath(inspect.getfile(
    inspect.currentframe())))

# Import the version string.
# Any .py files that are used at install time must not import anything from
# seisan2mseed or third party packages!
UTIL_PATH = os.path.join(SETUP_DIRECTORY, "seisan2mseed", "core", "util")
sys.path.insert(0, UTIL_PATH)
from version import get_version  # @UnresolvedImport
sys.path.pop(0)

DOCSTRING = __doc__.split("\n")

# Hard dependencies needed to install/run seisan2mseed.
INSTALL_REQUIRES = [
    'numpy>=1.20',
    'obspy>=1.4',
    'decorator',
]
# Extra dependencies
EXTRAS_REQUIRES = {
    'tests': [
        'pytest',
    ],
}
EXTRAS_REQUIRES['all'] = [dep for depl in EXTRAS_REQUIRES.values()
                          for dep in depl]


# package specific settings
KEYWORDS = [
    'MiniSEED', 'MSEED', 'SEED', 'SEISAN', 'Steim', 'seismology',
    'seismogram', 'waveform', 'conversion']

ENTRY_POINTS = {
    'console_scripts': [
        'seisan2mseed = seisan2mseed.scripts.seisan2mseed:main',
    ],
}


def setupPackage():
    # setup package
    setup(
        name='seisan2mseed',
        version=get_version(),
        description=DOCSTRING[1],
        long_description="\n".join(DOCSTRING[3:]),
        author='The ObsPy Development Team',
        author_email='devs@obspy.org',
        license='GNU Lesser General Public License, Version 3 (LGPLv3)',
        platforms='OS Independent',
        classifiers=[
            'Development Status :: 5 - Production/Stable',
            'Environment :: Console',
            'Intended Audience :: Science/Research',
            'License :: OSI Approved :: '
                'GNU Lesser General Public License v3 (LGPLv3)',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering',
            'Topic :: Scientific/Engineering :: Physics'],
        keywords=KEYWORDS,
        packages=find_packages(include=['seisan2mseed', 'seisan2mseed.*']),
        package_data={'seisan2mseed': ['RELEASE-VERSION']},
        zip_safe=False,
        python_requires=f'>={MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]}',
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRES,
        entry_points=ENTRY_POINTS,
    )


if __name__ == '__main__':
    if 'clean' in sys.argv and '--all' in sys.argv:
        # delete complete build directory
        path = os.path.join(SETUP_DIRECTORY, 'build')
        try:
            shutil.rmtree(path)
        except Exception:
            pass
    else:
        setupPackage()
