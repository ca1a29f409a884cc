"""
seisan2mseed's testing configuration file.
"""
import numpy as np
import pytest

from seisan2mseed.core.util.testing import make_seisan_file
from seisan2mseed.io.seisan.headers import FormatVariant


@pytest.fixture
def seisan_file(tmp_path):
    """
    Returns a function writing a synthetic SEISAN file and returning its
    path, see :func:`~seisan2mseed.core.util.testing.make_seisan_file`.
    """
    def _seisan_file(channels, variant=FormatVariant.STANDARD,
                     byteorder='<', name='synthetic.seisan'):
        path = tmp_path / name
        path.write_bytes(make_seisan_file(channels, variant, byteorder))
        return str(path)
    return _seisan_file


@pytest.fixture
def three_channels():
    """
    Three channels of 32 bit samples of station TEST.
    """
    return [
        ({'component': 'S  Z'}, np.arange(100, dtype=np.int32) - 50),
        ({'component': 'S  N'}, np.arange(100, dtype=np.int32) * 1000),
        ({'component': 'S  E'}, -np.arange(100, dtype=np.int32)),
    ]
