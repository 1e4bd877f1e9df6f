# conftest.py
import numpy as np
import pytest

from arraygrid import reset_config


def create_test_buffer():
    """4x4 single-channel grid holding 1..16 row by row"""
    return np.arange(1, 17, dtype=np.int64).reshape(4, 4, 1)


@pytest.fixture
def sample_buffer():
    return create_test_buffer()


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends on the default parameters"""
    reset_config()
    yield
    reset_config()
