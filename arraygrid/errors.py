# arraygrid/errors.py
"""
Exceptions raised by the grid, its engines and the config layer
"""


class GridError(Exception):
    """Base class for every error raised by arraygrid"""


class InvalidDimensionsError(GridError, ValueError):
    """Non-positive or non-integer extents, or a buffer of the wrong rank"""


class ModeError(GridError, ValueError):
    """Requested mode change is redundant or cannot be applied"""


class BoundsViolationError(GridError, IndexError):
    """Checked accessor was given an index outside the buffer"""

    def __init__(self, index, shape):
        self.index = tuple(index)
        self.shape = tuple(shape)
        super().__init__(f"Index {self.index} out of bounds for buffer of shape {self.shape}")


class ConfigError(GridError, ValueError):
    """Configuration value is missing or invalid"""


class InvalidBufferError(GridError, ValueError):
    """Buffer is not a numpy array of a signed integer dtype"""
