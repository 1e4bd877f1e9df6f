# arraygrid/patches.py
"""
Copying channels and fixed-size windows out of a grid

Windows behave as if the grid were padded to infinity by repeating its
border rows and columns (clamp-to-edge).
"""
import numpy as np

from .bounds import clamp_indices
from .errors import InvalidDimensionsError


def extract_channel(grid, channel):
    """
    Copy one channel into a fresh (rows, columns) array

    Not mode-aware: on an integral grid the stored cumulative values are
    copied as they are.
    """
    return grid.raw_array[:grid.rows, :grid.columns, channel].copy()


def extract_rectangle(grid, start_row, start_column, height, width):
    """
    Copy a height x width window (all channels) starting at
    (start_row, start_column)

    Args:
        grid: IntegerGrid to copy from
        start_row: Starting row, may be negative or past the last row
        start_column: Starting column, may be negative or past the last column
        height: Number of rows in the window
        width: Number of columns in the window

    Returns:
        Fresh (height, width, channels) array. Every out-of-range row or
        column reads the nearest border row or column, so a window wholly
        outside the grid repeats a single border cell.
    """
    if height < 0 or width < 0:
        raise InvalidDimensionsError(f"Window size must be non-negative, got {height}x{width}")

    row_index = clamp_indices(start_row, height, grid.rows)
    column_index = clamp_indices(start_column, width, grid.columns)

    # fancy indexing always yields a copy
    return grid.raw_array[np.ix_(row_index, column_index)]
