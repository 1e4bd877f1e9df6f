# arraygrid/windows.py
"""
Sliding fixed-size windows across a grid
"""
import logging

from tqdm import tqdm

from .config import get_param
from .errors import InvalidDimensionsError
from .patches import extract_rectangle
from .rectangle_sum import compute_rectangle_sum

logger = logging.getLogger(__name__)


def generate_windows(rows, columns, height, width, stride=None, include_partial=False):
    """
    Generate top-left corners of sliding windows

    Args:
        rows, columns: Grid extents
        height, width: Window size
        stride: Step in cells along both axes (config 'window_stride' if None)
        include_partial: Also emit windows that hang over the bottom/right
                         border. Without it, windows larger than the grid
                         are skipped.

    Returns:
        List of (row, column) tuples in row-major order
    """
    if height <= 0 or width <= 0:
        raise InvalidDimensionsError(f"Window size must be positive, got {height}x{width}")
    if stride is None:
        stride = get_param('window_stride')
    if stride <= 0:
        raise InvalidDimensionsError(f"Stride must be positive, got {stride}")

    if include_partial:
        last_row, last_column = rows, columns
    else:
        last_row, last_column = rows - height + 1, columns - width + 1

    windows = [
        (r, c)
        for r in range(0, max(last_row, 0), stride)
        for c in range(0, max(last_column, 0), stride)
    ]
    logger.debug("Generated %d windows of %dx%d", len(windows), height, width)
    return windows


def _iterate(windows, progress, desc):
    if progress:
        return tqdm(windows, desc=desc)
    return windows


def scan_rectangle_sums(grid, height, width, channel=0, stride=None,
                        include_partial=False, progress=False):
    """
    Rectangle sum of every sliding window

    Returns:
        List of (row, column, sum) tuples
    """
    windows = generate_windows(grid.rows, grid.columns, height, width, stride, include_partial)
    return [
        (r, c, compute_rectangle_sum(grid, r, c, height, width, channel))
        for r, c in _iterate(windows, progress, "Summing windows")
    ]


def scan_patches(grid, height, width, stride=None, include_partial=False, progress=False):
    """Yield (row, column, patch) for every sliding window"""
    windows = generate_windows(grid.rows, grid.columns, height, width, stride, include_partial)
    for r, c in _iterate(windows, progress, "Extracting patches"):
        yield r, c, extract_rectangle(grid, r, c, height, width)
