# arraygrid/rectangle_sum.py
"""
Rectangle sums over one channel of a grid

Integral-mode grids answer in O(1) with the usual four-corner formula,
raw-mode grids are summed directly. Coordinates never fail: the rectangle is
clamped into the grid and always covers at least one cell.
"""
from .bounds import clamp
from .config import get_param


def _clamped_bounds(rows, columns, start_row, start_column, height, width):
    min_row = clamp(start_row, 0, rows)
    min_column = clamp(start_column, 0, columns)
    max_row = clamp(start_row + height, 1, rows + 1)
    max_column = clamp(start_column + width, 1, columns + 1)

    # collapsed windows still cover a one-cell strip
    if max_row == min_row:
        max_row = min_row + 1
    if max_column == min_column:
        max_column = min_column + 1

    return min_row, min_column, max_row, max_column


def compute_rectangle_sum(grid, start_row, start_column, height, width, channel=0):
    """
    Sum of channel values in the rectangle starting at (start_row, start_column)
    with a size of height x width

    Args:
        grid: IntegerGrid to query
        start_row: Starting row (may lie outside the grid)
        start_column: Starting column (may lie outside the grid)
        height: Number of rows in the rectangle
        width: Number of columns in the rectangle
        channel: Channel to draw values from

    Returns:
        Python int. The integral buffer must satisfy
        I(r, c) = sum(raw[:r, :c]); no validation is done here.
    """
    min_row, min_column, max_row, max_column = _clamped_bounds(
        grid.rows, grid.columns, start_row, start_column, height, width
    )
    data = grid.raw_array

    if grid.is_integral:
        # D - B - C + A on Python ints
        return (int(data[min_row, min_column, channel])
                - int(data[max_row, min_column, channel])
                - int(data[min_row, max_column, channel])
                + int(data[max_row, max_column, channel]))

    region = data[min_row:max_row, min_column:max_column, channel]
    return int(region.sum(dtype=get_param('sum_dtype')))


def compute_rectangle_mean(grid, start_row, start_column, height, width, channel=0):
    """Helper: density = sum / clamped area"""
    min_row, min_column, max_row, max_column = _clamped_bounds(
        grid.rows, grid.columns, start_row, start_column, height, width
    )
    area = (max_row - min_row) * (max_column - min_column)
    total = compute_rectangle_sum(grid, start_row, start_column, height, width, channel)
    return total / area
