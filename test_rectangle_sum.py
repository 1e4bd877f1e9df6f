# test_rectangle_sum.py
"""
Rectangle sums on raw and integral grids, including clamped windows
"""
import numpy as np
import pytest

from arraygrid import GridMode, IntegerGrid, compute_integral, compute_rectangle_sum, integral_grid


@pytest.fixture
def grids(sample_buffer):
    raw = IntegerGrid.from_array(sample_buffer)
    integral = IntegerGrid.from_array(compute_integral(sample_buffer), mode=GridMode.INTEGRAL)
    return raw, integral


def test_single_cell_equals_value(sample_buffer):
    grid = IntegerGrid.from_array(sample_buffer)
    for r in range(4):
        for c in range(4):
            assert grid.compute_rectangle_sum(r, c, 1, 1, 0) == grid.get(r, c, 0)


def test_known_sum_in_both_modes(grids):
    raw, integral = grids

    assert raw.compute_rectangle_sum(1, 1, 2, 2, 0) == 6 + 7 + 10 + 11
    assert integral.compute_rectangle_sum(1, 1, 2, 2, 0) == 34
    assert compute_rectangle_sum(integral, 0, 0, 4, 4) == sum(range(1, 17))


@pytest.mark.parametrize("window, expected", [
    ((0, 0, 0, 0), 1),          # zero-size window still covers one cell
    ((2, 1, 0, 2), 10 + 11),    # zero height, one-row strip
    ((-5, -5, 2, 2), 1),        # entirely above-left of the grid
    ((10, 10, 2, 2), 16),       # entirely below-right of the grid
    ((-1, -1, 3, 3), 1 + 2 + 5 + 6),
    ((2, 2, 10, 10), 11 + 12 + 15 + 16),
    ((-3, 1, 100, 1), 2 + 6 + 10 + 14),
])
def test_out_of_range_windows_are_clamped(grids, window, expected):
    raw, integral = grids
    assert raw.compute_rectangle_sum(*window) == expected
    assert integral.compute_rectangle_sum(*window) == expected


def test_raw_matches_integral_for_all_rectangles():
    rng = np.random.default_rng(0)
    values = rng.integers(-50, 50, size=(6, 7, 2))

    raw = IntegerGrid.from_array(values)
    integral = integral_grid(raw)

    for r0 in range(6):
        for c0 in range(7):
            for h in range(1, 7 - r0):
                for w in range(1, 8 - c0):
                    for ch in range(2):
                        expected = int(values[r0:r0 + h, c0:c0 + w, ch].sum())
                        assert raw.compute_rectangle_sum(r0, c0, h, w, ch) == expected
                        assert integral.compute_rectangle_sum(r0, c0, h, w, ch) == expected


def test_returns_python_int(grids):
    raw, integral = grids
    assert type(raw.compute_rectangle_sum(0, 0, 2, 2)) is int
    assert type(integral.compute_rectangle_sum(0, 0, 2, 2)) is int


def test_raw_sum_does_not_overflow_storage_dtype():
    values = np.full((4, 4), np.iinfo(np.int32).max, dtype=np.int32)
    grid = IntegerGrid.from_array(values)
    assert grid.compute_rectangle_sum(0, 0, 4, 4) == 16 * np.iinfo(np.int32).max


def test_rectangle_mean(grids):
    raw, integral = grids

    assert raw.compute_rectangle_mean(1, 1, 2, 2) == pytest.approx(34 / 4)
    assert integral.compute_rectangle_mean(1, 1, 2, 2) == pytest.approx(34 / 4)

    # area of the clamped window, not the requested one
    assert raw.compute_rectangle_mean(3, 3, 5, 5) == pytest.approx(16.0)
