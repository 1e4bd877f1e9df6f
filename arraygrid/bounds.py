# arraygrid/bounds.py
import numpy as np


def clamp(value, low, high_exclusive):
    """
    Map value into the half-open interval [low, high_exclusive)

    Values below low snap to low, values at or above high_exclusive snap to
    high_exclusive - 1.
    """
    if value < low:
        return low
    if value >= high_exclusive:
        return high_exclusive - 1
    return value


def clamp_indices(start, count, extent):
    """
    Indices start .. start + count - 1, each clamped into [0, extent)

    Same result as clamp(i, 0, extent) applied to every index.
    """
    return np.clip(np.arange(start, start + count), 0, extent - 1)
