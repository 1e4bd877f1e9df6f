# arraygrid/integral_image.py
import logging

import numpy as np

from .config import get_param
from .errors import InvalidDimensionsError, ModeError
from .grid import GridMode, IntegerGrid

logger = logging.getLogger(__name__)


def compute_integral(raw, dtype=None):
    """
    Compute integral image (summed area table) in the layout IntegerGrid expects

    Args:
        raw: (H, W) or (H, W, C) integer array
        dtype: Signed integer dtype of the result (config 'dtype' if None)

    Returns:
        (H + 1, W + 1, C) array with a leading zero row and column, where
        I[r, c] = raw[:r, :c].sum() per channel
    """
    raw = np.asarray(raw)
    if raw.ndim == 2:
        raw = raw[:, :, np.newaxis]
    if raw.ndim != 3 or 0 in raw.shape:
        raise InvalidDimensionsError(f"Integral image needs a non-empty 2D or 3D array, got shape {raw.shape}")

    dtype = np.dtype(dtype if dtype is not None else get_param('dtype'))

    # Compute cumulative sums
    raw = raw.astype(dtype, copy=False)
    integral = np.cumsum(np.cumsum(raw, axis=0), axis=1)

    # Pad with zeros so the four-corner formula needs no border cases
    return np.pad(integral, ((1, 0), (1, 0), (0, 0)), mode='constant')


def integral_grid(source, dtype=None):
    """
    Build an INTEGRAL mode grid from a raw array or a RAW mode grid

    The source is left untouched.
    """
    if isinstance(source, IntegerGrid):
        if source.is_integral:
            raise ModeError("Source grid already holds an integral image")
        source = source.raw_array

    integral = compute_integral(source, dtype=dtype)
    logger.debug("Built integral image of shape %s", integral.shape)
    return IntegerGrid.from_array(integral, mode=GridMode.INTEGRAL)
