# arraygrid/config.py
"""
Default parameters for grids and window scans, with optional JSON override
"""
import json
import logging
import os

import numpy as np

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PARAMS = {
    # Storage dtype of newly allocated buffers
    'dtype': 'int64',

    # Accumulator dtype for raw-mode rectangle sums
    'sum_dtype': 'int64',

    # Sliding window stride (cells) when a scan is given no explicit stride
    'window_stride': 1,
}

_params = dict(DEFAULT_PARAMS)


def _validate(params):
    for key in ('dtype', 'sum_dtype'):
        try:
            dtype = np.dtype(params[key])
        except TypeError as e:
            raise ConfigError(f"Invalid {key} '{params[key]}': {e}") from e
        if dtype.kind != 'i':
            raise ConfigError(f"{key} must be a signed integer dtype, got {dtype}")

    stride = params['window_stride']
    if isinstance(stride, bool) or not isinstance(stride, (int, np.integer)) or stride <= 0:
        raise ConfigError(f"window_stride must be a positive int, got {stride!r}")


def load_config(path=None, **overrides):
    """
    Build the active configuration

    Args:
        path: Optional JSON file whose keys override the defaults
        **overrides: Keyword overrides applied after the file

    Returns:
        The merged parameter dict (a copy)
    """
    global _params

    config = {}
    if path is not None:
        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")
        with open(path, 'r') as f:
            config = json.load(f)
        logger.debug("Loaded grid config from %s", path)

    params = {**DEFAULT_PARAMS, **config, **overrides}

    unknown = set(params) - set(DEFAULT_PARAMS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    _validate(params)
    _params = params
    return dict(_params)


def set_params(**overrides):
    """Update the active configuration in place"""
    params = {**_params, **overrides}
    unknown = set(params) - set(DEFAULT_PARAMS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
    _validate(params)
    _params.update(overrides)


def get_param(name):
    if name not in _params:
        raise ConfigError(f"Unknown config key: {name}")
    return _params[name]


def reset_config():
    global _params
    _params = dict(DEFAULT_PARAMS)
