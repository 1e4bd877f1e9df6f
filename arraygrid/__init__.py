# arraygrid/__init__.py
from .bounds import clamp, clamp_indices
from .config import DEFAULT_PARAMS, get_param, load_config, reset_config, set_params
from .errors import (
    BoundsViolationError,
    ConfigError,
    GridError,
    InvalidBufferError,
    InvalidDimensionsError,
    ModeError,
)
from .grid import GridMode, IntegerGrid
from .integral_image import compute_integral, integral_grid
from .patches import extract_channel, extract_rectangle
from .rectangle_sum import compute_rectangle_mean, compute_rectangle_sum
from .windows import generate_windows, scan_patches, scan_rectangle_sums

__version__ = "0.1.0"

__all__ = [
    'IntegerGrid', 'GridMode',
    'clamp', 'clamp_indices',
    'compute_rectangle_sum', 'compute_rectangle_mean',
    'extract_channel', 'extract_rectangle',
    'compute_integral', 'integral_grid',
    'generate_windows', 'scan_rectangle_sums', 'scan_patches',
    'DEFAULT_PARAMS', 'load_config', 'get_param', 'set_params', 'reset_config',
    'GridError', 'InvalidDimensionsError', 'InvalidBufferError', 'ModeError',
    'BoundsViolationError', 'ConfigError',
]
