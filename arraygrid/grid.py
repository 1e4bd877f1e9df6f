# arraygrid/grid.py
"""
Dense multi-channel integer grid holding either raw values or their
integral (summed-area) transform
"""
import logging
from enum import Enum

import numpy as np

from .config import get_param
from .errors import BoundsViolationError, InvalidBufferError, InvalidDimensionsError, ModeError
from .patches import extract_channel, extract_rectangle
from .rectangle_sum import compute_rectangle_mean, compute_rectangle_sum

logger = logging.getLogger(__name__)


class GridMode(Enum):
    RAW = 'raw'
    INTEGRAL = 'integral'


def _validate_extent(value, name):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensionsError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidDimensionsError(f"{name} must be positive, got {value}")
    return int(value)


def _as_mode(mode):
    if isinstance(mode, GridMode):
        return mode
    try:
        return GridMode(mode)
    except ValueError:
        raise ModeError(f"Unknown grid mode: {mode!r}") from None


class IntegerGrid:
    """
    Rows x columns x channels integer buffer with raw/integral bookkeeping

    In RAW mode every buffer cell is a value. In INTEGRAL mode the buffer
    carries an extra leading zero row and column, so the logical rows and
    columns are one less than the buffer's physical extents.
    """

    def __init__(self, rows, columns, channels=1, dtype=None):
        """
        Allocate a zero-filled RAW grid

        Args:
            rows: Number of rows
            columns: Number of columns
            channels: Number of channels
            dtype: Signed integer dtype of the buffer (config 'dtype' if None)
        """
        self._mode = GridMode.RAW
        self._dtype = np.dtype(dtype if dtype is not None else get_param('dtype'))
        if self._dtype.kind != 'i':
            raise InvalidBufferError(f"Grid dtype must be a signed integer type, got {self._dtype}")
        self.set_dimensions(rows, columns, channels)

    @classmethod
    def from_array(cls, buffer, mode=GridMode.RAW, is_integral=None):
        """
        Adopt an existing buffer without copying it

        Args:
            buffer: (H, W) or (H, W, C) signed integer ndarray. A 2D buffer is
                    wrapped as a single-channel view, so writes still alias it.
            mode: GridMode (or its value) the buffer is stored in
            is_integral: Shorthand for mode; overrides it when given

        Returns:
            IntegerGrid sharing storage with buffer
        """
        if is_integral is not None:
            mode = GridMode.INTEGRAL if is_integral else GridMode.RAW

        grid = cls.__new__(cls)
        grid._mode = _as_mode(mode)
        grid._data = None
        grid.set_data(buffer)
        return grid

    # ------------------------------------------------------------------
    # Extents and mode
    # ------------------------------------------------------------------

    @property
    def rows(self):
        return self._rows

    @property
    def columns(self):
        return self._columns

    @property
    def channels(self):
        return self._channels

    @property
    def shape(self):
        """Logical (rows, columns, channels)"""
        return (self._rows, self._columns, self._channels)

    @property
    def physical_shape(self):
        return self._data.shape

    @property
    def dtype(self):
        return self._dtype

    @property
    def mode(self):
        return self._mode

    @property
    def is_integral(self):
        return self._mode is GridMode.INTEGRAL

    def _border(self):
        return 1 if self._mode is GridMode.INTEGRAL else 0

    def convert_to(self, mode):
        """
        Switch between RAW and INTEGRAL interpretation of the buffer

        The buffer is not touched: the caller must already have stored data
        laid out for the target mode. RAW -> INTEGRAL drops the logical rows
        and columns by one, INTEGRAL -> RAW restores them.
        """
        mode = _as_mode(mode)
        if mode is self._mode:
            raise ModeError(f"Grid is already in {mode.value} mode")

        if mode is GridMode.INTEGRAL:
            if self._rows < 2 or self._columns < 2:
                raise ModeError(
                    f"A {self._rows}x{self._columns} buffer is too small to hold an integral image"
                )
            self._rows -= 1
            self._columns -= 1
        else:
            self._rows += 1
            self._columns += 1

        self._mode = mode
        logger.debug("Converted grid to %s mode, logical extents now %s", mode.value, self.shape)
        return self

    # ------------------------------------------------------------------
    # Storage lifecycle
    # ------------------------------------------------------------------

    def set_data(self, buffer):
        """
        Replace the buffer wholesale. No copy is made.

        Extents are recomputed from the buffer's own shape; the mode is kept.
        """
        if not isinstance(buffer, np.ndarray):
            raise InvalidBufferError(f"Buffer must be a numpy array, got {type(buffer).__name__}")
        if buffer.ndim == 2:
            buffer = buffer[:, :, np.newaxis]
        if buffer.ndim != 3:
            raise InvalidDimensionsError(f"Buffer must be 2D or 3D, got {buffer.ndim}D")
        if buffer.dtype.kind != 'i':
            raise InvalidBufferError(f"Buffer must hold signed integers, got {buffer.dtype}")

        border = self._border()
        rows = buffer.shape[0] - border
        columns = buffer.shape[1] - border
        channels = buffer.shape[2]
        if rows <= 0 or columns <= 0 or channels <= 0:
            raise InvalidDimensionsError(
                f"Buffer of shape {buffer.shape} leaves no cells in {self._mode.value} mode"
            )

        self._data = buffer
        self._dtype = buffer.dtype
        self._rows, self._columns, self._channels = rows, columns, channels
        logger.debug("Adopted %s buffer of shape %s", self._mode.value, buffer.shape)

    def set_dimensions(self, rows, columns, channels):
        """
        Allocate a new zero-filled buffer. Existing data is discarded.

        In INTEGRAL mode the buffer gets the extra leading row and column.
        """
        rows = _validate_extent(rows, 'rows')
        columns = _validate_extent(columns, 'columns')
        channels = _validate_extent(channels, 'channels')

        border = self._border()
        self._data = np.zeros((rows + border, columns + border, channels), dtype=self._dtype)
        self._rows, self._columns, self._channels = rows, columns, channels
        logger.debug("Allocated %s buffer of shape %s", self._mode.value, self._data.shape)

    def clear(self):
        """Replace the buffer with zeros of the same shape"""
        self._data = np.zeros(self._data.shape, dtype=self._dtype)

    @property
    def raw_array(self):
        """
        The underlying buffer itself, not a copy

        Writes through it bypass the grid's bookkeeping and are visible to
        every later read through the grid.
        """
        return self._data

    def view(self):
        """Read-only view of the buffer"""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def copy(self):
        return IntegerGrid.from_array(self._data.copy(), mode=self._mode)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value):
        self._data[index] = value

    def get(self, row, column, channel=0):
        # unchecked, out-of-range indices surface numpy's IndexError
        return int(self._data[row, column, channel])

    def set(self, row, column, channel, value):
        self._data[row, column, channel] = value

    def _check_index(self, row, column, channel):
        index = (row, column, channel)
        for i, extent in zip(index, self._data.shape):
            if not 0 <= i < extent:
                raise BoundsViolationError(index, self._data.shape)

    def get_checked(self, row, column, channel=0):
        self._check_index(row, column, channel)
        return int(self._data[row, column, channel])

    def set_checked(self, row, column, channel, value):
        self._check_index(row, column, channel)
        self._data[row, column, channel] = value

    # ------------------------------------------------------------------
    # Region queries and extraction
    # ------------------------------------------------------------------

    def compute_rectangle_sum(self, start_row, start_column, height, width, channel=0):
        """Sum of channel over the clamped rectangle, see rectangle_sum.compute_rectangle_sum"""
        return compute_rectangle_sum(self, start_row, start_column, height, width, channel)

    def compute_rectangle_mean(self, start_row, start_column, height, width, channel=0):
        return compute_rectangle_mean(self, start_row, start_column, height, width, channel)

    def extract_channel(self, channel):
        return extract_channel(self, channel)

    def extract_rectangle(self, start_row, start_column, height, width):
        """Border-replicated (height, width, channels) patch, see patches.extract_rectangle"""
        return extract_rectangle(self, start_row, start_column, height, width)

    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, IntegerGrid):
            return NotImplemented
        return self._mode is other._mode and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return (f"IntegerGrid(rows={self._rows}, columns={self._columns}, "
                f"channels={self._channels}, mode={self._mode.value}, dtype={self._dtype})")
