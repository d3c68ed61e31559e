"""Dense matrix backed by a 2-D numpy array.

Satisfies the MatrixLike protocol with bounds-checked cell access.
"""

from __future__ import annotations

import numpy as np

from core.errors import OutOfRangeError

__all__ = ["Matrix"]


class Matrix:
    """A rows x cols float64 matrix.

    Attributes:
        _data: Internal 2-D float64 array.

    Example:
        >>> m = Matrix.zeros(2, 3)
        >>> m.set(1, 2, 5.0)
        >>> m.get(1, 2)
        5.0
    """

    def __init__(self, data: np.ndarray | list[list[float]]) -> None:
        """Initialize from a 2-D array or rectangular nested list.

        Args:
            data: Initial values; copied.

        Raises:
            ValueError: If data is not 2-dimensional.
        """
        arr = np.array(data, dtype=np.float64, copy=True)
        if arr.ndim != 2:
            raise ValueError(f"data must be 2-dimensional, got ndim={arr.ndim}")
        self._data = arr

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Create a zero-filled matrix."""
        return cls(np.zeros((rows, cols), dtype=np.float64))

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def data(self) -> np.ndarray:
        """A copy of the underlying values."""
        return self._data.copy()

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfRangeError(
                f"cell ({row}, {col}) out of bounds for {self.rows}x{self.cols} matrix"
            )

    def get(self, row: int, col: int) -> float:
        self._check(row, col)
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check(row, col)
        self._data[row, col] = value
