from __future__ import annotations

import numpy as np
import pytest

from core.errors import OutOfRangeError
from core.protocols import MatrixLike
from models.matrix import Matrix


def test_matrix_extent_and_access() -> None:
    m = Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    assert isinstance(m, MatrixLike)
    assert (m.rows, m.cols) == (2, 3)
    assert m.get(1, 2) == 6.0
    m.set(0, 0, -1.0)
    assert m.get(0, 0) == -1.0


def test_matrix_copies_input_and_output() -> None:
    src = np.zeros((2, 2))
    m = Matrix(src)
    src[0, 0] = 5.0
    assert m.get(0, 0) == 0.0
    m.data[1, 1] = 5.0
    assert m.get(1, 1) == 0.0


def test_matrix_rejects_non_2d() -> None:
    with pytest.raises(ValueError):
        Matrix(np.zeros(3))


@pytest.mark.parametrize("row,col", [(2, 0), (0, 2), (-1, 0)])
def test_matrix_out_of_range(row: int, col: int) -> None:
    m = Matrix.zeros(2, 2)
    with pytest.raises(OutOfRangeError):
        m.get(row, col)
    with pytest.raises(OutOfRangeError):
        m.set(row, col, 1.0)
