"""
Square layouts storing only part of an `n x n` matrix.

- `Diagonal`: cells `(i, i)`, stored in order; `size == n`.
- `LowerTriangular`: cells with `j <= i`, row by row; `size == n(n+1)/2`.
- `UpperTriangular`: cells with `i <= j`, row by row; `size == n(n+1)/2`.

Folding is closed-form in all three cases. Unfolding triangular offsets
inverts the row-start formula with an integer square root.
"""

from __future__ import annotations

from math import isqrt

from ....domain._dim import Idx
from ._base import MatrixLayoutBase


class _SquareLayout(MatrixLayoutBase):
    def __init__(self, n: int) -> None:
        super().__init__(n, n)

    @property
    def n(self) -> int:
        return self._num_rows

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._num_rows})"


class Diagonal(_SquareLayout):
    """Only the main diagonal: `(i, i) -> i`."""

    @property
    def size(self) -> int:
        return self._num_rows

    def is_valid(self, i: int, j: int) -> bool:
        return 0 <= i == j < self._num_rows

    def _offset(self, i: int, j: int) -> int:
        return i

    def _unfold(self, k: int) -> Idx:
        return k, k


def _lower_unfold(k: int) -> Idx:
    i = (isqrt(8 * k + 1) - 1) // 2
    return i, k - i * (i + 1) // 2


class LowerTriangular(_SquareLayout):
    """Cells on or below the diagonal: `(i, j) -> i(i+1)/2 + j` for `j <= i`."""

    @property
    def size(self) -> int:
        n = self._num_rows
        return n * (n + 1) // 2

    def is_valid(self, i: int, j: int) -> bool:
        return 0 <= j <= i < self._num_rows

    def _offset(self, i: int, j: int) -> int:
        return i * (i + 1) // 2 + j

    def _unfold(self, k: int) -> Idx:
        return _lower_unfold(k)


class UpperTriangular(_SquareLayout):
    """Cells on or above the diagonal: `(i, j) -> ((2n-1)i - i^2)/2 + j` for `i <= j`."""

    @property
    def size(self) -> int:
        n = self._num_rows
        return n * (n + 1) // 2

    def is_valid(self, i: int, j: int) -> bool:
        return 0 <= i <= j < self._num_rows

    def _offset(self, i: int, j: int) -> int:
        n = self._num_rows
        return ((2 * n - 1) * i - i * i) // 2 + j

    def _unfold(self, k: int) -> Idx:
        # counted from the end, rows have 1, 2, ... cells like a lower triangle
        a, b = _lower_unfold(self.size - 1 - k)
        i = self._num_rows - 1 - a
        return i, i + a - b
