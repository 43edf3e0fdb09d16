"""
Dense rectangular layouts.
"""

from __future__ import annotations

from ....domain._dim import Idx
from ._base import MatrixLayoutBase


class RowMajor(MatrixLayoutBase):
    """`(i, j) -> i * num_cols + j`; rows are contiguous."""

    @property
    def size(self) -> int:
        return self._num_rows * self._num_cols

    def is_valid(self, i: int, j: int) -> bool:
        return 0 <= i < self._num_rows and 0 <= j < self._num_cols

    def _offset(self, i: int, j: int) -> int:
        return i * self._num_cols + j

    def _unfold(self, k: int) -> Idx:
        return divmod(k, self._num_cols)

    def __repr__(self) -> str:
        return f"RowMajor(num_rows={self._num_rows}, num_cols={self._num_cols})"


class ColumnMajor(MatrixLayoutBase):
    """`(i, j) -> j * num_rows + i`; columns are contiguous."""

    @property
    def size(self) -> int:
        return self._num_rows * self._num_cols

    def is_valid(self, i: int, j: int) -> bool:
        return 0 <= i < self._num_rows and 0 <= j < self._num_cols

    def _offset(self, i: int, j: int) -> int:
        return j * self._num_rows + i

    def _unfold(self, k: int) -> Idx:
        j, i = divmod(k, self._num_rows)
        return i, j

    def __repr__(self) -> str:
        return f"ColumnMajor(num_rows={self._num_rows}, num_cols={self._num_cols})"
