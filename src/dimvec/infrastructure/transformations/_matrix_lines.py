"""
Row and column views of matrices.

`MatrixLine` exposes one row or one column of a matrix as a rank-1
container. `MatrixLinesMixin` adds `row`, `col`, `rows` and `cols` to any
matrix providing `num_rows`, `num_cols`, `in_bounds`, `at` and `set`.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, Sequence

from ...domain._dim import D1, Dim, Idx, IdxLike
from ...domain._errors import OutOfBoundsError
from ..nvec._base import NVecMutBase
from ._delegating import delegate_set

ROW, COL = 0, 1


class MatrixLine(NVecMutBase):
    """
    Rank-1 view of row or column `position` of `matrix`.

    Element `k` of a row view is `matrix.at((position, k))`; element `k` of
    a column view is `matrix.at((k, position))`. Writes go to the matrix.
    Cells the matrix does not resolve (e.g. above the diagonal of a
    lower-triangular matrix) are out of bounds of the line as well.
    """

    def __init__(self, matrix: Any, axis: int, position: int, length: int) -> None:
        self._matrix = matrix
        self._axis = axis
        self._position = position
        self._length = length

    @property
    def matrix(self) -> Any:
        return self._matrix

    @property
    def is_row(self) -> bool:
        return self._axis == ROW

    @property
    def position(self) -> int:
        return self._position

    def _cell(self, k: int) -> Idx:
        if self._axis == ROW:
            return (self._position, k)
        return (k, self._position)

    @property
    def dim(self) -> Dim:
        return D1

    def card(self, prefix: IdxLike = ()) -> int:
        D1.card_idx(prefix)
        return self._length

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = D1.leq_idx(prefix)
        if not prefix:
            return True
        k = prefix[0]
        return 0 <= k < self._length and self._matrix.in_bounds(self._cell(k))

    def is_rectangular(self) -> bool:
        return True

    def is_bounded(self) -> bool:
        return True

    def indices(self) -> Iterator[Idx]:
        return ((k,) for k in range(self._length) if self.in_bounds((k,)))

    def _checked_cell(self, idx: IdxLike) -> Idx:
        (k,) = D1.idx(idx)
        if not 0 <= k < self._length:
            raise OutOfBoundsError((k,), f"line has {self._length} elements")
        return self._cell(k)

    def at(self, idx: IdxLike) -> Any:
        return self._matrix.at(self._checked_cell(idx))

    def set(self, idx: IdxLike, value: Any) -> None:
        delegate_set(self._matrix, self._checked_cell(idx), value)

    def _repr_fields(self) -> Sequence[str]:
        name = "row" if self._axis == ROW else "col"
        return (f"{name}={self._position}",)


class MatrixLinesMixin:
    """Row and column access for matrices exposing `num_rows` / `num_cols`."""

    def row(self, i: int) -> MatrixLine:
        """
        Return row `i` as a rank-1 container of length `num_cols`.

        Raises
        ------
        OutOfBoundsError
            If `i` is not a row of the matrix.
        """
        i = operator.index(i)
        if not 0 <= i < self.num_rows:
            raise OutOfBoundsError((i,), f"matrix has {self.num_rows} rows")
        return MatrixLine(self, ROW, i, self.num_cols)

    def col(self, j: int) -> MatrixLine:
        """
        Return column `j` as a rank-1 container of length `num_rows`.

        Raises
        ------
        OutOfBoundsError
            If `j` is not a column of the matrix.
        """
        j = operator.index(j)
        if not 0 <= j < self.num_cols:
            raise OutOfBoundsError((j,), f"matrix has {self.num_cols} columns")
        return MatrixLine(self, COL, j, self.num_rows)

    def rows(self) -> Iterator[MatrixLine]:
        return (self.row(i) for i in range(self.num_rows))

    def cols(self) -> Iterator[MatrixLine]:
        return (self.col(j) for j in range(self.num_cols))
