"""
Matrix views over rectangular rank-2 containers.

A `Matrix` reads a rectangular rank-2 container either row by row (the
outer axis holds the rows) or column by column (the outer axis holds the
columns). Coordinates are always `(row, col)`; only the mapping onto the
wrapped container and the traversal order depend on the storage order.

Design
------
- Rectangularity is checked once, at construction. Later mutations of the
  wrapped container that make it jagged are not detected.
- `num_rows` and `num_cols` are read from the wrapped container on every
  call, so appending rows to a wrapped list is visible through the view.
- Traversal follows the storage order: a column-major matrix yields its
  elements column by column.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np

from ...domain._constants import UNBOUNDED
from ...domain._dim import D2, Dim, Idx, IdxLike
from ...domain._errors import InvalidConstructionError, OutOfBoundsError
from .._traversal import iter_indices
from ..adapters import as_nvec
from ..nvec._base import NVecBase, NVecMutBase
from ._delegating import delegate_set
from ._matrix_lines import MatrixLinesMixin


class Matrix(MatrixLinesMixin, NVecMutBase):
    """
    Matrix view of a rectangular rank-2 container.

    Parameters
    ----------
    data : INVec
        Rectangular, bounded rank-2 container (or anything `as_nvec`
        accepts at rank 2).
    column_major : bool
        If True, `data.at((j, i))` is element `(i, j)` of the matrix.

    Raises
    ------
    InvalidConstructionError
        If `data` is jagged or unbounded.

    Examples
    --------
    >>> m = Matrix([[1, 4], [2, 5], [3, 6]], column_major=True)
    >>> m.num_rows, m.num_cols
    (2, 3)
    >>> m.at((1, 2))
    6
    >>> list(m.all())
    [1, 4, 2, 5, 3, 6]
    """

    def __init__(self, data: Any, column_major: bool = False) -> None:
        self._data = as_nvec(data, 2)
        rectangular = self._data.is_rectangular()
        if not rectangular or self._inner_len() >= UNBOUNDED:
            kind = "unbounded" if rectangular or self._data.is_unbounded() else "jagged"
            raise InvalidConstructionError(
                f"A matrix needs a rectangular rank-2 container, got a {kind} "
                f"{type(self._data).__name__}."
            )
        self._column_major = bool(column_major)

    @property
    def data(self) -> NVecBase:
        return self._data

    def into_inner(self) -> NVecBase:
        return self._data

    @property
    def is_column_major(self) -> bool:
        return self._column_major

    def _outer_len(self) -> int:
        return self._data.card(())

    def _inner_len(self) -> int:
        return self._data.card((0,)) if self._outer_len() > 0 else 0

    @property
    def num_rows(self) -> int:
        return self._inner_len() if self._column_major else self._outer_len()

    @property
    def num_cols(self) -> int:
        return self._outer_len() if self._column_major else self._inner_len()

    def _storage_idx(self, i: int, j: int) -> Idx:
        return (j, i) if self._column_major else (i, j)

    # ---------------------------------------------------------------------
    # Shape
    # ---------------------------------------------------------------------
    @property
    def dim(self) -> Dim:
        return D2

    def card(self, prefix: IdxLike = ()) -> int:
        prefix = D2.card_idx(prefix)
        if not prefix:
            return self.num_rows
        if not 0 <= prefix[0] < self.num_rows:
            raise OutOfBoundsError(prefix, f"matrix has {self.num_rows} rows")
        return self.num_cols

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = D2.leq_idx(prefix)
        limits = (self.num_rows, self.num_cols)
        return all(0 <= i < n for i, n in zip(prefix, limits))

    def is_rectangular(self) -> bool:
        return True

    def is_bounded(self) -> bool:
        return True

    def indices(self) -> Iterator[Idx]:
        if not self._column_major:
            return iter_indices(self.card, 2)
        num_rows, num_cols = self.num_rows, self.num_cols
        return ((i, j) for j in range(num_cols) for i in range(num_rows))

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def _checked_storage_idx(self, idx: IdxLike) -> Idx:
        idx = D2.idx(idx)
        if not self.in_bounds(idx):
            raise OutOfBoundsError(
                idx, f"matrix is {self.num_rows} x {self.num_cols}"
            )
        return self._storage_idx(*idx)

    def at(self, idx: IdxLike) -> Any:
        return self._data.at(self._checked_storage_idx(idx))

    def set(self, idx: IdxLike, value: Any) -> None:
        delegate_set(self._data, self._checked_storage_idx(idx), value)

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        array = self._data.to_numpy(dtype)
        return array.T if self._column_major else array

    def _repr_fields(self) -> Sequence[str]:
        return (
            f"num_rows={self.num_rows}",
            f"num_cols={self.num_cols}",
            f"column_major={self._column_major}",
        )
