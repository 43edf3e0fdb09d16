"""
Matrix layout base class.

Layouts are pure index arithmetic: `fold` maps an accepted cell `(i, j)`
to a flat offset in `range(size)` in O(1), `unfold` maps an offset back,
and every other cell is rejected with `InvalidLayoutIndexError` rather than
folded onto some other cell's storage.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Optional

from ....domain._dim import D2, Idx, IdxLike
from ....domain._errors import InvalidConstructionError, InvalidLayoutIndexError, OutOfBoundsError


def _dimension(name: str, n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise InvalidConstructionError(f"{name} must be non-negative, got {n}.")
    return n


class MatrixLayoutBase(ABC):
    """
    Base class implementing the `IMatrixLayout` contract.

    Subclasses implement `is_valid`, `_offset` (called only for valid
    cells), `_unfold` (called only for offsets in `range(size)`) and `size`.
    """

    def __init__(self, num_rows: int, num_cols: int) -> None:
        self._num_rows = _dimension("num_rows", num_rows)
        self._num_cols = _dimension("num_cols", num_cols)

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    def is_full(self) -> bool:
        return self.size == self._num_rows * self._num_cols

    @abstractmethod
    def is_valid(self, i: int, j: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _offset(self, i: int, j: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def _unfold(self, k: int) -> Idx:
        raise NotImplementedError

    def fold(self, idx: IdxLike) -> int:
        i, j = D2.idx(idx)
        if not self.is_valid(i, j):
            raise InvalidLayoutIndexError(repr(self), (i, j))
        return self._offset(i, j)

    def try_fold(self, idx: IdxLike) -> Optional[int]:
        i, j = D2.idx(idx)
        if not self.is_valid(i, j):
            return None
        return self._offset(i, j)

    def unfold(self, k: int) -> Idx:
        k = operator.index(k)
        if not 0 <= k < self.size:
            raise OutOfBoundsError((k,), f"{self!r} has {self.size} cells")
        return self._unfold(k)

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and other.num_rows == self._num_rows
            and other.num_cols == self._num_cols
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._num_rows, self._num_cols))
