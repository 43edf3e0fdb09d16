"""
Empty container.
"""

from __future__ import annotations

from typing import Any

from ...domain._dim import Dim, IdxLike
from ...domain._errors import OutOfBoundsError, RankError
from ..cardinality import EmptyCard
from ..nvec._base import NVecBase


class EmptyVec(NVecBase):
    """Container of rank >= 1 without any element; every `at` raises."""

    def __init__(self, dim: Dim) -> None:
        if dim.rank == 0:
            raise RankError("An empty container needs rank >= 1.", rank=0)
        self._card = EmptyCard(dim)

    @property
    def dim(self) -> Dim:
        return self._card.dim

    def card(self, prefix: IdxLike = ()) -> int:
        return self._card.card(prefix)

    def in_bounds(self, prefix: IdxLike) -> bool:
        return self._card.in_bounds(prefix)

    def is_rectangular(self) -> bool:
        return True

    def is_bounded(self) -> bool:
        return True

    def at(self, idx: IdxLike) -> Any:
        raise OutOfBoundsError(self.dim.idx(idx), "container is empty")
