"""
Adapter for `range` objects: a read-only rank-1 container.
"""

from __future__ import annotations

from typing import Optional

from ...domain._dim import D1, Dim, IdxLike
from ...domain._errors import OutOfBoundsError
from ..cardinality import RectangularCard
from ..nvec._base import NVecBase
from ._registry import NVecAdapters


@NVecAdapters.register_adapter(range)
class RangeVec(NVecBase):
    """Rank-1 container whose element `i` is `storage[i]`."""

    def __init__(self, storage: range, rank: Optional[int] = None) -> None:
        self._range = storage
        self._card = RectangularCard((len(storage),))

    @property
    def dim(self) -> Dim:
        return D1

    def card(self, prefix: IdxLike = ()) -> int:
        return self._card.card(prefix)

    def in_bounds(self, prefix: IdxLike) -> bool:
        return self._card.in_bounds(prefix)

    def is_rectangular(self) -> bool:
        return True

    def at(self, idx: IdxLike) -> int:
        idx = D1.idx(idx)
        if not self._card.in_bounds(idx):
            raise OutOfBoundsError(idx, f"range has {len(self._range)} elements")
        return self._range[idx[0]]
