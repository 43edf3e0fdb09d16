"""
Adapter for mappings keyed by full coordinates.
"""

from __future__ import annotations

import operator
from collections.abc import Mapping, MutableMapping
from typing import Any, Optional, Sequence

from ...domain._dim import Dim, Idx, IdxLike
from ...domain._errors import OutOfBoundsError, RankError, ReadOnlyError
from ..cardinality import UnboundedCard
from ..nvec._base import NVecMutBase
from ._registry import NVecAdapters

_MISSING = object()


def _infer_rank(storage: Mapping) -> int:
    if not storage:
        raise RankError(
            "Cannot infer the rank of an empty mapping; pass `rank` explicitly."
        )
    key = next(iter(storage))
    try:
        operator.index(key)
        return 1
    except TypeError:
        return len(tuple(key))


@NVecAdapters.register_adapter(Mapping)
@NVecAdapters.register_adapter(dict)
class MappingVec(NVecMutBase):
    """
    Container over a mapping from coordinates to elements.

    The mapping has no intrinsic shape: every non-negative prefix is in
    bounds and every cardinality is `UNBOUNDED`. A full coordinate is in
    bounds exactly when an entry is stored for it, and `set` inserts.

    At rank 1, plain int keys are accepted alongside 1-tuples.

    Parameters
    ----------
    storage : Mapping
        The backing mapping. Must be a `MutableMapping` for writes.
    rank : Optional[int]
        Rank of the keys; inferred from the first key when None.
    """

    def __init__(self, storage: Mapping, rank: Optional[int] = None) -> None:
        if rank is None:
            rank = _infer_rank(storage)
        self._dim = Dim.of(rank)
        self._storage = storage
        self._card = UnboundedCard(self._dim)

    @property
    def dim(self) -> Dim:
        return self._dim

    @property
    def storage(self) -> Mapping:
        return self._storage

    def into_inner(self) -> Mapping:
        return self._storage

    def lookup_len(self) -> int:
        return len(self._storage)

    def _key(self, idx: Idx) -> Any:
        if idx in self._storage:
            return idx
        if self._dim.rank == 1 and idx[0] in self._storage:
            return idx[0]
        return _MISSING

    def card(self, prefix: IdxLike = ()) -> int:
        return self._card.card(prefix)

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = self._dim.leq_idx(prefix)
        if len(prefix) < self._dim.rank:
            return self._card.in_bounds(prefix)
        return self._key(prefix) is not _MISSING

    def is_rectangular(self) -> bool:
        return False

    def is_bounded(self) -> bool:
        return self._dim.rank == 0

    def at(self, idx: IdxLike) -> Any:
        idx = self._dim.idx(idx)
        key = self._key(idx)
        if key is _MISSING:
            raise OutOfBoundsError(idx, "no entry is stored")
        return self._storage[key]

    def set(self, idx: IdxLike, value: Any) -> None:
        idx = self._dim.idx(idx)
        if not self._card.in_bounds(idx):
            raise OutOfBoundsError(idx)
        if not isinstance(self._storage, MutableMapping):
            raise ReadOnlyError(type(self._storage).__name__)
        key = self._key(idx)
        self._storage[idx if key is _MISSING else key] = value

    def _repr_fields(self) -> Sequence[str]:
        return (f"lookup_len={len(self._storage)}",)
