"""
Adapter for nested Python sequences (lists and tuples).

A rank-`r` container is a sequence of rank-`(r - 1)` sequences. Branches
may have different lengths, so nested sequences are the natural dense
representation of jagged data.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, Optional, Tuple

from ...domain._dim import Dim, Idx, IdxLike
from ...domain._errors import (
    InvalidConstructionError,
    OutOfBoundsError,
    RankError,
    ReadOnlyError,
)
from ..nvec._base import NVecMutBase
from ._registry import NVecAdapters


def _is_branch(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes))


def _infer_rank(storage: Sequence) -> int:
    rank, node = 1, storage
    while len(node) > 0 and _is_branch(node[0]):
        rank += 1
        node = node[0]
    return rank


@NVecAdapters.register_adapter(Sequence)
@NVecAdapters.register_adapter(tuple)
@NVecAdapters.register_adapter(list)
class SequenceVec(NVecMutBase):
    """
    Container over nested sequences.

    Parameters
    ----------
    storage : Sequence
        Nested sequences; strings and bytes are treated as elements, never
        as branches.
    rank : Optional[int]
        Rank of the container. When None, the rank is inferred by following
        the first element down while it is itself a sequence.

    Notes
    -----
    An element found where a branch is expected (e.g. the `3` in
    `[[1, 2], 3]`) reads as an empty branch: it is in bounds as a prefix,
    has cardinality 0 and is skipped by traversal.

    Writes require the innermost sequence to be mutable (e.g. a list);
    writing into a tuple raises `ReadOnlyError`.
    """

    def __init__(self, storage: Sequence, rank: Optional[int] = None) -> None:
        if not _is_branch(storage):
            raise InvalidConstructionError(
                f"SequenceVec requires a non-string sequence, got {type(storage).__name__!r}."
            )
        if rank is None:
            rank = _infer_rank(storage)
        self._dim = Dim.of(rank)
        if self._dim.rank == 0:
            raise RankError("SequenceVec requires rank >= 1.", rank=0)
        self._storage = storage

    @property
    def dim(self) -> Dim:
        return self._dim

    @property
    def storage(self) -> Sequence:
        return self._storage

    def into_inner(self) -> Sequence:
        return self._storage

    def _resolve(self, prefix: Idx) -> Tuple[bool, Any]:
        node = self._storage
        for i in prefix:
            if not _is_branch(node) or not 0 <= i < len(node):
                return False, None
            node = node[i]
        return True, node

    def card(self, prefix: IdxLike = ()) -> int:
        prefix = self._dim.card_idx(prefix)
        found, node = self._resolve(prefix)
        if not found:
            raise OutOfBoundsError(prefix)
        # an element where a branch is expected has no children
        return len(node) if _is_branch(node) else 0

    def in_bounds(self, prefix: IdxLike) -> bool:
        found, _ = self._resolve(self._dim.leq_idx(prefix))
        return found

    def at(self, idx: IdxLike) -> Any:
        idx = self._dim.idx(idx)
        found, node = self._resolve(idx)
        if not found:
            raise OutOfBoundsError(idx)
        return node

    def set(self, idx: IdxLike, value: Any) -> None:
        idx = self._dim.idx(idx)
        found, _ = self._resolve(idx)
        if not found:
            raise OutOfBoundsError(idx)
        _, parent = self._resolve(idx[:-1])
        if not isinstance(parent, MutableSequence):
            raise ReadOnlyError(type(parent).__name__)
        parent[idx[-1]] = value
