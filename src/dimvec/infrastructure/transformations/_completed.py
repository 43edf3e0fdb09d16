"""
Fallback completion.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

from ...domain._dim import Idx, IdxLike
from .._traversal import is_rectangular, iter_indices
from ..nvec._base import NVecMutBase
from ._delegating import DelegatingVec, delegate_set


class Completed(DelegatingVec, NVecMutBase):
    """
    Wrapper answering every coordinate the inner container cannot resolve
    with a fallback value.

    Within the inner container's cardinality, `at` never raises for a full
    coordinate: it returns the inner element when the inner container
    resolves the coordinate and `fallback` otherwise. Traversal therefore
    covers the whole cardinality, including cells the inner container skips
    (e.g. the invalid cells of a triangular matrix view).

    Writes are forwarded to the inner container, which still validates them.

    Parameters
    ----------
    inner : INVec
        The container being completed.
    fallback : Any
        Value of every unresolved coordinate.
    """

    def __init__(self, inner: Any, fallback: Any) -> None:
        super().__init__(inner)
        self._fallback = fallback

    @property
    def fallback(self) -> Any:
        return self._fallback

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = self.dim.leq_idx(prefix)
        if len(prefix) == self.dim.rank:
            return True
        return self._inner.in_bounds(prefix)

    def is_rectangular(self) -> bool:
        return is_rectangular(self.card, self.dim.rank)

    def indices(self) -> Iterator[Idx]:
        return iter_indices(self.card, self.dim.rank)

    def at(self, idx: IdxLike) -> Any:
        idx = self.dim.idx(idx)
        if self._inner.in_bounds(idx):
            return self._inner.at(idx)
        return self._fallback

    def try_at(self, idx: IdxLike) -> Optional[Any]:
        return self.at(idx)

    def set(self, idx: IdxLike, value: Any) -> None:
        delegate_set(self._inner, self.dim.idx(idx), value)

    def _repr_fields(self) -> Sequence[str]:
        return (f"fallback={self._fallback!r}",)
