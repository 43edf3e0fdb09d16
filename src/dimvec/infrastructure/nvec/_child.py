"""
Child views.

A child view addresses a branch of its parent by a fixed prefix and
forwards every query to the parent with the prefix prepended. No element
is copied, so views stay consistent with later writes to the parent.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from ...domain._dim import Dim, Idx, IdxLike
from .._traversal import iter_indices
from ._base import NVecBase, NVecMutBase


class ChildView(NVecBase):
    """
    Read-only view of the branch of `parent` below `prefix`.

    Parameters
    ----------
    parent : NVecBase
        The container being viewed.
    prefix : tuple[int, ...]
        In-bounds prefix of the branch.
    """

    def __init__(self, parent: NVecBase, prefix: Idx) -> None:
        self._parent = parent
        self._prefix = prefix
        self._dim = Dim.of(parent.dim.rank - len(prefix))

    @property
    def dim(self) -> Dim:
        return self._dim

    @property
    def prefix(self) -> Idx:
        return self._prefix

    def card(self, prefix: IdxLike = ()) -> int:
        return self._parent.card(self._prefix + self._dim.card_idx(prefix))

    def in_bounds(self, prefix: IdxLike) -> bool:
        return self._parent.in_bounds(self._prefix + self._dim.leq_idx(prefix))

    def at(self, idx: IdxLike) -> Any:
        return self._parent.at(self._prefix + self._dim.idx(idx))

    def try_at(self, idx: IdxLike) -> Optional[Any]:
        return self._parent.try_at(self._prefix + self._dim.idx(idx))

    def indices(self) -> Iterator[Idx]:
        # cells the parent does not resolve (e.g. invalid matrix cells) are skipped
        indices = iter_indices(self.card, self._dim.rank)
        return (idx for idx in indices if self.in_bounds(idx))

    def child(self, i: int) -> NVecBase:
        return ChildView(self._parent, self._prefix + (self._check_child(i),))


class ChildViewMut(ChildView, NVecMutBase):
    """Child view that writes through to its parent."""

    def set(self, idx: IdxLike, value: Any) -> None:
        self._parent.set(self._prefix + self._dim.idx(idx), value)

    def child(self, i: int) -> NVecBase:
        return ChildViewMut(self._parent, self._prefix + (self._check_child(i),))

    def child_mut(self, i: int) -> NVecMutBase:
        return ChildViewMut(self._parent, self._prefix + (self._check_child(i),))
