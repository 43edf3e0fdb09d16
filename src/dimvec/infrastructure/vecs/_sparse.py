"""
Sparse containers with a default value.

A sparse container stores only the elements that were written and answers
every other in-bounds coordinate with a shared default. Entries live in a
lookup mapping keyed by the full coordinate tuple; the lookup only grows
through writes (`set`, `at_mut`, bulk updates) and only shrinks through an
explicit `clear` (or `reset_all(default)`, which drops the entries inside
the current bounds).
"""

from __future__ import annotations

from typing import Any, Callable, MutableMapping, Optional, Sequence, Tuple

import numpy as np

from ...domain._card import ICard
from ...domain._dim import Idx, IdxLike
from ..nvec._base import NVecMutBase
from ..nvec._slot import Slot
from ._bounded import CardVecBase


class SparseVec(CardVecBase, NVecMutBase):
    """
    Mutable container backed by a coordinate-to-element lookup and a default.

    Parameters
    ----------
    default : Any
        Element returned for in-bounds coordinates without an entry.
    card : ICard
        Cardinality policy; unbounded unless bounded explicitly.
    lookup : Optional[MutableMapping[tuple[int, ...], Any]]
        Lookup to use; a new dict when None. Keys must be normalized
        coordinate tuples.

    Notes
    -----
    Re-bounding (`bounded`, `with_rectangular_bounds`, ...) returns a new
    container sharing the same lookup.
    """

    def __init__(
        self,
        default: Any,
        card: ICard,
        lookup: Optional[MutableMapping[Idx, Any]] = None,
    ) -> None:
        super().__init__(card)
        self._default = default
        self._lookup: MutableMapping[Idx, Any] = {} if lookup is None else lookup

    @property
    def default(self) -> Any:
        return self._default

    @property
    def lookup(self) -> MutableMapping[Idx, Any]:
        return self._lookup

    def lookup_len(self) -> int:
        """Number of explicitly stored entries."""
        return len(self._lookup)

    def at(self, idx: IdxLike) -> Any:
        return self._lookup.get(self._checked_idx(idx), self._default)

    def set(self, idx: IdxLike, value: Any) -> None:
        self._lookup[self._checked_idx(idx)] = value

    def at_mut(self, idx: IdxLike) -> Slot:
        """
        Return a handle to the element at `idx`, inserting the default first.

        After this call the coordinate has an explicit entry even if the
        handle is never written.
        """
        idx = self._checked_idx(idx)
        self._lookup.setdefault(idx, self._default)
        return Slot(self, idx)

    def _is_default(self, value: Any) -> bool:
        if value is self._default:
            return True
        # elementwise comparisons (e.g. ndarrays) never count as equal
        result = value == self._default
        return isinstance(result, (bool, np.bool_)) and bool(result)

    def clear(self) -> None:
        """Drop every stored entry; all elements read as the default again."""
        self._lookup.clear()

    def reset_all(self, value: Any) -> None:
        """
        Set every element to `value`.

        Resetting to the default only drops the stored entries inside the
        current bounds and therefore also works on unbounded containers;
        entries of a shared lookup outside the bounds are kept. Any other
        value requires bounds.
        """
        if self._is_default(value):
            stale = [idx for idx in self._lookup if self._card.in_bounds(idx)]
            for idx in stale:
                del self._lookup[idx]
            return
        for idx in self.indices():
            self._lookup[idx] = value

    def mut_all(self, fn: Callable[[Any], Any]) -> None:
        """Replace every element `x` with `fn(x)`; every coordinate gets an entry."""
        for idx in self.indices():
            self._lookup[idx] = fn(self._lookup.get(idx, self._default))

    def into_inner(self) -> Tuple[MutableMapping[Idx, Any], Any]:
        """Return the `(lookup, default)` pair backing this container."""
        return self._lookup, self._default

    def _rebound(self, card: ICard) -> "SparseVec":
        return SparseVec(self._default, card, self._lookup)

    def _repr_fields(self) -> Sequence[str]:
        return (
            f"default={self._default!r}",
            f"lookup_len={len(self._lookup)}",
            *super()._repr_fields(),
        )
