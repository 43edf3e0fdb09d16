"""
Unbounded and empty cardinality policies.
"""

from __future__ import annotations

from ...domain._constants import UNBOUNDED
from ...domain._dim import Dim, Idx, IdxLike
from ._base import CardBase


class UnboundedCard(CardBase):
    """
    Cardinality of a container without intrinsic bounds.

    Every non-negative prefix is in bounds and every cardinality is
    `UNBOUNDED`. Constant, procedural and sparse containers start out with
    this policy until they are explicitly bounded.
    """

    def _card(self, prefix: Idx) -> int:
        return UNBOUNDED

    def in_bounds(self, prefix: IdxLike) -> bool:
        return all(i >= 0 for i in self._dim.leq_idx(prefix))

    def is_rectangular(self) -> bool:
        return False

    def is_bounded(self) -> bool:
        return self._dim.rank == 0

    def __repr__(self) -> str:
        return f"UnboundedCard({self._dim!r})"


class EmptyCard(CardBase):
    """Cardinality of a container with no elements: `card(()) == 0`."""

    def _card(self, prefix: Idx) -> int:
        return 0

    def in_bounds(self, prefix: IdxLike) -> bool:
        return len(self._dim.leq_idx(prefix)) == 0

    def is_rectangular(self) -> bool:
        return True

    def is_bounded(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"EmptyCard({self._dim!r})"
