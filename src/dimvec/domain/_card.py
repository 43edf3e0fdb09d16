"""
Cardinality-policy interface.

A cardinality policy answers, for every prefix of a container, how many
children hang below it. Containers whose values are not backed by storage
(constant, procedural, sparse) carry a policy object instead of deriving
their shape from data; re-bounding such a container swaps the policy.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ._dim import Dim, IdxLike


@runtime_checkable
class ICard(Protocol):
    """
    Cardinality policy interface.

    Notes
    -----
    - `card(prefix)` must raise `OutOfBoundsError` when `prefix` itself is
      out of bounds.
    - `in_bounds(prefix)` accepts prefixes and full coordinates alike.
    - Unbounded policies report `UNBOUNDED` for every valid prefix.
    """

    @property
    def dim(self) -> Dim:
        """Level of the dimension ladder this policy describes."""
        ...

    def card(self, prefix: IdxLike = ()) -> int:
        """Return the number of children below `prefix`."""
        ...

    def in_bounds(self, prefix: IdxLike) -> bool:
        """Return whether `prefix` addresses an existing branch or element."""
        ...

    def is_rectangular(self) -> bool:
        """Return whether every prefix at a given level has the same cardinality."""
        ...

    def is_bounded(self) -> bool:
        """Return whether the policy describes finitely many elements."""
        ...
