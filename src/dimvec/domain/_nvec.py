"""
N-dimensional container interface definitions.

This module defines the domain-level contracts shared by every container
in the library using structural typing. The contracts are layered:

- `INVecCore`: the structural contract every storage adapter must provide
  (rank, cardinality oracle, children, element visitation).
- `INVec`: the value-access contract built on top of it (checked and
  optional reads, bounds queries, traversal, equality).
- `INVecMut`: the mutable contract (checked writes, element handles,
  bulk updates).

Concrete implementations normally derive from `NVecBase` / `NVecMutBase`
in the infrastructure layer, which implement every provided operation in
terms of `dim`, `card` and `at` (and `set`).

Notes
-----
Coordinates are passed as ints (rank 1) or sequences of ints and are
normalized by the container's `Dim`.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from ._dim import Dim, Idx, IdxLike
from ._equality import Equality

T = TypeVar("T")
R = TypeVar("R")


@runtime_checkable
class INVecCore(Protocol):
    """
    Structural contract of an N-dimensional container.

    The structure of a rank-`r` container is recursive: it has
    `num_children()` children, each a rank-`(r - 1)` container, down to
    rank-0 elements. Children may have different cardinalities (jagged).
    """

    @property
    def dim(self) -> Dim:
        """Level of the dimension ladder of this container."""
        ...

    def num_children(self) -> int:
        """Number of rank-`(r - 1)` children (the outermost axis length)."""
        ...

    def card(self, prefix: IdxLike = ()) -> int:
        """
        Return the number of children below `prefix`.

        Parameters
        ----------
        prefix : IdxLike
            A coordinate with fewer components than the rank.

        Raises
        ------
        OutOfBoundsError
            If `prefix` is itself out of bounds.
        """
        ...

    def child(self, i: int) -> "INVec":
        """Return the `i`-th rank-`(r - 1)` child."""
        ...

    def is_rectangular(self) -> bool:
        """Return whether every prefix at a given level has equal cardinality."""
        ...

    def visit(self, idx: IdxLike, visitor: Callable[[Any], R]) -> R:
        """Resolve the element at `idx` and return `visitor(element)`."""
        ...


@runtime_checkable
class INVec(INVecCore, Protocol):
    """
    Value-access contract of an N-dimensional container.
    """

    def at(self, idx: IdxLike) -> Any:
        """
        Return the element at `idx`.

        Raises
        ------
        OutOfBoundsError
            If `idx` is out of bounds.
        """
        ...

    def try_at(self, idx: IdxLike) -> Optional[Any]:
        """Return the element at `idx`, or None exactly when `at` would raise."""
        ...

    def in_bounds(self, prefix: IdxLike) -> bool:
        """Return whether a prefix or full coordinate is within bounds."""
        ...

    def is_bounded(self) -> bool:
        """Return whether the container has finitely many elements."""
        ...

    def is_unbounded(self) -> bool:
        """Return whether the container has no finite bounds."""
        ...

    def indices(self) -> Iterator[Idx]:
        """Iterate over every in-bounds coordinate in row-major order."""
        ...

    def all(self) -> Iterator[Any]:
        """Iterate over every element in row-major order."""
        ...

    def enumerate_all(self) -> Iterator[Tuple[Idx, Any]]:
        """Iterate over `(coordinate, element)` pairs in row-major order."""
        ...

    def all_in(self, indices: Iterable[IdxLike]) -> Iterator[Any]:
        """Iterate over the elements at the given coordinates."""
        ...

    def children(self) -> Iterator["INVec"]:
        """Iterate over the rank-`(r - 1)` children."""
        ...

    def card_equality(self, other: "INVec") -> Equality:
        """Compare the cardinalities of two containers of the same rank."""
        ...

    def equality(self, other: "INVec") -> Equality:
        """Compare cardinalities and then elements of two containers."""
        ...


@runtime_checkable
class INVecMut(INVec, Protocol):
    """
    Mutable contract of an N-dimensional container.
    """

    def set(self, idx: IdxLike, value: Any) -> None:
        """
        Overwrite the element at `idx`.

        Raises
        ------
        OutOfBoundsError
            If `idx` is out of bounds; nothing is written.
        """
        ...

    def at_mut(self, idx: IdxLike) -> Any:
        """Return a handle whose `value` reads and writes the element at `idx`."""
        ...

    def mut_all(self, fn: Callable[[Any], Any]) -> None:
        """Replace every element `x` with `fn(x)`."""
        ...

    def reset_all(self, value: Any) -> None:
        """Set every element to `value`."""
        ...
