"""
Rank-generic algorithms over cardinality oracles.

Every function in this module is written once for all ranks and operates
on a cardinality oracle `card(prefix) -> int` together with the rank of
the container. Containers use these helpers to implement bounds checks,
row-major traversal, rectangularity checks and equality in terms of their
own `card` method.

Notes
-----
- Prefixes are always queried top-down, so `card` is only ever called
  on prefixes that are already known to be in bounds.
- Traversal refuses to start on an unbounded container; the check runs
  eagerly when the iterator is requested, not when it is first advanced.
"""

from __future__ import annotations

from typing import Callable, Iterator

from ..domain._constants import UNBOUNDED
from ..domain._dim import Idx
from ..domain._equality import Equality
from ..domain._errors import UnboundedTraversalError

CardFn = Callable[[Idx], int]


def in_leq_bounds(card: CardFn, idx: Idx) -> bool:
    """
    Return whether a prefix (or full coordinate) is within bounds.

    Descends one level at a time: component `k` must lie in
    `range(card(idx[:k]))`. Negative components are never in bounds.
    """
    for level, i in enumerate(idx):
        if i < 0 or i >= card(idx[:level]):
            return False
    return True


def _walk(card: CardFn, rank: int, prefix: Idx) -> Iterator[Idx]:
    n = card(prefix)
    if n >= UNBOUNDED:
        raise UnboundedTraversalError("traverse")
    if len(prefix) == rank - 1:
        for i in range(n):
            yield prefix + (i,)
    else:
        for i in range(n):
            yield from _walk(card, rank, prefix + (i,))


def iter_indices(card: CardFn, rank: int) -> Iterator[Idx]:
    """
    Iterate over every coordinate of a container in row-major order.

    Parameters
    ----------
    card : Callable[[tuple[int, ...]], int]
        Cardinality oracle of the container.
    rank : int
        Rank of the container. Rank 0 yields the single empty coordinate.

    Raises
    ------
    UnboundedTraversalError
        If the outermost cardinality is unbounded.
    """
    if rank == 0:
        return iter(((),))
    if card(()) >= UNBOUNDED:
        raise UnboundedTraversalError("traverse")
    return _walk(card, rank, ())


def is_rectangular(card: CardFn, rank: int) -> bool:
    """
    Return whether all prefixes at each level share one cardinality.

    Unbounded containers are never considered rectangular.
    """
    if rank == 0:
        return True
    if card(()) >= UNBOUNDED:
        return False
    prefixes: list = [()]
    for _ in range(rank - 1):
        expected = None
        next_prefixes = []
        for prefix in prefixes:
            for i in range(card(prefix)):
                branch = prefix + (i,)
                n = card(branch)
                if expected is None:
                    expected = n
                elif n != expected:
                    return False
                next_prefixes.append(branch)
        prefixes = next_prefixes
    return True


def card_equality(lhs: CardFn, rhs: CardFn, rank: int) -> Equality:
    """
    Compare two cardinality oracles of the same rank, top-down.

    Returns the first prefix whose cardinalities differ, or `Equality.equal()`.

    Raises
    ------
    UnboundedTraversalError
        If either side is unbounded.
    """
    if rank == 0:
        return Equality.equal()
    if lhs(()) >= UNBOUNDED or rhs(()) >= UNBOUNDED:
        raise UnboundedTraversalError("compare")

    def compare(prefix: Idx) -> Equality:
        n_lhs, n_rhs = lhs(prefix), rhs(prefix)
        if n_lhs != n_rhs:
            return Equality.unequal_card(prefix, n_lhs, n_rhs)
        if len(prefix) + 1 < rank:
            for i in range(n_lhs):
                result = compare(prefix + (i,))
                if not result.is_equal():
                    return result
        return Equality.equal()

    return compare(())

