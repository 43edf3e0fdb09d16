"""
Dimension ladder and coordinate normalization.

A container of rank `r` is addressed by coordinates with exactly `r`
integer components. Partial coordinates (prefixes) address branches: a
prefix of length `k < r` selects a rank-`(r - k)` sub-container.

Every algorithm in the library is written once and parameterized by a
`Dim` object instead of being repeated per rank. There is exactly one
`Dim` instance per rank (`D0` .. `D8`), obtained through `Dim.of`.

Coordinates are normalized to plain tuples of Python ints. At rank 1 a
bare integer is accepted as shorthand for a one-component coordinate, and
NumPy integer scalars are accepted anywhere an int is.
"""

from __future__ import annotations

import operator
from typing import Iterable, Tuple, Union

from ._constants import MAX_RANK
from ._errors import RankError

Idx = Tuple[int, ...]
IdxLike = Union[int, Iterable[int]]


def _to_tuple(coordinate: IdxLike) -> Idx:
    if type(coordinate) is tuple and all(type(c) is int for c in coordinate):
        return coordinate
    if isinstance(coordinate, (str, bytes)):
        raise RankError(
            f"Coordinate {coordinate!r} must be an int or a sequence of ints.",
            coordinate=coordinate,
        )
    try:
        return (operator.index(coordinate),)
    except TypeError:
        pass
    try:
        return tuple(operator.index(c) for c in coordinate)
    except TypeError as e:
        raise RankError(
            f"Coordinate {coordinate!r} must be an int or a sequence of ints.",
            coordinate=coordinate,
        ) from e


class Dim:
    """
    A level of the dimension ladder.

    Parameters
    ----------
    rank : int
        Number of coordinate components, in `0..MAX_RANK`.

    Notes
    -----
    Use `Dim.of(rank)` (or the `D0` .. `D8` module constants) instead of
    constructing instances directly; equality is by rank either way.
    """

    __slots__ = ("_rank",)

    def __init__(self, rank: int) -> None:
        if not isinstance(rank, int) or not 0 <= rank <= MAX_RANK:
            raise RankError(
                f"Rank must be an int in 0..{MAX_RANK}, got {rank!r}.",
                coordinate=rank,
            )
        self._rank = rank

    @classmethod
    def of(cls, rank: int) -> "Dim":
        """Return the ladder singleton for `rank`."""
        try:
            rank = operator.index(rank)
        except TypeError as e:
            raise RankError(
                f"Rank must be an int in 0..{MAX_RANK}, got {rank!r}.",
                coordinate=rank,
            ) from e
        if not 0 <= rank <= MAX_RANK:
            raise RankError(
                f"Rank must be an int in 0..{MAX_RANK}, got {rank!r}.",
                coordinate=rank,
            )
        return DIMS[rank]

    @property
    def rank(self) -> int:
        """Number of components of a full coordinate at this level."""
        return self._rank

    @property
    def previous(self) -> "Dim":
        """
        The level one rank below this one.

        `D0.previous` is `D0`; the ladder bottoms out at rank 0.
        """
        return DIMS[max(self._rank - 1, 0)]

    # ---------------------------------------------------------------------
    # Coordinate normalization
    # ---------------------------------------------------------------------
    def idx(self, coordinate: IdxLike) -> Idx:
        """
        Normalize a full coordinate of this rank.

        Parameters
        ----------
        coordinate : int | Iterable[int]
            An int (rank 1 only) or a sequence of exactly `rank` integers.

        Returns
        -------
        tuple[int, ...]
            The coordinate as a tuple of Python ints.

        Raises
        ------
        RankError
            If the coordinate has the wrong number of components or contains
            a non-integer component.
        """
        idx = _to_tuple(coordinate)
        if len(idx) != self._rank:
            raise RankError(
                f"Expected a coordinate with {self._rank} components for {self!r}, "
                f"got {coordinate!r}.",
                rank=self._rank,
                coordinate=coordinate,
            )
        return idx

    def leq_idx(self, prefix: IdxLike) -> Idx:
        """Normalize a coordinate of rank at most this rank (a prefix or a full coordinate)."""
        idx = _to_tuple(prefix)
        if len(idx) > self._rank:
            raise RankError(
                f"Expected at most {self._rank} components for {self!r}, "
                f"got {prefix!r}.",
                rank=self._rank,
                coordinate=prefix,
            )
        return idx

    def card_idx(self, prefix: IdxLike) -> Idx:
        """
        Normalize a prefix that may be passed to `card`.

        A card prefix has strictly fewer components than the rank, so that it
        addresses a branch rather than an element. `D0` has no card prefixes.
        """
        idx = _to_tuple(prefix)
        if len(idx) >= self._rank:
            raise RankError(
                f"Cardinality prefix for {self!r} must have fewer than "
                f"{self._rank} components, got {prefix!r}.",
                rank=self._rank,
                coordinate=prefix,
            )
        return idx

    def split(self, idx: Idx) -> Tuple[int, Idx]:
        """Split a full coordinate into its leading component and the remainder."""
        if self._rank == 0:
            raise RankError("Cannot split a rank-0 coordinate.", rank=0, coordinate=idx)
        return idx[0], idx[1:]

    def join(self, i: int, remainder: Idx) -> Idx:
        """Inverse of `split`."""
        return (i,) + tuple(remainder)

    # ---------------------------------------------------------------------
    # Dunder
    # ---------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Dim) and other._rank == self._rank

    def __hash__(self) -> int:
        return hash(("Dim", self._rank))

    def __repr__(self) -> str:
        return f"D{self._rank}"


DIMS: Tuple[Dim, ...] = tuple(Dim(r) for r in range(MAX_RANK + 1))

D0, D1, D2, D3, D4, D5, D6, D7, D8 = DIMS
