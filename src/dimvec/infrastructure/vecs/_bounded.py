"""
Shared base for containers whose shape is a cardinality policy.

Constant, procedural and sparse containers compute or look up their
elements independently of any backing storage, so their shape is carried
by a separate `ICard` policy. They start out unbounded and are bounded by
swapping the policy, which returns a new container sharing the payload.
"""

from __future__ import annotations

import operator
from abc import abstractmethod
from typing import Any, Sequence

from typing_extensions import Self

from ...domain._card import ICard
from ...domain._dim import Dim, Idx, IdxLike
from ...domain._errors import OutOfBoundsError, RankError
from ..adapters import as_nvec
from ..cardinality import RectangularCard, UnboundedCard, VariableCard
from ..nvec._base import NVecBase


class CardVecBase(NVecBase):
    """
    Container whose cardinality is delegated to an `ICard` policy.

    Subclasses implement `_rebound(card)` to return a copy of themselves
    with a different policy.
    """

    def __init__(self, card: ICard) -> None:
        self._card = card

    @property
    def dim(self) -> Dim:
        return self._card.dim

    @property
    def card_policy(self) -> ICard:
        return self._card

    def card(self, prefix: IdxLike = ()) -> int:
        return self._card.card(prefix)

    def in_bounds(self, prefix: IdxLike) -> bool:
        return self._card.in_bounds(prefix)

    def is_rectangular(self) -> bool:
        return self._card.is_rectangular()

    def is_bounded(self) -> bool:
        return self._card.is_bounded()

    def _checked_idx(self, idx: IdxLike) -> Idx:
        idx = self.dim.idx(idx)
        if not self._card.in_bounds(idx):
            raise OutOfBoundsError(idx)
        return idx

    @abstractmethod
    def _rebound(self, card: ICard) -> Self:
        raise NotImplementedError

    # ---------------------------------------------------------------------
    # Bounding
    # ---------------------------------------------------------------------
    def bounded(self, n: int) -> Self:
        """Return a rank-1 copy bounded to `n` elements."""
        if self.dim.rank != 1:
            raise RankError(
                f"bounded(n) applies to rank-1 containers, got {self.dim!r}; "
                "use with_rectangular_bounds or with_variable_bounds.",
                rank=1,
                coordinate=self.dim.rank,
            )
        return self._rebound(RectangularCard((n,)))

    def with_rectangular_bounds(self, dims: Any) -> Self:
        """
        Return a copy with one fixed length per axis.

        Parameters
        ----------
        dims : int | Sequence[int]
            Axis lengths, outermost first; an int is accepted at rank 1.
        """
        try:
            dims = (operator.index(dims),)
        except TypeError:
            dims = tuple(dims)
        if len(dims) != self.dim.rank:
            raise RankError(
                f"Expected {self.dim.rank} axis lengths for {self.dim!r}, got {dims}.",
                rank=self.dim.rank,
                coordinate=dims,
            )
        return self._rebound(RectangularCard(dims))

    def with_variable_bounds(self, lengths: Any) -> Self:
        """
        Return a jagged copy whose branch lengths are read from `lengths`.

        Parameters
        ----------
        lengths : INVec | Sequence
            Rank-`(r - 1)` container (or nested sequences) of branch lengths;
            e.g. for a rank-2 container, `lengths[i]` is the length of row `i`.
        """
        if self.dim.rank < 2:
            raise RankError(
                f"with_variable_bounds requires rank >= 2, got {self.dim!r}.",
                rank=2,
                coordinate=self.dim.rank,
            )
        return self._rebound(VariableCard(self.dim, as_nvec(lengths, self.dim.rank - 1)))

    def unbounded(self) -> Self:
        """Return a copy without bounds."""
        return self._rebound(UnboundedCard(self.dim))

    def _repr_fields(self) -> Sequence[str]:
        return (f"card={self._card!r}",)
