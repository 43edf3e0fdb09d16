"""
Shared plumbing for cardinality policies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...domain._constants import UNBOUNDED
from ...domain._dim import Dim, Idx, IdxLike
from ...domain._errors import OutOfBoundsError


class CardBase(ABC):
    """
    Base class for cardinality policies.

    Subclasses implement `_card` (called with an in-bounds, normalized card
    prefix) and `in_bounds`; `card` adds normalization and the bounds check.
    """

    def __init__(self, dim: Dim) -> None:
        self._dim = dim

    @property
    def dim(self) -> Dim:
        return self._dim

    def card(self, prefix: IdxLike = ()) -> int:
        prefix = self._dim.card_idx(prefix)
        if not self.in_bounds(prefix):
            raise OutOfBoundsError(prefix)
        return self._card(prefix)

    @abstractmethod
    def _card(self, prefix: Idx) -> int:
        raise NotImplementedError

    @abstractmethod
    def in_bounds(self, prefix: IdxLike) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_rectangular(self) -> bool:
        raise NotImplementedError

    def is_bounded(self) -> bool:
        if self._dim.rank == 0:
            return True
        return self.card(()) < UNBOUNDED
