"""
Rectangular cardinality: one fixed length per axis.
"""

from __future__ import annotations

import operator
from typing import Sequence, Tuple

from ...domain._dim import Dim, Idx, IdxLike
from ...domain._errors import InvalidConstructionError
from ._base import CardBase


class RectangularCard(CardBase):
    """
    Cardinality policy with a fixed length per axis.

    Bounds checks are O(rank): each component is compared against its axis
    length directly, without descending through `card`.

    Parameters
    ----------
    dims : Sequence[int]
        Length of each axis, outermost first. The rank is `len(dims)`.
    """

    def __init__(self, dims: Sequence[int]) -> None:
        dims = tuple(operator.index(n) for n in dims)
        if any(n < 0 for n in dims):
            raise InvalidConstructionError(
                f"Rectangular bounds must be non-negative, got {dims}."
            )
        super().__init__(Dim.of(len(dims)))
        self._dims: Tuple[int, ...] = dims

    @property
    def dims(self) -> Tuple[int, ...]:
        return self._dims

    def _card(self, prefix: Idx) -> int:
        return self._dims[len(prefix)]

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = self._dim.leq_idx(prefix)
        return all(0 <= i < n for i, n in zip(prefix, self._dims))

    def is_rectangular(self) -> bool:
        return True

    def is_bounded(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"RectangularCard({list(self._dims)})"
