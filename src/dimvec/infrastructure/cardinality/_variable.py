"""
Variable (jagged) cardinality driven by a container of lengths.
"""

from __future__ import annotations

from ...domain._dim import Dim, Idx, IdxLike
from ...domain._errors import InvalidConstructionError
from ...domain._nvec import INVec
from .._traversal import in_leq_bounds, is_rectangular
from ._base import CardBase


class VariableCard(CardBase):
    """
    Cardinality policy whose branch lengths are read from another container.

    For a rank-`r` container (`r >= 2`), `lengths` is a rank-`(r - 1)`
    container: the cardinality below a prefix of `r - 1` components is
    `lengths.at(prefix)`, and the cardinality below any shorter prefix is
    the cardinality of `lengths` itself.

    Parameters
    ----------
    dim : Dim
        Rank of the container being bounded; must be at least 2.
    lengths : INVec
        Rank-`(r - 1)` container of non-negative ints.
    """

    def __init__(self, dim: Dim, lengths: INVec) -> None:
        if dim.rank < 2:
            raise InvalidConstructionError(
                f"Variable bounds require rank >= 2, got {dim!r}."
            )
        if lengths.dim.rank != dim.rank - 1:
            raise InvalidConstructionError(
                f"Variable bounds of {dim!r} need lengths of rank {dim.rank - 1}, "
                f"got {lengths.dim!r}."
            )
        super().__init__(dim)
        self._lengths = lengths

    @property
    def lengths(self) -> INVec:
        return self._lengths

    def _card(self, prefix: Idx) -> int:
        if len(prefix) < self._dim.rank - 1:
            return self._lengths.card(prefix)
        return self._lengths.at(prefix)

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = self._dim.leq_idx(prefix)
        return in_leq_bounds(self._card, prefix)

    def is_rectangular(self) -> bool:
        return is_rectangular(self._card, self._dim.rank)

    def __repr__(self) -> str:
        return f"VariableCard({self._dim!r}, lengths={self._lengths!r})"
