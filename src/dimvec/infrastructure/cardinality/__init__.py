"""
Cardinality policies.

Exports
-------
- RectangularCard: one fixed length per axis.
- VariableCard: per-branch lengths read from a rank-`(r - 1)` container.
- UnboundedCard: no intrinsic bounds.
- EmptyCard: no elements.
"""

from ._base import CardBase
from ._rectangular import RectangularCard
from ._variable import VariableCard
from ._unbounded import EmptyCard, UnboundedCard

__all__ = [
    CardBase.__name__,
    RectangularCard.__name__,
    VariableCard.__name__,
    UnboundedCard.__name__,
    EmptyCard.__name__,
]
