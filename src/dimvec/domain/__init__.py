"""
Domain layer of dimvec.

Exports the dimension ladder, the container / cardinality / layout
contracts, equality reports, constants and the error taxonomy.
"""

from ._constants import MAX_RANK, UNBOUNDED
from ._dim import DIMS, D0, D1, D2, D3, D4, D5, D6, D7, D8, Dim, Idx, IdxLike
from ._errors import (
    InvalidConstructionError,
    InvalidLayoutIndexError,
    OutOfBoundsError,
    RankError,
    ReadOnlyError,
    UnboundedTraversalError,
)
from ._equality import Equality, EqualityKind
from ._card import ICard
from ._nvec import INVec, INVecCore, INVecMut
from ._matrix_layout import IMatrixLayout

__all__ = [
    "MAX_RANK",
    "UNBOUNDED",
    "DIMS",
    "D0",
    "D1",
    "D2",
    "D3",
    "D4",
    "D5",
    "D6",
    "D7",
    "D8",
    Dim.__name__,
    "Idx",
    "IdxLike",
    RankError.__name__,
    OutOfBoundsError.__name__,
    InvalidLayoutIndexError.__name__,
    InvalidConstructionError.__name__,
    UnboundedTraversalError.__name__,
    ReadOnlyError.__name__,
    Equality.__name__,
    EqualityKind.__name__,
    ICard.__name__,
    INVecCore.__name__,
    INVec.__name__,
    INVecMut.__name__,
    IMatrixLayout.__name__,
]
