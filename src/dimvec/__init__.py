"""
dimvec: dimension-generic N-dimensional containers.

Many backing representations (nested lists, NumPy arrays, mappings,
procedural functions, sparse lookups, flat storage viewed as jagged or
triangular matrices) are read and written through one uniform indexing
interface for ranks 0 through 8.

Quick start
-----------
>>> from dimvec import V
>>> jagged = V.d1().from_storage([7, 8, 9, 10, 11, 12]).as_jagged([3, 4, 6])
>>> jagged.card((1,))
1
>>> jagged.at((2, 0))
11
"""

from .domain import (
    DIMS,
    D0,
    D1,
    D2,
    D3,
    D4,
    D5,
    D6,
    D7,
    D8,
    MAX_RANK,
    UNBOUNDED,
    Dim,
    Equality,
    EqualityKind,
    ICard,
    IMatrixLayout,
    INVec,
    INVecCore,
    INVecMut,
    InvalidConstructionError,
    InvalidLayoutIndexError,
    OutOfBoundsError,
    RankError,
    ReadOnlyError,
    UnboundedTraversalError,
)
from .infrastructure.cardinality import (
    EmptyCard,
    RectangularCard,
    UnboundedCard,
    VariableCard,
)
from .infrastructure.nvec import ChildView, ChildViewMut, NVecBase, NVecMutBase, Slot
from .infrastructure.adapters import (
    MappingVec,
    NDArrayVec,
    NVecAdapters,
    RangeVec,
    SequenceVec,
    as_nvec,
)
from .infrastructure.vecs import ConstantVec, EmptyVec, FunVec, NewV, SparseVec, V
from .infrastructure.transformations import (
    CachedVec,
    ColumnMajor,
    Completed,
    Diagonal,
    FlatJagged,
    Hooked,
    LowerTriangular,
    Matrix,
    MatrixLine,
    MatrixView,
    RowMajor,
    UniformEndIndices,
    UpperTriangular,
)

__all__ = [
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
    "MAX_RANK",
    "UNBOUNDED",
    Dim.__name__,
    Equality.__name__,
    EqualityKind.__name__,
    ICard.__name__,
    IMatrixLayout.__name__,
    INVec.__name__,
    INVecCore.__name__,
    INVecMut.__name__,
    InvalidConstructionError.__name__,
    InvalidLayoutIndexError.__name__,
    OutOfBoundsError.__name__,
    RankError.__name__,
    ReadOnlyError.__name__,
    UnboundedTraversalError.__name__,
    EmptyCard.__name__,
    RectangularCard.__name__,
    UnboundedCard.__name__,
    VariableCard.__name__,
    ChildView.__name__,
    ChildViewMut.__name__,
    NVecBase.__name__,
    NVecMutBase.__name__,
    Slot.__name__,
    MappingVec.__name__,
    NDArrayVec.__name__,
    NVecAdapters.__name__,
    RangeVec.__name__,
    SequenceVec.__name__,
    as_nvec.__name__,
    ConstantVec.__name__,
    EmptyVec.__name__,
    FunVec.__name__,
    NewV.__name__,
    SparseVec.__name__,
    "V",
    CachedVec.__name__,
    ColumnMajor.__name__,
    Completed.__name__,
    Diagonal.__name__,
    FlatJagged.__name__,
    Hooked.__name__,
    LowerTriangular.__name__,
    Matrix.__name__,
    MatrixLine.__name__,
    MatrixView.__name__,
    RowMajor.__name__,
    UniformEndIndices.__name__,
    UpperTriangular.__name__,
]
