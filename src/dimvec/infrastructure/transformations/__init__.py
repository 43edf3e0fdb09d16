"""
Transformation layer.

Every transformation satisfies the same container contracts as what it
wraps, so transformations compose freely.

Exports
-------
- CachedVec: memoizes elements of the wrapped container.
- Completed: answers unresolved coordinates with a fallback.
- Hooked: reports every read to a callback.
- FlatJagged / UniformEndIndices: jagged rank-2 view over flat storage.
- MatrixView: rank-2 view over flat storage through a matrix layout.
- Matrix: row- or column-major matrix view of a rectangular rank-2 container.
- MatrixLine: one row or column of a matrix as a rank-1 container.
"""

from ._delegating import DelegatingVec
from ._cached import CachedVec
from ._completed import Completed
from ._hooked import Hooked
from ._flat_jagged import FlatJagged, UniformEndIndices
from ._matrix import MatrixView
from ._matrix_lines import MatrixLine
from ._rect_matrix import Matrix
from .layouts import (
    ColumnMajor,
    Diagonal,
    LowerTriangular,
    MatrixLayoutBase,
    RowMajor,
    UpperTriangular,
)

__all__ = [
    DelegatingVec.__name__,
    CachedVec.__name__,
    Completed.__name__,
    Hooked.__name__,
    FlatJagged.__name__,
    UniformEndIndices.__name__,
    MatrixView.__name__,
    Matrix.__name__,
    MatrixLine.__name__,
    MatrixLayoutBase.__name__,
    RowMajor.__name__,
    ColumnMajor.__name__,
    Diagonal.__name__,
    LowerTriangular.__name__,
    UpperTriangular.__name__,
]
