"""
Matrix layouts folding 2-D coordinates onto flat rank-1 storage.
"""

from ._base import MatrixLayoutBase
from ._rectangular import ColumnMajor, RowMajor
from ._triangular import Diagonal, LowerTriangular, UpperTriangular

__all__ = [
    MatrixLayoutBase.__name__,
    RowMajor.__name__,
    ColumnMajor.__name__,
    Diagonal.__name__,
    LowerTriangular.__name__,
    UpperTriangular.__name__,
]
