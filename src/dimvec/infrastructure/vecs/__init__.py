"""
Constant, procedural, sparse and empty containers and the `V` builder.
"""

from ._bounded import CardVecBase
from ._constant import ConstantVec, FunVec
from ._sparse import SparseVec
from ._empty import EmptyVec
from ._builder import NewV, V, VBuilder

__all__ = [
    CardVecBase.__name__,
    ConstantVec.__name__,
    FunVec.__name__,
    SparseVec.__name__,
    EmptyVec.__name__,
    NewV.__name__,
    VBuilder.__name__,
    "V",
]
