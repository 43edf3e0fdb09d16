"""
Container base classes, child views and element handles.
"""

from ._slot import Slot
from ._base import NVecBase, NVecMutBase
from ._child import ChildView, ChildViewMut

__all__ = [
    Slot.__name__,
    NVecBase.__name__,
    NVecMutBase.__name__,
    ChildView.__name__,
    ChildViewMut.__name__,
]
