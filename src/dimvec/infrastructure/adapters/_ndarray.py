"""
Adapter for NumPy arrays.

NumPy arrays are rectangular by construction, so bounds are checked in
O(rank) against `array.shape` without descending through `card`.
Elements are returned as Python scalars for numeric dtypes.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._dim import Dim, IdxLike
from ...domain._errors import OutOfBoundsError, ReadOnlyError
from ..cardinality import RectangularCard
from ..nvec._base import NVecMutBase
from ._registry import NVecAdapters


@NVecAdapters.register_adapter(np.ndarray)
class NDArrayVec(NVecMutBase):
    """
    Container over a `numpy.ndarray`; the rank is `array.ndim`.
    """

    def __init__(self, array: np.ndarray, rank: Optional[int] = None) -> None:
        self._array = array
        self._card = RectangularCard(array.shape)

    @property
    def dim(self) -> Dim:
        return self._card.dim

    @property
    def array(self) -> np.ndarray:
        return self._array

    def into_inner(self) -> np.ndarray:
        return self._array

    def card(self, prefix: IdxLike = ()) -> int:
        return self._card.card(prefix)

    def in_bounds(self, prefix: IdxLike) -> bool:
        return self._card.in_bounds(prefix)

    def is_rectangular(self) -> bool:
        return True

    def is_bounded(self) -> bool:
        return True

    def at(self, idx: IdxLike) -> Any:
        idx = self.dim.idx(idx)
        if not self._card.in_bounds(idx):
            raise OutOfBoundsError(idx, f"array shape is {self._array.shape}")
        value = self._array[idx]
        if isinstance(value, np.generic):
            return value.item()
        return value

    def set(self, idx: IdxLike, value: Any) -> None:
        idx = self.dim.idx(idx)
        if not self._card.in_bounds(idx):
            raise OutOfBoundsError(idx, f"array shape is {self._array.shape}")
        if not self._array.flags.writeable:
            raise ReadOnlyError("ndarray")
        self._array[idx] = value

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        return np.array(self._array, dtype=dtype)
