"""
Storage adapters public API.

Importing this package registers the built-in adapters (nested sequences,
mappings, NumPy arrays and ranges) in the `NVecAdapters` registry via
import side effects.

Exports
-------
- NVecAdapters: the adapter registry.
- as_nvec: adapt any registered storage (or pass a container through).
- SequenceVec, MappingVec, NDArrayVec, RangeVec: the built-in adapters.
"""

from ._sequence import SequenceVec
from ._mapping import MappingVec
from ._ndarray import NDArrayVec
from ._range import RangeVec
from ._registry import NVecAdapters, as_nvec

__all__ = [
    NVecAdapters.__name__,
    as_nvec.__name__,
    SequenceVec.__name__,
    MappingVec.__name__,
    NDArrayVec.__name__,
    RangeVec.__name__,
]
