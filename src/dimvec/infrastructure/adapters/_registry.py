"""
Storage adapter registry and dispatch utilities.

This module defines `NVecAdapters`, the class-level registry that maps a
storage type (e.g. `list`, `dict`, `numpy.ndarray`) to the adapter that
exposes it through the container contracts, and `as_nvec`, the single
entry point used throughout the library to accept "anything container-like".

Design
------
- Adapters are registered by storage type via a decorator-based registry.
- Each adapter is a callable `adapter(storage, rank) -> NVecBase`, where
  `rank` may be None to let the adapter infer it.
- Resolution walks the storage type's MRO first, then falls back to
  `isinstance` checks in registration order so that abstract base classes
  such as `collections.abc.Sequence` can be registered too.

Usage example
-------------
Registering an adapter:

    @NVecAdapters.register_adapter(MyGrid)
    class MyGridVec(NVecBase):
        def __init__(self, grid, rank=None): ...

Adapting storage:

    vec = as_nvec([[1, 2], [3]])
    vec.at((1, 0))  # 3

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- Containers that already implement the contracts are returned unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar

from ...domain._errors import RankError
from ..nvec._base import NVecBase

T = TypeVar("T", bound=Callable[..., NVecBase])


class NVecAdapters:
    """
    Registry of storage adapters.

    Usage
    -----
    Register:
        @NVecAdapters.register_adapter(list)
        class SequenceVec(NVecMutBase): ...

    Dispatch:
        factory = NVecAdapters.resolve([1, 2, 3])
        vec = factory([1, 2, 3], None)
    """

    ADAPTERS: ClassVar[Dict[type, Callable[..., NVecBase]]] = {}

    @classmethod
    def register_adapter(
        cls, storage_type: type, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register an adapter for `storage_type`.

        Parameters
        ----------
        storage_type:
            The storage type handled by the decorated adapter.
        overwrite:
            If False (default), raises if `storage_type` is already registered.
        """
        if not isinstance(storage_type, type):
            raise ValueError("Adapter storage type must be a class")

        def decorator(adapter: T) -> T:
            if not overwrite and storage_type in cls.ADAPTERS:
                raise ValueError(
                    f"Adapter already registered: {storage_type.__name__!r}"
                )
            cls.ADAPTERS[storage_type] = adapter
            return adapter

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return the names of the registered storage types (sorted)."""
        return tuple(sorted(t.__name__ for t in cls.ADAPTERS))

    @classmethod
    def get(cls, storage_type: type) -> Callable[..., NVecBase]:
        """Get the adapter registered for exactly `storage_type`."""
        return cls.ADAPTERS[storage_type]

    @classmethod
    def resolve(cls, storage: Any) -> Callable[..., NVecBase]:
        """Find the adapter for `storage`, most specific registration first."""
        for klass in type(storage).__mro__:
            if klass in cls.ADAPTERS:
                return cls.ADAPTERS[klass]
        for storage_type, adapter in cls.ADAPTERS.items():
            if isinstance(storage, storage_type):
                return adapter
        available = ", ".join(cls.available()) or "<none>"
        raise ValueError(
            f"Unsupported storage type: {type(storage).__name__!r}. "
            f"Available: {available}"
        )


def as_nvec(storage: Any, rank: Optional[int] = None) -> NVecBase:
    """
    Expose `storage` through the container contracts.

    Parameters
    ----------
    storage : Any
        A container (returned unchanged) or storage of a registered type.
    rank : Optional[int]
        Expected rank. Inferred from the storage when None.

    Raises
    ------
    RankError
        If the resulting container does not have the expected rank.
    ValueError
        If no adapter is registered for the storage type.
    """
    if isinstance(storage, NVecBase):
        vec = storage
    else:
        vec = NVecAdapters.resolve(storage)(storage, rank)
    if rank is not None and vec.dim.rank != rank:
        raise RankError(
            f"Expected a rank-{rank} container, got {vec.dim!r}.",
            rank=rank,
            coordinate=vec.dim.rank,
        )
    return vec
