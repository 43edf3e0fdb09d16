"""
Memoizing wrapper.

`CachedVec` computes each element of the wrapped container at most once:
the first `at(idx)` evaluates the inner container and stores the result in
the cache, and every later access is answered from the cache until it is
cleared. This is mainly useful over procedural containers (`V.dN().fun`)
whose elements are expensive to compute.
"""

from __future__ import annotations

import warnings
from typing import Any, MutableMapping, Optional, Sequence

from ...domain._dim import Idx, IdxLike
from ._delegating import DelegatingVec


class CachedVec(DelegatingVec):
    """
    Read-only memoizing wrapper.

    Parameters
    ----------
    inner : INVec
        The container whose elements are memoized.
    cache : Optional[MutableMapping[tuple[int, ...], Any]]
        Cache to use; a new dict when None. A pre-populated cache is trusted
        as-is.

    Notes
    -----
    - Out-of-bounds accesses raise from the inner container and are never
      cached.
    - The cache never shrinks on its own; call `clear()` to release it.
    """

    def __init__(
        self, inner: Any, cache: Optional[MutableMapping[Idx, Any]] = None
    ) -> None:
        if isinstance(inner, CachedVec):
            warnings.warn(
                "Caching an already cached container; the outer cache duplicates "
                "every entry of the inner one.",
                RuntimeWarning,
                stacklevel=2,
            )
        super().__init__(inner)
        self._cache: MutableMapping[Idx, Any] = {} if cache is None else cache

    @property
    def cache(self) -> MutableMapping[Idx, Any]:
        return self._cache

    def cache_len(self) -> int:
        """Number of memoized elements."""
        return len(self._cache)

    def clear(self) -> None:
        """Forget every memoized element."""
        self._cache.clear()

    def at(self, idx: IdxLike) -> Any:
        idx = self.dim.idx(idx)
        try:
            return self._cache[idx]
        except KeyError:
            pass
        value = self._inner.at(idx)
        self._cache[idx] = value
        return value

    def _repr_fields(self) -> Sequence[str]:
        return (f"cache_len={len(self._cache)}",)
