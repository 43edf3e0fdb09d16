"""
Access tracing wrapper.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ...domain._dim import Idx, IdxLike
from ..nvec._base import NVecMutBase
from ._delegating import DelegatingVec, delegate_set

Hook = Callable[[Idx, Optional[Any]], None]


class Hooked(DelegatingVec, NVecMutBase):
    """
    Wrapper calling `hook(idx, value)` after every read.

    `at` reports the element it returns; `try_at` reports its result, which
    is None for out-of-bounds coordinates. A failing `at` raises before the
    hook runs. Writes are forwarded to the inner container untraced.

    Examples
    --------
    >>> seen = []
    >>> vec = V.d1().fun(lambda idx: idx[0] ** 2).bounded(4).hooked(
    ...     lambda idx, value: seen.append((idx, value))
    ... )
    >>> vec.at(3)
    9
    >>> seen
    [((3,), 9)]
    """

    def __init__(self, inner: Any, hook: Hook) -> None:
        super().__init__(inner)
        self._hook = hook

    def at(self, idx: IdxLike) -> Any:
        idx = self.dim.idx(idx)
        value = self._inner.at(idx)
        self._hook(idx, value)
        return value

    def try_at(self, idx: IdxLike) -> Optional[Any]:
        idx = self.dim.idx(idx)
        value = self._inner.try_at(idx)
        self._hook(idx, value)
        return value

    def set(self, idx: IdxLike, value: Any) -> None:
        delegate_set(self._inner, self.dim.idx(idx), value)
