"""
Shared plumbing for wrappers that keep the shape of the container they wrap.
"""

from __future__ import annotations

from typing import Any, Iterator

from ...domain._dim import Dim, Idx, IdxLike
from ...domain._errors import ReadOnlyError
from ..adapters import as_nvec
from ..nvec._base import NVecBase


def delegate_set(inner: Any, idx: Idx, value: Any) -> None:
    """Write through `inner.set`, or raise `ReadOnlyError` when `inner` is read-only."""
    setter = getattr(inner, "set", None)
    if setter is None:
        raise ReadOnlyError(type(inner).__name__)
    setter(idx, value)


class DelegatingVec(NVecBase):
    """
    Wrapper forwarding every structural query to `inner`.

    Subclasses override `at` (and whatever else they change).
    """

    def __init__(self, inner: Any) -> None:
        self._inner = as_nvec(inner)

    @property
    def inner(self) -> NVecBase:
        return self._inner

    def into_inner(self) -> NVecBase:
        return self._inner

    @property
    def dim(self) -> Dim:
        return self._inner.dim

    def card(self, prefix: IdxLike = ()) -> int:
        return self._inner.card(prefix)

    def in_bounds(self, prefix: IdxLike) -> bool:
        return self._inner.in_bounds(prefix)

    def is_rectangular(self) -> bool:
        return self._inner.is_rectangular()

    def is_bounded(self) -> bool:
        return self._inner.is_bounded()

    def indices(self) -> Iterator[Idx]:
        return self._inner.indices()
