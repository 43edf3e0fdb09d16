"""
Constant and procedural containers.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ...domain._card import ICard
from ...domain._dim import Idx, IdxLike
from ._bounded import CardVecBase


class ConstantVec(CardVecBase):
    """
    Container whose every in-bounds element is the same value.

    Parameters
    ----------
    value : Any
        The element returned for every in-bounds coordinate.
    card : ICard
        Cardinality policy; unbounded unless bounded explicitly.
    """

    def __init__(self, value: Any, card: ICard) -> None:
        super().__init__(card)
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def at(self, idx: IdxLike) -> Any:
        self._checked_idx(idx)
        return self._value

    def _rebound(self, card: ICard) -> "ConstantVec":
        return ConstantVec(self._value, card)

    def _repr_fields(self) -> Sequence[str]:
        return (f"value={self._value!r}", *super()._repr_fields())


class FunVec(CardVecBase):
    """
    Container whose elements are computed on demand by `fun(idx)`.

    `fun` receives the normalized coordinate tuple and is called on every
    access; wrap with `into_cached()` to memoize expensive computations.

    Parameters
    ----------
    fun : Callable[[tuple[int, ...]], Any]
        Element function.
    card : ICard
        Cardinality policy; unbounded unless bounded explicitly.
    """

    def __init__(self, fun: Callable[[Idx], Any], card: ICard) -> None:
        super().__init__(card)
        self._fun = fun

    @property
    def fun(self) -> Callable[[Idx], Any]:
        return self._fun

    def at(self, idx: IdxLike) -> Any:
        return self._fun(self._checked_idx(idx))

    def _rebound(self, card: ICard) -> "FunVec":
        return FunVec(self._fun, card)
