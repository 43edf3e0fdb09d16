"""
Construction entry points.

`V` is the front door of the library:

    V.d1().constant(0).bounded(10)
    V.d2().fun(lambda idx: idx[0] * idx[1]).with_rectangular_bounds((3, 4))
    V.d3().sparse(0.0)
    V.d2().sparse_from({(0, 1): 5}, 0)
    V.d2().empty()
    V.d2().from_storage([[1, 2], [3]])

Each `V.dN()` (or `V.of_rank(n)`) returns a `NewV` factory that builds
containers of that rank.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, MutableMapping, Optional

from ...domain._dim import Dim, Idx
from ..adapters import as_nvec
from ..cardinality import UnboundedCard
from ..nvec._base import NVecBase
from ._constant import ConstantVec, FunVec
from ._empty import EmptyVec
from ._sparse import SparseVec


class NewV:
    """
    Factory of containers of one rank.

    Parameters
    ----------
    dim : Dim
        Rank of the containers built by this factory.
    """

    __slots__ = ("_dim",)

    def __init__(self, dim: Dim) -> None:
        self._dim = dim

    @property
    def dim(self) -> Dim:
        return self._dim

    def constant(self, value: Any) -> ConstantVec:
        """Unbounded container whose every element is `value`."""
        return ConstantVec(value, UnboundedCard(self._dim))

    def fun(self, fun: Callable[[Idx], Any]) -> FunVec:
        """Unbounded container whose element at `idx` is `fun(idx)`."""
        return FunVec(fun, UnboundedCard(self._dim))

    def sparse(
        self, default: Any, lookup: Optional[MutableMapping[Idx, Any]] = None
    ) -> SparseVec:
        """Unbounded sparse container reading `default` wherever nothing is stored."""
        return SparseVec(default, UnboundedCard(self._dim), lookup)

    def sparse_from(self, mapping: Mapping[Any, Any], default: Any) -> SparseVec:
        """
        Unbounded sparse container pre-populated from `mapping`.

        Keys are normalized to coordinate tuples of this rank (plain int keys
        are accepted at rank 1) and copied into a new dict.
        """
        lookup = {self._dim.idx(key): value for key, value in mapping.items()}
        return SparseVec(default, UnboundedCard(self._dim), lookup)

    def empty(self) -> EmptyVec:
        """Container without any element."""
        return EmptyVec(self._dim)

    def from_storage(self, storage: Any) -> NVecBase:
        """Adapt nested sequences, a mapping, an ndarray or a range of this rank."""
        return as_nvec(storage, self._dim.rank)

    def __repr__(self) -> str:
        return f"NewV({self._dim!r})"


class VBuilder:
    """Entry point returning a `NewV` factory per rank."""

    __slots__ = ()

    def of_rank(self, rank: int) -> NewV:
        return NewV(Dim.of(rank))

    def d1(self) -> NewV:
        return NewV(Dim.of(1))

    def d2(self) -> NewV:
        return NewV(Dim.of(2))

    def d3(self) -> NewV:
        return NewV(Dim.of(3))

    def d4(self) -> NewV:
        return NewV(Dim.of(4))

    def d5(self) -> NewV:
        return NewV(Dim.of(5))

    def d6(self) -> NewV:
        return NewV(Dim.of(6))

    def d7(self) -> NewV:
        return NewV(Dim.of(7))

    def d8(self) -> NewV:
        return NewV(Dim.of(8))


V = VBuilder()
