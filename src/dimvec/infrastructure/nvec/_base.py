"""
Base classes for N-dimensional containers.

This module defines `NVecBase` and `NVecMutBase`, the extension points for
storage adapters and transformations. A subclass provides three things:

- `dim`  : its level on the dimension ladder,
- `card` : its cardinality oracle,
- `at`   : checked element access,

(plus `set` for mutable containers) and inherits every other operation of
the `INVec` / `INVecMut` contracts: bounds queries, optional access,
children, row-major traversal, rectangularity, equality, materialization
and the transformation entry points.

Design
------
- Provided operations are expressed once, for every rank, in terms of
  `dim.rank` and `card`; see `dimvec.infrastructure._traversal`.
- Subclasses with a cheaper way to answer a provided query (e.g. O(1)
  bounds checks for rectangular storage) override it.
- Transformation entry points import their targets lazily because the
  transformation layer itself derives from these base classes.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    MutableMapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

import numpy as np

from ...domain._constants import UNBOUNDED
from ...domain._dim import Dim, Idx, IdxLike
from ...domain._equality import Equality
from ...domain._errors import OutOfBoundsError, RankError, UnboundedTraversalError
from ...domain._nvec import INVec
from .._traversal import card_equality, in_leq_bounds, is_rectangular, iter_indices
from ._slot import Slot

R = TypeVar("R")


class NVecBase(ABC):
    """
    Abstract base class of every read-only container.

    Subclasses must implement `dim`, `card` and `at`. `at` must normalize
    its coordinate with `self.dim.idx` and raise `OutOfBoundsError` for any
    coordinate outside the container.
    """

    # ---------------------------------------------------------------------
    # Required
    # ---------------------------------------------------------------------
    @property
    @abstractmethod
    def dim(self) -> Dim:
        """Level of the dimension ladder of this container."""
        raise NotImplementedError

    @abstractmethod
    def card(self, prefix: IdxLike = ()) -> int:
        """
        Return the number of children below `prefix`.

        Raises
        ------
        RankError
            If `prefix` does not have fewer components than the rank.
        OutOfBoundsError
            If `prefix` is out of bounds.
        """
        raise NotImplementedError

    @abstractmethod
    def at(self, idx: IdxLike) -> Any:
        """
        Return the element at `idx`.

        Raises
        ------
        RankError
            If `idx` is not a coordinate of this rank.
        OutOfBoundsError
            If `idx` is out of bounds.
        """
        raise NotImplementedError

    # ---------------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------------
    def num_children(self) -> int:
        """Number of rank-`(r - 1)` children; 0 for rank-0 containers."""
        if self.dim.rank == 0:
            return 0
        return self.card(())

    def in_bounds(self, prefix: IdxLike) -> bool:
        """
        Return whether a prefix or a full coordinate is within bounds.

        The default descends through `card` one level at a time.
        """
        prefix = self.dim.leq_idx(prefix)
        return in_leq_bounds(self.card, prefix)

    def is_rectangular(self) -> bool:
        """Return whether every prefix at a given level has equal cardinality."""
        return is_rectangular(self.card, self.dim.rank)

    def is_bounded(self) -> bool:
        """Return whether the container has finitely many elements."""
        return self.dim.rank == 0 or self.card(()) < UNBOUNDED

    def is_unbounded(self) -> bool:
        return not self.is_bounded()

    def _check_child(self, i: int) -> int:
        if self.dim.rank == 0:
            raise RankError("A rank-0 container has no children.", rank=0)
        i = operator.index(i)
        n = self.num_children()
        if not 0 <= i < n:
            raise OutOfBoundsError((i,), f"container has {n} children")
        return i

    def child(self, i: int) -> "NVecBase":
        """
        Return the `i`-th rank-`(r - 1)` child as a view over this container.

        Raises
        ------
        OutOfBoundsError
            If `i >= num_children()`.
        """
        from ._child import ChildView

        return ChildView(self, (self._check_child(i),))

    def children(self) -> Iterator["NVecBase"]:
        """Iterate over the rank-`(r - 1)` children."""
        n = self.num_children()
        if n >= UNBOUNDED:
            raise UnboundedTraversalError("iterate the children of")
        return (self.child(i) for i in range(n))

    # ---------------------------------------------------------------------
    # Value access
    # ---------------------------------------------------------------------
    def try_at(self, idx: IdxLike) -> Optional[Any]:
        """Return the element at `idx`, or None exactly when `at` would raise."""
        idx = self.dim.idx(idx)
        if not self.in_bounds(idx):
            return None
        return self.at(idx)

    def visit(self, idx: IdxLike, visitor: Callable[[Any], R]) -> R:
        """Resolve the element at `idx` and return `visitor(element)`."""
        return visitor(self.at(idx))

    def __getitem__(self, idx: IdxLike) -> Any:
        return self.at(idx)

    # ---------------------------------------------------------------------
    # Traversal
    # ---------------------------------------------------------------------
    def indices(self) -> Iterator[Idx]:
        """
        Iterate over every coordinate in row-major order.

        Raises
        ------
        UnboundedTraversalError
            If the container is unbounded. Raised when called, not when the
            iterator is first advanced.
        """
        return iter_indices(self.card, self.dim.rank)

    def all(self) -> Iterator[Any]:
        """
        Iterate over every element in row-major order.

        Each call returns a fresh iterator; repeated traversals yield the
        same sequence as long as the container is not mutated.
        """
        indices = self.indices()
        return (self.at(idx) for idx in indices)

    def enumerate_all(self) -> Iterator[Tuple[Idx, Any]]:
        """Iterate over `(coordinate, element)` pairs in row-major order."""
        indices = self.indices()
        return ((idx, self.at(idx)) for idx in indices)

    def all_in(self, indices: Iterable[IdxLike]) -> Iterator[Any]:
        """Iterate over the elements at the given coordinates, in the given order."""
        return (self.at(idx) for idx in indices)

    # ---------------------------------------------------------------------
    # Equality
    # ---------------------------------------------------------------------
    def _check_same_rank(self, other: INVec) -> None:
        if other.dim != self.dim:
            raise RankError(
                f"Cannot compare a {self.dim!r} container with a {other.dim!r} one.",
                rank=self.dim.rank,
                coordinate=other.dim.rank,
            )

    def card_equality(self, other: INVec) -> Equality:
        """
        Compare the cardinalities of this container and `other`.

        Returns
        -------
        Equality
            `EQUAL`, or `UNEQUAL_CARD` with the first differing prefix and
            both cardinalities.
        """
        self._check_same_rank(other)
        return card_equality(self.card, other.card, self.dim.rank)

    def equality(self, other: INVec) -> Equality:
        """
        Compare cardinalities and then elements of this container and `other`.

        Returns
        -------
        Equality
            `EQUAL`, `UNEQUAL_CARD` (see `card_equality`) or `UNEQUAL_VALUE`
            with the first coordinate whose elements differ.
        """
        result = self.card_equality(other)
        if not result.is_equal():
            return result
        for idx, value in self.enumerate_all():
            if value != other.at(idx):
                return Equality.unequal_value(idx)
        return Equality.equal()

    # ---------------------------------------------------------------------
    # Materialization
    # ---------------------------------------------------------------------
    def to_list(self) -> Any:
        """
        Materialize the container as nested Python lists.

        Coordinates inside the cardinality that the container does not
        resolve (e.g. invalid cells of a triangular matrix) become None.
        """
        rank = self.dim.rank
        if rank == 0:
            return self.at(())
        if self.is_unbounded():
            raise UnboundedTraversalError("materialize")
        if rank == 1:
            return [self.try_at((i,)) for i in range(self.card(()))]
        return [child.to_list() for child in self.children()]

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """
        Materialize a bounded rectangular container as a NumPy array.

        Raises
        ------
        UnboundedTraversalError
            If the container is unbounded.
        ValueError
            If the container is jagged.
        """
        if self.is_unbounded():
            raise UnboundedTraversalError("materialize")
        if not self.is_rectangular():
            raise ValueError(
                f"Only rectangular containers can be converted to an ndarray; "
                f"{type(self).__name__} is jagged."
            )
        shape: List[int] = []
        prefix: Idx = ()
        for _ in range(self.dim.rank):
            n = self.card(prefix) if len(shape) == len(prefix) else 0
            shape.append(n)
            if n > 0:
                prefix = prefix + (0,)
        values = list(self.all())
        if not values and dtype is None:
            dtype = np.float64
        return np.asarray(values, dtype=dtype).reshape(tuple(shape))

    # ---------------------------------------------------------------------
    # Transformations
    # ---------------------------------------------------------------------
    def into_completed(self, fallback: Any) -> "NVecBase":
        """Wrap so that every coordinate this container cannot resolve yields `fallback`."""
        from ..transformations._completed import Completed

        return Completed(self, fallback)

    def into_cached(self, cache: Optional[MutableMapping[Idx, Any]] = None) -> "NVecBase":
        """Wrap so that each element is computed at most once and then memoized."""
        from ..transformations._cached import CachedVec

        return CachedVec(self, cache)

    def hooked(self, hook: Callable[[Idx, Optional[Any]], None]) -> "NVecBase":
        """Wrap so that `hook(idx, value)` is called after every `at` / `try_at`."""
        from ..transformations._hooked import Hooked

        return Hooked(self, hook)

    def _require_rank(self, rank: int, operation: str) -> None:
        if self.dim.rank != rank:
            raise RankError(
                f"{operation} requires a rank-{rank} container, got {self.dim!r}.",
                rank=rank,
                coordinate=self.dim.rank,
            )

    def as_jagged(self, row_end_indices: Any) -> "NVecBase":
        """
        View this rank-1 container as a rank-2 jagged container.

        Parameters
        ----------
        row_end_indices : Sequence[int] | INVec
            Exclusive end offset of each row; must be non-decreasing and end
            at the length of this container (when it is bounded).
        """
        from ..transformations._flat_jagged import FlatJagged

        self._require_rank(1, "as_jagged")
        return FlatJagged(self, row_end_indices)

    def into_jagged(self, row_end_indices: Any) -> "NVecBase":
        """Same as `as_jagged`; the caller hands this container over to the result."""
        return self.as_jagged(row_end_indices)

    def as_jagged_from_row_lengths(self, row_lengths: Any) -> "NVecBase":
        """View this rank-1 container as a jagged rank-2 container with the given row lengths."""
        from ..transformations._flat_jagged import FlatJagged

        self._require_rank(1, "as_jagged_from_row_lengths")
        return FlatJagged.from_row_lengths(self, row_lengths)

    def into_jagged_from_row_lengths(self, row_lengths: Any) -> "NVecBase":
        return self.as_jagged_from_row_lengths(row_lengths)

    def into_jagged_with_uniform_lengths(self, row_length: int) -> "NVecBase":
        """Split this bounded rank-1 container into rows of `row_length` (the last may be shorter)."""
        from ..transformations._flat_jagged import FlatJagged

        self._require_rank(1, "into_jagged_with_uniform_lengths")
        return FlatJagged.with_uniform_lengths(self, row_length)

    def _as_matrix(self, layout: Any, operation: str) -> "NVecBase":
        from ..transformations._matrix import MatrixView

        self._require_rank(1, operation)
        return MatrixView(self, layout)

    def as_row_major_matrix(self, num_rows: int, num_cols: int) -> "NVecBase":
        from ..transformations.layouts import RowMajor

        return self._as_matrix(RowMajor(num_rows, num_cols), "as_row_major_matrix")

    def as_column_major_matrix(self, num_rows: int, num_cols: int) -> "NVecBase":
        from ..transformations.layouts import ColumnMajor

        return self._as_matrix(
            ColumnMajor(num_rows, num_cols), "as_column_major_matrix"
        )

    def as_diagonal_matrix(self, n: int) -> "NVecBase":
        from ..transformations.layouts import Diagonal

        return self._as_matrix(Diagonal(n), "as_diagonal_matrix")

    def as_lower_triangular_matrix(self, n: int) -> "NVecBase":
        from ..transformations.layouts import LowerTriangular

        return self._as_matrix(LowerTriangular(n), "as_lower_triangular_matrix")

    def as_upper_triangular_matrix(self, n: int) -> "NVecBase":
        from ..transformations.layouts import UpperTriangular

        return self._as_matrix(UpperTriangular(n), "as_upper_triangular_matrix")

    def as_matrix(self, column_major: bool = False) -> "NVecBase":
        """
        View this rectangular rank-2 container as a matrix.

        Parameters
        ----------
        column_major : bool
            If True, the outer axis of this container holds the columns, so
            element `(i, j)` of the matrix is `self.at((j, i))`.

        Raises
        ------
        InvalidConstructionError
            If this container is jagged or unbounded.
        """
        from ..transformations._rect_matrix import Matrix

        self._require_rank(2, "as_matrix")
        return Matrix(self, column_major=column_major)

    def into_matrix(self, column_major: bool = False) -> "NVecBase":
        return self.as_matrix(column_major)

    def as_matrix_col_major(self) -> "NVecBase":
        return self.as_matrix(column_major=True)

    def into_matrix_col_major(self) -> "NVecBase":
        return self.as_matrix(column_major=True)


    # ---------------------------------------------------------------------
    # Dunder
    # ---------------------------------------------------------------------
    def _repr_fields(self) -> Sequence[str]:
        return ()

    def __repr__(self) -> str:
        # structure only, never reads an element
        bounded = self.is_bounded()
        fields = [f"dim={self.dim!r}", f"is_bounded={bounded}"]
        if bounded and self.dim.rank > 0:
            fields.append(f"num_children={self.card(())}")
        fields.extend(self._repr_fields())
        return f"{type(self).__name__}({', '.join(fields)})"


class NVecMutBase(NVecBase):
    """
    Abstract base class of mutable containers.

    Subclasses additionally implement `set`, which must validate the
    coordinate before writing anything.
    """

    @abstractmethod
    def set(self, idx: IdxLike, value: Any) -> None:
        """
        Overwrite the element at `idx`.

        Raises
        ------
        OutOfBoundsError
            If `idx` is out of bounds; nothing is written.
        ReadOnlyError
            If the underlying storage cannot be written.
        """
        raise NotImplementedError

    def at_mut(self, idx: IdxLike) -> Slot:
        """Return a `Slot` handle to the element at `idx`."""
        idx = self.dim.idx(idx)
        if not self.in_bounds(idx):
            raise OutOfBoundsError(idx)
        return Slot(self, idx)

    def try_at_mut(self, idx: IdxLike) -> Optional[Slot]:
        idx = self.dim.idx(idx)
        if not self.in_bounds(idx):
            return None
        return self.at_mut(idx)

    def update(self, idx: IdxLike, fn: Callable[[Any], Any]) -> None:
        """Replace the element `x` at `idx` with `fn(x)`."""
        idx = self.dim.idx(idx)
        self.set(idx, fn(self.at(idx)))

    def child_mut(self, i: int) -> "NVecMutBase":
        """Return the `i`-th child as a view that writes through to this container."""
        from ._child import ChildViewMut

        return ChildViewMut(self, (self._check_child(i),))

    def mut_all(self, fn: Callable[[Any], Any]) -> None:
        """Replace every element `x` with `fn(x)`, in row-major order."""
        for idx in self.indices():
            self.set(idx, fn(self.at(idx)))

    def reset_all(self, value: Any) -> None:
        """Set every element to `value`."""
        for idx in self.indices():
            self.set(idx, value)

    def __setitem__(self, idx: IdxLike, value: Any) -> None:
        self.set(idx, value)
