"""
Matrix views over flat rank-1 storage.

A `MatrixView` pairs flat storage with a matrix layout. Its cardinality is
the enclosing `num_rows x num_cols` rectangle, but only the cells accepted
by the layout resolve to storage: `at` raises `InvalidLayoutIndexError` on
any other cell, `try_at` returns None for it, and traversal skips it.
Wrap the view with `into_completed(fallback)` to read every cell of the
rectangle, e.g. zeros above the diagonal of a lower-triangular matrix.

Design
------
- Folding is delegated to the layout and costs O(1) per access.
- Bounded flat storage must hold at least `layout.size` elements; extra
  trailing elements are unreachable and reported with a `RuntimeWarning`.
- Unbounded flat storage (a mapping, a sparse container) is accepted as is;
  cells without a stored element are out of bounds.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterator, Sequence

from ...domain._dim import D2, Dim, Idx, IdxLike
from ...domain._errors import InvalidConstructionError, OutOfBoundsError
from ...domain._matrix_layout import IMatrixLayout
from .._traversal import iter_indices
from ..adapters import as_nvec
from ..nvec._base import NVecBase, NVecMutBase
from ._delegating import delegate_set
from ._matrix_lines import MatrixLinesMixin


class MatrixView(MatrixLinesMixin, NVecMutBase):
    """
    Rank-2 view of flat storage through a matrix layout.

    Parameters
    ----------
    flat : INVec
        Rank-1 storage (or anything `as_nvec` accepts).
    layout : IMatrixLayout
        Folding of `(i, j)` onto flat offsets.

    Raises
    ------
    InvalidConstructionError
        If the flat storage is bounded and shorter than `layout.size`.
    """

    def __init__(self, flat: Any, layout: IMatrixLayout) -> None:
        self._flat = as_nvec(flat, 1)
        self._layout = layout
        if self._flat.is_bounded():
            flat_len = self._flat.card(())
            if flat_len < layout.size:
                raise InvalidConstructionError(
                    f"{layout!r} needs {layout.size} elements but the flat "
                    f"storage has {flat_len}."
                )
            if flat_len > layout.size:
                warnings.warn(
                    f"Flat storage has {flat_len} elements but {layout!r} only "
                    f"addresses {layout.size}; the trailing elements are unreachable.",
                    RuntimeWarning,
                    stacklevel=2,
                )

    @property
    def layout(self) -> IMatrixLayout:
        return self._layout

    @property
    def flat(self) -> NVecBase:
        return self._flat

    @property
    def num_rows(self) -> int:
        return self._layout.num_rows

    @property
    def num_cols(self) -> int:
        return self._layout.num_cols


    def into_inner(self) -> NVecBase:
        return self._flat

    @property
    def dim(self) -> Dim:
        return D2

    def card(self, prefix: IdxLike = ()) -> int:
        prefix = D2.card_idx(prefix)
        if not prefix:
            return self._layout.num_rows
        if not 0 <= prefix[0] < self._layout.num_rows:
            raise OutOfBoundsError(
                prefix, f"matrix has {self._layout.num_rows} rows"
            )
        return self._layout.num_cols

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = D2.leq_idx(prefix)
        if len(prefix) < 2:
            return all(0 <= i < self._layout.num_rows for i in prefix)
        k = self._layout.try_fold(prefix)
        return k is not None and self._flat.in_bounds((k,))

    def is_rectangular(self) -> bool:
        return self._layout.is_full()

    def is_bounded(self) -> bool:
        return True

    def indices(self) -> Iterator[Idx]:
        indices = iter_indices(self.card, 2)
        return (idx for idx in indices if self.in_bounds(idx))

    def at(self, idx: IdxLike) -> Any:
        return self._flat.at((self._layout.fold(idx),))

    def set(self, idx: IdxLike, value: Any) -> None:
        delegate_set(self._flat, (self._layout.fold(idx),), value)

    def _repr_fields(self) -> Sequence[str]:
        return (f"layout={self._layout!r}",)
