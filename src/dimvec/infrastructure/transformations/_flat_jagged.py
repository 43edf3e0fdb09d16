"""
Jagged rank-2 view over flat rank-1 storage.

Row `i` of a `FlatJagged` occupies the flat positions
`row_end_indices[i - 1] .. row_end_indices[i] - 1` (row 0 starts at 0), so

    card((i,)) == row_end_indices[i] - row_start(i)
    (i, j)     -> row_start(i) + j

Row ends can be given directly, derived from row lengths by a prefix sum,
or generated lazily for rows of uniform length.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence as SequenceABC
from itertools import accumulate
from typing import Any, Sequence

from ...domain._dim import D2, Dim, Idx, IdxLike
from ...domain._errors import InvalidConstructionError, OutOfBoundsError
from ..adapters import as_nvec
from ..nvec._base import NVecBase, NVecMutBase
from ._delegating import delegate_set


class UniformEndIndices(SequenceABC):
    """
    Row end offsets of rows with `row_length` elements over `flat_len`
    elements; the last row holds the remainder.

    `len(self) == ceil(flat_len / row_length)` and
    `self[i] == min((i + 1) * row_length, flat_len)`.
    """

    def __init__(self, row_length: int, flat_len: int) -> None:
        row_length = operator.index(row_length)
        if row_length <= 0:
            raise InvalidConstructionError(
                f"Uniform row length must be positive, got {row_length}."
            )
        self._row_length = row_length
        self._flat_len = flat_len

    def __len__(self) -> int:
        return -(-self._flat_len // self._row_length)

    def __getitem__(self, i: int) -> int:
        i = operator.index(i)
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"row index {i} out of range for {n} rows")
        return min((i + 1) * self._row_length, self._flat_len)

    def __repr__(self) -> str:
        return (
            f"UniformEndIndices(row_length={self._row_length}, "
            f"flat_len={self._flat_len})"
        )


def _normalize_row_ends(row_end_indices: Any) -> Sequence[int]:
    if isinstance(row_end_indices, UniformEndIndices):
        return row_end_indices
    if isinstance(row_end_indices, NVecBase):
        if row_end_indices.dim.rank != 1 or row_end_indices.is_unbounded():
            raise InvalidConstructionError(
                f"Row offsets must be a bounded rank-1 container, got "
                f"{type(row_end_indices).__name__} of {row_end_indices.dim!r}."
            )
        return tuple(operator.index(e) for e in row_end_indices.all())
    return tuple(operator.index(e) for e in row_end_indices)


class FlatJagged(NVecMutBase):
    """
    Rank-2 jagged container over flat rank-1 storage and row end offsets.

    Parameters
    ----------
    flat : INVec
        Rank-1 storage (or anything `as_nvec` accepts).
    row_end_indices : Sequence[int] | INVec
        Exclusive end offset of each row.

    Raises
    ------
    InvalidConstructionError
        If the offsets are negative or decreasing, or if the flat storage is
        bounded and its length differs from the last offset (0 for no rows).
    """

    def __init__(self, flat: Any, row_end_indices: Any) -> None:
        self._flat = as_nvec(flat, 1)
        self._row_ends = _normalize_row_ends(row_end_indices)
        if not isinstance(self._row_ends, UniformEndIndices):
            self._validate()

    def _validate(self) -> None:
        previous = 0
        for i, end in enumerate(self._row_ends):
            if end < previous:
                raise InvalidConstructionError(
                    f"Row end indices must be non-decreasing and non-negative; "
                    f"row {i} ends at {end} after {previous}."
                )
            previous = end
        if self._flat.is_bounded():
            flat_len = self._flat.card(())
            if previous != flat_len:
                raise InvalidConstructionError(
                    f"Row end indices cover {previous} elements but the flat "
                    f"storage has {flat_len}."
                )

    @classmethod
    def from_row_lengths(cls, flat: Any, row_lengths: Any) -> "FlatJagged":
        """Build from row lengths; offsets are their running sum."""
        lengths = _normalize_row_ends(row_lengths)
        if any(n < 0 for n in lengths):
            raise InvalidConstructionError(
                f"Row lengths must be non-negative, got {list(lengths)}."
            )
        return cls(flat, tuple(accumulate(lengths)))

    @classmethod
    def with_uniform_lengths(cls, flat: Any, row_length: int) -> "FlatJagged":
        """Split bounded flat storage into rows of `row_length`; the last row may be shorter."""
        flat = as_nvec(flat, 1)
        if flat.is_unbounded():
            raise InvalidConstructionError(
                "Uniform row lengths require bounded flat storage."
            )
        return cls(flat, UniformEndIndices(row_length, flat.card(())))

    # ---------------------------------------------------------------------
    # Rows
    # ---------------------------------------------------------------------
    @property
    def flat(self) -> NVecBase:
        return self._flat

    @property
    def row_end_indices(self) -> Sequence[int]:
        return self._row_ends

    def into_inner(self) -> NVecBase:
        return self._flat

    def num_rows(self) -> int:
        return len(self._row_ends)

    def _row_start(self, i: int) -> int:
        return self._row_ends[i - 1] if i > 0 else 0

    def row_range(self, i: int) -> range:
        """Flat positions occupied by row `i`."""
        i = operator.index(i)
        if not 0 <= i < len(self._row_ends):
            raise OutOfBoundsError(
                (i,), f"FlatJagged has only {len(self._row_ends)} rows"
            )
        return range(self._row_start(i), self._row_ends[i])

    # ---------------------------------------------------------------------
    # Contract
    # ---------------------------------------------------------------------
    @property
    def dim(self) -> Dim:
        return D2

    def card(self, prefix: IdxLike = ()) -> int:
        prefix = D2.card_idx(prefix)
        if not prefix:
            return len(self._row_ends)
        return len(self.row_range(prefix[0]))

    def in_bounds(self, prefix: IdxLike) -> bool:
        prefix = D2.leq_idx(prefix)
        if not prefix:
            return True
        i = prefix[0]
        if not 0 <= i < len(self._row_ends):
            return False
        if len(prefix) == 1:
            return True
        start = self._row_start(i)
        j = prefix[1]
        return 0 <= j < self._row_ends[i] - start and self._flat.in_bounds((start + j,))

    def is_rectangular(self) -> bool:
        lengths = {len(self.row_range(i)) for i in range(len(self._row_ends))}
        return len(lengths) <= 1

    def is_bounded(self) -> bool:
        return True

    def _flat_idx(self, idx: IdxLike) -> Idx:
        idx = D2.idx(idx)
        i, j = idx
        if not 0 <= i < len(self._row_ends):
            raise OutOfBoundsError(
                idx, f"FlatJagged has only {len(self._row_ends)} rows"
            )
        row = self.row_range(i)
        if not 0 <= j < len(row):
            raise OutOfBoundsError(idx, f"row {i} has {len(row)} columns")
        return (row.start + j,)

    def at(self, idx: IdxLike) -> Any:
        return self._flat.at(self._flat_idx(idx))

    def set(self, idx: IdxLike, value: Any) -> None:
        delegate_set(self._flat, self._flat_idx(idx), value)

    def _repr_fields(self) -> Sequence[str]:
        return (f"row_end_indices={self._row_ends!r}",)
