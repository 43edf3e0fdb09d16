"""
Matrix layout interface.

A matrix layout is a pure folding function from a 2-D coordinate `(i, j)`
to an offset into flat rank-1 storage, together with its partial inverse.
Layouts are bijections between the coordinates they accept and
`range(size)`; every other coordinate is rejected instead of folded.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ._dim import Idx, IdxLike


@runtime_checkable
class IMatrixLayout(Protocol):
    """
    Matrix layout interface.
    """

    @property
    def num_rows(self) -> int:
        """Number of rows of the enclosing rectangle."""
        ...

    @property
    def num_cols(self) -> int:
        """Number of columns of the enclosing rectangle."""
        ...

    @property
    def size(self) -> int:
        """Number of valid cells, i.e. the required flat storage length."""
        ...

    def is_full(self) -> bool:
        """Return whether every cell of the enclosing rectangle is valid."""
        ...

    def is_valid(self, i: int, j: int) -> bool:
        """Return whether `(i, j)` is a cell of this layout."""
        ...

    def fold(self, idx: IdxLike) -> int:
        """
        Map a valid cell to its flat offset.

        Raises
        ------
        InvalidLayoutIndexError
            If the cell is not accepted by the layout.
        """
        ...

    def try_fold(self, idx: IdxLike) -> Optional[int]:
        """Map a cell to its flat offset, or None when it is not valid."""
        ...

    def unfold(self, k: int) -> Idx:
        """Map a flat offset in `range(size)` back to its cell."""
        ...
