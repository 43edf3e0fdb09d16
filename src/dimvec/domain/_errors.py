"""
Indexing- and construction-related exceptions for dimvec.

This module defines the error taxonomy shared by every container in the
library. Each exception derives from the built-in exception that best
describes the failure, so callers can catch either the precise dimvec type
or the generic Python one (e.g. `IndexError` for out-of-bounds access).

Taxonomy
--------
- `RankError`: a coordinate has the wrong number of components, contains a
  non-integer component, or a rank outside the supported ladder was requested.
- `OutOfBoundsError`: a coordinate (or prefix) does not address an existing
  element or branch.
- `InvalidLayoutIndexError`: a matrix coordinate is outside the shape accepted
  by a matrix layout.
- `InvalidConstructionError`: a transformation could not be built from the
  given storage / offsets / bounds.
- `UnboundedTraversalError`: a full traversal was requested on a container
  without finite bounds.
- `ReadOnlyError`: a write was attempted through a read-only container.
"""

from typing import Optional


class RankError(ValueError):
    """
    Raised when a coordinate does not match the rank of a container, or when
    a rank outside `0..MAX_RANK` is requested.

    Attributes
    ----------
    rank : Optional[int]
        The rank that was expected (or requested), if known.
    coordinate : object
        The offending coordinate or rank value.
    """

    def __init__(
        self, message: str, *, rank: Optional[int] = None, coordinate: object = None
    ) -> None:
        super().__init__(message)
        self.rank = rank
        self.coordinate = coordinate


class OutOfBoundsError(IndexError):
    """
    Raised when a coordinate or prefix is outside the bounds of a container.

    This is the checked-access failure of `at`, `set`, `child` and `card`.
    Callers that expect absence should use `try_at` instead.

    Attributes
    ----------
    idx : tuple[int, ...]
        The offending coordinate or prefix.
    detail : Optional[str]
        Optional human-readable explanation (e.g. the length of the row).
    """

    def __init__(self, idx: tuple, detail: Optional[str] = None) -> None:
        """
        Initialize the OutOfBoundsError.

        Parameters
        ----------
        idx : tuple[int, ...]
            The coordinate (or prefix) that failed the bounds check.
        detail : Optional[str]
            Additional context appended to the message.
        """
        message = f"Index {idx} is out of bounds."
        if detail:
            message = f"{message[:-1]}: {detail}."
        super().__init__(message)
        self.idx = idx
        self.detail = detail


class InvalidLayoutIndexError(OutOfBoundsError):
    """
    Raised when a matrix coordinate is rejected by a matrix layout.

    A layout only folds the coordinates it accepts (e.g. `j <= i` for a
    lower-triangular layout). Folding any other coordinate raises this error
    instead of producing an aliased storage offset.

    Attributes
    ----------
    layout : str
        Representation of the layout that rejected the coordinate.
    """

    def __init__(self, layout: str, idx: tuple) -> None:
        super().__init__(idx, f"not a valid cell of {layout}")
        self.layout = layout


class InvalidConstructionError(ValueError):
    """
    Raised when a transformation cannot be constructed from its inputs.

    Examples include non-monotonic jagged row offsets, a flat storage whose
    length disagrees with the offsets, a matrix layout that needs more
    elements than the flat storage holds, or negative bounds.
    """


class UnboundedTraversalError(RuntimeError):
    """
    Raised when an operation would need to visit every element of a container
    that has no finite bounds.

    Attributes
    ----------
    operation : str
        The operation that was attempted (e.g. "traverse", "compare").
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cannot {operation} an unbounded container. Bound it first with "
            "`bounded`, `with_rectangular_bounds` or `with_variable_bounds`."
        )
        self.operation = operation


class ReadOnlyError(TypeError):
    """
    Raised when a write is attempted through a container that does not
    support mutation (e.g. a constant, procedural or cached container).

    Attributes
    ----------
    container : str
        Name of the container type.
    operation : str
        The write operation that was attempted.
    """

    def __init__(self, container: str, operation: str = "set") -> None:
        super().__init__(f"{operation} is not supported by read-only '{container}'.")
        self.container = container
        self.operation = operation
