"""
Element handles returned by `at_mut`.
"""

from __future__ import annotations

from typing import Any

from ...domain._dim import Idx


class Slot:
    """
    Read/write handle to one element of a mutable container.

    The handle does not copy the element: reading `value` always reads
    through the owner, and assigning `value` writes through `owner.set`.

    Examples
    --------
    >>> slot = vec.at_mut((2, 1))
    >>> slot.value += 1
    """

    __slots__ = ("_owner", "_idx")

    def __init__(self, owner: Any, idx: Idx) -> None:
        self._owner = owner
        self._idx = idx

    @property
    def idx(self) -> Idx:
        return self._idx

    @property
    def value(self) -> Any:
        return self._owner.at(self._idx)

    @value.setter
    def value(self, value: Any) -> None:
        self._owner.set(self._idx, value)

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Slot(idx={self._idx}, value={self.value!r})"
