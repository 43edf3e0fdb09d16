"""
Equality reports for comparing containers.

Comparing two containers either succeeds, or stops at the first point of
difference and reports it: a prefix whose cardinalities differ, or a
coordinate whose elements differ.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EqualityKind(Enum):
    """Outcome of a container comparison."""

    EQUAL = "equal"
    UNEQUAL_CARD = "unequal_card"
    UNEQUAL_VALUE = "unequal_value"


@dataclass(frozen=True)
class Equality:
    """
    Result of `card_equality` / `equality`.

    Attributes
    ----------
    kind : EqualityKind
        Outcome of the comparison.
    idx : Optional[tuple[int, ...]]
        The prefix (cardinality mismatch) or coordinate (value mismatch)
        where the first difference was found.
    lhs_card, rhs_card : Optional[int]
        Cardinalities at `idx` for a cardinality mismatch.
    """

    kind: EqualityKind
    idx: Optional[Tuple[int, ...]] = None
    lhs_card: Optional[int] = None
    rhs_card: Optional[int] = None

    @classmethod
    def equal(cls) -> "Equality":
        return cls(EqualityKind.EQUAL)

    @classmethod
    def unequal_card(cls, idx: Tuple[int, ...], lhs: int, rhs: int) -> "Equality":
        return cls(EqualityKind.UNEQUAL_CARD, idx, lhs, rhs)

    @classmethod
    def unequal_value(cls, idx: Tuple[int, ...]) -> "Equality":
        return cls(EqualityKind.UNEQUAL_VALUE, idx)

    def is_equal(self) -> bool:
        return self.kind is EqualityKind.EQUAL
