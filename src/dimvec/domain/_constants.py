"""
Library-wide constants.

`MAX_RANK` bounds the dimension ladder and `UNBOUNDED` is the cardinality
reported by containers that have no intrinsic bounds (procedural, constant
and sparse containers before they are bounded).
"""

import sys

MAX_RANK: int = 8
UNBOUNDED: int = sys.maxsize
