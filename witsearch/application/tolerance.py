# witsearch/application/tolerance.py

from typing import Tuple


# (max token length, allowed edits), checked in order.
TOLERANCE_BREAKPOINTS: Tuple[Tuple[int, int], ...] = (
    (3, 0),
    (5, 1),
    (8, 2),
)
MAX_TOLERANCE = 3


def max_distance(token: str) -> int:
    """
    Allowed edit distance for a query token.

    Tokens of three characters or fewer must match exactly: one edit turns
    "saw" into "sad", while one edit on "screwdriver" is still clearly a typo.
    """
    length = len(token)
    for max_length, allowed in TOLERANCE_BREAKPOINTS:
        if length <= max_length:
            return allowed
    return MAX_TOLERANCE
