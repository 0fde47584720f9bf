# witsearch/application/edit_distance.py

import numpy as np


def _code_points(text: str) -> np.ndarray:
    return np.array([ord(ch) for ch in text], dtype=np.int64)


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning `a` into `b`. Comparison is case-insensitive.

    The DP matrix is filled one row at a time with numpy vectors:
    deletions and substitutions only look at the previous row, and the
    left-to-right insertion chain is resolved with a running minimum
    (cur[j] = min_k(cand[k] + j - k)).
    """
    s1 = a.lower()
    s2 = b.lower()
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    chars2 = _code_points(s2)
    offsets = np.arange(len(s2) + 1, dtype=np.int64)
    previous = offsets.copy()

    for i, ch in enumerate(s1, start=1):
        cost = (chars2 != ord(ch)).astype(np.int64)
        candidate = np.empty_like(previous)
        candidate[0] = i
        candidate[1:] = np.minimum(previous[1:] + 1, previous[:-1] + cost)
        previous = np.minimum.accumulate(candidate - offsets) + offsets

    return int(previous[-1])


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1]; 1.0 means identical (ignoring case)."""
    max_len = max(len(a.lower()), len(b.lower()))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / max_len
