# bkfuzzy/distance.py
"""
Levenshtein edit distance (unit cost insert / delete / substitute).

Only two rows of the usual (len(a)+1) x (len(b)+1) table are alive at any
time, so memory is O(len(b)).
"""
from __future__ import annotations
from typing import List


def edit_distance(a: str, b: str) -> int:
    """Exact edit distance between a and b."""
    if a == b:
        return 0
    n = len(b)
    prev: List[int] = list(range(n + 1))
    for y, ca in enumerate(a, start=1):
        curr = [y] * (n + 1)
        for x in range(1, n + 1):
            sub = prev[x - 1] + (0 if ca == b[x - 1] else 1)
            ins = curr[x - 1] + 1
            dele = prev[x] + 1
            curr[x] = min(sub, ins, dele)
        prev = curr
    return prev[n]


def edit_distance_bounded(a: str, b: str, bound: int) -> int:
    """
    /* ~~~ Same recurrence with an early exit. ~~~ */
    Returns the exact distance when it is <= bound, otherwise bound + 1
    (a sentinel for "too far"; the real value is not computed).
    """
    m, n = len(a), len(b)
    # every alignment needs at least |m - n| insertions or deletions
    if abs(m - n) > bound:
        return bound + 1
    prev: List[int] = list(range(n + 1))
    for y in range(1, m + 1):
        ca = a[y - 1]
        curr = [y] * (n + 1)
        row_min = y
        for x in range(1, n + 1):
            sub = prev[x - 1] + (0 if ca == b[x - 1] else 1)
            ins = curr[x - 1] + 1
            dele = prev[x] + 1
            val = min(sub, ins, dele)
            curr[x] = val
            if val < row_min:
                row_min = val
        # row minima never decrease, so nothing below can come back under bound
        if row_min > bound:
            return bound + 1
        prev = curr
    return prev[n] if prev[n] <= bound else bound + 1
