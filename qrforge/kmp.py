"""Counting possibly overlapping occurrences of a pattern with the KMP algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def kmp_next(pattern: Sequence[Any]) -> list[int]:
    """Build the failure table for a non-empty pattern."""
    if not pattern:
        raise ValueError("pattern must not be empty")

    fail = [0] * len(pattern)
    fail[0] = -1
    j, k = 0, -1
    while j < len(pattern) - 1:
        if k == -1 or pattern[j] == pattern[k]:
            k += 1
            j += 1
            fail[j] = k
        else:
            k = fail[k]
    return fail


def kmp_count(
    src: Sequence[Any],
    pattern: Sequence[Any],
    next_table: list[int] | None = None,
) -> int:
    """Count occurrences of pattern in src, overlapping ones included."""
    if next_table is None:
        next_table = kmp_next(pattern)

    slen, plen = len(src), len(pattern)
    i = j = 0
    count = 0
    while True:
        while i < slen and j < plen:
            if j == -1 or src[i] == pattern[j]:
                i += 1
                j += 1
            else:
                j = next_table[j]

        if j != plen:
            return count

        count += 1
        # step back so that overlapping matches are counted too
        i -= plen - 1
        j = 0