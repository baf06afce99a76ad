"""Knuth-Morris-Pratt prefix function and pattern search."""

from __future__ import annotations

from collections.abc import Sequence

_SEPARATOR = object()


def prefix_function(seq: Sequence) -> list[int]:
    """Length of the longest proper border of each prefix of ``seq``."""
    items = list(seq)
    pi = [0] * len(items)
    for i in range(1, len(items)):
        j = pi[i - 1]
        while j > 0 and items[i] != items[j]:
            j = pi[j - 1]
        if items[i] == items[j]:
            j += 1
        pi[i] = j
    return pi


def find_occurrences(text: Sequence, pattern: Sequence) -> list[int]:
    """Start indices of every occurrence of ``pattern`` in ``text``."""
    pat = list(pattern)
    if not pat:
        raise ValueError("pattern must not be empty")
    size = len(pat)
    borders = prefix_function([*pat, _SEPARATOR, *text])
    return [i - 2 * size for i, border in enumerate(borders) if i > size and border == size]