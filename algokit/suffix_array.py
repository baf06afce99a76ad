"""Suffix array by prefix doubling, with pattern bounds and LCP array."""

from __future__ import annotations

from itertools import pairwise


class SuffixArray:
    """Sorted suffixes of ``s`` plus the empty suffix, which comes first.

    ``sa[i]`` is the start of the ``i``-th smallest suffix; ``sa[0] == len(s)``.
    """

    def __init__(self, s: str) -> None:
        if "\0" in s:
            raise ValueError("text must not contain NUL characters")
        self.text = s
        self._s = s + "\0"
        self.sa = self._build()

    def _build(self) -> list[int]:
        n = len(self._s)
        rank = [ord(c) for c in self._s]
        order = list(range(n))
        step = 1
        while True:
            def key(i: int, rank: list[int] = rank, step: int = step) -> tuple[int, int]:
                return rank[i], rank[i + step] if i + step < n else -1

            order.sort(key=key)
            new_rank = [0] * n
            for prev, cur in pairwise(order):
                new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
            rank = new_rank
            if rank[order[-1]] == n - 1:
                return order
            step *= 2

    def lower_bound(self, t: str) -> int:
        """First index in ``sa`` whose suffix is not below ``t``."""
        lo, hi = 1, len(self.sa)
        while lo < hi:
            mid = (lo + hi) // 2
            start = self.sa[mid]
            if self.text[start:start + len(t) + 1] >= t:
                hi = mid
            else:
                lo = mid + 1
        return lo

    def upper_bound(self, t: str) -> int:
        """First index in ``sa`` whose suffix does not start with ``t`` and is above it."""
        lo, hi = 1, len(self.sa)
        while lo < hi:
            mid = (lo + hi) // 2
            start = self.sa[mid]
            if self.text[start:start + len(t)] > t:
                hi = mid
            else:
                lo = mid + 1
        return lo

    def lcp(self) -> list[int]:
        """``res[i]`` is the longest common prefix of suffixes ``sa[i]`` and ``sa[i-1]``."""
        n = len(self.sa)
        inverse = [0] * n
        for i, start in enumerate(self.sa):
            inverse[start] = i
        result = [0] * n
        h = 0
        s = self._s
        for i in range(n):
            if inverse[i] == 0:
                continue
            other = self.sa[inverse[i] - 1]
            while s[i + h] == s[other + h]:
                h += 1
            result[inverse[i]] = h
            if h:
                h -= 1
        return result