"""Hungarian algorithm for the minimum-cost assignment problem."""

from __future__ import annotations

import math
from collections.abc import Sequence


def hungarian(cost: Sequence[Sequence]) -> int | float:
    """Minimum total cost assigning each row to a distinct column.

    ``cost`` is an ``n x m`` matrix with ``n <= m``.
    """
    rows = [list(row) for row in cost]
    n = len(rows)
    if n == 0:
        return 0
    m = len(rows[0])
    if any(len(row) != m for row in rows):
        raise ValueError("cost matrix rows must all have the same length")
    if n > m:
        raise ValueError(f"cannot assign {n} rows to {m} columns")

    a = [[0] * (m + 1)] + [[0, *row] for row in rows]
    u = [0] * (n + 1)
    v = [0] * (m + 1)
    p = [0] * (m + 1)
    way = [0] * (m + 1)

    for i in range(1, n + 1):
        p[0] = i
        j0 = 0
        minv = [math.inf] * (m + 1)
        used = [False] * (m + 1)
        while True:
            used[j0] = True
            i0 = p[j0]
            delta = math.inf
            j1 = 0
            for j in range(1, m + 1):
                if used[j]:
                    continue
                cur = a[i0][j] - u[i0] - v[j]
                if cur < minv[j]:
                    minv[j] = cur
                    way[j] = j0
                if minv[j] < delta:
                    delta = minv[j]
                    j1 = j
            for j in range(m + 1):
                if used[j]:
                    u[p[j]] += delta
                    v[j] -= delta
                else:
                    minv[j] -= delta
            j0 = j1
            if p[j0] == 0:
                break
        while j0:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1

    assignment = [0] * (n + 1)
    for j in range(1, m + 1):
        assignment[p[j]] = j
    return sum(a[i][assignment[i]] for i in range(1, n + 1))