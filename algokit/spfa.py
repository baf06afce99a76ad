"""Shortest Path Faster Algorithm with negative-cycle detection."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

INF = 10**9


@dataclass
class SPFAResult:
    """Distances found and whether a reachable negative cycle exists."""

    distances: dict[int, int] = field(default_factory=dict)
    negative_cycle: bool = False


def _edges(graph: Mapping | Sequence, node) -> Iterable:
    if isinstance(graph, Mapping):
        return graph.get(node, ())
    return graph[node]


def spfa(graph: Mapping | Sequence, n: int, source: int) -> SPFAResult:
    """Relax edges from ``source`` over a graph of ``n`` nodes.

    Distances are clamped below at ``-INF``. When a negative cycle is found
    the search stops and the distances reached so far are returned.
    """
    distances = {source: 0}
    counts: defaultdict[int, int] = defaultdict(int)
    queue = deque([source])
    in_queue = {source}
    while queue:
        node = queue.popleft()
        in_queue.discard(node)
        for to, weight in _edges(graph, node):
            candidate = distances[node] + weight
            if candidate < distances.get(to, INF):
                distances[to] = max(candidate, -INF)
                if to not in in_queue:
                    queue.append(to)
                    in_queue.add(to)
                    counts[to] += 1
                    if counts[to] > n:
                        return SPFAResult(distances, True)
    return SPFAResult(distances, False)