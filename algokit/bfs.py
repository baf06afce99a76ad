"""Breadth-first search with shortest-path counting."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass
class BFSResult:
    """Levels and number of shortest paths for every reached node."""

    distance: dict[Hashable, int] = field(default_factory=dict)
    ways: dict[Hashable, int] = field(default_factory=dict)


def _neighbours(graph: Mapping | Sequence, node) -> Iterable:
    if isinstance(graph, Mapping):
        return graph.get(node, ())
    return graph[node]


def bfs(graph: Mapping | Sequence, source) -> BFSResult:
    """Search from ``source``; unreachable nodes are absent from the result."""
    result = BFSResult(distance={source: 0}, ways={source: 1})
    distance, ways = result.distance, result.ways
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in _neighbours(graph, node):
            if nxt not in distance:
                distance[nxt] = distance[node] + 1
                ways[nxt] = ways[node]
                queue.append(nxt)
            elif distance[node] + 1 == distance[nxt]:
                ways[nxt] += ways[node]
    return result