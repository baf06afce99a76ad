"""Dijkstra's shortest paths with path reconstruction."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass
class ShortestPaths:
    """Distances and shortest-path tree from a single source."""

    source: Hashable
    distances: dict = field(default_factory=dict)
    parents: dict = field(default_factory=dict)

    def path_to(self, destination) -> list | None:
        """Nodes from the source to ``destination``, or ``None`` if unreachable."""
        if destination not in self.distances:
            return None
        path = [destination]
        node = destination
        while node != self.source:
            node = self.parents[node]
            path.append(node)
        path.reverse()
        return path


def _edges(graph: Mapping | Sequence, node) -> Iterable:
    if isinstance(graph, Mapping):
        return graph.get(node, ())
    return graph[node]


def dijkstra(graph: Mapping | Sequence, source) -> ShortestPaths:
    """Run Dijkstra from ``source`` over ``(neighbour, weight)`` adjacency lists."""
    result = ShortestPaths(source=source, distances={source: 0})
    best = {source: 0}
    done = set()
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if node in done or dist != best[node]:
            continue
        done.add(node)
        result.distances[node] = dist
        for nxt, weight in _edges(graph, node):
            candidate = dist + weight
            if nxt not in best or candidate < best[nxt]:
                best[nxt] = candidate
                result.parents[nxt] = node
                heapq.heappush(heap, (candidate, nxt))
    return result


def shortest_path(graph: Mapping | Sequence, source, destination) -> list | None:
    """Shortest path from ``source`` to ``destination``, or ``None``."""
    return dijkstra(graph, source).path_to(destination)