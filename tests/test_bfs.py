import math

from algokit.bfs import bfs


def test_diamond_counts_two_paths():
    graph = {0: [1, 2], 1: [3], 2: [3]}
    result = bfs(graph, 0)
    assert result.distance[3] == 2
    assert result.ways[3] == 2


def test_source_values():
    result = bfs([[1], [0]], 0)
    assert result.distance[0] == 0
    assert result.ways[0] == 1


def test_unreachable_nodes_absent():
    graph = [[1], [], [0]]
    result = bfs(graph, 0)
    assert 2 not in result.distance
    assert 2 not in result.ways
    assert set(result.distance) == {0, 1}


def test_grid_path_counts_are_binomial():
    size = 4
    graph = {}
    for r in range(size):
        for c in range(size):
            nbrs = []
            if r + 1 < size:
                nbrs.append((r + 1, c))
            if c + 1 < size:
                nbrs.append((r, c + 1))
            graph[(r, c)] = nbrs
    result = bfs(graph, (0, 0))
    for (r, c), count in result.ways.items():
        assert result.distance[(r, c)] == r + c
        assert count == math.comb(r + c, r)


def test_edge_invariants_on_undirected_graph():
    edges = [(0, 1), (1, 2), (2, 3), (0, 4), (4, 3), (3, 5), (1, 5)]
    graph = {v: [] for e in edges for v in e}
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)
    result = bfs(graph, 0)
    for u, nbrs in graph.items():
        for v in nbrs:
            assert abs(result.distance[u] - result.distance[v]) <= 1
    for v, count in result.ways.items():
        if v == 0:
            continue
        preds = [u for u in graph[v] if result.distance[u] + 1 == result.distance[v]]
        assert count == sum(result.ways[u] for u in preds)