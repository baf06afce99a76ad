"""2-SAT solver over an implication graph using Kosaraju's algorithm."""

from __future__ import annotations


class TwoSAT:
    """Implication graph over ``n`` literal nodes.

    Literals come in pairs: node ``2*k`` and node ``2*k + 1`` are a variable
    and its negation, so the complement of literal ``x`` is ``x ^ 1``.
    """

    def __init__(self, n: int) -> None:
        if n < 0 or n % 2:
            raise ValueError(f"number of literal nodes must be even and non-negative, got {n}")
        self.n = n
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._reverse: list[list[int]] = [[] for _ in range(n)]

    def _check(self, node: int) -> None:
        if not 0 <= node < self.n:
            raise IndexError(f"literal {node} out of range 0..{self.n - 1}")

    def add(self, u: int, v: int) -> None:
        """Add the implication ``u -> v``."""
        self._check(u)
        self._check(v)
        self._graph[u].append(v)
        self._reverse[v].append(u)

    def _finish_order(self) -> list[int]:
        visited = [False] * self.n
        order: list[int] = []
        for start in range(self.n):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._graph[start]))]
            while stack:
                node, neighbours = stack[-1]
                for nxt in neighbours:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, iter(self._graph[nxt])))
                        break
                else:
                    stack.pop()
                    order.append(node)
        return order

    def _label(self, start: int, group: int, comp: list[int]) -> None:
        comp[start] = group
        stack = [start]
        while stack:
            node = stack.pop()
            for prev in self._reverse[node]:
                if comp[prev] == -1:
                    comp[prev] = group
                    stack.append(prev)

    def solve(self) -> list[int] | None:
        """Return one chosen literal per variable, or ``None`` if unsatisfiable."""
        comp = [-1] * self.n
        group = 0
        for node in reversed(self._finish_order()):
            if comp[node] == -1:
                self._label(node, group, comp)
                group += 1
        pairs = range(0, self.n, 2)
        if any(comp[i] == comp[i ^ 1] for i in pairs):
            return None
        return [i if comp[i] > comp[i ^ 1] else i ^ 1 for i in pairs]