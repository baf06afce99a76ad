# algokit

A collection of classic algorithms and data structures, written in plain
Python with no third-party dependencies. It is a library only: there is no
command-line tool, and nothing is read from or written to files.

## Contents

| Module | What it provides |
| --- | --- |
| `algokit.twosat` | `TwoSAT`: 2-satisfiability through strongly connected components |
| `algokit.bfs` | `bfs`, `BFSResult`: levels and counts of shortest paths in unweighted graphs |
| `algokit.dijkstra` | `dijkstra`, `shortest_path`, `ShortestPaths.path_to` |
| `algokit.spfa` | `spfa`, `SPFAResult`: shortest paths with negative weights and negative-cycle detection |
| `algokit.geometry` | `Point`, `squared_distance`, `is_orthogonal`, `is_rectangle`, `is_rectangle_any_order`, `is_square`, `is_square_any_order` |
| `algokit.hungarian` | `hungarian`: minimum-cost assignment of rows to columns |
| `algokit.kmp` | `prefix_function`, `find_occurrences` for strings and other sequences |
| `algokit.fft` | `fft`, `multiply_mod`: complex FFT and polynomial multiplication modulo an integer |
| `algokit.polynomial` | `convolution`, `poly_inverse`: power-series inverse modulo a prime |
| `algokit.treap` | `Treap`: an ordered set of distinct values with rank queries |
| `algokit.xor_trie` | `XorTrie`: a binary trie multiset for maximum-XOR queries |
| `algokit.suffix_array` | `SuffixArray`: suffix array, pattern bounds and LCP array |

## Notes on the interfaces

- Graph functions (`bfs`, `dijkstra`, `spfa`) take either a mapping from node
  to adjacency list or a sequence indexed by node. `dijkstra` and `spfa`
  expect `(neighbour, weight)` pairs. Unreachable nodes are simply absent from
  the returned distances.
- `spfa(graph, n, source)` reports `negative_cycle=True` when a node is queued
  more than `n` times; distances are clamped below at `-10**9`.
- `TwoSAT(n)` works on `n` literal nodes (`n` even); nodes `2k` and `2k + 1`
  are a variable and its negation. `solve()` returns one chosen literal per
  variable, or `None` when the formula cannot be satisfied.
- `hungarian(cost)` takes an `n x m` matrix with `n <= m` and returns the
  minimum total cost.
- `find_occurrences` raises `ValueError` for an empty pattern.
- `poly_inverse(h, length, mod)` returns as many coefficients as the smallest
  power of two not below `length`; `h[0]` must be invertible.
- `Treap.find_by_order(k)` is 1-based and raises `IndexError` when out of
  range; `Treap.order_of_key(value)` is 1-based and raises `ValueError` when
  the value is absent.
- `XorTrie.remove` raises `ValueError` for a value not stored, and `max_xor`
  raises `ValueError` on an empty trie.
- `SuffixArray.sa[0]` is always the empty suffix; the text may not contain
  NUL characters.

## Installation

```
pip install .
```

## Examples

Shortest paths:

```python
from algokit.dijkstra import dijkstra, shortest_path

graph = {1: [(2, 4), (3, 1)], 3: [(2, 1)]}
paths = dijkstra(graph, 1)
print(paths.path_to(2))             # [1, 3, 2]
print(shortest_path(graph, 1, 2))   # [1, 3, 2]
```

Pattern search:

```python
from algokit.kmp import find_occurrences

print(find_occurrences("abababa", "aba"))  # [0, 2, 4]
```

Order statistics:

```python
from algokit.treap import Treap

t = Treap(seed=1)
for v in (5, 1, 3):
    t.insert(v)
print(list(t))             # [1, 3, 5]
print(t.find_by_order(2))  # 3
print(t.order_of_key(5))   # 3
```

Maximum XOR:

```python
from algokit.xor_trie import XorTrie

trie = XorTrie(bits=31)
trie.insert(0)
trie.insert(8)
print(trie.max_xor(3))  # 11
```

## Running the tests

```
pip install .[test]
pytest
```