"""Randomised treap holding a sorted set with order statistics."""

from __future__ import annotations

import random
from collections.abc import Iterator


class _Node:
    __slots__ = ("value", "priority", "size", "left", "right")

    def __init__(self, value: int, priority: int) -> None:
        self.value = value
        self.priority = priority
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _update(node: _Node | None) -> None:
    if node:
        node.size = _size(node.left) + _size(node.right) + 1


def _split(node: _Node | None, key: int, strict: bool) -> tuple[_Node | None, _Node | None]:
    """Split into values below ``key`` (or up to it, when not strict) and the rest."""
    if node is None:
        return None, None
    goes_left = node.value < key if strict else node.value <= key
    if goes_left:
        node.right, right = _split(node.right, key, strict)
        _update(node)
        return node, right
    left, node.left = _split(node.left, key, strict)
    _update(node)
    return left, node


def _merge(left: _Node | None, right: _Node | None) -> _Node | None:
    if left is None or right is None:
        return left or right
    if left.priority > right.priority:
        left.right = _merge(left.right, right)
        _update(left)
        return left
    right.left = _merge(left, right.left)
    _update(right)
    return right


class Treap:
    """A set of distinct values kept in order, with rank queries."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._root: _Node | None = None

    def insert(self, value: int) -> None:
        """Add ``value``; inserting a value already present changes nothing."""
        node = _Node(value, self._rng.randint(1, 2 * 10**9))
        left, rest = _split(self._root, value, strict=True)
        _, right = _split(rest, value, strict=False)
        self._root = _merge(_merge(left, node), right)

    def erase(self, value: int) -> None:
        """Remove ``value`` if present."""
        left, rest = _split(self._root, value, strict=True)
        _, right = _split(rest, value, strict=False)
        self._root = _merge(left, right)

    def find_by_order(self, k: int) -> int:
        """The ``k``-th smallest value, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError(f"order {k} out of range 1..{len(self)}")
        node = self._root
        while node:
            left_size = _size(node.left)
            if k <= left_size:
                node = node.left
            elif k == left_size + 1:
                return node.value
            else:
                k -= left_size + 1
                node = node.right
        raise IndexError(f"order {k} out of range")

    def order_of_key(self, value: int) -> int:
        """1-based rank of ``value``; raises ``ValueError`` if it is absent."""
        rank = 0
        node = self._root
        while node:
            if value < node.value:
                node = node.left
            elif value > node.value:
                rank += _size(node.left) + 1
                node = node.right
            else:
                return rank + _size(node.left) + 1
        raise ValueError(f"{value!r} is not in the treap")

    def clear(self) -> None:
        """Remove every value."""
        self._root = None

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return _size(self._root)