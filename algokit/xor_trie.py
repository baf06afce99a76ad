"""Binary trie over fixed-width integers for maximum-XOR queries."""

from __future__ import annotations


class _Node:
    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: list[_Node | None] = [None, None]
        self.count = 0


class XorTrie:
    """Multiset of non-negative integers below ``2**bits``."""

    def __init__(self, bits: int = 31) -> None:
        if bits < 1:
            raise ValueError(f"bit width must be positive, got {bits}")
        self.bits = bits
        self._root = _Node()
        self._size = 0

    def _check(self, x: int) -> None:
        if not 0 <= x < 1 << self.bits:
            raise ValueError(f"{x} does not fit in {self.bits} bits")

    def _bits_of(self, x: int):
        return ((x >> i) & 1 for i in range(self.bits - 1, -1, -1))

    def insert(self, x: int) -> None:
        """Add one copy of ``x``."""
        self._check(x)
        node = self._root
        for bit in self._bits_of(x):
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _Node()
            child.count += 1
            node = child
        self._size += 1

    def remove(self, x: int) -> None:
        """Remove one copy of ``x``; raises ``ValueError`` if it is absent."""
        self._check(x)
        path = []
        node = self._root
        for bit in self._bits_of(x):
            node = node.children[bit]
            if node is None or node.count == 0:
                raise ValueError(f"{x} is not in the trie")
            path.append(node)
        for node in path:
            node.count -= 1
        self._size -= 1

    def max_xor(self, x: int) -> int:
        """Largest ``x ^ y`` over the stored values ``y``."""
        self._check(x)
        if self._size == 0:
            raise ValueError("trie is empty")
        node = self._root
        result = 0
        for i, bit in zip(range(self.bits - 1, -1, -1), self._bits_of(x)):
            other = node.children[bit ^ 1]
            if other is not None and other.count > 0:
                result |= 1 << i
                node = other
            else:
                node = node.children[bit]
        return result