import random

import pytest

from algokit.xor_trie import XorTrie


def test_max_xor_matches_brute_force():
    rng = random.Random(9)
    stored = [rng.randrange(1 << 31) for _ in range(200)]
    trie = XorTrie()
    for value in stored:
        trie.insert(value)
    for _ in range(100):
        x = rng.randrange(1 << 31)
        assert trie.max_xor(x) == max(x ^ y for y in stored)


def test_remove_updates_answers():
    rng = random.Random(4)
    stored = [rng.randrange(1 << 10) for _ in range(60)]
    trie = XorTrie(bits=10)
    for value in stored:
        trie.insert(value)
    for value in stored[:40]:
        trie.remove(value)
    remaining = stored[40:]
    for x in range(0, 1 << 10, 37):
        assert trie.max_xor(x) == max(x ^ y for y in remaining)


def test_single_zero_returns_query():
    trie = XorTrie(bits=3)
    trie.insert(0)
    assert trie.max_xor(5) == 5


def test_duplicates_survive_single_removal():
    trie = XorTrie(bits=4)
    trie.insert(6)
    trie.insert(6)
    trie.remove(6)
    assert trie.max_xor(6) == 0
    trie.remove(6)
    with pytest.raises(ValueError):
        trie.max_xor(6)


def test_remove_absent_raises():
    trie = XorTrie(bits=4)
    trie.insert(3)
    with pytest.raises(ValueError):
        trie.remove(2)
    assert trie.max_xor(0) == 3


def test_empty_max_xor_raises():
    with pytest.raises(ValueError):
        XorTrie().max_xor(1)


@pytest.mark.parametrize("value", [-1, 1 << 5])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        XorTrie(bits=5).insert(value)