import random

import pytest

from algokit.treap import Treap


@pytest.fixture
def values():
    rng = random.Random(5)
    return [rng.randrange(-500, 500) for _ in range(300)]


@pytest.fixture
def filled(values):
    treap = Treap(seed=1)
    for value in values:
        treap.insert(value)
    return treap


def test_iteration_is_sorted_and_unique(filled, values):
    assert list(filled) == sorted(set(values))
    assert len(filled) == len(set(values))


def test_duplicate_insert_is_ignored():
    treap = Treap(seed=2)
    treap.insert(5)
    treap.insert(5)
    assert list(treap) == [5]
    assert len(treap) == 1


def test_erase_removes_value(filled, values):
    victims = sorted(set(values))[::3]
    for value in victims:
        filled.erase(value)
    assert list(filled) == sorted(set(values) - set(victims))


def test_erase_missing_is_noop(filled, values):
    before = list(filled)
    filled.erase(10_000)
    assert list(filled) == before


def test_find_by_order_matches_sorted(filled, values):
    ordered = sorted(set(values))
    for k, expected in enumerate(ordered, start=1):
        assert filled.find_by_order(k) == expected


def test_order_of_key_inverts_find_by_order(filled, values):
    for value in set(values):
        assert filled.find_by_order(filled.order_of_key(value)) == value


@pytest.mark.parametrize("k", [0, -1])
def test_find_by_order_rejects_small(filled, k):
    with pytest.raises(IndexError):
        filled.find_by_order(k)


def test_find_by_order_rejects_past_end(filled):
    with pytest.raises(IndexError):
        filled.find_by_order(len(filled) + 1)


def test_order_of_key_missing_raises(filled):
    with pytest.raises(ValueError):
        filled.order_of_key(10_000)


def test_clear_empties(filled):
    filled.clear()
    assert len(filled) == 0
    assert list(filled) == []
    with pytest.raises(IndexError):
        filled.find_by_order(1)