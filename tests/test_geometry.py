import itertools

from algokit.geometry import (
    Point,
    is_orthogonal,
    is_rectangle,
    is_rectangle_any_order,
    is_square,
    is_square_any_order,
    squared_distance,
)

SQUARE = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
RECT = [Point(0, 0), Point(4, 0), Point(4, 1), Point(0, 1)]
TRAPEZOID = [Point(0, 0), Point(4, 0), Point(3, 2), Point(1, 2)]


def test_squared_distance_pythagorean():
    assert squared_distance(Point(0, 0), Point(3, 4)) == 25


def test_squared_distance_symmetric_and_zero():
    a, b = Point(-2, 7), Point(5, -1)
    assert squared_distance(a, b) == squared_distance(b, a)
    assert squared_distance(a, a) == 0


def test_orthogonal_corner():
    assert is_orthogonal(Point(0, 1), Point(0, 0), Point(1, 0))
    assert not is_orthogonal(Point(1, 1), Point(0, 0), Point(1, 0))


def test_square_in_order():
    assert is_square(*SQUARE)
    assert is_rectangle(*SQUARE)


def test_rectangle_is_not_square():
    assert is_rectangle(*RECT)
    assert not is_square(*RECT)
    assert not is_square_any_order(*RECT)


def test_trapezoid_is_not_rectangle():
    assert not any(is_rectangle_any_order(*p) for p in itertools.permutations(TRAPEZOID))


def test_any_order_accepts_every_permutation():
    for perm in itertools.permutations(SQUARE):
        assert is_square_any_order(*perm)
        assert is_rectangle_any_order(*perm)
    for perm in itertools.permutations(RECT):
        assert is_rectangle_any_order(*perm)


def test_square_implies_rectangle():
    for shape in (SQUARE, RECT, TRAPEZOID):
        for perm in itertools.permutations(shape):
            if is_square(*perm):
                assert is_rectangle(*perm)