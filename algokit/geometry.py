"""Integer point predicates: distances, right angles, rectangles, squares."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    idx: int = 0


def squared_distance(a: Point, b: Point) -> int:
    """Squared Euclidean distance between ``a`` and ``b``."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def is_orthogonal(a: Point, b: Point, c: Point) -> bool:
    """Whether angle ABC is a right angle."""
    return (b.x - a.x) * (b.x - c.x) + (b.y - a.y) * (b.y - c.y) == 0


def is_rectangle(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Whether ABCD, in that order, form a rectangle."""
    return is_orthogonal(a, b, c) and is_orthogonal(b, c, d) and is_orthogonal(c, d, a)


def is_rectangle_any_order(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Whether the four points form a rectangle in some order."""
    return is_rectangle(a, b, c, d) or is_rectangle(b, c, a, d) or is_rectangle(c, a, b, d)


def is_square(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Whether ABCD, in that order, form a square."""
    return is_rectangle(a, b, c, d) and squared_distance(a, b) == squared_distance(b, c)


def is_square_any_order(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Whether the four points form a square in some order."""
    return is_square(a, b, c, d) or is_square(b, c, a, d) or is_square(c, a, b, d)