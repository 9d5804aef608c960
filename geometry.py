import sys

from dataclasses import dataclass
from typing import Iterable, TextIO


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def dominates(a: Point, b: Point) -> bool:
    """
    Strict dominance: a dominates b if a is greater on both axes.
    Points sharing an x or a y coordinate never dominate each other.
    """
    return a.x > b.x and a.y > b.y


def as_points(points: Iterable) -> list[Point]:
    """
    Convert (x, y) pairs to points, passing Point instances through.
    """
    result = []
    for item in points:
        if isinstance(item, Point):
            result.append(item)
            continue
        try:
            x, y = item
        except (TypeError, ValueError):
            raise ValueError(f'Expected a point or an (x, y) pair, got {item!r}') from None
        result.append(Point(x, y))
    return result


def sort_by_x(points: list[Point]) -> list[Point]:
    """
    Sort points by x, and by descending y within equal x.
    Returns a new list, the input is left untouched. Time complexity: O(n log n).
    """
    return sorted(points, key=lambda p: (p.x, -p.y))


def format_points(points: Iterable[Point]) -> str:
    return ' '.join(f'({p.x}, {p.y})' for p in points)


def print_points(points: Iterable[Point], file: TextIO | None = None):
    print(format_points(points), file=file if file is not None else sys.stdout)
