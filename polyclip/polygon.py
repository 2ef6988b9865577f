"""Polygon container with area and containment queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from .config import resolve_config
from .edge import Edge
from .errors import InvalidPolygonError
from .point import Point
from .tolerance import TolerancePolicy

PointLike = Union[Point, Sequence[float]]


@dataclass(frozen=True)
class Polygon:
    """Simple polygon given by at least three vertices, implicitly closed."""

    points: Tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(Point.coerce(p) for p in self.points)
        if len(points) < 3:
            raise InvalidPolygonError(
                f"a polygon needs at least 3 points, got {len(points)}"
            )
        object.__setattr__(self, "points", points)

    @classmethod
    def from_coords(cls, coords: Iterable[PointLike]) -> "Polygon":
        return cls(tuple(coords))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __repr__(self) -> str:
        return f"Polygon({[p.as_tuple() for p in self.points]!r})"

    def next_index(self, index: int) -> int:
        return index + 1 if index < len(self.points) - 1 else 0

    def edge(self, index: int) -> Edge:
        return Edge.from_polygon(self, index)

    def as_tuples(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(p.as_tuple() for p in self.points)

    def as_array(self) -> np.ndarray:
        return np.array([[p.x, p.y] for p in self.points], dtype=np.float32)

    def area(self) -> float:
        return area(self)

    def surround(self, point: PointLike, tolerance: Optional[TolerancePolicy] = None) -> bool:
        return surround(self, point, tolerance)


def area(polygon: Polygon) -> float:
    """Return the unsigned shoelace area of ``polygon``."""

    coords = polygon.as_array().astype(np.float64)
    xs, ys = coords[:, 0], coords[:, 1]
    total = np.sum(xs * np.roll(ys, -1) - np.roll(xs, -1) * ys)
    return float(abs(total / 2.0))


def _twice_area(a: Point, b: Point, c: Point) -> np.float32:
    return abs(a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))


def surround(
    polygon: Polygon,
    point: PointLike,
    tolerance: Optional[TolerancePolicy] = None,
) -> bool:
    """Return ``True`` when ``point`` lies inside or on ``polygon``.

    Every vertex ``i`` roots a fan of triangles ``(i, i1, i2)``; the point
    must fall in some triangle of every fan, judged by comparing the
    triangle's area with the sum of the three sub-triangles the point
    forms.  The fan walk ends with the degenerate triangle ``(i, i-1, i)``,
    which admits points collinear with the edge entering ``i``.  On
    polygons that are not star-shaped the outcome depends on the fans and
    can disagree with a crossing-number test.
    """

    tol = tolerance if tolerance is not None else resolve_config().tolerance
    pt = Point.coerce(point)
    pts = polygon.points
    contained = False
    for i in range(len(pts)):
        contained = False
        stop = polygon.next_index(i)
        i1 = stop
        while True:
            i2 = polygon.next_index(i1)
            if i2 == stop:
                break
            whole = _twice_area(pts[i1], pts[i2], pts[i])
            parts = (
                _twice_area(pts[i1], pts[i2], pt)
                + _twice_area(pts[i], pts[i2], pt)
                + _twice_area(pts[i1], pts[i], pt)
            )
            if tol.areas_match(whole, parts):
                contained = True
                break
            i1 = polygon.next_index(i1)
        if not contained:
            break
    return contained


__all__ = ["Polygon", "PointLike", "area", "surround"]
