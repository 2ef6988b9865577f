"""Directed polygon edges and the pairwise crossing test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from .config import resolve_config
from .errors import InvalidEdgeError
from .point import Point
from .tolerance import TolerancePolicy

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .polygon import Polygon


@dataclass(frozen=True)
class Edge:
    """Segment running from ``prev_point`` to ``curr_point``."""

    prev_point: Point
    curr_point: Point

    @classmethod
    def from_polygon(cls, polygon: "Polygon", index: int) -> "Edge":
        """Return the edge of ``polygon`` that ends at vertex ``index``.

        The edge ending at vertex 0 starts at the last vertex.
        """

        points = polygon.points
        curr = points[index]
        prev = points[index - 1] if index != 0 else points[len(points) - 1]
        if curr == prev:
            raise InvalidEdgeError(
                f"edge {index} of the polygon has coincident points {curr.as_tuple()}"
            )
        return cls(prev, curr)

    def is_outside(self, x: np.float32, y: np.float32) -> bool:
        """Return ``True`` when ``(x, y)`` falls outside the edge's bounding box."""

        p, c = self.prev_point, self.curr_point
        return bool(
            (x < p.x and x < c.x)
            or (x > p.x and x > c.x)
            or (y < p.y and y < c.y)
            or (y > p.y and y > c.y)
        )


def try_intersect(
    e1: Edge,
    e2: Edge,
    *,
    tolerance: Optional[TolerancePolicy] = None,
    round_digits: Optional[int] = None,
) -> Optional[Point]:
    """Return the crossing point of ``e1`` and ``e2`` or ``None``.

    Both edges are turned into lines ``a*x + b*y = c`` and solved with
    single-precision arithmetic.  The solution is accepted when it lies in
    both bounding boxes and is rounded so that crossings found from
    different edge pairs compare equal.
    """

    if tolerance is None or round_digits is None:
        config = resolve_config()
        tolerance = tolerance if tolerance is not None else config.tolerance
        round_digits = round_digits if round_digits is not None else config.round_digits

    p1, q1 = e1.prev_point, e1.curr_point
    p2, q2 = e2.prev_point, e2.curr_point

    a1 = q1.y - p1.y
    b1 = p1.x - q1.x
    c1 = a1 * p1.x + b1 * p1.y

    a2 = q2.y - p2.y
    b2 = p2.x - q2.x
    c2 = a2 * p2.x + b2 * p2.y

    delta = a1 * b2 - a2 * b1
    if tolerance.is_parallel(delta):
        return None

    with np.errstate(over="ignore", invalid="ignore"):
        x = (b2 * c1 - b1 * c2) / delta
        y = (a1 * c2 - a2 * c1) / delta
    if not (np.isfinite(x) and np.isfinite(y)):
        return None

    if e1.is_outside(x, y) or e2.is_outside(x, y):
        return None

    return Point(round(float(x), round_digits), round(float(y), round_digits))


__all__ = ["Edge", "try_intersect"]
