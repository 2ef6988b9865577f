"""Traversal cursors and the shared machinery of the boundary walks.

A walk never records progress on the polygons it visits.  Each walk owns
one :class:`Cursor` per input polygon, so polygons stay immutable and can
take part in any number of walks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import ClipConfig
from .edge import Edge, try_intersect
from .errors import NonTerminatingConstructionError
from .point import Point
from .polygon import Polygon, surround
from .tolerance import TolerancePolicy

logger = logging.getLogger(__name__)


class Cursor:
    """Current-vertex index into one polygon."""

    __slots__ = ("polygon", "index")

    def __init__(self, polygon: Polygon, index: int = 0):
        self.polygon = polygon
        self.index = index

    def __repr__(self) -> str:
        return f"Cursor(index={self.index}, size={len(self.polygon)})"

    @property
    def vertex(self) -> Point:
        return self.polygon.points[self.index]

    def edge(self) -> Edge:
        return Edge.from_polygon(self.polygon, self.index)

    def next_edge(self) -> Edge:
        return Edge.from_polygon(self.polygon, self.polygon.next_index(self.index))

    def advance(self) -> None:
        self.index = self.polygon.next_index(self.index)


@dataclass(frozen=True)
class Crossing:
    """First crossing between two polygons and the edges that produce it."""

    point: Point
    index_a: int
    index_b: int


def find_first_crossing(
    polygon_a: Polygon,
    polygon_b: Polygon,
    *,
    tolerance: TolerancePolicy,
    round_digits: int,
) -> Optional[Crossing]:
    """Scan edge pairs, A outer and B inner, and return the first crossing."""

    for i in range(len(polygon_a)):
        edge_a = Edge.from_polygon(polygon_a, i)
        for j in range(len(polygon_b)):
            point = try_intersect(
                edge_a,
                Edge.from_polygon(polygon_b, j),
                tolerance=tolerance,
                round_digits=round_digits,
            )
            if point is not None:
                logger.debug("First crossing %s at edges a=%d b=%d", point.as_tuple(), i, j)
                return Crossing(point, i, j)
    return None


class VertexTrace:
    """Result vertices collected by a walk, bounded by ``limit``."""

    def __init__(self, seed: Point, limit: int):
        self.seed = seed
        self.limit = limit
        self.points: List[Point] = [seed]

    def __len__(self) -> int:
        return len(self.points)

    def append(self, point: Point) -> None:
        self.points.append(point)
        if len(self.points) > self.limit:
            raise NonTerminatingConstructionError(
                f"Miscalculation in the construction of the polygon: "
                f"traced more than {self.limit} vertices",
                traced=len(self.points),
            )

    def to_polygon(self) -> Polygon:
        return Polygon(tuple(self.points))


class BoundaryWalk:
    """Common state of the intersection and merge walks."""

    def __init__(
        self,
        polygon_a: Polygon,
        polygon_b: Polygon,
        crossing: Crossing,
        config: ClipConfig,
    ):
        self.cursor_a = Cursor(polygon_a, crossing.index_a)
        self.cursor_b = Cursor(polygon_b, crossing.index_b)
        self.tolerance = config.tolerance
        self.round_digits = config.round_digits
        self.trace = VertexTrace(crossing.point, config.max_vertices)

    def cross(self, e1: Edge, e2: Edge) -> Optional[Point]:
        return try_intersect(e1, e2, tolerance=self.tolerance, round_digits=self.round_digits)

    def surrounds(self, polygon: Polygon, point: Point) -> bool:
        return surround(polygon, point, self.tolerance)

    def emit(self, point: Point) -> None:
        self.trace.append(point)

    def is_seed(self, point: Point) -> bool:
        return self.tolerance.same_point(point, self.trace.seed)

    def check_spin(self, idle_steps: int, cursor: Cursor) -> None:
        """Fail once ``cursor`` has gone all the way round without progress."""

        if idle_steps >= len(cursor.polygon):
            raise NonTerminatingConstructionError(
                f"Miscalculation in the construction of the polygon: cursor made a full "
                f"turn over {len(cursor.polygon)} vertices without progress",
                traced=len(self.trace),
            )


__all__ = [
    "Cursor",
    "Crossing",
    "find_first_crossing",
    "VertexTrace",
    "BoundaryWalk",
]
