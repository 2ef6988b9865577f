"""Boundary intersection of two simple polygons."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ClipConfig, resolve_config
from .logging_utils import apply_debug_logging
from .point import Point
from .polygon import Polygon, surround
from .traversal import BoundaryWalk, Cursor, find_first_crossing

logger = logging.getLogger(__name__)


class IntersectionWalk(BoundaryWalk):
    """Alternate between the two boundaries, keeping the contained arcs."""

    def run(self) -> Polygon:
        a, b = self.cursor_a, self.cursor_b
        b_inner = self.surrounds(a.polygon, b.vertex) or (
            self.cross(a.edge(), b.next_edge()) is None
            and not self.surrounds(b.polygon, a.vertex)
        )
        logger.debug("Intersection walk starts with %s inner", "B" if b_inner else "A")

        crossing: Optional[Point] = None
        while True:
            if crossing is not None:
                self.emit(crossing)
            inner, outer = (b, a) if b_inner else (a, b)
            crossing = self._trace_inner_arc(inner, outer)
            b_inner = not b_inner
            if self.is_seed(crossing):
                break
        return self.trace.to_polygon()

    def _trace_inner_arc(self, inner: Cursor, outer: Cursor) -> Point:
        while self.surrounds(outer.polygon, inner.vertex):
            self.emit(inner.vertex)
            inner.advance()

        outer.advance()
        idle = 0
        while True:
            point = self.cross(inner.edge(), outer.edge())
            if point is not None:
                return point
            idle += 1
            self.check_spin(idle, outer)
            outer.advance()


def intersect(
    polygon_a: Polygon,
    polygon_b: Polygon,
    config: Optional[ClipConfig] = None,
) -> Optional[Polygon]:
    """Return the common region of ``polygon_a`` and ``polygon_b``.

    Without boundary crossings the result is whichever polygon lies inside
    the other, or ``None`` when they are disjoint.
    """

    cfg = resolve_config(config)
    crossing = find_first_crossing(
        polygon_a, polygon_b, tolerance=cfg.tolerance, round_digits=cfg.round_digits
    )
    if crossing is not None:
        result = IntersectionWalk(polygon_a, polygon_b, crossing, cfg).run()
        logger.info("Intersection traced %d vertices", len(result))
        return result

    if surround(polygon_a, polygon_b.points[0], cfg.tolerance):
        logger.info("No crossings: second polygon lies inside the first")
        return polygon_b
    if surround(polygon_b, polygon_a.points[0], cfg.tolerance):
        logger.info("No crossings: first polygon lies inside the second")
        return polygon_a
    logger.info("No crossings: polygons are disjoint")
    return None


apply_debug_logging(globals(), logger=logger, wrap_methods=False)

__all__ = ["IntersectionWalk", "intersect"]
