"""Boundary union of two simple polygons."""

from __future__ import annotations

import enum
import logging
from typing import Dict, Optional, Tuple

from .config import ClipConfig, resolve_config
from .logging_utils import apply_debug_logging
from .polygon import Polygon, surround
from .traversal import BoundaryWalk, Crossing, Cursor, find_first_crossing

logger = logging.getLogger(__name__)


class MergeState(enum.Enum):
    JUST_CROSSED = "just-crossed"
    SCANNING_OUTER = "scanning-outer"
    CLOSED = "closed"


class MergeEvent(enum.Enum):
    PROBE_CROSSED = "probe-crossed"
    OUTER_VERTEX = "outer-vertex"
    INNER_VERTEX = "inner-vertex"
    INNER_CROSSING = "inner-crossing"
    SEED_REACHED = "seed-reached"


# JUST_CROSSED: the vertex after the latest crossing is still owed to the trace.
MERGE_TRANSITIONS: Dict[Tuple[MergeState, MergeEvent], MergeState] = {
    (MergeState.JUST_CROSSED, MergeEvent.PROBE_CROSSED): MergeState.SCANNING_OUTER,
    (MergeState.SCANNING_OUTER, MergeEvent.OUTER_VERTEX): MergeState.JUST_CROSSED,
    (MergeState.JUST_CROSSED, MergeEvent.OUTER_VERTEX): MergeState.JUST_CROSSED,
    (MergeState.JUST_CROSSED, MergeEvent.INNER_VERTEX): MergeState.SCANNING_OUTER,
    (MergeState.SCANNING_OUTER, MergeEvent.INNER_CROSSING): MergeState.JUST_CROSSED,
    (MergeState.JUST_CROSSED, MergeEvent.SEED_REACHED): MergeState.CLOSED,
    (MergeState.SCANNING_OUTER, MergeEvent.SEED_REACHED): MergeState.CLOSED,
}


class MergeWalk(BoundaryWalk):
    """Alternate between the two boundaries, keeping the uncontained arcs."""

    def __init__(
        self,
        polygon_a: Polygon,
        polygon_b: Polygon,
        crossing: Crossing,
        config: ClipConfig,
    ):
        super().__init__(polygon_a, polygon_b, crossing, config)
        self.state = MergeState.JUST_CROSSED

    def fire(self, event: MergeEvent) -> None:
        try:
            target = MERGE_TRANSITIONS[(self.state, event)]
        except KeyError:
            raise RuntimeError(
                f"merge walk has no transition from {self.state.value} on {event.value}"
            ) from None
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Merge walk %s --%s--> %s", self.state.value, event.value, target.value)
        self.state = target

    def run(self) -> Polygon:
        a, b = self.cursor_a, self.cursor_b
        if self.surrounds(a.polygon, b.vertex):
            first, second = a, b
        else:
            first, second = b, a

        while self.state is not MergeState.CLOSED:
            if (
                self.state is MergeState.JUST_CROSSED
                and self.cross(a.next_edge(), b.edge()) is not None
            ):
                self.fire(MergeEvent.PROBE_CROSSED)
            if not self._trace_arc(first, second):
                self._trace_arc(second, first)
        return self.trace.to_polygon()

    def _trace_arc(self, inner: Cursor, outer: Cursor) -> bool:
        """Skip ``inner`` vertices covered by ``outer``, follow ``outer`` back
        to a crossing when needed, then emit the next ``inner`` vertex.

        Returns ``True`` once the walk is back at the seed crossing.
        """

        idle = 0
        while self.surrounds(outer.polygon, inner.vertex):
            idle += 1
            self.check_spin(idle, inner)
            inner.advance()

        if self.state is MergeState.SCANNING_OUTER:
            idle = 0
            while True:
                progressed = False
                if not self.surrounds(inner.polygon, outer.vertex):
                    self.emit(outer.vertex)
                    self.fire(MergeEvent.OUTER_VERTEX)
                    progressed = True
                outer.advance()

                point = self.cross(outer.edge(), inner.edge())
                if point is not None:
                    if self.is_seed(point):
                        self.fire(MergeEvent.SEED_REACHED)
                        return True
                    self.emit(point)
                    progressed = True
                    if self.state is MergeState.JUST_CROSSED and not self.surrounds(
                        outer.polygon, inner.vertex
                    ):
                        break

                idle = 0 if progressed else idle + 1
                self.check_spin(idle, outer)

        self.emit(inner.vertex)
        self.fire(MergeEvent.INNER_VERTEX)
        inner.advance()

        point = self.cross(outer.edge(), inner.edge())
        if point is not None:
            if self.is_seed(point):
                self.fire(MergeEvent.SEED_REACHED)
                return True
            self.emit(point)
            self.fire(MergeEvent.INNER_CROSSING)
        return False


def merge(
    polygon_a: Polygon,
    polygon_b: Polygon,
    config: Optional[ClipConfig] = None,
) -> Polygon:
    """Return the union outline of ``polygon_a`` and ``polygon_b``.

    Without boundary crossings the containing polygon is returned.  Two
    disjoint polygons yield the plain concatenation of both vertex lists,
    which is not a simple polygon.
    """

    cfg = resolve_config(config)
    crossing = find_first_crossing(
        polygon_a, polygon_b, tolerance=cfg.tolerance, round_digits=cfg.round_digits
    )
    if crossing is not None:
        result = MergeWalk(polygon_a, polygon_b, crossing, cfg).run()
        logger.info("Merge traced %d vertices", len(result))
        return result

    if surround(polygon_a, polygon_b.points[0], cfg.tolerance):
        logger.info("No crossings: first polygon contains the second")
        return polygon_a
    if surround(polygon_b, polygon_a.points[0], cfg.tolerance):
        logger.info("No crossings: second polygon contains the first")
        return polygon_b
    logger.warning("No crossings and no containment: concatenating both vertex lists")
    return Polygon(polygon_a.points + polygon_b.points)


apply_debug_logging(globals(), logger=logger, wrap_methods=False)

__all__ = ["MergeState", "MergeEvent", "MERGE_TRANSITIONS", "MergeWalk", "merge"]
