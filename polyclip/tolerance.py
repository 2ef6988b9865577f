"""Comparison policy for every floating-point equality used by the engine.

The clipping procedure relies on three exact comparisons: the determinant
test that rejects parallel edges, the sub-triangle area sum of the
containment test, and the equality between a freshly found crossing and
the seed crossing that closes a boundary walk.  :class:`TolerancePolicy`
owns all three so a different epsilon can be substituted without touching
the algorithms.  The zero policy reproduces exact equality and is the
default.
"""

from __future__ import annotations

from dataclasses import dataclass

from .point import Point


@dataclass(frozen=True)
class TolerancePolicy:
    parallel_eps: float = 0.0
    area_eps: float = 0.0
    point_eps: float = 0.0

    def __post_init__(self) -> None:
        for name in ("parallel_eps", "area_eps", "point_eps"):
            value = float(getattr(self, name))
            if value < 0.0:
                raise ValueError(f"{name} must be non-negative, got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def uniform(cls, eps: float) -> "TolerancePolicy":
        return cls(parallel_eps=eps, area_eps=eps, point_eps=eps)

    @property
    def is_exact(self) -> bool:
        return self.parallel_eps == 0.0 and self.area_eps == 0.0 and self.point_eps == 0.0

    def is_parallel(self, delta: float) -> bool:
        """Return ``True`` when the line determinant ``delta`` counts as zero."""

        if self.parallel_eps == 0.0:
            return bool(delta == 0)
        return bool(abs(delta) <= self.parallel_eps)

    def areas_match(self, whole: float, parts: float) -> bool:
        if self.area_eps == 0.0:
            return bool(whole == parts)
        return bool(abs(whole - parts) <= self.area_eps)

    def same_point(self, a: Point, b: Point) -> bool:
        if self.point_eps == 0.0:
            return a == b
        return bool(abs(a.x - b.x) <= self.point_eps and abs(a.y - b.y) <= self.point_eps)


EXACT = TolerancePolicy()

__all__ = ["TolerancePolicy", "EXACT"]
