"""Parsed representation of a polygon scene file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .errors import InvalidPolygonError
from .polygon import Polygon


@dataclass
class Span:
    line: int
    col: int


@dataclass
class PolygonDecl:
    name: str
    points: List[Tuple[float, float]]
    span: Span


@dataclass
class Scene:
    polygons: Dict[str, PolygonDecl] = field(default_factory=dict)

    @property
    def names(self) -> List[str]:
        return list(self.polygons)

    def build(self, name: str) -> Polygon:
        """Construct the :class:`Polygon` declared as ``name``."""

        try:
            decl = self.polygons[name]
        except KeyError:
            raise KeyError(f"scene has no polygon named {name!r}") from None
        try:
            return Polygon(tuple(decl.points))
        except InvalidPolygonError as exc:
            sp = decl.span
            raise InvalidPolygonError(
                f"[line {sp.line}, col {sp.col}] polygon {name}: {exc}"
            ) from exc
