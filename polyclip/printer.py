from typing import Optional, Sequence, Tuple

from .point import Point
from .polygon import Polygon
from .scene import Scene


def _fmt(value: float) -> str:
    text = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_point(point: Point) -> str:
    return f"({_fmt(point.x)}, {_fmt(point.y)})"


def _format_coords(coords: Sequence[Tuple[float, float]]) -> str:
    return " ".join(f"({_fmt(x)}, {_fmt(y)})" for x, y in coords)


def format_polygon(polygon: Polygon, name: Optional[str] = None) -> str:
    """Render ``polygon`` as a scene statement, or a bare vertex list without ``name``."""

    body = " ".join(format_point(p) for p in polygon.points)
    if name is None:
        return body
    return f"polygon {name} {body}"


def print_scene(scene: Scene) -> str:
    return "\n".join(
        f"polygon {decl.name} {_format_coords(decl.points)}" for decl in scene.polygons.values()
    )
