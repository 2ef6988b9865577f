"""TikZ renderer for input polygons and clipping results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..polygon import Polygon

# Colour roles follow the drawing conventions of the interactive editor:
# first input blue, second input red, intersection green, merge violet.
ROLE_STYLES: Dict[str, str] = {
    "first": "draw=blue, line width=\\pcLW",
    "second": "draw=red, line width=\\pcLW",
    "intersection": (
        "draw=green!60!black, fill=green!60!black, fill opacity=0.35, line width=\\pcLW"
    ),
    "merge": "draw=violet, fill=violet, fill opacity=0.25, line width=\\pcLW",
}

TARGET_SPAN_CM = 8.0

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\tikzset{
  pc/line width/.store in=\pcLW, pc/line width=0.8pt,
}
\begin{document}
%s
\end{document}
"""


@dataclass
class TikzLayer:
    """One polygon to draw, with a role selecting its style."""

    name: str
    polygon: Polygon
    role: str

    def __post_init__(self) -> None:
        if self.role not in ROLE_STYLES:
            raise ValueError(
                f"unknown layer role {self.role!r}; expected one of {sorted(ROLE_STYLES)}"
            )


def generate_tikz_document(layers: Sequence[TikzLayer], *, normalize: bool = True) -> str:
    """Render ``layers`` as a standalone LaTeX document."""

    return standalone_tpl % generate_tikz_code(layers, normalize=normalize)


def generate_tikz_code(layers: Sequence[TikzLayer], *, normalize: bool = True) -> str:
    """Render ``layers`` as a ``tikzpicture``; later layers paint over earlier ones."""

    if not layers:
        raise ValueError("at least one layer is required")
    transform = _fit_transform(layers) if normalize else (0.0, 0.0, 1.0)

    lines: List[str] = ["\\begin{tikzpicture}"]
    for layer in layers:
        coords = [_apply(transform, p) for p in layer.polygon.as_tuples()]
        path = " -- ".join(f"({_format_float(x)},{_format_float(y)})" for x, y in coords)
        lines.append(f"  % {layer.name} ({layer.role}, {len(coords)} vertices)")
        lines.append(f"  \\draw[{ROLE_STYLES[layer.role]}] {path} -- cycle;")
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def _fit_transform(layers: Sequence[TikzLayer]) -> Tuple[float, float, float]:
    xs: List[float] = []
    ys: List[float] = []
    for layer in layers:
        for x, y in layer.polygon.as_tuples():
            xs.append(x)
            ys.append(y)
    span = max(max(xs) - min(xs), max(ys) - min(ys), 1e-9)
    cx = 0.5 * (min(xs) + max(xs))
    cy = 0.5 * (min(ys) + max(ys))
    return cx, cy, TARGET_SPAN_CM / span


def _apply(transform: Tuple[float, float, float], pt: Tuple[float, float]) -> Tuple[float, float]:
    cx, cy, scale = transform
    return (pt[0] - cx) * scale, (pt[1] - cy) * scale


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
