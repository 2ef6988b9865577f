from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable single-precision coordinate pair."""

    x: np.float32
    y: np.float32

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", np.float32(self.x))
        object.__setattr__(self, "y", np.float32(self.y))

    @classmethod
    def coerce(cls, value: Union["Point", Sequence[float]]) -> "Point":
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def as_tuple(self) -> Tuple[float, float]:
        return float(self.x), float(self.y)

    def __repr__(self) -> str:
        return f"Point(x={float(self.x)!r}, y={float(self.y)!r})"
