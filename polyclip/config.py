"""Process-wide configuration for the clipping operations."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from .tolerance import TolerancePolicy


@dataclass
class ClipConfig:
    """Limits and comparison policy shared by ``intersect`` and ``merge``."""

    max_vertices: int = 1000
    round_digits: int = 4
    tolerance: TolerancePolicy = field(default_factory=TolerancePolicy)


_CLIP_CONFIG = ClipConfig()


def get_clip_config() -> ClipConfig:
    return copy.deepcopy(_CLIP_CONFIG)


def set_clip_config(config: ClipConfig) -> None:
    global _CLIP_CONFIG
    if config.max_vertices < 3:
        raise ValueError(f"max_vertices must be at least 3, got {config.max_vertices}")
    if config.round_digits < 0:
        raise ValueError(f"round_digits must be non-negative, got {config.round_digits}")
    _CLIP_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[ClipConfig] = None) -> ClipConfig:
    """Return ``config`` or the active process-wide configuration."""

    return config if config is not None else _CLIP_CONFIG


__all__ = ["ClipConfig", "get_clip_config", "set_clip_config", "resolve_config"]
