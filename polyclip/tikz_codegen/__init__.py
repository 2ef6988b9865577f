"""Polygon → TikZ code generation helpers."""

from .generator import (
    ROLE_STYLES,
    TikzLayer,
    generate_tikz_code,
    generate_tikz_document,
)

__all__ = [
    "ROLE_STYLES",
    "TikzLayer",
    "generate_tikz_code",
    "generate_tikz_document",
]
