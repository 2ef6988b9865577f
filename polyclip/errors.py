"""Exceptions raised by the polygon engine."""

from __future__ import annotations


class PolygonError(Exception):
    """Base class for every failure raised by :mod:`polyclip`."""


class InvalidPolygonError(PolygonError, ValueError):
    """Raised when a polygon is built from fewer than three points."""


class InvalidEdgeError(PolygonError, ValueError):
    """Raised when an edge is derived from two coincident adjacent vertices."""


class NonTerminatingConstructionError(PolygonError, RuntimeError):
    """Raised when a boundary walk cannot close its loop."""

    def __init__(self, message: str, traced: int = 0):
        super().__init__(message)
        self.traced = traced


__all__ = [
    "PolygonError",
    "InvalidPolygonError",
    "InvalidEdgeError",
    "NonTerminatingConstructionError",
]
