from .point import Point
from .edge import Edge, try_intersect
from .polygon import Polygon, area, surround
from .errors import (
    PolygonError,
    InvalidPolygonError,
    InvalidEdgeError,
    NonTerminatingConstructionError,
)
from .tolerance import TolerancePolicy, EXACT
from .config import ClipConfig, get_clip_config, set_clip_config
from .traversal import Cursor, Crossing, find_first_crossing
from .intersection import intersect
from .merger import merge, MergeState, MergeEvent
from .scene import Scene, PolygonDecl, Span
from .parser import parse_scene
from .printer import format_point, format_polygon, print_scene
from .tikz_codegen import TikzLayer, generate_tikz_code, generate_tikz_document

__all__ = [
    'Point',
    'Edge',
    'try_intersect',
    'Polygon',
    'area',
    'surround',
    'PolygonError',
    'InvalidPolygonError',
    'InvalidEdgeError',
    'NonTerminatingConstructionError',
    'TolerancePolicy',
    'EXACT',
    'ClipConfig',
    'get_clip_config',
    'set_clip_config',
    'Cursor',
    'Crossing',
    'find_first_crossing',
    'intersect',
    'merge',
    'MergeState',
    'MergeEvent',
    'Scene',
    'PolygonDecl',
    'Span',
    'parse_scene',
    'format_point',
    'format_polygon',
    'print_scene',
    'TikzLayer',
    'generate_tikz_code',
    'generate_tikz_document',
]
