"""
OBJ Triangulate - Python Implementation

Rewrites Wavefront OBJ files so that every polygon face becomes triangles,
keeping vertices and per-corner texture/normal references intact.
"""

__version__ = "1.0.0"
__author__ = "OBJ Triangulate Project"

from .config import TriangulateConfig
from .errors import (
    TriangulateError, FormatError, NotTriangulatableError,
    DegenerateGeometryError,
)
from .mesh_component import Point, Triangle, Metrics
from .obj_tri import triangulate, fan_triangulation, cut_triangulation
from .earcut_tri import triangulate_earcut
from .obj_io import ObjRewriter, ObjTriangulator, triangulate_obj

__all__ = [
    'TriangulateConfig',
    'TriangulateError',
    'FormatError',
    'NotTriangulatableError',
    'DegenerateGeometryError',
    'Point',
    'Triangle',
    'Metrics',
    'triangulate',
    'fan_triangulation',
    'cut_triangulation',
    'triangulate_earcut',
    'ObjRewriter',
    'ObjTriangulator',
    'triangulate_obj',
]
