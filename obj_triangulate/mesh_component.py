"""
Mesh Component Data Structures

This module provides the data structures shared by the triangulation
engines and the OBJ rewriter.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .vector import approx_equal


@dataclass
class Point:
    """
    A polygon corner: a 3D position plus its local index in the polygon.

    The index ties a triangulated corner back to the face token it came
    from. Equality compares positions only, with a 1e-6 tolerance.
    """
    index: int
    x: float
    y: float
    z: float

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return approx_equal(self, other)

    def __str__(self):
        return f"{self.x} {self.y} {self.z}"

    def __repr__(self):
        return f"Point({self.index}, {self.x}, {self.y}, {self.z})"


Polygon = List[Point]


@dataclass
class Triangle:
    """Three ordered polygon corners."""
    p0: Point
    p1: Point
    p2: Point

    @property
    def points(self) -> Tuple[Point, Point, Point]:
        return (self.p0, self.p1, self.p2)

    @property
    def indices(self) -> Tuple[int, int, int]:
        """Local corner indices in winding order."""
        return (self.p0.index, self.p1.index, self.p2.index)

    def reversed(self) -> "Triangle":
        return Triangle(self.p0, self.p2, self.p1)

    def __iter__(self):
        return iter(self.points)


@dataclass
class Metrics:
    """
    Running counters of one conversion.

    Attributes:
        vertices: Vertex records consumed
        polygons_seen: Face records with more than 3 corners
        polygons_expanded: Of those, the ones replaced by triangles
        triangles_existing: Face records that were already triangles
        triangles_created: Triangles emitted by decomposition
    """
    vertices: int = 0
    polygons_seen: int = 0
    polygons_expanded: int = 0
    triangles_existing: int = 0
    triangles_created: int = 0

    @property
    def polygons(self) -> Tuple[int, int]:
        return (self.polygons_seen, self.polygons_expanded)

    @property
    def triangles(self) -> Tuple[int, int]:
        return (self.triangles_existing, self.triangles_created)

    @property
    def polygons_remaining(self) -> int:
        return self.polygons_seen - self.polygons_expanded

    @property
    def total_triangles(self) -> int:
        return self.triangles_existing + self.triangles_created

    @property
    def empty(self) -> bool:
        """True when no vertex has been read."""
        return self.vertices == 0
