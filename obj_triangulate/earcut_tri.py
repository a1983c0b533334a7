"""
Earcut Triangulation Module

Alternative triangulation engine: the polygon is projected onto its own
plane and handed to mapbox_earcut. Selected with engine="earcut".
"""

import math
from typing import List, Tuple

import numpy as np
from mapbox_earcut import triangulate_float64

from .mesh_component import Point, Polygon, Triangle
from .polygon import normal, remove_consecutive_duplicates
from .vector import Vec3, ZERO

AREA_EPSILON = 1e-10


def create_local_coordinate_system(n: Vec3) -> Tuple[Vec3, Vec3]:
    """
    Create a 2D coordinate system on the plane defined by a normal vector.

    Args:
        n: Unit normal (nx, ny, nz)

    Returns:
        Tuple of (u_axis, v_axis), orthonormal and perpendicular to n
    """
    nx, ny, nz = n

    # Find a vector that's not parallel to the normal
    if abs(nx) < 0.9:
        ref = (1.0, 0.0, 0.0)
    else:
        ref = (0.0, 1.0, 0.0)

    # u = ref x normal
    ux = ref[1] * nz - ref[2] * ny
    uy = ref[2] * nx - ref[0] * nz
    uz = ref[0] * ny - ref[1] * nx

    u_len = math.sqrt(ux ** 2 + uy ** 2 + uz ** 2)
    ux, uy, uz = ux / u_len, uy / u_len, uz / u_len

    # v = normal x u
    vx = ny * uz - nz * uy
    vy = nz * ux - nx * uz
    vz = nx * uy - ny * ux

    return Vec3(ux, uy, uz), Vec3(vx, vy, vz)


def project_to_2d(points: List[Point], u_axis: Vec3, v_axis: Vec3) -> np.ndarray:
    """
    Project 3D points onto the plane spanned by u_axis and v_axis.

    Args:
        points: Polygon corners; the first one is the origin
        u_axis: First axis of the 2D coordinate system
        v_axis: Second axis of the 2D coordinate system

    Returns:
        (n, 2) float64 array of plane coordinates
    """
    coords = np.array([(p.x, p.y, p.z) for p in points], dtype=np.float64)
    coords -= coords[0]
    axes = np.array([u_axis, v_axis], dtype=np.float64)
    return coords @ axes.T


def compute_polygon_area_2d(vertices_2d: np.ndarray) -> float:
    """
    Compute the signed area of a 2D polygon (shoelace formula).

    Returns:
        Signed area (positive for CCW, negative for CW)
    """
    x = vertices_2d[:, 0]
    y = vertices_2d[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def triangulate_earcut(polygon: Polygon) -> List[Triangle]:
    """
    Triangulate a polygon face with the earcut algorithm.

    Args:
        polygon: List of Point objects, in face order

    Returns:
        List of Triangle objects, or an empty list on failure
    """
    points = remove_consecutive_duplicates(polygon)

    if len(points) < 3:
        return []

    f_normal = normal(points)

    if f_normal == ZERO:
        return []

    if len(points) == 3:
        return [Triangle(points[0], points[1], points[2])]

    u_axis, v_axis = create_local_coordinate_system(f_normal)
    vertices_2d = project_to_2d(points, u_axis, v_axis)

    if abs(compute_polygon_area_2d(vertices_2d)) < AREA_EPSILON:
        return []

    rings = np.array([len(points)], dtype=np.uint32)
    indices = triangulate_float64(vertices_2d, rings)

    triangles = []
    for i in range(0, len(indices) - 2, 3):
        fvs = [points[int(idx)] for idx in indices[i:i + 3]]

        # Skip triangles that reuse a corner
        if len({p.index for p in fvs}) < 3:
            continue

        triangles.append(Triangle(*fvs))

    return triangles
