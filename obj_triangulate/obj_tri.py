"""
Polygon Triangulation Module

This module splits a single polygon into triangles.

Convex polygons are fanned from their first corner. Everything else goes
through ear clipping: the polygon is oriented clockwise around its Newell
normal, and the largest valid ear is cut off until two corners remain.
Zero-area spikes that no regular ear can remove are cut as overlapping ears.
"""

import sys
from typing import List, Optional

from .mesh_component import Polygon, Triangle
from .polygon import (
    TurnDirection, normal, is_convex, make_clockwise_orientation,
    remove_consecutive_duplicates, vertex_turn,
)
from .vector import ZERO, subtract, cross, dot, normalize

MACHINE_EPSILON = sys.float_info.epsilon


def triangle_area_squared(a, b, c) -> float:
    """Squared area of triangle abc, which avoids a square root."""
    cr = cross(subtract(b, a), subtract(c, a))
    return dot(cr, cr) / 4.0


def point_in_triangle(a, b, c, p) -> bool:
    """
    Check if point p lies inside triangle abc or on its boundary.

    Uses barycentric coordinates, so p is assumed to be in the plane of
    the triangle.

    Args:
        a, b, c: Triangle corners
        p: Point to test

    Returns:
        True if p is inside or on an edge, False otherwise (and always
        False for a triangle without area)
    """
    v0 = subtract(c, a)
    v1 = subtract(b, a)
    v2 = subtract(p, a)

    dot00 = dot(v0, v0)
    dot01 = dot(v0, v1)
    dot02 = dot(v0, v2)
    dot11 = dot(v1, v1)
    dot12 = dot(v1, v2)

    denom = dot00 * dot11 - dot01 * dot01

    if abs(denom) < MACHINE_EPSILON:
        return False

    inv_denom = 1.0 / denom

    u = (dot11 * dot02 - dot01 * dot12) * inv_denom
    v = (dot00 * dot12 - dot01 * dot02) * inv_denom

    return (u >= -MACHINE_EPSILON and v >= -MACHINE_EPSILON and
            u + v <= 1.0 + MACHINE_EPSILON)


def is_ear(index: int, polygon: Polygon, n) -> bool:
    """
    Check if the corner at index can be cut off as an ear.

    An ear turns right and its triangle holds no other corner of the
    polygon, not even on its boundary.
    """
    count = len(polygon)

    if count < 3:
        return False

    if count == 3:
        return True

    prev_idx = (index - 1) % count
    item_idx = index % count
    next_idx = (index + 1) % count

    if vertex_turn(polygon, item_idx, n) != TurnDirection.RIGHT:
        return False

    prev_p = polygon[prev_idx]
    item = polygon[item_idx]
    next_p = polygon[next_idx]

    for i, other in enumerate(polygon):
        if i in (prev_idx, item_idx, next_idx):
            continue

        if point_in_triangle(prev_p, item, next_p, other):
            return False

    return True


def find_biggest_ear(polygon: Polygon, n) -> Optional[int]:
    """
    Find the ear with the largest area.

    Returns:
        Index of the ear (the first one on ties), or None if there is none
    """
    count = len(polygon)

    if count == 0:
        return None

    if count == 3:
        return 0

    max_index = None
    max_area = sys.float_info.min

    for index in range(count):
        if not is_ear(index, polygon, n):
            continue

        area = triangle_area_squared(polygon[(index - 1) % count],
                                     polygon[index],
                                     polygon[(index + 1) % count])

        if area > max_area:
            max_index = index
            max_area = area

    return max_index


def find_overlapping_ear(polygon: Polygon, n) -> Optional[int]:
    """
    Find a zero-area spike: a collinear corner where the path doubles back.

    Returns:
        Index of the first such corner, or None
    """
    count = len(polygon)

    if count == 0:
        return None

    if count == 3:
        return 0

    for index in range(count):
        prev_p = polygon[(index - 1) % count]
        item = polygon[index]
        next_p = polygon[(index + 1) % count]

        if vertex_turn(polygon, index, n) != TurnDirection.NO_TURN:
            continue

        u = normalize(subtract(item, prev_p))
        v = normalize(subtract(next_p, item))

        # Opposite directions
        if dot(u, v) < 0.0:
            return index

    return None


def fan_triangulation(polygon: Polygon) -> List[Triangle]:
    """
    Simple fan triangulation for convex polygons.

    Args:
        polygon: Convex polygon

    Returns:
        Triangles (p0, p[i], p[i + 1]) for i = 1 .. n - 2
    """
    if len(polygon) < 3:
        return []

    return [Triangle(polygon[0], polygon[i], polygon[i + 1])
            for i in range(1, len(polygon) - 1)]


def cut_triangulation(polygon: Polygon, n) -> List[Triangle]:
    """
    Triangulate a polygon by repeatedly cutting off its biggest ear.

    Args:
        polygon: Polygon without consecutive duplicates
        n: Polygon normal

    Returns:
        n - 2 triangles, or an empty list if some step finds no ear to cut
    """
    remaining = make_clockwise_orientation(list(polygon), n)
    triangles = []

    while len(remaining) >= 3:
        index = find_biggest_ear(remaining, n)

        if index is None:
            index = find_overlapping_ear(remaining, n)

        if index is None:
            return []

        count = len(remaining)
        triangles.append(Triangle(remaining[(index - 1) % count],
                                  remaining[index],
                                  remaining[(index + 1) % count]))

        del remaining[index]

    return triangles if len(remaining) == 2 else []


def triangulate(polygon: Polygon) -> List[Triangle]:
    """
    Triangulate a polygon face.

    Args:
        polygon: List of Point objects, in face order

    Returns:
        List of Triangle objects, or an empty list if the polygon cannot be
        triangulated (fewer than 3 distinct corners, no area, or no ear)
    """
    points = remove_consecutive_duplicates(polygon)

    if len(points) < 3:
        return []

    f_normal = normal(points)

    # Collinear or coincident corners
    if f_normal == ZERO:
        return []

    if len(points) == 3:
        return [Triangle(points[0], points[1], points[2])]

    # A fan over corners that never turn encloses nothing
    if all(vertex_turn(points, i, f_normal) == TurnDirection.NO_TURN
           for i in range(len(points))):
        return []

    if is_convex(points, f_normal):
        return fan_triangulation(points)

    return cut_triangulation(points, f_normal)
