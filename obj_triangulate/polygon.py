"""
Polygon Analysis Module

This module provides the per-polygon geometry the triangulation engines
build on: normal estimation, winding orientation and convexity.
"""

from enum import Enum
from typing import List

from .mesh_component import Point, Polygon
from .vector import Vec3, ZERO, subtract, cross, dot, length, normalize

TURN_THRESHOLD = 0.001
NORMAL_EPSILON = 1e-10


class TurnDirection(Enum):
    RIGHT = 1
    LEFT = -1
    NO_TURN = 0


def remove_consecutive_duplicates(polygon: Polygon) -> List[Point]:
    """
    Drop every point whose cyclic successor has the same index.

    Args:
        polygon: List of Point objects

    Returns:
        New list without consecutive repeats (the input is not modified)
    """
    n = len(polygon)
    cleaned = []

    for idx in range(n):
        item = polygon[idx]
        next_p = polygon[(idx + 1) % n]

        if item.index == next_p.index:
            continue

        cleaned.append(item)

    return cleaned


def normal(polygon: Polygon) -> Vec3:
    """
    Calculate the normal vector of a polygon using Newell's method.

    Summing over every edge keeps the estimate stable for slightly warped
    polygons, where a single edge cross product would not be.

    Args:
        polygon: List of Point objects

    Returns:
        Unit normal, or the zero vector for fewer than 3 points and for
        collinear or coincident points
    """
    num_points = len(polygon)

    if num_points < 3:
        return ZERO

    nx = ny = nz = 0.0

    for idx in range(num_points):
        current = polygon[idx]
        next_p = polygon[(idx + 1) % num_points]

        nx += (next_p.y - current.y) * (next_p.z + current.z)
        ny += (next_p.z - current.z) * (next_p.x + current.x)
        nz += (next_p.x - current.x) * (next_p.y + current.y)

    # Newell vector is twice the area, compared to the squared extent
    extent = max(max(p.x for p in polygon) - min(p.x for p in polygon),
                 max(p.y for p in polygon) - min(p.y for p in polygon),
                 max(p.z for p in polygon) - min(p.z for p in polygon))

    newell = Vec3(nx, ny, nz)

    if length(newell) <= NORMAL_EPSILON * extent * extent:
        return ZERO

    return normalize(newell)


def turn(p, u, n, q) -> TurnDirection:
    """
    Classify the turn made when travelling from p along u and on to q.

    Args:
        p: Previous point
        u: Normalized direction of the incoming edge
        n: Polygon normal
        q: Next point

    Returns:
        TurnDirection of the normal-projected cross product
    """
    projected = dot(cross(subtract(q, p), u), n)

    if projected > TURN_THRESHOLD:
        return TurnDirection.RIGHT
    if projected < -TURN_THRESHOLD:
        return TurnDirection.LEFT

    return TurnDirection.NO_TURN


def vertex_turn(polygon: Polygon, index: int, n: Vec3) -> TurnDirection:
    """Turn direction at polygon[index] relative to its two neighbours."""
    count = len(polygon)
    prev_p = polygon[(index - 1) % count]
    item = polygon[index % count]
    next_p = polygon[(index + 1) % count]

    u = normalize(subtract(item, prev_p))

    return turn(prev_p, u, n, next_p)


def is_convex(polygon: Polygon, n: Vec3) -> bool:
    """
    Check whether all turns of a polygon go the same way.

    Collinear corners (NO_TURN) neither confirm nor break convexity.
    """
    count = len(polygon)

    if count < 3:
        return False

    if count == 3:
        return True

    polygon_turn = TurnDirection.NO_TURN

    for idx in range(count):
        item_turn = vertex_turn(polygon, idx, n)

        if item_turn == TurnDirection.NO_TURN:
            continue

        if polygon_turn == TurnDirection.NO_TURN:
            polygon_turn = item_turn

        if polygon_turn != item_turn:
            return False

    return True


def orientation_sum(polygon: Polygon, n: Vec3) -> float:
    """
    Sum the normal-projected cross products of consecutive edges.

    Negative means the polygon runs clockwise when seen along n.
    """
    count = len(polygon)
    total = 0.0

    for idx in range(count):
        prev_p = polygon[(idx - 1) % count]
        item = polygon[idx]
        next_p = polygon[(idx + 1) % count]

        edge = subtract(item, prev_p)
        to_next = subtract(next_p, item)

        total += dot(cross(edge, to_next), n)

    return total


def is_clockwise(polygon: Polygon, n: Vec3) -> bool:
    if len(polygon) < 3:
        return False

    return orientation_sum(polygon, n) < 0.0


def make_clockwise_orientation(polygon: Polygon, n: Vec3) -> List[Point]:
    """
    Return the polygon in clockwise order relative to n.

    Args:
        polygon: List of Point objects
        n: Reference normal

    Returns:
        The same list when it is already clockwise (or has fewer than 3
        points), otherwise a reversed copy
    """
    if len(polygon) < 3:
        return polygon

    if is_clockwise(polygon, n):
        return polygon

    return polygon[::-1]
