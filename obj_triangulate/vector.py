"""
Vector Math Module

This module provides the 3D vector arithmetic used by the triangulation
engines. Every function accepts any object exposing x, y and z attributes
(Vec3 tuples as well as mesh Points) and returns a new Vec3.
"""

import math
from typing import NamedTuple

EPSILON = 1e-6


class Vec3(NamedTuple):
    """Immutable 3D vector."""
    x: float
    y: float
    z: float


ZERO = Vec3(0.0, 0.0, 0.0)


def subtract(a, b) -> Vec3:
    """Return a - b."""
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(a, k: float) -> Vec3:
    """Return a multiplied by k (the zero vector when k is zero)."""
    if k == 0.0:
        return ZERO
    return Vec3(a.x * k, a.y * k, a.z * k)


def divide(a, k: float) -> Vec3:
    """Return a divided by k (the zero vector when k is zero)."""
    if k == 0.0:
        return ZERO
    return Vec3(a.x / k, a.y / k, a.z / k)


def cross(a, b) -> Vec3:
    return Vec3(a.y * b.z - a.z * b.y,
                a.z * b.x - a.x * b.z,
                a.x * b.y - a.y * b.x)


def dot(a, b) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def length(a) -> float:
    return math.sqrt(a.x * a.x + a.y * a.y + a.z * a.z)


def normalize(a) -> Vec3:
    """
    Scale a vector to unit length.

    Args:
        a: Vector to normalize

    Returns:
        Unit vector, or the zero vector if a has no length
    """
    return divide(a, length(a))


def approx_equal(a, b) -> bool:
    """Check that all three axis differences are within EPSILON."""
    return (abs(a.x - b.x) <= EPSILON and
            abs(a.y - b.y) <= EPSILON and
            abs(a.z - b.z) <= EPSILON)
