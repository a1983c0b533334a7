from obj_triangulate.mesh_component import Point
from obj_triangulate.polygon import (
    TurnDirection, normal, turn, vertex_turn, is_convex, orientation_sum,
    is_clockwise, make_clockwise_orientation, remove_consecutive_duplicates,
)
from obj_triangulate.vector import Vec3, ZERO


def make_polygon(coords):
    return [Point(i, *c) for i, c in enumerate(coords)]


SQUARE = make_polygon([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])
DART = make_polygon([(0, 0, 0), (4, 0, 0), (4, 4, 0), (2, 1, 0), (0, 4, 0)])


def test_newell_normal_of_square():
    assert normal(SQUARE) == Vec3(0.0, 0.0, -1.0)


def test_normal_flips_with_winding():
    assert normal(SQUARE[::-1]) == Vec3(0.0, 0.0, 1.0)


def test_normal_of_tilted_quad_is_unit():
    quad = make_polygon([(0, 0, 0), (1, 0, 1), (1, 1, 1), (0, 1, 0)])
    n = normal(quad)
    assert abs(n.x * n.x + n.y * n.y + n.z * n.z - 1.0) < 1e-12
    assert abs(n.y) < 1e-12


def test_normal_of_degenerate_polygons():
    assert normal(SQUARE[:2]) == ZERO
    assert normal(make_polygon([(0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0)])) == ZERO


def test_turn_direction():
    n = Vec3(0.0, 0.0, -1.0)
    u = Vec3(1.0, 0.0, 0.0)
    p = Vec3(0.0, 0.0, 0.0)
    assert turn(p, u, n, Vec3(2.0, 1.0, 0.0)) == TurnDirection.RIGHT
    assert turn(p, u, n, Vec3(2.0, -1.0, 0.0)) == TurnDirection.LEFT
    assert turn(p, u, n, Vec3(2.0, 0.0, 0.0)) == TurnDirection.NO_TURN


def test_vertex_turn_marks_reflex_corner():
    n = normal(DART)
    assert vertex_turn(DART, 2, n) == TurnDirection.RIGHT
    assert vertex_turn(DART, 3, n) == TurnDirection.LEFT


def test_convexity():
    assert is_convex(SQUARE, normal(SQUARE))
    assert not is_convex(DART, normal(DART))
    assert is_convex(SQUARE[:3], normal(SQUARE[:3]))
    assert not is_convex(SQUARE[:2], normal(SQUARE))


def test_collinear_corner_does_not_break_convexity():
    poly = make_polygon([(0, 0, 0), (1, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0)])
    assert is_convex(poly, normal(poly))


def test_polygon_is_clockwise_around_its_newell_normal():
    n = normal(SQUARE)
    assert orientation_sum(SQUARE, n) < 0.0
    assert is_clockwise(SQUARE, n)
    assert not is_clockwise(SQUARE[::-1], n)


def test_make_clockwise_orientation():
    n = normal(SQUARE)
    assert make_clockwise_orientation(SQUARE, n) is SQUARE
    reoriented = make_clockwise_orientation(SQUARE[::-1], n)
    assert [p.index for p in reoriented] == [0, 1, 2, 3]


def test_remove_consecutive_duplicates():
    poly = [Point(0, 0, 0, 0), Point(1, 1, 0, 0), Point(1, 1, 0, 0),
            Point(2, 1, 1, 0), Point(3, 0, 1, 0)]
    assert [p.index for p in remove_consecutive_duplicates(poly)] == [0, 1, 2, 3]


def test_remove_consecutive_duplicates_is_cyclic():
    poly = [Point(0, 0, 0, 0), Point(1, 1, 0, 0), Point(2, 1, 1, 0), Point(0, 0, 0, 0)]
    assert [p.index for p in remove_consecutive_duplicates(poly)] == [0, 1, 2]
    assert remove_consecutive_duplicates([Point(0, 0, 0, 0)] * 3) == []
