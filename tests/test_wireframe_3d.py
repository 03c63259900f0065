import math

import pytest

from dodecaspin.animations.wireframe_3d import (
    Point3D,
    Z_SHIFT,
    check_faces,
    get_unique_edges,
)

POINTS = [
    Point3D(1.0, 1.0, 1.0),
    Point3D(-0.3, 2.5, 0.7),
    Point3D(0.0, 0.0, 0.0),
    Point3D(4.0, -1.0, -2.0),
]


@pytest.mark.parametrize("point", POINTS)
def test_zero_rotation_is_identity(point):
    for rotated in (point.rotate_x(0), point.rotate_y(0), point.rotate_z(0)):
        assert tuple(rotated) == pytest.approx(tuple(point))


@pytest.mark.parametrize("point", POINTS)
@pytest.mark.parametrize("angle", [0.01, 1.0, -2.5, 7.0])
def test_rotation_is_invertible(point, angle):
    assert tuple(point.rotate_x(angle).rotate_x(-angle)) == pytest.approx(tuple(point))
    assert tuple(point.rotate_y(angle).rotate_y(-angle)) == pytest.approx(tuple(point))
    assert tuple(point.rotate_z(angle).rotate_z(-angle)) == pytest.approx(tuple(point))


def test_quarter_turns_are_right_handed():
    quarter = math.pi / 2
    assert tuple(Point3D(0, 1, 0).rotate_x(quarter)) == pytest.approx((0, 0, 1), abs=1e-12)
    assert tuple(Point3D(0, 0, 1).rotate_y(quarter)) == pytest.approx((1, 0, 0), abs=1e-12)
    assert tuple(Point3D(1, 0, 0).rotate_z(quarter)) == pytest.approx((0, 1, 0), abs=1e-12)


def test_rotation_does_not_mutate():
    point = Point3D(1.0, 2.0, 3.0)
    point.rotate_x(1.0)
    assert point == Point3D(1.0, 2.0, 3.0)


def test_rotate_applies_x_then_y_then_z():
    point = Point3D(1.0, 2.0, 3.0)
    expected = point.rotate_x(0.3).rotate_y(0.2).rotate_z(0.1)
    assert point.rotate(0.3, 0.2, 0.1) == expected
    assert tuple(point.rotate(0.3, 0.2, 0.1)) != pytest.approx(
        tuple(point.rotate_z(0.1).rotate_y(0.2).rotate_x(0.3))
    )


def test_project_origin_lands_on_screen_centre():
    assert Point3D(0.0, 0.0, 0.0).project(800, 600) == pytest.approx((400.0, 300.0))


def test_project_perspective():
    # z + 5 = 5, so x scales by 200 / 5
    assert Point3D(1.0, -1.0, 0.0).project(800, 600) == pytest.approx((440.0, 260.0))
    near = Point3D(1.0, 0.0, -1.0).project(800, 600)
    far = Point3D(1.0, 0.0, 1.0).project(800, 600)
    assert near[0] - 400 > far[0] - 400


@pytest.mark.parametrize("z", [-Z_SHIFT + 1e-6, -4.0, 0.0, 3.0, 1e6])
def test_project_is_finite_in_front_of_plane(z):
    x, y = Point3D(2.0, -3.0, z).project(800, 600)
    assert math.isfinite(x) and math.isfinite(y)


def test_unique_edges_preserve_first_seen_order():
    faces = [(0, 1, 2), (2, 1, 3)]
    assert get_unique_edges(faces) == [(0, 1), (1, 2), (0, 2), (1, 3), (2, 3)]


def test_unique_edges_canonicalisation_is_commutative():
    assert get_unique_edges([(4, 2)]) == [(2, 4)]
    assert get_unique_edges([(2, 4), (4, 2)]) == [(2, 4)]


def test_unique_edges_of_a_cube():
    faces = [
        (0, 1, 3, 2), (4, 6, 7, 5), (0, 4, 5, 1),
        (2, 3, 7, 6), (0, 2, 6, 4), (1, 5, 7, 3),
    ]
    edges = get_unique_edges(faces)
    assert len(edges) == 12
    assert all(a < b for a, b in edges)


def test_check_faces_rejects_out_of_range_index():
    vertices = [Point3D(0, 0, 0)] * 3
    check_faces(vertices, [(0, 1, 2)])
    with pytest.raises(ValueError, match="Face 1 references vertex 3"):
        check_faces(vertices, [(0, 1, 2), (1, 2, 3)])
    with pytest.raises(ValueError):
        check_faces(vertices, [(-1, 0, 1)])
