"""Property-based checks of the vector and point conventions."""

from __future__ import annotations

import math

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from planar2d import ZERO_VECTOR, Point, Vector
from planar2d.vector import TWO_PI

coords = st.floats(
    min_value=-1e3, max_value=1e3, allow_nan=False, allow_infinity=False
)
vectors = st.builds(Vector, coords, coords)
points = st.builds(Point, coords, coords)
nonzero_vectors = vectors.filter(lambda v: v.magnitude() >= 1e-3)
magnitudes = st.floats(min_value=1e-3, max_value=1e3)


def _same_direction(u: Vector, v: Vector) -> bool:
    nu = u.normalize()
    nv = v.normalize()
    assert nu is not None and nv is not None
    return nu.is_parallel_to(nv, within=1e-9) and nu.dot(nv) > 0


@given(vectors)
def test_is_zero_iff_components_exactly_zero(u: Vector) -> None:
    assert u.is_zero() == (u.dx == 0 and u.dy == 0)


@given(vectors, vectors, st.floats(min_value=0.0, max_value=1e3))
def test_is_equal_to_matches_magnitude_of_difference(
    u: Vector, v: Vector, eps: float
) -> None:
    assert u.is_equal_to(v, within=eps) == ((u - v).magnitude_squared() <= eps * eps)


@given(nonzero_vectors, magnitudes)
def test_scale_to_sets_magnitude_and_keeps_direction(u: Vector, s: float) -> None:
    scaled = u.clone().scale_to(s)
    assert scaled.magnitude() == pytest.approx(s, rel=1e-9)
    assert _same_direction(u, scaled)


@given(nonzero_vectors, magnitudes)
def test_scale_to_negative_reverses(u: Vector, s: float) -> None:
    scaled = u.scale_to(-s)
    assert scaled.magnitude() == pytest.approx(s, rel=1e-9)
    assert _same_direction(-u, scaled)


@given(nonzero_vectors, st.floats(min_value=0.0, max_value=2e3))
def test_truncate_to(u: Vector, m: float) -> None:
    truncated = u.truncate_to(m)
    if u.magnitude() <= m:
        assert (truncated.dx, truncated.dy) == (u.dx, u.dy)
    else:
        assert truncated.magnitude() == pytest.approx(m, rel=1e-9, abs=1e-12)
        if m > 1e-6:
            assert _same_direction(u, truncated)


@given(nonzero_vectors)
def test_normalize_gives_unit_vector(u: Vector) -> None:
    unit = u.normalize()
    assert unit is not None
    assert unit.magnitude() == pytest.approx(1.0, rel=1e-12)


@given(vectors)
def test_angles_are_in_half_open_range(u: Vector) -> None:
    for angle in (u.angle_from_x(), u.angle_from_y()):
        assert 0.0 <= angle < TWO_PI


@given(vectors, vectors)
def test_angle_from_decomposes_into_x_angles(u: Vector, v: Vector) -> None:
    angle = v.angle_from(u)
    assert 0.0 <= angle < TWO_PI
    diff = v.angle_from_x() - u.angle_from_x()
    wrapped = math.remainder(angle - diff, TWO_PI)
    assert wrapped == pytest.approx(0.0, abs=1e-9)


@given(vectors)
def test_y_axis_angle_is_derived_from_x_axis(u: Vector) -> None:
    assert u.sin_angle_from_y() == -u.cos_angle_from_x()
    assert u.cos_angle_from_y() == u.sin_angle_from_x()
    assert u.angle_from_y() == (u.angle_from_x() + 1.5 * math.pi) % TWO_PI


@given(vectors)
def test_zero_vector_is_parallel_and_perpendicular(u: Vector) -> None:
    assert ZERO_VECTOR.is_parallel_to(u)
    assert ZERO_VECTOR.is_perpendicular_to(u)


@given(nonzero_vectors, nonzero_vectors)
def test_projection_parts_recompose(u: Vector, onto: Vector) -> None:
    par = u.parallel_projection_to(onto)
    perp = u.perpendicular_projection_to(onto)
    assert (par + perp).is_equal_to(u, within=1e-9)


@given(nonzero_vectors, st.floats(min_value=-10.0, max_value=10.0))
def test_rotation_round_trip(u: Vector, radians: float) -> None:
    back = u.counter_clockwise_rotate(radians).clockwise_rotate(radians)
    assert back.is_equal_to(u, within=1e-9)
    rotated = u.counter_clockwise_rotate(radians)
    assert rotated.magnitude() == pytest.approx(u.magnitude(), rel=1e-9)


@given(points, vectors)
def test_point_vector_affine_identities(p: Point, v: Vector) -> None:
    assert (p + v) - p == v
    assert p + v == v + p


@given(points, points)
def test_point_difference_direction(a: Point, b: Point) -> None:
    assert a + (b - a) == b


@settings(max_examples=50)
@given(coords, coords)
def test_random_vector_within_bounds(a: float, b: float) -> None:
    v = Vector.random_uniform(a, b)
    lo, hi = min(a, b), max(a, b)
    assert lo <= v.dx <= hi
    assert lo <= v.dy <= hi
