import math

import pytest

from rawrxd.lin import Transform, Triangle2, Triangle3, Vec2, Vec3


def _length(v: Vec3) -> float:
    return math.sqrt(v.dot(v))


def _ccw_triangle() -> Triangle2:
    return Triangle2(Vec2(0.0, 0.0), Vec2(10.0, 0.0), Vec2(0.0, 10.0))


def test_perp_and_perp_cc_are_inverse():
    v = Vec2(3.0, -7.5)
    assert v.perp().perp_cc() == v
    assert v.perp_cc().perp() == v


def test_perp_is_orthogonal():
    v = Vec2(2.5, 4.0)
    assert v.dot(v.perp()) == 0.0
    assert v.dot(v.perp_cc()) == 0.0


def test_perp_twice_negates():
    v = Vec2(1.5, -2.0)
    assert v.perp().perp() == v * -1.0


def test_transpose_swaps_components():
    v = Vec2(1.0, 2.0)
    t = v.transpose()
    assert (t.x, t.y) == (v.y, v.x)
    assert t.transpose() == v


def test_vec2_add_sub_round_trip():
    a = Vec2(1.25, -3.5)
    b = Vec2(4.0, 0.5)
    assert (a + b) - b == a


def test_vec2_mul_scales_dot():
    v = Vec2(3.0, 4.0)
    assert (v * 2.0).dot(v) == 2.0 * v.dot(v)


def test_vec3_add_sub_round_trip():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-0.5, 8.0, 0.25)
    assert (a + b) - b == a


def test_vec3_mul_and_dot():
    v = Vec3(1.0, 2.0, 3.0)
    assert (v * 3.0).dot(v) == 3.0 * v.dot(v)


def test_vec3_recip_round_trip():
    v = Vec3(2.0, -4.0, 0.5)
    assert v.recip().recip() == v
    assert v.recip().x * v.x == 1.0


def test_vec3_recip_of_zero_is_infinite():
    r = Vec3(0.0, -0.0, 1.0).recip()
    assert r.x == math.inf
    assert r.y == -math.inf


def test_vec3_trunc_drops_z():
    v = Vec3(5.0, 6.0, 7.0)
    assert v.trunc() == Vec2(v.x, v.y)


def test_triangle3_trunc():
    t = Triangle3(Vec3(1.0, 2.0, 3.0), Vec3(4.0, 5.0, 6.0), Vec3(7.0, 8.0, 9.0))
    flat = t.trunc()
    assert flat == Triangle2(t.a.trunc(), t.b.trunc(), t.c.trunc())


def test_depth_at_inside_weights_sum_to_one():
    weights = _ccw_triangle().depth_at(Vec2(2.0, 3.0))
    assert weights is not None
    assert weights.x > 0 and weights.y > 0 and weights.z > 0
    assert weights.x + weights.y + weights.z == pytest.approx(1.0)


def test_depth_at_centroid_is_balanced():
    tri = _ccw_triangle()
    centroid = Vec2((tri.a.x + tri.b.x + tri.c.x) / 3, (tri.a.y + tri.b.y + tri.c.y) / 3)
    weights = tri.depth_at(centroid)
    assert weights is not None
    assert weights.x == pytest.approx(weights.y)
    assert weights.y == pytest.approx(weights.z)


def test_depth_at_outside_is_none():
    assert _ccw_triangle().depth_at(Vec2(20.0, 20.0)) is None
    assert _ccw_triangle().depth_at(Vec2(-1.0, 1.0)) is None


def test_depth_at_on_vertex_is_none():
    tri = _ccw_triangle()
    assert tri.depth_at(tri.a) is None


def test_depth_at_backface_is_none():
    tri = _ccw_triangle()
    flipped = Triangle2(tri.a, tri.c, tri.b)
    assert flipped.depth_at(Vec2(2.0, 3.0)) is None


def test_zero_transform_swaps_y_and_z_and_is_involution():
    t = Transform(0.0, 0.0, 0.0, Vec3(0.0, 0.0, 0.0))
    p = Vec3(1.0, 2.0, 3.0)
    once = t.apply(p)
    assert once == Vec3(p.x, p.z, p.y)
    assert t.apply(once) == p


def test_translation_is_added_after_rotation():
    offset = Vec3(1.0, -2.0, 3.0)
    rotated = Transform(0.3, 0.2, 0.1)
    moved = Transform(0.3, 0.2, 0.1, offset)
    p = Vec3(4.0, 5.0, 6.0)
    diff = moved.apply(p) - rotated.apply(p)
    assert diff.x == pytest.approx(offset.x)
    assert diff.y == pytest.approx(offset.y)
    assert diff.z == pytest.approx(offset.z)


@pytest.mark.parametrize(
    "yaw, pitch, roll",
    [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.7, 0.0), (0.0, 0.0, 2.1), (0.4, -1.3, 2.8)],
)
def test_rotation_preserves_length(yaw, pitch, roll):
    p = Vec3(1.5, -2.0, 3.25)
    out = Transform(yaw, pitch, roll).apply(p)
    assert _length(out) == pytest.approx(_length(p))


def test_full_turn_yaw_matches_zero_yaw():
    p = Vec3(1.0, 2.0, 3.0)
    a = Transform(0.0, 0.5, 0.25).apply(p)
    b = Transform(math.tau, 0.5, 0.25).apply(p)
    assert b.x == pytest.approx(a.x)
    assert b.y == pytest.approx(a.y)
    assert b.z == pytest.approx(a.z)