import math
import random

import pytest

from rtengine.vec3 import (
    ONB,
    PI,
    Vec3,
    cross,
    degrees_to_radians,
    dot,
    random_cosine_direction,
    random_double,
    random_in_unit_disk,
    random_int,
    random_on_hemisphere,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


@pytest.fixture(autouse=True)
def _seed():
    random.seed(42)


def approx_vec(a, b, tol=1e-9):
    return all(abs(p - q) < tol for p, q in zip(a, b))


def test_degrees_to_radians_half_turn():
    assert degrees_to_radians(180) == pytest.approx(PI)


def test_arithmetic_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert -a + a == Vec3()


def test_division_and_elementwise_product():
    a = Vec3(2.0, 4.0, 8.0)
    assert approx_vec((a / 2) * 2, a)
    assert a * Vec3(1, 1, 1) == a


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1, 2, 3) / 0


def test_indexing_and_iteration():
    v = Vec3(7, 8, 9)
    assert [v[0], v[1], v[2]] == list(v)
    with pytest.raises(IndexError):
        v[3]


def test_length_consistency():
    v = Vec3(3, 4, 12)
    assert v.length() ** 2 == pytest.approx(v.length_squared())


def test_near_zero():
    assert Vec3(1e-9, -1e-9, 0).near_zero()
    assert not Vec3(1e-9, 1e-3, 0).near_zero()


def test_dot_and_cross_orthogonality():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)
    assert cross(b, a) == -c


def test_unit_vector_has_length_one():
    assert unit_vector(Vec3(3, -7, 2)).length() == pytest.approx(1.0)


def test_random_double_and_int_ranges():
    for _ in range(500):
        assert 2.0 <= random_double(2.0, 5.0) < 5.0
        assert 0.0 <= random_double() < 1.0
        assert -3 <= random_int(-3, 3) <= 3 or random_int(0, 3) in range(0, 4)
        assert random_int(0, 4) in range(0, 5)


def test_vec3_random_bounds():
    for _ in range(200):
        v = Vec3.random(-1, 1)
        assert all(-1 <= c < 1 for c in v)
        w = Vec3.random()
        assert all(0 <= c < 1 for c in w)


def test_random_in_unit_disk():
    for _ in range(200):
        p = random_in_unit_disk()
        assert p.z == 0
        assert p.length_squared() < 1


def test_random_unit_vector_is_unit():
    for _ in range(200):
        assert random_unit_vector().length() == pytest.approx(1.0)


def test_random_on_hemisphere_same_side():
    normal = Vec3(0.2, -1.0, 0.4)
    for _ in range(200):
        assert dot(random_on_hemisphere(normal), normal) >= 0


def test_random_cosine_direction_upper_hemisphere():
    for _ in range(200):
        d = random_cosine_direction()
        assert d.z >= 0
        assert d.length() == pytest.approx(1.0)


def test_reflect_preserves_length_and_flips_normal_component():
    incident = Vec3(1.0, -2.0, 0.5)
    normal = unit_vector(Vec3(0.3, 1.0, -0.2))
    r = reflect(incident, normal)
    assert r.length() == pytest.approx(incident.length())
    assert dot(r, normal) == pytest.approx(-dot(incident, normal))


def test_refract_with_unit_ratio_keeps_direction():
    direction = unit_vector(Vec3(1.0, -1.0, 0.3))
    normal = Vec3(0, 1, 0)
    refracted = refract(direction, normal, 1.0)
    assert list(refracted) == pytest.approx(list(direction), abs=1e-9)


def test_onb_is_orthonormal():
    basis = ONB(Vec3(0.3, 2.0, -1.0))
    for axis in (basis.u, basis.v, basis.w):
        assert axis.length() == pytest.approx(1.0)
    assert dot(basis.u, basis.v) == pytest.approx(0.0)
    assert dot(basis.v, basis.w) == pytest.approx(0.0)
    assert dot(basis.u, basis.w) == pytest.approx(0.0)
    assert approx_vec(basis.w, unit_vector(Vec3(0.3, 2.0, -1.0)))


def test_onb_transform_local_z_is_w():
    basis = ONB(Vec3(5.0, 0.1, 0.0))
    assert approx_vec(basis.transform(Vec3(0, 0, 1)), basis.w)
    local = Vec3(0.2, -0.4, 0.9)
    assert basis.transform(local).length() == pytest.approx(local.length())
    assert math.isclose(dot(basis.transform(local), basis.w), local.z, abs_tol=1e-12)