import math

import pytest

from rtengine.textures import CheckerTexture, NoiseTexture, SolidColorTexture, Texture
from rtengine.vec3 import Color, Point3

RED = Color(1, 0, 0)
BLUE = Color(0, 0, 1)


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


@pytest.mark.parametrize("p", [Point3(0, 0, 0), Point3(-3.5, 2, 100), Point3(1e6, -1e6, 7)])
def test_solid_color_is_constant(p):
    texture = SolidColorTexture(RED)
    assert texture.value(0.3, 0.7, p) == RED


@pytest.mark.parametrize(
    "p, expected",
    [
        (Point3(0.5, 0.5, 0.5), RED),
        (Point3(1.5, 0.5, 0.5), BLUE),
        (Point3(1.5, 1.5, 0.5), RED),
        (Point3(-0.5, 0.5, 0.5), BLUE),
        (Point3(-0.5, -0.5, 0.5), RED),
    ],
)
def test_checker_alternates(p, expected):
    texture = CheckerTexture(1.0, RED, BLUE)
    assert texture.value(0, 0, p) == expected


def test_checker_accepts_textures():
    texture = CheckerTexture(1.0, SolidColorTexture(RED), SolidColorTexture(BLUE))
    assert texture.value(0, 0, Point3(0.5, 0.5, 0.5)) == RED
    assert texture.value(0, 0, Point3(0.5, 1.5, 0.5)) == BLUE


def test_checker_scale_invariance():
    small = CheckerTexture(0.5, RED, BLUE)
    large = CheckerTexture(2.0, RED, BLUE)
    for p in [Point3(0.1, 0.2, 0.3), Point3(0.7, -0.2, 0.9), Point3(-1.3, 0.4, 2.2)]:
        assert small.value(0, 0, p) == large.value(0, 0, p * 4)


def test_checker_rejects_other_types():
    with pytest.raises(TypeError):
        CheckerTexture(1.0, "red", BLUE)


def test_noise_is_grey_and_bounded():
    texture = NoiseTexture(4.0)
    for p in [Point3(0.1, 0.2, 0.3), Point3(3.3, -1.2, 8.7), Point3(-5, 5, -5)]:
        color = texture.value(0, 0, p)
        assert color.x == color.y == color.z
        assert 0.0 <= color.x <= 1.0


def test_noise_is_deterministic_per_instance():
    texture = NoiseTexture(1.0)
    p = Point3(1.25, 2.5, -0.75)
    assert texture.value(0, 0, p) == texture.value(0.9, 0.1, p)


def test_noise_at_lattice_point_follows_sine():
    texture = NoiseTexture(2.0)
    p = Point3(1, 2, 3)
    # Perlin noise vanishes at lattice points, so turbulence there is zero
    # for the first octave; every octave also lands on lattice points.
    expected = 0.5 * (1 + math.sin(2.0 * 3))
    assert texture.value(0, 0, p).x == pytest.approx(expected)