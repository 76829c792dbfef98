"""Ready-made scenes with the camera settings that suit them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .config import CameraConfig
from .hittable import HittableList
from .materials import DielectricMaterial, DiffuseLightMaterial, LambertianMaterial, MetalMaterial
from .plane import Plane, make_box
from .sphere import Sphere
from .textures import CheckerTexture
from .transforms import RotateY, Translate
from .vec3 import Color, Point3, Vec3, random_double


@dataclass
class Scene:
    """Objects to render, the lights to sample and the camera to use."""

    world: HittableList = field(default_factory=HittableList)
    lights: HittableList = field(default_factory=HittableList)
    config: CameraConfig = field(default_factory=CameraConfig)


def cornell_box_scene(config: CameraConfig | None = None) -> Scene:
    """The Cornell box with a rotated block and a glass sphere.

    The camera placement replaces the one in ``config``; its other settings are kept.
    """
    red = LambertianMaterial(Color(0.65, 0.05, 0.05))
    white = LambertianMaterial(Color(0.73, 0.73, 0.73))
    green = LambertianMaterial(Color(0.12, 0.45, 0.15))
    light = DiffuseLightMaterial(Color(15, 15, 15))

    world = HittableList(
        Plane(Point3(555, 0, 0), Vec3(0, 0, 555), Vec3(0, 555, 0), green),
        Plane(Point3(0, 0, 555), Vec3(0, 0, -555), Vec3(0, 555, 0), red),
        Plane(Point3(0, 555, 0), Vec3(555, 0, 0), Vec3(0, 0, 555), white),
        Plane(Point3(0, 0, 555), Vec3(555, 0, 0), Vec3(0, 0, -555), white),
        Plane(Point3(555, 0, 555), Vec3(-555, 0, 0), Vec3(0, 555, 0), white),
        Plane(Point3(213, 554, 227), Vec3(130, 0, 0), Vec3(0, 0, 105), light),
    )

    box = make_box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    world.add(Translate(RotateY(box, 15), Vec3(265, 0, 295)))
    world.add(Sphere(Point3(190, 90, 190), 90, DielectricMaterial(1.5)))

    lights = HittableList(
        Plane(Point3(343, 554, 332), Vec3(-130, 0, 0), Vec3(0, 0, -105)),
        Sphere(Point3(190, 90, 190), 90),
    )

    camera = dataclasses.replace(
        config if config is not None else CameraConfig(),
        aspect_ratio=1.0,
        background=Color(0, 0, 0),
        vfov=40,
        lookfrom=Point3(278, 278, -800),
        lookat=Point3(278, 278, 0),
        vup=Vec3(0, 1, 0),
        defocus_angle=0,
    )
    return Scene(world, lights, camera)


def bouncing_spheres_scene(config: CameraConfig | None = None) -> Scene:
    """A checkered ground covered in small random spheres and three large ones."""
    checker = CheckerTexture(0.32, Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world = HittableList(Sphere(Point3(0, -1000, 0), 1000, LambertianMaterial(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Color.random() * Color.random()
                end_center = center + Vec3(0, random_double(0, 0.5), 0)
                world.add(Sphere(center, 0.2, LambertianMaterial(albedo), end_center=end_center))
            elif choose_mat < 0.95:
                albedo = Color.random(0.5, 1)
                fuzz = random_double(0, 0.5)
                world.add(Sphere(center, 0.2, MetalMaterial(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, DielectricMaterial(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricMaterial(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, LambertianMaterial(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalMaterial(Color(0.7, 0.6, 0.5), 0.0)))

    camera = dataclasses.replace(
        config if config is not None else CameraConfig(),
        aspect_ratio=16.0 / 9.0,
        background=Color(0.70, 0.80, 1.00),
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        vup=Vec3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )
    return Scene(world, HittableList(), camera)