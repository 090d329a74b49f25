"""
Scene builders for the classic "spheres on a ground sphere" setups.
"""
import math
from random import Random
from typing import Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import Scene
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

GLASS_INDEX = 1.5


def random_scene(rng: Optional[Random] = None) -> Scene:
    """
    A large ground sphere, a 22x22 grid of small randomized spheres and
    three feature spheres (glass, diffuse, mirror). The scene is z-up.
    """
    if rng is None:
        rng = Random()

    world = Scene()
    world.add(Sphere(Vector3(0.0, 0.0, -1000.0), 1000.0, Lambertian(Vector3(1.0, 0.6, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                world.add(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Vector3(0.5 * (1.0 + rng.random()),
                                 0.5 * (1.0 + rng.random()),
                                 0.5 * (1.0 + rng.random()))
                world.add(Sphere(center, 0.2, Metal(albedo, 0.5 * rng.random())))
            else:
                # glass
                world.add(Sphere(center, 0.2, Dielectric(GLASS_INDEX)))

    world.add(Sphere(Vector3(0.0, 0.0, 2.0), 2.0, Dielectric(GLASS_INDEX)))
    world.add(Sphere(Vector3(-4.0, 0.0, 2.0), 2.0, Lambertian(Vector3(0.6, 0.2, 0.2))))
    world.add(Sphere(Vector3(4.0, 0.0, 2.0), 2.0, Metal(Vector3(0.85, 0.9, 0.7), 0.0)))
    return world


def three_spheres_scene() -> Scene:
    """
    Diffuse, fuzzy metal and hollow glass spheres resting on a ground sphere.
    The scene is y-up, viewed from the origin looking down -z.
    """
    world = Scene()
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Vector3(0.8, 0.8, 0.0))))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.3)))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, Dielectric(GLASS_INDEX)))
    # Negative radius: inner surface of the glass shell
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), -0.45, Dielectric(GLASS_INDEX)))
    return world


def default_camera(aspect_ratio: float) -> Camera:
    """Camera for random_scene: z-up, orbiting 20 units out."""
    look_from = Vector3(20.0 * math.cos(0.47), 20.0 * math.sin(0.47), 3.0)
    look_at = Vector3(0.0, 0.0, 1.0)
    return Camera(
        look_from,
        look_at,
        Vector3(0.0, 0.0, 1.0),
        vertical_fov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.3,
        focus_dist=(look_from - look_at).length(),
    )


def three_spheres_camera(aspect_ratio: float) -> Camera:
    """Camera for three_spheres_scene: pinhole at the origin looking down -z."""
    return Camera(
        Vector3(0.0, 0.0, 0.0),
        Vector3(0.0, 0.0, -1.0),
        Vector3(0.0, 1.0, 0.0),
        vertical_fov=90.0,
        aspect_ratio=aspect_ratio,
    )
