# renderer/integrator.py
from random import Random
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, black, white
from pathtracer.geometry.hittable import Hittable

MAX_DEPTH = 50
T_MIN = 0.001  # Keeps bounced rays from re-hitting the surface they left
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def background_color(ray: Ray) -> Vector3:
    """
    Vertical white-to-sky-blue gradient seen by rays that escape the scene.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return white() * (1.0 - t) + SKY_BLUE * t

def trace_radiance(ray: Ray, world: Hittable, rng: Random,
                   depth: int = 0, max_depth: int = MAX_DEPTH) -> Vector3:
    """
    Returns the color seen along the ray. Each bounce multiplies in the
    material attenuation; absorbed paths and paths that reach max_depth
    return black.
    """
    rec = world.hit(ray, T_MIN, float('inf'))
    if rec is None:
        return background_color(ray)

    if depth >= max_depth:
        return black()  # Exceeded recursion depth

    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None or scatter.ray is None:
        return black()
    return scatter.attenuation * trace_radiance(scatter.ray, world, rng, depth + 1, max_depth)
