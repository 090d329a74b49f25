# core/utils.py
import math
from random import Random
from typing import Optional

from pathtracer.core.vector import Vector3

def random_in_unit_sphere(rng: Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_in_unit_disk(rng: Random) -> Vector3:
    """
    Returns a random point inside the unit disk on the z = 0 plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    0)
        if p.dot(p) < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with normal n using Snell's law.
    Returns None on total internal reflection.
    """
    unit_v = v.normalize()
    dt = unit_v.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant <= 0:
        return None
    return (unit_v - n * dt) * ni_over_nt - n * math.sqrt(discriminant)

def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
