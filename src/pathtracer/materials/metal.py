# materials/metal.py
from random import Random
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scatter

class Metal(Material):
    """
    Metal material with reflective properties. fuzz is clamped to [0, 1].

    The incoming direction is reflected as-is, so the fuzz offset is
    relative to the length of the incoming ray direction.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Random) -> Scatter:
        reflected = reflect(ray_in.direction, rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return Scatter(self.albedo, scattered)

        return Scatter(self.albedo, None)  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
