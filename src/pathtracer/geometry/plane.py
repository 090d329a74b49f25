# geometry/plane.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

PARALLEL_EPSILON = 1e-6

class Plane(Hittable):
    """
    An infinite one-sided plane through origin with a fixed normal.

    Only rays travelling along the normal (dot(normal, direction) > epsilon)
    hit it. The reported normal is the plane normal as given, so materials
    see it pointing away from the incoming ray.
    """
    def __init__(self, origin: Vector3, normal: Vector3, material):
        self.origin = origin
        self.normal = normal.normalize()
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if denom <= PARALLEL_EPSILON:
            return None

        t = (self.origin - ray.origin).dot(self.normal) / denom
        # t_min is never negative, so hits behind the ray origin fall outside
        if t <= t_min or t >= t_max:
            return None

        return HitRecord(t, ray.at(t), self.normal, self.material)

    def __repr__(self) -> str:
        return f"Plane(origin={self.origin!r}, normal={self.normal!r})"
