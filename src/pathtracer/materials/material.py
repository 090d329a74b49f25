# materials/material.py
from random import Random
from typing import NamedTuple, Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord

class Scatter(NamedTuple):
    """
    Outcome of a bounce: the attenuation color and the continuation ray.
    A ray of None means the path was absorbed.
    """
    attenuation: Vector3
    ray: Optional[Ray]

    @property
    def absorbed(self) -> bool:
        return self.ray is None

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable once built and are shared by every worker.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Random) -> Optional[Scatter]:
        """
        Computes the scattered ray and attenuation.
        Returns a Scatter, or None if the material absorbs the ray outright.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
