from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.plane import Plane
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import Scene

__all__ = ["HitRecord", "Hittable", "Plane", "Scene", "Sphere"]
