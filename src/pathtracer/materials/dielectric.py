# materials/dielectric.py
from random import Random
from pathtracer.core.ray import Ray
from pathtracer.core.vector import white
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scatter

class Dielectric(Material):
    """
    Clear refractive material such as glass (1.5) or water (1.33).

    Always returns a ray. Reflection and refraction are chosen at random,
    weighted by Schlick's approximation; total internal reflection always
    reflects.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Random) -> Scatter:
        attenuation = white()  # Glass doesn't absorb light
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)

        # Hit normals are outward, so a positive dot product means we are leaving the material
        d_dot_n = direction.dot(rec.normal)
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            return Scatter(attenuation, Ray(rec.p, reflected))

        if rng.random() < schlick(cosine, self.ref_idx):
            return Scatter(attenuation, Ray(rec.p, reflected))
        return Scatter(attenuation, Ray(rec.p, refracted))

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
