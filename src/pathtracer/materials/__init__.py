from pathtracer.materials.material import Material, Scatter
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric

__all__ = ["Dielectric", "Lambertian", "Material", "Metal", "Scatter"]
