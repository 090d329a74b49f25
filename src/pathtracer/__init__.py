"""Stochastic path tracer: spheres and planes, diffuse, metal and glass materials."""

__version__ = "0.1.0"

from pathtracer.camera.camera import Camera
from pathtracer.config import ConfigError, RenderConfig
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry import HitRecord, Hittable, Plane, Scene, Sphere
from pathtracer.materials import Dielectric, Lambertian, Material, Metal, Scatter
from pathtracer.renderer.integrator import background_color, trace_radiance
from pathtracer.renderer.raytracer import RenderError, Renderer, partition_pixels, render

__all__ = [
    "Camera", "ConfigError", "Dielectric", "HitRecord", "Hittable", "Lambertian",
    "Material", "Metal", "Plane", "Ray", "RenderConfig", "RenderError", "Renderer",
    "Scatter", "Scene", "Sphere", "Vector3", "background_color", "partition_pixels",
    "render", "trace_radiance",
]
