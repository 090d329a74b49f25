# camera/camera.py
import math
from random import Random
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk

class Camera:
    """
    A thin-lens camera positioned with look-from / look-at vectors.

    The basis (u, v, w) and viewport are computed once in the constructor;
    the camera is not modified afterwards.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, view_up: Vector3,
                 vertical_fov: float, aspect_ratio: float,
                 aperture: float = 0.0, focus_dist: float = 1.0):
        self.look_from = look_from
        self.look_at = look_at
        self.view_up = view_up
        self.vertical_fov = vertical_fov  # In degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0

        theta = math.radians(vertical_fov)
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        # w points backwards, away from what the camera looks at
        self.w = (look_from - look_at).normalize()
        self.u = view_up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        self.horizontal = self.u * (2.0 * half_width * focus_dist)
        self.vertical = self.v * (2.0 * half_height * focus_dist)
        self.lower_left_corner = (self.origin -
                                  (self.u * half_width +
                                   self.v * half_height +
                                   self.w) * focus_dist)

    def get_ray(self, u: float, v: float, rng: Optional[Random] = None) -> Ray:
        """
        Generates a ray through viewport coordinates (u, v) in [0, 1].
        A zero aperture draws no random numbers and rng may be omitted.
        """
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         self.origin)
            return Ray(self.origin, direction)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         ray_origin)
        return Ray(ray_origin, ray_direction)

    def __repr__(self) -> str:
        return (f"Camera(look_from={self.look_from!r}, look_at={self.look_at!r}, "
                f"vfov={self.vertical_fov}, aperture={self.aperture})")
