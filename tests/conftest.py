"""Pytest configuration and shared fixtures."""

from random import Random

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.world import Scene


class FixedRandom:
    """Stand-in random source whose random() always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def rng():
    """Seeded random source so sampled tests are repeatable."""
    return Random(1234)


@pytest.fixture
def empty_scene():
    return Scene()


@pytest.fixture
def pinhole_camera():
    """Square pinhole camera at the origin looking down -z with a 90 degree fov."""
    return Camera(
        Vector3(0.0, 0.0, 0.0),
        Vector3(0.0, 0.0, -1.0),
        Vector3(0.0, 1.0, 0.0),
        vertical_fov=90.0,
        aspect_ratio=1.0,
    )
