"""
Configuration settings for the path tracer
"""
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

# Rendering settings
RENDER_SETTINGS = {
    'width': 500,
    'height': 400,
    'samples_per_pixel': 100,
    'max_depth': 50,
    'worker_count': 8,
    'seed': None,  # None draws fresh entropy per worker
}

# Logging settings
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConfigError(ValueError):
    """Raised for an invalid render configuration."""


@dataclass(frozen=True)
class RenderConfig:
    width: int = RENDER_SETTINGS['width']
    height: int = RENDER_SETTINGS['height']
    samples_per_pixel: int = RENDER_SETTINGS['samples_per_pixel']
    max_depth: int = RENDER_SETTINGS['max_depth']
    worker_count: int = RENDER_SETTINGS['worker_count']
    seed: Optional[int] = RENDER_SETTINGS['seed']

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> "RenderConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(settings) - known
        if unknown:
            raise ConfigError(f"Unknown render settings: {sorted(unknown)}")
        config = cls(**settings)
        config.validate()
        return config

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def validate(self) -> None:
        for name in ('width', 'height', 'samples_per_pixel', 'max_depth', 'worker_count'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer or None, got {self.seed!r}")
