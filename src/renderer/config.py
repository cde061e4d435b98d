# renderer/config.py
from dataclasses import dataclass

@dataclass(frozen=True)
class RenderConfig:
    """
    Output and sampling settings of a render.

    max_bounces bounds the recursion of the radiance estimator and
    samples_per_pixel the number of rays averaged per pixel. Frames are
    spread evenly over [start_time, end_time].
    """
    width: int = 500
    height: int = 500
    gamma: float = 2.2
    debug_info: bool = True
    max_bounces: int = 10
    samples_per_pixel: int = 200
    depth_of_field: bool = False
    antialiasing: bool = True
    start_time: float = 0.0
    end_time: float = 100.0
    frame_count: int = 1
    seed: int = 42
    workers: int = 1
    output_pattern: str = "image_{frame}.png"

    def __post_init__(self):
        for name in ("width", "height", "samples_per_pixel", "frame_count", "workers"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        if self.max_bounces < 0:
            raise ValueError(f"max_bounces must be non-negative, got {self.max_bounces}")
        if self.gamma <= 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")
        if self.end_time < self.start_time:
            raise ValueError("end_time must not precede start_time")

    @classmethod
    def preview(cls, **overrides) -> "RenderConfig":
        """A small, fast configuration for checking a scene."""
        settings = {"width": 100, "height": 100, "max_bounces": 3, "samples_per_pixel": 4}
        settings.update(overrides)
        return cls(**settings)
