# geometry/light.py
from typing import List

from core.animation import Animation, AnimationTrack, animate_point
from core.color import Color
from core.vector import Vector3

class PointLight:
    """
    A non-geometric light: a position radiating intensity (per RGB channel)
    equally in all directions.
    """
    def __init__(self, center: Vector3, intensity: Vector3):
        self.center = center
        self.intensity = intensity
        self.animations = AnimationTrack()

    def add_animation(self, animation: Animation):
        self.animations.add_animation(animation)

    def get_animations(self) -> List[Animation]:
        return self.animations.get_animations()

    def position(self, time: float) -> Vector3:
        return animate_point(self.center, self.get_animations(), time)

    def intensity_at(self, point: Vector3, normal: Vector3, color: Color, time: float) -> Vector3:
        """
        Lambertian intensity received at point: inverse-square falloff times
        the cosine between the normal and the light direction, tinted by the
        receiving surface's color.
        """
        to_light = self.position(time) - point
        d2 = to_light.norm_sq()
        if d2 == 0:
            return Vector3.zero()
        cos_theta = max(0.0, to_light.normalize().dot(normal))
        return self.intensity * color * (cos_theta / d2)
