# camera/camera.py
import math
from typing import List

from core.animation import Animation, AnimationTrack
from core.ray import Ray
from core.utils import random_in_unit_disk
from core.vector import Vector3

# Lens radius used by depth of field rays, in world units.
APERTURE = 2.5

class Camera:
    """
    A pinhole camera looking along direction, with one world unit per pixel
    on an image plane placed at depth() in front of the center.

    focal is the distance to the plane that stays sharp with depth of field.
    """
    def __init__(self, center: Vector3, direction: Vector3, up: Vector3,
                 fov_degrees: float, focal: float, height: int, width: int):
        self.center = center
        self.direction = direction
        self.up = up
        self.fov_degrees = fov_degrees
        self.focal = focal
        self.height = height
        self.width = width
        self.animations = AnimationTrack()

    @property
    def right(self) -> Vector3:
        return self.direction.cross(self.up)

    def depth(self) -> float:
        """Distance from the center to the image plane."""
        return self.height / (2.0 * math.tan(math.radians(self.fov_degrees) / 2.0))

    def add_animation(self, animation: Animation):
        self.animations.add_animation(animation)

    def get_animations(self) -> List[Animation]:
        return self.animations.get_animations()


def basic_ray(row: int, col: int, camera: Camera) -> Ray:
    """
    Ray from the camera center through pixel (row, col).
    """
    direction = (camera.right * (col - camera.width // 2)
                 + camera.up * (camera.height // 2 - row)
                 + camera.direction * camera.depth())
    return Ray(camera.center, direction).normalize()

def antialiased_ray(row: int, col: int, camera: Camera, rng) -> Ray:
    """
    Like basic_ray with a Gaussian jitter (Box-Muller, sigma 0.5) of the
    position inside the pixel. Averaging many of them anti-aliases edges.
    """
    # 1 - random() lies in (0, 1], keeping the log finite.
    x = 1.0 - rng.random()
    y = rng.random()
    r = math.sqrt(-2.0 * math.log(x))
    u = r * math.cos(2.0 * math.pi * y) * 0.5
    v = r * math.sin(2.0 * math.pi * y) * 0.5

    direction = (camera.right * (col - camera.width / 2.0 + u - 0.5)
                 + camera.up * (camera.height / 2.0 - row + v - 0.5)
                 + camera.direction * camera.depth())
    return Ray(camera.center, direction).normalize()

def depth_of_field_ray(row: int, col: int, camera: Camera, rng) -> Ray:
    """
    Anti-aliased ray leaving from a random point of the lens and aimed at
    the point the pinhole ray reaches at the focal distance.
    """
    pinhole = antialiased_ray(row, col, camera, rng)
    target = camera.center + pinhole.direction * camera.focal

    rd = random_in_unit_disk(rng) * APERTURE
    origin = camera.center + camera.right * rd.x + camera.up * rd.y
    return Ray(origin, target - origin).normalize()
