# core/animation.py
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Sequence

from core.ray import Ray
from core.vector import Vector3

if TYPE_CHECKING:
    from geometry.hittable import Intersection

def _origin() -> Vector3:
    return Vector3.zero()

@dataclass(frozen=True)
class Animation:
    """
    A timed translation and/or rotation of a component (object, light or
    camera).

    Between start_time and end_time the transform is interpolated linearly;
    after end_time it stays fully applied. Within one animation the steps
    run in a fixed order: translate, rotate around x, around y, around z,
    each rotation pivoting about its own center. Angles are in degrees.

    scale is recorded but not applied to rays.
    """
    start_time: float
    end_time: float
    translation: Vector3 = field(default_factory=_origin)
    scale: float = 1.0
    rotation_x: float = 0.0
    rotation_center_x: Vector3 = field(default_factory=_origin)
    rotation_y: float = 0.0
    rotation_center_y: Vector3 = field(default_factory=_origin)
    rotation_z: float = 0.0
    rotation_center_z: Vector3 = field(default_factory=_origin)

    @classmethod
    def translation_of(cls, start_time: float, end_time: float, translation: Vector3) -> "Animation":
        return cls(start_time, end_time, translation=translation)

    @classmethod
    def scaling(cls, start_time: float, end_time: float, scale: float) -> "Animation":
        return cls(start_time, end_time, scale=scale)

    @classmethod
    def rotation_around_x(cls, start_time: float, end_time: float, angle: float,
                          center: Vector3 = None) -> "Animation":
        return cls(start_time, end_time, rotation_x=angle,
                   rotation_center_x=center if center is not None else Vector3.zero())

    @classmethod
    def rotation_around_y(cls, start_time: float, end_time: float, angle: float,
                          center: Vector3 = None) -> "Animation":
        return cls(start_time, end_time, rotation_y=angle,
                   rotation_center_y=center if center is not None else Vector3.zero())

    @classmethod
    def rotation_around_z(cls, start_time: float, end_time: float, angle: float,
                          center: Vector3 = None) -> "Animation":
        return cls(start_time, end_time, rotation_z=angle,
                   rotation_center_z=center if center is not None else Vector3.zero())

    def is_degenerate(self) -> bool:
        return self.start_time > self.end_time

    def progress(self, time: float) -> float:
        """
        Fraction of the animation completed at time, in [0, 1].
        """
        if time < self.start_time:
            return 0.0
        if time >= self.end_time:
            return 1.0
        return (time - self.start_time) / (self.end_time - self.start_time)

    def is_active(self, time: float) -> bool:
        return not self.is_degenerate() and time >= self.start_time

    def apply(self, ray: Ray, time: float) -> Ray:
        if not self.is_active(time):
            return ray
        p = self.progress(time)
        return (ray.translate(self.translation * p)
                .rotate_x(self.rotation_x * p, self.rotation_center_x)
                .rotate_y(self.rotation_y * p, self.rotation_center_y)
                .rotate_z(self.rotation_z * p, self.rotation_center_z))

    def reverse(self, ray: Ray, time: float) -> Ray:
        if not self.is_active(time):
            return ray
        p = self.progress(time)
        # Inverse steps in reverse order.
        return (ray.rotate_z(-self.rotation_z * p, self.rotation_center_z)
                .rotate_y(-self.rotation_y * p, self.rotation_center_y)
                .rotate_x(-self.rotation_x * p, self.rotation_center_x)
                .translate(-self.translation * p))


def apply_animations(ray: Ray, animations: Sequence[Animation], time: float) -> Ray:
    """
    Moves a ray from rest space to world space at the given time.

    Animations compose in sequence. Ones that have not started yet and
    degenerate ones (start_time > end_time) are skipped.
    """
    current = ray
    for a in animations:
        current = a.apply(current, time)
    return current.normalize() if current is not ray else ray

def reverse_animations(ray: Ray, animations: Sequence[Animation], time: float) -> Ray:
    """
    Moves a ray from world space back to the rest pose at the given time,
    undoing apply_animations exactly.
    """
    current = ray
    for a in reversed(animations):
        current = a.reverse(current, time)
    return current.normalize() if current is not ray else ray

def animate_point(point: Vector3, animations: Sequence[Animation], time: float) -> Vector3:
    """
    World position at time of a point given in rest space.
    """
    if not animations:
        return point
    return apply_animations(Ray(point, Vector3(0.0, 0.0, 1.0)), animations, time).origin

def animate_intersection(intersection: "Intersection", animations: Sequence[Animation],
                         time: float) -> "Intersection":
    """
    Moves a hit found in rest space to world space: the point follows the
    full transform, the normal only the rotations.
    """
    if not animations:
        return intersection
    moved = apply_animations(Ray(intersection.point, intersection.normal), animations, time)
    return intersection.with_frame(moved.origin, moved.direction)


class AnimationTrack:
    """
    Ordered list of animations owned by a camera, light or object.
    """
    def __init__(self):
        self._animations: List[Animation] = []

    def add_animation(self, animation: Animation):
        self._animations.append(animation)

    def get_animations(self) -> List[Animation]:
        return list(self._animations)
