# geometry/hittable.py
from typing import List, Optional

from core.animation import Animation, AnimationTrack
from core.ray import Ray
from core.vector import Vector3
from materials.material import Material

# Offset applied along the normal before spawning secondary rays.
NUDGE_EPSILON = 1e-4

class Intersection:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("point", "normal", "material")

    def __init__(self, point: Vector3, normal: Vector3, material: Material):
        self.point = point      # Intersection point
        self.normal = normal    # Unit surface normal, outward unless flipped by the caller
        self.material = material

    def point_nudged(self) -> Vector3:
        """
        The hit point pushed just outside the surface, so rays leaving it
        do not hit the same surface again through rounding error.
        """
        return self.point + self.normal * NUDGE_EPSILON

    def point_nudged_neg(self) -> Vector3:
        """
        The hit point pushed just inside the surface (rays entering a
        transparent object).
        """
        return self.point - self.normal * NUDGE_EPSILON

    def nudged(self) -> "Intersection":
        return Intersection(self.point_nudged(), self.normal, self.material)

    def nudged_neg(self) -> "Intersection":
        return Intersection(self.point_nudged_neg(), self.normal, self.material)

    def with_frame(self, point: Vector3, normal: Vector3) -> "Intersection":
        return Intersection(point, normal, self.material)

    def with_material(self, material: Material) -> "Intersection":
        return Intersection(self.point, self.normal, material)

    def __repr__(self) -> str:
        return f"Intersection(point={self.point!r}, normal={self.normal!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Geometry is defined in its rest pose; the scene moves rays into that
    pose with the object's animations before calling intersect().
    """
    def __init__(self):
        self.animations = AnimationTrack()

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def get_material(self) -> Material:
        raise NotImplementedError("get_material() must be implemented by subclasses.")

    def surface_area(self) -> float:
        return 0.0

    def center(self) -> Vector3:
        return Vector3.zero()

    def add_animation(self, animation: Animation):
        self.animations.add_animation(animation)

    def get_animations(self) -> List[Animation]:
        return self.animations.get_animations()
