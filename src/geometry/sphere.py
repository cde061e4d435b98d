# geometry/sphere.py
import math
from typing import Optional

from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, Intersection
from materials.material import Material

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material):
        super().__init__()
        self._center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        oc = ray.origin - self._center
        a = ray.direction.norm_sq()
        half_b = oc.dot(ray.direction)
        c = oc.norm_sq() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0 or a == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        far = (-half_b + sqrt_disc) / a
        if far < 0:
            # Both roots behind the origin
            return None
        near = (-half_b - sqrt_disc) / a
        t = near if near >= 0 else far

        point = ray.at(t)
        normal = (point - self._center) / self.radius
        return Intersection(point, normal, self.material)

    def get_material(self) -> Material:
        return self.material

    def surface_area(self) -> float:
        return 4.0 * math.pi * self.radius * self.radius

    def center(self) -> Vector3:
        return self._center
