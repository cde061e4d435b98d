# core/ray.py
import math
from typing import TYPE_CHECKING, Optional

from core.vector import Vector3

if TYPE_CHECKING:
    from geometry.hittable import Intersection

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    Directions are kept unit length by every operation that could change
    their norm.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def normalize(self) -> "Ray":
        return Ray(self.origin, self.direction.normalize())

    # Rigid transforms, used by the animation system.

    def translate(self, offset: Vector3) -> "Ray":
        return Ray(self.origin + offset, self.direction)

    def rotate_x(self, theta_deg: float, center: Vector3) -> "Ray":
        return Ray((self.origin - center).rotate_x(theta_deg) + center,
                   self.direction.rotate_x(theta_deg))

    def rotate_y(self, theta_deg: float, center: Vector3) -> "Ray":
        return Ray((self.origin - center).rotate_y(theta_deg) + center,
                   self.direction.rotate_y(theta_deg))

    def rotate_z(self, theta_deg: float, center: Vector3) -> "Ray":
        return Ray((self.origin - center).rotate_z(theta_deg) + center,
                   self.direction.rotate_z(theta_deg))

    def reflect(self, intersection: "Intersection") -> "Ray":
        """
        Mirror reflection of this ray about the surface normal at the hit.
        The new origin is nudged outward along the normal.
        """
        direction = reflect(self.direction, intersection.normal)
        return Ray(intersection.point_nudged(), direction).normalize()

    def refract(self, intersection: "Intersection", n_air: float, n_object: float,
                use_fresnel: bool = False, rng=None) -> Optional["Ray"]:
        """
        Refracts the ray through the surface at the hit (Snell's law).

        Returns None on total internal reflection. With use_fresnel the
        Schlick reflectance is drawn against rng and None is also returned
        when the draw picks reflection; either way the caller falls back to
        mirror behaviour.
        """
        normal = intersection.normal
        leaving = self.direction.dot(normal) >= 0.0
        if leaving:
            n_1, n_2 = n_object, n_air
            facing = -normal
        else:
            n_1, n_2 = n_air, n_object
            facing = normal

        eta = n_1 / n_2
        scalar = self.direction.dot(facing)
        radical = 1.0 - eta * eta * (1.0 - scalar * scalar)
        if radical < 0.0:
            return None

        direction = (self.direction * eta - facing * (eta * scalar + math.sqrt(radical))).normalize()

        if use_fresnel:
            if rng is None:
                raise ValueError("a random generator is required when use_fresnel is set")
            # Cosine measured on the air side of the interface.
            cos_air = direction.dot(normal) if leaving else -self.direction.dot(normal)
            if rng.random() >= 1.0 - schlick(cos_air, n_air, n_object):
                return None

        origin = intersection.point_nudged() if leaving else intersection.point_nudged_neg()
        return Ray(origin, direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def schlick(cos_theta: float, n_1: float, n_2: float) -> float:
    """
    Schlick approximation of the Fresnel reflectance between two media.
    """
    r0 = (n_1 - n_2) / (n_1 + n_2)
    r0 = r0 * r0
    cos_theta = min(max(cos_theta, 0.0), 1.0)
    return r0 + (1.0 - r0) * math.pow(1.0 - cos_theta, 5)
