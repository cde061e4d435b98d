# core/utils.py
import math
from typing import Tuple

from core.ray import Ray
from core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere, away from its center.
    """
    while True:
        p = Vector3(rng.uniform(-1.0, 1.0),
                    rng.uniform(-1.0, 1.0),
                    rng.uniform(-1.0, 1.0))
        if 1e-6 < p.dot(p) < 1.0:
            return p

def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk of the z = 0 plane.
    """
    while True:
        p = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), 0.0)
        if p.dot(p) < 1.0:
            return p

def random_basis(axis: Vector3, rng) -> Tuple[Vector3, Vector3]:
    """
    Builds two unit vectors orthogonal to axis (and to each other) from a
    random auxiliary direction.
    """
    while True:
        t1 = axis.cross(random_in_unit_sphere(rng).normalize())
        if t1.norm_sq() > 1e-8:
            break
    t1 = t1.normalize()
    t2 = axis.cross(t1).normalize()
    return t1, t2

def _local_to_world(axis: Vector3, x: float, y: float, z: float, rng) -> Vector3:
    t1, t2 = random_basis(axis, rng)
    return (t1 * x + t2 * y + axis * z).normalize()

def random_cosine_ray(point: Vector3, normal: Vector3, rng) -> Ray:
    """
    Cosine-weighted direction in the hemisphere around normal, from point.
    Density: cos(theta) / pi.
    """
    r1 = rng.random()
    r2 = rng.random()
    sin_theta = math.sqrt(1.0 - r2)
    x = math.cos(2.0 * math.pi * r1) * sin_theta
    y = math.sin(2.0 * math.pi * r1) * sin_theta
    z = math.sqrt(r2)
    return Ray(point, _local_to_world(normal, x, y, z, rng))

def random_phong_ray(point: Vector3, phong_exponent: float, reflected_direction: Vector3, rng) -> Ray:
    """
    Direction drawn from the Phong lobe cos^n(alpha) around the mirror
    direction. Density: (n + 1) / (2 pi) * cos^n(alpha).

    The lobe is not truncated at the surface; callers reject samples that
    fall below it.
    """
    r1 = rng.random()
    r2 = rng.random()
    cos_alpha = math.pow(r2, 1.0 / (phong_exponent + 1.0))
    sin_alpha = math.sqrt(max(0.0, 1.0 - cos_alpha * cos_alpha))
    x = math.cos(2.0 * math.pi * r1) * sin_alpha
    y = math.sin(2.0 * math.pi * r1) * sin_alpha
    return Ray(point, _local_to_world(reflected_direction, x, y, cos_alpha, rng))

def random_area_light_ray(light_center: Vector3, surface_area: float, outward_direction: Vector3, rng) -> Ray:
    """
    Picks a point on a spherical emitter of the given surface area.

    The point is placed along a cosine-weighted direction around
    outward_direction (the direction from the emitter toward the receiver).
    The returned ray starts at that point and carries the emitter's outward
    normal there as its direction.
    """
    radius = math.sqrt(surface_area / (4.0 * math.pi))
    r1 = rng.random()
    r2 = rng.random()
    sin_theta = math.sqrt(r2)
    x = math.cos(2.0 * math.pi * r1) * sin_theta
    y = math.sin(2.0 * math.pi * r1) * sin_theta
    z = math.sqrt(1.0 - r2)
    direction = _local_to_world(outward_direction, x, y, z, rng)
    return Ray(light_center + direction * radius, direction)
