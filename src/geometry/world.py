# geometry/world.py
import math
from dataclasses import replace
from typing import List, Optional

from core.animation import animate_intersection, animate_point, reverse_animations
from core.ray import Ray, reflect
from core.utils import random_area_light_ray, random_cosine_ray, random_phong_ray
from core.vector import Vector3
from geometry.hittable import NUDGE_EPSILON, Hittable, Intersection
from geometry.light import PointLight

# Index of refraction of the medium surrounding every object.
N_AIR = 1.0

class Scene:
    """
    Objects, point lights and light objects of a render, plus the recursive
    radiance estimator.

    objects are what rays can hit. light_objects are emissive primitives
    sampled for direct lighting; they only occlude or show up in renders if
    they are also added as objects. The scene is not modified while
    rendering, so one instance can serve any number of concurrent samples
    as long as each brings its own random generator.
    """
    def __init__(self):
        self.objects: List[Hittable] = []
        self.lights: List[PointLight] = []
        self.light_objects: List[Hittable] = []
        self.show_emissive_surfaces = False
        self.use_fresnel = False

    def add_object(self, obj: Hittable):
        self.objects.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def add_light_object(self, obj: Hittable):
        self.light_objects.append(obj)

    def set_show_emissive_surfaces(self, show: bool):
        self.show_emissive_surfaces = show

    def set_use_fresnel(self, use_fresnel: bool):
        self.use_fresnel = use_fresnel

    # ------------------------------------------------------------------
    # Ray queries
    # ------------------------------------------------------------------

    def _intersect_object(self, obj: Hittable, ray: Ray, time: float) -> Optional[Intersection]:
        animations = obj.get_animations()
        hit = obj.intersect(reverse_animations(ray, animations, time))
        if hit is None:
            return None
        return animate_intersection(hit, animations, time)

    def closest_intersection(self, ray: Ray, time: float) -> Optional[Intersection]:
        """
        Nearest hit of the ray among all objects at the given time, or None.
        """
        closest = None
        closest_d2 = math.inf
        for obj in self.objects:
            hit = self._intersect_object(obj, ray, time)
            if hit is not None:
                d2 = (hit.point - ray.origin).norm_sq()
                if d2 <= closest_d2:
                    closest_d2 = d2
                    closest = hit
        return closest

    def shadowed(self, point: Vector3, light: PointLight, time: float) -> bool:
        """
        True if some object lies between point and the light's position.
        """
        to_light = light.position(time) - point
        light_distance = to_light.norm()
        if light_distance == 0:
            return False
        ray = Ray(point, to_light / light_distance)
        for obj in self.objects:
            hit = self._intersect_object(obj, ray, time)
            # Hits at the light itself (a sampled point on a visible light object) do not count.
            if hit is not None and (hit.point - point).norm() < light_distance - NUDGE_EPSILON:
                return True
        return False

    # ------------------------------------------------------------------
    # Radiance
    # ------------------------------------------------------------------

    def radiance(self, ray: Ray, intersection: Intersection, remaining_bounces: int,
                 time: float, rng) -> Vector3:
        """
        RGB radiance leaving intersection back along ray.

        Sum of the point light, mirror, transparent, emissive, indirect and
        direct (area light) terms, each clamped at zero. Every recursive
        term spends one bounce; with no bounce left the result is zero.
        """
        if remaining_bounces < 0:
            raise ValueError(f"remaining_bounces must be non-negative, got {remaining_bounces}")
        zero = Vector3.zero()
        if remaining_bounces == 0:
            return zero

        total = self.point_light_term(intersection, time).max(zero)
        total = total + self.mirror_term(ray, intersection, remaining_bounces, time, rng).max(zero)
        total = total + self.transparent_term(ray, intersection, remaining_bounces, time, rng).max(zero)
        total = total + self.emissive_term(intersection).max(zero)
        total = total + self.indirect_term(ray, intersection, remaining_bounces, time, rng).max(zero)
        total = total + self.direct_term(ray, intersection, time, rng).max(zero)
        return total

    def trace(self, ray: Ray, remaining_bounces: int, time: float, rng) -> Vector3:
        """
        Radiance along a ray, zero when it escapes the scene.
        """
        if remaining_bounces <= 0:
            return Vector3.zero()
        hit = self.closest_intersection(ray, time)
        if hit is None:
            return Vector3.zero()
        return self.radiance(ray, hit, remaining_bounces, time, rng)

    def point_light_term(self, intersection: Intersection, time: float) -> Vector3:
        total = Vector3.zero()
        nudged = intersection.point_nudged()
        for light in self.lights:
            if not self.shadowed(nudged, light, time):
                total = total + light.intensity_at(intersection.point, intersection.normal,
                                                   intersection.material.color, time)
        return total

    def mirror_term(self, ray: Ray, intersection: Intersection, remaining_bounces: int,
                    time: float, rng) -> Vector3:
        material = intersection.material
        if not material.mirror:
            return Vector3.zero()
        reflected = ray.reflect(intersection)
        return self.trace(reflected, remaining_bounces - 1, time, rng) * material.specular_color

    def transparent_term(self, ray: Ray, intersection: Intersection, remaining_bounces: int,
                         time: float, rng) -> Vector3:
        material = intersection.material
        if not material.transparent:
            return Vector3.zero()

        refracted = ray.refract(intersection, N_AIR, material.n_object, self.use_fresnel, rng)
        if refracted is None:
            # Total internal reflection (or a Fresnel reflection): bounce as a mirror,
            # on the side of the surface the ray came from.
            as_mirror = intersection.with_material(replace(material, mirror=True))
            if ray.direction.dot(intersection.normal) >= 0:
                as_mirror = as_mirror.with_frame(intersection.point, -intersection.normal)
            return self.mirror_term(ray, as_mirror, remaining_bounces, time, rng)

        return self.trace(refracted, remaining_bounces - 1, time, rng)

    def emissive_term(self, intersection: Intersection) -> Vector3:
        material = intersection.material
        if not (material.emissive and self.show_emissive_surfaces):
            return Vector3.zero()
        return Vector3.uniform(material.emissivity) * material.color

    def indirect_term(self, ray: Ray, intersection: Intersection, remaining_bounces: int,
                      time: float, rng) -> Vector3:
        """
        One-sample estimate of light arriving from other surfaces.

        Phong surfaces pick the cosine lobe or the Phong lobe with equal
        probability; the estimate divides the full BRDF (diffuse plus glossy)
        by the density of that mixture.
        """
        material = intersection.material
        normal = intersection.normal
        origin = intersection.point_nudged()
        reflected = reflect(ray.direction, normal).normalize()
        p_diffuse = 0.5 if material.phong else 1.0

        if material.phong and rng.random() >= p_diffuse:
            new_ray = random_phong_ray(origin, material.phong_exponent, reflected, rng)
            if new_ray.direction.dot(normal) <= 0 or new_ray.direction.dot(reflected) <= 0:
                return Vector3.zero()
        else:
            new_ray = random_cosine_ray(origin, normal, rng)

        cos_theta = new_ray.direction.dot(normal)
        if cos_theta <= 0:
            return Vector3.zero()

        weight = material.color * (cos_theta / math.pi)
        pdf = p_diffuse * cos_theta / math.pi
        if material.phong:
            n = material.phong_exponent
            lobe = math.pow(max(0.0, new_ray.direction.dot(reflected)), n)
            weight = weight + material.specular_color * ((n + 2.0) / (2.0 * math.pi) * lobe * cos_theta)
            pdf += (1.0 - p_diffuse) * (n + 1.0) / (2.0 * math.pi) * lobe

        if pdf <= 0 or weight.is_black():
            return Vector3.zero()

        return self.trace(new_ray, remaining_bounces - 1, time, rng) * weight / pdf

    def _pick_light_object(self, rng):
        """
        Chooses a light object with probability proportional to
        emissivity / surface area. Returns (object, probability) or None.
        """
        weights = []
        for obj in self.light_objects:
            area = obj.surface_area()
            weights.append(obj.get_material().emissivity / area if area > 0 else 0.0)
        total = sum(weights)
        if total <= 0:
            return None

        threshold = rng.random() * total
        cumulative = 0.0
        chosen = None
        for obj, w in zip(self.light_objects, weights):
            if w <= 0:
                continue
            cumulative += w
            chosen = (obj, w / total)
            if threshold < cumulative:
                break
        return chosen

    def direct_term(self, ray: Ray, intersection: Intersection, time: float, rng) -> Vector3:
        """
        Light arriving straight from one sampled point of one light object.
        """
        picked = self._pick_light_object(rng)
        if picked is None:
            return Vector3.zero()
        light_object, probability = picked

        material = intersection.material
        receiver_color = material.color
        light_material = light_object.get_material()
        area = light_object.surface_area()
        center = animate_point(light_object.center(), light_object.get_animations(), time)

        dir_center_to_point = (intersection.point - center).normalize()
        sample = random_area_light_ray(center, area, dir_center_to_point, rng)
        to_point = intersection.point - sample.origin
        d2 = to_point.norm_sq()
        if d2 == 0:
            return Vector3.zero()
        to_point = to_point / math.sqrt(d2)

        cos_receiver = intersection.normal.dot(-to_point)
        cos_emitter = sample.direction.dot(to_point)
        cos_sample = dir_center_to_point.dot(sample.direction)
        if cos_receiver <= 0 or cos_emitter <= 0 or cos_sample <= 0:
            return Vector3.zero()

        if material.phong:
            reflected = reflect(ray.direction, intersection.normal).normalize()
            n = material.phong_exponent
            phong_term = (math.pow(max(0.0, reflected.dot(-to_point)), n)
                          * (n + 2.0) / (2.0 * math.pi))
            receiver_color = receiver_color + material.specular_color * (phong_term - 1.0)
        if receiver_color.is_black():
            return Vector3.zero()

        sampled_light = PointLight(sample.origin, Vector3.uniform(light_material.emissivity / area) * light_material.color)
        if self.shadowed(intersection.point_nudged(), sampled_light, time):
            return Vector3.zero()

        geometry = cos_receiver * cos_emitter * area / (cos_sample * d2 * 4.0 * math.pi)
        return (Vector3.uniform(light_material.emissivity) * light_material.color * receiver_color
                * (geometry / probability))
