# materials/presets.py
import math

from core.color import Color
from materials.material import Material

class MirrorPresets:
    """Predefined reflective materials."""

    @staticmethod
    def gold() -> Material:
        return Material.mirror_of(Color(1.0, 0.78, 0.34))

class DielectricPresets:
    """Predefined transparent materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Material:
        return Material.transparent_of(Color.white(), 1.52)  # Common glass

    @staticmethod
    def diamond() -> Material:
        return Material.transparent_of(Color.white(), 2.42)

class GlossyPresets:
    """Predefined Phong materials."""

    @staticmethod
    def plastic(color: Color) -> Material:
        return Material.phong_of(color, Color.uniform(0.2), 20.0)

class LightPresets:
    """Predefined emitters for spherical light objects."""

    @staticmethod
    def sphere_light(power: float, radius: float, color: Color = None) -> Material:
        """
        Emissive material spreading a total power over a sphere of the
        given radius.
        """
        if color is None:
            color = Color.white()
        return Material.emissive_of(color, power / (4.0 * math.pi * radius * radius))
