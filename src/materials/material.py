# materials/material.py
from dataclasses import dataclass, field

from core.color import Color

@dataclass(frozen=True)
class Material:
    """
    Surface description as a set of behaviour flags plus their parameters.

    Flags are not exclusive: the scene adds up the contribution of every
    active behaviour, so a surface may at once reflect, refract and emit.
    The indirect (diffuse/glossy) bounce is always evaluated and weighted
    by color, which is black for pure mirrors and glass.
    """
    color: Color = field(default_factory=Color.black)
    mirror: bool = False
    specular_color: Color = field(default_factory=Color.black)
    transparent: bool = False
    n_object: float = 1.0          # index of refraction
    emissive: bool = False
    emissivity: float = 0.0        # radiant power per unit area
    phong: bool = False
    phong_exponent: float = 1.0

    @classmethod
    def diffuse(cls, color: Color) -> "Material":
        return cls(color=color)

    @classmethod
    def mirror_of(cls, specular_color: Color) -> "Material":
        return cls(mirror=True, specular_color=specular_color)

    @classmethod
    def transparent_of(cls, specular_color: Color, n_object: float) -> "Material":
        return cls(transparent=True, specular_color=specular_color, n_object=n_object)

    @classmethod
    def emissive_of(cls, color: Color, emissivity: float) -> "Material":
        return cls(color=color, emissive=True, emissivity=emissivity)

    @classmethod
    def phong_of(cls, color: Color, specular_color: Color, phong_exponent: float) -> "Material":
        return cls(color=color, specular_color=specular_color, phong=True,
                   phong_exponent=phong_exponent)
