"""Pytest configuration for the path tracer tests.

Shared fixtures: a seeded random generator and small reference scenes
built from spheres and point lights.
"""

import numpy as np
import pytest

from camera.camera import Camera
from core.color import Color
from core.vector import Vector3
from geometry.light import PointLight
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material


@pytest.fixture
def rng():
    """Fresh generator with a fixed seed for every test."""
    return np.random.default_rng(42)


@pytest.fixture
def red_sphere():
    """Diffuse red sphere of radius 10 at the origin."""
    return Sphere(Vector3(0, 0, 0), 10.0, Material.diffuse(Color.red()))


@pytest.fixture
def white_sphere():
    """Diffuse white sphere of radius 10 at the origin."""
    return Sphere(Vector3(0, 0, 0), 10.0, Material.diffuse(Color.white()))


@pytest.fixture
def lit_red_scene(red_sphere):
    """Red sphere lit by a white point light 20 units above its top."""
    scene = Scene()
    scene.add_object(red_sphere)
    scene.add_light(PointLight(Vector3(0, 30, 0), Vector3.uniform(1e4)))
    return scene


@pytest.fixture
def small_camera():
    """8x8 camera at z=55 looking down -z."""
    return Camera(
        center=Vector3(0, 0, 55),
        direction=Vector3(0, 0, -1),
        up=Vector3(0, 1, 0),
        fov_degrees=60.0,
        focal=35.0,
        height=8,
        width=8
    )


def assert_vector_close(actual, expected, tol=1e-9):
    """Component-wise comparison of two Vector3 values."""
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)
