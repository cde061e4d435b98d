"""Tests for the command line entry point and the demo scene."""

import os

from core.color import Color
from core.vector import Vector3
from main import create_camera, create_scene, main, parse_args
from materials.presets import GlossyPresets, LightPresets
from renderer.config import RenderConfig


class TestParseArgs:

    def test_defaults(self):
        assert parse_args([]) == RenderConfig()

    def test_flags(self):
        config = parse_args(["--width", "32", "--height", "16", "--samples", "3", "--bounces", "2",
                             "--frames", "4", "--end-time", "8", "--dof", "--no-aa", "--quiet",
                             "--seed", "5", "--workers", "2"])
        assert (config.width, config.height) == (32, 16)
        assert config.samples_per_pixel == 3
        assert config.max_bounces == 2
        assert config.frame_count == 4
        assert config.end_time == 8.0
        assert config.depth_of_field
        assert not config.antialiasing
        assert not config.debug_info
        assert config.seed == 5
        assert config.workers == 2


class TestDemoScene:

    def test_contents(self):
        """One glossy sphere, four walls and one light object."""
        scene = create_scene()
        assert len(scene.objects) == 5
        assert len(scene.lights) == 0
        assert len(scene.light_objects) == 1
        assert scene.light_objects[0].get_material().emissive

    def test_uses_presets(self):
        """The glossy sphere is white plastic and the light spreads 2e9 over its surface."""
        scene = create_scene()
        assert scene.objects[0].get_material() == GlossyPresets.plastic(Color.white())
        assert scene.light_objects[0].get_material() == LightPresets.sphere_light(2e9, 10.0)

    def test_camera_follows_config(self):
        camera = create_camera(RenderConfig(width=20, height=10))
        assert (camera.width, camera.height) == (20, 10)
        assert camera.center == Vector3(0, 0, 55)


class TestMain:

    def test_renders_demo_frame(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["--width", "4", "--height", "4", "--samples", "1", "--bounces", "1", "--quiet"])
        assert os.path.exists(tmp_path / "image_0.png")
