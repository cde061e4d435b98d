# main.py
import argparse
import logging

from camera.camera import Camera
from core.color import Color
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material
from materials.presets import GlossyPresets, LightPresets
from renderer.config import RenderConfig
from renderer.raytracer import Renderer

def create_camera(config: RenderConfig) -> Camera:
    return Camera(
        center=Vector3(0, 0, 55),
        direction=Vector3(0, 0, -1),
        up=Vector3(0, 1, 0),
        fov_degrees=60.0,
        focal=35.0,
        height=config.height,
        width=config.width
    )

def create_scene() -> Scene:
    """
    A glossy white sphere inside a box made of four huge spheres, lit by one
    spherical area light.
    """
    scene = Scene()

    sphere_phong = Sphere(Vector3(0, 0, 0), 10.0, GlossyPresets.plastic(Color.white()))
    # Walls: red top, green back, yellow front, blue floor
    wall_top = Sphere(Vector3(0, 1000, 0), 940.0, Material.diffuse(Color.red()))
    wall_back = Sphere(Vector3(0, 0, -1000), 940.0, Material.diffuse(Color.green()))
    wall_front = Sphere(Vector3(0, 0, 1000), 940.0, Material.diffuse(Color.yellow()))
    wall_floor = Sphere(Vector3(0, -1000, 0), 990.0, Material.diffuse(Color.blue()))

    light_radius = 10.0
    light_emissive = Sphere(Vector3(-30, 5, 45), light_radius, LightPresets.sphere_light(2e9, light_radius))

    for obj in (sphere_phong, wall_top, wall_back, wall_front, wall_floor):
        scene.add_object(obj)
    scene.add_light_object(light_emissive)
    return scene

def parse_args(argv=None) -> RenderConfig:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(description="Render the demo scene.")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--samples", type=int, default=defaults.samples_per_pixel)
    parser.add_argument("--bounces", type=int, default=defaults.max_bounces)
    parser.add_argument("--frames", type=int, default=defaults.frame_count)
    parser.add_argument("--start-time", type=float, default=defaults.start_time)
    parser.add_argument("--end-time", type=float, default=defaults.end_time)
    parser.add_argument("--gamma", type=float, default=defaults.gamma)
    parser.add_argument("--dof", action="store_true", help="enable depth of field")
    parser.add_argument("--no-aa", action="store_true", help="disable anti-aliasing")
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--workers", type=int, default=defaults.workers)
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args(argv)

    return RenderConfig(
        width=args.width,
        height=args.height,
        gamma=args.gamma,
        debug_info=not args.quiet,
        max_bounces=args.bounces,
        samples_per_pixel=args.samples,
        depth_of_field=args.dof,
        antialiasing=not args.no_aa,
        start_time=args.start_time,
        end_time=args.end_time,
        frame_count=args.frames,
        seed=args.seed,
        workers=args.workers
    )

def main(argv=None):
    config = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if config.debug_info else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logging.getLogger(__name__).info("Creating camera and scene")
    renderer = Renderer(create_camera(config), create_scene(), config)
    renderer.render_all_frames()

if __name__ == "__main__":
    main()
