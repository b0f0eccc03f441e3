"""The demo scene and the command that renders it."""

from __future__ import annotations

import argparse

from raytrace.camera import Camera
from raytrace.hittable import HittableList, Sphere
from raytrace.material import Dielectric, Lambertian, Metal
from raytrace.sampling import RandomGenerator
from raytrace.vector import Vec3


def build_scene(rng: RandomGenerator) -> HittableList:
    """A ground plane scattered with small random spheres and three large ones."""
    world = HittableList()
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))))

    keep_clear = Vec3(4.0, 0.2, 0.0)
    for a in range(-22, 22):
        for b in range(-11, 11):
            choose_mat = rng.random_float()
            cx = a + 0.9 * rng.random_float()
            cz = b + 0.9 * rng.random_float()
            center = Vec3(cx, 0.2, cz)

            if (center - keep_clear).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = rng.random_vec3_range(0.0, 1.0) * rng.random_vec3_range(0.0, 1.0)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = rng.random_vec3_range(0.5, 1.0)
                fuzz = rng.random_float_range(0.0, 0.5)
                material = Metal(albedo, fuzz)
            else:
                material = Dielectric(Vec3(1.0, 1.0, 1.0), 1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(Vec3(1.0, 1.0, 1.0), 1.33)))
    world.add(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return world


def main(argv: list[str] | None = None) -> int:
    """Render the demo scene to res/image<random>.png."""
    parser = argparse.ArgumentParser(description="Render the demo sphere scene.")
    parser.parse_args(argv)

    print(" \n Starting Code \n ")
    rng = RandomGenerator()
    img_path = f"res/image{rng.random_chars(4)}.png"

    camera = Camera.from_view(20.0, Vec3(13.0, 2.0, 3.0), Vec3(0.0, 0.0, 0.0))
    world = build_scene(rng)
    camera.render(world, img_path)

    print("Raytrace finished.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())