"""Camera model and the parallel renderer."""

from __future__ import annotations

import math
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass

from PIL import Image

from raytrace.hittable import Hittable, Interval
from raytrace.sampling import RandomGenerator
from raytrace.vector import Ray, Vec3, linear_to_gamma

_INTENSITY = Interval(0.0, 0.99999)
_BLACK = Vec3(0.0, 0.0, 0.0)
_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY = Vec3(0.5 - 0.1, 0.7 - 0.1, 1.0)


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def color_to_rgb(color: Vec3) -> tuple[int, int, int]:
    """Gamma-correct a linear colour and quantise it to 8-bit channels."""
    return tuple(  # type: ignore[return-value]
        int(256.0 * _INTENSITY.clamp(linear_to_gamma(channel))) for channel in color
    )


@dataclass(frozen=True)
class Camera:
    """A thin-lens camera looking into a scene."""

    max_depth: int
    img_width: int
    img_height: int
    samples_per_pixel: int
    pixel_sample_scale: float
    camera_center: Vec3
    pixel_delta_u: Vec3
    pixel_delta_v: Vec3
    first_pixel_loc: Vec3
    defocus_angle: float
    defocus_disk_u: Vec3
    defocus_disk_v: Vec3

    @staticmethod
    def from_view(fov: float, look_from: Vec3, look_at: Vec3) -> Camera:
        """Build a camera at look_from aimed at look_at with a vertical field of view in degrees."""
        max_depth = 10
        vup = Vec3(0.0, 1.0, 0.0)

        defocus_angle = 3.0
        focus_dist = 10.0

        aspect_ratio = 16.0 / 9.0
        img_width = 512
        img_height = int(max(img_width / aspect_ratio, 1.0))

        samples_per_pixel = 50
        pixel_sample_scale = 1.0 / samples_per_pixel

        camera_center = look_from

        theta = math.radians(fov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h * focus_dist
        viewport_width = viewport_height * (img_width / img_height)

        w = (look_from - look_at).unit_vector()
        u = vup.cross(w).unit_vector()
        v = w.cross(u)

        viewport_u = u * viewport_width
        viewport_v = v * -viewport_height

        pixel_delta_u = viewport_u / img_width
        pixel_delta_v = viewport_v / img_height

        viewport_top_left = (
            camera_center - w * focus_dist - viewport_u / 2.0 - viewport_v / 2.0
        )
        first_pixel_loc = viewport_top_left + (pixel_delta_u / 2.0 + pixel_delta_v / 2.0) * 0.5

        defocus_rad = focus_dist * math.tan(math.radians(defocus_angle / 2.0))

        return Camera(
            max_depth=max_depth,
            img_width=img_width,
            img_height=img_height,
            samples_per_pixel=samples_per_pixel,
            pixel_sample_scale=pixel_sample_scale,
            camera_center=camera_center,
            pixel_delta_u=pixel_delta_u,
            pixel_delta_v=pixel_delta_v,
            first_pixel_loc=first_pixel_loc,
            defocus_angle=defocus_angle,
            defocus_disk_u=u * defocus_rad,
            defocus_disk_v=v * defocus_rad,
        )

    def get_ray(self, i: float, j: float, rng: RandomGenerator) -> Ray:
        """A ray through a random point of pixel (i, j)."""
        offset = rng.random_vec3_square()
        pixel_sample = (
            self.first_pixel_loc
            + self.pixel_delta_u * (i + offset.x)
            + self.pixel_delta_v * (j + offset.y)
        )
        origin = self.camera_center if self.defocus_angle <= 0.0 else self.defocus_disk_sample(rng)
        return Ray(origin, pixel_sample - origin)

    def defocus_disk_sample(self, rng: RandomGenerator) -> Vec3:
        """A random point on the camera's defocus disk."""
        p = rng.random_on_disk()
        return self.camera_center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def ray_color(self, ray: Ray, world: Hittable, depth: int, rng: RandomGenerator) -> Vec3:
        """The light gathered along a ray, following at most depth bounces."""
        if depth <= 0:
            return _BLACK

        rec = world.hit(ray, Interval(0.001, float("inf")))
        if rec is not None:
            result = rec.material.scatter(ray, rec, rng)
            if result is None:
                return _BLACK
            scattered, attenuation = result
            return self.ray_color(scattered, world, depth - 1, rng) * attenuation

        unit = ray.direction.unit_vector()
        a = 0.8 * (unit.y + 1.0)
        return _WHITE * (1.0 - a) + _SKY * a

    def render_rows(
        self, world: Hittable, start_row: int, end_row: int
    ) -> list[tuple[int, int, Vec3]]:
        """Render rows [start_row, end_row) as (x, y, colour) triples in row-major order."""
        rng = RandomGenerator()
        total = end_row - start_row
        section: list[tuple[int, int, Vec3]] = []
        for y in range(start_row, end_row):
            done = y - start_row
            percent = _round_half_away(done / total * 100.0)
            print(
                f"[ROWS {start_row}-{end_row}] Rendering {percent}% done "
                f"(line {done} of {total})"
            )
            for x in range(self.img_width):
                pixel_color = _BLACK
                for _ in range(self.samples_per_pixel):
                    ray = self.get_ray(float(x), float(y), rng)
                    pixel_color = pixel_color + self.ray_color(ray, world, self.max_depth, rng)
                section.append((x, y, pixel_color * self.pixel_sample_scale))
        return section

    def render(self, world: Hittable, img_path: str) -> Image.Image:
        """Render the world across all cores, save it to img_path and return the image."""
        print("\nRunning Parallel Raytrace... \n")
        started = time.monotonic()

        num_cores = os.cpu_count() or 1
        rows_per_worker = self.img_height // num_cores
        print(f"\nUsing {num_cores} cores\n")

        image = Image.new("RGB", (self.img_width, self.img_height))
        pixels = image.load()

        with ProcessPoolExecutor(max_workers=num_cores) as pool:
            futures = [
                pool.submit(
                    self.render_rows,
                    world,
                    worker * rows_per_worker,
                    (worker + 1) * rows_per_worker,
                )
                for worker in range(num_cores)
            ]
            for received, future in enumerate(as_completed(futures), start=1):
                for x, y, color in future.result():
                    pixels[x, y] = color_to_rgb(color)
                percent = _round_half_away(received / num_cores * 100.0)
                print(f"[MAIN] Writing Section: {percent}% done ({received} of {num_cores})")

        image.save(img_path)
        print(f"\nImage saved to {img_path}")

        elapsed = time.monotonic() - started
        total_pixels = self.img_width * self.img_height
        millis = max(int(elapsed * 1000), 1)
        print(
            f"\nRender Stats: \n - Total render time: {int(elapsed)} sec \n"
            f" - Total Pixels Calculated: {total_pixels} \n"
            f" - Average px/ms: {total_pixels // millis} \n"
        )
        return image