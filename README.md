# raytrace

A small Monte Carlo path tracer for scenes made of spheres. The demo scene has
a large ground sphere, many small spheres placed at random, and three large
feature spheres. A depth-of-field camera renders the scene and writes a PNG.

There are three materials. `Lambertian` is diffuse. `Metal` is reflective and
takes an optional fuzz value; a negative fuzz is raised to 0. `Dielectric` is
glass that either reflects or refracts.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Rendering the demo scene

```
raytrace
```

The command takes no options apart from `--help`. It renders a 512×288 image
with 50 samples per pixel and at most 10 bounces per ray. The camera sits at
(13, 2, 3), looks at the origin, has a 20° vertical field of view, a 3°
defocus angle and a focus distance of 10.

The image is written to `res/image<XXXX>.png`, where `<XXXX>` is four random
ASCII letters or digits. The `res` directory must already exist in the current
working directory, or saving the image fails.

The work is spread over one process per CPU core, and each worker gets an
equal band of `height // cores` rows. If the height does not divide evenly,
the leftover bottom rows stay black. Each worker prints its progress row by
row. The main process prints its progress as each band comes back, and at the
end it prints the total time, the pixel count and the pixels per millisecond.

## Using the library

```python
from raytrace.camera import Camera
from raytrace.sampling import RandomGenerator
from raytrace.scene import build_scene
from raytrace.vector import Vec3

if __name__ == "__main__":
    rng = RandomGenerator(seed=1)
    world = build_scene(rng)

    camera = Camera.from_view(20.0, Vec3(13.0, 2.0, 3.0), Vec3(0.0, 0.0, 0.0))
    image = camera.render(world, "out.png")  # also returns the PIL image
```

`Camera.render` starts worker processes, so keep the call under an
`if __name__ == "__main__":` guard.

You can build your own world:

```python
from raytrace.hittable import HittableList, Sphere
from raytrace.material import Dielectric, Lambertian, Metal
from raytrace.vector import Vec3

world = HittableList()
world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))))
world.add(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(Vec3(1.0, 1.0, 1.0), 1.5)))
world.add(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
```

The lower-level pieces:

- `raytrace.vector`: the immutable `Vec3` (with `+`, `-`, `*`, `/`, `dot`,
  `cross`, `reflect`, `refract`, `unit_vector`, …), `Ray` with `at(t)`, and
  `linear_to_gamma`.
- `raytrace.sampling`: `RandomGenerator`, which takes an optional seed and
  draws random floats, vectors, unit-sphere and unit-disk samples, and
  alphanumeric strings.
- `raytrace.hittable`: `Interval`, `HitRecord`, the abstract `Hittable`,
  `Sphere` and `HittableList`. `hit(ray, interval)` returns the nearest
  `HitRecord`, or `None` if the ray misses.
- `raytrace.material`: `Material.scatter(ray_in, rec, rng)` returns a
  `(scattered_ray, attenuation)` pair, or `None` when the ray is absorbed.
- `raytrace.camera`: `Camera.from_view`, `get_ray`, `ray_color`,
  `render_rows(world, start_row, end_row)` and `render`. `render_rows` returns
  `(x, y, colour)` triples holding the averaged linear colour of each pixel.
  `color_to_rgb` turns a linear colour into a gamma-corrected 8-bit RGB
  triple.

## Limitations

- Image size, sample count, bounce depth and lens settings are fixed inside
  `Camera.from_view`. Neither the command nor the constructor can change them.
- The renderer knows only spheres and these three materials. Scenes are
  built in Python; there is no scene-file format.
- Worker processes use their own unseeded random generators. A seed passed to
  `RandomGenerator` therefore fixes the scene layout but not the rendered
  pixels.

## Conventions

The y axis points up and the x axis points right. The camera looks along the
negative z axis of its own frame.