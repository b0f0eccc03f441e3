"""Random sampling helpers used by the renderer."""

from __future__ import annotations

import math
import random
import string

from raytrace.vector import Vec3

_ALPHANUMERIC = string.ascii_letters + string.digits


class RandomGenerator:
    """A source of random numbers, vectors and identifiers."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def random_float(self) -> float:
        return self.random_float_range(0.0, 1.0)

    def random_float_range(self, min_value: float, max_value: float) -> float:
        """Return a uniform sample in the half-open range [min_value, max_value)."""
        if not (math.isfinite(min_value) and math.isfinite(max_value)):
            raise ValueError("range bounds must be finite")
        if not min_value < max_value:
            raise ValueError(f"empty range: [{min_value}, {max_value})")
        value = min_value + (max_value - min_value) * self._rng.random()
        if value >= max_value:
            value = math.nextafter(max_value, -math.inf)
        return value

    def random_vec3_range(self, min_value: float, max_value: float) -> Vec3:
        return Vec3(
            self.random_float_range(min_value, max_value),
            self.random_float_range(min_value, max_value),
            self.random_float_range(min_value, max_value),
        )

    def random_vec3_square(self) -> Vec3:
        """A random offset in the unit square centred on the origin, z = 0."""
        return Vec3(
            self.random_float_range(-0.5, 0.5),
            self.random_float_range(-0.5, 0.5),
            0.0,
        )

    def random_unit_vector_on_sphere(self) -> Vec3:
        while True:
            vec = self.random_vec3_range(-1.0, 1.0)
            len_sq = vec.length_squared()
            if 1e-160 < len_sq < 1.0:
                return vec / math.sqrt(len_sq)

    def random_on_disk(self) -> Vec3:
        """A random point inside the unit disk in the xy plane."""
        while True:
            v = self.random_vec3_range(-1.0, 1.0)
            p = Vec3(v.x, v.y, 0.0)
            if p.length_squared() < 1.0:
                return p

    def random_chars(self, length: int) -> str:
        """A random string of ASCII letters and digits."""
        if length < 0:
            raise ValueError("length must not be negative")
        return "".join(self._rng.choices(_ALPHANUMERIC, k=length))