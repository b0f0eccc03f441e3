"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytrace.vector import Ray, Vec3

if TYPE_CHECKING:
    from raytrace.hittable import HitRecord
    from raytrace.sampling import RandomGenerator


class Material(ABC):
    """A surface's response to an incoming ray."""

    @abstractmethod
    def scatter(
        self, ray_in: Ray, rec: HitRecord, rng: RandomGenerator
    ) -> tuple[Ray, Vec3] | None:
        """Return the scattered ray and its attenuation, or None if absorbed."""


@dataclass(frozen=True)
class Lambertian(Material):
    """A diffuse surface."""

    albedo: Vec3

    def scatter(
        self, ray_in: Ray, rec: HitRecord, rng: RandomGenerator
    ) -> tuple[Ray, Vec3] | None:
        direction = rec.normal + rng.random_unit_vector_on_sphere()
        if direction.near_zero():
            direction = rec.normal
        return Ray(rec.point, direction), self.albedo


@dataclass
class Metal(Material):
    """A reflective surface; fuzz blurs the reflection and is never negative."""

    albedo: Vec3
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        self.fuzz = max(self.fuzz, 0.0)

    def scatter(
        self, ray_in: Ray, rec: HitRecord, rng: RandomGenerator
    ) -> tuple[Ray, Vec3] | None:
        reflected = ray_in.direction.reflect(rec.normal).unit_vector()
        reflected = reflected + rng.random_unit_vector_on_sphere() * self.fuzz
        scattered = Ray(rec.point, reflected)
        if scattered.direction.dot(rec.normal) > 0.0:
            return scattered, self.albedo
        return None


@dataclass(frozen=True)
class Dielectric(Material):
    """A transparent surface that reflects or refracts."""

    albedo: Vec3
    refractive_index: float

    def reflectance(self, cosine: float, refractive_index: float) -> float:
        """Schlick's approximation of reflectance."""
        r0 = ((1.0 - refractive_index) / (1.0 + self.refractive_index)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cosine) ** 5

    def scatter(
        self, ray_in: Ray, rec: HitRecord, rng: RandomGenerator
    ) -> tuple[Ray, Vec3] | None:
        ri = 1.0 / self.refractive_index if rec.front_face else self.refractive_index
        unit_direction = -ray_in.direction.unit_vector()

        cos_theta = min(unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ri) > rng.random_float_range(0.0, 1.0):
            direction = unit_direction.reflect(rec.normal)
        else:
            direction = unit_direction.refract(rec.normal, ri)
        return Ray(rec.point, direction), Vec3(1.0, 1.0, 1.0)