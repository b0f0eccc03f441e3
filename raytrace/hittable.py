"""Intervals, hit records and ray-intersectable objects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from raytrace.vector import Ray, Vec3

if TYPE_CHECKING:
    from raytrace.material import Material


@dataclass(frozen=True, slots=True)
class Interval:
    """A range of ray parameters."""

    min: float
    max: float

    def surrounds(self, value: float) -> bool:
        """True when value lies strictly inside the interval."""
        return self.min < value < self.max

    def clamp(self, value: float) -> float:
        return max(self.min, min(value, self.max))


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    point: Vec3
    normal: Vec3
    t: float
    front_face: bool
    material: Material

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the ray and record which side was hit."""
        self.front_face = ray.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, interval: Interval) -> HitRecord | None:
        """Return the nearest hit with t inside the interval, or None."""


@dataclass
class Sphere(Hittable):
    center: Vec3
    radius: float
    material: Material

    def __post_init__(self) -> None:
        self.radius = max(self.radius, 0.0)

    def hit(self, ray: Ray, interval: Interval) -> HitRecord | None:
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        if a == 0.0:
            return None
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if not interval.surrounds(root):
            root = (h + sqrtd) / a
            if not interval.surrounds(root):
                return None

        point = ray.at(root)
        outward_normal = (point - self.center) / self.radius
        record = HitRecord(point, outward_normal, root, False, self.material)
        record.set_face_normal(ray, outward_normal)
        return record


@dataclass
class HittableList(Hittable):
    """A collection of objects; a hit is the closest hit among them."""

    objects: list[Hittable] = field(default_factory=list)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def extend(self, objs: Iterable[Hittable]) -> None:
        self.objects.extend(objs)

    def hit(self, ray: Ray, interval: Interval) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = interval.max
        for obj in self.objects:
            record = obj.hit(ray, Interval(interval.min, closest_so_far))
            if record is not None:
                closest = record
                closest_so_far = record.t
        return closest