import math

import pytest

from raytrace.hittable import HitRecord, HittableList, Interval, Sphere
from raytrace.material import Lambertian
from raytrace.vector import Ray, Vec3

MAT = Lambertian(Vec3(0.5, 0.5, 0.5))
EVERYTHING = Interval(0.001, math.inf)


def test_interval_surrounds_is_open():
    iv = Interval(0.0, 1.0)
    assert iv.surrounds(0.5)
    assert not iv.surrounds(0.0)
    assert not iv.surrounds(1.0)


def test_interval_clamp():
    iv = Interval(0.0, 1.0)
    assert iv.clamp(2.0) == 1.0
    assert iv.clamp(-1.0) == 0.0
    assert iv.clamp(0.3) == 0.3


def test_sphere_hit_from_outside():
    sphere = Sphere(Vec3(0, 0, -5), 1.0, MAT)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    rec = sphere.hit(ray, EVERYTHING)
    assert rec.t == pytest.approx(4.0)
    assert tuple(rec.point) == pytest.approx(tuple(ray.at(rec.t)))
    assert rec.front_face
    assert rec.normal.length() == pytest.approx(1.0)
    assert rec.normal.dot(ray.direction) < 0.0
    assert rec.material is MAT


def test_sphere_hit_from_inside():
    sphere = Sphere(Vec3(1, 2, 3), 2.0, MAT)
    ray = Ray(Vec3(1, 2, 3), Vec3(0, 1, 0))
    rec = sphere.hit(ray, EVERYTHING)
    assert rec.t == pytest.approx(2.0)
    assert not rec.front_face
    assert rec.normal.dot(ray.direction) < 0.0


def test_sphere_miss():
    sphere = Sphere(Vec3(0, 0, -5), 1.0, MAT)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 1, 0))
    assert sphere.hit(ray, EVERYTHING) is None


def test_sphere_hit_outside_interval():
    sphere = Sphere(Vec3(0, 0, -5), 1.0, MAT)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    assert sphere.hit(ray, Interval(0.001, 3.0)) is None


def test_sphere_far_root_used_when_near_excluded():
    sphere = Sphere(Vec3(0, 0, -5), 1.0, MAT)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    rec = sphere.hit(ray, Interval(4.5, math.inf))
    assert rec.t > 4.5
    assert (rec.point - sphere.center).length() == pytest.approx(sphere.radius)


def test_sphere_negative_radius_clamped():
    assert Sphere(Vec3(), -1.0, MAT).radius == 0.0


def test_zero_direction_ray_misses():
    sphere = Sphere(Vec3(0, 0, 0), 1.0, MAT)
    assert sphere.hit(Ray(Vec3(0, 0, 0), Vec3()), EVERYTHING) is None


@pytest.mark.parametrize("reverse", [False, True])
def test_list_returns_closest(reverse):
    near = Sphere(Vec3(0, 0, -5), 1.0, Lambertian(Vec3(1, 0, 0)))
    far = Sphere(Vec3(0, 0, -10), 1.0, Lambertian(Vec3(0, 1, 0)))
    world = HittableList()
    for obj in ([far, near] if reverse else [near, far]):
        world.add(obj)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    rec = world.hit(ray, EVERYTHING)
    assert rec.t == pytest.approx(near.hit(ray, EVERYTHING).t)
    assert rec.material is near.material
    assert len(world) == 2


def test_empty_list_misses():
    assert HittableList().hit(Ray(Vec3(), Vec3(0, 0, -1)), EVERYTHING) is None


def test_set_face_normal():
    outward = Vec3(0, 1, 0)
    rec = HitRecord(Vec3(), Vec3(), 1.0, False, MAT)
    rec.set_face_normal(Ray(Vec3(0, 5, 0), Vec3(0, -1, 0)), outward)
    assert rec.front_face and rec.normal == outward
    rec.set_face_normal(Ray(Vec3(0, -5, 0), Vec3(0, 1, 0)), outward)
    assert not rec.front_face and rec.normal == -outward