"""Ray intersection, surface normals and light containment for every shape."""

from __future__ import annotations

import math
from collections.abc import Iterable

from minirt.camera import HitPoint, Ray
from minirt.scene import (
    EPSILON,
    FLT_MAX,
    Cylinder,
    Light,
    ObjectType,
    Plane,
    SceneObject,
    Sphere,
)
from minirt.vec3 import Vec3

CORE_HIT = 0
BOTTOM_CAP_HIT = 1
TOP_CAP_HIT = 2


def hit_sphere(ray: Ray, sphere: Sphere, obj: SceneObject | None) -> HitPoint:
    """Nearest intersection of ray with sphere in front of the origin, or a miss."""
    oc = ray.origin - sphere.origin
    b = -2.0 * oc.dot(ray.direction)
    c = -4.0 * (oc.dot(oc) - sphere.squared_radius)
    discriminant = b * b + c
    if discriminant < 0:
        return HitPoint()
    t = (b - math.sqrt(discriminant)) * 0.5
    if t > EPSILON:
        return HitPoint(ray, t, ray.at(t), obj, CORE_HIT)
    return HitPoint()


def sphere_normal(hit: HitPoint) -> Vec3:
    """Outward unit normal of a sphere at the hit point."""
    return (hit.point - hit.obj.data.origin).normalize()


def light_in_sphere(light: Light, sphere: Sphere) -> bool:
    """True when the light lies strictly inside the sphere."""
    return (light.origin - sphere.origin).squared_length() < sphere.squared_radius


def hit_plane(ray: Ray, plane: Plane, obj: SceneObject | None) -> HitPoint:
    """Intersection of ray with the plane, or a miss."""
    nom = -(ray.origin - plane.origin).dot(plane.normal)
    if nom == 0:
        return HitPoint()
    denom = ray.direction.dot(plane.normal)
    if denom == 0:
        return HitPoint()
    t = nom / denom
    if t < EPSILON:
        return HitPoint()
    return HitPoint(ray, t, ray.at(t), obj, CORE_HIT)


def plane_normal(hit: HitPoint) -> Vec3:
    """Normal of the plane that was hit."""
    return hit.obj.data.normal


def light_in_plane(light: Light, plane: Plane) -> bool:
    """True when the light lies exactly on the plane."""
    return (light.origin - plane.origin).dot(plane.normal) == 0.0


def _quadratic_coefficients(ray: Ray, cyl: Cylinder) -> tuple[float, float, float]:
    axis = cyl.orientation
    oc = ray.origin - cyl.pos
    d = ray.direction - axis * ray.direction.dot(axis)
    delta_p = oc - axis * oc.dot(axis)
    return (
        d.dot(d),
        2.0 * d.dot(delta_p),
        delta_p.dot(delta_p) - cyl.radius * cyl.radius,
    )


def _hit_core(a: float, b: float, root: float, cyl: Cylinder, ray: Ray) -> float | None:
    if a == 0:
        return None
    t = min((-b - root) / (2.0 * a), (-b + root) / (2.0 * a))
    if t < EPSILON:
        return None
    proj_len = (ray.at(t) - cyl.pos).dot(cyl.orientation)
    if 0.0 <= proj_len <= cyl.height:
        return t
    return None


def _hit_cap(cyl: Cylinder, ray: Ray, bottom: bool) -> float | None:
    cap_center = cyl.pos if bottom else cyl.pos + cyl.orientation * cyl.height
    denom = ray.direction.dot(cyl.orientation)
    if abs(denom) < EPSILON:
        return None
    t = (cap_center - ray.origin).dot(cyl.orientation) / denom
    if t < EPSILON:
        return None
    diff = ray.at(t) - cap_center
    if diff.dot(diff) <= cyl.radius * cyl.radius:
        return t
    return None


def hit_cylinder(ray: Ray, cylinder: Cylinder, obj: SceneObject | None) -> HitPoint:
    """Nearest intersection with the cylinder's side or caps, or a miss."""
    best = HitPoint()
    a, b, c = _quadratic_coefficients(ray, cylinder)
    discriminant = b * b - 4 * a * c
    if discriminant >= 0.0:
        t = _hit_core(a, b, math.sqrt(discriminant), cylinder, ray)
        if t is not None:
            best = HitPoint(ray, t, ray.at(t), obj, CORE_HIT)
    for bottom, hit_type in ((False, TOP_CAP_HIT), (True, BOTTOM_CAP_HIT)):
        t = _hit_cap(cylinder, ray, bottom)
        if t is not None and (best.t < 0 or t < best.t):
            best = HitPoint(ray, t, ray.at(t), obj, hit_type)
    return best


def cylinder_normal(hit: HitPoint) -> Vec3:
    """Normal of the cylinder at the hit point, taking caps into account."""
    cyl = hit.obj.data
    if hit.hit_type == BOTTOM_CAP_HIT:
        return -cyl.orientation
    if hit.hit_type == TOP_CAP_HIT:
        return cyl.orientation
    h = (hit.point - cyl.pos).dot(cyl.orientation)
    axis_point = cyl.pos + cyl.orientation * h
    return (hit.point - axis_point).normalize()


def light_in_cylinder(light: Light, cylinder: Cylinder) -> bool:
    """True when the light lies within the cylinder's volume."""
    scalar = (light.origin - cylinder.pos).dot(cylinder.orientation)
    projection = cylinder.pos + cylinder.orientation * scalar
    if (light.origin - projection).length() > cylinder.radius:
        return False
    h = (projection - cylinder.pos).dot(cylinder.orientation)
    return 0.0 <= h <= cylinder.height


def get_normal(hit: HitPoint) -> Vec3:
    """Surface normal at the hit point for any supported shape."""
    kind = hit.obj.type
    if kind is ObjectType.SPHERE:
        return sphere_normal(hit)
    if kind is ObjectType.PLANE:
        return plane_normal(hit)
    if kind is ObjectType.CYLINDER:
        return cylinder_normal(hit)
    return hit.point


def hit_object(ray: Ray, obj: SceneObject) -> HitPoint:
    """Intersect ray with a scene object of any kind."""
    if obj.type is ObjectType.SPHERE:
        return hit_sphere(ray, obj.data, obj)
    if obj.type is ObjectType.PLANE:
        return hit_plane(ray, obj.data, obj)
    if obj.type is ObjectType.CYLINDER:
        return hit_cylinder(ray, obj.data, obj)
    return HitPoint()


def closest_hit(
    ray: Ray,
    objects: Iterable[SceneObject],
    max_distance: float = FLT_MAX,
    ignore: SceneObject | None = None,
) -> HitPoint:
    """Closest hit nearer than max_distance, skipping ignore; a miss if none."""
    best = HitPoint(t=FLT_MAX)
    for obj in objects:
        hit = hit_object(ray, obj)
        if EPSILON < hit.t < max_distance and hit.t < best.t and hit.obj is not ignore:
            best = hit
    if best.t == FLT_MAX:
        return HitPoint()
    return best