"""Ambient, diffuse and specular shading with hard shadows."""

from __future__ import annotations

from minirt.camera import HitPoint, Ray
from minirt.scene import EPSILON, SHININESS, SPEC_STRENGTH, Light, ObjectType, Scene
from minirt.shapes import (
    closest_hit,
    get_normal,
    light_in_cylinder,
    light_in_plane,
    light_in_sphere,
)
from minirt.vec3 import Vec3

_CONTAINMENT = {
    ObjectType.SPHERE: light_in_sphere,
    ObjectType.PLANE: light_in_plane,
    ObjectType.CYLINDER: light_in_cylinder,
}


def _light_in_object(scene: Scene, light: Light) -> bool:
    selected = scene.current_light()
    if selected is not None:
        selected.check = True
    for obj in scene.objects:
        inside = _CONTAINMENT.get(obj.type)
        if inside is not None and inside(light, obj.data):
            return True
    return False


def _final_color(color: Vec3, hit: HitPoint, light: Light, ray: Ray) -> Vec3:
    normal = get_normal(hit)
    reflected = ray.direction.reflect(normal).normalize()
    diffuse = max(0.0, abs(normal.dot(ray.direction))) * light.brightness
    specular = max(reflected.dot(hit.ray.direction), 0.0) ** SHININESS
    light_contrib = hit.obj.color() * (light.color * diffuse)
    spec_contrib = light.color * (specular * SPEC_STRENGTH)
    return color + (light_contrib + spec_contrib)


def _faces_away(hit: HitPoint, ray: Ray) -> bool:
    normal = get_normal(hit)
    a = normal.dot(hit.ray.direction)
    b = normal.dot(ray.direction)
    return (a < -EPSILON and b < -EPSILON) or (a > EPSILON and b > EPSILON)


def calc_light(scene: Scene, hit: HitPoint) -> Vec3:
    """Colour of the surface at hit, lit by the scene's first light."""
    light = scene.lights[0]
    color = hit.obj.color() * (scene.ambient.color * scene.ambient.ratio)
    if _light_in_object(scene, light):
        return color
    origin = hit.point + get_normal(hit) * EPSILON
    to_light = light.origin - origin
    distance = to_light.length()
    ray = Ray(origin, to_light.normalize())
    if _faces_away(hit, ray):
        return color
    blocker = closest_hit(ray, scene.objects, distance, hit.obj)
    if blocker.obj is None:
        color = _final_color(color, hit, light, ray)
    return color