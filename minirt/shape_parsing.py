"""Parsing of the shape lines of a scene description: spheres, planes and cylinders."""

from __future__ import annotations

from minirt.errors import ERR_COLOR, ERR_DIAMETER, ERR_ORIENTATION, ERR_TOO_LONG, SceneError
from minirt.numbers import LineCursor, in_range, is_valid_direction
from minirt.scene import Cylinder, ObjectType, Plane, Scene, SceneObject, Shape, Sphere
from minirt.vec3 import Vec3


def _read_color(cursor: LineCursor) -> Vec3:
    color = cursor.read_vec3()
    if not in_range(color, 255, 0):
        raise SceneError(ERR_COLOR)
    return color / 255.0


def _read_direction(cursor: LineCursor) -> Vec3:
    direction = cursor.read_vec3()
    if not in_range(direction, 1, -1) or not is_valid_direction(direction):
        raise SceneError(ERR_ORIENTATION)
    return direction.normalize()


def _read_positive(cursor: LineCursor) -> float:
    value = cursor.read_float()
    if value <= 0:
        raise SceneError(ERR_DIAMETER)
    return value


def _add(scene: Scene, cursor: LineCursor, kind: ObjectType, shape: Shape) -> SceneObject:
    obj = SceneObject(kind, shape)
    scene.objects.append(obj)
    cursor.skip_spaces()
    if not cursor.at_end():
        raise SceneError(ERR_TOO_LONG)
    return obj


def parse_sphere(scene: Scene, line: str, pos: int) -> SceneObject:
    """Parse 'sp <x,y,z> <diameter> <r,g,b>' starting after the identifier at pos."""
    cursor = LineCursor(line, pos)
    cursor.skip_spaces()
    origin = cursor.read_vec3()
    cursor.skip_spaces()
    diameter = _read_positive(cursor)
    cursor.skip_spaces()
    color = _read_color(cursor)
    return _add(scene, cursor, ObjectType.SPHERE, Sphere(origin, diameter / 2, color))


def parse_plane(scene: Scene, line: str, pos: int) -> SceneObject:
    """Parse 'pl <x,y,z> <nx,ny,nz> <r,g,b>' starting after the identifier at pos."""
    cursor = LineCursor(line, pos)
    cursor.skip_spaces()
    origin = cursor.read_vec3()
    cursor.skip_spaces()
    normal = _read_direction(cursor)
    cursor.skip_spaces()
    color = _read_color(cursor)
    return _add(scene, cursor, ObjectType.PLANE, Plane(origin, normal, color))


def parse_cylinder(scene: Scene, line: str, pos: int) -> SceneObject:
    """Parse 'cy <x,y,z> <ax,ay,az> <diameter> <height> <r,g,b>' after the identifier."""
    cursor = LineCursor(line, pos)
    cursor.skip_spaces()
    base = cursor.read_vec3()
    cursor.skip_spaces()
    orientation = _read_direction(cursor)
    cursor.skip_spaces()
    diameter = _read_positive(cursor)
    cursor.skip_spaces()
    height = _read_positive(cursor)
    cursor.skip_spaces()
    color = _read_color(cursor)
    cylinder = Cylinder(base, orientation, diameter, height, color)
    return _add(scene, cursor, ObjectType.CYLINDER, cylinder)