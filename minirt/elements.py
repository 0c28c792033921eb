"""Parsing of the unique scene elements: ambient light, camera and light."""

from __future__ import annotations

from minirt.camera import WIN_HEIGHT, WIN_WIDTH, Camera
from minirt.errors import (
    ERR_AMBIENT_COUNT,
    ERR_CAMERA_ANGLE,
    ERR_CAMERA_COUNT,
    ERR_COLOR,
    ERR_LIGHT_COUNT,
    ERR_LIGHT_RATIO,
    ERR_ORIENTATION,
    ERR_TOO_LONG,
    SceneError,
)
from minirt.numbers import LineCursor, in_range, is_valid_direction
from minirt.scene import AmbientLight, Light, Scene
from minirt.vec3 import Vec3


def _read_ratio(cursor: LineCursor) -> float:
    ratio = cursor.read_float()
    if ratio > 1 or ratio < 0:
        raise SceneError(ERR_LIGHT_RATIO)
    return ratio


def _read_color(cursor: LineCursor) -> Vec3:
    color = cursor.read_vec3()
    if not in_range(color, 255, 0):
        raise SceneError(ERR_COLOR)
    return color / 255.0


def _finish(cursor: LineCursor) -> None:
    cursor.skip_spaces()
    if not cursor.at_end():
        raise SceneError(ERR_TOO_LONG)


def parse_ambient(scene: Scene, line: str, pos: int) -> AmbientLight:
    """Parse 'A <ratio> <r,g,b>' starting after the identifier at pos."""
    scene.ambient_count += 1
    if scene.ambient_count > 1:
        raise SceneError(ERR_AMBIENT_COUNT)
    cursor = LineCursor(line, pos)
    cursor.skip_spaces()
    ratio = _read_ratio(cursor)
    cursor.skip_spaces()
    color = _read_color(cursor)
    scene.ambient = AmbientLight(ratio, color)
    _finish(cursor)
    return scene.ambient


def parse_camera(scene: Scene, line: str, pos: int) -> Camera:
    """Parse 'C <x,y,z> <dx,dy,dz> <fov>' starting after the identifier at pos."""
    scene.camera_count += 1
    if scene.camera_count > 1:
        raise SceneError(ERR_CAMERA_COUNT)
    cursor = LineCursor(line, pos)
    cursor.skip_spaces()
    origin = cursor.read_vec3()
    cursor.skip_spaces()
    direction = cursor.read_vec3()
    if not in_range(direction, 1, -1) or not is_valid_direction(direction):
        raise SceneError(ERR_ORIENTATION)
    direction = direction.normalize()
    cursor.skip_spaces()
    fov = cursor.read_float()
    if fov > 180 or fov < 0:
        raise SceneError(ERR_CAMERA_ANGLE)
    scene.camera = Camera(
        origin=origin,
        direction=direction,
        fov=fov,
        win_size=(float(WIN_WIDTH), float(WIN_HEIGHT)),
    )
    _finish(cursor)
    return scene.camera


def parse_light(scene: Scene, line: str, pos: int) -> Light:
    """Parse 'L <x,y,z> <brightness> [r,g,b]' starting after the identifier at pos."""
    scene.light_count += 1
    if scene.light_count > 1:
        raise SceneError(ERR_LIGHT_COUNT)
    cursor = LineCursor(line, pos)
    cursor.skip_spaces()
    origin = cursor.read_vec3()
    cursor.skip_spaces()
    brightness = _read_ratio(cursor)
    cursor.skip_spaces()
    if cursor.at_end():
        color = Vec3(255.0, 255.0, 255.0)
    else:
        color = _read_color(cursor)
    light = Light(origin, brightness, color)
    scene.lights.append(light)
    _finish(cursor)
    return light