"""Keyboard controls for moving the camera, the light and the scene's shapes."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import IntEnum

from minirt.renderer import Image, render
from minirt.rotation import rotate_plane, rotate_vec3, rotate_x, rotate_z
from minirt.scene import Cylinder, ObjectType, Plane, Scene, Sphere
from minirt.vec3 import Vec3

SPEED = 1.0
ROTATE_SPEED = 9.0
_PLANE_ROTATION = 9.0
_CYLINDER_ROTATION = math.radians(9.0)


class Key(IntEnum):
    """Keyboard keys the controls react to."""

    A = 65
    D = 68
    L = 76
    O = 79  # noqa: E741
    Q = 81
    S = 83
    W = 87
    Z = 90
    ESCAPE = 256
    TAB = 258
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


class Action(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class QuitRequested(Exception):
    """Raised when the user asks to leave the program."""


_OBJECT_NAMES = {
    ObjectType.SPHERE: "Sphere",
    ObjectType.PLANE: "Plane",
    ObjectType.CYLINDER: "Cylinder",
}
_OBJECT_NAMES_WITH_CONE = {**_OBJECT_NAMES, ObjectType.CONE: "Cone"}

_AXIS_STEPS = {
    Key.W: Vec3(0.0, 1.0, 0.0),
    Key.S: Vec3(0.0, -1.0, 0.0),
    Key.A: Vec3(1.0, 0.0, 0.0),
    Key.D: Vec3(-1.0, 0.0, 0.0),
    Key.Q: Vec3(0.0, 0.0, -1.0),
    Key.Z: Vec3(0.0, 0.0, 1.0),
}


def _object_name(scene: Scene, names: dict[ObjectType, str]) -> str:
    obj = scene.current_object()
    return names.get(obj.type, "") if obj is not None else ""


def camera_moves(scene: Scene, key: int, action: int) -> bool:
    """Move or rotate the camera, or switch to object or light editing."""
    if action != Action.PRESS:
        return False
    camera = scene.camera
    if key == Key.O:
        if scene.current_object() is None:
            return False
        scene.on_object = True
        scene.selection_name = _object_name(scene, _OBJECT_NAMES)
        return True
    if key == Key.L:
        scene.on_light = True
        scene.selection_name = "Light"
        return True
    rotations = {
        Key.UP: (-ROTATE_SPEED, camera.right, "x"),
        Key.DOWN: (ROTATE_SPEED, camera.right, "x"),
        Key.RIGHT: (-ROTATE_SPEED, camera.up, "y"),
        Key.LEFT: (ROTATE_SPEED, camera.up, "y"),
    }
    if key in rotations:
        angle, axis, axe = rotations[key]
        camera.axe = axe
        camera.direction = rotate_vec3(camera.direction, axis, angle)
        return True
    steps = {
        Key.W: camera.up * -SPEED,
        Key.S: camera.up * SPEED,
        Key.A: camera.right * -SPEED,
        Key.D: camera.right * SPEED,
        Key.Q: camera.forward * SPEED,
        Key.Z: camera.forward * -SPEED,
    }
    if key in steps:
        camera.origin = camera.origin + steps[key]
        return True
    return False


def light_moves(scene: Scene, key: int, action: int) -> bool:
    """Move or cycle the selected light, or switch to object or camera editing."""
    if action != Action.PRESS:
        return False
    light = scene.current_light()
    if light is None:
        return False
    if key == Key.O:
        if scene.current_object() is None:
            return False
        scene.on_object = True
        scene.on_light = False
        scene.selection_name = _object_name(scene, _OBJECT_NAMES_WITH_CONE)
    elif key == Key.L:
        scene.on_light = False
        scene.selection_name = "Camera"
    elif key == Key.TAB:
        scene.light_index = (scene.light_index + 1) % len(scene.lights)
        light = scene.lights[scene.light_index]
    elif key in _AXIS_STEPS:
        light.origin = light.origin + _AXIS_STEPS[key]
    else:
        return False
    light.check = False
    return True


def select_light(scene: Scene) -> bool:
    """Leave object editing and edit the light."""
    scene.on_object = False
    scene.on_light = True
    scene.selection_name = "Light"
    return True


def select_camera(scene: Scene) -> bool:
    """Leave object editing and edit the camera."""
    scene.on_object = False
    scene.selection_name = "Camera"
    return True


def _next_object(scene: Scene) -> None:
    scene.object_index = (scene.object_index + 1) % len(scene.objects)
    scene.selection_name = _object_name(scene, _OBJECT_NAMES)


def _move_plane(plane: Plane, key: int) -> bool:
    rotations = {
        Key.UP: (-_PLANE_ROTATION, plane.right),
        Key.DOWN: (_PLANE_ROTATION, plane.right),
        Key.RIGHT: (-_PLANE_ROTATION, plane.up),
        Key.LEFT: (_PLANE_ROTATION, plane.up),
    }
    if key in rotations:
        angle, axis = rotations[key]
        rotate_plane(plane, angle, axis)
        return True
    step = _AXIS_STEPS.get(key)
    if step is None:
        return False
    plane.origin = plane.origin + step
    return True


def _move_sphere(sphere: Sphere, key: int) -> bool:
    step = _AXIS_STEPS.get(key)
    if step is None:
        return False
    sphere.origin = sphere.origin + step
    return True


def _move_cylinder(cylinder: Cylinder, key: int) -> bool:
    rotations: dict[int, tuple[Callable[[Vec3, float], Vec3], float]] = {
        Key.UP: (rotate_x, _CYLINDER_ROTATION),
        Key.DOWN: (rotate_x, -_CYLINDER_ROTATION),
        Key.RIGHT: (rotate_z, _CYLINDER_ROTATION),
        Key.LEFT: (rotate_z, -_CYLINDER_ROTATION),
    }
    if key in rotations:
        rotate, angle = rotations[key]
        cylinder.orientation = rotate(cylinder.orientation, angle)
        return True
    step = _AXIS_STEPS.get(key)
    if step is None:
        return False
    cylinder.pos = cylinder.pos + step
    return True


def object_moves(scene: Scene, key: int, action: int) -> bool:
    """Move, rotate or cycle the selected object, or switch to light or camera."""
    if action != Action.PRESS:
        return False
    if key == Key.L:
        return select_light(scene)
    if key == Key.O:
        return select_camera(scene)
    obj = scene.current_object()
    if obj is None:
        return False
    if key == Key.TAB:
        _next_object(scene)
        return True
    if obj.type is ObjectType.PLANE:
        return _move_plane(obj.data, key)
    if obj.type is ObjectType.SPHERE:
        return _move_sphere(obj.data, key)
    if obj.type is ObjectType.CYLINDER:
        return _move_cylinder(obj.data, key)
    return False


def handle_key(scene: Scene, key: int, action: int) -> bool:
    """Dispatch a key event; True when the frame must be rendered again."""
    if key == Key.ESCAPE and action == Action.PRESS:
        raise QuitRequested()
    if not scene.on_object and not scene.on_light:
        return camera_moves(scene, key, action)
    if scene.on_light:
        return light_moves(scene, key, action)
    return object_moves(scene, key, action)


def resize(scene: Scene, width: int, height: int) -> Image:
    """Adopt a new window size and render the frame again."""
    scene.camera.win_size = (float(width), float(height))
    return render(scene)