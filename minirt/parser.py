"""Reading a whole scene description from lines or from an .rt file."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable

from minirt.elements import parse_ambient, parse_camera, parse_light
from minirt.errors import ERR_NAME, ERR_OPEN, ERR_READ, ERR_WRONG_ID, SceneError
from minirt.numbers import skip_spaces
from minirt.scene import Scene
from minirt.shape_parsing import parse_cylinder, parse_plane, parse_sphere

_SPACES = frozenset(" \t\n\v\f\r")

_HANDLERS: tuple[tuple[str, Callable[[Scene, str, int], object]], ...] = (
    ("A", parse_ambient),
    ("C", parse_camera),
    ("L", parse_light),
    ("sp", parse_sphere),
    ("pl", parse_plane),
    ("cy", parse_cylinder),
)


def parse_line(scene: Scene, line: str) -> object | None:
    """Parse one line into scene; blank lines are ignored and return None."""
    start = skip_spaces(line, 0)
    if start >= len(line):
        return None
    for ident, handler in _HANDLERS:
        end = start + len(ident)
        if line.startswith(ident, start) and end < len(line) and line[end] in _SPACES:
            return handler(scene, line, end)
    raise SceneError(ERR_WRONG_ID)


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a description; no lines at all is an error."""
    scene = Scene()
    seen = False
    for line in lines:
        seen = True
        parse_line(scene, line)
    if not seen:
        raise SceneError(ERR_READ)
    scene.object_index = 0
    scene.light_index = 0
    return scene


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and parse a scene file whose name ends with '.rt'."""
    name = os.fspath(path)
    if not str(name).endswith(".rt"):
        raise SceneError(ERR_NAME)
    try:
        with open(name, encoding="utf-8", errors="replace") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise SceneError(ERR_OPEN) from exc
    return parse_scene(lines)