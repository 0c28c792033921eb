"""Scene description: shapes, lights and the selection state used by the controls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from minirt.camera import Camera
from minirt.vec3 import Vec3

EPSILON = 1.0e-4
FLT_MAX = 3.402823466e38
SHININESS = 10.0
SPEC_STRENGTH = 0.3


class ObjectType(Enum):
    SPHERE = auto()
    PLANE = auto()
    CYLINDER = auto()
    CONE = auto()
    UNKNOWN = auto()


@dataclass
class Sphere:
    origin: Vec3
    radius: float
    color: Vec3
    bump: bool = False

    @property
    def squared_radius(self) -> float:
        return self.radius * self.radius


@dataclass
class Plane:
    origin: Vec3
    normal: Vec3
    color: Vec3
    forward: Vec3 = Vec3(0.0, 0.0, 1.0)
    right: Vec3 = Vec3(1.0, 0.0, 0.0)
    up: Vec3 = Vec3(0.0, 1.0, 0.0)
    checkerboard: bool = False


@dataclass
class Cylinder:
    pos: Vec3
    orientation: Vec3
    diameter: float
    height: float
    color: Vec3
    forward: Vec3 = Vec3(0.0, 0.0, 1.0)
    right: Vec3 = Vec3(1.0, 0.0, 0.0)
    up: Vec3 = Vec3(0.0, 1.0, 0.0)

    @property
    def radius(self) -> float:
        return self.diameter / 2


Shape = Union[Sphere, Plane, Cylinder]


@dataclass
class Light:
    origin: Vec3
    brightness: float
    color: Vec3
    check: bool = False


@dataclass
class AmbientLight:
    ratio: float = 0.0
    color: Vec3 = Vec3()


@dataclass(eq=False)
class SceneObject:
    """A shape in the scene together with its kind."""

    type: ObjectType
    data: Shape

    def color(self) -> Vec3:
        """Base colour of the shape."""
        return self.data.color


@dataclass
class Scene:
    """Everything needed to render a frame and to drive interactive edits."""

    bg_color: Vec3 = Vec3()
    ambient: AmbientLight = field(default_factory=AmbientLight)
    camera: Camera = field(default_factory=Camera)
    lights: list[Light] = field(default_factory=list)
    objects: list[SceneObject] = field(default_factory=list)
    ambient_count: int = 0
    camera_count: int = 0
    light_count: int = 0
    object_index: int = 0
    light_index: int = 0
    on_object: bool = False
    on_light: bool = False
    selection_name: str = "Camera"

    def current_object(self) -> SceneObject | None:
        """The selected object, or None when there is none."""
        if 0 <= self.object_index < len(self.objects):
            return self.objects[self.object_index]
        return None

    def current_light(self) -> Light | None:
        """The selected light, or None when there is none."""
        if 0 <= self.light_index < len(self.lights):
            return self.lights[self.light_index]
        return None