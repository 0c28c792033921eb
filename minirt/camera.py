"""Camera, rays and hit records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from minirt.vec3 import Vec3

if TYPE_CHECKING:
    from minirt.scene import SceneObject

WIN_WIDTH = 1920
WIN_HEIGHT = 1080


@dataclass
class Ray:
    """A half-line starting at origin in the given direction."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Point reached after travelling t along the ray."""
        return self.origin + self.direction * t


@dataclass
class HitPoint:
    """Intersection record; the defaults describe a miss."""

    ray: Ray | None = None
    t: float = -1.0
    point: Vec3 = Vec3()
    obj: SceneObject | None = None
    hit_type: int = 0


@dataclass
class Camera:
    """Pinhole camera; fov is given in degrees and converted on first setup."""

    origin: Vec3 = Vec3()
    direction: Vec3 = Vec3(0.0, 0.0, 1.0)
    fov: float = 0.0
    win_size: tuple[float, float] = (float(WIN_WIDTH), float(WIN_HEIGHT))
    axe: str = ""
    forward: Vec3 = Vec3()
    right: Vec3 = Vec3()
    up: Vec3 = Vec3()
    center: Vec3 = Vec3()
    u: Vec3 = Vec3()
    v: Vec3 = Vec3()
    lower_left_corner: Vec3 = Vec3()
    width: float = 0.0
    height: float = 0.0
    aspect_ratio: float = 0.0
    _initialized: bool = field(default=False, init=False, repr=False)

    def _init_basis(self) -> None:
        self.fov = math.radians(self.fov)
        self.forward = self.direction.normalize()
        if -0.9 < self.direction.y < 0.9:
            self.right = Vec3(0.0, 1.0, 0.0).cross(self.forward).normalize()
            self.up = self.right.cross(self.forward).normalize()
        else:
            self.up = Vec3(1.0, 0.0, 0.0).cross(self.forward).normalize()
            self.right = self.up.cross(self.forward).normalize()
        self._initialized = True

    def set_projection_plane(self) -> None:
        """Recompute the camera basis and the projection plane."""
        self.direction = self.direction.normalize()
        self.aspect_ratio = self.win_size[0] / self.win_size[1]
        if not self._initialized:
            self._init_basis()
        self.width = 2.0 * math.tan(self.fov * 0.5)
        self.height = self.width / self.aspect_ratio
        if self.axe == "x":
            self.forward = self.direction
            self.up = self.right.cross(self.forward).normalize()
        elif self.axe == "y":
            self.forward = self.direction
            self.right = self.forward.cross(self.up).normalize()
        self.axe = ""
        self.center = self.origin + self.forward
        self.u = self.right * (self.width * 0.5)
        self.v = self.up * (self.height * 0.5)
        self.lower_left_corner = self.center - self.u - self.v

    def generate_ray(self, px: float, py: float) -> Ray:
        """Primary ray through pixel (px, py)."""
        x = (px / self.win_size[0]) * 2 - 1
        y = (py / self.win_size[1]) * 2 - 1
        target = self.center + (self.u * x + self.v * y)
        return Ray(self.origin, (target - self.origin).normalize())