"""Frame rendering into an in-memory RGB image."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from minirt.camera import Ray
from minirt.lighting import calc_light
from minirt.scene import EPSILON, FLT_MAX, Scene
from minirt.shapes import closest_hit
from minirt.vec3 import Vec3

RGB = tuple[int, int, int]


def to_rgb(color: Vec3) -> RGB:
    """Clamp a [0, 1] colour to 8-bit channels."""
    def channel(value: float) -> int:
        return int(min(max(value, 0.0), 1.0) * 255)

    return channel(color.x), channel(color.y), channel(color.z)


@dataclass
class Image:
    """Row-major RGB image."""

    width: int
    height: int
    pixels: list[RGB] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if not self.pixels:
            self.pixels = [(0, 0, 0)] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match image size")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def pixel(self, x: int, y: int) -> RGB:
        """Colour of the pixel at column x, row y."""
        return self.pixels[self._index(x, y)]

    def _put(self, x: int, y: int, rgb: RGB) -> None:
        self.pixels[self._index(x, y)] = rgb

    def save_ppm(self, path: str | os.PathLike[str]) -> None:
        """Write the image as a binary PPM file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytes(channel for rgb in self.pixels for channel in rgb)
        with open(path, "wb") as handle:
            handle.write(header + body)


def render_scene(scene: Scene, ray: Ray) -> Vec3:
    """Colour seen along a primary ray."""
    hit = closest_hit(ray, scene.objects, FLT_MAX, None)
    if hit.t < EPSILON or hit.obj is None:
        return scene.bg_color
    return calc_light(scene, hit)


def render(scene: Scene) -> Image:
    """Render the whole frame at the camera's window size."""
    camera = scene.camera
    camera.set_projection_plane()
    width, height = int(camera.win_size[0]), int(camera.win_size[1])
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            color = render_scene(scene, camera.generate_ray(x, y))
            image._put(x, y, to_rgb(color))
    return image