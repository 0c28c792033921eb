"""Vector rotations and in-place rotation of shapes."""

from __future__ import annotations

import math

from minirt.scene import Cylinder, Plane
from minirt.vec3 import Vec3


def rotate_x(v: Vec3, theta: float) -> Vec3:
    """Rotate v around the X axis by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Vec3(v.x, v.y * c - v.z * s, v.y * s + v.z * c)


def rotate_z(v: Vec3, theta: float) -> Vec3:
    """Rotate v around the Z axis by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Vec3(v.x * c - v.y * s, v.x * s + v.y * c, v.z)


def rotate_vec3(v: Vec3, axis: Vec3, angle_deg: float) -> Vec3:
    """Rotate v around an arbitrary axis by angle_deg degrees."""
    angle = math.radians(angle_deg)
    axis = axis.normalize()
    c, s = math.cos(angle), math.sin(angle)
    return v * c + axis.cross(v) * s + axis * (axis.dot(v) * (1.0 - c))


def rotate_plane(plane: Plane, theta: float, axis: Vec3) -> None:
    """Rotate the plane's normal by theta degrees around axis."""
    plane.normal = rotate_vec3(plane.normal, axis, theta).normalize()


def rotate_cylinder(cylinder: Cylinder, theta: float, axis: Vec3) -> None:
    """Rotate the cylinder's orientation by theta degrees around axis."""
    cylinder.orientation = rotate_vec3(cylinder.orientation, axis, theta).normalize()