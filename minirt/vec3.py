"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, Union

Operand = Union["Vec3", int, float]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector supporting component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def _combine(self, other: Operand, op: Callable[[float, float], float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, (int, float)):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other: Operand) -> Vec3:
        return self._combine(other, operator.add)

    def __sub__(self, other: Operand) -> Vec3:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Operand) -> Vec3:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Operand) -> Vec3:
        return self._combine(other, operator.truediv)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def normalize(self) -> Vec3:
        """Unit vector with the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector about the given normal."""
        return self - normal * (2.0 * self.dot(normal))

    def abs(self) -> Vec3:
        """Component-wise absolute value."""
        return Vec3(abs(self.x), abs(self.y), abs(self.z))