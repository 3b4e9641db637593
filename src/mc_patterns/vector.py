"""Immutable 3D vector used for anchors and block coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Vector3:
    """Three-component vector. Every operation returns a new instance."""

    x: float = 0
    y: float = 0
    z: float = 0

    @classmethod
    def of(cls, components: Sequence[float]) -> Vector3:
        x, y, z = components
        return cls(x, y, z)

    def equals(self, other: Vector3) -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def divide(self, scalar: float) -> Vector3:
        """Divide each component by ``scalar``.

        Raises ``ZeroDivisionError`` when ``scalar`` is exactly zero.
        """
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def normalize(self) -> Vector3:
        """Return the unit vector pointing the same way.

        Raises ``ZeroDivisionError`` for the zero vector.
        """
        mag = self.magnitude()
        if mag == 0:
            raise ZeroDivisionError("Cannot normalize a zero vector")
        return self.divide(mag)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance(self, other: Vector3) -> float:
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def block_position(self) -> tuple[int, int, int]:
        """Integer block coordinates containing this point."""
        return math.floor(self.x), math.floor(self.y), math.floor(self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vector3:
        return self.multiply(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return self.divide(scalar)

    def __str__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
