"""Three-dimensional vectors and the error type shared by the simulations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class SimulationError(Exception):
    """An error raised by the simulation, carrying a numeric code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"SimulationError(code={self.code!r}, message={self.message!r})"


class Axis(Enum):
    """The three coordinate axes."""

    X = 0
    Y = 1
    Z = 2

    @property
    def vector(self) -> "Vector3D":
        """The unit vector along this axis."""
        return _AXIS_VECTORS[self]


@dataclass(frozen=True)
class Vector3D:
    """An immutable vector of three real coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3D":
        return Vector3D(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3D":
        if isinstance(scalar, Vector3D) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3D(scalar * self.x, scalar * self.y, scalar * self.z)

    def __rmul__(self, scalar: float) -> "Vector3D":
        return self.__mul__(scalar)

    def component(self, axis: Axis) -> float:
        """The coordinate along ``axis``."""
        return (self.x, self.y, self.z)[axis.value]

    def dot(self, other: "Vector3D") -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        """Vector product."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.norm() * self.norm()

    def unit(self) -> "Vector3D":
        """The unit vector in the same direction; raises on the zero vector."""
        length = self.norm()
        if length == 0:
            raise SimulationError(0, "division par la norme du vecteur nul (par 0)")
        return self * (1 / length)

    def unit_or_default(self) -> "Vector3D":
        """The unit vector, or the x unit vector when this vector is zero."""
        if self.norm() == 0:
            return UNIT_X
        return self.unit()

    def floor(self) -> "Vector3D":
        """The vector of the floors of each coordinate."""
        return Vector3D(
            float(math.floor(self.x)),
            float(math.floor(self.y)),
            float(math.floor(self.z)),
        )

    def to_cell(self) -> tuple[int, int, int]:
        """The integer cell indices holding this point."""
        return (math.floor(self.x), math.floor(self.y), math.floor(self.z))

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"


UNIT_X = Vector3D(1.0, 0.0, 0.0)
UNIT_Y = Vector3D(0.0, 1.0, 0.0)
UNIT_Z = Vector3D(0.0, 0.0, 1.0)

_AXIS_VECTORS = {Axis.X: UNIT_X, Axis.Y: UNIT_Y, Axis.Z: UNIT_Z}