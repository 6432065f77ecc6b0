"""Celestial bodies of the solar simulation and the drawing interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import ClassVar, Iterable

from astrosim.rng import RandomGenerator
from astrosim.vector import UNIT_X, Vector3D

G = 0.01
TRACE_LENGTH = 10_000_000


@dataclass(frozen=True)
class FieldPoint:
    """A point mass whose attraction bodies feel."""

    pos: Vector3D
    mass: float


class Canvas(ABC):
    """Something bodies and messages can be drawn on."""

    @abstractmethod
    def draw_body(self, body: "Body") -> None:
        """Draw one body."""

    @abstractmethod
    def draw_message(self, message: str) -> None:
        """Show a text message."""


class Body:
    """A spherical body moving under the gravity of point masses.

    Left out, the arguments take these defaults: with neither position nor
    velocity given, a body of mass 1 and radius 5 at the origin moving at
    (1, 1, 1); with a position or velocity but no mass, mass 20 and radius 10;
    with a mass but no radius, radius 5. The colour defaults to red.
    """

    _show_colour: ClassVar[bool] = True
    _show_trace: ClassVar[bool] = False

    def __init__(
        self,
        pos: Vector3D | None = None,
        velocity: Vector3D | None = None,
        mass: float | None = None,
        radius: float | None = None,
        colour: Vector3D | None = None,
        tilt: float = 0.0,
        spin: float = 0.0,
    ) -> None:
        placed = pos is not None or velocity is not None
        if mass is None:
            mass = 20.0 if placed else 1.0
            default_radius = 10.0 if placed else 5.0
        else:
            default_radius = 5.0
        self.pos = Vector3D() if pos is None else pos
        self.velocity = Vector3D(1.0, 1.0, 1.0) if velocity is None else velocity
        self._mass = float(mass)
        self._radius = float(default_radius if radius is None else radius)
        self.colour = Vector3D(1.0, 0.0, 0.0) if colour is None else colour
        self.tilt = tilt
        self.spin = spin
        self._acceleration = Vector3D()
        self._memory: deque[Vector3D] = deque(maxlen=TRACE_LENGTH)

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def acceleration(self) -> Vector3D:
        return self._acceleration

    @property
    def memory(self) -> list[Vector3D]:
        """The positions the body has passed through, oldest first."""
        return list(self._memory)

    @property
    def show_colour(self) -> bool:
        """Whether bodies are drawn in their own colour (shared by all bodies)."""
        return Body._show_colour

    @property
    def show_trace(self) -> bool:
        """Whether traces are drawn (shared by all bodies)."""
        return Body._show_trace

    def toggle_colour(self) -> None:
        Body._show_colour = not Body._show_colour

    def toggle_trace(self) -> None:
        Body._show_trace = not Body._show_trace

    def evolve(self, dt: float) -> None:
        """Advance by ``dt`` with the current acceleration, recording the position."""
        self.velocity = self.velocity + self._acceleration * dt
        self.pos = self.pos + dt * self.velocity
        self._memory.append(self.pos)

    def apply_gravity(self, field: Iterable[FieldPoint]) -> None:
        """Add the attraction of every point mass not at this body's position."""
        acceleration = self._acceleration
        for point in field:
            if point.pos != self.pos:
                offset = point.pos - self.pos
                acceleration = acceleration + (
                    point.mass / offset.norm2()
                ) * offset.unit_or_default()
        self._acceleration = acceleration * G

    def close_to(self, other: "Body", step: float) -> bool:
        """Whether both bodies lie in the same cell of side ``step``."""
        scale = 1 / step
        return (self.pos * scale).floor() == (other.pos * scale).floor()

    def place_as_satellite(
        self, parent: "Body", distance: float, rng: RandomGenerator
    ) -> None:
        """Put the body on a circular orbit of ``parent`` at ``distance``."""
        if distance <= 0:
            raise ValueError("a satellite must orbit at a positive distance")
        self.pos = parent.pos + (distance + self._radius) * UNIT_X
        t = rng.uniform(0, 1)
        speed = math.sqrt(G * parent.mass / distance)
        self.velocity = speed * Vector3D(0.0, t, math.sqrt(1 - t * t)) + parent.velocity

    def copy(self) -> "Body":
        """A body with the same state, no acceleration and an empty trace."""
        return Body(
            self.pos,
            self.velocity,
            self._mass,
            self._radius,
            self.colour,
            self.tilt,
            self.spin,
        )

    def draw_on(self, canvas: Canvas) -> None:
        canvas.draw_body(self)