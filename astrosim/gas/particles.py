"""Particles of the gas simulation, their enclosure and the drawing interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from astrosim.rng import RandomGenerator
from astrosim.vector import Axis, SimulationError, Vector3D

GAS_CONSTANT = 8.314472
TRACE_LENGTH = 100_000
GRAVITY_SCALE = 0.001


class Species(Enum):
    """The noble gases a particle may belong to, with their molar masses."""

    NEON = ("Neon", 20.1797)
    ARGON = ("Argon", 39.948)
    HELIUM = ("Helium", 40.002602)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def mass(self) -> float:
        return self.value[1]


@dataclass(frozen=True)
class FieldPoint:
    """A point mass that attracts analytic particles."""

    pos: Vector3D
    mass: float


class Canvas(ABC):
    """Something particles, enclosures and messages can be drawn on."""

    @abstractmethod
    def draw_particle(self, particle: "Particle") -> None:
        """Draw one particle."""

    @abstractmethod
    def draw_enclosure(self, enclosure: "Enclosure") -> None:
        """Draw the enclosure."""

    @abstractmethod
    def draw_message(self, message: str) -> None:
        """Show a text message."""


@dataclass(frozen=True)
class Enclosure:
    """A rectangular box with one corner at the origin."""

    height: float = 20.0
    width: float = 20.0
    depth: float = 20.0

    def dimension(self, axis: Axis) -> float:
        """The extent of the box along ``axis``."""
        return (self.height, self.width, self.depth)[axis.value]

    def draw_on(self, canvas: Canvas) -> None:
        canvas.draw_enclosure(self)

    def __str__(self) -> str:
        return ""


class _LiveCounter:
    """Number of particles currently alive; names new particles."""

    def __init__(self) -> None:
        self.live = 0


_COUNTER = _LiveCounter()

# Axis, face crossed beyond the far wall, face crossed below zero.
_WALLS = ((Axis.X, 1, 2), (Axis.Y, 3, 4), (Axis.Z, 5, 6))


class _DisplayFlags:
    colour = True
    trace = False


class Particle:
    """A point particle moving freely inside an enclosure."""

    def __init__(
        self,
        pos: Vector3D | None = None,
        velocity: Vector3D | None = None,
        mass: float | None = None,
        species: Species | None = None,
    ) -> None:
        if species is not None and mass is not None and mass != species.mass:
            raise ValueError(f"a {species.label} particle has mass {species.mass}")
        if mass is None:
            mass = species.mass if species is not None else 1.0
        self.pos = Vector3D() if pos is None else pos
        self.velocity = Vector3D(1.0, 1.0, 1.0) if velocity is None else velocity
        self._mass = float(mass)
        self._species = species
        self._name = str(_COUNTER.live)
        _COUNTER.live += 1
        self._counter: _LiveCounter | None = _COUNTER

    def __del__(self) -> None:
        counter = getattr(self, "_counter", None)
        if counter is not None:
            counter.live -= 1
            self._counter = None

    @property
    def name(self) -> str:
        """The number given to the particle when it was created."""
        return self._name

    @property
    def label(self) -> str:
        """The name shown when the particle is printed."""
        return self._species.label if self._species is not None else self._name

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def species(self) -> Species | None:
        return self._species

    @property
    def show_colour(self) -> bool:
        """Whether particles are drawn in their species colour (shared)."""
        return _DisplayFlags.colour

    @property
    def show_trace(self) -> bool:
        """Whether traces are drawn (shared by all particles)."""
        return _DisplayFlags.trace

    def toggle_colour(self) -> None:
        _DisplayFlags.colour = not _DisplayFlags.colour

    def toggle_trace(self) -> None:
        _DisplayFlags.trace = not _DisplayFlags.trace

    @property
    def cell(self) -> tuple[int, int, int]:
        """The grid cell of the particle; only smart particles have one."""
        raise SimulationError(
            1, "Utilisation de getKase() pour une particule non intelligente"
        )

    @cell.setter
    def cell(self, value: tuple[int, int, int]) -> None:
        raise SimulationError(
            2, "Utilisation de getKase() pour une particule non intelligente"
        )

    @property
    def memory(self) -> list[Vector3D]:
        """Past positions; only traceable particles keep them."""
        raise SimulationError(
            3, "Utilisation de getMemoire() pour une particule non traçable"
        )

    def init_random(
        self, rng: RandomGenerator, enclosure: Enclosure, temperature: float
    ) -> None:
        """Draw a uniform position in the box and a thermal velocity."""
        self.pos = Vector3D(
            rng.uniform(0, enclosure.height),
            rng.uniform(0, enclosure.width),
            rng.uniform(0, enclosure.depth),
        )
        stddev = math.sqrt(self._mass * 1e-3 * (1 / GAS_CONSTANT) * temperature)
        self.velocity = Vector3D(*(rng.gaussian(0.0, stddev) for _ in range(3)))

    def close_to(self, other: "Particle", step: float) -> bool:
        """Whether both particles lie in the same cell of side ``step``."""
        scale = 1 / step
        return (self.pos * scale).floor() == (other.pos * scale).floor()

    def evolve(self, dt: float) -> None:
        """Move in a straight line for ``dt``."""
        self.pos = self.pos + dt * self.velocity

    def apply_gravity(self, field: Iterable[FieldPoint]) -> None:
        """Feel the attraction of ``field``; a free particle ignores it."""

    def collide(
        self,
        other: "Particle",
        epsilon: float,
        rng: RandomGenerator,
        first_draw: bool = False,
    ) -> None:
        """Exchange velocities with ``other`` in a random collision."""
        total = self._mass + other._mass
        centre = (self._mass / total) * self.velocity + (
            other._mass / total
        ) * other.velocity
        length = (self.velocity - centre).norm()
        z = rng.uniform(-length, length)
        while True:
            phi = rng.uniform(0, 2 * math.pi)
            if phi != 2 * math.pi:
                break
        r = math.sqrt(length * length - z * z)
        if first_draw:
            z = 0.0
            phi = math.pi / 3
            r = length
        v0 = Vector3D(r * math.cos(phi), r * math.sin(phi), z)
        self.velocity = 0.5 * (centre + v0)
        other.velocity = 0.5 * (centre - (self._mass / other._mass) * v0)

    def bounce(self, enclosure: Enclosure, canvas: Canvas) -> None:
        """Reflect off any wall the particle has crossed, reporting each face."""
        for axis, far_face, near_face in _WALLS:
            limit = enclosure.dimension(axis)
            unit = axis.vector
            coordinate = self.pos.component(axis)
            if not (coordinate > limit or coordinate < 0):
                continue
            self.velocity = self.velocity - 2 * self.velocity.dot(unit) * unit
            if coordinate > limit:
                self.pos = self.pos - (2 * (coordinate - limit)) * unit
                face = far_face
            else:
                self.pos = self.pos - 2 * coordinate * unit
                face = near_face
            canvas.draw_message(
                f"La particule {self._name} rebondit sur la face {face}\n"
            )

    def draw_on(self, canvas: Canvas) -> None:
        canvas.draw_particle(self)

    def _copy_as(self, cls: type["Particle"]) -> "Particle":
        return cls(self.pos, self.velocity, self._mass, self._species)

    def copy(self) -> "Particle":
        """A plain particle with the same state and a new name."""
        return self._copy_as(Particle)

    def copy_smart(self) -> "SmartParticle":
        return self._copy_as(SmartParticle)

    def copy_traceable(self) -> "TraceableParticle":
        return self._copy_as(TraceableParticle)

    def copy_smart_traceable(self) -> "SmartTraceableParticle":
        return self._copy_as(SmartTraceableParticle)

    def copy_analytic(self) -> "AnalyticParticle | None":
        """An analytic copy; only particles of a species have one."""
        if self._species is None:
            return None
        return self._copy_as(AnalyticParticle)

    def __str__(self) -> str:
        return (
            f"Particule {self.label} : pos : {self.pos} ; "
            f"v : {self.velocity} ; m : {self._mass:g}"
        )


class SmartParticle(Particle):
    """A particle that knows which grid cell it occupies."""

    def __init__(self, pos=None, velocity=None, mass=None, species=None) -> None:
        super().__init__(pos, velocity, mass, species)
        self._cell: tuple[int, int, int] = (0, 0, 0)

    @property
    def cell(self) -> tuple[int, int, int]:
        return self._cell

    @cell.setter
    def cell(self, value: tuple[int, int, int]) -> None:
        self._cell = tuple(value)


class TraceableParticle(Particle):
    """A particle that remembers the positions it has passed through."""

    def __init__(self, pos=None, velocity=None, mass=None, species=None) -> None:
        super().__init__(pos, velocity, mass, species)
        self._memory: deque[Vector3D] = deque(maxlen=TRACE_LENGTH)

    @property
    def memory(self) -> list[Vector3D]:
        return list(self._memory)

    def evolve(self, dt: float) -> None:
        super().evolve(dt)
        self._memory.append(self.pos)


class SmartTraceableParticle(SmartParticle, TraceableParticle):
    """A particle both aware of its cell and leaving a trace."""


class AnalyticParticle(TraceableParticle):
    """A traceable particle accelerated by the gravity of point masses."""

    def __init__(self, pos=None, velocity=None, mass=None, species=None) -> None:
        super().__init__(pos, velocity, mass, species)
        self.acceleration = Vector3D()

    def apply_gravity(self, field: Iterable[FieldPoint]) -> None:
        acceleration = self.acceleration
        for point in field:
            if point.pos != self.pos:
                offset = point.pos - self.pos
                acceleration = acceleration + (point.mass / offset.norm2()) * offset.unit()
        self.acceleration = acceleration * GRAVITY_SCALE

    def evolve(self, dt: float) -> None:
        self.velocity = self.velocity + self.acceleration * dt
        super().evolve(dt)