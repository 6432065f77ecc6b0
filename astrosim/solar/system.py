"""A system of bodies attracting one another, and the solar system setup."""

from __future__ import annotations

from typing import Iterator

from astrosim.rng import RandomGenerator
from astrosim.solar.body import Body, Canvas, FieldPoint
from astrosim.vector import Vector3D

EMPTY_MESSAGE = "Le système est vide.\n"


class SolarSystem:
    """Bodies evolving under their mutual gravity."""

    def __init__(self, epsilon: float = 1.0) -> None:
        self.epsilon = epsilon
        self._rng = RandomGenerator(0)
        self._bodies: list[Body] = []

    @property
    def bodies(self) -> tuple[Body, ...]:
        """The bodies held by the system, in insertion order."""
        return tuple(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies)

    def add_body(self, body: Body) -> None:
        """Add a copy of ``body``."""
        self._bodies.append(body.copy())

    def add_satellite(self, parent: Body, satellite: Body, distance: float = 0) -> None:
        """Put ``satellite`` in orbit around ``parent`` and add a copy of it.

        The satellite passed in is moved onto its orbit as well.
        """
        satellite.place_as_satellite(parent, distance, self._rng)
        self._bodies.append(satellite.copy())

    def clear(self) -> None:
        """Remove every body."""
        self._bodies.clear()

    def field_points(self) -> list[FieldPoint]:
        """The position and mass of every body."""
        return [FieldPoint(body.pos, body.mass) for body in self._bodies]

    def evolve(self, dt: float, canvas: Canvas | None = None) -> None:
        """Advance every body by ``dt`` under the field taken at the start."""
        field = self.field_points()
        for body in self._bodies:
            body.apply_gravity(field)
            body.evolve(dt)

    def draw_on(self, canvas: Canvas) -> None:
        """Draw every body, or say that the system is empty."""
        if not self._bodies:
            canvas.draw_message(EMPTY_MESSAGE)
            return
        for body in self._bodies:
            body.draw_on(canvas)

    def component(self, index: int) -> Body | None:
        """The body at 1-based ``index``, or None when there is none."""
        if index < 1 or index > len(self._bodies):
            return None
        return self._bodies[index - 1]

    def toggle_colour(self) -> None:
        if self._bodies:
            self._bodies[0].toggle_colour()

    def toggle_trace(self) -> None:
        if self._bodies:
            self._bodies[0].toggle_trace()


# Name, mass, radius, colour, orbital distance from the Sun.
_PLANETS = (
    ("Mercure", 3e3, 2.0, (0.7, 0.0, 0.0), 5e2),
    ("Venus", 4e3, 2.5, (0.6, 0.6, 0.0), 7e2),
    ("Terre", 6e3, 4.0, (0.5, 1.0, 0.8), 9e2),
    ("Mars", 5e3, 3.0, (0.9, 0.0, 0.0), 11e2),
    ("Jupiter", 12e3, 6.0, (0.9, 0.8, 0.7), 15e2),
    ("Saturne", 9e3, 5.0, (1.0, 1.0, 0.2), 17.5e2),
    ("Uranus", 6e3, 4.5, (1.0, 0.2, 1.0), 20e2),
    ("Neptune", 7e3, 4.5, (0.5, 0.5, 0.8), 25e2),
)


def _still(mass: float, radius: float, colour: tuple[float, float, float]) -> Body:
    return Body(Vector3D(), Vector3D(), mass, radius, Vector3D(*colour))


def build_solar_system(epsilon: float = 0.5) -> SolarSystem:
    """The Sun, its eight planets and the Moon orbiting the Earth."""
    system = SolarSystem(epsilon)
    sun = _still(1e6, 10.0, (1.0, 1.0, 0.0))
    system.add_body(sun)
    planets = {}
    for name, mass, radius, colour, distance in _PLANETS:
        planet = _still(mass, radius, colour)
        system.add_satellite(sun, planet, distance)
        planets[name] = planet
    moon = _still(30.0, 1.0, (1.0, 1.0, 1.0))
    system.add_satellite(planets["Terre"], moon, 30.0)
    return system