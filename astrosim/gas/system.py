"""Systems of gas particles: free motion, wall bounces, collisions and gravity."""

from __future__ import annotations

from typing import Callable, Iterator

from astrosim.gas.particles import Canvas, Enclosure, FieldPoint, Particle
from astrosim.rng import RandomGenerator
from astrosim.vector import SimulationError, Vector3D

EMPTY_MESSAGE = "Le système est vide.\n"


class System:
    """Particles in an enclosure, moving freely and colliding when close."""

    def __init__(
        self,
        height: float = 20.0,
        width: float = 20.0,
        depth: float = 20.0,
        epsilon: float = 1.0,
        seed: int | None = 0,
        temperature: float = 273.15,
    ) -> None:
        self.enclosure = Enclosure(height, width, depth)
        self.epsilon = epsilon
        self.temperature = temperature
        self._rng = RandomGenerator(seed)
        self._components: list[Particle] = []
        self._first_collision_done = False

    @property
    def particles(self) -> tuple[Particle, ...]:
        """The particles held by the system, in insertion order."""
        return tuple(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._components)

    def _append(self, particle: Particle, randomize: bool) -> None:
        self._components.append(particle)
        if randomize:
            particle.init_random(self._rng, self.enclosure, self.temperature)

    def _add_with(
        self, particle: Particle, make: Callable[[Particle], Particle | None], randomize: bool
    ) -> None:
        copy = make(particle)
        if copy is None:
            raise ValueError("this particle cannot be added to this system")
        self._append(copy, randomize)

    def add_particle(self, particle: Particle, randomize: bool = True) -> None:
        """Add a copy of ``particle``, drawing its state at random if asked."""
        self._add_with(particle, Particle.copy, randomize)

    def add_traceable(self, particle: Particle, randomize: bool = True) -> None:
        """Add a traceable copy of ``particle``."""
        self._add_with(particle, Particle.copy_traceable, randomize)

    def clear(self) -> None:
        """Remove every particle."""
        self._components.clear()

    def _candidates_for(self, index: int) -> list[int]:
        current = self._components[index]
        return [
            j
            for j, other in enumerate(self._components[:index])
            if current.close_to(other, self.epsilon)
        ]

    def evolve(self, dt: float, canvas: Canvas) -> None:
        """Advance by ``dt``: move, bounce off walls, then resolve collisions."""
        for particle in self._components:
            particle.evolve(dt)
            particle.bounce(self.enclosure, canvas)

        groups = []
        for index in range(len(self._components)):
            group = self._candidates_for(index) + [index]
            if len(group) > 1:
                groups.append(group)
        self._resolve_collisions(groups, canvas)

    def _resolve_collisions(self, groups: list[list[int]], canvas: Canvas) -> None:
        for group in groups:
            last = len(group) - 1
            while True:
                chosen = int(self._rng.uniform(0, last))
                if chosen != last:
                    break
            mover = self._components[group[last]]
            target = self._components[group[chosen]]
            before = (
                f"La particule {group[last] + 1} entre en collision avec une autre "
                f"particule.\n\n avant le choc :\n  {mover}\n  {target}\n"
            )
            mover.collide(
                target, self.epsilon, self._rng, not self._first_collision_done
            )
            self._first_collision_done = True
            after = f" après le choc :\n  {mover}\n  {target}\n\n"
            canvas.draw_message(before + after)

    def draw_on(self, canvas: Canvas) -> None:
        """Draw the enclosure and then every particle."""
        self.enclosure.draw_on(canvas)
        if not self._components:
            canvas.draw_message(EMPTY_MESSAGE)
            return
        for particle in self._components:
            particle.draw_on(canvas)

    def render(self) -> str:
        """A text listing of the particles, one per line."""
        if not self._components:
            return EMPTY_MESSAGE
        return "".join(f"{particle}\n" for particle in self._components)

    def __str__(self) -> str:
        return self.render()

    def first_component(self) -> Particle:
        """The first particle; raises if the system is empty."""
        if not self._components:
            raise SimulationError(6, "Accès à la première particule d'un système vide")
        return self._components[0]

    def toggle_colour(self) -> None:
        if self._components:
            self._components[0].toggle_colour()

    def toggle_trace(self) -> None:
        if self._components:
            self._components[0].toggle_trace()


class SmartSystem(System):
    """A system that tracks particles on a grid and collides those sharing a cell."""

    def __init__(
        self,
        height: float = 20.0,
        width: float = 20.0,
        depth: float = 20.0,
        epsilon: float = 1.0,
        seed: int | None = 0,
        temperature: float = 273.15,
    ) -> None:
        super().__init__(height, width, depth, epsilon, seed, temperature)
        self._shape = tuple(
            int(extent // epsilon) + 1 for extent in (height, width, depth)
        )
        self._cells: dict[tuple[int, int, int], list[int]] = {}

    @property
    def grid_shape(self) -> tuple[int, ...]:
        """Number of cells along each axis."""
        return self._shape

    def occupants(self, cell: tuple[int, int, int]) -> list[int]:
        """Indices of the particles registered in ``cell``."""
        return list(self._cells.get(tuple(cell), ()))

    def _in_grid(self, cell: tuple[int, int, int]) -> bool:
        return all(0 <= c < n for c, n in zip(cell, self._shape))

    def _register(self, scaled: Vector3D, index: int) -> tuple[int, int, int]:
        cell = scaled.to_cell()
        if self._in_grid(cell):
            self._cells.setdefault(cell, []).append(index)
        return cell

    def _append(self, particle: Particle, randomize: bool) -> None:
        super()._append(particle, randomize)
        index = len(self._components) - 1
        particle.cell = self._register(particle.pos * (1 / self.epsilon), index)

    def add_particle(self, particle: Particle, randomize: bool = True) -> None:
        self._add_with(particle, Particle.copy_smart, randomize)

    def add_traceable(self, particle: Particle, randomize: bool = True) -> None:
        self._add_with(particle, Particle.copy_smart_traceable, randomize)

    def clear(self) -> None:
        super().clear()
        self._cells.clear()

    def evolve(self, dt: float, canvas: Canvas) -> None:
        scale = 1 / self.epsilon
        for index, particle in enumerate(self._components):
            previous = particle.pos
            old_cell = particle.cell
            particle.evolve(dt)
            particle.bounce(self.enclosure, canvas)
            current = particle.pos
            if (previous * scale).floor() != (current * scale).floor():
                members = self._cells.get(tuple(old_cell))
                if members and index in members:
                    members.remove(index)
                particle.cell = self._register(current * scale, index)

        groups = [
            list(self._cells[key])
            for key in sorted(self._cells)
            if len(self._cells[key]) > 1
        ]
        self._resolve_collisions(groups, canvas)


class GravitySystem(System):
    """A system whose particles attract one another and leave traces."""

    def add_particle(self, particle: Particle, randomize: bool = True) -> None:
        self._add_with(particle, Particle.copy_analytic, randomize)

    def field_points(self) -> list[FieldPoint]:
        """The position and mass of every particle."""
        return [FieldPoint(p.pos, p.mass) for p in self._components]

    def evolve(self, dt: float, canvas: Canvas) -> None:
        field = self.field_points()
        for particle in self._components:
            particle.apply_gravity(field)
            particle.evolve(dt)