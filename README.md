# astrosim

Two small physics simulations built on a shared 3D vector type and a seedable
random generator. Nothing outside the standard library is needed.

* **gas** (`astrosim.gas`) – particles of neon, argon and helium moving in a
  rectangular enclosure. Particles bounce off the walls and, when two of them
  lie in the same grid cell of side `epsilon`, collide with a randomised
  exchange of velocities. A "smart" system keeps an index of grid cells to
  find collision candidates; a gravity system makes every particle attract
  the others.
* **solar** (`astrosim.solar`) – celestial bodies attracting each other with
  Newtonian gravity (constant `G = 0.01`). Satellites can be placed on a
  circular orbit around a parent body, and each body keeps a trace of its past
  positions.

Both simulations draw themselves onto a *canvas*: an object implementing the
abstract `Canvas` class of its simulation. A plain-text `TextViewer` is
included for each. Messages written by the simulations are in French.

## Command-line demos

The gas demo puts a helium, a neon and an argon particle in a 20 × 20 × 20
smart system, evolves it for fifteen steps of 1, prints every particle after
each step and reports each wall bounce and collision:

```
astrosim-gas
```

The solar demo steps an empty solar system fifteen times and prints its
state (which is only ever "Le système est vide."):

```
astrosim-solar
```

Both commands write to standard output and take no options.

## Using the library

### Vectors

```python
from astrosim.vector import Axis, Vector3D

a = Vector3D(1.0, 2.0, 3.0)
b = Vector3D(0.0, 1.0, 0.0)

print(a + b)              # 1 3 3
print(a.dot(b))           # 2.0
print(a.cross(b))         # -3 0 1
print(a.component(Axis.Z))  # 3.0
print(a.norm(), a.norm2())
print(a.unit())
```

`Vector3D` is an immutable dataclass supporting `+`, `-`, unary `-`, and
multiplication by a number on either side. `unit()` raises
`SimulationError` (code 0) for the null vector; `unit_or_default()` returns
the x unit vector instead. `floor()` floors each coordinate and `to_cell()`
gives the integer cell indices. `SimulationError` carries a numeric `code`
and a `message`.

### Random numbers

`astrosim.rng.RandomGenerator(seed)` offers `uniform(low, high)` and
`gaussian(mean, stddev)`. With the same seed the draws repeat; with
`seed=None` the seed is taken from the system's entropy source.

### A gas in a box

```python
import sys

from astrosim.gas.particles import Particle, Species
from astrosim.gas.system import SmartSystem
from astrosim.gas.textview import TextViewer
from astrosim.vector import Vector3D

screen = TextViewer(sys.stdout)
system = SmartSystem(20, 20, 20, epsilon=1, seed=0, temperature=273.15)
system.add_particle(
    Particle(Vector3D(1, 1, 1), Vector3D(0, 0, 0), species=Species.HELIUM),
    randomize=False,
)
system.add_particle(Particle(species=Species.ARGON))  # random position and speed

for _ in range(10):
    system.evolve(1, screen)
system.draw_on(screen)
```

`astrosim.gas.system` provides:

* `System(height, width, depth, epsilon, seed, temperature)` – defaults
  20, 20, 20, 1, 0 and 273.15. Candidates for a collision are found by
  comparing every pair of particles.
* `SmartSystem` – the same, with particles registered in grid cells.
* `GravitySystem` – particles (which must have a species) become
  `AnalyticParticle`s accelerated by the others; walls and collisions are
  ignored. `field_points()` lists the position and mass of every particle.

Particles are added as copies with `add_particle` or, to keep their path,
`add_traceable`; with `randomize=True` (the default) their position is drawn
uniformly in the enclosure and their velocity from a thermal distribution.
`evolve(dt, canvas)` advances by one step, `draw_on(canvas)` draws the
enclosure and the particles, `render()` returns a text listing, `clear()`
empties the system and `first_component()` raises `SimulationError` (code 6)
when it is empty.

`astrosim.gas.particles` holds `Species`, `Enclosure`, `Particle` and its
variants `SmartParticle`, `TraceableParticle`, `SmartTraceableParticle` and
`AnalyticParticle`. Asking a plain particle for its `cell` or `memory` raises
`SimulationError`.

### A solar system

```python
import sys

from astrosim.solar.system import build_solar_system
from astrosim.solar.textview import TextViewer

system = build_solar_system(0.5)
viewer = TextViewer(sys.stdout)

for _ in range(100):
    system.evolve(0.01, viewer)

sun = system.component(1)
print(sun.pos, sun.velocity)
```

`build_solar_system` returns a `SolarSystem` holding the sun, the eight
planets on orbits around it and a moon around the Earth. Components are
numbered from 1; `component` returns `None` outside that range. Bodies are
`astrosim.solar.body.Body` instances; a new one is added as a copy with
`add_body`, or put on an orbit with `add_satellite(parent, satellite,
distance)`, which needs a positive distance and raises `ValueError`
otherwise. The text viewer prints messages only; bodies have no text form.

### Sphere geometry

`astrosim.mesh.sphere_mesh(slices=25, stacks=25)` returns a `SphereMesh`:
the vertices of a unit sphere (`positions`, `vertex_count`), triangle fans
closing the poles (`top_fan`, `bottom_fan`) and the quadrilaterals between
them (`quads`). It raises `ValueError` for fewer than 1 slice or 2 stacks.

## What the package does not do

There is no graphical viewer: no window, no 3D rendering, no camera or
keyboard control and no real-time animation. The simulations can be drawn
only through a `Canvas`; the text viewers and the sphere geometry are what
is provided for building a display.