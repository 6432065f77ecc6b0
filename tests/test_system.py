import pytest

from astrosim.gas.particles import (
    AnalyticParticle,
    Canvas,
    Particle,
    SmartParticle,
    SmartTraceableParticle,
    Species,
    TraceableParticle,
)
from astrosim.gas.system import GravitySystem, SmartSystem, System
from astrosim.vector import SimulationError, Vector3D


class RecordingCanvas(Canvas):
    def __init__(self):
        self.events = []

    def draw_particle(self, particle):
        self.events.append(("particle", particle))

    def draw_enclosure(self, enclosure):
        self.events.append(("enclosure", enclosure))

    def draw_message(self, message):
        self.events.append(("message", message))

    @property
    def messages(self):
        return [payload for kind, payload in self.events if kind == "message"]


def test_empty_system_renders_empty_message():
    assert System().render() == "Le système est vide.\n"


def test_first_component_of_empty_system_raises():
    with pytest.raises(SimulationError) as info:
        System().first_component()
    assert info.value.code == 6


def test_add_particle_copies_without_randomizing():
    system = System()
    original = Particle(Vector3D(1, 2, 3), Vector3D(0, 0, 0), species=Species.NEON)
    system.add_particle(original, randomize=False)
    stored = system.first_component()
    assert stored is not original
    assert stored.pos == original.pos
    assert stored.species is Species.NEON
    assert len(system) == 1


def test_randomized_particle_lies_inside_enclosure():
    system = System(5.0, 6.0, 7.0)
    for _ in range(10):
        system.add_particle(Particle(species=Species.ARGON))
    for particle in system:
        assert 0 <= particle.pos.x <= 5.0
        assert 0 <= particle.pos.y <= 6.0
        assert 0 <= particle.pos.z <= 7.0


def test_same_seed_gives_same_random_positions():
    first, second = System(seed=3), System(seed=3)
    for system in (first, second):
        system.add_particle(Particle(species=Species.HELIUM))
    assert first.first_component().pos == second.first_component().pos


def test_add_traceable_stores_traceable_copy():
    system = System()
    system.add_traceable(Particle(Vector3D(1, 1, 1), Vector3D(1, 0, 0)), randomize=False)
    stored = system.first_component()
    assert isinstance(stored, TraceableParticle)
    system.evolve(1.0, RecordingCanvas())
    assert stored.memory == [Vector3D(2, 1, 1)]


def test_render_lists_each_particle():
    system = System()
    system.add_particle(Particle(Vector3D(1, 1, 1), Vector3D(0, 0, 0)), randomize=False)
    assert system.render() == f"{system.first_component()}\n"
    assert str(system) == system.render()


def test_clear_empties_system():
    system = System()
    system.add_particle(Particle(), randomize=False)
    system.clear()
    assert len(system) == 0
    assert system.render() == "Le système est vide.\n"


def test_draw_on_draws_enclosure_then_particles():
    system = System()
    system.add_particle(Particle(Vector3D(1, 1, 1)), randomize=False)
    system.add_particle(Particle(Vector3D(5, 5, 5)), randomize=False)
    canvas = RecordingCanvas()
    system.draw_on(canvas)
    kinds = [kind for kind, _ in canvas.events]
    assert kinds == ["enclosure", "particle", "particle"]
    assert canvas.events[0][1] == system.enclosure


def test_draw_on_empty_system_reports_empty():
    canvas = RecordingCanvas()
    System().draw_on(canvas)
    assert canvas.messages == ["Le système est vide.\n"]


def test_evolve_bounces_off_far_wall():
    system = System()
    system.add_particle(Particle(Vector3D(19.5, 1, 1), Vector3D(1, 0, 0)), randomize=False)
    canvas = RecordingCanvas()
    system.evolve(1.0, canvas)
    particle = system.first_component()
    assert particle.pos == Vector3D(19.5, 1, 1)
    assert particle.velocity == Vector3D(-1, 0, 0)
    assert any("rebondit sur la face 1" in m for m in canvas.messages)


def test_close_particles_collide():
    system = System()
    system.add_particle(Particle(Vector3D(1.2, 1.2, 1.2), Vector3D(1, 0, 0)), randomize=False)
    system.add_particle(Particle(Vector3D(1.6, 1.6, 1.6), Vector3D(0, 1, 0)), randomize=False)
    canvas = RecordingCanvas()
    system.evolve(0.0, canvas)
    collisions = [m for m in canvas.messages if "entre en collision" in m]
    assert len(collisions) == 1
    assert collisions[0].startswith("La particule 2 entre en collision")
    assert " avant le choc :" in collisions[0]
    assert " après le choc :" in collisions[0]
    assert system.particles[0].velocity != Vector3D(1, 0, 0)


def test_distant_particles_do_not_collide():
    system = System()
    system.add_particle(Particle(Vector3D(1.5, 1.5, 1.5), Vector3D(0, 0, 0)), randomize=False)
    system.add_particle(Particle(Vector3D(10.5, 10.5, 10.5), Vector3D(0, 0, 0)), randomize=False)
    canvas = RecordingCanvas()
    system.evolve(1.0, canvas)
    assert canvas.messages == []


def test_toggle_colour_flips_shared_flag():
    system = System()
    system.toggle_colour()  # empty: nothing happens
    system.add_particle(Particle(), randomize=False)
    before = system.first_component().show_colour
    system.toggle_colour()
    try:
        assert system.first_component().show_colour is (not before)
    finally:
        system.toggle_colour()
    assert system.first_component().show_colour is before


def test_toggle_trace_flips_shared_flag():
    system = System()
    system.add_particle(Particle(), randomize=False)
    before = system.first_component().show_trace
    system.toggle_trace()
    try:
        assert system.first_component().show_trace is (not before)
    finally:
        system.toggle_trace()


def test_smart_system_stores_smart_particles_with_cells():
    system = SmartSystem()
    system.add_particle(Particle(Vector3D(1.5, 2.5, 3.5), Vector3D(0, 0, 0)), randomize=False)
    system.add_traceable(Particle(Vector3D(4.5, 4.5, 4.5), Vector3D(0, 0, 0)), randomize=False)
    first, second = system.particles
    assert isinstance(first, SmartParticle)
    assert isinstance(second, SmartTraceableParticle)
    assert first.cell == (1, 2, 3)
    assert system.occupants((1, 2, 3)) == [0]
    assert system.occupants((4, 4, 4)) == [1]


def test_smart_system_grid_shape_covers_enclosure():
    system = SmartSystem(4.0, 4.0, 4.0, epsilon=0.5)
    assert system.grid_shape == (9, 9, 9)


def test_smart_system_moves_particle_between_cells():
    system = SmartSystem()
    system.add_particle(Particle(Vector3D(1.5, 2.5, 3.5), Vector3D(1, 0, 0)), randomize=False)
    system.evolve(1.0, RecordingCanvas())
    particle = system.first_component()
    assert particle.cell == (2, 2, 3)
    assert system.occupants((1, 2, 3)) == []
    assert system.occupants((2, 2, 3)) == [0]


def test_smart_system_collides_particles_sharing_a_cell():
    system = SmartSystem()
    system.add_particle(Particle(Vector3D(1.2, 1.2, 1.2), Vector3D(1, 0, 0)), randomize=False)
    system.add_particle(Particle(Vector3D(1.5, 1.5, 1.5), Vector3D(0, 1, 0)), randomize=False)
    canvas = RecordingCanvas()
    system.evolve(0.0, canvas)
    collisions = [m for m in canvas.messages if "entre en collision" in m]
    assert len(collisions) == 1
    assert collisions[0].startswith("La particule 2 entre en collision")


def test_smart_system_clear_resets_cells():
    system = SmartSystem()
    system.add_particle(Particle(Vector3D(1.5, 1.5, 1.5)), randomize=False)
    system.clear()
    assert system.occupants((1, 1, 1)) == []
    assert len(system) == 0


def test_gravity_system_uses_analytic_particles():
    system = GravitySystem()
    system.add_particle(Particle(Vector3D(1, 2, 3), Vector3D(0, 0, 0), species=Species.NEON), randomize=False)
    stored = system.first_component()
    assert type(stored) is AnalyticParticle
    assert stored.pos == Vector3D(1, 2, 3)
    assert stored.acceleration == Vector3D(0, 0, 0)


def test_gravity_system_rejects_particle_without_species():
    with pytest.raises(ValueError):
        GravitySystem().add_particle(Particle(), randomize=False)


def test_gravity_field_points_hold_positions_and_masses():
    system = GravitySystem()
    system.add_particle(Particle(Vector3D(1, 2, 3), Vector3D(0, 0, 0), species=Species.ARGON), randomize=False)
    (point,) = system.field_points()
    assert point.pos == Vector3D(1, 2, 3)
    assert point.mass == Species.ARGON.mass


def test_gravity_pulls_particles_together():
    system = GravitySystem()
    system.add_particle(Particle(Vector3D(5, 5, 5), Vector3D(0, 0, 0), species=Species.NEON), randomize=False)
    system.add_particle(Particle(Vector3D(6, 5, 5), Vector3D(0, 0, 0), species=Species.NEON), randomize=False)
    canvas = RecordingCanvas()
    system.evolve(0.1, canvas)
    left, right = system.particles
    assert left.velocity.x > 0
    assert right.velocity.x < 0
    assert (right.pos - left.pos).norm() < 1.0
    assert canvas.messages == []