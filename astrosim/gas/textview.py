"""A canvas that prints the gas simulation as text, and the text demo."""

from __future__ import annotations

import sys
from typing import TextIO

from astrosim.gas.particles import Canvas, Enclosure, Particle, Species
from astrosim.gas.system import SmartSystem
from astrosim.vector import Vector3D

SEPARATOR = "\n--------------------------------------------\n"


class TextViewer(Canvas):
    """Writes particles and messages to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = sys.stdout if stream is None else stream

    def draw_particle(self, particle: Particle) -> None:
        self._stream.write(f"{particle}\n")

    def draw_enclosure(self, enclosure: Enclosure) -> None:
        self._stream.write(str(enclosure))

    def draw_message(self, message: str) -> None:
        self._stream.write(f"{message}\n")


def run_demo(stream: TextIO | None = None) -> None:
    """Run fifteen steps of a three-particle smart system, printing each state."""
    screen = TextViewer(stream)
    system = SmartSystem(20, 20, 20, 1, 0, 273.15)

    system.add_particle(Particle(Vector3D(1, 1, 1), Vector3D(0, 0, 0), species=Species.HELIUM))
    system.add_particle(Particle(Vector3D(1, 18.5, 1), Vector3D(0, 0.2, 0), species=Species.NEON))
    system.add_particle(Particle(Vector3D(1, 1, 3.1), Vector3D(0, 0, -0.5), species=Species.ARGON))

    screen.draw_message("Le système est à l'état suivant : \n")
    system.draw_on(screen)
    screen.draw_message("\n")

    for _ in range(15):
        system.evolve(1, screen)
        system.draw_on(screen)
        screen.draw_message(SEPARATOR)

    system.clear()
    screen.draw_message(
        "Après vidage, le système contient les particules suivantes :\n"
    )
    system.draw_on(screen)


def main(argv: list[str] | None = None) -> int:
    """Run the text demo on standard output."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())