"""A canvas that prints the solar simulation as text, and the text demo."""

from __future__ import annotations

import sys
from typing import TextIO

from astrosim.solar.body import Body, Canvas
from astrosim.solar.system import SolarSystem

SEPARATOR = "\n--------------------------------------------\n"


class TextViewer(Canvas):
    """Writes messages to a text stream; bodies have no text form."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = sys.stdout if stream is None else stream

    def draw_body(self, body: Body) -> None:
        """Bodies are not shown in text."""

    def draw_message(self, message: str) -> None:
        self._stream.write(f"{message}\n")


def run_demo(stream: TextIO | None = None) -> None:
    """Run fifteen steps of an empty solar system, printing each state."""
    screen = TextViewer(stream)
    system = SolarSystem(1)

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