"""Geometry of the unit sphere used to draw bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SphereMesh:
    """Vertices of a unit sphere and the index lists that connect them.

    ``top_fan`` and ``bottom_fan`` are triangle fans closing the poles;
    ``quads`` lists four indices per quadrilateral of the body.
    """

    positions: tuple[tuple[float, float, float], ...]
    top_fan: tuple[int, ...]
    quads: tuple[int, ...]
    bottom_fan: tuple[int, ...]

    @property
    def vertex_count(self) -> int:
        return len(self.positions)


def sphere_mesh(slices: int = 25, stacks: int = 25) -> SphereMesh:
    """Build a unit sphere mesh with the given numbers of slices and stacks."""
    if slices < 1:
        raise ValueError("slices must be at least 1")
    if stacks < 2:
        raise ValueError("stacks must be at least 2")

    size = 2 + slices * (stacks - 1)
    alpha = math.pi / stacks
    beta = 2.0 * math.pi / slices

    positions = [(0.0, 0.0, 1.0)]
    for i in range(1, stacks):
        r = math.sin(i * alpha)
        z = math.cos(i * alpha)
        positions.extend(
            (math.cos(j * beta) * r, math.sin(j * beta) * r, z) for j in range(slices)
        )
    positions.append((0.0, 0.0, -1.0))

    top_fan = [*range(slices + 1), 1]

    quads = []
    for i in range(stacks - 2):
        for j in range(slices):
            nxt = (j + 1) % slices
            quads.extend(
                (
                    1 + i * slices + j,
                    1 + (i + 1) * slices + j,
                    1 + (i + 1) * slices + nxt,
                    1 + i * slices + nxt,
                )
            )

    bottom_fan = [size - i for i in range(1, slices + 2)]
    bottom_fan.append(size - 2)

    return SphereMesh(tuple(positions), tuple(top_fan), tuple(quads), tuple(bottom_fan))