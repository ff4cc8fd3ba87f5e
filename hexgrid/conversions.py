from __future__ import annotations

from .coords import Axial, Cube
from .numeric import T


def axial_to_cube(a: Axial[T]) -> Cube[T]:
    x = a.q
    z = a.r
    y = -x - z
    return Cube.unchecked(x, y, z)


def cube_to_axial(c: Cube[T]) -> Axial[T]:
    """Raises :class:`~hexgrid.errors.CubeInvariantError` for an invalid ``c``."""

    return c.to_axial()
