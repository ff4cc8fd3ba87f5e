from __future__ import annotations

from .coords import Axial, Cube
from .numeric import T


def hex_distance_cube(a: Cube[T], b: Cube[T]) -> T:
    return a.distance(b)


def hex_distance_axial(a: Axial[T], b: Axial[T]) -> T:
    return a.distance(b)
