from __future__ import annotations

from typing import Iterable, Iterator

from .coords import Axial, Cube
from .directions import Direction
from .numeric import T


def neighbor_axial(a: Axial[T], direction: Direction) -> Axial[T]:
    return a.neighbor(direction)


def neighbor_cube(c: Cube[T], direction: Direction) -> Cube[T]:
    return c.neighbor(direction)


def neighbors_axial(a: Axial[T]) -> Iterator[Axial[T]]:
    return a.neighbors()


def neighbors_cube(c: Cube[T]) -> Iterator[Cube[T]]:
    return c.neighbors()


def walk(start: Axial[T] | Cube[T], directions: Iterable[Direction]) -> Axial[T] | Cube[T]:
    """Follow ``directions`` one step at a time from ``start``."""

    current = start
    for direction in directions:
        current = current.neighbor(direction)
    return current
