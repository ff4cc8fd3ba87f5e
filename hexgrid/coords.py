"""Axial and cube coordinates for flat-topped hex grids.

``Axial`` is the primary, transparent representation: any ``(q, r)`` pair is a
valid cell. ``Cube`` is redundant (``x + y + z == 0``) but makes the distance
metric symmetric, so the invariant is checked on construction and the fields
are read-only afterwards.

Both types are generic over the numeric field type of their components.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterator

from .directions import Direction
from .errors import CubeInvariantError
from .geometry import axial_to_cartesian, corners_around
from .numeric import FloatType, T, halve, sums_to_zero

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Axial(Generic[T]):
    q: T  # grows north-east
    r: T  # grows north

    @classmethod
    def origin(cls) -> Axial[int]:
        return cls(0, 0)

    def __add__(self, other: Axial[T]) -> Axial[T]:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Axial[T]) -> Axial[T]:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q - other.q, self.r - other.r)

    def to_axial(self) -> Axial[T]:
        return self

    def to_cube(self) -> Cube[T]:
        """Total conversion: ``x = q``, ``z = r``, ``y = -q - r``."""

        return Cube.unchecked(self.q, -self.q - self.r, self.r)

    def neighbor(self, direction: Direction) -> Axial[T]:
        """Return the cell one step away in ``direction``."""

        dq, dr = direction.offset
        return Axial(self.q + dq, self.r + dr)

    def neighbors(self) -> Iterator[Axial[T]]:
        """Yield the six adjacent cells in direction-index order."""

        for direction in Direction:
            yield self.neighbor(direction)

    def distance(self, other: Axial[T]) -> T:
        """Number of single steps between two cells."""

        return self.to_cube().distance(other.to_cube())

    def cartesian_center(self, float_type: FloatType[Any] = float) -> tuple[Any, Any]:
        """Center of this cell for hexes of unit width.

        ``float_type`` converts the components and the geometric constants,
        e.g. ``float``, ``numpy.float32`` or ``decimal.Decimal``.
        """

        return axial_to_cartesian(self.q, self.r, float_type)

    def cartesian_corners(self, float_type: FloatType[Any] = float) -> list[tuple[Any, Any]]:
        """The six vertices of this cell, counter-clockwise from the east."""

        x, y = self.cartesian_center(float_type)
        return corners_around(x, y, float_type)


@dataclass(frozen=True, slots=True)
class Cube(Generic[T]):
    """Cube coordinate with the invariant ``x + y + z == 0``.

    ``Cube(x, y, z)`` raises :class:`~hexgrid.errors.CubeInvariantError` when
    the invariant does not hold (within rounding error for floating-point
    components). Use :meth:`unchecked` only when the invariant
    is already known to hold; operations on an invalid value do not raise but
    their results are meaningless.
    """

    x: T
    y: T
    z: T

    def __post_init__(self) -> None:
        self._check_invariant()

    def _check_invariant(self) -> None:
        if not sums_to_zero(self.x, self.y, self.z):
            logger.debug("rejecting cube coordinate (%r, %r, %r)", self.x, self.y, self.z)
            raise CubeInvariantError(self.x, self.y, self.z)

    @classmethod
    def unchecked(cls, x: T, y: T, z: T) -> Cube[T]:
        """Build a cube coordinate without checking the invariant."""

        cube = object.__new__(cls)
        object.__setattr__(cube, "x", x)
        object.__setattr__(cube, "y", y)
        object.__setattr__(cube, "z", z)
        return cube

    @classmethod
    def origin(cls) -> Cube[int]:
        return cls.unchecked(0, 0, 0)

    def coords(self) -> tuple[T, T, T]:
        return self.x, self.y, self.z

    def __add__(self, other: Cube[T]) -> Cube[T]:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube.unchecked(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Cube[T]) -> Cube[T]:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube.unchecked(self.x - other.x, self.y - other.y, self.z - other.z)

    def _axial_view(self) -> Axial[T]:
        return Axial(self.x, self.z)

    def to_axial(self) -> Axial[T]:
        """Convert to axial form, re-checking the invariant."""

        self._check_invariant()
        return self._axial_view()

    def to_cube(self) -> Cube[T]:
        return self

    def distance(self, other: Cube[T]) -> T:
        """Half the Manhattan distance in cube space."""

        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        dz = abs(self.z - other.z)
        return halve(dx + dy + dz)

    def neighbor(self, direction: Direction) -> Cube[T]:
        return self._axial_view().neighbor(direction).to_cube()

    def neighbors(self) -> Iterator[Cube[T]]:
        for direction in Direction:
            yield self.neighbor(direction)

    def cartesian_center(self, float_type: FloatType[Any] = float) -> tuple[Any, Any]:
        return self._axial_view().cartesian_center(float_type)

    def cartesian_corners(self, float_type: FloatType[Any] = float) -> list[tuple[Any, Any]]:
        return self._axial_view().cartesian_corners(float_type)


__all__ = ["Axial", "Cube"]
