"""Cartesian projection of flat-topped hexes.

Hexes are one unit wide (corner to opposite corner) and ``sqrt(3)/2`` units
tall. The model space is right-handed with ``y`` pointing north, so a
renderer drawing onto a y-down surface has to flip ``y`` itself.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np
from numpy.typing import DTypeLike, NDArray

from .numeric import FloatType, sqrt3

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import Axial, Cube

SQRT3 = math.sqrt(3.0)

# Counter-clockwise from the easternmost vertex.
CORNER_OFFSETS: tuple[tuple[float, float], ...] = (
    (0.5, 0.0),
    (0.25, SQRT3 / 4.0),
    (-0.25, SQRT3 / 4.0),
    (-0.5, 0.0),
    (-0.25, -SQRT3 / 4.0),
    (0.25, -SQRT3 / 4.0),
)

# Row vector (q, r) times this matrix gives the center (x, y).
_AXIAL_TO_CARTESIAN = np.array(
    [
        [0.75, SQRT3 / 4.0],
        [0.0, SQRT3 / 2.0],
    ]
)


def axial_to_cartesian(q: Any, r: Any, float_type: FloatType[Any] = float) -> tuple[Any, Any]:
    """Return the center of the hex at axial ``(q, r)``."""

    fq = float_type(q)
    fr = float_type(r)
    x = float_type(0.75) * fq
    y = sqrt3(float_type) / float_type(2) * (fr + float_type(0.5) * fq)
    return x, y


def corners_around(x: Any, y: Any, float_type: FloatType[Any] = float) -> list[tuple[Any, Any]]:
    """Return the six vertices of a unit hex centered at ``(x, y)``."""

    half = float_type(0.5)
    quarter = float_type(0.25)
    rise = sqrt3(float_type) / float_type(4)
    return [
        (x + half, y),
        (x + quarter, y + rise),
        (x - quarter, y + rise),
        (x - half, y),
        (x - quarter, y - rise),
        (x + quarter, y - rise),
    ]


def cartesian_center(coord: Axial | Cube, float_type: FloatType[Any] = float) -> tuple[Any, Any]:
    return coord.cartesian_center(float_type)


def cartesian_corners(
    coord: Axial | Cube, float_type: FloatType[Any] = float
) -> list[tuple[Any, Any]]:
    return coord.cartesian_corners(float_type)


def _axial_array(coords: Iterable[Axial | Cube], dtype: DTypeLike) -> NDArray[Any]:
    pairs = [(a.q, a.r) for a in (c.to_axial() for c in coords)]
    return np.asarray(pairs, dtype=dtype).reshape(-1, 2)


def cartesian_centers(
    coords: Iterable[Axial | Cube], dtype: DTypeLike = np.float64
) -> NDArray[Any]:
    """Project many cells at once.

    Returns an array of shape ``(n, 2)`` holding one ``(x, y)`` center per
    input coordinate, in input order.
    """

    qr = _axial_array(coords, dtype)
    return qr @ _AXIAL_TO_CARTESIAN.astype(dtype)


def cartesian_corner_array(
    coords: Iterable[Axial | Cube], dtype: DTypeLike = np.float64
) -> NDArray[Any]:
    """Corner points for many cells, shape ``(n, 6, 2)``."""

    centers = cartesian_centers(coords, dtype)
    offsets = np.asarray(CORNER_OFFSETS, dtype=dtype)
    return centers[:, np.newaxis, :] + offsets[np.newaxis, :, :]


__all__ = [
    "CORNER_OFFSETS",
    "SQRT3",
    "axial_to_cartesian",
    "cartesian_center",
    "cartesian_corner_array",
    "cartesian_centers",
    "cartesian_corners",
    "corners_around",
]
