"""Compass directions across the six edges of a flat-topped hex.

Directions are indexed counter-clockwise starting from north-east::

    NE=0  N=1  NW=2  SW=3  S=4  SE=5

The neighbor offset table below is indexed the same way, so the ordering must
not change.
"""

from __future__ import annotations

import logging
import operator
from enum import Enum
from typing import SupportsIndex

from .errors import DirectionError

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """One of the six edges of a flat-topped hex."""

    NE = "NE"
    N = "N"
    NW = "NW"
    SW = "SW"
    S = "S"
    SE = "SE"

    def to_index(self) -> int:
        """Return the fixed index of this direction in ``[0, 6)``."""

        return _INDEX[self]

    @classmethod
    def from_index(cls, index: SupportsIndex) -> Direction:
        """Return the direction stored at ``index``.

        Raises:
            DirectionError: ``index`` falls outside ``[0, 6)``.
            TypeError: ``index`` is not an integer.
        """

        i = operator.index(index)
        if not 0 <= i < len(_ORDER):
            logger.debug("rejecting direction index %r", i)
            raise DirectionError(i)
        return _ORDER[i]

    @property
    def opposite(self) -> Direction:
        """The direction pointing across the hex."""

        return _ORDER[(_INDEX[self] + 3) % 6]

    @property
    def offset(self) -> tuple[int, int]:
        """Axial ``(dq, dr)`` step for this direction."""

        return AXIAL_OFFSETS[_INDEX[self]]


_ORDER: tuple[Direction, ...] = (
    Direction.NE,
    Direction.N,
    Direction.NW,
    Direction.SW,
    Direction.S,
    Direction.SE,
)

_INDEX: dict[Direction, int] = {d: i for i, d in enumerate(_ORDER)}

# q grows toward the north-east in the projected plane, r toward north.
AXIAL_OFFSETS: tuple[tuple[int, int], ...] = (
    (+1, 0),  # NE
    (0, +1),  # N
    (-1, +1),  # NW
    (-1, 0),  # SW
    (0, -1),  # S
    (+1, -1),  # SE
)


__all__ = ["AXIAL_OFFSETS", "Direction"]
