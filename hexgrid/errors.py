"""Exceptions raised by the hex coordinate algebra."""

from __future__ import annotations

from typing import Any


class HexGridError(ValueError):
    """Base class for caller-input errors raised by :mod:`hexgrid`."""


class CubeInvariantError(HexGridError):
    """A cube coordinate whose fields do not satisfy ``x + y + z == 0``.

    The rejected triple is kept on the exception as ``x``, ``y`` and ``z``.
    """

    def __init__(self, x: Any, y: Any, z: Any) -> None:
        super().__init__(x, y, z)
        self.x = x
        self.y = y
        self.z = z

    def __str__(self) -> str:
        return (
            f"cube invariant violation: ({self.x!r}, {self.y!r}, {self.z!r}) "
            f"sums to {self.x + self.y + self.z!r}, expected 0"
        )


class DirectionError(HexGridError):
    """An integer outside ``[0, 6)`` given as a direction index."""

    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return f"direction index out of range: {self.index!r} (expected 0 <= index < 6)"


__all__ = ["CubeInvariantError", "DirectionError", "HexGridError"]
