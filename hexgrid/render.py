"""Turn projected hex corners into something a display can draw.

The coordinate algebra works in a unit-width, y-up model space. The helpers
here scale and translate those points onto a ``width x height`` surface with
``y`` pointing down, and stroke closed outlines onto a character grid that
Rich (and therefore Textual) can render.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field
from rich.style import Style
from rich.text import Text

from .coords import Axial, Cube

logger = logging.getLogger(__name__)

Point = tuple[float, float]
Grid = list[list[bool]]


class RenderSettings(BaseModel):
    """Output surface parameters shared by the drawing helpers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(default=500, ge=1)
    height: int = Field(default=500, ge=1)
    # Fraction of the half extent covered by one unit of model space.
    hex_scale: float = Field(default=0.1, gt=0.0)
    # Terminal cells are roughly twice as tall as they are wide.
    cell_aspect: float = Field(default=1.0, gt=0.0)
    stroke_char: str = Field(default="*", min_length=1, max_length=1)

    @property
    def half_extent(self) -> float:
        """Half of the shorter side of the surface."""

        return 0.5 * min(self.width, self.height)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RenderSettings:
        """Validate a plain mapping, e.g. one decoded from JSON.

        Raises:
            pydantic.ValidationError: unknown keys or out-of-range values.
        """

        settings = cls.model_validate(dict(data))
        logger.debug("loaded render settings %s", settings)
        return settings


def scale_point(point: Point, settings: RenderSettings) -> Point:
    """Map a model-space point onto the output surface."""

    x, y = point
    dim = settings.half_extent
    return (
        0.5 * settings.width + x * settings.hex_scale * settings.cell_aspect * dim,
        0.5 * settings.height - y * settings.hex_scale * dim,
    )


def hex_outline(coord: Axial[Any] | Cube[Any], settings: RenderSettings) -> list[Point]:
    """Closed outline of ``coord`` in surface space.

    The first corner is repeated at the end so consecutive pairs are edges.
    """

    points = [scale_point(corner, settings) for corner in coord.cartesian_corners()]
    points.append(points[0])
    return points


def _plot(grid: Grid, x: int, y: int) -> None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        grid[y][x] = True


def _line(grid: Grid, start: Point, end: Point) -> None:
    x1, y1 = int(round(start[0])), int(round(start[1]))
    x2, y2 = int(round(end[0])), int(round(end[1]))

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    while True:
        _plot(grid, x1, y1)
        if x1 == x2 and y1 == y2:
            break
        e2 = err * 2
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy


def rasterize(coords: Iterable[Axial[Any] | Cube[Any]], settings: RenderSettings) -> Grid:
    """Stroke the outline of every cell onto a ``height x width`` grid.

    Points that fall outside the surface are clipped.
    """

    grid: Grid = [[False] * settings.width for _ in range(settings.height)]
    for coord in coords:
        outline = hex_outline(coord, settings)
        for start, end in zip(outline, outline[1:]):
            _line(grid, start, end)
    return grid


def render_text(
    coords: Iterable[Axial[Any] | Cube[Any]],
    settings: RenderSettings,
    *,
    style: Style | str | None = None,
) -> Text:
    """Rasterize ``coords`` into a Rich :class:`~rich.text.Text`."""

    grid = rasterize(coords, settings)
    rows = ["".join(settings.stroke_char if cell else " " for cell in row) for row in grid]
    return Text("\n".join(rows), style=style or "")


__all__ = [
    "Grid",
    "Point",
    "RenderSettings",
    "hex_outline",
    "rasterize",
    "render_text",
    "scale_point",
]
