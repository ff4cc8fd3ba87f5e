"""Coordinate algebra for flat-topped hexagonal grids.

Axial ``(q, r)`` and cube ``(x, y, z)`` coordinates, stepping between
neighboring cells, grid distance, and projection of cell centers and corners
into Cartesian space. The approach follows the Red Blob Games write-up on hex
grids: https://www.redblobgames.com/grids/hexagons/
"""

from .conversions import axial_to_cube, cube_to_axial
from .coords import Axial, Cube
from .directions import AXIAL_OFFSETS, Direction
from .distance import hex_distance_axial, hex_distance_cube
from .errors import CubeInvariantError, DirectionError, HexGridError
from .geometry import (
    CORNER_OFFSETS,
    SQRT3,
    cartesian_center,
    cartesian_corner_array,
    cartesian_centers,
    cartesian_corners,
)
from .neighbors import neighbor_axial, neighbor_cube, neighbors_axial, neighbors_cube, walk

__version__ = "0.1.0"

__all__ = [
    "AXIAL_OFFSETS",
    "Axial",
    "CORNER_OFFSETS",
    "Cube",
    "CubeInvariantError",
    "Direction",
    "DirectionError",
    "HexGridError",
    "SQRT3",
    "__version__",
    "axial_to_cube",
    "cartesian_center",
    "cartesian_corner_array",
    "cartesian_centers",
    "cartesian_corners",
    "cube_to_axial",
    "hex_distance_axial",
    "hex_distance_cube",
    "neighbor_axial",
    "neighbor_cube",
    "neighbors_axial",
    "neighbors_cube",
    "walk",
]
