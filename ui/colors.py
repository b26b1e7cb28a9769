"""
Color projection: id grid -> RGB buffer. Palette row i is material i's color, row 0 the
background. Ids the registry does not know project to the background color.
"""

from typing import Callable

import numpy as np

from sand.grid import Grid
from sand.materials import MaterialRegistry


def cells_to_rgb(grid: Grid, registry: MaterialRegistry) -> np.ndarray:
    """Returns (height, width, 3) uint8 RGB."""
    palette = registry.palette
    ids = grid.cells
    safe = np.where(ids < len(palette), ids, 0)
    return palette[safe]


def for_each_cell(
    grid: Grid,
    registry: MaterialRegistry,
    fn: Callable[[int, int, tuple[int, int, int]], None],
) -> None:
    """Call fn(x, y, color) for every cell, row by row."""
    for y in range(grid.height):
        for x in range(grid.width):
            fn(x, y, registry.color_of(int(grid.cells[y, x])))
