"""2D grid of material ids. Stored as (height, width) uint8, row-major; y increases downward."""

import numpy as np

from sand.constants import BACKGROUND_ID, DEFAULT_HEIGHT, DEFAULT_WIDTH


class OutOfBoundsError(IndexError):
    """get/set outside [0, width) x [0, height)."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"cell ({x}, {y}) outside grid {width}x{height}")
        self.x, self.y = x, y


class Grid:
    """Fixed-size id field; mutated in place by paint and the stepper."""

    __slots__ = ("width", "height", "background_id", "cells")

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        background_id: int = BACKGROUND_ID,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background_id = background_id
        self.cells = np.full((height, width), background_id, dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return int(self.cells[y, x])

    def set(self, x: int, y: int, material_id: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        self.cells[y, x] = material_id

    def paint(
        self,
        center_x: int,
        center_y: int,
        material_id: int,
        brush_radius: int,
        allow_overwrite: bool,
    ) -> bool:
        """
        Fill the (2r+1)-square around the center, clipped to the grid. Without
        allow_overwrite the whole stroke is skipped unless the center cell is background;
        once the center passes, every cell in the square is written, occupied or not.
        Returns True if anything was written.
        """
        if not allow_overwrite:
            if not self.in_bounds(center_x, center_y):
                return False
            if self.cells[center_y, center_x] != self.background_id:
                return False
        r = max(0, brush_radius)
        x0, x1 = max(0, center_x - r), min(self.width, center_x + r + 1)
        y0, y1 = max(0, center_y - r), min(self.height, center_y + r + 1)
        if x0 >= x1 or y0 >= y1:
            return False
        self.cells[y0:y1, x0:x1] = material_id
        return True

    def clear(self) -> None:
        self.cells.fill(self.background_id)

    def count(self, material_id: int) -> int:
        return int(np.count_nonzero(self.cells == material_id))

    def occupied(self) -> int:
        return int(np.count_nonzero(self.cells != self.background_id))

    def histogram(self) -> dict[int, int]:
        """Non-background id -> cell count."""
        ids, counts = np.unique(self.cells, return_counts=True)
        return {int(i): int(c) for i, c in zip(ids, counts) if i != self.background_id}

    def copy(self) -> "Grid":
        other = Grid(self.width, self.height, self.background_id)
        other.cells[:] = self.cells
        return other
