"""
Per-frame update: one sweep over every column, bottom row first, alternating column
direction each step. Each occupied cell tries its material's offsets in order and takes
the first one that is empty or holds a strictly lighter material (swap).
"""

import numpy as np

from sand.grid import Grid
from sand.materials import MaterialRegistry


class Stepper:
    """Owns the sweep-direction flag; the grid is shared and mutated in place."""

    __slots__ = ("grid", "registry", "_even", "_arrived", "frame")

    def __init__(self, grid: Grid, registry: MaterialRegistry) -> None:
        self.grid = grid
        self.registry = registry
        self._even = False
        # Cells that received a mover during the current step.
        self._arrived = np.zeros((grid.height, grid.width), dtype=bool)
        self.frame = 0

    @property
    def sweeps_ascending(self) -> bool:
        """Direction used by the most recent step (False before the first step)."""
        return self._even

    def column_order(self) -> range:
        """Columns in the order the next step() will visit them."""
        w = self.grid.width
        return range(w) if not self._even else range(w - 1, -1, -1)

    def step(self) -> int:
        """Advance one frame. Returns the number of cells that moved."""
        self._even = not self._even
        grid = self.grid
        cells = grid.cells
        w, h = grid.width, grid.height
        background = grid.background_id
        defs = self.registry.definitions()
        n_defs = len(defs)
        arrived = self._arrived
        arrived.fill(False)
        columns = range(w) if self._even else range(w - 1, -1, -1)
        moved = 0

        for x in columns:
            for y in range(h - 1, -1, -1):
                if arrived[y, x]:
                    continue
                current = int(cells[y, x])
                if current == background or current >= n_defs:
                    continue
                material = defs[current]
                if material is None:
                    continue
                for dx, dy in material.movement_candidates:
                    nx, ny = x + dx, y + dy
                    if not (0 <= nx < w and 0 <= ny < h):
                        continue
                    target = int(cells[ny, nx])
                    if target == background:
                        cells[y, x] = background
                        cells[ny, nx] = current
                    else:
                        target_def = defs[target] if target < n_defs else None
                        if target_def is None or target_def.weight >= material.weight:
                            continue
                        cells[y, x] = target
                        cells[ny, nx] = current
                    arrived[ny, nx] = True
                    moved += 1
                    break

        self.frame += 1
        return moved
