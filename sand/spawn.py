"""Random fills for benchmarks and demos. Seed -1 = new random seed each call.
The generator is always passed in; the stepper itself never draws random numbers."""

import random
from typing import Tuple

from sand.grid import Grid
from sand.materials import MaterialRegistry


def make_rng(seed: int) -> Tuple[random.Random, int]:
    """Return (rng, seed_used). If seed == -1, choose a new random seed."""
    if seed == -1:
        seed_used = random.randint(0, 2**31 - 1)
    else:
        seed_used = seed
    return random.Random(seed_used), seed_used


def spawn_upper_half(
    grid: Grid,
    registry: MaterialRegistry,
    rng: random.Random,
    density: float = 1.0,
) -> int:
    """
    For each cell in rows [0, height // 2), with probability `density` write a
    material id drawn uniformly from the registry. Returns cells written.
    """
    ids = registry.ids()
    if not ids:
        return 0
    density = max(0.0, min(1.0, density))
    written = 0
    cells = grid.cells
    for y in range(grid.height // 2):
        for x in range(grid.width):
            if density < 1.0 and rng.random() >= density:
                continue
            cells[y, x] = rng.choice(ids)
            written += 1
    return written
