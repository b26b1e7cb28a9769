"""Fixed-frame benchmark: spawn the upper half, then step in a tight loop and time it."""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable

from sand.spawn import make_rng, spawn_upper_half
from sand.stepper import Stepper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    frames: int
    elapsed_s: float
    moved: int

    @property
    def steps_per_second(self) -> float:
        return self.frames / self.elapsed_s if self.elapsed_s > 0 else float("inf")


def run_benchmark(
    stepper: Stepper,
    frames: int,
    rng: random.Random | None = None,
    density: float = 1.0,
    clock: Callable[[], float] = time.perf_counter,
) -> BenchmarkResult:
    """Clears the stepper's grid; the caller owns restoring anything it wanted to keep."""
    if frames <= 0:
        raise ValueError(f"frames must be positive, got {frames}")
    if rng is None:
        rng, seed_used = make_rng(-1)
        logger.debug("Benchmark seed %d", seed_used)
    grid = stepper.grid
    grid.clear()
    spawned = spawn_upper_half(grid, stepper.registry, rng, density)
    moved = 0
    start = clock()
    for _ in range(frames):
        moved += stepper.step()
    elapsed = clock() - start
    result = BenchmarkResult(frames=frames, elapsed_s=elapsed, moved=moved)
    logger.info(
        "Benchmark: %d frames on %dx%d (%d cells spawned) in %.3f s (%.1f steps/s)",
        frames, grid.width, grid.height, spawned, elapsed, result.steps_per_second,
    )
    return result
