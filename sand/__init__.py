"""Sand: material registry, id grid and the per-frame stepper."""

from sand.grid import Grid, OutOfBoundsError
from sand.materials import (
    MaterialDefinition,
    MaterialPreset,
    MaterialRegistry,
    build_movement_candidates,
    default_registry,
    new_registry,
)
from sand.stepper import Stepper
from sand.spawn import make_rng, spawn_upper_half
from sand.constants import BACKGROUND_ID, BACKGROUND_COLOR, DEFAULT_WIDTH, DEFAULT_HEIGHT

__all__ = [
    "Grid",
    "OutOfBoundsError",
    "MaterialDefinition",
    "MaterialPreset",
    "MaterialRegistry",
    "build_movement_candidates",
    "default_registry",
    "new_registry",
    "Stepper",
    "make_rng",
    "spawn_upper_half",
    "BACKGROUND_ID",
    "BACKGROUND_COLOR",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
]
