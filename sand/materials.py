"""
Material definitions and the id -> definition registry.

A material is pure data: weight decides displacement, horizontal spread and
vertical bias decide the ordered list of offsets a cell tries each step.
Ids are dense and start at 1 so lookup is a tuple index.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence

import numpy as np

from sand.constants import BACKGROUND_COLOR, BACKGROUND_ID, DOWN

logger = logging.getLogger(__name__)

Offset = tuple[int, int]
Color = tuple[int, int, int]


def build_movement_candidates(horizontal_spread: int, vertical_bias: int) -> tuple[Offset, ...]:
    """
    Ordered offsets: down, down-right, down-left, then (+d, 0), (-d, 0) for d = 1..spread.
    Spread 0 and bias 0 means static (empty tuple).
    """
    if horizontal_spread < 0:
        raise ValueError(f"horizontal_spread must be >= 0, got {horizontal_spread}")
    if horizontal_spread == 0 and vertical_bias == 0:
        return ()
    candidates = [DOWN, (1, vertical_bias), (-1, vertical_bias)]
    for distance in range(1, horizontal_spread + 1):
        candidates.append((distance, 0))
        candidates.append((-distance, 0))
    return tuple(candidates)


@dataclass(frozen=True)
class MaterialDefinition:
    name: str
    weight: int
    horizontal_spread: int
    vertical_bias: int
    color: Color
    movement_candidates: tuple[Offset, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "movement_candidates",
            build_movement_candidates(self.horizontal_spread, self.vertical_bias),
        )

    @property
    def is_static(self) -> bool:
        return not self.movement_candidates


class MaterialPreset(Enum):
    """Stock materials: (name, weight, horizontal_spread, vertical_bias, color)."""

    SAND = ("Sand", 5, 0, 5, (253, 249, 0))
    WATER = ("Water", 2, 5, 1, (0, 121, 241))
    ROCK = ("Rock", 10, 0, 0, (130, 130, 130))

    def definition(self) -> MaterialDefinition:
        name, weight, spread, bias, color = self.value
        return MaterialDefinition(name, weight, spread, bias, color)


class MaterialRegistry:
    """Immutable id -> MaterialDefinition table. Id 0 is the background and is never registered."""

    __slots__ = ("_defs", "_by_name", "palette", "background_color")

    def __init__(
        self,
        definitions: Sequence[MaterialDefinition],
        background_color: Color = BACKGROUND_COLOR,
    ) -> None:
        # Slot 0 holds None so that by_id is a plain index.
        self._defs: tuple[MaterialDefinition | None, ...] = (None, *definitions)
        self._by_name = {d.name.lower(): i for i, d in enumerate(definitions, start=1)}
        self.background_color = tuple(background_color)
        palette = np.zeros((len(self._defs), 3), dtype=np.uint8)
        palette[BACKGROUND_ID] = self.background_color
        for i, d in enumerate(definitions, start=1):
            palette[i] = d.color
        palette.setflags(write=False)
        self.palette = palette

    def by_id(self, material_id: int) -> MaterialDefinition | None:
        if 0 <= material_id < len(self._defs):
            return self._defs[material_id]
        return None

    def color_of(self, material_id: int) -> Color:
        d = self.by_id(material_id)
        return d.color if d is not None else self.background_color

    def id_of(self, name: str) -> int | None:
        return self._by_name.get(name.lower())

    def ids(self) -> list[int]:
        return list(range(1, len(self._defs)))

    def definitions(self) -> tuple[MaterialDefinition | None, ...]:
        """Dense table indexed by id; entry 0 is None. For hot loops."""
        return self._defs

    def __len__(self) -> int:
        return len(self._defs) - 1

    def __iter__(self) -> Iterator[tuple[int, MaterialDefinition]]:
        for i in range(1, len(self._defs)):
            yield i, self._defs[i]


def new_registry(
    material_defs: Sequence[MaterialDefinition | tuple],
    background_color: Color = BACKGROUND_COLOR,
) -> MaterialRegistry:
    """
    Build a registry with ids 1..n in the given order. Entries are MaterialDefinitions
    or (weight, horizontal_spread, vertical_bias, color[, name]) tuples.
    """
    definitions = []
    for i, entry in enumerate(material_defs, start=1):
        if isinstance(entry, MaterialDefinition):
            definitions.append(entry)
            continue
        weight, spread, bias, color, *rest = entry
        name = rest[0] if rest else f"Material {i}"
        definitions.append(MaterialDefinition(name, int(weight), int(spread), int(bias), tuple(color)))
    registry = MaterialRegistry(definitions, background_color)
    logger.info(
        "Material registry created: %s",
        ", ".join(f"{i}={d.name}" for i, d in registry),
    )
    return registry


def default_registry() -> MaterialRegistry:
    """Sand=1, Water=2, Rock=3."""
    return new_registry([p.definition() for p in MaterialPreset])
