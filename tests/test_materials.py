import dataclasses

import numpy as np
import pytest

from sand.materials import (
    MaterialDefinition,
    MaterialPreset,
    build_movement_candidates,
    new_registry,
)


def test_static_material_has_no_candidates():
    assert build_movement_candidates(0, 0) == ()
    assert MaterialPreset.ROCK.definition().is_static


def test_candidate_order_down_diagonals_then_alternating_horizontal():
    assert build_movement_candidates(2, 1) == (
        (0, 1), (1, 1), (-1, 1),
        (1, 0), (-1, 0),
        (2, 0), (-2, 0),
    )


@pytest.mark.parametrize("spread,bias", [(0, 1), (0, 5), (1, 0), (5, 1), (3, 2)])
def test_candidate_count_is_three_plus_twice_spread(spread, bias):
    candidates = build_movement_candidates(spread, bias)
    assert len(candidates) == 3 + 2 * spread
    assert candidates[0] == (0, 1)
    assert candidates[1] == (1, bias)
    assert candidates[2] == (-1, bias)


def test_negative_spread_rejected():
    with pytest.raises(ValueError):
        build_movement_candidates(-1, 1)


def test_definition_is_immutable():
    d = MaterialPreset.SAND.definition()
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.weight = 1


def test_presets_match_stock_materials():
    sand = MaterialPreset.SAND.definition()
    water = MaterialPreset.WATER.definition()
    assert (sand.weight, sand.horizontal_spread, sand.vertical_bias) == (5, 0, 5)
    assert (water.weight, water.horizontal_spread, water.vertical_bias) == (2, 5, 1)
    assert water.movement_candidates[1] == (1, 1)
    assert sand.movement_candidates[1] == (1, 5)


def test_registry_ids_are_dense_from_one(registry):
    assert registry.ids() == [1, 2, 3]
    assert len(registry) == 3
    assert registry.by_id(1).name == "Sand"
    assert registry.by_id(2).name == "Water"
    assert registry.by_id(3).name == "Rock"


def test_lookup_background_and_unknown_is_none(registry):
    assert registry.by_id(0) is None
    assert registry.by_id(4) is None
    assert registry.by_id(255) is None
    assert registry.by_id(-1) is None


def test_color_of_falls_back_to_background(registry):
    assert registry.color_of(0) == (0, 0, 0)
    assert registry.color_of(99) == (0, 0, 0)
    assert registry.color_of(2) == (0, 121, 241)


def test_id_of_is_case_insensitive(registry):
    assert registry.id_of("water") == 2
    assert registry.id_of("ROCK") == 3
    assert registry.id_of("lava") is None


def test_palette_rows_follow_ids(registry):
    assert registry.palette.shape == (4, 3)
    assert registry.palette.dtype == np.uint8
    assert tuple(registry.palette[0]) == (0, 0, 0)
    assert tuple(registry.palette[1]) == (253, 249, 0)


def test_new_registry_accepts_tuples_and_definitions():
    reg = new_registry([
        (7, 1, 1, (1, 2, 3)),
        MaterialDefinition("Oil", 1, 4, 1, (40, 30, 10)),
    ], background_color=(9, 9, 9))
    assert reg.by_id(1).name == "Material 1"
    assert reg.by_id(1).weight == 7
    assert reg.by_id(2).name == "Oil"
    assert reg.color_of(0) == (9, 9, 9)
    assert [i for i, _ in reg] == [1, 2]
