from __future__ import annotations

import numpy as np

from skyseas.game.core.layer import LayerState
from skyseas.game.core.models import Layer, UnitType


def test_new_layer_is_empty() -> None:
    layer = LayerState(Layer.SEA)
    assert layer.occupancy.shape == (100,)
    assert layer.occupied_count() == 0
    assert not layer.hits.any()
    assert not layer.misses.any()
    assert not layer.fog.any()


def test_claim_owner_and_vacate() -> None:
    layer = LayerState(Layer.SEA)
    layer.claim([12, 13], UnitType.PATROL)
    assert layer.owner(12) is UnitType.PATROL
    assert layer.is_occupied(13)
    assert layer.owner(14) is None

    layer.claim([14], UnitType.CARRIER)
    layer.vacate([12, 13, 14], UnitType.PATROL)
    assert layer.owner(12) is None
    assert layer.owner(14) is UnitType.CARRIER


def test_targeting_markers_and_hit_helpers() -> None:
    layer = LayerState(Layer.AIR)
    layer.hits[[3, 4]] = True
    layer.misses[7] = True
    assert layer.was_targeted(3)
    assert layer.was_targeted(7)
    assert not layer.was_targeted(5)
    assert layer.all_hit([3, 4])
    assert not layer.all_hit([3, 5])
    layer.clear_hits([3, 4])
    assert not layer.was_targeted(3)


def test_as_grid_is_row_major() -> None:
    values = np.arange(100)
    grid = LayerState.as_grid(values)
    assert grid[2, 3] == 23
    assert list(grid[:, 0][:3]) == [0, 10, 20]


def test_bad_array_shapes_are_replaced() -> None:
    layer = LayerState(Layer.SEA, occupancy=np.zeros(5, dtype=np.int16))
    assert layer.occupancy.shape == (100,)
