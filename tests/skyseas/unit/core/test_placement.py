from __future__ import annotations

import random

import pytest

from skyseas.game.core.errors import PlacementExhaustedError, Rejection, ValidationError
from skyseas.game.core.models import Coord, Layer, Orientation, UnitType
from skyseas.game.core.placement import (
    can_place,
    clear_player,
    is_complete,
    place_unit,
    place_unit_at,
    random_place,
)
from skyseas.game.core.player import new_player


def test_place_unit_claims_cells() -> None:
    player = new_player("P")
    assert place_unit(player, UnitType.PATROL, [12, 13]) == (12, 13)
    unit = player.units[UnitType.PATROL]
    assert unit.placed
    assert unit.cells == (12, 13)
    assert player.sea.owner(12) is UnitType.PATROL
    assert player.air.occupied_count() == 0


def test_place_unit_rejects_wrong_size_or_duplicates() -> None:
    player = new_player("P")
    for cells in ([12, 13, 14], [12, 12]):
        with pytest.raises(ValidationError) as exc:
            place_unit(player, UnitType.PATROL, cells)
        assert exc.value.reason is Rejection.INVALID_SHAPE
    assert not player.units[UnitType.PATROL].placed


def test_place_unit_rejects_overlap_without_mutation() -> None:
    player = new_player("P")
    place_unit_at(player, UnitType.CARRIER, Coord(0, 0), Orientation.HORIZONTAL)
    with pytest.raises(ValidationError) as exc:
        place_unit_at(player, UnitType.SUBMARINE, Coord(2, 0), Orientation.VERTICAL)
    assert exc.value.reason is Rejection.OVERLAP
    assert not player.units[UnitType.SUBMARINE].placed
    assert player.sea.occupied_count() == 5


def test_place_unit_rejects_out_of_bounds() -> None:
    player = new_player("P")
    with pytest.raises(ValidationError) as exc:
        place_unit_at(player, UnitType.CARRIER, Coord(8, 0), Orientation.HORIZONTAL)
    assert exc.value.reason is Rejection.OUT_OF_BOUNDS
    with pytest.raises(ValidationError):
        place_unit(player, UnitType.PATROL, [99, 100])
    assert player.sea.occupied_count() == 0


def test_place_unit_rejects_cells_that_do_not_form_the_unit() -> None:
    player = new_player("P")
    for unit_type, cells in (
        (UnitType.PATROL, [0, 99]),
        (UnitType.RECON, [0, 57]),
        (UnitType.DESTROYER, [0, 1, 11]),
        (UnitType.FIGHTER, [0, 1, 2]),
    ):
        with pytest.raises(ValidationError) as exc:
            place_unit(player, unit_type, cells)
        assert exc.value.reason is Rejection.INVALID_SHAPE
        assert not player.units[unit_type].placed
    assert player.sea.occupied_count() == 0
    assert player.air.occupied_count() == 0


def test_place_unit_accepts_any_order_and_rotation() -> None:
    player = new_player("P")
    assert place_unit(player, UnitType.FIGHTER, [56, 45, 55]) == (56, 45, 55)
    assert place_unit(player, UnitType.PATROL, [31, 21]) == (31, 21)
    assert player.air.owner(45) is UnitType.FIGHTER
    assert player.sea.owner(21) is UnitType.PATROL


def test_player_layer_accepts_names() -> None:
    player = new_player("P")
    assert player.layer("sea") is player.sea
    assert player.layer("air") is player.air
    assert player.layer(Layer.AIR) is player.air
    with pytest.raises(ValueError):
        player.layer("space")


def test_ships_and_planes_share_indexes_on_separate_layers() -> None:
    player = new_player("P")
    place_unit(player, UnitType.PATROL, [0, 1])
    place_unit(player, UnitType.RECON, [0, 1])
    assert player.sea.owner(0) is UnitType.PATROL
    assert player.air.owner(0) is UnitType.RECON


def test_moving_a_unit_frees_old_cells() -> None:
    player = new_player("P")
    place_unit(player, UnitType.PATROL, [12, 13])
    place_unit(player, UnitType.PATROL, [13, 14])
    assert player.sea.owner(12) is None
    assert player.sea.owner(13) is UnitType.PATROL
    assert player.sea.owner(14) is UnitType.PATROL
    assert player.units[UnitType.PATROL].cells == (13, 14)


def test_can_place_ignores_the_moving_unit() -> None:
    player = new_player("P")
    place_unit(player, UnitType.PATROL, [12, 13])
    assert not can_place(player.sea, [13, 14])
    assert can_place(player.sea, [13, 14], ignore=UnitType.PATROL)


def test_clear_player_resets_everything(placed_player) -> None:
    placed_player.units[UnitType.BOMBER].disabled_turns = 2
    clear_player(placed_player)
    assert placed_player.sea.occupied_count() == 0
    assert placed_player.air.occupied_count() == 0
    assert not any(unit.placed for unit in placed_player.units.values())
    assert placed_player.units[UnitType.BOMBER].disabled_turns == 0
    assert not is_complete(placed_player)


def test_random_place_places_whole_catalog(seeded_rng: random.Random) -> None:
    player = new_player("P")
    place_unit(player, UnitType.PATROL, [0, 1])
    random_place(player, seeded_rng)
    assert is_complete(player)
    assert player.sea.occupied_count() == 17
    assert player.air.occupied_count() == 9
    for unit in player.units.values():
        layer = player.layer(unit.layer)
        assert all(layer.owner(index) is unit.unit_type for index in unit.cells)


def test_random_place_is_deterministic_for_a_seed() -> None:
    first = new_player("A")
    second = new_player("B")
    random_place(first, random.Random(7))
    random_place(second, random.Random(7))
    assert [u.cells for u in first.units.values()] == [u.cells for u in second.units.values()]


def test_random_place_without_attempts_fails_fatally(seeded_rng: random.Random) -> None:
    with pytest.raises(PlacementExhaustedError):
        random_place(new_player("P"), seeded_rng, attempts=0)
