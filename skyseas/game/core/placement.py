"""Unit placement validation and orchestration."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from skyseas.game.core.catalog import CATALOG, cells_for, matches_footprint
from skyseas.game.core.errors import (
    PlacementExhaustedError,
    Rejection,
    ValidationError,
)
from skyseas.game.core.geometry import index_in_bounds
from skyseas.game.core.layer import LayerState
from skyseas.game.core.models import (
    BOARD_SIZE,
    DEFAULT_PLACEMENT_ATTEMPTS,
    Coord,
    Layer,
    Orientation,
    UnitType,
)
from skyseas.game.core.player import Player

logger = logging.getLogger(__name__)


def check_placement(
    layer: LayerState, cells: Sequence[int], *, ignore: UnitType | None = None
) -> None:
    """Raise unless every cell is on the grid and free.

    Cells owned by *ignore* count as free so a unit can be moved onto cells it
    already covers.
    """
    for index in cells:
        if not index_in_bounds(index):
            raise ValidationError(Rejection.OUT_OF_BOUNDS, "Placement out of bounds.")
    for index in cells:
        owner = layer.owner(index)
        if owner is not None and owner is not ignore:
            raise ValidationError(
                Rejection.OVERLAP, f"Cannot place there: overlaps {owner.value}."
            )


def can_place(layer: LayerState, cells: Sequence[int], *, ignore: UnitType | None = None) -> bool:
    """Return whether *cells* are a legal placement on *layer*."""
    try:
        check_placement(layer, cells, ignore=ignore)
    except ValidationError:
        return False
    return True


def place_unit(player: Player, unit_type: UnitType, cells: Sequence[int]) -> tuple[int, ...]:
    """Place (or move) a unit onto absolute *cells* and return them."""
    unit = player.units.get(unit_type)
    if unit is None:
        raise ValidationError(Rejection.UNKNOWN_UNIT, f"Unknown unit: {unit_type}.")
    claimed = tuple(cells)
    if len(claimed) != unit.spec.size or len(set(claimed)) != len(claimed):
        raise ValidationError(
            Rejection.INVALID_SHAPE,
            f"{unit.name} needs exactly {unit.spec.size} distinct cells.",
        )
    layer = player.layer(unit.layer)
    check_placement(layer, claimed, ignore=unit_type)
    if not matches_footprint(unit_type, claimed):
        raise ValidationError(
            Rejection.INVALID_SHAPE,
            f"Those cells do not form a {unit.name}.",
        )

    if unit.placed:
        layer.vacate(unit.cells, unit_type)
    layer.claim(claimed, unit_type)
    unit.placed = True
    unit.cells = claimed
    unit.disabled_turns = 0
    return claimed


def place_unit_at(
    player: Player, unit_type: UnitType, origin: Coord, orientation: Orientation
) -> tuple[int, ...]:
    """Place a unit by anchor cell and orientation."""
    return place_unit(player, unit_type, cells_for(unit_type, origin, orientation))


def clear_player(player: Player) -> None:
    """Reset both layers and every unit to unplaced."""
    player.sea = LayerState(Layer.SEA)
    player.air = LayerState(Layer.AIR)
    for unit in player.units.values():
        unit.placed = False
        unit.cells = ()
        unit.disabled_turns = 0


def random_place(
    player: Player, rng: random.Random, attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
) -> None:
    """Clear the player and place the whole catalog at random legal positions."""
    clear_player(player)
    for spec in CATALOG:
        layer = player.layer(spec.layer)
        for _ in range(attempts):
            orientation = rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
            origin = Coord(x=rng.randrange(BOARD_SIZE), y=rng.randrange(BOARD_SIZE))
            try:
                cells = cells_for(spec.unit_type, origin, orientation)
            except ValidationError:
                continue
            if can_place(layer, cells):
                place_unit(player, spec.unit_type, cells)
                break
        else:
            raise PlacementExhaustedError(
                f"Failed to place {spec.unit_type.value} after {attempts} attempts."
            )
    logger.debug("random_place player=%s", player.name)


def is_complete(player: Player) -> bool:
    """Return whether every catalog unit has been placed."""
    return all(unit.placed for unit in player.units.values())
