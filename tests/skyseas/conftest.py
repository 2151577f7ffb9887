from __future__ import annotations

import os
import random

import pytest

from skyseas.game.app.controller import GameController
from skyseas.game.core.models import Coord, Orientation, UnitType
from skyseas.game.core.placement import place_unit_at
from skyseas.game.core.player import Player, new_player
from skyseas.game.core.session import GameSession, create_session
from skyseas.game.core.setup_phase import lock_in
from skyseas.game.infra.config import GameConfig

# Ships on the even rows of the sea grid, planes spread over the air grid.
FLEET_LAYOUT: tuple[tuple[UnitType, Coord, Orientation], ...] = (
    (UnitType.CARRIER, Coord(0, 0), Orientation.HORIZONTAL),  # 0..4
    (UnitType.BATTLESHIP, Coord(0, 2), Orientation.HORIZONTAL),  # 20..23
    (UnitType.SUBMARINE, Coord(0, 4), Orientation.HORIZONTAL),  # 40..42
    (UnitType.DESTROYER, Coord(0, 6), Orientation.HORIZONTAL),  # 60..62
    (UnitType.PATROL, Coord(0, 8), Orientation.HORIZONTAL),  # 80, 81
    (UnitType.FIGHTER, Coord(0, 0), Orientation.HORIZONTAL),  # 0, 1, 10
    (UnitType.BOMBER, Coord(0, 3), Orientation.HORIZONTAL),  # 30..33
    (UnitType.RECON, Coord(0, 6), Orientation.HORIZONTAL),  # 60, 61
)

SHIP_CELLS: tuple[int, ...] = (
    0, 1, 2, 3, 4, 20, 21, 22, 23, 40, 41, 42, 60, 61, 62, 80, 81,
)
FIGHTER_CELLS: tuple[int, ...] = (0, 1, 10)


def place_fleet(player: Player) -> None:
    for unit_type, origin, orientation in FLEET_LAYOUT:
        place_unit_at(player, unit_type, origin, orientation)


def place_fleet_via(controller: GameController, player_index: int) -> None:
    for unit_type, origin, orientation in FLEET_LAYOUT:
        result = controller.place_unit(player_index, unit_type, origin, orientation)
        assert result.ok, result


@pytest.fixture(autouse=True)
def _restore_environ():
    # Env-file loaders write to os.environ directly; keep tests isolated.
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def placed_player() -> Player:
    player = new_player("Tester")
    place_fleet(player)
    return player


@pytest.fixture
def battle_session() -> GameSession:
    session = create_session()
    for index, player in enumerate(session.players):
        place_fleet(player)
        lock_in(session, index)
    return session


@pytest.fixture
def controller_factory():
    def _make(seed: int = 1337, log_capacity: int = 80) -> GameController:
        config = GameConfig(seed=seed, log_capacity=log_capacity)
        return GameController(config=config, rng=random.Random(seed))

    return _make


@pytest.fixture
def controller(controller_factory) -> GameController:
    return controller_factory()


@pytest.fixture
def battle_controller(controller_factory) -> GameController:
    controller = controller_factory()
    for index in range(2):
        place_fleet_via(controller, index)
        assert controller.lock_in(index).ok
    return controller


@pytest.fixture
def ship_cells() -> tuple[int, ...]:
    return SHIP_CELLS


@pytest.fixture
def fighter_cells() -> tuple[int, ...]:
    return FIGHTER_CELLS


@pytest.fixture
def fleet_placer():
    return place_fleet_via
