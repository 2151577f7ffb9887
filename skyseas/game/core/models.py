"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
DISABLE_TURNS = 2
PLAYER_COUNT = 2

DEFAULT_PLAYER_NAMES: tuple[str, str] = ("Player 1", "Player 2")
DEFAULT_PLACEMENT_ATTEMPTS = 800
DEFAULT_LOG_CAPACITY = 80


class Layer(StrEnum):
    """One of the two parallel grids each player owns."""

    SEA = "sea"
    AIR = "air"


class UnitKind(StrEnum):
    """Unit family; ships decide the game, planes decide superiority."""

    SHIP = "ship"
    PLANE = "plane"


class Orientation(StrEnum):
    """Placement orientation. For planes VERTICAL means rotated by 90 degrees."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class UnitType(StrEnum):
    """Fixed unit catalog, in placement order."""

    CARRIER = "carrier"
    BATTLESHIP = "battleship"
    SUBMARINE = "submarine"
    DESTROYER = "destroyer"
    PATROL = "patrol"
    FIGHTER = "fighter"
    BOMBER = "bomber"
    RECON = "recon"

    @property
    def code(self) -> int:
        """Non-zero occupancy code stored in layer arrays."""
        return _UNIT_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> UnitType | None:
        if code == 0:
            return None
        return _UNITS_BY_CODE[code]


_UNIT_CODES: dict[UnitType, int] = {unit: idx for idx, unit in enumerate(UnitType, start=1)}
_UNITS_BY_CODE: dict[int, UnitType] = {code: unit for unit, code in _UNIT_CODES.items()}


class Phase(StrEnum):
    """Top-level game phases."""

    SETUP = "SETUP"
    BATTLE = "BATTLE"
    GAME_OVER = "GAME_OVER"


class BattleAction(StrEnum):
    """Action applied when the active player targets a cell."""

    STRIKE = "STRIKE"
    RECON = "RECON"


class StrikeOutcome(StrEnum):
    """Result of a single strike."""

    HIT = "HIT"
    MISS = "MISS"


class QueryType(StrEnum):
    """Yes/no questions unlocked by air superiority."""

    SHIP_IN_COLUMN = "ship_col"
    SHIP_IN_ROW = "ship_row"
    OCCUPIED_IN_COLUMN = "occ_col"
    OCCUPIED_IN_ROW = "occ_row"

    @property
    def by_column(self) -> bool:
        return self in (QueryType.SHIP_IN_COLUMN, QueryType.OCCUPIED_IN_COLUMN)

    @property
    def ships_only(self) -> bool:
        return self in (QueryType.SHIP_IN_COLUMN, QueryType.SHIP_IN_ROW)


@dataclass(frozen=True, slots=True)
class Coord:
    """Zero-based grid coordinate; x is the column, y the row."""

    x: int
    y: int
