"""Read-only snapshots handed to presentation layers."""

from __future__ import annotations

from dataclasses import dataclass

from skyseas.game.core.battle import is_sunk, remaining_ship_count
from skyseas.game.core.models import (
    BOARD_SIZE,
    CELL_COUNT,
    BattleAction,
    Layer,
    Phase,
    UnitKind,
    UnitType,
)
from skyseas.game.core.player import Player
from skyseas.game.core.session import GameSession
from skyseas.game.core.superiority import active_plane_count, has_superiority


@dataclass(frozen=True, slots=True)
class CellView:
    """State of one cell. ``unit`` is ``None`` when empty or hidden."""

    index: int
    unit: UnitType | None
    unit_kind: UnitKind | None
    hit: bool
    miss: bool
    fog: bool


@dataclass(frozen=True, slots=True)
class LayerView:
    """Snapshot of one player's layer."""

    player: int
    layer: Layer
    revealed: bool
    cells: tuple[CellView, ...]

    def cell(self, index: int) -> CellView:
        return self.cells[index]

    def rows(self) -> list[tuple[CellView, ...]]:
        return [self.cells[y * BOARD_SIZE : (y + 1) * BOARD_SIZE] for y in range(BOARD_SIZE)]


@dataclass(frozen=True, slots=True)
class UnitView:
    unit_type: UnitType
    name: str
    kind: UnitKind
    layer: Layer
    size: int
    placed: bool
    cells: tuple[int, ...]
    disabled_turns: int
    sunk: bool


@dataclass(frozen=True, slots=True)
class Scoreboard:
    """Per-player counters, indexed by player."""

    remaining_ships: tuple[int, int]
    active_planes: tuple[int, int]
    superiority: tuple[bool, bool]


@dataclass(frozen=True, slots=True)
class GameView:
    """Phase and per-turn selections."""

    phase: Phase
    player_names: tuple[str, str]
    active_player: int
    setup_player: int
    locked: tuple[bool, bool]
    battle_layer: Layer
    battle_action: BattleAction
    query_used: bool
    winner: int | None


def build_layer_view(
    player_index: int, player: Player, layer: Layer, *, reveal_units: bool = True
) -> LayerView:
    state = player.layer(layer)
    hits = state.hits.tolist()
    misses = state.misses.tolist()
    fog = state.fog.tolist()
    cells: list[CellView] = []
    for index in range(CELL_COUNT):
        unit_type = state.owner(index) if reveal_units else None
        cells.append(
            CellView(
                index=index,
                unit=unit_type,
                unit_kind=player.units[unit_type].kind if unit_type is not None else None,
                hit=hits[index],
                miss=misses[index],
                fog=fog[index],
            )
        )
    return LayerView(player=player_index, layer=layer, revealed=reveal_units, cells=tuple(cells))


def build_unit_views(player: Player) -> list[UnitView]:
    return [
        UnitView(
            unit_type=unit.unit_type,
            name=unit.name,
            kind=unit.kind,
            layer=unit.layer,
            size=unit.spec.size,
            placed=unit.placed,
            cells=unit.cells,
            disabled_turns=unit.disabled_turns,
            sunk=is_sunk(player, unit.unit_type),
        )
        for unit in player.units.values()
    ]


def build_scoreboard(session: GameSession) -> Scoreboard:
    first, second = session.players
    return Scoreboard(
        remaining_ships=(remaining_ship_count(first), remaining_ship_count(second)),
        active_planes=(active_plane_count(first), active_plane_count(second)),
        superiority=(has_superiority(session, 0), has_superiority(session, 1)),
    )


def build_game_view(session: GameSession) -> GameView:
    first, second = session.players
    return GameView(
        phase=session.phase,
        player_names=(first.name, second.name),
        active_player=session.active_player,
        setup_player=session.setup_player,
        locked=(first.locked, second.locked),
        battle_layer=session.battle_layer,
        battle_action=session.battle_action,
        query_used=session.query_used,
        winner=session.winner,
    )
