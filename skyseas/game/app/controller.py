"""Game controller: owns the session and is the only command boundary."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from skyseas.game.app.event_bus import EventBus
from skyseas.game.app.event_log import EventLog, LogEntry
from skyseas.game.app.events import (
    EventKind,
    GameEvent,
    lock_in_events,
    query_event,
    recon_event,
    strike_events,
    turn_events,
)
from skyseas.game.app.results import CommandResult, Rejected, Success
from skyseas.game.app.views import (
    GameView,
    LayerView,
    Scoreboard,
    UnitView,
    build_game_view,
    build_layer_view,
    build_scoreboard,
    build_unit_views,
)
from skyseas.game.core import battle, placement, setup_phase, superiority
from skyseas.game.core.errors import GameRuleError, Rejection, ValidationError
from skyseas.game.core.models import BattleAction, Coord, Layer, Orientation, Phase, QueryType, UnitType
from skyseas.game.core.session import GameSession, create_session, require_phase
from skyseas.game.infra.config import GameConfig

logger = logging.getLogger(__name__)


class GameController:
    """Drives setup and battle for one pass-and-play game at a time."""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._rng = rng or random.Random(self._config.seed)
        self._bus = bus or EventBus()
        self._log = EventLog(self._config.log_capacity)
        self._log.attach(self._bus)
        self._session = create_session(self._config.player_names)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def bus(self) -> EventBus:
        return self._bus

    # --- queries -----------------------------------------------------------

    def game_view(self) -> GameView:
        return build_game_view(self._session)

    def layer_view(
        self, player_index: int, layer: Layer | str, *, reveal_units: bool = True
    ) -> LayerView:
        return build_layer_view(
            player_index, self._session.players[player_index], Layer(layer), reveal_units=reveal_units
        )

    def target_view(self) -> LayerView:
        """Defender's selected battle layer as the attacker may see it."""
        session = self._session
        return self.layer_view(session.defender_index, session.battle_layer, reveal_units=False)

    def unit_views(self, player_index: int) -> list[UnitView]:
        return build_unit_views(self._session.players[player_index])

    def remaining_ship_count(self, player_index: int) -> int:
        return battle.remaining_ship_count(self._session.players[player_index])

    def active_plane_count(self, player_index: int) -> int:
        return superiority.active_plane_count(self._session.players[player_index])

    def has_superiority(self, player_index: int) -> bool:
        return superiority.has_superiority(self._session, player_index)

    def scoreboard(self) -> Scoreboard:
        return build_scoreboard(self._session)

    def log_entries(self) -> list[LogEntry]:
        return self._log.entries()

    # --- setup commands ----------------------------------------------------

    def start_new_game(self) -> CommandResult:
        """Discard the current session and start over in setup."""

        def run() -> Success:
            self._session = create_session(self._config.player_names)
            self._log.clear()
            return Success(GameEvent(kind=EventKind.GAME_STARTED))

        return self._execute("start_new_game", run)

    def place_unit(
        self,
        player_index: int,
        unit_type: UnitType | str,
        origin: Coord,
        orientation: Orientation,
    ) -> CommandResult:
        """Place or move a unit by anchor cell and orientation."""

        def run() -> Success:
            setup_phase.require_editable(self._session, player_index)
            kind = _unit_type(unit_type)
            cells = placement.place_unit_at(
                self._session.players[player_index], kind, origin, orientation
            )
            return Success(self._placed_event(player_index, kind), cells=cells)

        return self._execute("place_unit", run)

    def place_unit_cells(
        self, player_index: int, unit_type: UnitType | str, cells: Sequence[int]
    ) -> CommandResult:
        """Place or move a unit onto explicit absolute cells."""

        def run() -> Success:
            setup_phase.require_editable(self._session, player_index)
            kind = _unit_type(unit_type)
            claimed = placement.place_unit(self._session.players[player_index], kind, cells)
            return Success(self._placed_event(player_index, kind), cells=claimed)

        return self._execute("place_unit_cells", run)

    def random_place(self, player_index: int) -> CommandResult:
        def run() -> Success:
            setup_phase.require_editable(self._session, player_index)
            placement.random_place(
                self._session.players[player_index],
                self._rng,
                attempts=self._config.placement_attempts,
            )
            return Success(GameEvent(kind=EventKind.PLACEMENT_RANDOMIZED, actor=player_index))

        return self._execute("random_place", run)

    def clear_player(self, player_index: int) -> CommandResult:
        def run() -> Success:
            setup_phase.require_editable(self._session, player_index)
            placement.clear_player(self._session.players[player_index])
            return Success(GameEvent(kind=EventKind.PLACEMENT_CLEARED, actor=player_index))

        return self._execute("clear_player", run)

    def lock_in(self, player_index: int) -> CommandResult:
        def run() -> Success:
            report = setup_phase.lock_in(self._session, player_index)
            return Success.of(lock_in_events(report))

        return self._execute("lock_in", run)

    # --- battle commands ---------------------------------------------------

    def select_battle_layer(self, layer: Layer | str) -> CommandResult:
        def run() -> Success:
            require_phase(self._session, Phase.BATTLE)
            selected = _layer(layer)
            self._session.battle_layer = selected
            return Success(
                GameEvent(kind=EventKind.LAYER_SELECTED, actor=self._session.active_player, layer=selected)
            )

        return self._execute("select_battle_layer", run)

    def select_action(self, action: BattleAction | str) -> CommandResult:
        def run() -> Success:
            require_phase(self._session, Phase.BATTLE)
            selected = _action(action)
            self._session.battle_action = selected
            return Success(
                GameEvent(
                    kind=EventKind.ACTION_SELECTED,
                    actor=self._session.active_player,
                    outcome=selected.value,
                )
            )

        return self._execute("select_action", run)

    def strike(self, index: int, layer: Layer | str | None = None) -> CommandResult:
        """Strike a cell on the defender's layer (default: the selected one)."""

        def run() -> Success:
            target = self._session.battle_layer if layer is None else _layer(layer)
            return Success.of(strike_events(battle.strike(self._session, target, index)))

        return self._execute("strike", run)

    def recon(self, index: int, layer: Layer | str | None = None) -> CommandResult:
        def run() -> Success:
            target = self._session.battle_layer if layer is None else _layer(layer)
            return Success(recon_event(battle.recon(self._session, target, index)))

        return self._execute("recon", run)

    def act(self, index: int) -> CommandResult:
        """Apply the selected action to *index* on the selected layer."""
        if self._session.battle_action is BattleAction.RECON:
            return self.recon(index)
        return self.strike(index)

    def ask_query(self, query: QueryType | str, raw_value: str) -> CommandResult:
        def run() -> Success:
            try:
                kind = QueryType(query)
            except ValueError:
                raise ValidationError(
                    Rejection.INVALID_QUERY_INPUT, f"Unknown question type: {query}."
                ) from None
            return Success(query_event(superiority.ask_query(self._session, kind, raw_value)))

        return self._execute("ask_query", run)

    def end_turn(self) -> CommandResult:
        def run() -> Success:
            return Success.of(turn_events(battle.end_turn(self._session)))

        return self._execute("end_turn", run)

    # --- helpers -----------------------------------------------------------

    def _execute(self, command: str, run: Callable[[], Success]) -> CommandResult:
        try:
            result = run()
        except GameRuleError as exc:
            logger.info(
                "command_rejected command=%s reason=%s",
                command,
                exc.reason.value,
                extra={"command": command, "reason": exc.reason.value, "detail": exc.message},
            )
            return Rejected(reason=exc.reason, message=exc.message)

        logger.debug("command_accepted command=%s", command, extra={"command": command})
        for event in result.events:
            self._bus.publish(event)
        return result

    @staticmethod
    def _placed_event(player_index: int, unit_type: UnitType) -> GameEvent:
        # Published to every listener: carries no layer or cells.
        return GameEvent(kind=EventKind.UNIT_PLACED, actor=player_index, unit=unit_type)


def _unit_type(value: UnitType | str) -> UnitType:
    try:
        return UnitType(value)
    except ValueError:
        raise ValidationError(Rejection.UNKNOWN_UNIT, f"Unknown unit: {value}.") from None


def _layer(value: Layer | str) -> Layer:
    try:
        return Layer(value)
    except ValueError:
        raise ValidationError(Rejection.INVALID_SELECTION, f"Unknown layer: {value}.") from None


def _action(value: BattleAction | str) -> BattleAction:
    try:
        return BattleAction(value)
    except ValueError:
        raise ValidationError(Rejection.INVALID_SELECTION, f"Unknown action: {value}.") from None
