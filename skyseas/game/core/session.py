"""Runtime game session state."""

from __future__ import annotations

from dataclasses import dataclass

from skyseas.game.core.errors import Rejection, StateError
from skyseas.game.core.models import DEFAULT_PLAYER_NAMES, BattleAction, Layer, Phase
from skyseas.game.core.player import Player, new_player


@dataclass(slots=True)
class GameSession:
    """Everything that changes during one game; owned by a single controller."""

    players: tuple[Player, Player]
    phase: Phase = Phase.SETUP
    active_player: int = 0
    setup_player: int = 0
    battle_layer: Layer = Layer.SEA
    battle_action: BattleAction = BattleAction.STRIKE
    query_used: bool = False
    winner: int | None = None

    @property
    def defender_index(self) -> int:
        return 1 - self.active_player

    @property
    def attacker(self) -> Player:
        return self.players[self.active_player]

    @property
    def defender(self) -> Player:
        return self.players[self.defender_index]


def create_session(names: tuple[str, str] = DEFAULT_PLAYER_NAMES) -> GameSession:
    """Create a fresh session in the setup phase."""
    return GameSession(players=(new_player(names[0]), new_player(names[1])))


def require_phase(session: GameSession, phase: Phase) -> None:
    if session.phase is not phase:
        raise StateError(
            Rejection.WRONG_PHASE,
            f"Not allowed during {session.phase.value}; requires {phase.value}.",
        )
