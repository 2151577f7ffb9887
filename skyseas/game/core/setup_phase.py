"""Setup-phase rules: who may place, and the fixed lock-in order."""

from __future__ import annotations

from dataclasses import dataclass

from skyseas.game.core.errors import Rejection, StateError
from skyseas.game.core.models import PLAYER_COUNT, Phase
from skyseas.game.core.phase_flow import advance_phase
from skyseas.game.core.placement import is_complete
from skyseas.game.core.session import GameSession, require_phase


@dataclass(frozen=True, slots=True)
class LockInReport:
    """Outcome of one player locking in their placement."""

    player: int
    next_setup_player: int | None
    battle_started: bool


def require_editable(session: GameSession, player_index: int) -> None:
    """Raise unless *player_index* may still edit placement."""
    require_phase(session, Phase.SETUP)
    if not 0 <= player_index < PLAYER_COUNT:
        raise StateError(Rejection.OUT_OF_ORDER, f"No such player: {player_index}.")
    if session.players[player_index].locked:
        raise StateError(
            Rejection.OUT_OF_ORDER,
            f"{session.players[player_index].name} has already locked in.",
        )


def lock_in(session: GameSession, player_index: int) -> LockInReport:
    """Lock a player's placement; the second lock-in starts the battle."""
    require_editable(session, player_index)
    if player_index != session.setup_player:
        raise StateError(
            Rejection.OUT_OF_ORDER,
            f"{session.players[session.setup_player].name} must lock in first.",
        )
    player = session.players[player_index]
    if not is_complete(player):
        raise StateError(
            Rejection.INCOMPLETE_PLACEMENT,
            "You must place all units before locking in.",
        )

    player.locked = True
    if player_index + 1 < PLAYER_COUNT:
        session.setup_player = player_index + 1
        return LockInReport(player=player_index, next_setup_player=session.setup_player, battle_started=False)

    started = advance_phase(session, "begin_battle")
    if started:
        session.active_player = 0
    return LockInReport(player=player_index, next_setup_player=None, battle_started=started)
