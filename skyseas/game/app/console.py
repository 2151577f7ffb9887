"""Minimal text front end for pass-and-play on one terminal."""

from __future__ import annotations

import logging
from typing import TextIO

from skyseas.game.app.console_commands import (
    HELP_TEXT,
    ActionCommand,
    AskCommand,
    ClearCommand,
    CommandParseError,
    ConsoleCommand,
    EndTurnCommand,
    FireCommand,
    HelpCommand,
    LayerCommand,
    LockCommand,
    NewGameCommand,
    PlaceCommand,
    QuitCommand,
    RandomCommand,
    ReconCommand,
    ShowCommand,
    TargetCommand,
    parse_command,
)
from skyseas.game.app.controller import GameController
from skyseas.game.app.events import EventKind, GameEvent
from skyseas.game.app.results import CommandResult, Rejected
from skyseas.game.app.views import CellView, LayerView
from skyseas.game.core.geometry import cell_name, column_label
from skyseas.game.core.models import BOARD_SIZE, DISABLE_TURNS, Layer, Phase, UnitKind

logger = logging.getLogger(__name__)


def cell_symbol(cell: CellView) -> str:
    if cell.hit:
        return "X"
    if cell.fog:
        return "~"
    if cell.miss:
        return "o"
    if cell.unit_kind is UnitKind.SHIP:
        return "S"
    if cell.unit_kind is UnitKind.PLANE:
        return "P"
    return "."


def render_layer(view: LayerView, title: str) -> str:
    """Render a layer as a labelled text grid."""
    header = "    " + " ".join(column_label(x) for x in range(BOARD_SIZE))
    lines = [title, header]
    for y, row in enumerate(view.rows()):
        lines.append(f"{y + 1:>3} " + " ".join(cell_symbol(cell) for cell in row))
    return "\n".join(lines)


def describe_event(event: GameEvent, names: tuple[str, str]) -> str:
    """Word an event for the console log."""
    actor = names[event.actor] if event.actor is not None else ""
    unit = event.unit.value if event.unit is not None else "unit"
    where = ""
    if event.layer is not None and event.cell is not None:
        where = f"{event.layer.value.upper()} {cell_name(event.cell)}"

    kind = event.kind
    if kind is EventKind.GAME_STARTED:
        return "New game started."
    if kind is EventKind.UNIT_PLACED:
        return f"{actor} placed their {unit}."
    if kind is EventKind.PLACEMENT_RANDOMIZED:
        return f"{actor} randomized placement."
    if kind is EventKind.PLACEMENT_CLEARED:
        return f"{actor} cleared placement."
    if kind is EventKind.LOCKED_IN:
        return f"{actor} locked in."
    if kind is EventKind.BATTLE_STARTED:
        return "Battle begins!"
    if kind is EventKind.LAYER_SELECTED and event.layer is not None:
        return f"{actor} targets the {event.layer.value.upper()} grid."
    if kind is EventKind.ACTION_SELECTED:
        return f"{actor} selects {event.outcome}."
    if kind is EventKind.STRIKE:
        unit_kind = event.data.get("unit_kind")
        suffix = f" ({str(unit_kind).upper()})" if unit_kind else " (Fog placed)"
        return f"{actor} STRIKE {where} -> {event.outcome}{suffix}."
    if kind is EventKind.SHIP_SUNK:
        return f"{actor} sank a ship!"
    if kind is EventKind.PLANE_DISABLED:
        owner = names[int(event.data["owner"])]
        return f"{owner}'s {unit} is DISABLED for {DISABLE_TURNS} turns."
    if kind is EventKind.RECON:
        return (
            f"{actor} RECON around {where} -> {event.data['occupied']} occupied, "
            f"cleared {event.data['cleared_fog']} fog."
        )
    if kind is EventKind.QUERY_ANSWERED:
        return f"{actor} AIR Q {event.data['query']} {event.data['label']} -> {event.outcome}"
    if kind is EventKind.TURN_ENDED:
        return f"{actor} ends the turn. Pass the device to {names[int(event.data['next_player'])]}."
    if kind is EventKind.PLANE_RETURNED:
        return f"{actor}'s {unit} returns to the skies."
    if kind is EventKind.VICTORY:
        return f"{actor} wins! All ships have been sunk."
    return kind.value


class ConsoleSession:
    """Reads commands, forwards them to the controller and prints outcomes."""

    def __init__(self, controller: GameController, out: TextIO) -> None:
        self._controller = controller
        self._out = out
        controller.bus.subscribe(self._on_event)

    def _print(self, text: str) -> None:
        self._out.write(text + "\n")

    def _names(self) -> tuple[str, str]:
        return self._controller.game_view().player_names

    def _on_event(self, event: GameEvent) -> None:
        self._print(describe_event(event, self._names()))

    def show(self) -> None:
        view = self._controller.game_view()
        if view.phase is Phase.SETUP:
            player = view.setup_player
            self._print(f"{view.player_names[player]} - setup")
            for layer in Layer:
                self._print(render_layer(self._controller.layer_view(player, layer), layer.value.upper()))
            missing = [u.unit_type.value for u in self._controller.unit_views(player) if not u.placed]
            self._print("Unplaced: " + (", ".join(missing) if missing else "none - type 'lock'"))
            return

        board = self._controller.scoreboard()
        if view.phase is Phase.GAME_OVER and view.winner is not None:
            self._print(f"Game over. {view.player_names[view.winner]} wins.")
        attacker = view.active_player
        defender = 1 - attacker
        self._print(
            f"{view.player_names[attacker]}'s turn - {view.battle_action.value} on "
            f"{view.player_names[defender]}'s {view.battle_layer.value.upper()} grid"
        )
        self._print(render_layer(self._controller.target_view(), "TARGET"))
        for layer in Layer:
            own = self._controller.layer_view(attacker, layer)
            self._print(render_layer(own, f"OWN {layer.value.upper()}"))
        superiority = "YES" if board.superiority[attacker] else "NO"
        self._print(
            f"Ships remaining {board.remaining_ships[0]}/{board.remaining_ships[1]}  "
            f"Planes active {board.active_planes[0]}/{board.active_planes[1]}  "
            f"Air superiority: {superiority}"
        )

    def handle(self, command: ConsoleCommand) -> bool:
        """Apply one command. Returns ``False`` when the user quits."""
        if isinstance(command, QuitCommand):
            return False
        if isinstance(command, HelpCommand):
            self._print(HELP_TEXT)
            return True
        if isinstance(command, ShowCommand):
            self.show()
            return True

        result = self._dispatch(command)
        if isinstance(result, Rejected):
            self._print(f"[!] {result.message}")
        return True

    def _dispatch(self, command: ConsoleCommand) -> CommandResult:
        controller = self._controller
        setup_player = controller.game_view().setup_player
        if isinstance(command, NewGameCommand):
            return controller.start_new_game()
        if isinstance(command, PlaceCommand):
            return controller.place_unit(setup_player, command.unit, command.origin, command.orientation)
        if isinstance(command, RandomCommand):
            return controller.random_place(setup_player)
        if isinstance(command, ClearCommand):
            return controller.clear_player(setup_player)
        if isinstance(command, LockCommand):
            return controller.lock_in(setup_player)
        if isinstance(command, LayerCommand):
            return controller.select_battle_layer(command.layer)
        if isinstance(command, ActionCommand):
            return controller.select_action(command.action)
        if isinstance(command, FireCommand):
            return controller.strike(command.index)
        if isinstance(command, ReconCommand):
            return controller.recon(command.index)
        if isinstance(command, TargetCommand):
            return controller.act(command.index)
        if isinstance(command, AskCommand):
            return controller.ask_query(command.query, command.value)
        if isinstance(command, EndTurnCommand):
            return controller.end_turn()
        raise TypeError(f"Unsupported console command: {command!r}")


def run_console(controller: GameController, stdin: TextIO, stdout: TextIO) -> int:
    """Run the read-eval-print loop until EOF or ``quit``."""
    console = ConsoleSession(controller, stdout)
    stdout.write("Skies & Seas: Fog of War. Type 'help' for commands.\n")
    console.show()
    for line in stdin:
        if not line.strip():
            continue
        try:
            command = parse_command(line)
        except CommandParseError as exc:
            stdout.write(f"[!] {exc}\n")
            continue
        if not console.handle(command):
            break
    logger.info("console_closed")
    return 0
