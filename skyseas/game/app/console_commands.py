"""Text command parsing for the console front end."""

from __future__ import annotations

from dataclasses import dataclass

from skyseas.game.core.geometry import parse_cell_name, to_coord
from skyseas.game.core.models import BattleAction, Coord, Layer, Orientation, QueryType, UnitType


class CommandParseError(Exception):
    """Raised when a line cannot be parsed as a valid command."""


@dataclass(frozen=True, slots=True)
class PlaceCommand:
    unit: UnitType
    origin: Coord
    orientation: Orientation


@dataclass(frozen=True, slots=True)
class RandomCommand:
    pass


@dataclass(frozen=True, slots=True)
class ClearCommand:
    pass


@dataclass(frozen=True, slots=True)
class LockCommand:
    pass


@dataclass(frozen=True, slots=True)
class LayerCommand:
    layer: Layer


@dataclass(frozen=True, slots=True)
class ActionCommand:
    action: BattleAction


@dataclass(frozen=True, slots=True)
class FireCommand:
    index: int


@dataclass(frozen=True, slots=True)
class ReconCommand:
    index: int


@dataclass(frozen=True, slots=True)
class TargetCommand:
    """Apply the currently selected action."""

    index: int


@dataclass(frozen=True, slots=True)
class AskCommand:
    query: QueryType
    value: str


@dataclass(frozen=True, slots=True)
class EndTurnCommand:
    pass


@dataclass(frozen=True, slots=True)
class NewGameCommand:
    pass


@dataclass(frozen=True, slots=True)
class ShowCommand:
    pass


@dataclass(frozen=True, slots=True)
class HelpCommand:
    pass


@dataclass(frozen=True, slots=True)
class QuitCommand:
    pass


type ConsoleCommand = (
    PlaceCommand
    | RandomCommand
    | ClearCommand
    | LockCommand
    | LayerCommand
    | ActionCommand
    | FireCommand
    | ReconCommand
    | TargetCommand
    | AskCommand
    | EndTurnCommand
    | NewGameCommand
    | ShowCommand
    | HelpCommand
    | QuitCommand
)

HELP_TEXT = """\
Setup:
  place <unit> <cell> [h|v]   e.g. place carrier A1 h  (v rotates planes 90 degrees)
  random | clear | lock
Battle:
  layer sea|air   action strike|recon
  fire <cell> | recon <cell> | at <cell>
  ask ship_col|ship_row|occ_col|occ_row <value>
  end
Any time:
  show | new | help | quit"""

_NO_ARG_COMMANDS: dict[str, ConsoleCommand] = {
    "RANDOM": RandomCommand(),
    "CLEAR": ClearCommand(),
    "LOCK": LockCommand(),
    "END": EndTurnCommand(),
    "NEW": NewGameCommand(),
    "SHOW": ShowCommand(),
    "HELP": HelpCommand(),
    "QUIT": QuitCommand(),
}


def parse_command(line: str) -> ConsoleCommand:
    """Parse one line of console input."""
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty command")
    verb, *args = raw.split()
    verb = verb.upper()

    if verb in _NO_ARG_COMMANDS:
        if args:
            raise CommandParseError(f"{verb} takes no arguments")
        return _NO_ARG_COMMANDS[verb]
    if verb == "PLACE":
        return _parse_place(args)
    if verb == "LAYER":
        return LayerCommand(layer=_parse_enum(Layer, _single(verb, args).lower(), "layer"))
    if verb == "ACTION":
        return ActionCommand(action=_parse_enum(BattleAction, _single(verb, args).upper(), "action"))
    if verb == "FIRE":
        return FireCommand(index=_parse_cell(_single(verb, args)))
    if verb == "RECON":
        return ReconCommand(index=_parse_cell(_single(verb, args)))
    if verb == "AT":
        return TargetCommand(index=_parse_cell(_single(verb, args)))
    if verb == "ASK":
        if len(args) != 2:
            raise CommandParseError("ASK requires a question type and a value")
        return AskCommand(query=_parse_enum(QueryType, args[0].lower(), "question type"), value=args[1])
    raise CommandParseError(f"Unknown command: {raw}")


def _parse_place(args: list[str]) -> PlaceCommand:
    if len(args) not in (2, 3):
        raise CommandParseError("PLACE requires a unit, a cell and an optional h|v")
    unit = _parse_enum(UnitType, args[0].lower(), "unit")
    origin = to_coord(_parse_cell(args[1]))
    orientation = Orientation.HORIZONTAL
    if len(args) == 3:
        flag = args[2].upper()
        if flag not in ("H", "V"):
            raise CommandParseError(f"Invalid orientation: {args[2]}")
        orientation = Orientation.VERTICAL if flag == "V" else Orientation.HORIZONTAL
    return PlaceCommand(unit=unit, origin=origin, orientation=orientation)


def _single(verb: str, args: list[str]) -> str:
    if len(args) != 1:
        raise CommandParseError(f"{verb} requires exactly one argument")
    return args[0]


def _parse_cell(text: str) -> int:
    index = parse_cell_name(text)
    if index is None:
        raise CommandParseError(f"Invalid coordinate: {text}")
    return index


def _parse_enum[E](enum_type: type[E], value: str, label: str) -> E:
    try:
        return enum_type(value)  # type: ignore[call-arg]
    except ValueError:
        raise CommandParseError(f"Unknown {label}: {value}") from None
