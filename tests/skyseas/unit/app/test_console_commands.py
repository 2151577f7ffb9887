from __future__ import annotations

import pytest

from skyseas.game.app.console_commands import (
    ActionCommand,
    AskCommand,
    CommandParseError,
    EndTurnCommand,
    FireCommand,
    LayerCommand,
    PlaceCommand,
    QuitCommand,
    TargetCommand,
    parse_command,
)
from skyseas.game.core.models import BattleAction, Coord, Layer, Orientation, QueryType, UnitType


def test_parse_place_with_and_without_orientation() -> None:
    assert parse_command("place carrier a1 v") == PlaceCommand(
        unit=UnitType.CARRIER, origin=Coord(0, 0), orientation=Orientation.VERTICAL
    )
    assert parse_command("PLACE Fighter C2") == PlaceCommand(
        unit=UnitType.FIGHTER, origin=Coord(2, 1), orientation=Orientation.HORIZONTAL
    )


def test_parse_battle_commands() -> None:
    assert parse_command("fire J10") == FireCommand(index=99)
    assert parse_command("at c2") == TargetCommand(index=12)
    assert parse_command("layer AIR") == LayerCommand(layer=Layer.AIR)
    assert parse_command("action recon") == ActionCommand(action=BattleAction.RECON)
    assert parse_command("ask occ_row 4") == AskCommand(query=QueryType.OCCUPIED_IN_ROW, value="4")
    assert parse_command("  end ") == EndTurnCommand()
    assert parse_command("quit") == QuitCommand()


@pytest.mark.parametrize(
    "line",
    [
        "",
        "bogus",
        "lock now",
        "fire Z1",
        "fire A11",
        "place zeppelin A1",
        "place carrier A1 d",
        "layer space",
        "ask weather A",
        "ask ship_col",
    ],
)
def test_parse_rejects_bad_input(line: str) -> None:
    with pytest.raises(CommandParseError):
        parse_command(line)
