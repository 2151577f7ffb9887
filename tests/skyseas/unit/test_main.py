from __future__ import annotations

import io
import logging

from skyseas.game.infra.logging import LoggingConfig, configure_logging
from skyseas.main import build_parser, main


def test_build_parser_seed_override() -> None:
    assert build_parser().parse_args(["--seed", "5"]).seed == 5
    assert build_parser().parse_args([]).seed is None


def test_main_runs_console_until_quit(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("SKYSEAS_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("SKYSEAS_LOG_LEVEL", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("random\nshow\nquit\n"))
    try:
        assert main(["--seed", "3"]) == 0
    finally:
        configure_logging(LoggingConfig(level_name="WARNING"))
    out = capsys.readouterr().out
    assert "Skies & Seas: Fog of War" in out
    assert "Player 1 randomized placement." in out
    assert (tmp_path / "appdata" / "logs").is_dir()
    assert logging.getLogger().level == logging.WARNING
