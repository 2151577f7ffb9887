import json
import logging

import pytest

from skyseas.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    yield
    configure_logging(LoggingConfig(level_name="WARNING"))


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"custom": 1}


def test_build_logging_config_text_and_json(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SKYSEAS_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("SKYSEAS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "text")
    configure_logging(build_logging_config())
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert root.handlers
    monkeypatch.setenv("SKYSEAS_LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FORMAT", "json")
    config = build_logging_config()
    assert config.level_name == "WARNING"
    assert config.console_format == "json"


def test_build_logging_config_writes_under_app_data_logs(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SKYSEAS_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("SKYSEAS_LOG_DIR", raising=False)
    monkeypatch.delenv("SKYSEAS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_logging(build_logging_config())

    logger = logging.getLogger("test.logging.file.path")
    logger.info("hello", extra={"turn": 3})
    configure_logging(build_logging_config())

    files = list((tmp_path / "appdata" / "logs").glob("skyseas_run_*.jsonl"))
    assert files
    lines = [json.loads(line) for f in files for line in f.read_text(encoding="utf-8").splitlines()]
    assert any(line["msg"] == "hello" and line["fields"] == {"turn": 3} for line in lines)


def test_shutdown_logging_flushes_run_file(tmp_path) -> None:
    log_file = tmp_path / "run.jsonl"
    configure_logging(LoggingConfig(level_name="INFO", file_path=str(log_file)))
    logging.getLogger("test.logging.shutdown").info("goodbye", extra={"turn": 9})

    shutdown_logging()
    shutdown_logging()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert any(line["msg"] == "goodbye" and line["fields"] == {"turn": 9} for line in lines)
