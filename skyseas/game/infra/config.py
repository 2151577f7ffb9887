"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from skyseas.game.core.models import (
    DEFAULT_LOG_CAPACITY,
    DEFAULT_PLACEMENT_ATTEMPTS,
    DEFAULT_PLAYER_NAMES,
)

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env.app",
    ".env.app.local",
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game configuration."""

    player_names: tuple[str, str] = DEFAULT_PLAYER_NAMES
    seed: int | None = None
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    log_capacity: int = DEFAULT_LOG_CAPACITY


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = (part.strip() for part in line.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files win when overriding.

    Default order: shared app config, its local override, then the same pair in
    the working directory.
    """
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def load_game_config() -> GameConfig:
    """Resolve game configuration from ``SKYSEAS_*`` environment variables."""
    return GameConfig(
        player_names=(
            _text("SKYSEAS_PLAYER1_NAME", DEFAULT_PLAYER_NAMES[0]),
            _text("SKYSEAS_PLAYER2_NAME", DEFAULT_PLAYER_NAMES[1]),
        ),
        seed=_optional_int("SKYSEAS_SEED"),
        placement_attempts=max(1, _int("SKYSEAS_PLACEMENT_ATTEMPTS", DEFAULT_PLACEMENT_ATTEMPTS)),
        log_capacity=max(1, _int("SKYSEAS_LOG_CAPACITY", DEFAULT_LOG_CAPACITY)),
    )


def _text(name: str, default: str) -> str:
    return os.getenv(name, "").strip() or default


def _int(name: str, default: int) -> int:
    value = _optional_int(name)
    return default if value is None else value


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
