"""Application entry point."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys

from skyseas.game.app.console import run_console
from skyseas.game.app.controller import GameController
from skyseas.game.infra.app_data import ensure_app_data_dirs
from skyseas.game.infra.config import load_default_env_files, load_game_config
from skyseas.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Skies & Seas: Fog of War")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random placement (overrides SKYSEAS_SEED).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the pass-and-play console game."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    try:
        config = load_game_config()
        if args.seed is not None:
            config = dataclasses.replace(config, seed=args.seed)
        logger.info(
            "app_data_paths root=%s logs=%s",
            paths["root"],
            paths["logs"],
            extra={"seed": config.seed, "players": list(config.player_names)},
        )
        controller = GameController(config=config, rng=random.Random(config.seed))
        return run_console(controller, sys.stdin, sys.stdout)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
