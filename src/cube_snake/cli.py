"""Command line tools for running headless cube snake games."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

import numpy as np

from cube_snake.config import GameConfig
from cube_snake.engine import GameEngine
from cube_snake.heading import Heading

logger = logging.getLogger(__name__)

# Keys a player can press, in the order the random driver samples them.
_COMMANDS: list[Heading] = [
    Heading.UP,
    Heading.DOWN,
    Heading.LEFT,
    Heading.RIGHT,
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cube-snake",
        description="Headless cube snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a seeded game with random relative turns.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    sim_p.add_argument("--size", type=int, default=None)
    sim_p.add_argument("--players", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--ticks", type=int, default=200)
    sim_p.add_argument(
        "--turn-probability", type=float, default=0.2,
        help="Chance that a snake receives a turn before each tick.",
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default configuration as JSON.",
    )
    init_p.add_argument("path", help="Destination file.")

    return parser


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "size": "size",
        "players": "player_count",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    return replace(config, **overrides) if overrides else config


def _driver_rng(seed: int | None) -> np.random.Generator:
    """Return an input stream independent of the engine's placement stream.

    The engine seeds its own generator with *seed* directly; the driver
    draws from a child of the same seed sequence instead.
    """
    return np.random.default_rng(np.random.SeedSequence(seed).spawn(1)[0])


def _run_simulate(args: argparse.Namespace) -> int:
    if not 0.0 <= args.turn_probability <= 1.0:
        raise SystemExit("--turn-probability must be between 0 and 1.")

    config = _config_from_args(args)
    engine = GameEngine(config)
    driver_rng = _driver_rng(config.seed)

    for _ in range(args.ticks):
        for player in range(len(engine.snakes)):
            if driver_rng.random() < args.turn_probability:
                command = _COMMANDS[int(driver_rng.integers(len(_COMMANDS)))]
                engine.turn(player, command)
        engine.step()
        if engine.game_over:
            break
    logger.info("Simulation stopped after %d ticks.", engine.tick)

    summary = {
        "config": config.to_dict(),
        "ticks": engine.tick,
        "game_over": engine.game_over,
        "snakes": [
            {
                "alive": alive,
                "bitten": snake.bitten,
                "length": len(snake),
                "head": list(snake.head),
                "heading": str(snake.heading),
            }
            for snake, alive in zip(engine.snakes, engine.alive, strict=True)
        ],
    }
    print(json.dumps(summary, indent=2))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    GameConfig().save(args.path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``cube-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
