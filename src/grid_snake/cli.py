"""CLI launcher for the snake game."""

from __future__ import annotations

import argparse
import logging
import sys

from grid_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--moving-period", type=float, default=None)
    parser.add_argument("--restart-time", type=float, default=None)
    parser.add_argument("--block-size", type=int, default=None)
    parser.add_argument("--fps", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid snake game with a pygame window.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open the game window.")
    _add_config_flags(play_p)

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write a config file with default values.",
    )
    init_p.add_argument("output", help="Path for the JSON config.")
    _add_config_flags(init_p)

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "width": "width",
        "height": "height",
        "seed": "seed",
        "moving_period": "moving_period",
        "restart_time": "restart_time",
        "block_size": "block_size",
        "fps": "fps",
    }
    overrides: dict = {}
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)

    config.validate()
    return config


def _run_play(args: argparse.Namespace) -> int:
    from grid_snake.frontend import run

    return run(_resolve_config(args))


def _run_init_config(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "init-config": _run_init_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
