"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse

from .game import TITLE, run_game

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bundlebash", description=f"Play {TITLE}.")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH, help="window width")
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT, help="window height")
    parser.add_argument(
        "--frames",
        type=_positive_int,
        default=None,
        help="stop after this many frames",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the game; returns the exit status."""
    args = _build_parser().parse_args(argv)
    run_game(args.width, args.height, TITLE, args.frames)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())