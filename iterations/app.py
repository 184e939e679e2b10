"""Command-line entry point that loads the settings and runs the game."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from iterations.game import Game
from iterations.settings import SettingsManager

DEFAULT_SETTINGS_PATH = "settings.json"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until it quits; return the exit status."""
    parser = argparse.ArgumentParser(prog="iterations", description="Run the game.")
    parser.add_argument(
        "--settings",
        default=DEFAULT_SETTINGS_PATH,
        help="settings file to read (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    settings = SettingsManager()
    settings.load(args.settings)
    with Game(settings) as game:
        game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())