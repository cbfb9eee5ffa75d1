"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from noughts.engine.search import SelectorKind
from noughts.game.interfaces import SessionConfig
from noughts.ui.i18n import LANGUAGES, set_language


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noughts", description="Play noughts and crosses against the computer."
    )
    parser.add_argument(
        "--selector",
        choices=[kind.value for kind in SelectorKind],
        default=SelectorKind.MINIMAX.value,
        help="computer strategy (default: minimax)",
    )
    parser.add_argument("--gui", action="store_true", help="open the Qt window")
    parser.add_argument(
        "--language", choices=LANGUAGES, default="English", help="message language"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log search details"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch the console game or, with ``--gui``, the Qt window."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    set_language(args.language)
    config = SessionConfig(selector=SelectorKind(args.selector))

    if args.gui:
        from noughts.ui.bootstrap import run_application

        return run_application([sys.argv[0]], config)

    from noughts.ui.console import ConsoleGame

    try:
        ConsoleGame(config).run()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
