"""CLI entry point for hoops_admin.

Usage:
    python -m hoops_admin.cli validate-game game.json --today 2024-01-15
    python -m hoops_admin.cli validate-game-stat stat.json --games games.json
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from hoops_admin.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hoops-admin",
        description="Basketball league admin form validation tools",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Game form
    game_parser = subparsers.add_parser(
        "validate-game",
        help="Validate a game record stored as JSON",
    )
    game_parser.add_argument("file", help="JSON file with the game form values")
    game_parser.add_argument(
        "--today",
        type=str,
        help="Reference date for the future-date check (YYYY-MM-DD)",
    )
    game_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report",
    )

    # Game stat form
    stat_parser = subparsers.add_parser(
        "validate-game-stat",
        help="Validate a game statistics record stored as JSON",
    )
    stat_parser.add_argument("file", help="JSON file with the game stat form values")
    stat_parser.add_argument(
        "--existing",
        type=str,
        help="JSON array of stored stat rows, for duplicate detection",
    )
    stat_parser.add_argument(
        "--games",
        type=str,
        help="JSON array of games, for the team participation check",
    )
    stat_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "validate-game":
        from hoops_admin.cli.validate import run_validate_game

        return run_validate_game(
            path=args.file,
            today=args.today,
            as_json=args.json,
        )
    elif args.command == "validate-game-stat":
        from hoops_admin.cli.validate import run_validate_game_stat

        return run_validate_game_stat(
            path=args.file,
            existing_path=args.existing,
            games_path=args.games,
            as_json=args.json,
        )
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
