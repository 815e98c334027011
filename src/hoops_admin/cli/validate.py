"""Validation CLI commands.

Validates game and game statistics records stored as JSON files and prints
a text or JSON report.

Usage:
    python -m hoops_admin.cli validate-game game.json
    python -m hoops_admin.cli validate-game game.json --today 2024-01-15 --json
    python -m hoops_admin.cli validate-game-stat stat.json --existing stats.json
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Literal

from hoops_admin.exceptions import FormDataError
from hoops_admin.schemas import ValidationReport
from hoops_admin.validation import (
    ValidationResult,
    validate_game_form,
    validate_game_stat_form,
)

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def load_json(path: str | Path) -> Any:
    """Load a JSON document from disk.

    Args:
        path: File to read

    Returns:
        Parsed JSON value

    Raises:
        FormDataError: If the file cannot be read or is not valid JSON
    """
    filepath = Path(path)
    try:
        with open(filepath) as f:
            return json.load(f)
    except OSError as e:
        raise FormDataError(f"Cannot read {filepath}: {e}", source=str(filepath)) from e
    except json.JSONDecodeError as e:
        raise FormDataError(
            f"Invalid JSON in {filepath}: {e}", source=str(filepath)
        ) from e


def load_json_list(path: str | Path | None) -> list[Any]:
    """Load a JSON array from disk; a missing path yields an empty list.

    Raises:
        FormDataError: If the document is not a JSON array
    """
    if path is None:
        return []
    data = load_json(path)
    if not isinstance(data, list):
        raise FormDataError(f"Expected a JSON array in {path}", source=str(path))
    return data


def parse_today(value: str | None) -> date | None:
    """Parse the --today option.

    Raises:
        FormDataError: If the value is not YYYY-MM-DD
    """
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise FormDataError(f"Invalid --today value: {value}", source="--today") from e


def format_report(report: ValidationReport) -> str:
    """Render a report as plain text."""
    title = "Game" if report.form == "game" else "Game stat"
    lines = [f"{title} form: {'VALID' if report.is_valid else 'INVALID'}"]
    if report.errors:
        lines.append(f"  Errors ({report.error_count}):")
        for error in report.errors:
            lines.append(f"    - {error.field}: {error.message} [{error.kind.value}]")
    return "\n".join(lines)


def _emit(
    form: Literal["game", "game_stat"], result: ValidationResult, as_json: bool
) -> int:
    report = ValidationReport.from_result(form, result)
    if as_json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))
    return EXIT_VALID if result.is_valid else EXIT_INVALID


def run_validate_game(
    path: str,
    today: str | None = None,
    as_json: bool = False,
) -> int:
    """Validate a game record stored as a JSON object.

    Args:
        path: JSON file holding the game form values
        today: Reference date (YYYY-MM-DD); defaults to the system clock
        as_json: Print a JSON report instead of text

    Returns:
        Exit code: 0 valid, 1 invalid, 2 unreadable input
    """
    try:
        data = load_json(path)
        result = validate_game_form(data, today=parse_today(today))
    except FormDataError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT

    logger.info(f"Validated game form from {path}: {len(result.errors)} error(s)")
    return _emit("game", result, as_json)


def run_validate_game_stat(
    path: str,
    existing_path: str | None = None,
    games_path: str | None = None,
    as_json: bool = False,
) -> int:
    """Validate a game statistics record stored as a JSON object.

    Args:
        path: JSON file holding the game stat form values
        existing_path: JSON array of stored stat rows for the duplicate check
        games_path: JSON array of games for the participation check
        as_json: Print a JSON report instead of text

    Returns:
        Exit code: 0 valid, 1 invalid, 2 unreadable input
    """
    try:
        data = load_json(path)
        existing = load_json_list(existing_path)
        games = load_json_list(games_path)
        result = validate_game_stat_form(data, existing, games=games)
    except FormDataError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT

    logger.info(f"Validated game stat form from {path}: {len(result.errors)} error(s)")
    return _emit("game_stat", result, as_json)
