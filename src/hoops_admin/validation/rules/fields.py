"""Field and cross-field validation rules.

Single-value rules:
- Date is present, a valid YYYY-MM-DD calendar date, and not in the future
- Scores and counting stats are whole numbers >= 0
- Required references (team, game) are selected

Cross-field rules, which only fire once every operand is present:
- Home and away teams differ
- Shots made <= shots attempted
- Offensive + defensive rebounds = total rebounds
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from hoops_admin.validation.constants import (
    DATE_PATTERN,
    MSG_DATE_FUTURE,
    MSG_DATE_INVALID,
    MSG_DATE_REQUIRED,
    MSG_EXCEEDS_ATTEMPTS,
    MSG_NEGATIVE,
    MSG_NOT_INTEGER,
    MSG_REBOUND_SUM,
    MSG_REQUIRED,
    MSG_SAME_TEAM,
)
from hoops_admin.validation.results import ErrorKind, FieldResult

_DATE_RE = re.compile(DATE_PATTERN)


def is_present(value: Any) -> bool:
    """Return True if an optional form value was supplied."""
    return value is not None


def is_selected(identifier: Any) -> bool:
    """Return True if a reference id was selected.

    None, 0 and blank strings all mean "none".
    """
    if isinstance(identifier, str):
        return bool(identifier.strip())
    return identifier is not None and identifier != 0


def _is_whole_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def parse_form_date(date_text: str) -> date | None:
    """Parse canonical ``YYYY-MM-DD`` text, returning None if invalid."""
    if not _DATE_RE.match(date_text):
        return None
    try:
        return date.fromisoformat(date_text)
    except ValueError:
        return None


def validate_date(date_text: str | None, today: date) -> FieldResult:
    """Validate a game date.

    Args:
        date_text: Date as submitted, expected in YYYY-MM-DD form
        today: Reference date for the future check

    Returns:
        FieldResult; today and earlier dates pass
    """
    if isinstance(date_text, str):
        date_text = date_text.strip()

    if not date_text:
        return FieldResult.failed(ErrorKind.REQUIRED_MISSING, MSG_DATE_REQUIRED)

    if not isinstance(date_text, str):
        return FieldResult.failed(ErrorKind.REQUIRED_MISSING, MSG_DATE_INVALID)

    parsed = parse_form_date(date_text)
    if parsed is None:
        return FieldResult.failed(ErrorKind.REQUIRED_MISSING, MSG_DATE_INVALID)

    if parsed > today:
        return FieldResult.failed(ErrorKind.FUTURE_DATE, MSG_DATE_FUTURE)

    return FieldResult.passed()


def validate_non_negative(value: Any, label: str) -> FieldResult:
    """Validate an optional whole number that must be >= 0.

    Absent values pass. Negativity is reported before the whole-number check.

    Args:
        value: Value as submitted, or None
        label: Display name interpolated into the message

    Returns:
        FieldResult
    """
    if not is_present(value):
        return FieldResult.passed()

    if isinstance(value, (int, float)) and not isinstance(value, bool) and value < 0:
        return FieldResult.failed(
            ErrorKind.NEGATIVE_VALUE, MSG_NEGATIVE.format(label=label)
        )

    if not _is_whole_number(value):
        return FieldResult.failed(
            ErrorKind.NOT_INTEGER, MSG_NOT_INTEGER.format(label=label)
        )

    return FieldResult.passed()


def validate_score(value: Any, label: str) -> FieldResult:
    """Validate an optional score; 0 is a valid score."""
    return validate_non_negative(value, label)


def validate_required_id(identifier: Any, label: str) -> FieldResult:
    """Validate that a required reference was selected."""
    if not is_selected(identifier):
        return FieldResult.failed(
            ErrorKind.REQUIRED_MISSING, MSG_REQUIRED.format(label=label)
        )
    return FieldResult.passed()


def validate_team_selection(home_id: Any, away_id: Any) -> FieldResult:
    """Validate that home and away teams differ.

    Passes when either team is unselected; presence is a separate rule.
    """
    if is_selected(home_id) and is_selected(away_id) and home_id == away_id:
        return FieldResult.failed(ErrorKind.DUPLICATE_SELECTION, MSG_SAME_TEAM)
    return FieldResult.passed()


def check_made_vs_attempted(made: Any, attempted: Any, label: str) -> FieldResult:
    """Compare made and attempted counts that are already known to be valid.

    Passes when either count is absent.
    """
    if not (is_present(made) and is_present(attempted)):
        return FieldResult.passed()

    if made > attempted:
        return FieldResult.failed(
            ErrorKind.INCONSISTENT_SHOOTING,
            MSG_EXCEEDS_ATTEMPTS.format(label=label, made=made, attempted=attempted),
        )
    return FieldResult.passed()


def validate_shooting_stats(made: Any, attempted: Any, label: str) -> FieldResult:
    """Validate a made/attempted shooting pair.

    Each operand must be a non-negative whole number; only then is
    ``made <= attempted`` checked.

    Args:
        made: Shots made, or None
        attempted: Shots attempted, or None
        label: Display name, e.g. "field goals"

    Returns:
        First failing FieldResult, or a passing one
    """
    for value, suffix in ((made, "made"), (attempted, "attempted")):
        result = validate_non_negative(value, f"{label} {suffix}")
        if not result.is_valid:
            return result

    return check_made_vs_attempted(made, attempted, label)


def check_rebound_sum(offensive: Any, defensive: Any, total: Any) -> FieldResult:
    """Check offensive + defensive == total once all three are present."""
    if not (is_present(offensive) and is_present(defensive) and is_present(total)):
        return FieldResult.passed()

    expected = offensive + defensive
    if expected != total:
        return FieldResult.failed(
            ErrorKind.INCONSISTENT_REBOUNDS,
            MSG_REBOUND_SUM.format(total=total, expected=expected),
        )
    return FieldResult.passed()


def validate_rebounds(offensive: Any, defensive: Any, total: Any) -> FieldResult:
    """Validate rebound components and their sum.

    Passes when any of the three values is absent, so a partially entered
    stat line is never rejected for its rebounds. Entity validators check
    each component on its own field as well.

    Args:
        offensive: Offensive rebounds, or None
        defensive: Defensive rebounds, or None
        total: Total rebounds, or None

    Returns:
        First failing FieldResult, or a passing one
    """
    if not (is_present(offensive) and is_present(defensive) and is_present(total)):
        return FieldResult.passed()

    for value, label in (
        (offensive, "offensive rebounds"),
        (defensive, "defensive rebounds"),
        (total, "total rebounds"),
    ):
        result = validate_non_negative(value, label)
        if not result.is_valid:
            return result

    return check_rebound_sum(offensive, defensive, total)
