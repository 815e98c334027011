"""Validation result types.

Provides the single-field result returned by every rule, the per-record
result returned by the entity validators, and the collector that merges the
former into the latter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Stable machine-readable tag attached to every field error."""

    REQUIRED_MISSING = "required_missing"  # Mandatory field absent or unparsable
    FUTURE_DATE = "future_date"
    NEGATIVE_VALUE = "negative_value"
    NOT_INTEGER = "not_integer"
    DUPLICATE_SELECTION = "duplicate_selection"  # Home team == away team
    INCONSISTENT_SHOOTING = "inconsistent_shooting"  # Made > attempted
    INCONSISTENT_REBOUNDS = "inconsistent_rebounds"  # OREB + DREB != REB
    DUPLICATE_ENTRY = "duplicate_entry"
    TEAM_NOT_IN_GAME = "team_not_in_game"


@dataclass(frozen=True, slots=True)
class FieldResult:
    """Result of a single field or cross-field rule.

    Attributes:
        is_valid: Whether the rule passed
        message: Human-readable error, None when the rule passed
        kind: Error tag, None when the rule passed
    """

    is_valid: bool
    message: str | None = None
    kind: ErrorKind | None = None

    @classmethod
    def passed(cls) -> FieldResult:
        """Create a passing result."""
        return _PASSED

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> FieldResult:
        """Create a failing result.

        Args:
            kind: Error tag
            message: Description of the failure

        Returns:
            FieldResult with is_valid=False
        """
        return cls(is_valid=False, message=message, kind=kind)


_PASSED = FieldResult(is_valid=True)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Aggregated result for one form record.

    Attributes:
        errors: Field name -> message. Fields without a violation are absent.
        kinds: Field name -> error tag, same keys as ``errors``
    """

    errors: dict[str, str] = field(default_factory=dict)
    kinds: dict[str, ErrorKind] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True iff no field has an error."""
        return not self.errors

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def first_error(self) -> str | None:
        """First message in rule evaluation order, if any."""
        return next(iter(self.errors.values()), None)

    def error_for(self, field_name: str) -> str | None:
        """Return the message for a field, or None if the field is valid."""
        return self.errors.get(field_name)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "is_valid": self.is_valid,
            "errors": dict(self.errors),
            "kinds": {name: kind.value for name, kind in self.kinds.items()},
        }


class ErrorCollector:
    """Accumulates rule outcomes for a single validation pass.

    Only failed results are recorded. When two rules target the same field
    the later one wins, and the field keeps its original position in the
    error ordering.

    Example:
        collector = ErrorCollector()
        collector.add("date", validate_date(data.date, today))
        result = collector.result()
    """

    def __init__(self) -> None:
        self._errors: dict[str, str] = {}
        self._kinds: dict[str, ErrorKind] = {}

    def add(self, field_name: str, result: FieldResult) -> bool:
        """Record a rule outcome under a field key.

        Args:
            field_name: Record field the outcome belongs to
            result: Outcome of the rule

        Returns:
            True if the result was a failure and was recorded
        """
        if result.is_valid:
            return False
        assert result.message is not None and result.kind is not None
        self._errors[field_name] = result.message
        self._kinds[field_name] = result.kind
        return True

    def has_error(self, field_name: str) -> bool:
        """Return True if a failure is recorded under ``field_name``."""
        return field_name in self._errors

    def result(self) -> ValidationResult:
        """Build the immutable result from everything collected so far."""
        return ValidationResult(errors=dict(self._errors), kinds=dict(self._kinds))
