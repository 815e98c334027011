"""Clock injection for the future-date check.

Validators never read the wall clock themselves. They take a ``today`` date
or a ``Clock`` and call it at most once per validation pass.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo

from hoops_admin.config import get_settings

Clock = Callable[[], date]


def system_clock() -> date:
    """Return today's date in the configured timezone."""
    return datetime.now(ZoneInfo(get_settings().timezone)).date()


def fixed_clock(today: date) -> Clock:
    """Return a clock that always reports ``today``.

    Example:
        validator = FormValidator(clock=fixed_clock(date(2024, 1, 15)))
    """

    def _clock() -> date:
        return today

    return _clock


def resolve_today(today: date | None = None, clock: Clock | None = None) -> date:
    """Pick the reference date for one validation pass.

    Args:
        today: Explicit reference date, wins over ``clock``
        clock: Clock to read when ``today`` is not given

    Returns:
        The reference date
    """
    if today is not None:
        return today
    return (clock or system_clock)()
