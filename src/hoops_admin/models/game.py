"""Game form records.

Example usage:
    game = GameFormData.from_dict(
        {
            "date": "2024-01-15",
            "home_team_id": 1,
            "away_team_id": 2,
            "home_team_total_score": 85,
            "away_team_total_score": 78,
        }
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from hoops_admin.exceptions import FormDataError
from hoops_admin.models.base import require_mapping


@dataclass(frozen=True, slots=True)
class GameFormData:
    """Values submitted on the game create/edit form.

    Team ids of ``None``, ``0`` or a blank string mean "not selected". Scores
    are optional; values are kept exactly as submitted so the rules can report
    bad input.

    Attributes:
        date: Game date as ``YYYY-MM-DD`` text
        home_team_id: Home team identifier
        away_team_id: Away team identifier
        home_team_total_score: Final home score
        away_team_total_score: Final away score
        home_team_first_quarter_score .. away_team_fourth_quarter_score:
            Per-quarter scores
    """

    date: str | None = None
    home_team_id: int | None = None
    away_team_id: int | None = None
    home_team_total_score: Any = None
    away_team_total_score: Any = None
    home_team_first_quarter_score: Any = None
    away_team_first_quarter_score: Any = None
    home_team_second_quarter_score: Any = None
    away_team_second_quarter_score: Any = None
    home_team_third_quarter_score: Any = None
    away_team_third_quarter_score: Any = None
    home_team_fourth_quarter_score: Any = None
    away_team_fourth_quarter_score: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameFormData:
        """Create instance from a mapping, ignoring unknown keys.

        Args:
            data: Dictionary with field names as keys

        Returns:
            GameFormData instance

        Raises:
            FormDataError: If data is not a mapping
        """
        data = require_mapping(data, cls.__name__)
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class GameReference:
    """Minimal view of a persisted game, used to check stat participation.

    Attributes:
        id: Game identifier
        home_team_id: Home team identifier
        away_team_id: Away team identifier
    """

    id: int
    home_team_id: int
    away_team_id: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameReference:
        """Create instance from a mapping such as an API game payload.

        Raises:
            FormDataError: If data is not a mapping or lacks an id field
        """
        data = require_mapping(data, cls.__name__)
        try:
            return cls(
                id=data["id"],
                home_team_id=data["home_team_id"],
                away_team_id=data["away_team_id"],
            )
        except KeyError as e:
            raise FormDataError(f"{cls.__name__} is missing field {e}") from e

    def has_team(self, team_id: int) -> bool:
        """Return True if the team played in this game."""
        return team_id in (self.home_team_id, self.away_team_id)
