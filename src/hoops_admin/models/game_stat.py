"""Game statistics form records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from hoops_admin.models.base import require_mapping


@dataclass(frozen=True, slots=True)
class GameStatFormData:
    """Per-team box score values submitted on the game stat form.

    ``team_id`` and ``game_id`` are required (``None``, ``0`` or a blank
    string means "not selected"); every counting stat is optional and kept as
    submitted.
    """

    team_id: int | None = None
    game_id: int | None = None
    points: Any = None
    field_goals_made: Any = None
    field_goals_attempted: Any = None
    three_point_field_goals_made: Any = None
    three_point_field_goals_attempted: Any = None
    two_point_field_goals_made: Any = None
    two_point_field_goals_attempted: Any = None
    free_throws_made: Any = None
    free_throws_attempted: Any = None
    offensive_rebounds: Any = None
    defensive_rebounds: Any = None
    total_rebounds: Any = None
    assists: Any = None
    turnovers: Any = None
    steals: Any = None
    blocks: Any = None
    personal_fouls: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameStatFormData:
        """Create instance from a mapping, ignoring unknown keys.

        Raises:
            FormDataError: If data is not a mapping
        """
        data = require_mapping(data, cls.__name__)
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def entry_key(self) -> tuple[int | None, int | None]:
        """(team_id, game_id) pair identifying one stat row."""
        return (self.team_id, self.game_id)
