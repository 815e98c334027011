"""Form records validated by hoops_admin."""

from hoops_admin.models.game import GameFormData, GameReference
from hoops_admin.models.game_stat import GameStatFormData

__all__ = [
    "GameFormData",
    "GameReference",
    "GameStatFormData",
]
