"""Process-wide game state flags."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache


@dataclass
class GameManager:
    """Holds whether the game has been started for the first time."""

    first_start_game: bool = False


@cache
def get_game_manager() -> GameManager:
    """Return the shared GameManager."""
    return GameManager()