"""Player records."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_NAME = "guess"


@dataclass
class User:
    """A player: name, optional password and score."""

    name: str = DEFAULT_NAME
    password: str = ""
    score: int = 0