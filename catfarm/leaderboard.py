"""High-score table stored in a small binary file.

Each record is a little-endian 32-bit name length, the name bytes, a
32-bit length of the score text and the score written as decimal digits.
"""

from __future__ import annotations

import logging
import os
import struct
from pathlib import Path

from catfarm.user import User

log = logging.getLogger(__name__)

DEFAULT_LEADERBOARD_PATH = "Storage/LeaderBoard.catfarm"
NO_USERS_MESSAGE = "There are no user"
DEFAULT_TOP_LIMIT = 5

_LENGTH = struct.Struct("<i")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _encode_field(text: str) -> bytes:
    raw = text.encode(_ENCODING, _ERRORS)
    return _LENGTH.pack(len(raw)) + raw


class Leaderboard:
    """Players and scores, kept in order of score, highest first."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_LEADERBOARD_PATH) -> None:
        self.path = Path(path)
        self.users: list[User] = []

    def read_file(self) -> bool:
        """Replace ``users`` with the records on disk.

        Returns False if the file does not exist. Raises ValueError if a
        record is cut short or its score is not a number.
        """
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return False
        users: list[User] = []
        offset = 0
        while len(data) - offset >= _LENGTH.size:
            name, offset = self._read_field(data, offset)
            score_text, offset = self._read_field(data, offset)
            try:
                score = int(score_text.strip())
            except ValueError:
                raise ValueError(f"invalid score {score_text!r} in leaderboard") from None
            users.append(User(name=name, score=score))
        self.users = users
        return True

    @staticmethod
    def _read_field(data: bytes, offset: int) -> tuple[str, int]:
        if len(data) - offset < _LENGTH.size:
            raise ValueError("truncated leaderboard record")
        (length,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if length < 0 or offset + length > len(data):
            raise ValueError("truncated leaderboard record")
        text = data[offset : offset + length].decode(_ENCODING, _ERRORS)
        return text, offset + length

    def write_file(self, user: User) -> None:
        """Append ``user``'s name and score to the file."""
        record = _encode_field(user.name) + _encode_field(str(user.score))
        with self.path.open("ab") as handle:
            handle.write(record)

    def add_user(self, user: User) -> None:
        """Add ``user`` and keep the list ordered."""
        self.users.append(user)
        self.sort_users_by_score()

    def sort_users_by_score(self) -> None:
        self.users.sort(key=lambda u: u.score, reverse=True)

    def top_entries(self, limit: int = DEFAULT_TOP_LIMIT) -> list[str]:
        """Read the file and return ranked lines such as ``"1. name 100"``."""
        if not self.read_file():
            return [NO_USERS_MESSAGE]
        self.sort_users_by_score()
        return [
            f"{rank}. {user.name} {user.score}"
            for rank, user in enumerate(self.users[:limit], start=1)
        ]