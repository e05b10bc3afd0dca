"""Reading saved games back from storage."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from catfarm.savegame import (
    ALL_SAVES_FILENAME,
    DEFAULT_STORAGE_DIR,
    MAP_CODES,
    SaveGame,
    _read_save,
    decode_save,
    save_path,
)

log = logging.getLogger(__name__)

HIGHEST_SCORE_LIMIT = 4


def decode_save_stream(data: bytes) -> Iterator[SaveGame]:
    """Yield the saves stored back to back in ``data``.

    Decoding stops quietly at the first save that is cut short.
    """
    offset = 0
    while offset < len(data):
        try:
            game, offset = _read_save(data, offset)
        except ValueError:
            log.debug("stopping at incomplete save record at offset %d", offset)
            return
        yield game


def read_map(path: str | os.PathLike[str]) -> SaveGame:
    """Read the save at ``path``; a missing file yields a default SaveGame.

    Raises ValueError if the file is cut short.
    """
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        log.info("no save file at %s", path)
        return SaveGame()
    return decode_save(data)


def read_map_info(index: int, storage_dir: str | os.PathLike[str] = DEFAULT_STORAGE_DIR) -> SaveGame:
    """Read the save slot of map ``index`` (1 to 4)."""
    return read_map(save_path(index, storage_dir))


class SaveGameSupport:
    """The collection of all saved games, with slot and score queries."""

    def __init__(self, storage_dir: str | os.PathLike[str] = DEFAULT_STORAGE_DIR) -> None:
        self.storage_dir = Path(storage_dir)
        self.list_game: list[SaveGame] = self.read_all()

    @property
    def all_saves_path(self) -> Path:
        return self.storage_dir / ALL_SAVES_FILENAME

    def read_all(self) -> list[SaveGame]:
        """Read every save in the combined save file; a missing file gives none."""
        try:
            data = self.all_saves_path.read_bytes()
        except FileNotFoundError:
            log.info("no combined save file at %s", self.all_saves_path)
            return []
        return list(decode_save_stream(data))

    def sort_by_score(self) -> None:
        """Order the saves by points, highest first."""
        self.list_game.sort(key=lambda game: game.point, reverse=True)

    def load_four_latest_map_games(self) -> list[SaveGame]:
        """Return the save of each map slot, defaults for empty slots."""
        return [read_map_info(code, self.storage_dir) for code in MAP_CODES]

    def load_four_highest_score(self) -> list[SaveGame]:
        """Return up to four saves with the highest points."""
        self.sort_by_score()
        return self.list_game[:HIGHEST_SCORE_LIMIT]