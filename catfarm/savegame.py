"""Saved game state and its binary file format.

A save is a sequence of little-endian fields: counts are unsigned 64-bit
integers, every other number is a signed 32-bit integer. The order is
player name, score, health, map code, the enemy lists, the tower lists and
the wave (phase) counters.
"""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass, field
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_USER_NAME = "guess"
DEFAULT_STORAGE_DIR = "Storage"
ALL_SAVES_FILENAME = "AllSaveGame.catfam"
MAP_CODES = (1, 2, 3, 4)

_COUNT = struct.Struct("<Q")
_INT = struct.Struct("<i")
_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class Point:
    """A grid position with an extra cell code ``c``."""

    x: int
    y: int
    c: int = 0


@dataclass
class SaveGame:
    """Everything needed to resume a game on one map."""

    user_name: str = DEFAULT_USER_NAME
    enemy_pos: list[Point] = field(default_factory=list)
    enemy_health: list[int] = field(default_factory=list)
    enemy_path_number: list[int] = field(default_factory=list)
    enemy_index: list[int] = field(default_factory=list)
    enemy_type: list[int] = field(default_factory=list)
    tower_pos: list[Point] = field(default_factory=list)
    tower_type: list[int] = field(default_factory=list)
    n_of_phase: int = 0
    n_of_enemy_each_phase: list[int] = field(default_factory=list)
    phase: int = 0
    remain_enemy: int = 0
    n_of_enemy: int = 0
    spawned_enemy: int = 0
    point: int = 0
    map_code: int = 0
    user_health: int = 0


def _validate(game: SaveGame) -> None:
    enemies = len(game.enemy_pos)
    for name in ("enemy_health", "enemy_path_number", "enemy_index", "enemy_type"):
        if len(getattr(game, name)) != enemies:
            raise ValueError(f"{name} has {len(getattr(game, name))} entries, expected {enemies}")
    if len(game.tower_type) != len(game.tower_pos):
        raise ValueError(
            f"tower_type has {len(game.tower_type)} entries, expected {len(game.tower_pos)}"
        )
    if game.n_of_phase < 0:
        raise ValueError("n_of_phase must not be negative")
    if len(game.n_of_enemy_each_phase) != game.n_of_phase:
        raise ValueError(
            f"n_of_enemy_each_phase has {len(game.n_of_enemy_each_phase)} entries, "
            f"expected {game.n_of_phase}"
        )


def _pack_ints(values: list[int]) -> bytes:
    try:
        return struct.pack(f"<{len(values)}i", *values)
    except struct.error as exc:
        raise ValueError(f"value out of 32-bit range: {exc}") from None


def _pack_points(points: list[Point]) -> bytes:
    return _pack_ints([v for p in points for v in (p.x, p.y, p.c)])


def encode_save(game: SaveGame) -> bytes:
    """Serialise ``game`` to the save file format."""
    _validate(game)
    name = game.user_name.encode(_TEXT_ENCODING, _TEXT_ERRORS)
    enemy_count = _COUNT.pack(len(game.enemy_pos))
    tower_count = _COUNT.pack(len(game.tower_pos))
    parts = [
        _COUNT.pack(len(name)),
        name,
        _pack_ints([game.point, game.user_health, game.map_code]),
        enemy_count,
        _pack_points(game.enemy_pos),
        enemy_count,
        _pack_ints(game.enemy_health),
        enemy_count,
        _pack_ints(game.enemy_path_number),
        enemy_count,
        _pack_ints(game.enemy_index),
        enemy_count,
        _pack_ints(game.enemy_type),
        tower_count,
        _pack_points(game.tower_pos),
        tower_count,
        _pack_ints(game.tower_type),
        _pack_ints([game.n_of_phase]),
        _pack_ints(game.n_of_enemy_each_phase),
        _pack_ints([game.phase, game.remain_enemy, game.n_of_enemy, game.spawned_enemy]),
    ]
    return b"".join(parts)


class _Cursor:
    def __init__(self, data: bytes, offset: int = 0) -> None:
        self.data = memoryview(data)
        self.offset = offset

    def _need(self, size: int) -> None:
        if size < 0 or self.offset + size > len(self.data):
            raise ValueError("truncated save data")

    def count(self) -> int:
        self._need(_COUNT.size)
        (value,) = _COUNT.unpack_from(self.data, self.offset)
        self.offset += _COUNT.size
        return value

    def int(self) -> int:
        self._need(_INT.size)
        (value,) = _INT.unpack_from(self.data, self.offset)
        self.offset += _INT.size
        return value

    def ints(self, n: int) -> list[int]:
        self._need(n * _INT.size)
        values = list(struct.unpack_from(f"<{n}i", self.data, self.offset))
        self.offset += n * _INT.size
        return values

    def points(self, n: int) -> list[Point]:
        flat = self.ints(n * 3)
        return [Point(*flat[i : i + 3]) for i in range(0, len(flat), 3)]

    def raw(self, n: int) -> bytes:
        self._need(n)
        value = bytes(self.data[self.offset : self.offset + n])
        self.offset += n
        return value


def _read_save(data: bytes, offset: int = 0) -> tuple[SaveGame, int]:
    """Decode one save starting at ``offset``; return it and the end offset."""
    cur = _Cursor(data, offset)
    game = SaveGame()
    game.user_name = cur.raw(cur.count()).decode(_TEXT_ENCODING, _TEXT_ERRORS)
    game.point = cur.int()
    game.user_health = cur.int()
    game.map_code = cur.int()
    game.enemy_pos = cur.points(cur.count())
    game.enemy_health = cur.ints(cur.count())
    game.enemy_path_number = cur.ints(cur.count())
    game.enemy_index = cur.ints(cur.count())
    game.enemy_type = cur.ints(cur.count())
    game.tower_pos = cur.points(cur.count())
    game.tower_type = cur.ints(cur.count())
    game.n_of_phase = cur.int()
    if game.n_of_phase < 0:
        raise ValueError("negative phase count in save data")
    game.n_of_enemy_each_phase = cur.ints(game.n_of_phase)
    game.phase = cur.int()
    game.remain_enemy = cur.int()
    game.n_of_enemy = cur.int()
    game.spawned_enemy = cur.int()
    return game, cur.offset


def decode_save(data: bytes) -> SaveGame:
    """Decode a single save; trailing bytes are ignored.

    Raises ValueError if the data ends before the save is complete.
    """
    game, _ = _read_save(data)
    return game


def save_path(map_code: int, storage_dir: str | os.PathLike[str] = DEFAULT_STORAGE_DIR) -> Path:
    """Return the save file path for map 1 to 4."""
    if map_code not in MAP_CODES:
        raise ValueError(f"no save slot for map code {map_code}")
    return Path(storage_dir) / f"SaveMap{map_code}.catfam"


def write_map_save(
    game: SaveGame,
    map_code: int,
    storage_dir: str | os.PathLike[str] = DEFAULT_STORAGE_DIR,
) -> Path:
    """Write ``game`` to the slot of ``map_code``, replacing it; return the path."""
    path = save_path(map_code, storage_dir)
    data = encode_save(game)
    path.write_bytes(data)
    log.debug(
        "save written to %s: name=%s points=%d health=%d map=%d enemies=%d towers=%d "
        "phases=%d per_phase=%s phase=%d remaining=%d total=%d spawned=%d",
        path,
        game.user_name,
        game.point,
        game.user_health,
        game.map_code,
        len(game.enemy_pos),
        len(game.tower_pos),
        game.n_of_phase,
        game.n_of_enemy_each_phase,
        game.phase,
        game.remain_enemy,
        game.n_of_enemy,
        game.spawned_enemy,
    )
    return path