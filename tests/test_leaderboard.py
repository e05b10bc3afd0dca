import pytest

from catfarm.leaderboard import NO_USERS_MESSAGE, Leaderboard
from catfarm.user import User


@pytest.fixture
def board(tmp_path):
    return Leaderboard(tmp_path / "LeaderBoard.catfarm")


def test_read_missing_file_returns_false(board):
    assert board.read_file() is False
    assert board.users == []


def test_write_record_bytes(board):
    board.write_file(User(name="ab", score=7))
    assert board.path.read_bytes() == b"\x02\x00\x00\x00ab\x01\x00\x00\x007"


def test_write_then_read_round_trip(board):
    board.write_file(User(name="tom", score=120))
    board.write_file(User(name="anna", score=-3))
    assert board.read_file() is True
    assert [(u.name, u.score) for u in board.users] == [("tom", 120), ("anna", -3)]


def test_write_appends(board):
    board.write_file(User(name="a", score=1))
    size = board.path.stat().st_size
    board.write_file(User(name="a", score=1))
    assert board.path.stat().st_size == 2 * size


def test_truncated_file_raises(board):
    board.write_file(User(name="tom", score=120))
    board.path.write_bytes(board.path.read_bytes()[:-2])
    with pytest.raises(ValueError):
        board.read_file()


def test_bad_score_raises(board):
    board.path.write_bytes(b"\x01\x00\x00\x00a\x01\x00\x00\x00x")
    with pytest.raises(ValueError):
        board.read_file()


def test_add_user_keeps_order(board):
    for name, score in [("a", 5), ("b", 50), ("c", 20)]:
        board.add_user(User(name=name, score=score))
    assert [u.name for u in board.users] == ["b", "c", "a"]


def test_sort_users_by_score(board):
    board.users = [User(name="x", score=1), User(name="y", score=3), User(name="z", score=2)]
    board.sort_users_by_score()
    scores = [u.score for u in board.users]
    assert scores == sorted(scores, reverse=True)


def test_top_entries_without_file(board):
    assert board.top_entries() == [NO_USERS_MESSAGE]


def test_top_entries_ranked_and_limited(board):
    for i in range(7):
        board.write_file(User(name=f"p{i}", score=i * 10))
    lines = board.top_entries()
    assert len(lines) == 5
    assert lines[0] == "1. p6 60"
    assert lines[4] == "5. p2 20"


def test_top_entries_custom_limit(board):
    board.write_file(User(name="solo", score=3))
    board.write_file(User(name="duo", score=9))
    assert board.top_entries(1) == ["1. duo 9"]


def test_top_entries_empty_file(board):
    board.path.write_bytes(b"")
    assert board.top_entries() == []