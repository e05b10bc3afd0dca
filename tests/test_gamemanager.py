from catfarm.gamemanager import GameManager, get_game_manager


def test_default_flag_is_false():
    assert GameManager().first_start_game is False


def test_flag_can_be_set():
    manager = GameManager()
    manager.first_start_game = True
    assert manager.first_start_game is True


def test_shared_instance_is_stable():
    first = get_game_manager()
    second = get_game_manager()
    assert first is second
    original = first.first_start_game
    try:
        first.first_start_game = not original
        assert second.first_start_game is (not original)
    finally:
        first.first_start_game = original