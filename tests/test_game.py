import pytest

from catfarm.game import GameConfig, ScreenRequest, resolve_screen


def test_default_config_matches_window_settings():
    config = GameConfig()
    assert config.window_title == "Cat-farm Tower Defense"
    assert config.window_size == (1280, 720)


def test_config_rejects_non_positive_size():
    with pytest.raises(ValueError):
        GameConfig(window_width=0)
    with pytest.raises(ValueError):
        GameConfig(window_height=-5)


def test_config_rejects_non_positive_frame_time():
    with pytest.raises(ValueError):
        GameConfig(frame_seconds=0)


def test_index_zero_is_main_screen():
    request = resolve_screen(0)
    assert request.is_main
    assert request.resume is False


@pytest.mark.parametrize("index", range(0, 9))
def test_resolve_round_trips_through_index(index):
    assert resolve_screen(index).index == index


@pytest.mark.parametrize("index", range(1, 5))
def test_new_games_are_not_resumed(index):
    request = resolve_screen(index)
    assert request.map_number == index
    assert request.resume is False


@pytest.mark.parametrize("index", range(5, 9))
def test_high_indices_resume_a_map(index):
    request = resolve_screen(index)
    assert request.resume is True
    assert request.map_number == resolve_screen(index - 4).map_number


def test_first_resume_index_is_map_one():
    assert resolve_screen(5) == ScreenRequest(map_number=1, resume=True)


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_invalid_index_raises(index):
    with pytest.raises(ValueError):
        resolve_screen(index)


def test_non_int_index_raises_type_error():
    with pytest.raises(TypeError):
        resolve_screen("1")


def test_screen_request_rejects_unknown_map():
    with pytest.raises(ValueError):
        ScreenRequest(map_number=7)


def test_main_screen_cannot_be_resumed():
    with pytest.raises(ValueError):
        ScreenRequest(resume=True)