"""Game window settings and screen selection."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WINDOW_TITLE = "Cat-farm Tower Defense"
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
DEFAULT_FONT_PATH = "Assets/pixelFont-7-8x14-sproutLands.ttf"
DEFAULT_CURSOR_PATH = "Assets/mouse/mouse1.png"
DEFAULT_CURSOR_SCALE = 2
DEFAULT_FRAME_SECONDS = 0.016

MAIN_SCREEN_INDEX = 0
MAP_COUNT = 4


@dataclass
class GameConfig:
    """Window and asset settings used when the game starts."""

    window_title: str = DEFAULT_WINDOW_TITLE
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    font_path: str = DEFAULT_FONT_PATH
    cursor_path: str = DEFAULT_CURSOR_PATH
    cursor_scale: float = DEFAULT_CURSOR_SCALE
    frame_seconds: float = DEFAULT_FRAME_SECONDS

    def __post_init__(self) -> None:
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(
                f"window size must be positive, got {self.window_width}x{self.window_height}"
            )
        if self.frame_seconds <= 0:
            raise ValueError("frame_seconds must be positive")

    @property
    def window_size(self) -> tuple[int, int]:
        return (self.window_width, self.window_height)


@dataclass(frozen=True)
class ScreenRequest:
    """Which screen to show: the main menu, or a map, new or resumed from its save."""

    map_number: int | None = None
    resume: bool = False

    def __post_init__(self) -> None:
        if self.map_number is None:
            if self.resume:
                raise ValueError("the main screen cannot be resumed")
        elif not 1 <= self.map_number <= MAP_COUNT:
            raise ValueError(f"no map numbered {self.map_number}")

    @property
    def is_main(self) -> bool:
        return self.map_number is None

    @property
    def index(self) -> int:
        """The screen index that selects this request."""
        if self.map_number is None:
            return MAIN_SCREEN_INDEX
        return self.map_number + (MAP_COUNT if self.resume else 0)


def resolve_screen(index: int) -> ScreenRequest:
    """Map a screen index to a request.

    0 is the main menu, 1 to 4 start maps 1 to 4, and 5 to 8 resume maps
    1 to 4 from their saves. Any other index raises ValueError.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"screen index must be an int, got {type(index).__name__}")
    if index == MAIN_SCREEN_INDEX:
        return ScreenRequest()
    if 1 <= index <= MAP_COUNT:
        return ScreenRequest(map_number=index, resume=False)
    if MAP_COUNT < index <= 2 * MAP_COUNT:
        return ScreenRequest(map_number=index - MAP_COUNT, resume=True)
    raise ValueError(f"invalid screen index: {index}")