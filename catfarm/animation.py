"""Frame animations, one-shot visual effects and their manager."""

from __future__ import annotations

import os
from collections.abc import Sequence

from PIL import Image

from catfarm.graphics import load_bitmap_image

DEFAULT_FRAME_SPEED = 0.2

PathLike = str | os.PathLike[str]


class Animation:
    """Cycles through a list of frames, advancing one frame every ``speed`` seconds."""

    def __init__(self) -> None:
        self.frames: list[Image.Image] = []
        self.current_index = 0
        self.timer = 0.0
        self.speed = DEFAULT_FRAME_SPEED
        self.is_animating = False

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def current_frame(self) -> Image.Image | None:
        """The frame to show now, or None if there are no frames."""
        return self.frames[self.current_index] if self.frames else None

    def set_frames(self, frame_paths: Sequence[PathLike], speed: float, factor: float) -> None:
        """Load the frames, scaled by ``factor``, and start animating."""
        self.speed = speed
        self.frames = [load_bitmap_image(path, factor) for path in frame_paths]
        self.current_index = 0
        self.timer = 0.0
        self.is_animating = True

    def update(self, delta: float) -> bool:
        """Advance the timer by ``delta``; return True if the frame changed."""
        if not self.is_animating or not self.frames:
            return False
        self.timer += delta
        if self.timer < self.speed:
            return False
        self.timer = 0.0
        self.current_index = (self.current_index + 1) % len(self.frames)
        return True

    def stop(self) -> None:
        """Stop and rewind to the first frame."""
        self.is_animating = False
        self.current_index = 0

    def play(self) -> None:
        self.is_animating = True


class VFX:
    """A visual effect at a position that plays its frames once."""

    def __init__(
        self,
        frame_paths: Sequence[PathLike],
        factor: float,
        position: tuple[int, int],
        speed: float,
    ) -> None:
        self.position = position
        self.animation = Animation()
        self.animation.set_frames(frame_paths, speed, factor)

    @property
    def image(self) -> Image.Image | None:
        return self.animation.current_frame

    def update(self, delta: float) -> None:
        """Advance the effect; it stops once it wraps back to its first frame."""
        if self.animation.update(delta) and self.animation.current_index == 0:
            self.animation.stop()

    def is_finished(self) -> bool:
        return not self.animation.is_animating


class AnimationManager:
    """Keeps the running effects and drops them when they finish."""

    def __init__(self) -> None:
        self.vfx_list: list[VFX] = []

    def add_vfx(
        self,
        frame_paths: Sequence[PathLike],
        factor: float,
        position: tuple[int, int],
        speed: float,
    ) -> VFX:
        """Start a new effect and return it."""
        vfx = VFX(frame_paths, factor, position, speed)
        self.vfx_list.append(vfx)
        return vfx

    def update(self, delta: float) -> None:
        """Advance every effect and remove the finished ones."""
        for vfx in self.vfx_list:
            vfx.update(delta)
        self.vfx_list = [vfx for vfx in self.vfx_list if not vfx.is_finished()]