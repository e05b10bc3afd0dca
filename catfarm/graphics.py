"""Image loading, pixel scaling and bitmap-font text composition."""

from __future__ import annotations

import os
from pathlib import Path

from PIL import Image

DEFAULT_TEXT_BASE_PATH = "Assets/text/"
DEFAULT_SPACING = 5
_TRANSPARENT = (0, 0, 0, 0)


def _scale(image: Image.Image, factor: float) -> Image.Image:
    width = int(image.width * factor)
    height = int(image.height * factor)
    rgba = image.convert("RGBA")
    if (width, height) == rgba.size:
        return rgba
    return rgba.resize((width, height), Image.Resampling.NEAREST)


def load_bitmap_image(filename: str | os.PathLike[str], factor: float) -> Image.Image:
    """Load an image and enlarge it by ``factor``, repeating pixels.

    Raises FileNotFoundError or PIL.UnidentifiedImageError if the file is
    missing or is not an image.
    """
    with Image.open(filename) as image:
        image.load()
        return _scale(image, factor)


def glyph_filename(ch: str, base_path: str | os.PathLike[str] = DEFAULT_TEXT_BASE_PATH) -> Path | None:
    """Return the glyph file for ``ch``, or None if it has no glyph.

    Letters map to their upper-case glyph, digits to their own; anything
    else is unsupported.
    """
    if len(ch) != 1 or not ch.isascii():
        return None
    if ch.isdigit():
        return Path(base_path) / f"{ch}.bmp"
    if ch.isalpha():
        return Path(base_path) / f"{ch.upper()}.bmp"
    return None


def _load_glyph(ch: str, factor: float, base_path: str | os.PathLike[str]) -> Image.Image | None:
    path = glyph_filename(ch, base_path)
    if path is None:
        return None
    try:
        return load_bitmap_image(path, factor)
    except OSError:
        return None


def compose_text(
    text: str,
    factor: float,
    spacing: int = DEFAULT_SPACING,
    base_path: str | os.PathLike[str] = DEFAULT_TEXT_BASE_PATH,
) -> Image.Image:
    """Render ``text`` from per-character glyph images onto a transparent image.

    Characters without a glyph file are skipped. Glyphs are placed left to
    right with ``spacing`` pixels between them and aligned to the top.
    """
    glyphs = [g for g in (_load_glyph(ch, factor, base_path) for ch in text) if g is not None]

    total_width = sum(g.width + spacing for g in glyphs)
    if text:
        total_width -= spacing
    total_width = max(0, total_width)
    max_height = max((g.height for g in glyphs), default=0)

    result = Image.new("RGBA", (total_width, max_height), _TRANSPARENT)
    current_x = 0
    for glyph in glyphs:
        result.paste(glyph, (current_x, 0))
        current_x += glyph.width + spacing
    return result


def bitmap_size(image: Image.Image | None) -> tuple[int, int]:
    """Return ``(width, height)`` of ``image``; ``(0, 0)`` for no image."""
    if image is None:
        return (0, 0)
    return image.size