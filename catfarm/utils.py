"""Small filesystem helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


def create_file(path: str | os.PathLike[str]) -> None:
    """Create an empty file at ``path``, truncating any existing content."""
    Path(path).write_bytes(b"")


def create_folder(path: str | os.PathLike[str]) -> None:
    """Create a single directory; an existing directory is accepted.

    Raises FileExistsError if ``path`` exists and is not a directory, and
    FileNotFoundError if the parent directory is missing.
    """
    target = Path(path)
    try:
        target.mkdir()
    except FileExistsError:
        if not target.is_dir():
            raise
    log.info("Directory created or already exists: %s", target)