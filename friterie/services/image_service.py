"""Listing of menu pictures available on disk."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

IMAGE_FOLDERS: tuple[str, ...] = ("placeholders", "menu-items")
IMAGE_SUFFIXES: frozenset[str] = frozenset({".jpg", ".jpeg", ".png", ".webp"})


def list_images(images_dir: str | Path) -> list[str]:
    """Return public ``/images/...`` paths of every picture, sorted."""
    root = Path(images_dir)
    images: list[str] = []
    for folder in IMAGE_FOLDERS:
        directory = root / folder
        try:
            entries = sorted(directory.iterdir())
        except OSError:
            logger.warning("[IMAGES] cannot read %s; skipping", directory)
            continue
        images.extend(
            f"/images/{folder}/{entry.name}"
            for entry in entries
            if entry.is_file() and entry.suffix.lower() in IMAGE_SUFFIXES
        )
    return sorted(images)
