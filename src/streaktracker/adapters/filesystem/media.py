"""Discover trackable entities from image files and load their images."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import Final

from streaktracker.domain.reconciliation import DiscoveredEntity

IMAGE_SUFFIX: Final[str] = ".png"
PLACEHOLDER_IMAGE: Final[bytes] = b""

log = getLogger(__name__)


def derive_display_name(stem: str) -> str:
    """Turn a file stem such as ``The_Trapper`` or ``GhostFace`` into a display name."""

    chars: list[str] = []
    for char in stem.replace("_", " "):
        if char.isupper() and chars and chars[-1].islower():
            chars.append(" ")
        chars.append(char)
    return "".join(chars)


def discover(media_dir: Path) -> list[DiscoveredEntity]:
    """List every ``.png`` file (any case) in ``media_dir`` as a candidate entity."""

    try:
        entries = sorted(media_dir.iterdir(), key=lambda entry: entry.name)
    except FileNotFoundError:
        log.debug("Media directory %s does not exist", media_dir)
        return []
    except OSError as exc:
        log.warning("Could not scan %s: %s", media_dir, exc)
        return []

    discovered = [
        DiscoveredEntity(name=derive_display_name(entry.stem), image_path=str(entry))
        for entry in entries
        if entry.suffix.lower() == IMAGE_SUFFIX and entry.is_file()
    ]
    log.debug("Discovered %d images in %s", len(discovered), media_dir)
    return discovered


def load_image(image_path: str) -> bytes:
    """Return the image bytes, or an empty placeholder when the file cannot be read."""

    try:
        return Path(image_path).read_bytes()
    except OSError as exc:
        log.warning("Could not load image %s: %s", image_path, exc)
        return PLACEHOLDER_IMAGE
