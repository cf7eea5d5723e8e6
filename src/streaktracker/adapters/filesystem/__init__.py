"""Public interface for the filesystem adapters."""

from __future__ import annotations

from .categories import load_categories, load_category_sets, write_default_categories
from .media import PLACEHOLDER_IMAGE, derive_display_name, discover, load_image

__all__ = [
    "PLACEHOLDER_IMAGE",
    "derive_display_name",
    "discover",
    "load_categories",
    "load_category_sets",
    "load_image",
    "write_default_categories",
]
