"""File-based colorscheme cache keyed by settings fingerprint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .colors import to_hex
from .colorscheme import Colorscheme

if TYPE_CHECKING:
    from .settings import Settings

__all__ = ["FINGERPRINT_FIELDS", "ColorschemeCache", "fingerprint"]

# Order matters: changing it invalidates every existing entry
FINGERPRINT_FIELDS = (
    "backend",
    "thumb_w",
    "thumb_h",
    "bg_color",
    "bg_idx",
    "bg_strength",
    "fg_color",
    "fg_idx",
    "fg_strength",
    "light",
    "clamp_saturation",
    "clamp_value",
    "skip_saturation",
    "skip_value",
    "clamp_value_min",
    "clamp_value_max",
    "clamp_saturation_min",
    "clamp_saturation_max",
    "skip_value_min",
    "skip_value_max",
    "skip_saturation_min",
    "skip_saturation_max",
)


def _canonical(value: Any) -> str:
    """Stringify a settings value the same way on every run."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, tuple):
        return to_hex(*value)
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def fingerprint(settings: Settings, image: str | Path) -> str:
    """Build the cache key of a generation.

    Only the base name of the image is used: two images sharing a file name
    in different folders share their cache entries.

    Backends are named `kmeans`/`thief` and the colors are taken as
    configured, before the light mode swap, so keys are termpal specific.

    Args:
        settings: Effective settings
        image: Path of the source image
    """
    prefix = "".join(_canonical(getattr(settings, name)) for name in FINGERPRINT_FIELDS)
    return f"{prefix}{Path(image).name}"


class ColorschemeCache:
    """One file per fingerprint, holding 16 `#rrggbb` lines.

    Entries are never expired or removed. I/O errors are logged and
    otherwise ignored: a failed read is a miss, a failed write is skipped.

    Attributes:
        cache_dir: Directory where entries are stored.
    """

    def __init__(self, cache_dir: Path, log: logging.Logger | None = None) -> None:
        """Initialize the cache.

        Args:
            cache_dir: Directory for cached colorschemes, created on first write.
            log: Logger for I/O errors
        """
        self.cache_dir = cache_dir
        self.log = log or logging.getLogger(__name__)

    def get_path(self, key: str) -> Path:
        """Get the cache file path for a given key.

        Args:
            key: The fingerprint
        """
        return self.cache_dir / key

    def get(self, key: str) -> Colorscheme | None:
        """Return the cached colorscheme, or None on miss or unreadable entry.

        Args:
            key: The fingerprint
        """
        path = self.get_path(key)
        if not path.exists():
            return None
        try:
            return Colorscheme.from_text(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self.log.warning("Ignoring unreadable cache entry %s: %s", path, e)
            return None

    def store(self, key: str, scheme: Colorscheme) -> Path | None:
        """Store a colorscheme, replacing any previous entry.

        Args:
            key: The fingerprint
            scheme: The colorscheme to persist

        Returns:
            Path to the cached file, None if it couldn't be written.
        """
        path = self.get_path(key)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(scheme.to_text(), encoding="utf-8")
        except OSError as e:
            self.log.warning("Failed to write cache entry %s: %s", path, e)
            return None
        return path
