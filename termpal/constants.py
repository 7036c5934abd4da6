"""Shared constants for termpal."""

import os
from pathlib import Path

__all__ = [
    "CACHE_DIR",
    "COLORSCHEMES_DIRNAME",
    "CONFIG_FILE",
    "CONFIG_SECTION",
    "CURRENT_COLORSCHEME_FILENAME",
    "IMAGE_EXTENSIONS",
    "PREVIEW_FILENAME",
]

# Config file paths - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "termpal" / "config.toml"

# Optional table holding the settings, top level keys are accepted too
CONFIG_SECTION = "termpal"

_xdg_cache_home = Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")
CACHE_DIR = _xdg_cache_home / "termpal"

COLORSCHEMES_DIRNAME = "colorschemes"
CURRENT_COLORSCHEME_FILENAME = "colors"
PREVIEW_FILENAME = "preview.html"

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "tiff", "webp")
