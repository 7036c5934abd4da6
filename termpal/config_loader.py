"""Configuration file loading utilities.

This module handles loading and parsing the TOML settings file.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE, CONFIG_SECTION
from .models import ConfigInvalid
from .settings import Settings

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading the settings file.

    Settings are read from a `[termpal]` table when present, otherwise from
    the top level keys.
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log

    def load(self, config_filename: str | Path = "") -> dict[str, Any]:
        """Load the raw settings dictionary.

        Args:
            config_filename: Optional path to the config file.
                           If empty, uses default CONFIG_FILE location.

        Returns:
            The settings dictionary, empty when the file does not exist.

        Raises:
            ConfigInvalid: If the file has syntax errors or can't be read.
        """
        fname = Path(os.path.expandvars(config_filename)).expanduser() if config_filename else CONFIG_FILE
        if not fname.exists():
            self.log.info("No config file at %s", fname)
            return {}

        self.log.info("Reading config %s", fname)
        try:
            with fname.open("rb") as f:
                config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Problem reading {fname}: {e}"
            raise ConfigInvalid(msg) from e
        except OSError as e:
            msg = f"Can't read {fname}: {e}"
            raise ConfigInvalid(msg) from e

        section = config.get(CONFIG_SECTION)
        if isinstance(section, dict):
            return section
        return config

    def load_settings(self, config_filename: str | Path = "") -> Settings:
        """Load and validate the settings, falling back to defaults on error.

        Args:
            config_filename: Optional path to the config file
        """
        try:
            settings = Settings.from_config(self.load(config_filename), self.log)
        except ConfigInvalid as e:
            self.log.error("%s", e)
            self.log.warning("Failed to read config, using default")
            return Settings()
        self.log.info("Config collected")
        return settings
