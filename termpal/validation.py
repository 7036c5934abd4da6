"""Configuration validation framework with schema definitions.

Provides declarative schema definitions (ConfigField, ConfigItems) for
validating the settings file. Supports type checking, choices, custom
validators and fuzzy matching for typo detection.
"""

import difflib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, cast

__all__ = [
    "BOOL_FALSE_STRINGS",
    "BOOL_STRINGS",
    "BOOL_TRUE_STRINGS",
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "coerce_to_bool",
    "format_config_error",
    "in_range",
]

BOOL_TRUE_STRINGS = frozenset({"true", "yes", "on", "1", "enabled"})
BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})
BOOL_STRINGS = BOOL_TRUE_STRINGS | BOOL_FALSE_STRINGS


def coerce_to_bool(value: Any, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Args:
        value: The value to coerce
        default: Default value if value is None

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


def in_range(low: float, high: float) -> Callable[[Any], list[str]]:
    """Build a validator accepting numbers within [low, high].

    Args:
        low: Smallest accepted value
        high: Largest accepted value
    """

    def _validator(value: Any) -> list[str]:
        if not low <= float(value) <= high:
            return [f"Must be between {low} and {high}, got {value}"]
        return []

    return _validator


@dataclass
class ConfigField:
    """Describes an expected configuration field for validation.

    Attributes:
        name: The configuration key name
        field_type: Expected type (str, int, float, bool)
        default: Default value if not provided
        description: Human-readable description for error messages and help
        choices: List of valid values for enum-like fields
        validator: Custom validator function returning list of error messages
    """

    name: str
    field_type: type = str
    default: Any = None
    description: str = ""
    choices: list | None = None
    validator: Callable[[Any], list[str]] | None = None


class ConfigItems(list):
    """A list of ConfigField items with cached lookup by name."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)
        self._cache: dict[str, ConfigField] = {}

    def get(self, name: str) -> ConfigField | None:
        """Get a ConfigField by name, with caching for repeated lookups.

        Args:
            name: The field name to look up
        """
        v = self._cache.get(name)
        if not v:
            for prop in self:
                if prop.name == name:
                    v = prop
                    self._cache[name] = v
                    break
        return v


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Find a similar key using fuzzy matching.

    Args:
        unknown_key: The unknown key to find a match for
        known_keys: List of valid keys to search
    """
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    if matches:
        return matches[0]
    return None


def format_config_error(section: str, field: str, message: str, suggestion: str = "") -> str:
    """Format a configuration error message.

    Args:
        section: Configuration section name
        field: Field name that has the error
        message: Error description
        suggestion: Optional suggestion for fixing the error
    """
    msg = f"[{section}] Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Validates configuration against a schema."""

    def __init__(self, config: dict, section: str, logger: logging.Logger) -> None:
        """Initialize the validator.

        Args:
            config: The configuration dictionary to validate
            section: Name of the section, used in error messages
            logger: Logger instance for warnings
        """
        self.config = config
        self.section = section
        self.log = logger

    def validate(self, schema: ConfigItems) -> list[str]:
        """Validate configuration against schema.

        Args:
            schema: List of ConfigField definitions

        Returns:
            List of error messages (empty if validation passed)
        """
        errors = []

        for field_def in schema:
            value = self.config.get(field_def.name)
            if value is None:
                continue

            type_error = self._check_type(field_def, value)
            if type_error:
                errors.append(type_error)
                continue

            if field_def.choices is not None and value not in field_def.choices:
                choices_str = ", ".join(repr(c) for c in field_def.choices)
                errors.append(
                    format_config_error(
                        self.section,
                        field_def.name,
                        f"Invalid value {value!r}",
                        f"Valid options: {choices_str}",
                    )
                )
                continue

            if field_def.validator:
                errors.extend(
                    format_config_error(self.section, field_def.name, validation_error)
                    for validation_error in field_def.validator(value)
                )

        return errors

    def _check_type(self, field_def: ConfigField, value: Any) -> str | None:
        """Check if value matches expected type.

        Args:
            field_def: Field definition
            value: Value to check

        Returns:
            Error message if type mismatch, None otherwise
        """
        checkers = {
            bool: self._check_bool,
            int: self._check_numeric,
            float: self._check_numeric,
            str: self._check_str,
        }

        checker = checkers.get(field_def.field_type)
        if checker:
            return checker(field_def, value)
        return None

    def _check_bool(self, field_def: ConfigField, value: Any) -> str | None:
        """Check bool type (special handling since bool is subclass of int)."""
        if isinstance(value, bool):
            return None
        if isinstance(value, str) and value.lower() in BOOL_STRINGS:
            return None
        return format_config_error(
            self.section,
            field_def.name,
            f"Expected bool, got {type(value).__name__}",
            "Use true/false (without quotes)",
        )

    def _check_numeric(self, field_def: ConfigField, value: Any) -> str | None:
        """Check int/float type, booleans are rejected."""
        if isinstance(value, bool):
            return format_config_error(
                self.section,
                field_def.name,
                f"Expected {field_def.field_type.__name__}, got bool",
                f"Use {field_def.name} = 42",
            )
        if isinstance(value, (int, float)):
            if field_def.field_type is int and isinstance(value, float) and not value.is_integer():
                return format_config_error(
                    self.section,
                    field_def.name,
                    f"Expected int, got {value!r}",
                    f"Use {field_def.name} = {int(value)}",
                )
            return None
        expected_type = cast("type[int | float]", field_def.field_type)
        try:
            expected_type(value)
        except (ValueError, TypeError):
            return format_config_error(
                self.section,
                field_def.name,
                f"Expected {expected_type.__name__}, got {type(value).__name__}",
                f"Use {field_def.name} = 42 (without quotes)",
            )

        return None

    def _check_str(self, field_def: ConfigField, value: Any) -> str | None:
        """Check str type."""
        if isinstance(value, str):
            return None
        return format_config_error(
            self.section,
            field_def.name,
            f"Expected str, got {type(value).__name__}",
            f'Use {field_def.name} = "value"',
        )

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log warnings for unknown configuration keys.

        Args:
            schema: List of ConfigField definitions

        Returns:
            List of warning messages
        """
        warnings = []
        known_keys = {f.name for f in schema}

        for key in self.config:
            if key in known_keys:
                continue

            similar = _find_similar_key(key, list(known_keys))
            if similar:
                msg = f"[{self.section}] Unknown option '{key}' (did you mean '{similar}'?)"
            else:
                msg = f"[{self.section}] Unknown option '{key}' - will be ignored"

            self.log.warning(msg)
            warnings.append(msg)

        return warnings
