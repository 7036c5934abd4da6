"""Settings record and its schema."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .colors import hex_to_rgb, to_hex
from .models import Backend, Color, ConfigInvalid
from .validation import ConfigField, ConfigItems, ConfigValidator, coerce_to_bool, in_range

if TYPE_CHECKING:
    import logging

__all__ = ["SETTINGS_SCHEMA", "Settings", "clamp_overrides", "validate_config"]

SECTION = "termpal"

MAX_THUMB_SIZE = 99999
MAX_INDEX = 7
MAX_STRENGTH = 100

# (min, max) pairs which must be ordered
BOUND_PAIRS = (
    ("clamp_value_min", "clamp_value_max"),
    ("clamp_saturation_min", "clamp_saturation_max"),
    ("skip_value_min", "skip_value_max"),
    ("skip_saturation_min", "skip_saturation_max"),
)


def _is_hex_color(value: str) -> list[str]:
    try:
        hex_to_rgb(value)
    except ValueError as e:
        return [str(e)]
    return []


def _unit(name: str, default: float, description: str) -> ConfigField:
    return ConfigField(name, float, default=default, description=description, validator=in_range(0.0, 1.0))


SETTINGS_SCHEMA = ConfigItems(
    ConfigField(
        "backend",
        str,
        default="kmeans",
        description="Quantization backend",
        choices=["kmeans", "colorz", "thief", "colorthief", "ColorThief"],
    ),
    ConfigField("thumb_w", int, default=100, description="Sampling thumbnail width", validator=in_range(1, MAX_THUMB_SIZE)),
    ConfigField("thumb_h", int, default=100, description="Sampling thumbnail height", validator=in_range(1, MAX_THUMB_SIZE)),
    ConfigField("bg_color", str, default="#000000", description="Background color (#RRGGBB)", validator=_is_hex_color),
    ConfigField("bg_idx", int, default=0, description="Palette color mixed into the background", validator=in_range(0, MAX_INDEX)),
    ConfigField("bg_strength", int, default=10, description="Percentage of palette color in the background", validator=in_range(0, MAX_STRENGTH)),
    ConfigField("fg_color", str, default="#ffffff", description="Foreground color (#RRGGBB)", validator=_is_hex_color),
    ConfigField("fg_idx", int, default=0, description="Palette color mixed into the foreground", validator=in_range(0, MAX_INDEX)),
    ConfigField("fg_strength", int, default=10, description="Percentage of palette color in the foreground", validator=in_range(0, MAX_STRENGTH)),
    ConfigField("light", bool, default=False, description="Generate a light colorscheme"),
    ConfigField("clamp_saturation", bool, default=True, description="Clamp sample saturation"),
    ConfigField("clamp_value", bool, default=True, description="Clamp sample value"),
    ConfigField("skip_saturation", bool, default=True, description="Drop samples outside the saturation window"),
    ConfigField("skip_value", bool, default=False, description="Drop samples outside the value window"),
    _unit("clamp_value_min", 0.4, "Lower value clamp"),
    _unit("clamp_value_max", 0.5, "Upper value clamp"),
    _unit("clamp_saturation_min", 0.4, "Lower saturation clamp"),
    _unit("clamp_saturation_max", 0.41, "Upper saturation clamp"),
    _unit("skip_value_min", 0.1, "Lower value window (exclusive)"),
    _unit("skip_value_max", 0.9, "Upper value window (exclusive)"),
    _unit("skip_saturation_min", 0.3, "Lower saturation window (exclusive)"),
    _unit("skip_saturation_max", 0.7, "Upper saturation window (exclusive)"),
)


def validate_config(config: dict[str, Any], log: logging.Logger) -> list[str]:
    """Validate a raw settings dictionary.

    Unknown keys are only warned about.

    Args:
        config: Raw settings, as read from the TOML file
        log: Logger receiving the warnings

    Returns:
        List of error messages (empty if the settings are usable)
    """
    validator = ConfigValidator(config, SECTION, log)
    errors = validator.validate(SETTINGS_SCHEMA)
    validator.warn_unknown_keys(SETTINGS_SCHEMA)
    if errors:
        return errors

    for low_name, high_name in BOUND_PAIRS:
        low = config.get(low_name, SETTINGS_SCHEMA.get(low_name).default)  # type: ignore[union-attr]
        high = config.get(high_name, SETTINGS_SCHEMA.get(high_name).default)  # type: ignore[union-attr]
        if float(low) > float(high):
            errors.append(f"[{SECTION}] {low_name} must be <= {high_name}")
    return errors


def clamp_overrides(overrides: dict[str, Any]) -> dict[str, Any]:
    """Clamp command line overrides into their valid range.

    `None` values are dropped, so only explicitly given options remain.

    Args:
        overrides: Override values keyed by settings field name
    """
    result: dict[str, Any] = {}
    for name, value in overrides.items():
        if value is None:
            continue
        field_def = SETTINGS_SCHEMA.get(name)
        if field_def is None:
            continue
        if field_def.field_type is float:
            value = max(0.0, min(1.0, float(value)))
        elif name in {"thumb_w", "thumb_h"}:
            value = max(1, min(MAX_THUMB_SIZE, int(value)))
        elif name in {"bg_idx", "fg_idx"}:
            value = max(0, min(MAX_INDEX, int(value)))
        elif name in {"bg_strength", "fg_strength"}:
            value = max(0, min(MAX_STRENGTH, int(value)))
        result[name] = value
    return result


@dataclass(frozen=True, slots=True)
class Settings:  # pylint: disable=too-many-instance-attributes
    """Effective settings of a colorscheme generation.

    Instances are validated on creation through `from_config`; the pipeline
    trusts the invariants afterwards.
    """

    backend: Backend = Backend.KMEANS
    thumb_w: int = 100
    thumb_h: int = 100

    bg_color: Color = (0, 0, 0)
    bg_idx: int = 0
    bg_strength: int = 10

    fg_color: Color = (255, 255, 255)
    fg_idx: int = 0
    fg_strength: int = 10

    light: bool = False

    clamp_saturation: bool = True
    clamp_value: bool = True
    skip_saturation: bool = True
    skip_value: bool = False

    clamp_value_min: float = 0.4
    clamp_value_max: float = 0.5
    clamp_saturation_min: float = 0.4
    clamp_saturation_max: float = 0.41
    skip_value_min: float = 0.1
    skip_value_max: float = 0.9
    skip_saturation_min: float = 0.3
    skip_saturation_max: float = 0.7

    @classmethod
    def from_config(cls, config: dict[str, Any], log: logging.Logger) -> Settings:
        """Build validated settings from a raw dictionary.

        Missing keys take their default value.

        Args:
            config: Raw settings
            log: Logger receiving validation warnings

        Raises:
            ConfigInvalid: if any value is invalid
        """
        errors = validate_config(config, log)
        if errors:
            raise ConfigInvalid("\n".join(errors))

        values: dict[str, Any] = {}
        for field_def in SETTINGS_SCHEMA:
            value = config.get(field_def.name, field_def.default)
            if field_def.name == "backend":
                values["backend"] = Backend.from_name(value)
            elif field_def.name in {"bg_color", "fg_color"}:
                values[field_def.name] = hex_to_rgb(value)
            elif field_def.field_type is bool:
                values[field_def.name] = coerce_to_bool(value)
            else:
                values[field_def.name] = field_def.field_type(value)
        return cls(**values)

    def as_config(self) -> dict[str, Any]:
        """Return the settings as a raw dictionary, the inverse of `from_config`."""
        config = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        config["backend"] = str(self.backend)
        config["bg_color"] = to_hex(*self.bg_color)
        config["fg_color"] = to_hex(*self.fg_color)
        return config

    def merged(self, overrides: dict[str, Any], log: logging.Logger) -> Settings:
        """Return new settings with `overrides` applied, then validated.

        Args:
            overrides: Raw values keyed by field name (colors as hex strings)
            log: Logger receiving validation warnings

        Raises:
            ConfigInvalid: if the merged settings are invalid
        """
        config = self.as_config()
        config.update(overrides)
        return Settings.from_config(config, log)

    @property
    def saturation_clamp(self) -> tuple[float, float]:
        """Inclusive saturation clamp bounds."""
        return self.clamp_saturation_min, self.clamp_saturation_max

    @property
    def value_clamp(self) -> tuple[float, float]:
        """Inclusive value clamp bounds."""
        return self.clamp_value_min, self.clamp_value_max

    @property
    def saturation_skip(self) -> tuple[float, float]:
        """Exclusive saturation window."""
        return self.skip_saturation_min, self.skip_saturation_max

    @property
    def value_skip(self) -> tuple[float, float]:
        """Exclusive value window."""
        return self.skip_value_min, self.skip_value_max

    @property
    def base_colors(self) -> tuple[Color, Color]:
        """Background and foreground base colors, swapped in light mode."""
        if self.light:
            return self.fg_color, self.bg_color
        return self.bg_color, self.fg_color
