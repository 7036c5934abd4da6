"""HSV filtering and clamping of the raw image samples."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .colors import hsv_to_rgb, rgb_to_hsv
from .models import Color

if TYPE_CHECKING:
    from .settings import Settings

__all__ = ["normalize_samples"]


def _in_window(component: float, window: tuple[float, float]) -> bool:
    """Exclusive bounds check, boundary values are rejected."""
    return window[0] < component < window[1]


def _clamp(component: float, bounds: tuple[float, float]) -> float:
    return max(bounds[0], min(bounds[1], component))


def normalize_samples(samples: Iterable[Color], settings: Settings) -> list[Color]:
    """Filter and clamp the samples in HSV space.

    Skip filters run first and drop the samples whose saturation (or value)
    is not strictly inside the configured window. The surviving samples then
    get their saturation (or value) clamped into the inclusive clamp bounds.
    Disabled toggles leave the component untouched.

    Args:
        samples: sRGB samples, typically the pixels of the resized image
        settings: Effective settings

    Returns:
        The filtered samples, converted back to sRGB. May be empty.
    """
    result: list[Color] = []
    for sample in samples:
        hue, saturation, value = rgb_to_hsv(sample)

        if settings.skip_saturation and not _in_window(saturation, settings.saturation_skip):
            continue
        if settings.skip_value and not _in_window(value, settings.value_skip):
            continue

        if settings.clamp_saturation:
            saturation = _clamp(saturation, settings.saturation_clamp)
        if settings.clamp_value:
            value = _clamp(value, settings.value_clamp)

        result.append(hsv_to_rgb(hue, saturation, value))
    return result
