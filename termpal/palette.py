"""Deterministic palette ordering."""

from collections.abc import Iterable

from .colors import rgb_to_hsv
from .models import Color

__all__ = ["sort_by_hue"]


def sort_by_hue(palette: Iterable[Color]) -> list[Color]:
    """Return the palette sorted by ascending hue.

    The sort is stable: colors sharing a hue (grays and black all have hue 0)
    keep their relative order, so a given palette always maps to the same
    slot indices.

    Args:
        palette: Colors in quantizer order
    """
    return sorted(palette, key=lambda color: rgb_to_hsv(color)[0])
