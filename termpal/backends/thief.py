"""Color Thief backend, using the modified median cut quantizer."""

import logging
from collections.abc import Sequence
from typing import ClassVar

from colorthief import MMCQ

from ..models import Backend, Color
from . import register_backend
from .base import QuantizerBackend

# Sample every Nth pixel
QUALITY = 5
# Near white pixels are ignored by the quantizer
WHITE_THRESHOLD = 250


def _valid_pixels(pixels: bytes, quality: int) -> list[Color]:
    """Pick every `quality`-th pixel from interleaved RGB bytes, skipping near white ones."""
    result: list[Color] = []
    for offset in range(0, len(pixels) - 2, 3 * quality):
        r, g, b = pixels[offset], pixels[offset + 1], pixels[offset + 2]
        if not (r > WHITE_THRESHOLD and g > WHITE_THRESHOLD and b > WHITE_THRESHOLD):
            result.append((r, g, b))
    return result


@register_backend
class ThiefBackend(QuantizerBackend):
    """Statistical color reduction from the colorthief library.

    May return fewer colors than requested.
    """

    name: ClassVar[str] = Backend.THIEF.value

    def generate_palette(self, colors: Sequence[Color], count: int) -> list[Color] | None:
        if not colors:
            return None

        pixels = bytes(channel for color in colors for channel in color)
        valid = _valid_pixels(pixels, QUALITY)

        try:
            cmap = MMCQ.quantize(valid, count)
        except Exception:  # pylint: disable=broad-exception-caught
            logging.getLogger(__name__).debug("MMCQ failed on %d pixels", len(valid), exc_info=True)
            return None
        if not cmap:
            return None

        return [(int(r), int(g), int(b)) for r, g, b in cmap.palette][:count]
