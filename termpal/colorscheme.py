"""The 16 colors terminal colorscheme and its synthesis from a palette."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .colors import WHITE, hex_to_rgb, linear_blend, to_hex
from .models import PALETTE_SIZE, Color, InsufficientPalette

__all__ = ["SLOT_COUNT", "Colorscheme", "synthesize"]

SLOT_COUNT = 16

# How far the light companions are lifted toward white
BASE_LIGHT_LIFT = 10
ACCENT_LIGHT_LIFT = 30


@dataclass(frozen=True, slots=True)
class Colorscheme:  # pylint: disable=too-many-instance-attributes
    """Terminal colors t0..t15.

    t0 is the background, t7 the foreground, t8..t15 are the light
    companions of t0..t7.
    """

    t0: Color
    t1: Color
    t2: Color
    t3: Color
    t4: Color
    t5: Color
    t6: Color
    t7: Color
    t8: Color
    t9: Color
    t10: Color
    t11: Color
    t12: Color
    t13: Color
    t14: Color
    t15: Color

    @property
    def background(self) -> Color:
        """Background color."""
        return self.t0

    @property
    def foreground(self) -> Color:
        """Foreground color."""
        return self.t7

    def __iter__(self) -> Iterator[Color]:
        return iter(self.as_list())

    def as_list(self) -> list[Color]:
        """Return the 16 colors in slot order."""
        return [getattr(self, f"t{i}") for i in range(SLOT_COUNT)]

    @property
    def dark(self) -> list[Color]:
        """Colors t0..t7."""
        return self.as_list()[:8]

    @property
    def light(self) -> list[Color]:
        """Colors t8..t15."""
        return self.as_list()[8:]

    def to_text(self) -> str:
        """Serialize as newline separated `#rrggbb` strings."""
        return "\n".join(to_hex(*color) for color in self)

    @classmethod
    def from_text(cls, text: str) -> Colorscheme:
        """Parse the output of `to_text`.

        Args:
            text: 16 hex colors, one per line

        Raises:
            ValueError: if the text does not hold exactly 16 valid colors
        """
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if len(lines) != SLOT_COUNT:
            msg = f"Expected {SLOT_COUNT} colors, got {len(lines)}"
            raise ValueError(msg)
        return cls(*(hex_to_rgb(line) for line in lines))


def synthesize(
    palette: Sequence[Color],
    base_colors: tuple[Color, Color],
    accent_indices: tuple[int, int],
    strengths: tuple[int, int],
) -> Colorscheme:
    """Build the colorscheme from a hue ordered palette.

    Palette entries 1 to 6 are used verbatim, entry 0 is only reachable as an
    accent source. Background and foreground are the base colors blended
    with the palette entries at `accent_indices`.

    Args:
        palette: Hue ordered palette, at least 8 colors
        base_colors: (background, foreground) base colors, already swapped for light schemes
        accent_indices: Palette indices blended into the (background, foreground)
        strengths: Blend percentages for the (background, foreground)

    Raises:
        InsufficientPalette: if the palette holds fewer than 8 colors
    """
    if len(palette) < PALETTE_SIZE:
        msg = f"Not enough colors generated: {len(palette)} < {PALETTE_SIZE}"
        raise InsufficientPalette(msg)

    bg = linear_blend(base_colors[0], palette[accent_indices[0]], strengths[0])
    fg = linear_blend(base_colors[1], palette[accent_indices[1]], strengths[1])
    accents = list(palette[1:7])

    return Colorscheme(
        bg,
        *accents,
        fg,
        linear_blend(bg, WHITE, BASE_LIGHT_LIFT),
        *(linear_blend(color, WHITE, ACCENT_LIGHT_LIFT) for color in accents),
        linear_blend(fg, WHITE, BASE_LIGHT_LIFT),
    )
