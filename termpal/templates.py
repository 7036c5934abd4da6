"""Preview rendering for generated colorschemes."""

import re
from typing import cast

from .ansi import RESET, background_rgb
from .colors import to_hex
from .colorscheme import Colorscheme
from .models import Color

__all__ = ["apply_variables", "html_preview", "terminal_preview"]

SWATCH_TEMPLATE = '<div class="swatch" style="background: rgb({{ r }}, {{ g }}, {{ b }})" title="{{ hex }}"></div>'

PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>termpal preview</title>
<style>
body { background: rgb({{ bg.rgb }}); color: rgb({{ fg.rgb }}); font-family: monospace; padding: 2em; }
.row { display: flex; gap: 0.5em; margin-bottom: 0.5em; }
.swatch { width: 4em; height: 4em; border-radius: 0.3em; }
</style>
</head>
<body>
<p>background {{ bg.hex }} / foreground {{ fg.hex }}</p>
<div class="row">{{ dark }}</div>
<div class="row">{{ light }}</div>
</body>
</html>
"""

_TAG_PATTERN = re.compile(r"\{\{\s*([\w\.]+)\s*\}\}")


def apply_variables(content: str, replacements: dict[str, str]) -> str:
    """Replace `{{ name }}` tags with their value, unknown tags are kept.

    Args:
        content: Template text
        replacements: Values keyed by tag name
    """

    def replace_tag(match: re.Match) -> str:
        value = replacements.get(match.group(1))
        if value is None:
            return cast("str", match.group(0))
        return value

    return _TAG_PATTERN.sub(replace_tag, content)


def _swatch(color: Color) -> str:
    r, g, b = color
    return apply_variables(SWATCH_TEMPLATE, {"r": str(r), "g": str(g), "b": str(b), "hex": to_hex(r, g, b)})


def html_preview(scheme: Colorscheme) -> str:
    """Render an HTML page showing the dark and light rows of the scheme.

    Args:
        scheme: The colorscheme to show
    """
    bg, fg = scheme.background, scheme.foreground
    return apply_variables(
        PREVIEW_TEMPLATE,
        {
            "bg.rgb": ", ".join(str(c) for c in bg),
            "fg.rgb": ", ".join(str(c) for c in fg),
            "bg.hex": to_hex(*bg),
            "fg.hex": to_hex(*fg),
            "dark": "".join(_swatch(color) for color in scheme.dark),
            "light": "".join(_swatch(color) for color in scheme.light),
        },
    )


def terminal_preview(scheme: Colorscheme) -> str:
    """Render the scheme as two rows of 24-bit ANSI swatches.

    Args:
        scheme: The colorscheme to show
    """
    lines = []
    for row in (scheme.dark, scheme.light):
        swatches = "".join(f"{background_rgb(*color)}    {RESET}" for color in row)
        hexes = " ".join(to_hex(*color) for color in row)
        lines.append(f"{swatches}  {hexes}")
    return "\n".join(lines)
