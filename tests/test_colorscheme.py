import pytest

from termpal.colors import WHITE, linear_blend
from termpal.colorscheme import SLOT_COUNT, Colorscheme, synthesize
from termpal.models import InsufficientPalette

PALETTE = [(10 * i, 20 + i, 200 - 10 * i) for i in range(8)]


def make_scheme(**kwargs):
    params = {
        "base_colors": ((0, 0, 0), (255, 255, 255)),
        "accent_indices": (0, 0),
        "strengths": (10, 10),
    }
    params.update(kwargs)
    return synthesize(PALETTE, **params)


def test_slots():
    scheme = make_scheme()
    colors = scheme.as_list()
    assert len(colors) == SLOT_COUNT

    assert scheme.t0 == linear_blend((0, 0, 0), PALETTE[0], 10)
    assert scheme.t7 == linear_blend((255, 255, 255), PALETTE[0], 10)
    assert colors[1:7] == PALETTE[1:7]
    assert scheme.t8 == linear_blend(scheme.t0, WHITE, 10)
    assert colors[9:15] == [linear_blend(color, WHITE, 30) for color in PALETTE[1:7]]
    assert scheme.t15 == linear_blend(scheme.t7, WHITE, 10)


def test_accent_selection():
    scheme = make_scheme(accent_indices=(3, 7), strengths=(100, 0))
    assert scheme.background == PALETTE[3]
    assert scheme.foreground == (255, 255, 255)


def test_last_palette_entry_only_as_accent():
    scheme = make_scheme()
    assert PALETTE[7] not in scheme.as_list()


def test_insufficient_palette():
    with pytest.raises(InsufficientPalette):
        synthesize(PALETTE[:7], ((0, 0, 0), (255, 255, 255)), (0, 0), (10, 10))


def test_dark_and_light_rows():
    scheme = make_scheme()
    assert scheme.dark == scheme.as_list()[:8]
    assert scheme.light == scheme.as_list()[8:]
    assert list(scheme) == scheme.as_list()


def test_text_round_trip():
    scheme = make_scheme()
    text = scheme.to_text()
    lines = text.split("\n")
    assert len(lines) == SLOT_COUNT
    assert all(line.startswith("#") and len(line) == 7 for line in lines)
    assert Colorscheme.from_text(text) == scheme


@pytest.mark.parametrize("text", ["", "#000000\n" * 15, "#000000\n" * 17, "#00000g\n" * 16])
def test_from_text_invalid(text):
    with pytest.raises(ValueError):
        Colorscheme.from_text(text)
