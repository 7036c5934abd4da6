from termpal.palette import sort_by_hue


def test_sort_by_hue():
    blue, green, red, yellow = (0, 0, 255), (0, 255, 0), (255, 0, 0), (255, 255, 0)
    assert sort_by_hue([blue, green, red, yellow]) == [red, yellow, green, blue]


def test_sorted_palette_unchanged():
    palette = [(255, 0, 0), (255, 128, 0), (128, 255, 0), (0, 255, 128), (0, 128, 255), (128, 0, 255), (255, 0, 128)]
    assert sort_by_hue(palette) == palette


def test_deterministic():
    palette = [(12, 200, 99), (0, 0, 0), (200, 20, 20), (90, 90, 90), (20, 20, 200), (255, 0, 0)]
    assert sort_by_hue(palette) == sort_by_hue(list(palette))


def test_stable_for_equal_hues():
    """Colors without hue keep their relative order."""
    red, black, gray, white = (255, 0, 0), (0, 0, 0), (128, 128, 128), (255, 255, 255)
    assert sort_by_hue([red, black, gray, white]) == [red, black, gray, white]
    assert sort_by_hue([white, gray, red, black]) == [white, gray, red, black]
    assert sort_by_hue([(0, 0, 255), black, red]) == [black, red, (0, 0, 255)]
