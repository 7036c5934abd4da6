import dataclasses

import pytest

from termpal.colors import hsv_to_rgb, rgb_to_hsv
from termpal.normalize import normalize_samples
from termpal.settings import Settings

NO_TRANSFORM = Settings(clamp_saturation=False, clamp_value=False, skip_saturation=False, skip_value=False)


def test_passthrough_without_toggles():
    samples = [(255, 0, 0), (10, 20, 30), (255, 255, 255), (0, 0, 0)]
    assert normalize_samples(samples, NO_TRANSFORM) == samples


def test_empty_input():
    assert normalize_samples([], Settings()) == []


def test_saturation_skip_is_exclusive():
    # value fixed at 1.0, saturation = 1 - min/255
    at_min = (255, 204, 204)
    at_max = (255, 102, 102)
    inside = (255, 153, 153)
    below = (255, 255, 255)  # s == 0
    above = (255, 0, 0)  # s == 1
    # window bounds equal to the samples saturation, bit for bit
    low, high = rgb_to_hsv(at_min)[1], rgb_to_hsv(at_max)[1]
    assert low == pytest.approx(0.2)
    assert high == pytest.approx(0.6)
    settings = dataclasses.replace(NO_TRANSFORM, skip_saturation=True, skip_saturation_min=low, skip_saturation_max=high)

    result = normalize_samples([at_min, at_max, inside, below, above], settings)
    assert result == [inside]

    # a hair wider on each side keeps both boundary samples
    settings = dataclasses.replace(settings, skip_saturation_min=low - 1e-9, skip_saturation_max=high + 1e-9)
    assert normalize_samples([at_min, at_max, inside], settings) == [at_min, at_max, inside]


def test_value_skip_is_exclusive():
    settings = dataclasses.replace(NO_TRANSFORM, skip_value=True, skip_value_min=0.2, skip_value_max=0.8)
    at_min = (51, 51, 51)  # v == 0.2
    at_max = (204, 204, 204)  # v == 0.8
    inside = (128, 0, 0)
    result = normalize_samples([at_min, at_max, inside, (0, 0, 0), (255, 255, 255)], settings)
    assert result == [inside]


def test_skip_filters_combine():
    settings = dataclasses.replace(
        NO_TRANSFORM,
        skip_saturation=True,
        skip_saturation_min=0.5,
        skip_saturation_max=1.0,
        skip_value=True,
        skip_value_min=0.0,
        skip_value_max=0.9,
    )
    # fully saturated samples sit on the exclusive upper bound, gray is below it
    samples = [(255, 0, 0), (200, 0, 0), (100, 100, 100)]
    assert normalize_samples(samples, settings) == []

    settings = dataclasses.replace(settings, skip_saturation_max=1.0, skip_saturation_min=0.2)
    samples = [(200, 50, 50), (255, 50, 50), (100, 100, 100)]
    assert normalize_samples(samples, settings) == [(200, 50, 50)]


def test_saturation_clamp():
    settings = dataclasses.replace(NO_TRANSFORM, clamp_saturation=True, clamp_saturation_min=0.3, clamp_saturation_max=0.7)
    low, high, mid = hsv_to_rgb(200, 0.1, 0.8), hsv_to_rgb(200, 0.95, 0.8), hsv_to_rgb(200, 0.5, 0.8)
    result = normalize_samples([low, high, mid], settings)

    assert result[0] == hsv_to_rgb(rgb_to_hsv(low)[0], 0.3, rgb_to_hsv(low)[2])
    assert result[1] == hsv_to_rgb(rgb_to_hsv(high)[0], 0.7, rgb_to_hsv(high)[2])
    assert result[2] == mid
    assert rgb_to_hsv(result[0])[1] == pytest.approx(0.3, abs=0.01)
    assert rgb_to_hsv(result[1])[1] == pytest.approx(0.7, abs=0.01)


def test_value_clamp():
    settings = dataclasses.replace(NO_TRANSFORM, clamp_value=True, clamp_value_min=0.4, clamp_value_max=0.5)
    result = normalize_samples([(0, 0, 0), (255, 255, 255), (115, 115, 115)], settings)
    assert result == [(102, 102, 102), (128, 128, 128), (115, 115, 115)]


def test_clamp_applies_after_skip():
    """A sample dropped by the skip filter is not rescued by the clamp."""
    settings = dataclasses.replace(
        NO_TRANSFORM,
        skip_value=True,
        skip_value_min=0.2,
        skip_value_max=0.8,
        clamp_value=True,
        clamp_value_min=0.5,
        clamp_value_max=0.5,
    )
    assert normalize_samples([(0, 0, 0), (100, 100, 100)], settings) == [(128, 128, 128)]
