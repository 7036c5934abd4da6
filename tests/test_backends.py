"""Tests for the quantization backends."""

from unittest.mock import patch

import pytest

from termpal.backends import QuantizerBackend, get_available_backends, get_backend
from termpal.backends.kmeans import KMeansBackend
from termpal.backends.thief import ThiefBackend, _valid_pixels
from termpal.models import Backend

TWO_TONES = [(200, 30, 30)] * 60 + [(30, 30, 200)] * 40


def test_registry():
    assert sorted(get_available_backends()) == ["kmeans", "thief"]
    assert isinstance(get_backend(Backend.KMEANS), KMeansBackend)
    assert isinstance(get_backend("thief"), ThiefBackend)
    assert isinstance(get_backend(Backend.THIEF), QuantizerBackend)


def test_registry_unknown():
    with pytest.raises(KeyError, match="Available"):
        get_backend("median")


@pytest.mark.parametrize("backend", [Backend.KMEANS, Backend.THIEF])
def test_empty_input(backend):
    assert get_backend(backend).generate_palette([], 8) is None


def test_kmeans_single_color_pads_with_black():
    palette = KMeansBackend().generate_palette([(255, 0, 0)] * 4, 8)
    assert palette == [(255, 0, 0)] + [(0, 0, 0)] * 7


def test_kmeans_two_clusters():
    palette = KMeansBackend().generate_palette(TWO_TONES, 8)
    assert len(palette) == 8
    assert sorted(palette[:2]) == [(30, 30, 200), (200, 30, 30)]
    assert palette[2:] == [(0, 0, 0)] * 6


def test_kmeans_is_deterministic():
    colors = [(r, (r * 7) % 256, (r * 13) % 256) for r in range(0, 256, 3)]
    first = KMeansBackend().generate_palette(colors, 8)
    second = KMeansBackend().generate_palette(colors, 8)
    assert first == second
    assert len(first) == 8


def test_kmeans_keeps_best_run():
    """The run with the lowest inertia is kept."""
    runs = []

    class FakeRun:
        def __init__(self, inertia):
            self.inertia_ = inertia
            self.cluster_centers_ = None
            runs.append(self)

        def fit(self, *_args, **_kwargs):
            return self

    inertias = iter([3.0, 1.0, 2.0])
    with patch("termpal.backends.kmeans.KMeans", side_effect=lambda **_kw: FakeRun(next(inertias))):
        best = KMeansBackend._cluster(None, None, 2)
    assert len(runs) == 3
    assert best.inertia_ == 1.0


def test_thief_valid_pixels():
    pixels = bytes([10, 20, 30, 255, 255, 255, 40, 50, 60, 251, 251, 251])
    assert _valid_pixels(pixels, 1) == [(10, 20, 30), (40, 50, 60)]
    assert _valid_pixels(pixels, 2) == [(10, 20, 30), (40, 50, 60)]
    assert _valid_pixels(pixels, 3) == [(10, 20, 30)]


def test_thief_palette():
    palette = ThiefBackend().generate_palette(TWO_TONES * 5, 8)
    assert palette
    assert len(palette) <= 8
    for color in palette:
        assert len(color) == 3
        assert all(0 <= channel <= 255 for channel in color)


def test_thief_only_white():
    """Near white pixels are ignored, leaving nothing to quantize."""
    assert ThiefBackend().generate_palette([(255, 255, 255)] * 50, 8) is None


def test_thief_failure_returns_none():
    with patch("termpal.backends.thief.MMCQ.quantize", side_effect=Exception("boom")):
        assert ThiefBackend().generate_palette(TWO_TONES, 8) is None


def test_backend_modules_import():
    """The entry points load the backends through the package."""
    import importlib

    for module in ("termpal.backends.kmeans", "termpal.backends.thief", "termpal.pipeline", "termpal.command"):
        assert importlib.import_module(module)
