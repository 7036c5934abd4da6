"""Colorscheme generation pipeline.

image -> samples -> HSV normalization -> quantization -> hue ordering -> synthesis
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .backends import get_backend
from .cache import ColorschemeCache, fingerprint
from .colorscheme import Colorscheme, synthesize
from .constants import CACHE_DIR, COLORSCHEMES_DIRNAME, CURRENT_COLORSCHEME_FILENAME, PREVIEW_FILENAME
from .imageutils import load_samples
from .models import PALETTE_SIZE, EmptyInput, QuantizationFailure
from .normalize import normalize_samples
from .palette import sort_by_hue
from .settings import Settings
from .templates import html_preview

__all__ = ["OutputPaths", "generate_colorscheme", "publish", "run_pipeline"]


@dataclass(frozen=True, slots=True)
class OutputPaths:
    """Locations written by the pipeline.

    Attributes:
        colorschemes_dir: One file per fingerprint
        current_file: Most recently generated colorscheme, read by other tools
        preview_file: HTML preview of the current colorscheme
    """

    colorschemes_dir: Path
    current_file: Path
    preview_file: Path

    @classmethod
    def from_cache_dir(cls, cache_dir: Path = CACHE_DIR) -> OutputPaths:
        """Build the standard layout below `cache_dir`.

        Args:
            cache_dir: Root of the termpal cache
        """
        return cls(
            colorschemes_dir=cache_dir / COLORSCHEMES_DIRNAME,
            current_file=cache_dir / CURRENT_COLORSCHEME_FILENAME,
            preview_file=cache_dir / PREVIEW_FILENAME,
        )


def generate_colorscheme(image: str | Path, settings: Settings, log: logging.Logger) -> Colorscheme:
    """Compute the colorscheme of an image, without any caching.

    Args:
        image: Image file
        settings: Effective settings
        log: Logger

    Raises:
        DecodeFailure: the image can't be read
        EmptyInput: the HSV filters removed every sample
        QuantizationFailure: the backend produced no palette
        InsufficientPalette: the palette is shorter than 8 colors
    """
    samples = load_samples(image, settings.thumb_w, settings.thumb_h)
    log.debug("Sampled %d pixels from %s", len(samples), image)

    colors = normalize_samples(samples, settings)
    log.debug("%d samples left after HSV filtering", len(colors))
    if not colors:
        msg = "HSV filters removed every sample"
        raise EmptyInput(msg)

    palette = get_backend(settings.backend).generate_palette(colors, PALETTE_SIZE)
    if palette is None:
        msg = f"Failed to generate palette using {settings.backend}"
        raise QuantizationFailure(msg)

    palette = sort_by_hue(palette)
    log.debug("Palette: %s", palette)

    return synthesize(
        palette,
        base_colors=settings.base_colors,
        accent_indices=(settings.bg_idx, settings.fg_idx),
        strengths=(settings.bg_strength, settings.fg_strength),
    )


def publish(scheme: Colorscheme, paths: OutputPaths, log: logging.Logger) -> None:
    """Write the current colorscheme and its HTML preview.

    Write errors are logged, not raised.

    Args:
        scheme: The colorscheme
        paths: Output locations
        log: Logger
    """
    for path, content in ((paths.preview_file, html_preview(scheme)), (paths.current_file, scheme.to_text())):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            log.error("Failed to write %s: %s", path, e)


def run_pipeline(
    image: str | Path,
    settings: Settings,
    paths: OutputPaths,
    log: logging.Logger,
    skip_cache: bool = False,
) -> Colorscheme:
    """Get the colorscheme of an image, from cache when possible, and publish it.

    Nothing is written when generation fails.

    Args:
        image: Image file
        settings: Effective settings
        paths: Output locations
        log: Logger
        skip_cache: Neither read nor write the cache

    Raises:
        TermpalError: when the colorscheme can't be generated
    """
    if skip_cache:
        log.info("Skipping cache")
        scheme = generate_colorscheme(image, settings, log)
        publish(scheme, paths, log)
        return scheme

    cache = ColorschemeCache(paths.colorschemes_dir, log)
    key = fingerprint(settings, image)
    log.debug("Cache key: %s", key)

    cached = cache.get(key)
    if cached is not None:
        log.info("Cache exists")
        publish(cached, paths, log)
        return cached

    log.info("Generating colorscheme")
    scheme = generate_colorscheme(image, settings, log)
    cache.store(key, scheme)
    publish(scheme, paths, log)
    return scheme
