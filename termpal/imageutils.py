"""Image utilities: decoding, resizing and discovery."""

import os
import random
from collections.abc import Iterator
from pathlib import Path

import numpy as np
from PIL import Image

from .constants import IMAGE_EXTENSIONS
from .models import Color, DecodeFailure, NoImageSelected

__all__ = ["collect_images", "expand_path", "load_samples", "pick_image"]


def expand_path(path: str) -> str:
    """Expand the path.

    Args:
        path: The path to expand (handles ~ and environment variables)
    """
    return str(Path(os.path.expandvars(path)).expanduser())


def load_samples(path: str | Path, width: int, height: int) -> list[Color]:
    """Decode an image and return its pixels after a nearest neighbour resize.

    Args:
        path: Image file
        width: Exact width after resize
        height: Exact height after resize

    Returns:
        Row-major list of (r, g, b) tuples, `width * height` long.

    Raises:
        DecodeFailure: if the file can't be read or decoded
    """
    try:
        with Image.open(path) as initial_img:
            img = initial_img.convert("RGB").resize((width, height), Image.Resampling.NEAREST)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        msg = f"Failed to open image {path}: {e}"
        raise DecodeFailure(msg) from e

    pixels = np.asarray(img, dtype=np.uint8).reshape(-1, 3)
    return [(r, g, b) for r, g, b in pixels.tolist()]


def _walk_images(path: Path) -> Iterator[Path]:
    try:
        entries = sorted(path.iterdir())
    except OSError:
        return
    for entry in entries:
        if entry.is_dir():
            yield from _walk_images(entry)
        elif entry.is_file() and entry.suffix[1:].lower() in IMAGE_EXTENSIONS:
            yield entry


def collect_images(path: str | Path) -> list[Path]:
    """Return the image files found in `path`, recursing into subfolders.

    Unreadable folders are skipped.

    Args:
        path: Directory to search in
    """
    return list(_walk_images(Path(path)))


def pick_image(path: str | Path | None, rng: random.Random | None = None) -> Path:
    """Resolve the image to use.

    A file is returned as-is, a directory yields one of its images at random.

    Args:
        path: Image file or directory
        rng: Random generator used for the pick

    Raises:
        NoImageSelected: if no path is given, it doesn't exist or holds no image
    """
    if not path:
        msg = "No image path specified"
        raise NoImageSelected(msg)

    target = Path(expand_path(str(path)))
    if not target.exists():
        msg = f"path {target} does not exist"
        raise NoImageSelected(msg)
    if not target.is_dir():
        return target

    images = collect_images(target)
    if not images:
        msg = f"No image files found at {target}"
        raise NoImageSelected(msg)
    return (rng or random.Random()).choice(images)
