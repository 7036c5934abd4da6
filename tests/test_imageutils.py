import os
import random
from pathlib import Path
from unittest.mock import patch

import pytest

from termpal.imageutils import collect_images, expand_path, load_samples, pick_image
from termpal.models import DecodeFailure, NoImageSelected

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def test_expand_path():
    with patch.dict(os.environ, {"MY_VAR": "expanded"}):
        assert "expanded/path" in expand_path("$MY_VAR/path")

    with patch.object(Path, "expanduser") as mock_expanduser:
        mock_expanduser.return_value = Path("/home/user/path")
        assert expand_path("~/path") == "/home/user/path"


def test_load_samples_solid(make_image):
    path = make_image([RED] * 4, (2, 2))
    samples = load_samples(path, 3, 5)
    assert len(samples) == 15
    assert set(samples) == {RED}
    assert all(isinstance(channel, int) for channel in samples[0])


def test_load_samples_nearest_upscale(make_image):
    path = make_image([RED, BLUE, BLUE, RED], (2, 2))
    samples = load_samples(path, 4, 4)
    assert samples[:4] == [RED, RED, BLUE, BLUE]
    assert samples[-4:] == [BLUE, BLUE, RED, RED]


def test_load_samples_converts_to_rgb(tmp_path):
    from PIL import Image

    path = tmp_path / "gray.png"
    Image.new("L", (2, 2), 128).save(path)
    assert load_samples(path, 1, 1) == [(128, 128, 128)]


def test_load_samples_missing(tmp_path):
    with pytest.raises(DecodeFailure):
        load_samples(tmp_path / "missing.png", 10, 10)


def test_load_samples_not_an_image(tmp_path):
    path = tmp_path / "fake.png"
    path.write_text("not an image")
    with pytest.raises(DecodeFailure, match="fake.png"):
        load_samples(path, 10, 10)


@pytest.fixture
def image_tree(tmp_path):
    for name in ("a.png", "b.JPG", "notes.txt", "sub/c.webp", "sub/deeper/d.tiff", "sub/e.gif"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    return tmp_path


def test_collect_images(image_tree):
    assert collect_images(image_tree) == [
        image_tree / "a.png",
        image_tree / "b.JPG",
        image_tree / "sub" / "c.webp",
        image_tree / "sub" / "deeper" / "d.tiff",
    ]


def test_collect_images_empty(tmp_path):
    assert collect_images(tmp_path) == []


def test_pick_image_file(image_tree):
    assert pick_image(str(image_tree / "notes.txt")) == image_tree / "notes.txt"


def test_pick_image_directory(image_tree):
    picked = pick_image(image_tree, random.Random(42))
    assert picked == random.Random(42).choice(collect_images(image_tree))
    assert picked in collect_images(image_tree)


@pytest.mark.parametrize("path", [None, ""])
def test_pick_image_no_path(path):
    with pytest.raises(NoImageSelected, match="No image path specified"):
        pick_image(path)


def test_pick_image_missing(tmp_path):
    with pytest.raises(NoImageSelected, match="does not exist"):
        pick_image(tmp_path / "missing")


def test_pick_image_no_images(tmp_path):
    (tmp_path / "readme.md").write_text("hi")
    with pytest.raises(NoImageSelected, match="No image files found"):
        pick_image(tmp_path)
