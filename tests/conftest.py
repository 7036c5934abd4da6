" generic fixtures "
import logging

import pytest
from PIL import Image

from termpal.settings import Settings


def pytest_configure():
    "Runs once before all"
    from termpal.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_logger():
    "A logger for components requiring one"
    from termpal.logging_setup import get_logger

    return get_logger("tests", logging.DEBUG)


@pytest.fixture
def settings():
    "Default settings"
    return Settings()


@pytest.fixture
def make_image(tmp_path):
    "Writes a PNG image filled with the given pixels (row-major)"

    def _make(pixels, size, name="image.png"):
        img = Image.new("RGB", size)
        img.putdata(pixels)
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path)
        return path

    return _make
