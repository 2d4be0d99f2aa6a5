import os
import numpy as np
import pytest
from PIL import Image as PILImage

from section_splitter.config import Settings

RED = (200, 30, 30)
BLUE = (20, 20, 220)
GREEN = (30, 200, 30)
WHITE = (240, 240, 240)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep tests independent of a developer's .env / shell settings."""
    for name in list(os.environ):
        if name.startswith("SPLITTER_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(load_timeout=0)


def make_banner(second_band: bool = True) -> np.ndarray:
    """
    100x300 RGBA banner:
        rows   0-9    transparent
        rows  10-149  red
        rows 150-151  blue  (first dividing line)
        rows 152-289  green, with white rows 200-203 when *second_band*
        rows 290-299  transparent
    """
    pixels = np.zeros((300, 100, 4), dtype=np.uint8)
    pixels[10:150, :, :3] = RED
    pixels[150:152, :, :3] = BLUE
    pixels[152:290, :, :3] = GREEN
    if second_band:
        pixels[200:204, :, :3] = WHITE
    pixels[10:290, :, 3] = 255
    return pixels


def write_png(pixels: np.ndarray, path) -> None:
    PILImage.fromarray(pixels).save(path)


@pytest.fixture
def banner_path(tmp_path):
    path = tmp_path / "input" / "image.png"
    path.parent.mkdir()
    write_png(make_banner(), path)
    return path
