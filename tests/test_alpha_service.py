import numpy as np
import pytest

from section_splitter.errors import ErrorKind, NoContentFound
from section_splitter.models.image import Image
from section_splitter.models.rectangle import Rectangle
from section_splitter.services.alpha_service import AlphaService

from conftest import make_banner


def test_bounds_of_banner_skip_transparent_rows():
    bounds = AlphaService.find_content_bounds(make_banner())
    assert bounds == Rectangle(x=0, y=10, w=100, h=280)
    assert bounds.bottom - 1 == 289


def test_bounds_are_tight_for_scattered_pixels():
    rng = np.random.default_rng(7)
    for _ in range(20):
        pixels = np.zeros((40, 60, 4), dtype=np.uint8)
        ys = rng.integers(0, 40, size=5)
        xs = rng.integers(0, 60, size=5)
        pixels[ys, xs, 3] = rng.integers(1, 256, size=5)

        bounds = AlphaService.find_content_bounds(pixels)

        assert bounds.x == xs.min() and bounds.right - 1 == xs.max()
        assert bounds.y == ys.min() and bounds.bottom - 1 == ys.max()


def test_any_nonzero_alpha_counts_as_content():
    pixels = np.zeros((10, 10, 4), dtype=np.uint8)
    pixels[3, 4, 3] = 1
    assert AlphaService.find_content_bounds(pixels) == Rectangle(4, 3, 1, 1)


def test_fully_transparent_image_raises():
    pixels = np.zeros((10, 20, 4), dtype=np.uint8)
    pixels[:, :, :3] = 255
    with pytest.raises(NoContentFound) as excinfo:
        AlphaService.find_content_bounds(pixels)
    assert excinfo.value.kind is ErrorKind.NO_CONTENT_FOUND


def test_strip_alpha_is_idempotent():
    rng = np.random.default_rng(3)
    img = Image(pixels=rng.integers(0, 256, size=(8, 9, 4), dtype=np.uint8))
    rgb_before = img.pixels[:, :, :3].copy()

    once = AlphaService.strip_alpha(img).pixels.copy()
    twice = AlphaService.strip_alpha(img).pixels

    assert np.array_equal(once, twice)
    assert (twice[:, :, 3] == 255).all()
    assert np.array_equal(twice[:, :, :3], rgb_before)


def test_strip_alpha_adds_channel_to_rgb():
    img = Image(pixels=np.full((4, 5, 3), 9, dtype=np.uint8))
    AlphaService.strip_alpha(img)
    assert img.pixels.shape == (4, 5, 4)
    assert (img.pixels[:, :, 3] == 255).all()
