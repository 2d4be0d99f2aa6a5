import logging
import numpy as np

from ..models.image import Image
from ..models.rectangle import Rectangle
from ..errors import NoContentFound

logger = logging.getLogger(__name__)

OPAQUE = 255


class AlphaService:
    """
    Alpha-channel helpers: tight content bounds and opacification.
    """

    @staticmethod
    def find_content_bounds(pixels: np.ndarray) -> Rectangle:
        """
        Tight bounding box of every pixel whose alpha is not 0.

        Args:
            pixels (np.ndarray): (H, W, 4) RGBA array.

        Returns:
            Rectangle: smallest region containing all non-transparent pixels.

        Raises:
            NoContentFound: if every pixel is fully transparent.
        """
        height, width = pixels.shape[:2]
        ys, xs = np.nonzero(pixels[:, :, 3])
        if ys.size == 0:
            raise NoContentFound(width, height)

        left, right = int(xs.min()), int(xs.max())
        top, bottom = int(ys.min()), int(ys.max())
        bounds = Rectangle(x=left, y=top, w=right - left + 1, h=bottom - top + 1)
        logger.debug("Content bounds in %dx%d image: %s", width, height, bounds)
        return bounds

    @staticmethod
    def strip_alpha(img: Image) -> Image:
        """Force every pixel fully opaque, in place. Adds alpha if missing."""
        pixels = img.pixels
        if pixels.ndim == 3 and pixels.shape[2] == 4:
            pixels[:, :, 3] = OPAQUE
        else:
            rgb = pixels if pixels.ndim == 3 else np.repeat(pixels[:, :, None], 3, axis=2)
            alpha = np.full(rgb.shape[:2] + (1,), OPAQUE, dtype=rgb.dtype)
            img.pixels = np.concatenate([rgb[:, :, :3], alpha], axis=2)
        return img
