from pathlib import Path
from typing import Tuple, Union
import cv2
import numpy as np

from ..models.image import Image
from ..models.rectangle import Rectangle
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers plus the pixel-level crop / resize primitives."""
    def __init__(self, load_timeout: int = 5):
        self.load_timeout = load_timeout
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray) -> Image:
        return self.image_repository.create_image(pixels)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an RGBA Image object."""
        return self.image_repository.load(path, timeout=self.load_timeout)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image)

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)

    def crop_pixels(self, img: Image, rect: Rectangle) -> np.ndarray:
        """
        Return an owned copy of the pixels inside *rect*.
        """
        img_h, img_w = self.get_image_dimensions(img)
        if not rect.fits_within(img_w, img_h):
            raise ValueError(f"Invalid crop bounds {rect} for {img_w}x{img_h} image")

        rows, cols = rect.as_slices()
        return img.pixels[rows, cols].copy()

    @staticmethod
    def resize_pixels(pixels: np.ndarray, size: Tuple[int, int]) -> np.ndarray:
        """
        Resize to exactly *size* = (width, height).
        INTER_AREA when shrinking, INTER_LINEAR when growing.
        """
        target_w, target_h = size
        src_h, src_w = pixels.shape[:2]
        shrinking = target_w * target_h < src_w * src_h
        interpolation = cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR
        return cv2.resize(pixels, (target_w, target_h), interpolation=interpolation)
