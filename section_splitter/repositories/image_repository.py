from pathlib import Path
from typing import Union
import logging
import signal
import threading
import numpy as np
import cv2
from PIL import Image as PILImage

from ..models.image import Image
from ..errors import DecodeFailed, ImageFileNotFound

logger = logging.getLogger(__name__)

# cv2 channel count -> conversion to RGBA
_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray) -> Image:
        return Image(pixels=pixels)

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        return img.pixels.shape[:2]

    @staticmethod
    def _to_rgba(arr: np.ndarray) -> np.ndarray:
        if arr.dtype == np.uint16:
            arr = (arr >> 8).astype(np.uint8)
        elif arr.dtype != np.uint8:
            raise ValueError(f"unsupported pixel type {arr.dtype}")

        channels = 1 if arr.ndim == 2 else arr.shape[2]
        if channels not in _TO_RGBA:
            raise ValueError(f"unsupported channel count {channels}")
        return cv2.cvtColor(arr, _TO_RGBA[channels])

    @staticmethod
    def load(path: Union[str, Path], timeout: int = 5) -> Image:
        path = Path(path)
        if not path.is_file():
            raise ImageFileNotFound(path)

        # ─── timeout wrapper (0 disables) ─────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        # SIGALRM exists only on POSIX and can only be set from the main thread
        use_alarm = bool(timeout) and hasattr(signal, "SIGALRM") \
            and threading.current_thread() is threading.main_thread()
        if use_alarm:
            previous = signal.signal(signal.SIGALRM, _handler)
            signal.alarm(timeout)
        try:
            arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        except (cv2.error, TimeoutError) as err:
            raise DecodeFailed(path, str(err)) from err
        finally:
            if use_alarm:
                signal.alarm(0)  # always disarm
                signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if arr is None:
            raise DecodeFailed(path)

        try:
            rgba = ImageRepository._to_rgba(arr)
        except (ValueError, cv2.error) as err:
            raise DecodeFailed(path, str(err)) from err

        logger.debug("Loaded %s (%dx%d)", path, rgba.shape[1], rgba.shape[0])
        return Image(pixels=rgba, path=path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Image has no destination path")
        PILImage.fromarray(np.ascontiguousarray(image.pixels)).save(image.path)
