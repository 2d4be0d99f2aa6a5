from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: RGBA pixels (+ optional path for bookkeeping).
    No OpenCV logic outside the repository.
    """
    pixels: np.ndarray # Shape (H, W, 4), dtype uint8, RGBA order.
    path: Path | None = None # Source or destination of the image.

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])
