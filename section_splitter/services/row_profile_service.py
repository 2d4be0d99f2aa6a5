import numpy as np

from ..models.image import Image


class RowProfileService:
    """Per-row mean colour, used as a 1-D signal for horizontal structure."""

    @staticmethod
    def profile(img: Image) -> np.ndarray:
        """
        Returns
        -------
        profile : np.ndarray  (H, 3)  float64  mean R, G, B of each row,
                  read-only.
        """
        rgb = img.pixels[:, :, :3].astype(np.float64)
        profile = rgb.sum(axis=1) / img.width
        profile.setflags(write=False)
        return profile
