import logging
from typing import List
import numpy as np

from ..models.dividing_line import DividingLine, DetectionResult

logger = logging.getLogger(__name__)


class LineDetectionService:
    """
    Finds the two horizontal bands separating the top, middle and bottom
    sections from a row-colour profile.
    """

    def __init__(self, max_line_thickness: int = 8, threshold: float = 50.0):
        if max_line_thickness < 1:
            raise ValueError("max_line_thickness must be positive")
        self.max_line_thickness = max_line_thickness
        self.threshold = threshold

    @staticmethod
    def row_differences(profile: np.ndarray) -> np.ndarray:
        """
        diffs[y] = |dR| + |dG| + |dB| between rows y and y-1; diffs[0] = 0.
        """
        diffs = np.zeros(len(profile), dtype=np.float64)
        if len(profile) > 1:
            diffs[1:] = np.abs(np.diff(profile, axis=0)).sum(axis=1)
        return diffs

    def _scan(self, profile: np.ndarray) -> List[DividingLine]:
        height = len(profile)
        diffs = self.row_differences(profile)
        found: List[DividingLine] = []

        y = 1
        while y < height and len(found) < 2:
            if diffs[y] > self.threshold:
                end = min(y + self.max_line_thickness, height)
                found.append(DividingLine(start=y, end=end))
                logger.debug("Dividing line at rows %d-%d (diff %.1f)", y, end, diffs[y])
                # the row at `end` closes the band and is not examined
                y = end
            y += 1
        return found

    def fallback_lines(self, height: int) -> tuple:
        """Equal thirds, each band clipped to the last row."""
        t = self.max_line_thickness
        first = height // 3
        second = (2 * height) // 3
        return (
            DividingLine(start=first, end=min(first + t, height - 1)),
            DividingLine(start=second, end=min(second + t, height - 1)),
        )

    def detect(self, profile: np.ndarray) -> DetectionResult:
        """
        Always returns two lines ordered by start: either the first two
        discontinuities above the threshold, or the equal-thirds fallback.
        """
        found = self._scan(profile)
        if len(found) == 2:
            return DetectionResult(lines=(found[0], found[1]), fallback=False,
                                   candidates=tuple(found))

        lines = self.fallback_lines(len(profile))
        logger.warning(
            "Found %d dividing line(s) above threshold %.1f, falling back to thirds: %s",
            len(found), self.threshold, lines,
        )
        return DetectionResult(lines=lines, fallback=True, candidates=tuple(found))
