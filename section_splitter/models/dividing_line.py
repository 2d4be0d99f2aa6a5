from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class DividingLine:
    start: int  # first row of the band
    end: int    # one past the last row of the band

    @property
    def thickness(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class DetectionResult:
    """
    Outcome of a dividing-line scan.

    `lines` always holds exactly two lines ordered by start.
    `fallback` tells whether they were detected or are the equal-thirds
    fallback; `candidates` keeps whatever the scan found before falling back.
    """
    lines: Tuple[DividingLine, DividingLine]
    fallback: bool = False
    candidates: Tuple[DividingLine, ...] = field(default_factory=tuple)

    @property
    def first(self) -> DividingLine:
        return self.lines[0]

    @property
    def second(self) -> DividingLine:
        return self.lines[1]
