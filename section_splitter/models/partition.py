from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple

from .rectangle import Rectangle
from .dividing_line import DetectionResult


@dataclass(frozen=True)
class SectionSpec:
    """Target size and output filename of one section."""
    name: str
    width: int
    height: int
    filename: str

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class Partition:
    top: Rectangle
    middle: Rectangle
    bottom: Rectangle

    def named(self) -> Iterator[Tuple[str, Rectangle]]:
        yield "top", self.top
        yield "middle", self.middle
        yield "bottom", self.bottom

    def __iter__(self) -> Iterator[Rectangle]:
        return iter((self.top, self.middle, self.bottom))


@dataclass
class SplitResult:
    """Everything one run produced, for callers and for logging."""
    alpha_cropped_path: Path
    section_paths: dict[str, Path]
    partition: Partition
    detection: DetectionResult
