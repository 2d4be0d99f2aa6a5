from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned integer region of an image, origin at the top-left."""
    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def fits_within(self, width: int, height: int) -> bool:
        """
        True if the rectangle has a positive size and lies fully inside
        an image of *width* x *height*.
        """
        return (
            self.x >= 0 and self.y >= 0
            and self.w > 0 and self.h > 0
            and self.right <= width and self.bottom <= height
        )

    def as_slices(self) -> Tuple[slice, slice]:
        """(rows, cols) slices for indexing an (H, W, C) array."""
        return slice(self.y, self.bottom), slice(self.x, self.right)

    def __str__(self) -> str:
        return f"x: {self.x}, y: {self.y}, width: {self.w}, height: {self.h}"
