from .image import Image
from .rectangle import Rectangle
from .dividing_line import DividingLine, DetectionResult
from .partition import Partition, SectionSpec, SplitResult

__all__ = [
    "Image",
    "Rectangle",
    "DividingLine",
    "DetectionResult",
    "Partition",
    "SectionSpec",
    "SplitResult",
]
