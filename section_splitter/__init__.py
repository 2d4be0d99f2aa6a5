"""Split an image into top, middle and bottom sections along its dividing lines."""
from .config import Settings, get_settings
from .errors import (
    ErrorKind,
    SectionSplitterError,
    ImageFileNotFound,
    DecodeFailed,
    NoContentFound,
    InvalidPartition,
    ExportFailed,
)
from .pipeline.split_sections import split_sections

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "ErrorKind",
    "SectionSplitterError",
    "ImageFileNotFound",
    "DecodeFailed",
    "NoContentFound",
    "InvalidPartition",
    "ExportFailed",
    "split_sections",
]
