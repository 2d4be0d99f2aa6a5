"""
Error taxonomy for the section splitter.

Every failure carries a structured `kind` next to its message so callers
(and the CLI exit code) can tell which stage failed without parsing text.
"""
from __future__ import annotations
from enum import Enum
from pathlib import Path

from .models.rectangle import Rectangle


class ErrorKind(str, Enum):
    FILE_NOT_FOUND = "FileNotFound"
    DECODE_FAILED = "DecodeFailed"
    NO_CONTENT_FOUND = "NoContentFound"
    INVALID_PARTITION = "InvalidPartition"
    EXPORT_FAILED = "ExportFailed"


class SectionSplitterError(Exception):
    kind: ErrorKind

    def __str__(self) -> str:
        return self.args[0] if self.args else self.kind.value


class ImageFileNotFound(SectionSplitterError, FileNotFoundError):
    kind = ErrorKind.FILE_NOT_FOUND

    def __init__(self, path: Path):
        super().__init__(f"File does not exist: {path}")
        self.path = Path(path)


class DecodeFailed(SectionSplitterError):
    kind = ErrorKind.DECODE_FAILED

    def __init__(self, path: Path, reason: str = "unreadable image"):
        super().__init__(f"Could not decode {path}: {reason}")
        self.path = Path(path)


class NoContentFound(SectionSplitterError):
    kind = ErrorKind.NO_CONTENT_FOUND

    def __init__(self, width: int, height: int):
        super().__init__(f"Image {width}x{height} is fully transparent")


class InvalidPartition(SectionSplitterError, ValueError):
    kind = ErrorKind.INVALID_PARTITION

    def __init__(self, section: str, rect: Rectangle):
        super().__init__(f"Invalid area detected for {section} section at {rect}")
        self.section = section
        self.rect = rect


class ExportFailed(SectionSplitterError):
    kind = ErrorKind.EXPORT_FAILED

    def __init__(self, section: str, path: Path, reason: str):
        super().__init__(f"Failed to write {section} section to {path}: {reason}")
        self.section = section
        self.path = Path(path)
