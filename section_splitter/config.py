# section_splitter/config.py
import os
from dataclasses import dataclass
from typing import Tuple
from dotenv import load_dotenv

from .models.partition import SectionSpec

load_dotenv()


@dataclass(frozen=True)
class Settings:
    max_line_thickness: int = 8
    diff_threshold: float = 50.0
    top: SectionSpec = SectionSpec("top", 168, 40, "section-top.png")
    middle: SectionSpec = SectionSpec("middle", 168, 100, "section-middle.png")
    bottom: SectionSpec = SectionSpec("bottom", 168, 26, "section-bottom.png")
    alpha_cropped_name: str = "alpha-cropped.png"
    load_timeout: int = 5
    log_level: str = "INFO"

    @property
    def sections(self) -> Tuple[SectionSpec, SectionSpec, SectionSpec]:
        return self.top, self.middle, self.bottom


def _parse_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise RuntimeError(f"{name} must be >= {minimum}, got {value}")
    return value


def _parse_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None


def parse_size(raw: str) -> Tuple[int, int]:
    """'168x40' -> (168, 40)"""
    try:
        w, h = (int(part) for part in raw.lower().split("x"))
    except ValueError:
        raise RuntimeError(f"Size must look like WIDTHxHEIGHT, got {raw!r}") from None
    if w <= 0 or h <= 0:
        raise RuntimeError(f"Size must be positive, got {raw!r}")
    return w, h


def _section(name: str, default: SectionSpec) -> SectionSpec:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    w, h = parse_size(raw)
    return SectionSpec(default.name, w, h, default.filename)


def get_settings() -> Settings:
    defaults = Settings()
    return Settings(
        max_line_thickness=_parse_int("SPLITTER_MAX_LINE_THICKNESS", defaults.max_line_thickness, 1),
        diff_threshold=_parse_float("SPLITTER_DIFF_THRESHOLD", defaults.diff_threshold),
        top=_section("SPLITTER_TOP_SIZE", defaults.top),
        middle=_section("SPLITTER_MIDDLE_SIZE", defaults.middle),
        bottom=_section("SPLITTER_BOTTOM_SIZE", defaults.bottom),
        alpha_cropped_name=os.getenv("SPLITTER_ALPHA_CROPPED_NAME", "").strip() or defaults.alpha_cropped_name,
        load_timeout=_parse_int("SPLITTER_LOAD_TIMEOUT", defaults.load_timeout, 0),
        log_level=os.getenv("SPLITTER_LOG_LEVEL", "").strip().upper() or defaults.log_level,
    )
