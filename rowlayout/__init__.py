"""RowLayout: Deterministic row-based box layout with fractional item widths"""

from .config import LayoutConfig
from .errors import (
    LayoutError,
    EmptyRowError,
    OverfullRowError,
    InvalidFractionError,
    IndexOutOfRangeError,
    SpecFormatError,
)
from .layout import (
    RowLayoutEngine,
    LayoutSpec,
    RowSpec,
    ItemSize,
    Alignment,
    LayoutResult,
    ItemRect,
    Rect,
    ContentSize,
    ValidationResult,
    validate,
    rects_intersecting,
    rect_at,
)
from . import utils

__version__ = "0.1.0"
__all__ = [
    "LayoutConfig", "RowLayoutEngine", "LayoutSpec", "RowSpec", "ItemSize", "Alignment",
    "LayoutResult", "ItemRect", "Rect", "ContentSize", "ValidationResult",
    "validate", "rects_intersecting", "rect_at",
    "LayoutError", "EmptyRowError", "OverfullRowError", "InvalidFractionError",
    "IndexOutOfRangeError", "SpecFormatError", "utils",
]
