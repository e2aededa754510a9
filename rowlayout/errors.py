"""
Error types for RowLayout

Every error raised by the layout engine derives from LayoutError, which
itself is a ValueError: malformed row data is a caller configuration
problem, never a transient failure.
"""

from __future__ import annotations
from typing import Any


class LayoutError(ValueError):
    """Base class for all layout engine errors"""


class EmptyRowError(LayoutError):
    """A row contains zero items"""

    def __init__(self, row_index: int):
        self.row_index = row_index
        super().__init__(f"Row {row_index} has no items (a row must contain at least one item)")


class OverfullRowError(LayoutError):
    """A row's fractional sizes sum beyond 1.0"""

    def __init__(self, row_index: int, total: float):
        self.row_index = row_index
        self.total = total
        super().__init__(
            f"Row {row_index} fractions sum to {total:.6g}, which exceeds 1.0"
        )


class InvalidFractionError(LayoutError):
    """An item size is not a known ItemSize and not a fraction in (0, 1]"""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid item size {value!r}: expected an ItemSize or a fraction in (0, 1]")


class IndexOutOfRangeError(LayoutError, IndexError):
    """rect_at was called with an index outside [0, len(rects))"""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Item index {index} out of range for layout with {size} items")


class SpecFormatError(LayoutError):
    """A layout spec file could not be parsed"""
