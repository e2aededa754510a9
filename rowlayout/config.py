"""
RowLayout Configuration
Fixed layout policy applied by the engine, independent of row content
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping
import math


@dataclass
class LayoutConfig:
    """
    Layout policy for the row engine

    Spacing and height are engine-level constants: they are never derived
    from the rows being laid out.
    """

    # ============================================================
    # SPACING
    # ============================================================
    item_spacing: float = 20.0
    """Horizontal gap inserted between adjacent items in a row (px)"""

    row_spacing: float = 20.0
    """Vertical gap inserted between adjacent rows (px)"""

    # ============================================================
    # ITEM GEOMETRY
    # ============================================================
    item_height: float = 30.0
    """Fixed height applied uniformly to every item (px)"""

    # ============================================================
    # VALIDATION
    # ============================================================
    overflow_tolerance: float = 1e-9
    """Epsilon for the row fraction check (sums > 1.0 + tolerance are overfull)"""

    # ============================================================
    # CONTENT SIZE
    # ============================================================
    trim_trailing_row_spacing: bool = False
    """End content height at the last row's bottom edge instead of
    including one trailing row_spacing"""

    def __post_init__(self) -> None:
        for name in ('item_spacing', 'row_spacing', 'item_height', 'overflow_tolerance'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite value >= 0, got {value}")

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def compact(cls) -> 'LayoutConfig':
        """
        Tighter spacing and shorter items for dense rows

        Example:
            >>> engine = RowLayoutEngine(LayoutConfig.compact())
        """
        return cls(item_spacing=8.0, row_spacing=8.0, item_height=24.0)

    @classmethod
    def flush(cls) -> 'LayoutConfig':
        """No gaps: items and rows sit edge to edge"""
        return cls(item_spacing=0.0, row_spacing=0.0)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'LayoutConfig':
        """
        Build a config from a mapping of field overrides

        Args:
            values: Field name -> value; unset fields keep their defaults

        Raises:
            ValueError: If a key does not name a LayoutConfig field
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown layout config field(s): {', '.join(unknown)}")
        return cls(**dict(values))
