"""
Layout Module for RowLayout
Row-based box layout engine

Public API:
    - RowLayoutEngine: Layout engine holding the most recent result
    - validate / layout: Pure spec check and layout pass
    - rects_intersecting / rect_at: Queries over a LayoutResult
    - LayoutSpec, RowSpec, ItemSize, Alignment: Input model
    - LayoutResult, ItemRect, Rect, ContentSize: Output model
"""

from .engine import RowLayoutEngine, validate, layout, rects_intersecting, rect_at
from .types import (
    Alignment,
    ContentSize,
    ItemRect,
    ItemSize,
    LayoutResult,
    LayoutSpec,
    Rect,
    RectQuery,
    RowSpec,
    ValidationResult,
    fraction_of,
)

__all__ = [
    'RowLayoutEngine',
    'validate',
    'layout',
    'rects_intersecting',
    'rect_at',
    'Alignment',
    'ContentSize',
    'ItemRect',
    'ItemSize',
    'LayoutResult',
    'LayoutSpec',
    'Rect',
    'RectQuery',
    'RowSpec',
    'ValidationResult',
    'fraction_of',
]
