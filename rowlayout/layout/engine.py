"""
Layout Engine for RowLayout
Row-based box layout with fractional item widths

Each row is placed as a block according to the spec's alignment, rows are
stacked top to bottom, and every item gets the same fixed height.
"""
from __future__ import annotations
from dataclasses import astuple
from typing import Any, List, Optional, Tuple
import logging
import math
import numpy as np

from ..config import LayoutConfig
from ..errors import EmptyRowError, LayoutError, OverfullRowError
from ..utils import exceeds_one
from .types import (
    Alignment,
    ContentSize,
    ItemRect,
    LayoutResult,
    LayoutSpec,
    Rect,
    RectQuery,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def validate(spec: LayoutSpec, config: Optional[LayoutConfig] = None) -> ValidationResult:
    """
    Check every row of a spec before layout

    Args:
        spec: Layout spec to check
        config: Supplies the overflow tolerance (defaults to LayoutConfig())

    Returns:
        ValidationResult summarising the spec

    Raises:
        EmptyRowError: A row has no items
        OverfullRowError: A row's fractions sum beyond 1.0
    """
    tolerance = (config or LayoutConfig()).overflow_tolerance
    totals: List[float] = []
    for row_index, row in enumerate(spec.rows):
        if row.item_count == 0:
            raise EmptyRowError(row_index)
        if exceeds_one(row.fractions, tolerance):
            raise OverfullRowError(row_index, row.fraction_total)
        totals.append(row.fraction_total)

    logger.debug(f"Validated spec: {spec.row_count} rows, {spec.item_count} items")
    return ValidationResult(
        row_count=spec.row_count,
        item_count=spec.item_count,
        row_totals=tuple(totals),
    )


def _row_start(alignment: Alignment, container_width: float,
               row_content_width: float, total_item_spacing: float) -> float:
    """Horizontal offset of a row's first item"""
    if alignment is Alignment.LEFT:
        return 0.0
    slack = container_width - row_content_width - total_item_spacing
    if alignment is Alignment.RIGHT:
        return slack
    return slack / 2


def layout(container_width: float, spec: LayoutSpec,
           config: Optional[LayoutConfig] = None) -> LayoutResult:
    """
    Compute item rects and content size for a spec

    Algorithm, per row in spec order:
    1. available width = container width - (n - 1) * item_spacing
    2. item width = fraction * available width
    3. row start from alignment (left: 0, right: all slack, center: half)
    4. items placed left to right separated by item_spacing
    5. next row starts item_height + row_spacing lower

    The available width is not clamped: a container narrower than a row's
    spacing yields negative widths, which are passed through as computed.

    Args:
        container_width: Width of the container (px); <= 0 gives an empty
                         degenerate layout
        spec: Layout spec (validated here before any placement)
        config: Spacing and height policy (defaults to LayoutConfig())

    Returns:
        LayoutResult with rects in flattened row-major order

    Raises:
        EmptyRowError, OverfullRowError: Invalid spec; no partial result
        LayoutError: Container width is NaN or infinite
    """
    config = config or LayoutConfig()
    validate(spec, config)

    width = float(container_width)
    if not math.isfinite(width):
        raise LayoutError(f"Container width must be finite, got {container_width}")
    if width <= 0:
        logger.debug(f"Container width {width} <= 0, producing degenerate layout")
        rects = tuple(
            ItemRect(index=i, row=r, column=c, fraction=f, rect=Rect(0.0, 0.0, 0.0, 0.0))
            for i, (r, c, f) in enumerate(_flatten(spec))
        )
        return LayoutResult(
            rects=rects,
            content_size=ContentSize(0.0, 0.0),
            container_width=width,
            alignment=spec.alignment,
            layout_stats={'degenerate': True, 'n_rows': spec.row_count, 'n_items': len(rects)},
        )

    rects_out: List[ItemRect] = []
    squeezed_rows: List[int] = []
    y = 0.0

    for row_index, row in enumerate(spec.rows):
        fractions = np.asarray(row.fractions, dtype=float)
        total_item_spacing = (len(fractions) - 1) * config.item_spacing
        available_width = width - total_item_spacing
        if available_width < 0:
            squeezed_rows.append(row_index)
            logger.warning(f"Row {row_index}: spacing {total_item_spacing:.1f} px exceeds "
                           f"container width {width:.1f} px, item widths will be negative")

        widths = fractions * available_width
        row_content_width = float(widths.sum())
        x0 = _row_start(spec.alignment, width, row_content_width, total_item_spacing)

        # Each item starts after the widths and gaps of the items before it
        advances = np.cumsum(widths + config.item_spacing)
        xs = x0 + np.concatenate(([0.0], advances[:-1]))

        for column, (x, item_width, fraction) in enumerate(zip(xs, widths, fractions)):
            rects_out.append(ItemRect(
                index=len(rects_out),
                row=row_index,
                column=column,
                fraction=float(fraction),
                rect=Rect(float(x), y, float(item_width), config.item_height),
            ))

        logger.debug(f"Row {row_index}: {len(fractions)} items, x0={x0:.2f}, "
                     f"content width {row_content_width:.2f} px at y={y:.1f}")
        y += config.item_height + config.row_spacing

    content_height = y
    if config.trim_trailing_row_spacing and spec.rows:
        content_height -= config.row_spacing

    logger.info(f"Laid out {len(rects_out)} items in {spec.row_count} rows "
                f"({spec.alignment.value}), content size {width:.1f} x {content_height:.1f}")

    return LayoutResult(
        rects=tuple(rects_out),
        content_size=ContentSize(width, content_height),
        container_width=width,
        alignment=spec.alignment,
        layout_stats={
            'degenerate': False,
            'n_rows': spec.row_count,
            'n_items': len(rects_out),
            'squeezed_rows': squeezed_rows,
        },
    )


def _flatten(spec: LayoutSpec) -> List[Tuple[int, int, float]]:
    """(row, column, fraction) for every item in row-major order"""
    return [
        (row_index, column, fraction)
        for row_index, row in enumerate(spec.rows)
        for column, fraction in enumerate(row.fractions)
    ]


def rects_intersecting(result: LayoutResult, query: Rect) -> RectQuery:
    """Item rects of a result whose area overlaps query"""
    return result.rects_intersecting(query)


def rect_at(result: LayoutResult, index: int) -> ItemRect:
    """Item rect of a result by flat index (IndexOutOfRangeError when out of bounds)"""
    return result.rect_at(index)


class RowLayoutEngine:
    """
    Row layout engine holding the most recent result

    The cached result is reused while container width, spec and config are
    unchanged; any change triggers a full recompute. Not thread-safe: callers
    sharing one engine across threads must synchronise layout and queries.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Spacing and height policy (defaults to LayoutConfig())
        """
        self.config = config or LayoutConfig()
        self._result: Optional[LayoutResult] = None
        self._cache_key: Optional[Tuple[Any, ...]] = None

        logger.debug(f"RowLayoutEngine initialized (item_spacing={self.config.item_spacing}, "
                     f"row_spacing={self.config.row_spacing}, item_height={self.config.item_height})")

    def validate(self, spec: LayoutSpec) -> ValidationResult:
        return validate(spec, self.config)

    def layout(self, container_width: float, spec: LayoutSpec) -> LayoutResult:
        """
        Lay out spec at container_width, reusing the cached result if inputs match

        Raises:
            EmptyRowError, OverfullRowError: Invalid spec (the cache is cleared)
        """
        key = (float(container_width), spec, astuple(self.config))
        if self._result is not None and key == self._cache_key:
            logger.debug("Layout inputs unchanged, returning cached result")
            return self._result

        self.invalidate()
        result = layout(container_width, spec, self.config)
        self._result = result
        self._cache_key = key
        return result

    def invalidate(self) -> None:
        """Drop the cached result"""
        self._result = None
        self._cache_key = None

    @property
    def result(self) -> Optional[LayoutResult]:
        """Most recent layout result, or None before the first layout"""
        return self._result

    @property
    def content_size(self) -> ContentSize:
        if self._result is None:
            return ContentSize(0.0, 0.0)
        return self._result.content_size

    def _require_result(self) -> LayoutResult:
        if self._result is None:
            raise LayoutError("No layout computed yet; call layout() first")
        return self._result

    def rects_intersecting(self, query: Rect) -> RectQuery:
        return self._require_result().rects_intersecting(query)

    def rect_at(self, index: int) -> ItemRect:
        return self._require_result().rect_at(index)

    def visible_indices(self, query: Rect) -> List[int]:
        """Flat indices of the items overlapping query (e.g. a viewport)"""
        return [r.index for r in self.rects_intersecting(query)]
