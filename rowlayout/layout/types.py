"""
Layout types for RowLayout
Input specs and output rectangles of the row layout engine

Input types are immutable (frozen) so a spec can be shared, hashed and used
as a cache key; the engine never mutates them.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from itertools import groupby
from numbers import Real
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Tuple, Union
import math
import operator
import pandas as pd

from ..errors import IndexOutOfRangeError, InvalidFractionError, LayoutError
from ..types import RectRecord
from ..utils import overlap_length


class ItemSize(Enum):
    """Named item widths; the value is the fraction of the row's available width"""
    SMALL = 0.2
    NORMAL = 0.4
    LARGE = 0.6
    FULL = 1.0

    @property
    def fraction(self) -> float:
        return float(self.value)


SizeLike = Union[ItemSize, str, float, int]


def fraction_of(size: SizeLike) -> float:
    """
    Resolve an item size to its fraction of the available row width

    Args:
        size: An ItemSize, an ItemSize name ('small', 'NORMAL', ...) or a
              raw fraction in (0, 1]

    Returns:
        Fraction as float

    Raises:
        InvalidFractionError: Unknown name, non-numeric value, or a number
                              that is not finite or not in (0, 1]
    """
    if isinstance(size, ItemSize):
        return size.fraction
    if isinstance(size, str):
        try:
            return ItemSize[size.strip().upper()].fraction
        except KeyError:
            raise InvalidFractionError(size) from None
    # bool is an int subclass but never a meaningful size
    if isinstance(size, bool) or not isinstance(size, Real):
        raise InvalidFractionError(size)
    value = float(size)
    if not math.isfinite(value) or value <= 0.0 or value > 1.0:
        raise InvalidFractionError(size)
    return value


class Alignment(Enum):
    """Horizontal placement of a row's items as a block within the container"""
    CENTER = 'center'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, value: Union['Alignment', str]) -> 'Alignment':
        """Accept an Alignment or its name/value in any case"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ', '.join(a.value for a in cls)
            raise ValueError(f"Unknown alignment {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class RowSpec:
    """
    One row of items in left-to-right placement order

    Sizes are resolved to plain fractions on construction. Emptiness and
    overfill are deliberately not checked here so that invalid rows stay
    representable; see validate().

    Attributes:
        fractions: Item fractions of the row's available width
    """
    fractions: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'fractions', tuple(fraction_of(s) for s in self.fractions))

    @classmethod
    def of(cls, *sizes: SizeLike) -> 'RowSpec':
        """RowSpec.of(ItemSize.SMALL, 'normal', 0.4)"""
        return cls(sizes)

    @property
    def item_count(self) -> int:
        return len(self.fractions)

    @property
    def fraction_total(self) -> float:
        """Sum of the row's fractions"""
        return math.fsum(self.fractions)

    def __len__(self) -> int:
        return len(self.fractions)

    def __iter__(self) -> Iterator[float]:
        return iter(self.fractions)


@dataclass(frozen=True)
class LayoutSpec:
    """
    Alignment plus rows stacked top to bottom in order

    Attributes:
        alignment: Row alignment policy shared by every row
        rows: Rows in top-to-bottom order
    """
    alignment: Alignment
    rows: Tuple[RowSpec, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'alignment', Alignment.parse(self.alignment))
        object.__setattr__(self, 'rows', tuple(
            r if isinstance(r, RowSpec) else RowSpec(tuple(r)) for r in self.rows
        ))

    @classmethod
    def from_rows(cls, alignment: Union[Alignment, str],
                  rows: Iterable[Iterable[SizeLike]]) -> 'LayoutSpec':
        """Build a spec from plain nested sequences of sizes"""
        return cls(Alignment.parse(alignment), tuple(RowSpec(tuple(r)) for r in rows))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def item_count(self) -> int:
        """Total items over all rows"""
        return sum(len(row) for row in self.rows)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in container coordinates

    Width and height may be negative when the container is narrower than a
    row's spacing; the min/max accessors always return ordered extents.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    def intersects(self, other: 'Rect') -> bool:
        """
        Whether the rectangles share a non-empty area

        Touching edges and zero-width/zero-height rectangles never intersect.
        """
        return (overlap_length(self.min_x, self.max_x, other.min_x, other.max_x) > 0.0
                and overlap_length(self.min_y, self.max_y, other.min_y, other.max_y) > 0.0)


@dataclass(frozen=True)
class ItemRect:
    """
    Layout result for a single item

    Attributes:
        index: Flat 0-based index in row-major order
        row: Row the item belongs to
        column: Position of the item within its row
        fraction: Item fraction of the row's available width
        rect: Item rectangle in container coordinates
    """
    index: int
    row: int
    column: int
    fraction: float
    rect: Rect


@dataclass(frozen=True)
class ContentSize:
    """Bounding size needed to display all rows"""
    width: float
    height: float


@dataclass(frozen=True)
class ValidationResult:
    """
    Summary of a spec that passed validation

    Attributes:
        row_count: Number of rows
        item_count: Number of items over all rows
        row_totals: Fraction sum per row
    """
    row_count: int
    item_count: int
    row_totals: Tuple[float, ...]

    @property
    def max_fill(self) -> float:
        """Largest row fraction total (0.0 for a spec without rows)"""
        return max(self.row_totals, default=0.0)


class RectQuery:
    """
    Item rects intersecting a query rectangle

    Evaluated lazily on every iteration, so it can be iterated repeatedly.
    """

    def __init__(self, rects: Sequence[ItemRect], query: Rect):
        self._rects = rects
        self.query = query

    def __iter__(self) -> Iterator[ItemRect]:
        return (r for r in self._rects if r.rect.intersects(self.query))

    def __repr__(self) -> str:
        return f"RectQuery(query={self.query!r})"


RECT_COLUMNS = ['index', 'row', 'column', 'fraction', 'x', 'y', 'width', 'height']


@dataclass
class LayoutResult:
    """
    Complete layout solution for a spec at one container width

    Contains everything a consumer needs for rendering and hit-testing.

    Attributes:
        rects: Item rects in flattened row-major order
        content_size: Total content size (width = container width)
        container_width: Width the layout was computed for
        alignment: Alignment the rows were placed with
        layout_stats: Statistics about the layout pass
    """
    rects: Tuple[ItemRect, ...]
    content_size: ContentSize
    container_width: float
    alignment: Alignment
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.rects)

    def __iter__(self) -> Iterator[ItemRect]:
        return iter(self.rects)

    @property
    def row_count(self) -> int:
        return len({r.row for r in self.rects})

    def rect_at(self, index: int) -> ItemRect:
        """
        Item rect by flat index

        Raises:
            IndexOutOfRangeError: If index is outside [0, len(rects))
            LayoutError: If index is not an integer
        """
        try:
            index = operator.index(index)
        except TypeError:
            raise LayoutError(f"Item index must be an integer, got {index!r}") from None
        # Negative indices are errors here, not Python-style offsets from the end
        if not 0 <= index < len(self.rects):
            raise IndexOutOfRangeError(index, len(self.rects))
        return self.rects[index]

    def rects_intersecting(self, query: Rect) -> RectQuery:
        """Item rects whose area overlaps query"""
        return RectQuery(self.rects, query)

    def rows(self) -> List[List[ItemRect]]:
        """Item rects grouped per row, in row order"""
        return [list(group) for _, group in groupby(self.rects, key=lambda r: r.row)]

    def to_dataframe(self) -> pd.DataFrame:
        """One DataFrame row per item with its flat index, position and size"""
        records: List[RectRecord] = [
            {
                'index': r.index,
                'row': r.row,
                'column': r.column,
                'fraction': r.fraction,
                'x': r.rect.x,
                'y': r.rect.y,
                'width': r.rect.width,
                'height': r.rect.height,
            }
            for r in self.rects
        ]
        return pd.DataFrame.from_records(records, columns=RECT_COLUMNS)
