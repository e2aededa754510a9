"""
Type definitions for RowLayout

Common types used by the file readers, writers and CLI.
"""

from __future__ import annotations
from typing import TypedDict, Literal, List, Dict, Union, Tuple, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from .config import LayoutConfig
    from .layout.types import LayoutSpec

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

AlignmentName = Literal['center', 'left', 'right']
"""Alignment as written in spec files"""

SizeValue = Union[str, float]
"""Item size in a spec file: an ItemSize name ('small') or a fraction"""

PresetName = Literal['default', 'compact', 'flush']
"""LayoutConfig preset selectable from the CLI"""

SpecReadResult = Tuple['LayoutSpec', Union['LayoutConfig', None]]
"""Result from reading a spec file: (spec, config overrides or None)"""


# Structured data types

class LayoutConfigDict(TypedDict, total=False):
    """Optional LayoutConfig overrides carried by a spec file"""
    item_spacing: float
    row_spacing: float
    item_height: float
    overflow_tolerance: float
    trim_trailing_row_spacing: bool


class LayoutSpecDict(TypedDict, total=False):
    """
    JSON spec file contents

    'alignment' and 'rows' are required; 'config' is optional.
    """
    alignment: AlignmentName
    rows: List[List[SizeValue]]
    config: LayoutConfigDict


class RectRecord(TypedDict):
    """One exported item rect (a row of the TSV output)"""
    index: int
    row: int
    column: int
    fraction: float
    x: float
    y: float
    width: float
    height: float


LayoutMetadata = Dict[str, Union[float, str]]
"""'# key=value' metadata written above exported rects"""
