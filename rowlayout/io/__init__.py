"""I/O utilities for RowLayout"""

from .readers import LayoutSpecReader, read_spec
from .writers import RectWriter, write_rects

__all__ = [
    'LayoutSpecReader', 'read_spec',
    'RectWriter', 'write_rects']
