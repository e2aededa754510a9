"""
Utility functions

Small numeric helpers shared by the layout types and engine.
"""

from __future__ import annotations
from typing import Iterable
import math


def overlap_length(a_start: float, a_end: float, b_start: float, b_end: float) -> float:
    """
    Length of the overlap between two closed intervals

    Args:
        a_start, a_end: First interval (a_start <= a_end)
        b_start, b_end: Second interval (b_start <= b_end)

    Returns:
        Overlap length, 0.0 when the intervals are disjoint or only touch
    """
    return max(0.0, min(a_end, b_end) - max(a_start, b_start))


def exceeds_one(values: Iterable[float], tolerance: float) -> bool:
    """Whether the values sum to more than 1.0 + tolerance"""
    return math.fsum(values) > 1.0 + tolerance
