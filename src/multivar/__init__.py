"""
MultiVar Package

Aggregates the possibly-conflicting values of one logical field,
collected from many source records, into display text.

Two layers:
    - ranges: pure functions over unique-value sets (extremes,
      sums, integer range view, bounded formatting)
    - multivar: the MultiVar container built on top of them

This package knows nothing about where records come from or how the
produced strings are shown. Callers supply values and consume text.
"""

from multivar.config import FormatLimits, load_limits
from multivar.kinds import ElementKind
from multivar.multivar import MultiVar
from multivar.ranges import IntRange, formatted_description, range_view

__version__ = "0.1.0"

__all__ = [
    "ElementKind",
    "FormatLimits",
    "IntRange",
    "MultiVar",
    "formatted_description",
    "load_limits",
    "range_view",
]
