"""
Range / Format Layer

Pure functions over unordered unique-value collections (set, frozenset):
    - Sorted extremes (lowest, highest)
    - Numeric aggregates over the unique elements
    - Range view: maximal contiguous runs of an integer set
    - Bounded formatting per element kind

IMPORTANT: Nothing here keeps state or mutates its input.
Every result is recomputed from the collection's contents, so the
same contents always give the same text regardless of insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Collection, Dict, Iterator, List, Optional

from multivar.config import FormatLimits
from multivar.kinds import (
    ElementKind,
    display_text,
    is_summable,
    kind_of,
    sort_key,
    supports_ranges,
)


@dataclass(frozen=True)
class IntRange:
    """
    A half-open run of consecutive integers: [lower, upper).

    Examples:
        IntRange(7, 10) covers 7, 8, 9 and formats as "7..9"
        IntRange(4, 5) covers 4 only and formats as "4"

    Properties:
        lower: first integer in the run
        upper: one past the last integer in the run

    Empty runs are not representable.
    """

    lower: int
    upper: int

    def __post_init__(self) -> None:
        if self.upper <= self.lower:
            raise ValueError(f"Empty range [{self.lower}, {self.upper})")

    @property
    def width(self) -> int:
        return self.upper - self.lower

    @property
    def last(self) -> int:
        return self.upper - 1

    @property
    def is_singleton(self) -> bool:
        return self.width == 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.lower <= value < self.upper

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.lower, self.upper))

    def __str__(self) -> str:
        if self.is_singleton:
            return f"{self.lower}"
        return f"{self.lower}..{self.last}"


def sorted_values(values: Collection[Any]) -> List[Any]:
    if not values:
        return []
    kind = kind_of(next(iter(values)))
    return sorted(values, key=sort_key(kind))


def lowest(values: Collection[Any]) -> Optional[Any]:
    """Smallest element, or None for an empty collection."""
    ordered = sorted_values(values)
    return ordered[0] if ordered else None


def highest(values: Collection[Any]) -> Optional[Any]:
    """Largest element, or None for an empty collection."""
    ordered = sorted_values(values)
    return ordered[-1] if ordered else None


def _require_summable(values: Collection[Any]) -> None:
    for v in values:
        if not is_summable(kind_of(v)):
            raise TypeError(f"Cannot sum {type(v).__name__} values")


def set_sum(values: Collection[Any]) -> int | float:
    """
    Sum of the unique elements.

    Duplicates were already collapsed by the set, so this differs from
    MultiVar.sum, which counts every addition.
    """
    _require_summable(values)
    return sum(values)


def set_average(values: Collection[Any]) -> float:
    """Mean of the unique elements; 0 for an empty collection."""
    if not values:
        return 0
    return set_sum(values) / len(values)


def range_view(values: Collection[int]) -> List[IntRange]:
    """
    Compact an integer set into maximal contiguous runs.

    Walks the sorted values keeping one open run [lo, hi). A value
    beyond hi starts a new run; anything else extends the open run.

    Returns:
        Ascending, disjoint IntRange list covering exactly the input.
        Empty input gives [].

    Raises:
        TypeError: for non-integer elements
    """
    for v in values:
        if not supports_ranges(kind_of(v)):
            raise TypeError(f"Range view requires integers, got {type(v).__name__}")

    ranges: List[IntRange] = []
    lo: Optional[int] = None
    hi: Optional[int] = None
    for v in sorted(values):
        if lo is None:
            lo, hi = v, v + 1
        elif v > hi:
            ranges.append(IntRange(lo, hi))
            lo, hi = v, v + 1
        else:
            hi = v + 1

    if lo is not None:
        ranges.append(IntRange(lo, hi))

    return ranges


def format_integers(values: Collection[int], limit: int = 16) -> Optional[str]:
    """
    Format an integer set by its range view.

    "1..3, 7..9" while the number of runs stays within limit,
    "1 ≤ i ≤ 99" once it does not. None for an empty set.
    """
    ranges = range_view(values)
    if not ranges:
        return None
    if len(ranges) > limit:
        return f"{ranges[0].lower} ≤ i ≤ {ranges[-1].last}"
    return ", ".join(str(r) for r in ranges)


def format_elements(
    values: Collection[Any],
    limit: int,
    render: Callable[[Any], str] = display_text,
) -> Optional[str]:
    """
    Quote and list elements in ascending order, truncating past limit.

    A collection of at most limit elements is listed in full.
    A larger one lists its first limit - 1 elements followed by
    " ... '<highest>'", so limit entries are shown in total.
    """
    ordered = sorted_values(values)
    if not ordered:
        return None

    if len(ordered) <= limit:
        return ", ".join(f"'{render(v)}'" for v in ordered)

    head = ordered[: max(limit - 1, 1)]
    text = ", ".join(f"'{render(v)}'" for v in head)
    return text + f" ... '{render(ordered[-1])}'"


def format_reals(values: Collection[float], limit: int = 16) -> Optional[str]:
    return format_elements(values, limit)


def format_texts(values: Collection[str], limit: int = 4) -> Optional[str]:
    return format_elements(values, limit)


def format_labels(values: Collection[Any], limit: int = 4) -> Optional[str]:
    return format_elements(values, limit)


_FORMATTERS: Dict[ElementKind, Callable[[Collection[Any], int], Optional[str]]] = {
    ElementKind.INTEGER: format_integers,
    ElementKind.REAL: format_reals,
    ElementKind.TEXT: format_texts,
    ElementKind.LABEL: format_labels,
}


def formatted_description(
    values: Collection[Any],
    kind: ElementKind | None = None,
    limit: int | None = None,
) -> Optional[str]:
    """
    Bounded description of a collection, dispatched on its element kind.

    Args:
        values: unique values
        kind: element kind (inferred from an element when omitted)
        limit: formatting limit (the kind's default when omitted)

    Returns:
        Formatted text, or None for an empty collection
    """
    if not values:
        return None
    if kind is None:
        kind = kind_of(next(iter(values)))
    if limit is None:
        limit = FormatLimits().for_kind(kind)
    return _FORMATTERS[kind](values, limit)
