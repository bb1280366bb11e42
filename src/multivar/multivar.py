"""
MultiVar: one logical field, many possibly-conflicting values.

A MultiVar is built once per field per aggregation pass:

    mv = MultiVar(int, reference_value=120)
    for record in records:
        mv.add(record["tempo"])
    mv.value_string          # "120" only while the added values agree
    mv.placeholder_string    # "Multiple values: 90, 120..121" otherwise
    mv.stats_string

Properties:
    reference_value:
        Optional caller-supplied default. Never added to values or
        originals and never part of any statistic, even when it
        equals an added value.

    values:
        Set of every distinct value passed to add().

    originals:
        Every value passed to add(), in order, duplicates kept.

There is no removal. All derived text is recomputed on each access.
"""

from __future__ import annotations

import math
from typing import Any, Generic, Iterable, List, Optional, Set, TypeVar

from multivar.config import FormatLimits
from multivar.kinds import ElementKind, accepts, display_text, is_summable, kind_for_type
from multivar import ranges

T = TypeVar("T")


class MultiVar(Generic[T]):
    """
    Aggregation container for the values of a single field.

    Args:
        element_type: int, float, str or an Enum subclass
        reference_value: optional default/expected value
        values: optional initial values, added in order
        limits: formatting limits for placeholder_string
    """

    def __init__(
        self,
        element_type: type,
        reference_value: Optional[T] = None,
        values: Optional[Iterable[T]] = None,
        limits: Optional[FormatLimits] = None,
    ) -> None:
        self.element_type = element_type
        self.kind: ElementKind = kind_for_type(element_type)
        self.limits = limits if limits is not None else FormatLimits()
        self.values: Set[T] = set()
        self.originals: List[T] = []
        if reference_value is not None:
            reference_value = self._checked(reference_value)
        self.reference_value: Optional[T] = reference_value
        if values is not None:
            self.add_all(values)

    def _checked(self, value: Any) -> T:
        if not accepts(self.kind, self.element_type, value):
            raise TypeError(
                f"MultiVar[{self.element_type.__name__}] cannot hold "
                f"{type(value).__name__} value {value!r}"
            )
        if self.kind is ElementKind.REAL:
            return float(value)
        return value

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, value: T | Iterable[T]) -> None:
        """Add one value, or every value of a list/tuple."""
        if isinstance(value, (list, tuple)):
            self.add_all(value)
            return
        value = self._checked(value)
        self.values.add(value)
        self.originals.append(value)

    def add_all(self, values: Iterable[T]) -> None:
        for v in values:
            self.add(v)

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------

    @property
    def has_reference_value(self) -> bool:
        return self.reference_value is not None

    @property
    def has_multiple_values(self) -> bool:
        return len(self.values) > 1

    @property
    def add_count(self) -> int:
        return len(self.originals)

    @property
    def unique_count(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return self.unique_count

    def __contains__(self, value: object) -> bool:
        return value in self.values

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    @property
    def lowest(self) -> Optional[T]:
        return ranges.lowest(self.values)

    @property
    def highest(self) -> Optional[T]:
        return ranges.highest(self.values)

    def _require_summable(self) -> None:
        if not is_summable(self.kind):
            raise TypeError(f"MultiVar[{self.element_type.__name__}] has no sum")

    @property
    def sum(self) -> int | float:
        """Sum over every addition, duplicates included."""
        self._require_summable()
        if self.kind is ElementKind.REAL:
            return sum(self.originals, 0.0)
        return sum(self.originals)

    @property
    def average(self) -> float:
        self._require_summable()
        if self.add_count == 0:
            return 0
        return self.sum / self.add_count

    @property
    def range_view(self) -> List[ranges.IntRange]:
        if self.kind is not ElementKind.INTEGER:
            raise TypeError(f"MultiVar[{self.element_type.__name__}] has no range view")
        return ranges.range_view(self.values)

    # ------------------------------------------------------------------
    # Display strings
    # ------------------------------------------------------------------

    @property
    def formatted_description(self) -> Optional[str]:
        return ranges.formatted_description(
            self.values, kind=self.kind, limit=self.limits.for_kind(self.kind)
        )

    @property
    def value_string(self) -> str:
        """Reference value text while the added values agree, else ""."""
        if self.reference_value is None or self.has_multiple_values:
            return ""
        return display_text(self.reference_value)

    @property
    def placeholder_string(self) -> Optional[str]:
        if not self.has_multiple_values:
            return None
        return "Multiple values: " + self.formatted_description

    @property
    def stats_string(self) -> str:
        if is_summable(self.kind):
            return self._numeric_stats()
        return self._label_stats() if self.kind is ElementKind.LABEL else self._text_stats()

    def _totals(self) -> str:
        return f"Total entries is {self.add_count} of which {self.unique_count} unique."

    def _numeric_stats(self) -> str:
        text = f"Statistics\n\nSum is {self.sum}.\n{self._totals()}"
        lo, hi = self.lowest, self.highest
        if lo is None or hi is None:
            return text
        average = self.average
        if math.isfinite(average):
            average = int(average)
        return text + f"\nAverage: {average}.\nRange: {lo} ≤ i ≤ {hi}."

    def _text_stats(self) -> str:
        text = f"Statistics\n\n{self._totals()}"
        lo, hi = self.lowest, self.highest
        if lo is None or hi is None:
            return text
        if self.unique_count == 1:
            return text + f"\nOne value: '{lo}'."
        if self.unique_count == 2:
            return text + f"\nThese values: '{lo}' & '{hi}'."
        return text + f"\nRange: '{lo}' ≤ i ≤ '{hi}'."

    def _label_stats(self) -> str:
        text = f"Statistics\n\n{self._totals()}"
        lo, hi = self.lowest, self.highest
        if lo is None or hi is None:
            return text
        lo_text, hi_text = display_text(lo), display_text(hi)
        if self.unique_count == 1:
            return text + f"\nThis value: {lo_text}."
        if self.unique_count == 2:
            return text + f"\nThese two values: {lo_text} & {hi_text}."
        return text + f"\nRange: {lo_text} ≤ i ≤ {hi_text}."

    # ------------------------------------------------------------------
    # Debug
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        ordered = ", ".join(repr(v) for v in ranges.sorted_values(self.values))
        parts = [f"MultiVar[{self.element_type.__name__}]("]
        if self.reference_value is not None:
            parts.append(f"reference_value={self.reference_value!r}, ")
        parts.append(f"values={{{ordered}}})")
        return "".join(parts)
