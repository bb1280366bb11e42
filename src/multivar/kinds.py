"""
Element Kinds for MultiVar

A MultiVar holds values of exactly one element type. The behavior that
depends on that type (ordering, arithmetic, range compaction, display
labels) is resolved once, from the type, into an ElementKind.

Supported element types:
    - int          -> INTEGER  (orderable, summable, range view)
    - float        -> REAL     (orderable, summable)
    - str          -> TEXT     (orderable)
    - Enum subclass -> LABEL   (orderable by declaration, labeled)

ARCHITECTURAL RULE:
    Every capability check goes through this module.
    Other modules never inspect raw Python types themselves.
"""

from enum import Enum
from typing import Any, Callable, List, Tuple


class ElementKind(Enum):
    """
    The element categories a MultiVar can aggregate.

    Keep this minimal. Each kind has its own formatting and
    statistics routine; adding a kind means adding both.
    """

    INTEGER = "integer"
    REAL = "real"
    TEXT = "text"
    LABEL = "label"


_SUMMABLE = {ElementKind.INTEGER, ElementKind.REAL}


def kind_for_type(element_type: type) -> ElementKind:
    """
    Resolve the ElementKind of a Python type.

    Args:
        element_type: int, float, str or an Enum subclass

    Returns:
        The matching ElementKind

    Raises:
        TypeError: for any other type (bool included)
    """
    if not isinstance(element_type, type):
        raise TypeError(f"Element type must be a type, got {element_type!r}")
    if issubclass(element_type, Enum):
        return ElementKind.LABEL
    if issubclass(element_type, bool):
        raise TypeError("Unsupported element type: bool")
    if issubclass(element_type, int):
        return ElementKind.INTEGER
    if issubclass(element_type, float):
        return ElementKind.REAL
    if issubclass(element_type, str):
        return ElementKind.TEXT
    raise TypeError(f"Unsupported element type: {element_type.__name__}")


def kind_of(value: Any) -> ElementKind:
    """Resolve the ElementKind of a single value."""
    return kind_for_type(type(value))


def is_summable(kind: ElementKind) -> bool:
    return kind in _SUMMABLE


def supports_ranges(kind: ElementKind) -> bool:
    return kind is ElementKind.INTEGER


def _declaration_index(member: Enum) -> int:
    members: List[Enum] = list(type(member))
    return members.index(member)


def sort_key(kind: ElementKind) -> Callable[[Any], Any]:
    """
    Ordering key for values of the given kind.

    Labels order by their position in the enum declaration,
    since plain Enum members are not comparable. Numbers sort NaN last.
    """
    if kind is ElementKind.LABEL:
        return _declaration_index
    if kind in _SUMMABLE:
        return _numeric_key
    return _identity


def _numeric_key(value: Any) -> Tuple[bool, Any]:
    # NaN is unordered; it always goes last
    is_nan = value != value
    return (is_nan, 0 if is_nan else value)


def _identity(value: Any) -> Any:
    return value


def display_text(value: Any) -> str:
    """
    Human-readable text of a single value.

    Labels render as their underlying value, not as "Color.RED".
    """
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def accepts(kind: ElementKind, element_type: type, value: Any) -> bool:
    """Whether value is well-typed for a container of element_type."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Enum) and kind is not ElementKind.LABEL:
        return False
    if kind is ElementKind.REAL:
        return isinstance(value, (int, float))
    return isinstance(value, element_type)

