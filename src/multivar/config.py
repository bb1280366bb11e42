"""
Formatting limits and their YAML configuration.

Limits bound how many entries a formatted description lists before it
collapses (integers) or truncates (reals, text, labels).

Example YAML:

    integer: 16
    real: 16
    text: 4
    label: 4

Missing keys keep their defaults. Unknown keys are an error.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from multivar.kinds import ElementKind
from multivar.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FormatLimits:
    """
    Per-kind limits for bounded formatting.

    Properties:
        integer: maximum number of compacted ranges before "lo ≤ i ≤ hi"
        real: maximum number of listed reals
        text: maximum number of listed strings
        label: maximum number of listed enum labels
    """

    integer: int = 16
    real: int = 16
    text: int = 4
    label: int = 4

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Limit '{f.name}' must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"Limit '{f.name}' must be at least 1, got {value}")

    def for_kind(self, kind: ElementKind) -> int:
        return getattr(self, kind.value)


def limits_to_dict(limits: FormatLimits) -> Dict[str, int]:
    return {f.name: getattr(limits, f.name) for f in fields(limits)}


def limits_from_dict(d: Dict[str, Any] | None) -> FormatLimits:
    if d is None:
        return FormatLimits()
    if not isinstance(d, dict):
        raise ValueError(f"Limits must be a mapping, got {type(d).__name__}")
    known = {f.name for f in fields(FormatLimits)}
    unknown = set(d) - known
    if unknown:
        raise ValueError(f"Unknown limit keys: {sorted(unknown)}")
    return FormatLimits(**d)


def limits_from_yaml(s: str) -> FormatLimits:
    d = yaml.safe_load(s)
    return limits_from_dict(d)


def limits_to_yaml(limits: FormatLimits) -> str:
    return yaml.safe_dump(limits_to_dict(limits))


def load_limits(path: str | Path) -> FormatLimits:
    """
    Read FormatLimits from a YAML file.

    Args:
        path: YAML file path

    Returns:
        FormatLimits with defaults for missing keys
    """
    path = Path(path)
    limits = limits_from_yaml(path.read_text(encoding="utf-8"))
    logger.debug("limits loaded", path=str(path), **limits_to_dict(limits))
    return limits
