"""
Aggregation pass helpers.

Builds one MultiVar per field from a batch of source records and
turns the results into display summaries.

A record is any mapping of field name to value. Records that lack a
field, or hold None for it, contribute nothing to that field.

IMPORTANT: Summaries are display output. They are not a way to store
or restore MultiVar state.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

import yaml

from multivar.config import FormatLimits
from multivar.log import get_logger
from multivar.multivar import MultiVar

logger = get_logger(__name__)


@dataclass
class FieldSummary:
    """Display strings and counts of one aggregated field."""

    name: str
    value_string: str = ""
    placeholder_string: Optional[str] = None
    stats_string: str = ""
    add_count: int = 0
    unique_count: int = 0


def aggregate_field(
    records: Iterable[Mapping[str, Any]],
    field: str,
    element_type: type,
    reference_value: Any = None,
    limits: FormatLimits | None = None,
) -> MultiVar:
    """
    Collect the values of one field across records.

    Args:
        records: source records
        field: field name to read from each record
        element_type: element type of the resulting MultiVar
        reference_value: optional default shown while values agree
        limits: formatting limits

    Returns:
        A populated MultiVar
    """
    mv = MultiVar(element_type, reference_value=reference_value, limits=limits)
    for record in records:
        value = record.get(field)
        if value is not None:
            mv.add(value)
    logger.debug(
        "field aggregated",
        field=field,
        add_count=mv.add_count,
        unique_count=mv.unique_count,
    )
    return mv


def aggregate_records(
    records: Iterable[Mapping[str, Any]],
    fields: Mapping[str, type],
    references: Mapping[str, Any] | None = None,
    limits: FormatLimits | None = None,
) -> Dict[str, MultiVar]:
    """
    Collect every field in fields across records, in one pass.

    Args:
        records: source records
        fields: field name -> element type
        references: optional field name -> reference value
        limits: formatting limits shared by all fields

    Returns:
        Field name -> MultiVar, in the order of fields
    """
    references = references or {}
    unknown = set(references) - set(fields)
    if unknown:
        raise ValueError(f"References for undeclared fields: {sorted(unknown)}")

    result: Dict[str, MultiVar] = {
        name: MultiVar(element_type, reference_value=references.get(name), limits=limits)
        for name, element_type in fields.items()
    }
    record_count = 0
    for record in records:
        record_count += 1
        for name, mv in result.items():
            value = record.get(name)
            if value is not None:
                mv.add(value)

    logger.debug("records aggregated", records=record_count, fields=len(result))
    return result


def summarize(multivars: Mapping[str, MultiVar]) -> List[FieldSummary]:
    return [
        FieldSummary(
            name=name,
            value_string=mv.value_string,
            placeholder_string=mv.placeholder_string,
            stats_string=mv.stats_string,
            add_count=mv.add_count,
            unique_count=mv.unique_count,
        )
        for name, mv in multivars.items()
    ]


def summary_to_dict(s: FieldSummary) -> Dict[str, Any]:
    return {
        "name": s.name,
        "value_string": s.value_string,
        "placeholder_string": s.placeholder_string,
        "stats_string": s.stats_string,
        "add_count": s.add_count,
        "unique_count": s.unique_count,
    }


def summaries_to_dict(summaries: Iterable[FieldSummary]) -> Dict[str, Any]:
    return {"fields": [summary_to_dict(s) for s in summaries]}


def summaries_to_json(summaries: Iterable[FieldSummary]) -> str:
    return json.dumps(summaries_to_dict(summaries), sort_keys=True, ensure_ascii=False)


def summaries_to_yaml(summaries: Iterable[FieldSummary]) -> str:
    return yaml.safe_dump(summaries_to_dict(summaries), allow_unicode=True, sort_keys=False)
