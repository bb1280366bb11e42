"""
Tests for aggregation pass helpers.

These tests verify that records are collected field by field and that
summaries export cleanly to JSON/YAML.
"""

import json
from enum import Enum

import pytest
import yaml
from multivar.aggregate import (
    FieldSummary,
    aggregate_field,
    aggregate_records,
    summaries_to_dict,
    summaries_to_json,
    summaries_to_yaml,
    summarize,
)
from multivar.config import FormatLimits


class Key(Enum):
    C = "C major"
    G = "G major"


def build_records():
    return [
        {"tempo": 120, "title": "Intro", "key": Key.C},
        {"tempo": 121, "title": "Verse", "key": Key.C},
        {"tempo": 120, "title": "Chorus"},
        {"tempo": None, "title": "Bridge", "key": Key.G},
    ]


def test_aggregate_field_skips_missing_values():
    """Should skip records lacking the field or holding None."""
    mv = aggregate_field(build_records(), "tempo", int)
    assert mv.originals == [120, 121, 120]
    assert mv.placeholder_string == "Multiple values: 120..121"


def test_aggregate_field_with_reference():
    """Should hide the reference once titles conflict."""
    mv = aggregate_field(build_records(), "title", str, reference_value="Song")
    assert mv.add_count == 4
    assert mv.value_string == ""


def test_aggregate_field_absent_everywhere():
    """Should show the reference when no record has the field."""
    mv = aggregate_field(build_records(), "genre", str, reference_value="Pop")
    assert mv.add_count == 0
    assert mv.value_string == "Pop"


def test_aggregate_records_keeps_field_order():
    """Should return one MultiVar per field in declared order."""
    result = aggregate_records(build_records(), {"title": str, "tempo": int, "key": Key})
    assert list(result) == ["title", "tempo", "key"]
    assert result["key"].originals == [Key.C, Key.C, Key.G]
    assert result["tempo"].sum == 361


def test_aggregate_records_applies_references_and_limits():
    """Should apply per-field references and shared limits."""
    limits = FormatLimits(text=2)
    result = aggregate_records(
        build_records(),
        {"title": str, "tempo": int},
        references={"tempo": 120},
        limits=limits,
    )
    assert result["tempo"].reference_value == 120
    assert result["title"].reference_value is None
    assert result["title"].placeholder_string == "Multiple values: 'Bridge' ... 'Verse'"


def test_aggregate_records_rejects_unknown_references():
    """Should refuse references for undeclared fields."""
    with pytest.raises(ValueError):
        aggregate_records(build_records(), {"tempo": int}, references={"title": "x"})


def test_aggregate_records_rejects_ill_typed_values():
    """Should refuse record values of the wrong type."""
    with pytest.raises(TypeError):
        aggregate_records(build_records(), {"title": int})


def test_summarize():
    """Should capture display strings and counts per field."""
    result = aggregate_records(build_records(), {"key": Key}, references={"key": Key.C})
    [summary] = summarize(result)
    assert summary == FieldSummary(
        name="key",
        value_string="",
        placeholder_string="Multiple values: 'C major', 'G major'",
        stats_string=(
            "Statistics\n\nTotal entries is 3 of which 2 unique.\n"
            "These two values: C major & G major."
        ),
        add_count=3,
        unique_count=2,
    )


def test_summary_exports():
    """Should export the same summaries as dict, JSON and YAML."""
    summaries = summarize(aggregate_records(build_records(), {"tempo": int}))
    expected = summaries_to_dict(summaries)
    assert expected["fields"][0]["add_count"] == 3
    assert json.loads(summaries_to_json(summaries)) == expected
    assert yaml.safe_load(summaries_to_yaml(summaries)) == expected
