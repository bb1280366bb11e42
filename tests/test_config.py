"""
Tests for FormatLimits and their YAML configuration.
"""

import pytest
from multivar.config import (
    FormatLimits,
    limits_from_dict,
    limits_from_yaml,
    limits_to_dict,
    limits_to_yaml,
    load_limits,
)
from multivar.kinds import ElementKind


class TestFormatLimits:
    """Test FormatLimits objects."""

    def test_defaults(self):
        """Should default to 16 for numbers and 4 for text and labels."""
        limits = FormatLimits()
        assert limits.integer == 16
        assert limits.real == 16
        assert limits.text == 4
        assert limits.label == 4

    def test_for_kind(self):
        """Should look up the limit of an element kind."""
        limits = FormatLimits(text=7)
        assert limits.for_kind(ElementKind.TEXT) == 7
        assert limits.for_kind(ElementKind.INTEGER) == 16

    def test_rejects_zero(self):
        """Should refuse limits below one."""
        with pytest.raises(ValueError):
            FormatLimits(integer=0)

    def test_rejects_non_integer(self):
        """Should refuse non-integer limits."""
        with pytest.raises(ValueError):
            FormatLimits(real="8")


class TestDictMapping:
    """Test dict conversion."""

    def test_to_dict(self):
        """Should map every limit by name."""
        assert limits_to_dict(FormatLimits()) == {"integer": 16, "real": 16, "text": 4, "label": 4}

    def test_partial_dict_keeps_defaults(self):
        """Should keep defaults for missing keys."""
        limits = limits_from_dict({"label": 2})
        assert limits.label == 2
        assert limits.text == 4

    def test_none_gives_defaults(self):
        """Should give defaults for None."""
        assert limits_from_dict(None) == FormatLimits()

    def test_unknown_key(self):
        """Should refuse unknown keys."""
        with pytest.raises(ValueError):
            limits_from_dict({"colour": 3})

    def test_non_mapping(self):
        """Should refuse a non-mapping document."""
        with pytest.raises(ValueError):
            limits_from_dict([1, 2])


class TestYaml:
    """Test YAML loading."""

    def test_from_yaml(self):
        """Should read limits from YAML text."""
        limits = limits_from_yaml("integer: 8\ntext: 2\n")
        assert limits == FormatLimits(integer=8, text=2)

    def test_empty_document(self):
        """Should give defaults for an empty document."""
        assert limits_from_yaml("") == FormatLimits()

    def test_yaml_roundtrip(self):
        """Should read back what it writes."""
        limits = FormatLimits(real=3, label=9)
        assert limits_from_yaml(limits_to_yaml(limits)) == limits

    def test_load_file(self, tmp_path):
        """Should load from a path or a string path."""
        path = tmp_path / "limits.yaml"
        path.write_text("real: 5\n", encoding="utf-8")
        assert load_limits(path).real == 5
        assert load_limits(str(path)).integer == 16
