"""
Unit tests for diff formatting.
"""

import pytest

from mysterio.cli.formatting import NO_DIFFERENCES, format_diff_output, format_value, has_differences
from mysterio.core.differ import MISSING, diff


@pytest.mark.unit
class TestFormatValue:
    """Test value rendering."""

    def test_missing_and_null(self):
        assert format_value(MISSING) == ""
        assert format_value(None) == "null"

    def test_scalars(self):
        assert format_value("text") == "text"
        assert format_value(42) == "42"
        assert format_value(1.5) == "1.5"
        assert format_value(True) == "true"

    def test_containers_are_json(self):
        assert format_value({"a": 1}) == '{"a": 1}'
        assert format_value([1, "b"]) == '[1, "b"]'

    def test_non_ascii_kept_verbatim(self):
        assert format_value({"name": "café"}) == '{"name": "café"}'


@pytest.mark.unit
class TestFormatDiffOutput:
    """Test the diff table."""

    def test_no_differences(self):
        tree = diff({"a": 1}, {"a": 1})
        assert format_diff_output(tree) == NO_DIFFERENCES
        assert not has_differences(tree)

    def test_table_contents(self):
        tree = diff(
            {"db": {"host": "a"}, "removedKey": "oldValue"},
            {"db": {"host": "b"}, "newKey": "newValue"},
        )
        output = format_diff_output(tree, "staging", "production")
        lines = output.splitlines()

        assert has_differences(tree)
        assert [cell.strip() for cell in lines[0].split("|")] == ["property", "staging", "production", "status"]
        assert "db.host" in lines[2] and "updated" in lines[2]
        assert "removedKey" in output and "oldValue" in output and "deleted" in output
        assert "newKey" in output and "newValue" in output and "added" in output
        assert len(lines) == 5
