"""
Unit tests for placeholder discovery and reconciliation.
"""

import pytest

from mysterio.cli.placeholders import build_template, find_missing_keys, find_placeholders


@pytest.mark.unit
class TestFindPlaceholders:
    """Test placeholder discovery."""

    def test_nested_placeholder(self):
        config = {"db": {"pw": "<aws_secret_manager>"}, "host": "x"}
        assert find_placeholders(config) == ["db.pw"]

    def test_depth_first_order(self):
        config = {
            "a": "<aws_secret_manager>",
            "b": {"c": {"d": "<aws_secret_manager>"}, "e": "<aws_secret_manager>"},
            "f": "<aws_secret_manager>",
        }
        assert find_placeholders(config) == ["a", "b.c.d", "b.e", "f"]

    def test_lists_not_searched(self):
        config = {"items": ["<aws_secret_manager>", {"k": "<aws_secret_manager>"}]}
        assert find_placeholders(config) == []

    def test_no_placeholders(self):
        assert find_placeholders({"a": 1, "b": None, "c": {"d": "value"}}) == []


@pytest.mark.unit
class TestTemplateAndMissing:
    """Test template generation and missing key detection."""

    def test_build_template(self):
        assert build_template(["db.pw", "api.key"]) == {
            "db.pw": "replace_with_secret",
            "api.key": "replace_with_secret",
        }

    def test_missing_against_flat_secret(self):
        secret = {"db.pw": "x"}
        assert find_missing_keys(["db.pw", "api.key"], secret) == ["api.key"]

    def test_missing_against_nested_secret(self):
        secret = {"db": {"pw": "x"}}
        assert find_missing_keys(["db.pw", "db.user"], secret) == ["db.user"]
