"""
Unit tests for the nested dictionary helpers.
"""

import pytest

from mysterio.core.dicts import deep_merge, get_path, has_path, unflatten


@pytest.mark.unit
class TestDeepMerge:
    """Test deep merge semantics."""

    def test_nested_keys_merge(self):
        assert deep_merge({"a": {"b": 1, "c": 1}}, {"a": {"c": 2}}) == {"a": {"b": 1, "c": 2}}

    def test_scalar_replaces_dict_and_back(self):
        assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}
        assert deep_merge({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_none_overrides(self):
        assert deep_merge({"a": 1}, {"a": None}) == {"a": None}

    def test_inputs_untouched_and_unshared(self):
        base = {"a": {"b": [1]}}
        override = {"a": {"c": {"d": 1}}}
        result = deep_merge(base, override)

        result["a"]["b"].append(2)
        result["a"]["c"]["d"] = 2

        assert base == {"a": {"b": [1]}}
        assert override == {"a": {"c": {"d": 1}}}


@pytest.mark.unit
class TestUnflatten:
    """Test dotted key expansion."""

    def test_dotted_keys(self):
        assert unflatten({"a.b": 1, "a.c": 2, "top": 3}) == {"a": {"b": 1, "c": 2}, "top": 3}

    def test_deep_path(self):
        assert unflatten({"a.b.c": "x"}) == {"a": {"b": {"c": "x"}}}

    def test_nested_input_unchanged(self):
        nested = {"a": {"b": 1}, "top": 3}
        assert unflatten(nested) == nested
        assert unflatten(unflatten(nested)) == nested

    def test_dotted_and_nested_combine(self):
        assert unflatten({"a": {"b": 1}, "a.c": 2}) == {"a": {"b": 1, "c": 2}}


@pytest.mark.unit
class TestPaths:
    """Test dotted path lookups."""

    def test_get_path(self):
        data = {"a": {"b": {"c": 1}}}
        assert get_path(data, "a.b.c") == 1
        assert get_path(data, "a.x", "default") == "default"

    def test_has_path_literal_or_nested(self):
        assert has_path({"db.password": "x"}, "db.password")
        assert has_path({"db": {"password": None}}, "db.password")
        assert not has_path({"db": {}}, "db.password")
