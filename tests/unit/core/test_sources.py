"""
Unit tests for source validation and the JSON file reader.
"""

import json
from unittest.mock import patch

import pytest

from mysterio.core.sources import ConfigSource, parse_merging_order, read_config_file
from mysterio.utils.exceptions import ConfigurationError


@pytest.mark.unit
class TestParseMergingOrder:
    """Test merging order validation."""

    def test_valid_subsequence_any_order(self):
        assert parse_merging_order(["rc", "default"]) == [ConfigSource.RC, ConfigSource.DEFAULT]

    def test_invalid_name_reported(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_merging_order(["default", "bogus"])

        error = exc_info.value
        assert "'bogus'" in error.message
        assert error.config_key == "merging_order"
        assert error.details["valid"] == ["default", "env", "secrets", "rc"]

    def test_plain_string_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_merging_order("default")

    def test_error_serializes(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_merging_order([])

        assert exc_info.value.to_dict()["error_type"] == "ConfigurationError"


@pytest.mark.unit
class TestReadConfigFile:
    """Test reading JSON config files."""

    @pytest.mark.asyncio
    async def test_reads_object(self, tmp_path, write_json):
        path = write_json(tmp_path / "a.json", {"a": {"b": 1}})
        assert await read_config_file(path) == {"a": {"b": 1}}

    @pytest.mark.asyncio
    async def test_missing_file_is_empty(self, tmp_path):
        assert await read_config_file(tmp_path / "missing.json") == {}

    @pytest.mark.asyncio
    async def test_array_is_tolerated(self, tmp_path, write_json):
        path = write_json(tmp_path / "list.json", [1, 2])
        assert await read_config_file(path) == [1, 2]

    @pytest.mark.asyncio
    async def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            await read_config_file(path)

    @pytest.mark.asyncio
    async def test_other_os_errors_propagate(self, tmp_path):
        with patch("mysterio.core.sources._load_json", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError):
                await read_config_file(tmp_path / "locked.json")
