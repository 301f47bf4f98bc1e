"""
Pytest configuration and shared fixtures for Mysterio tests.
"""

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from mysterio.utils.logging import setup_logging

# Configure test logging; keeps structlog output off stdout
setup_logging(log_level="WARNING")


def _write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from the caller's ENVIRONMENT / MYSTERIO_* variables."""
    for name in (
        "ENVIRONMENT",
        "MYSTERIO_CONFIG_DIR",
        "MYSTERIO_RC_PATH",
        "MYSTERIO_LOG_LEVEL",
        "MYSTERIO_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project_dir(tmp_path):
    """Temp project with a config dir, per-env files and an rc file."""
    config_dir = tmp_path / "config"
    _write_json(config_dir / "default.json", {"fooDefault": 123})
    _write_json(config_dir / "local.json", {"fooLocal": 123})
    _write_json(config_dir / "dev.json", {"fooDev": 456})
    _write_json(config_dir / "test.json", {"fooTest": 1011})
    _write_json(tmp_path / ".mysteriorc", {"fooRc": 789})
    return tmp_path


@pytest.fixture
def config_dir(project_dir):
    return project_dir / "config"


@pytest.fixture
def rc_path(project_dir):
    return project_dir / ".mysteriorc"


@pytest.fixture
def mock_secrets_client():
    """Secret store stub returning a flat payload."""
    return AsyncMock(return_value={"fooSecret": "bar"})


@pytest.fixture
def write_json():
    """Write a value as JSON to a path, creating parent directories."""
    return _write_json
