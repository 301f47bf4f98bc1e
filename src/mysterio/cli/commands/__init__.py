"""
Mysterio CLI Commands

Each command is an async function taking the parsed arguments and returning
the process exit code.
"""

import asyncio
import json
from pathlib import Path
from typing import Any

from mysterio.config.constants import DEFAULT_CONFIG_DIR

EXIT_OK = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2


def default_config_path(env: str) -> Path:
    """``./config/<env>.json`` relative to the working directory."""
    return Path.cwd() / DEFAULT_CONFIG_DIR / f"{env}.json"


def _load_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


async def load_json_file(path: str | Path) -> Any:
    """Read a JSON file the user pointed at; a missing file is an error here."""
    return await asyncio.to_thread(_load_json, Path(path).resolve())
