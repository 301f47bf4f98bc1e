"""
Mysterio Configuration Sources

The closed set of sources a merge can draw from, validation of a requested
merging order, and the JSON file reader shared by the file-backed sources.
"""

import asyncio
import json
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any

from mysterio.utils.exceptions import ConfigurationError
from mysterio.utils.logging import get_logger

logger = get_logger(__name__)


class ConfigSource(str, Enum):
    """Configuration sources, named as they appear in a merging order."""

    DEFAULT = "default"
    ENV = "env"
    SECRETS = "secrets"
    RC = "rc"

    @classmethod
    def names(cls) -> list[str]:
        return [source.value for source in cls]


def parse_merging_order(order: Iterable[str | ConfigSource]) -> list[ConfigSource]:
    """Validate a merging order and convert it to ``ConfigSource`` members.

    Raises:
        ConfigurationError: If the order is empty, names an unknown source,
            or lists a source twice.
    """
    if isinstance(order, str):
        raise ConfigurationError(
            f"Merging order must be a sequence of source names, got string {order!r}",
            config_key="merging_order",
        )

    valid = ConfigSource.names()
    sources: list[ConfigSource] = []

    for entry in order:
        value = entry.value if isinstance(entry, ConfigSource) else entry
        if value not in valid:
            raise ConfigurationError(
                f"Invalid merging source {value!r}. Valid sources are: {', '.join(valid)}",
                config_key="merging_order",
                details={"invalid": value, "valid": valid},
            )
        source = ConfigSource(value)
        if source in sources:
            raise ConfigurationError(
                f"Merging source {value!r} listed more than once",
                config_key="merging_order",
                details={"duplicate": value},
            )
        sources.append(source)

    if not sources:
        raise ConfigurationError(
            f"Merging order must name at least one of: {', '.join(valid)}",
            config_key="merging_order",
        )

    return sources


def _load_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


async def read_config_file(path: str | Path) -> Any:
    """Read a JSON config file.

    A missing file is an empty contribution and yields ``{}``. Any other
    read error, and malformed JSON, propagates to the caller.
    """
    path = Path(path)
    try:
        content = await asyncio.to_thread(_load_json, path)
    except FileNotFoundError:
        logger.debug("config_file_not_found", path=str(path))
        return {}

    logger.debug("config_file_loaded", path=str(path))
    return content
