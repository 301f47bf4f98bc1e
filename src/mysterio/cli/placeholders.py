"""
Mysterio Placeholder Reconciliation

Config files mark values that must come from the secret store with the
``<aws_secret_manager>`` sentinel. These helpers find those keys, build a
secret template from them, and check a secret payload against them.
"""

from collections.abc import Iterable
from typing import Any

from mysterio.config.constants import PATH_SEPARATOR, PLACEHOLDER, TEMPLATE_VALUE
from mysterio.core.dicts import has_path


def find_placeholders(config: dict[str, Any], prefix: str = "") -> list[str]:
    """Return the dotted path of every leaf equal to the placeholder.

    Lists are not searched.
    """
    results: list[str] = []
    for key, value in config.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        if value == PLACEHOLDER:
            results.append(path)
        elif isinstance(value, dict):
            results.extend(find_placeholders(value, path))
    return results


def build_template(paths: Iterable[str]) -> dict[str, str]:
    """Map each placeholder path to a value to be replaced in the secret store."""
    return {path: TEMPLATE_VALUE for path in paths}


def find_missing_keys(paths: Iterable[str], secret_data: Any) -> list[str]:
    """Return the placeholder paths the secret payload does not provide.

    A path counts as provided when the payload has it as a literal dotted
    key or as nested keys.
    """
    return [path for path in paths if not has_path(secret_data, path)]
