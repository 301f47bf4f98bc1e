"""
Mysterio Dictionary Helpers

Pure functions over nested configuration mappings. None of them mutates its
arguments; results never share nested containers with the inputs.
"""

import copy
from typing import Any

from mysterio.config.constants import PATH_SEPARATOR

_MISSING = object()


def deep_merge(base: Any, override: Any) -> Any:
    """Return *override* merged over *base*.

    Dicts merge key by key, recursively. Any other value, lists included,
    replaces what was there.
    """
    if not (isinstance(base, dict) and isinstance(override, dict)):
        return copy.deepcopy(override)

    result = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        if key in result:
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def unflatten(data: dict[str, Any], separator: str = PATH_SEPARATOR) -> dict[str, Any]:
    """Expand dotted keys into nested dicts.

    ``{"a.b": 1, "a.c": 2, "top": 3}`` becomes ``{"a": {"b": 1, "c": 2}, "top": 3}``.
    Only top-level keys are split, so already nested input comes back equal.
    """
    result: dict[str, Any] = {}

    for key, value in data.items():
        parts = key.split(separator)
        node = result
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child

        leaf = parts[-1]
        node[leaf] = deep_merge(node[leaf], value) if leaf in node else copy.deepcopy(value)

    return result


def get_path(data: Any, path: str, default: Any = None, separator: str = PATH_SEPARATOR) -> Any:
    """Get a nested value using dot notation."""
    current = data
    for key in path.split(separator):
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return default
    return current


def has_path(data: Any, path: str, separator: str = PATH_SEPARATOR) -> bool:
    """Whether *path* addresses a value in *data*, literally or through nesting."""
    if isinstance(data, dict) and path in data:
        return True
    return get_path(data, path, _MISSING, separator) is not _MISSING
