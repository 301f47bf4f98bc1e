"""
Mysterio Core

Layered configuration merge and configuration diffing.
"""

from mysterio.core.differ import (
    MISSING,
    DiffEntry,
    DiffStatus,
    ObjectDiff,
    PropertyDiff,
    diff,
    flatten_diff,
)
from mysterio.core.dicts import deep_merge, get_path, unflatten
from mysterio.core.merger import ConfigMerger
from mysterio.core.sources import ConfigSource, parse_merging_order, read_config_file

__all__ = [
    "ConfigMerger",
    "ConfigSource",
    "DiffEntry",
    "DiffStatus",
    "MISSING",
    "ObjectDiff",
    "PropertyDiff",
    "deep_merge",
    "diff",
    "flatten_diff",
    "get_path",
    "parse_merging_order",
    "read_config_file",
    "unflatten",
]
