"""
Mysterio Configuration Differ

Structural diff between two merged configurations, and its flattening into
one row per changed dotted path.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mysterio.config.constants import PATH_SEPARATOR


class _Missing:
    """Marker for a value absent on one side of a diff."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class DiffStatus(str, Enum):
    EQUAL = "equal"
    ADDED = "added"
    DELETED = "deleted"
    UPDATED = "updated"


@dataclass
class PropertyDiff:
    """Difference at one key; nested dict changes are kept in ``diff``."""

    property: str
    status: DiffStatus
    previous_value: Any = MISSING
    current_value: Any = MISSING
    diff: list["PropertyDiff"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"property": self.property, "status": self.status.value}
        if self.diff:
            data["diff"] = [child.to_dict() for child in self.diff]
        else:
            if self.previous_value is not MISSING:
                data["previous_value"] = self.previous_value
            if self.current_value is not MISSING:
                data["current_value"] = self.current_value
        return data


@dataclass
class ObjectDiff:
    """Top-level diff between two configuration objects."""

    status: DiffStatus
    diff: list[PropertyDiff] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "diff": [child.to_dict() for child in self.diff],
        }


@dataclass
class DiffEntry:
    """One changed leaf, addressed by its dotted path."""

    path: str
    previous_value: Any
    current_value: Any
    status: DiffStatus

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"path": self.path, "status": self.status.value}
        if self.previous_value is not MISSING:
            data["previous_value"] = self.previous_value
        if self.current_value is not MISSING:
            data["current_value"] = self.current_value
        return data


def values_equal(a: Any, b: Any) -> bool:
    """JSON equality: unlike ``==``, ``True`` differs from ``1``."""
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(values_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return False
    return a == b


def _diff_properties(a: dict[str, Any], b: dict[str, Any]) -> list[PropertyDiff]:
    diffs: list[PropertyDiff] = []

    for key, previous in a.items():
        if key not in b:
            diffs.append(PropertyDiff(key, DiffStatus.DELETED, previous_value=previous))
            continue

        current = b[key]
        if values_equal(previous, current):
            continue

        if isinstance(previous, dict) and isinstance(current, dict):
            diffs.append(
                PropertyDiff(key, DiffStatus.UPDATED, diff=_diff_properties(previous, current))
            )
        else:
            diffs.append(
                PropertyDiff(
                    key,
                    DiffStatus.UPDATED,
                    previous_value=previous,
                    current_value=current,
                )
            )

    for key, current in b.items():
        if key not in a:
            diffs.append(PropertyDiff(key, DiffStatus.ADDED, current_value=current))

    return diffs


def diff(config_a: dict[str, Any], config_b: dict[str, Any]) -> ObjectDiff:
    """Compare two configuration objects, *config_a* being the "previous" side."""
    diffs = _diff_properties(config_a, config_b)
    status = DiffStatus.UPDATED if diffs else DiffStatus.EQUAL
    return ObjectDiff(status=status, diff=diffs)


def _collect_entries(node: PropertyDiff, prefix: str, entries: list[DiffEntry]) -> None:
    path = f"{prefix}{PATH_SEPARATOR}{node.property}" if prefix else node.property

    if node.status is DiffStatus.UPDATED and node.diff:
        for child in node.diff:
            _collect_entries(child, path, entries)
    elif node.status is DiffStatus.ADDED:
        entries.append(DiffEntry(path, MISSING, node.current_value, DiffStatus.ADDED))
    elif node.status is DiffStatus.DELETED:
        entries.append(DiffEntry(path, node.previous_value, MISSING, DiffStatus.DELETED))
    elif node.status is DiffStatus.UPDATED:
        entries.append(
            DiffEntry(path, node.previous_value, node.current_value, DiffStatus.UPDATED)
        )


def flatten_diff(tree: ObjectDiff) -> list[DiffEntry]:
    """Walk a diff depth-first and return one entry per changed leaf."""
    entries: list[DiffEntry] = []
    if tree.status is DiffStatus.EQUAL:
        return entries
    for node in tree.diff:
        _collect_entries(node, "", entries)
    return entries
