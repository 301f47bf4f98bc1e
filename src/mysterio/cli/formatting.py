"""
Mysterio Diff Formatting

Text rendering of configuration diffs for the terminal.
"""

import json
from typing import Any

from mysterio.core.differ import MISSING, DiffStatus, ObjectDiff, flatten_diff

NO_DIFFERENCES = "No differences found."


def format_value(value: Any) -> str:
    """Render a diff value for display.

    ``''`` when absent, ``'null'`` for None, JSON for containers and
    booleans, ``str()`` for anything else.
    """
    if value is MISSING:
        return ""
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, bool)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _render_table(head: list[str], rows: list[list[str]]) -> str:
    widths = [max(len(row[i]) for row in [head, *rows]) for i in range(len(head))]

    def line(cells: list[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([line(head), separator, *(line(row) for row in rows)])


def format_diff_output(tree: ObjectDiff, env1: str = "env1", env2: str = "env2") -> str:
    """Render a diff as a ``property | env1 | env2 | status`` table."""
    entries = flatten_diff(tree)
    if not entries:
        return NO_DIFFERENCES

    rows = [
        [
            entry.path,
            format_value(entry.previous_value),
            format_value(entry.current_value),
            entry.status.value,
        ]
        for entry in entries
    ]
    return _render_table(["property", env1, env2, "status"], rows)


def has_differences(tree: ObjectDiff) -> bool:
    return tree.status is not DiffStatus.EQUAL
