"""
Read-only views over a unified diff: changed files, added and removed lines.
"""

from __future__ import annotations

from .parser import normalize_lines, parse_unified_diff, path_from_new_header
from .types import AddedLine, RemovedLine


def list_changed_files(diff: str | bytes | None) -> list[str]:
    """Return the changed file paths in first-seen order.

    Only ``+++`` headers are looked at, so this is cheaper than a full
    parse, but it always agrees with ``parse_unified_diff(diff).files``.
    """
    if isinstance(diff, bytes):
        diff = diff.decode("utf-8", errors="replace")
    if not diff:
        return []

    out: list[str] = []
    seen: set[str] = set()
    for line in normalize_lines(diff):
        path = path_from_new_header(line)
        if path is not None and path not in seen:
            seen.add(path)
            out.append(path)
    return out


def added_lines_by_file(diff: str | bytes | None) -> dict[str, list[AddedLine]]:
    """Added lines per file, keyed like ``parse_unified_diff(diff).files``."""
    return parse_unified_diff(diff).added_by_file


def removed_lines_by_file(diff: str | bytes | None) -> dict[str, list[RemovedLine]]:
    """Removed lines per file; the counterpart of :func:`added_lines_by_file`."""
    return parse_unified_diff(diff).removed_by_file
