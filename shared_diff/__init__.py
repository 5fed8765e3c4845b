"""
shared_diff — unified diff parsing into files, added/removed lines and hunks.

Public API for library usage::

    from shared_diff import parse_unified_diff

    parsed = parse_unified_diff(diff_text)
    for path in parsed.files:
        print(path, len(parsed.added_by_file[path]))
"""

from .types import AddedLine, RemovedLine, Hunk, ParsedDiff
from .parser import (
    ParseState, normalize_lines, parse_hunk_header, parse_unified_diff,
    path_from_new_header,
)
from .projections import (
    list_changed_files, added_lines_by_file, removed_lines_by_file,
)
from .summary import DiffSummary, FileStats, summarize
from .config import Config
from .log import setup_logger

__all__ = [
    "AddedLine", "RemovedLine", "Hunk", "ParsedDiff",
    "ParseState", "normalize_lines", "parse_hunk_header",
    "parse_unified_diff", "path_from_new_header",
    "list_changed_files", "added_lines_by_file", "removed_lines_by_file",
    "DiffSummary", "FileStats", "summarize",
    "Config", "setup_logger",
]
