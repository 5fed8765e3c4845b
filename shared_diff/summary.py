"""
Diff summary — line-level change statistics per file and for the whole patch.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .parser import parse_unified_diff
from .types import ParsedDiff


@dataclass
class FileStats:
    """Change counts for a single file."""
    path: str
    additions: int = 0
    deletions: int = 0
    hunks: int = 0

    @property
    def changes(self) -> int:
        return self.additions + self.deletions

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "additions": self.additions,
            "deletions": self.deletions,
            "hunks": self.hunks,
            "changes": self.changes,
        }


@dataclass
class DiffSummary:
    """Per-file stats plus patch-wide totals."""
    files: list[FileStats] = field(default_factory=list)

    @property
    def files_changed(self) -> int:
        return len(self.files)

    @property
    def total_additions(self) -> int:
        return sum(f.additions for f in self.files)

    @property
    def total_deletions(self) -> int:
        return sum(f.deletions for f in self.files)

    @property
    def total_changes(self) -> int:
        return self.total_additions + self.total_deletions

    def top_files(self, n: int) -> list[FileStats]:
        """Return the *n* most changed files, ties kept in diff order."""
        if n <= 0:
            return []
        return sorted(self.files, key=lambda f: f.changes, reverse=True)[:n]

    def to_dict(self) -> dict:
        return {
            "files": [f.to_dict() for f in self.files],
            "files_changed": self.files_changed,
            "total_additions": self.total_additions,
            "total_deletions": self.total_deletions,
            "total_changes": self.total_changes,
        }


def summarize(
    diff: str | bytes | ParsedDiff | None,
    top_n: int | None = None,
) -> DiffSummary:
    """Compute change statistics for a diff.

    Parameters
    ----------
    diff:
        Raw diff text, or an already parsed :class:`ParsedDiff`.
    top_n:
        If given, keep only the *top_n* most changed files, most changed
        first. Otherwise files keep the order they appear in the diff.

    Returns
    -------
    DiffSummary
    """
    parsed = diff if isinstance(diff, ParsedDiff) else parse_unified_diff(diff)

    summary = DiffSummary(files=[
        FileStats(
            path=path,
            additions=len(parsed.added_by_file.get(path, [])),
            deletions=len(parsed.removed_by_file.get(path, [])),
            hunks=len(parsed.hunks_by_file.get(path, [])),
        )
        for path in parsed.files
    ])

    if top_n is not None:
        summary.files = summary.top_files(top_n)
    return summary
