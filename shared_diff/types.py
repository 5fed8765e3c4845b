"""
Diff types — the structured record produced by parsing a unified diff.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AddedLine:
    """A line added in the new revision."""
    line: int        # 1-indexed line number in the new file
    text: str

    def to_dict(self) -> dict:
        return {"line": self.line, "text": self.text}


@dataclass
class RemovedLine:
    """A line removed from the old revision."""
    line: int        # 1-indexed line number in the old file
    text: str

    def to_dict(self) -> dict:
        return {"line": self.line, "text": self.text}


@dataclass
class Hunk:
    """A single ``@@ -a,b +c,d @@`` hunk header.

    ``old_lines`` / ``new_lines`` are ``None`` when the header omits the
    count, which unified diff allows for single-line ranges.
    """
    header: str
    old_start: int
    old_lines: int | None = None
    new_start: int = 0
    new_lines: int | None = None

    @property
    def old_count(self) -> int:
        return 1 if self.old_lines is None else self.old_lines

    @property
    def new_count(self) -> int:
        return 1 if self.new_lines is None else self.new_lines

    @property
    def is_insertion(self) -> bool:
        return self.old_count == 0

    @property
    def is_deletion(self) -> bool:
        return self.new_count == 0

    def to_dict(self) -> dict:
        data: dict = {"header": self.header, "oldStart": self.old_start}
        if self.old_lines is not None:
            data["oldLines"] = self.old_lines
        data["newStart"] = self.new_start
        if self.new_lines is not None:
            data["newLines"] = self.new_lines
        return data


@dataclass
class ParsedDiff:
    """The complete parse of a unified diff.

    ``files`` holds each identified path once, in the order it was first
    seen. The three mappings always share that exact key order.
    """
    files: list[str] = field(default_factory=list)
    added_by_file: dict[str, list[AddedLine]] = field(default_factory=dict)
    removed_by_file: dict[str, list[RemovedLine]] = field(default_factory=dict)
    hunks_by_file: dict[str, list[Hunk]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.files

    def to_dict(self) -> dict:
        """Serialize to plain JSON-compatible data."""
        return {
            "files": list(self.files),
            "addedByFile": {
                path: [a.to_dict() for a in lines]
                for path, lines in self.added_by_file.items()
            },
            "removedByFile": {
                path: [r.to_dict() for r in lines]
                for path, lines in self.removed_by_file.items()
            },
            "hunksByFile": {
                path: [h.to_dict() for h in hunks]
                for path, hunks in self.hunks_by_file.items()
            },
        }
