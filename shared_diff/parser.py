"""
Unified diff parser — turns ``git diff`` / ``diff -u`` output into a
:class:`~shared_diff.types.ParsedDiff`.

The parser is a single pass over the normalized lines. All running state
(active file, old/new line counters, the file registry being built) lives
in a :class:`ParseState` created per call, so parsing is safe to run from
any number of threads at once.

Malformed input never raises: missing structure simply yields an empty or
partial result.
"""

from __future__ import annotations

import logging
import re

from .types import AddedLine, Hunk, ParsedDiff, RemovedLine

logger = logging.getLogger(__name__)

# Section markers
_DIFF_GIT = "diff --git "
_RENAME_FROM = "rename from "
_RENAME_TO = "rename to "
_BINARY = "Binary files "
_BINARY_BARE = "Binary files differ"
_OLD_PATH = "--- "
_NEW_PATH = "+++ "
_DEV_NULL = "/dev/null"
_REVISION_PREFIXES = ("a/", "b/")

# Patterns
_HUNK_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


def normalize_lines(text: str) -> list[str]:
    """Collapse CRLF to LF and split into lines.

    A lone ``\\r`` is left alone; nothing else is trimmed.
    """
    return text.replace("\r\n", "\n").split("\n")


def path_from_new_header(line: str) -> str | None:
    """Return the file path named by a ``+++ <path>`` header.

    Returns ``None`` when *line* is not a new-path header, when the path
    is the deleted-file sentinel (``/dev/null``), or when nothing is left
    after stripping the ``a/`` / ``b/`` revision prefix.
    """
    if not line.startswith(_NEW_PATH):
        return None
    path = line[len(_NEW_PATH):].strip()
    if path == _DEV_NULL or path.endswith(_DEV_NULL):
        return None
    if path.startswith(_REVISION_PREFIXES):
        path = path[2:]
    path = path.strip()
    return path or None


def parse_hunk_header(line: str) -> Hunk | None:
    """Parse ``@@ -o[,ol] +n[,nl] @@ ...`` into a :class:`Hunk`.

    Anything after the closing ``@@`` (usually the enclosing function) is
    ignored. Returns ``None`` if *line* is not a hunk header.
    """
    m = _HUNK_PATTERN.match(line)
    if not m:
        return None
    old_start, old_lines, new_start, new_lines = m.groups()
    return Hunk(
        header=line,
        old_start=int(old_start),
        old_lines=int(old_lines) if old_lines is not None else None,
        new_start=int(new_start),
        new_lines=int(new_lines) if new_lines is not None else None,
    )


class ParseState:
    """Running state for one parse: active file, both counters, registry."""

    def __init__(self) -> None:
        self.active_file: str | None = None
        self.old_line = 0
        self.new_line = 0
        self._diff = ParsedDiff()

    # ------------------------------------------------------------------
    # File registry
    # ------------------------------------------------------------------

    def _register(self, path: str) -> None:
        diff = self._diff
        if path in diff.added_by_file:
            return
        diff.files.append(path)
        diff.added_by_file[path] = []
        diff.removed_by_file[path] = []
        diff.hunks_by_file[path] = []
        logger.debug("[Diff] Identified file %s", path)

    # ------------------------------------------------------------------
    # Line dispatch
    # ------------------------------------------------------------------

    def feed(self, line: str) -> None:
        """Process the next normalized line."""
        if line.startswith(_DIFF_GIT):
            self.active_file = None
            return

        if line.startswith(_RENAME_FROM) or line.startswith(_RENAME_TO):
            return

        if line.startswith(_BINARY) or line == _BINARY_BARE:
            return

        if line.startswith(_OLD_PATH):
            return

        if line.startswith(_NEW_PATH):
            self._enter_file(path_from_new_header(line))
            return

        hunk = parse_hunk_header(line)
        if hunk is not None:
            self._start_hunk(hunk)
            return

        if self.active_file is None:
            return

        self._classify(line)

    def _enter_file(self, path: str | None) -> None:
        self.active_file = path
        if path is None:
            return
        # Content before the first hunk header is numbered from zero.
        self.old_line = 0
        self.new_line = 0
        self._register(path)

    def _start_hunk(self, hunk: Hunk) -> None:
        self.old_line = hunk.old_start
        self.new_line = hunk.new_start
        if self.active_file is None:
            logger.debug("[Diff] Dropping hunk with no file header: %s",
                         hunk.header)
            return
        self._diff.hunks_by_file[self.active_file].append(hunk)

    def _classify(self, line: str) -> None:
        path = self.active_file
        if line.startswith("+") and not line.startswith("+++"):
            self._diff.added_by_file[path].append(
                AddedLine(line=self.new_line, text=line[1:])
            )
            self.new_line += 1
        elif line.startswith("-") and not line.startswith("---"):
            self._diff.removed_by_file[path].append(
                RemovedLine(line=self.old_line, text=line[1:])
            )
            self.old_line += 1
        elif line.startswith("@@"):
            # Unrecognized hunk-like header; leave the counters alone
            pass
        else:
            self.old_line += 1
            self.new_line += 1

    def result(self) -> ParsedDiff:
        return self._diff


def parse_unified_diff(diff: str | bytes | None) -> ParsedDiff:
    """Parse unified diff text into files, added/removed lines and hunks.

    Parameters
    ----------
    diff:
        The raw diff. ``bytes`` are decoded as UTF-8 (undecodable bytes
        replaced); ``None`` is treated as an empty diff.

    Returns
    -------
    ParsedDiff
        A fresh record; empty if no file section could be identified.
    """
    if isinstance(diff, bytes):
        diff = diff.decode("utf-8", errors="replace")
    if not diff:
        return ParsedDiff()

    state = ParseState()
    for line in normalize_lines(diff):
        state.feed(line)

    parsed = state.result()
    logger.debug(
        "[Diff] Parsed %d file(s), %d hunk(s)",
        len(parsed.files),
        sum(len(h) for h in parsed.hunks_by_file.values()),
    )
    return parsed
