# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git plumbing used to describe the pending change."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

from .models import ProcessResult, StagedFile
from .process import CommandOptions, run_command

GitRunner = Callable[[Sequence[str], Path], ProcessResult]

_HUNK_HEADER: Final[re.Pattern[str]] = re.compile(
    r"^@@ -\d+(?:,(?P<old_count>\d+))? \+(?P<start>\d+)(?:,(?P<count>\d+))? @@",
)
_NEW_FILE_HEADER: Final[str] = "+++ "
_DEV_NULL: Final[str] = "/dev/null"
_DESTINATION_PREFIX: Final[str] = "b/"
_RENAME_OR_COPY: Final[frozenset[str]] = frozenset({"R", "C"})


class NotAGitRepositoryError(RuntimeError):
    """Raised when a directory is not inside a git work tree."""


def _default_runner(cmd: Sequence[str], root: Path) -> ProcessResult:
    return run_command(cmd, options=CommandOptions(cwd=root))


def parse_modified_lines(diff_text: str) -> dict[str, frozenset[int]]:
    """Return the added or changed line numbers per file in a ``-U0`` diff.

    Args:
        diff_text: Output of ``git diff --unified=0``.

    Returns:
        dict[str, frozenset[int]]: Destination path mapped to 1-based line numbers.
    """

    modified: dict[str, set[int]] = {}
    current: str | None = None
    old_remaining = new_remaining = 0
    for line in diff_text.splitlines():
        if old_remaining > 0 or new_remaining > 0:
            # hunk body: "+++ x" here is an added line, not a file header
            marker = line[:1]
            if marker in {"-", " "}:
                old_remaining -= 1
            if marker in {"+", " "}:
                new_remaining -= 1
            if marker in {"+", "-", " ", "\\"}:
                continue
            old_remaining = new_remaining = 0
        if line.startswith(_NEW_FILE_HEADER):
            target = line[len(_NEW_FILE_HEADER) :].strip()
            if target == _DEV_NULL:
                current = None
                continue
            if target.startswith(_DESTINATION_PREFIX):
                target = target[len(_DESTINATION_PREFIX) :]
            current = target
            modified.setdefault(current, set())
            continue
        match = _HUNK_HEADER.match(line)
        if match is None:
            continue
        old_remaining = int(match.group("old_count")) if match.group("old_count") is not None else 1
        start = int(match.group("start"))
        count = int(match.group("count")) if match.group("count") is not None else 1
        new_remaining = count
        if current is not None:
            modified[current].update(range(start, start + count))
    return {path: frozenset(lines) for path, lines in modified.items()}


def parse_name_status(text: str) -> list[tuple[str, str]]:
    """Return ``(path, original_path)`` pairs from ``git diff --name-status`` output."""

    entries: list[tuple[str, str]] = []
    for raw in text.splitlines():
        parts = raw.split("\t")
        if len(parts) < 2 or not parts[0]:
            continue
        status = parts[0][0]
        if status in _RENAME_OR_COPY and len(parts) >= 3:
            entries.append((parts[2], parts[1]))
        else:
            entries.append((parts[1], parts[1]))
    return entries


class GitRepository:
    """Read-only view of a git work tree."""

    def __init__(self, root: Path, *, runner: GitRunner | None = None) -> None:
        self.root = root
        self._runner = runner or _default_runner

    @classmethod
    def discover(cls, start: Path, *, runner: GitRunner | None = None) -> GitRepository:
        """Return the repository containing ``start``.

        Raises:
            NotAGitRepositoryError: If ``start`` is not inside a git work tree.
        """

        run = runner or _default_runner
        result = run(["git", "rev-parse", "--show-toplevel"], start)
        top_level = result.stdout.strip()
        if not result.success or not top_level:
            raise NotAGitRepositoryError(f"{start} is not inside a git repository")
        return cls(Path(top_level), runner=run)

    def _git(self, *args: str) -> ProcessResult:
        return self._runner(["git", "-c", "core.quotepath=off", *args], self.root)

    def current_branch(self) -> str | None:
        """Return the checked-out branch name, or ``None`` on a detached HEAD."""

        result = self._git("symbolic-ref", "--short", "-q", "HEAD")
        branch = result.stdout.strip()
        if not result.success or not branch:
            return None
        return branch

    def staged_files(self) -> tuple[StagedFile, ...]:
        """Return the files in the index that differ from ``HEAD``.

        Deleted files are omitted. Renamed and copied files keep their source
        path as ``original_path``.
        """

        names = self._git("diff", "--cached", "--name-status", "-M", "--diff-filter=ACMR")
        if not names.success:
            return ()
        diff = self._git("diff", "--cached", "--unified=0", "--no-color", "--no-ext-diff", "-M", "--diff-filter=ACMR")
        modified = parse_modified_lines(diff.stdout) if diff.success else {}
        return tuple(
            StagedFile(path=path, original_path=original, modified_lines=modified.get(path, frozenset()))
            for path, original in parse_name_status(names.stdout)
        )


__all__ = [
    "GitRepository",
    "GitRunner",
    "NotAGitRepositoryError",
    "parse_modified_lines",
    "parse_name_status",
]
