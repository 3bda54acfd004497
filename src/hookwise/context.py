# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run-time description of the git event a set of hooks is checking."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .diagnostics.attribution import StagedFileIndex
from .git import GitRepository
from .models import StagedFile
from .naming import camel_case

COMMENT_PREFIX: Final[str] = "#"
SCISSORS_LINE: Final[str] = "# ------------------------ >8 ------------------------"


class HookContext(BaseModel):
    """Immutable snapshot shared by every hook of one run."""

    model_config = ConfigDict(frozen=True)

    name: str
    root: Path
    staged_files: tuple[StagedFile, ...] = Field(default_factory=tuple)
    branch: str | None = None
    commit_message_file: Path | None = None
    commit_message: str | None = None

    @classmethod
    def from_repository(
        cls,
        name: str,
        repository: GitRepository,
        *,
        commit_message_file: Path | None = None,
    ) -> HookContext:
        """Build a context from the current state of ``repository``.

        Args:
            name: Context name, in any case style (``pre-commit``, ``PreCommit``).
            repository: Repository to read the index and branch from.
            commit_message_file: Message file passed to ``commit-msg`` hooks.

        Returns:
            HookContext: Snapshot of the change.
        """

        return cls(
            name=camel_case(name),
            root=repository.root,
            staged_files=repository.staged_files(),
            branch=repository.current_branch(),
            commit_message_file=commit_message_file,
        )

    @property
    def modified_files(self) -> list[str]:
        """Return paths of every file touched by the change."""

        return [staged.path for staged in self.staged_files]

    def staged_index(self) -> StagedFileIndex:
        """Return a path index over :attr:`staged_files`."""

        return StagedFileIndex(self.staged_files)

    def modified_lines_in_file(self, path: str) -> frozenset[int]:
        """Return the lines of ``path`` modified by the change (empty if unknown)."""

        staged = self.staged_index().resolve(path)
        return staged.modified_lines if staged is not None else frozenset()

    def raw_commit_message(self) -> str:
        """Return the commit message text, reading the message file when needed."""

        if self.commit_message is not None:
            return self.commit_message
        if self.commit_message_file is None:
            return ""
        path = self.commit_message_file
        if not path.is_absolute():
            path = self.root / path
        return path.read_text(encoding="utf-8", errors="replace")

    def commit_message_lines(self) -> list[str]:
        """Return commit message lines without git comments or the verbose diff."""

        lines: list[str] = []
        for line in self.raw_commit_message().splitlines():
            if line == SCISSORS_LINE:
                break
            if line.startswith(COMMENT_PREFIX):
                continue
            lines.append(line)
        return lines


__all__ = ["HookContext"]
