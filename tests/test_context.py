# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for :class:`hookwise.context.HookContext`."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from hookwise.context import SCISSORS_LINE, HookContext
from hookwise.git import GitRepository
from hookwise.models import ProcessResult, StagedFile


def test_modified_files_and_lines(tmp_path: Path) -> None:
    context = HookContext(
        name="PreCommit",
        root=tmp_path,
        staged_files=(
            StagedFile(path="src/app.py", modified_lines=frozenset({3, 4})),
            StagedFile(path="README.md"),
        ),
    )

    assert context.modified_files == ["src/app.py", "README.md"]
    assert context.modified_lines_in_file("src/app.py") == frozenset({3, 4})
    assert context.modified_lines_in_file("./src/app.py") == frozenset({3, 4})
    assert context.modified_lines_in_file("unknown.py") == frozenset()


def test_commit_message_lines_strip_comments_and_diff(tmp_path: Path) -> None:
    message_file = tmp_path / "COMMIT_EDITMSG"
    message_file.write_text(
        "Add parser\n\nHandles nested tables.\n# Please enter the commit message\n"
        f"{SCISSORS_LINE}\ndiff --git a/x b/x\n",
        encoding="utf-8",
    )
    context = HookContext(name="CommitMsg", root=tmp_path, commit_message_file=Path("COMMIT_EDITMSG"))

    assert context.commit_message_lines() == ["Add parser", "", "Handles nested tables."]


def test_inline_commit_message_wins(tmp_path: Path) -> None:
    context = HookContext(name="CommitMsg", root=tmp_path, commit_message="Subject\n\nBody")

    assert context.raw_commit_message() == "Subject\n\nBody"
    assert HookContext(name="CommitMsg", root=tmp_path).commit_message_lines() == []


def test_from_repository_normalises_name(tmp_path: Path) -> None:
    def runner(cmd: Sequence[str], root: Path) -> ProcessResult:
        del root
        if "symbolic-ref" in cmd:
            return ProcessResult(returncode=0, stdout="main\n")
        if "--name-status" in cmd:
            return ProcessResult(returncode=0, stdout="A\tnew.py\n")
        return ProcessResult(returncode=0, stdout="+++ b/new.py\n@@ -0,0 +1,3 @@\n")

    context = HookContext.from_repository("pre-commit", GitRepository(tmp_path, runner=runner))

    assert context.name == "PreCommit"
    assert context.branch == "main"
    assert context.staged_files == (StagedFile(path="new.py", modified_lines=frozenset({1, 2, 3})),)
