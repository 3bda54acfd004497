# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ``hookwise`` command line."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hookwise.cli import app
from hookwise.git import GitRepository, NotAGitRepositoryError
from hookwise.models import ProcessResult


def _empty_index(cmd: Sequence[str], root: Path) -> ProcessResult:
    del root
    if "symbolic-ref" in cmd:
        return ProcessResult(returncode=0, stdout="main\n")
    return ProcessResult(returncode=0)


@pytest.fixture
def repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for name in ("SKIP", "SKIP_CHECKS", "SKIP_HOOKS"):
        monkeypatch.delenv(name, raising=False)

    def discover(cls: type[GitRepository], start: Path, *, runner: object = None) -> GitRepository:
        del start, runner
        return cls(tmp_path, runner=_empty_index)

    monkeypatch.setattr(GitRepository, "discover", classmethod(discover))
    return tmp_path


def test_not_a_repository_exits_69(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def discover(cls: type[GitRepository], start: Path, *, runner: object = None) -> GitRepository:
        raise NotAGitRepositoryError(f"{start} is not inside a git repository")

    monkeypatch.setattr(GitRepository, "discover", classmethod(discover))

    result = CliRunner().invoke(app, ["run", "pre-commit", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 69
    assert "not inside a git repository" in result.output


def test_unknown_context_exits_64(repository: Path) -> None:
    result = CliRunner().invoke(app, ["run", "post-rewrite", "--root", str(repository), "--no-emoji"])

    assert result.exit_code == 64
    assert "Unknown hook context" in result.output


def test_invalid_configuration_exits_64(repository: Path) -> None:
    (repository / ".hookwise.toml").write_text("[PreCommit.PythonFlake8]\nenabled = 'sometimes'\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["run", "pre-commit", "--root", str(repository), "--no-emoji"])

    assert result.exit_code == 64
    assert "Invalid configuration" in result.output


def test_pre_commit_without_changes_succeeds(repository: Path) -> None:
    result = CliRunner().invoke(app, ["run", "pre-commit", "--root", str(repository), "--no-emoji", "--jobs", "1"])

    assert result.exit_code == 0
    assert "All PreCommit hooks passed" in result.output


def test_commit_msg_long_subject_warns_without_failing(repository: Path) -> None:
    message = repository / "COMMIT_EDITMSG"
    message.write_text("A" * 51 + "\n", encoding="utf-8")

    result = CliRunner().invoke(
        app,
        ["run", "commit-msg", "--root", str(repository), "--commit-msg-file", str(message), "--no-emoji"],
    )

    assert result.exit_code == 0
    assert "Checking text width... WARNING" in result.output
    assert "subject" in result.output


def test_commit_msg_failure_exits_1(repository: Path) -> None:
    plugin = repository / ".githooks" / "commit_msg" / "require_ticket.py"
    plugin.parent.mkdir(parents=True)
    plugin.write_text(
        "from hookwise.hooks.base import Hook\n\n\n"
        "class RequireTicket(Hook):\n"
        "    def run(self):\n"
        "        return 'fail', 'missing ticket reference'\n",
        encoding="utf-8",
    )
    (repository / ".hookwise.toml").write_text("[CommitMsg.RequireTicket]\n", encoding="utf-8")
    message = repository / "COMMIT_EDITMSG"
    message.write_text("Short subject\n", encoding="utf-8")

    result = CliRunner().invoke(
        app,
        ["run", "commit-msg", "--root", str(repository), "--commit-msg-file", str(message), "--no-emoji"],
    )

    assert result.exit_code == 1
    assert "missing ticket reference" in result.output


def test_list_hooks(repository: Path) -> None:
    result = CliRunner().invoke(app, ["list-hooks", "--root", str(repository)])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "PreCommit:" in lines
    assert "  PythonFlake8: enabled" in lines
    assert "  TrailingWhitespace: disabled" in lines
    assert "CommitMsg:" in lines
