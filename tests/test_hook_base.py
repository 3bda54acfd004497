# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the behaviour shared by every hook."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

import pytest

from hookwise.config import Configuration
from hookwise.context import HookContext
from hookwise.hooks.base import Hook, path_matches
from hookwise.models import HookReturn, HookStatus, StagedFile

ContextFactory = Callable[..., HookContext]

_VARIABLE = "HOOKWISE_BASE_TEST_VARIABLE"


class EnvEcho(Hook):
    def run(self) -> HookReturn:
        return "warn", os.environ.get(_VARIABLE, "<unset>")


class ChildEnvEcho(Hook):
    def run(self) -> HookReturn:
        result = self.execute([sys.executable, "-c", f"import os; print(os.environ['{_VARIABLE}'])"])
        return "pass" if result.stdout.strip() == "child" else ("fail", result.stdout + result.stderr)


def test_run_and_transform_applies_env_temporarily(
    make_context: ContextFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv(_VARIABLE, raising=False)
    config = Configuration({"PreCommit": {"EnvEcho": {"env": {_VARIABLE: "scoped"}}}})

    result = EnvEcho(config, make_context()).run_and_transform()

    assert result.status is HookStatus.WARN
    assert result.message == "scoped"
    assert _VARIABLE not in os.environ


def test_execute_passes_env_to_subprocess_only(
    make_context: ContextFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv(_VARIABLE, raising=False)
    config = Configuration({"PreCommit": {"ChildEnvEcho": {"env": {_VARIABLE: "child"}}}})
    hook = ChildEnvEcho(config, make_context())

    assert hook.run() == "pass"
    assert _VARIABLE not in os.environ


def test_applicable_files_respect_include_and_exclude(make_context: ContextFactory) -> None:
    config = Configuration(
        {
            "PreCommit": {
                "ALL": {"exclude": ["vendor/*"]},
                "EnvEcho": {"include": ["**/*.py"], "exclude": ["*_pb2.py"]},
            },
        },
    )
    staged = [
        StagedFile(path="setup.py"),
        StagedFile(path="src/app.py"),
        StagedFile(path="src/api_pb2.py"),
        StagedFile(path="vendor/lib.py"),
        StagedFile(path="README.md"),
    ]

    hook = EnvEcho(config, make_context(staged=staged))

    assert hook.applicable_files() == ["setup.py", "src/app.py"]


def test_command_and_description(make_context: ContextFactory) -> None:
    config = Configuration(
        {"PreCommit": {"EnvEcho": {"command": "python -m flake8", "flags": ["--count"], "description": "Echoing"}}},
    )
    hook = EnvEcho(config, make_context())

    assert hook.command == ["python", "-m", "flake8", "--count"]
    assert hook.tool_name == "python"
    assert hook.description == "Echoing"
    assert EnvEcho(Configuration({}), make_context()).description == "Running EnvEcho"


def test_gate_uses_merged_options(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"ALL": {"requires_files": True}, "EnvEcho": {}}})

    assert EnvEcho(config, make_context()).should_run() is False
    assert EnvEcho(config, make_context(staged=[StagedFile(path="a.py")])).should_run() is True


def test_path_matches_recursive_prefix() -> None:
    assert path_matches("app.py", "**/*.py")
    assert path_matches("src/app.py", "**/*.py")
    assert not path_matches("app.txt", "**/*.py")
