# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from hookwise.config import Configuration
from hookwise.config.defaults import default_configuration_data
from hookwise.context import HookContext
from hookwise.models import StagedFile

ContextFactory = Callable[..., HookContext]


@pytest.fixture
def default_config() -> Configuration:
    """Return a configuration holding only the built-in defaults."""

    return Configuration(default_configuration_data())


@pytest.fixture
def make_context(tmp_path: Path) -> ContextFactory:
    """Return a factory building hook contexts rooted at ``tmp_path``."""

    def _make(
        name: str = "PreCommit",
        *,
        staged: Iterable[StagedFile] = (),
        branch: str | None = "main",
        commit_message: str | None = None,
    ) -> HookContext:
        return HookContext(
            name=name,
            root=tmp_path,
            staged_files=tuple(staged),
            branch=branch,
            commit_message=commit_message,
        )

    return _make
