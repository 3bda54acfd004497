# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Table of the hooks shipped with hookwise, keyed by context then name."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .base import Hook
from .commit_msg import SingleLineSubject, TextWidth
from .pre_commit import DebuggerStatement, PythonFlake8, TrailingWhitespace


def _table(*hooks: type[Hook]) -> Mapping[str, type[Hook]]:
    return MappingProxyType({hook.__name__: hook for hook in hooks})


BUILTIN_HOOKS: Final[Mapping[str, Mapping[str, type[Hook]]]] = MappingProxyType(
    {
        "PreCommit": _table(PythonFlake8, DebuggerStatement, TrailingWhitespace),
        "CommitMsg": _table(TextWidth, SingleLineSubject),
    },
)

__all__ = ["BUILTIN_HOOKS"]
