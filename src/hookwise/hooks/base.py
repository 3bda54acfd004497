# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Base class shared by built-in and plugin hooks."""

from __future__ import annotations

import re
import shlex
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from fnmatch import fnmatch
from pathlib import PurePath
from typing import ClassVar, Final

from ..config.store import Configuration
from ..config.types import ENV_KEY
from ..context import HookContext
from ..diagnostics.attribution import classify
from ..diagnostics.extract import extract_diagnostics
from ..environment import isolated_environment, scoped_environment
from ..models import HookResult, HookReturn, ProcessResult
from ..process import CommandOptions, run_command
from .gate import GateDecision, evaluate

COMMAND_KEY: Final[str] = "command"
FLAGS_KEY: Final[str] = "flags"
INCLUDE_KEY: Final[str] = "include"
EXCLUDE_KEY: Final[str] = "exclude"
DESCRIPTION_KEY: Final[str] = "description"
_RECURSIVE_PREFIX: Final[str] = "**/"


def _string_list(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value]
    return []


def path_matches(path: str, pattern: str) -> bool:
    """Return ``True`` when ``path`` matches the glob ``pattern``.

    ``*`` also matches ``/`` (as with :func:`fnmatch.fnmatch`) and a leading
    ``**/`` matches files at the repository root as well.
    """

    if fnmatch(path, pattern):
        return True
    return pattern.startswith(_RECURSIVE_PREFIX) and fnmatch(path, pattern[len(_RECURSIVE_PREFIX) :])


class Hook(ABC):
    """A single check run for one hook context.

    Subclasses implement :meth:`run` and return anything accepted by
    :meth:`HookResult.coerce`: a status tag (``pass``, ``fail``, ``warn``,
    ``good``, ``bad``), a ``(tag, message)`` pair or a :class:`HookResult`.
    """

    context_name: ClassVar[str] = ""

    def __init__(self, config: Configuration, context: HookContext, *, name: str | None = None) -> None:
        self._configuration = config
        self.context = context
        self._name = name or type(self).__name__

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> Mapping[str, object]:
        """Return the read-only options for this hook."""

        return self._configuration.for_hook(self.context.name, self.name)

    @property
    def description(self) -> str:
        description = self.config.get(DESCRIPTION_KEY)
        return str(description) if description else f"Running {self.name}"

    @property
    def env_overrides(self) -> dict[str, str]:
        raw = self.config.get(ENV_KEY)
        if not isinstance(raw, Mapping):
            return {}
        return {str(key): str(value) for key, value in raw.items()}

    def gate(self) -> GateDecision:
        """Return the gate decision for this hook."""

        return evaluate(self.config, self.context)

    def should_run(self) -> bool:
        return self.gate().run

    @abstractmethod
    def run(self) -> HookReturn:
        """Perform the check and return its verdict."""

    def run_and_transform(self) -> HookResult:
        """Run the hook with its ``env`` overrides applied and normalise the result."""

        with scoped_environment(self.env_overrides):
            return HookResult.coerce(self.run())

    @property
    def command(self) -> list[str]:
        """Return the configured command followed by its flags."""

        raw_command = self.config.get(COMMAND_KEY)
        command = shlex.split(raw_command) if isinstance(raw_command, str) else _string_list(raw_command)
        return [*command, *_string_list(self.config.get(FLAGS_KEY))]

    @property
    def tool_name(self) -> str:
        """Return the executable name used in messages, falling back to the hook name."""

        command = self.command
        return PurePath(command[0]).name if command else self.name

    def applicable_files(self) -> list[str]:
        """Return modified files selected by the ``include`` and ``exclude`` globs."""

        includes = _string_list(self.config.get(INCLUDE_KEY))
        excludes = _string_list(self.config.get(EXCLUDE_KEY))
        selected: list[str] = []
        for path in self.context.modified_files:
            if includes and not any(path_matches(path, pattern) for pattern in includes):
                continue
            if any(path_matches(path, pattern) for pattern in excludes):
                continue
            selected.append(path)
        return selected

    def execute(self, args: Sequence[str]) -> ProcessResult:
        """Run ``args`` from the repository root with this hook's environment."""

        options = CommandOptions(cwd=self.context.root, env=isolated_environment(self.env_overrides))
        return run_command(args, options=options)

    def extract_messages(
        self,
        output: str | Sequence[str],
        pattern: str | re.Pattern[str] | None = None,
    ) -> HookResult:
        """Classify tool output by the lines the change modified.

        Output that yields no diagnostic at all is reported as unexpected, so
        a broken tool never passes silently.

        Args:
            output: Tool output to parse.
            pattern: Optional line pattern with ``file`` and ``line`` groups.

        Returns:
            HookResult: Verdict from line attribution.
        """

        diagnostics = extract_diagnostics(output, pattern)
        text = output if isinstance(output, str) else "\n".join(output)
        if not diagnostics and text.strip():
            return HookResult.warning(f"Unexpected output from {self.tool_name}:\n{text.rstrip()}")
        return classify(diagnostics, self.context.staged_files)


__all__ = ["Hook", "path_matches"]
