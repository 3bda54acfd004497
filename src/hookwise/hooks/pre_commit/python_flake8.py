# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run flake8 against staged Python files."""

from __future__ import annotations

from ...models import HookResult
from ..base import Hook


class PythonFlake8(Hook):
    """Lint staged Python files with flake8.

    Problems on lines the change modified fail the hook; problems elsewhere in
    touched files only warn.
    """

    context_name = "PreCommit"

    def run(self) -> HookResult:
        files = self.applicable_files()
        if not files:
            return HookResult.passed()
        result = self.execute([*self.command, *files])
        if result.success:
            return HookResult.passed()
        output = "\n".join(part for part in (result.stdout, result.stderr) if part.strip())
        if not output.strip():
            return HookResult.warning(f"Unexpected output from {self.tool_name} (exit code {result.returncode})")
        return self.extract_messages(output)


__all__ = ["PythonFlake8"]
