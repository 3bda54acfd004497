# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report trailing whitespace, blocking only on lines the change touched."""

from __future__ import annotations

from ...diagnostics import classify
from ...models import Diagnostic, HookResult
from ..base import Hook


class TrailingWhitespace(Hook):
    """Scan staged files for lines ending in spaces or tabs."""

    context_name = "PreCommit"

    def run(self) -> HookResult:
        diagnostics: list[Diagnostic] = []
        for path in self.applicable_files():
            source = self.context.root / path
            if not source.is_file():
                continue
            text = source.read_text(encoding="utf-8", errors="replace")
            for number, line in enumerate(text.splitlines(), start=1):
                if line != line.rstrip(" \t"):
                    diagnostics.append(
                        Diagnostic(file=path, line=number, message=f"{path}:{number}: trailing whitespace"),
                    )
        return classify(diagnostics, self.context.staged_files)


__all__ = ["TrailingWhitespace"]
