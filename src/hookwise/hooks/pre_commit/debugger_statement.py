# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect debugger calls left in staged Python files."""

from __future__ import annotations

import re
from typing import Final

from ...models import HookReturn
from ..base import Hook

DEBUGGER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?:import\s+i?pdb\b|from\s+i?pdb\s+import\b|breakpoint\(\)|i?pdb\.set_trace\(\))",
)


class DebuggerStatement(Hook):
    """Fail when a staged file still calls into a debugger."""

    context_name = "PreCommit"

    def run(self) -> HookReturn:
        offenders: list[str] = []
        for path in self.applicable_files():
            source = self.context.root / path
            if not source.is_file():
                continue
            text = source.read_text(encoding="utf-8", errors="replace")
            for number, line in enumerate(text.splitlines(), start=1):
                if DEBUGGER_PATTERN.search(line):
                    offenders.append(f"{path}:{number}: {line.strip()}")
        if offenders:
            return "bad", "Found debugger statements left in:\n" + "\n".join(offenders)
        return "good"


__all__ = ["DEBUGGER_PATTERN", "DebuggerStatement"]
