# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Require a blank line between the commit subject and body."""

from __future__ import annotations

from ...models import HookResult
from ..base import Hook


class SingleLineSubject(Hook):
    context_name = "CommitMsg"

    def run(self) -> HookResult:
        lines = self.context.commit_message_lines()
        if len(lines) > 1 and lines[1].strip():
            return HookResult.warning("Subject should be one line and followed by a blank line")
        return HookResult.passed()


__all__ = ["SingleLineSubject"]
