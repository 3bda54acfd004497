# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Enforce maximum widths for the commit message subject and body."""

from __future__ import annotations

from typing import Final

from ...models import HookResult
from ..base import Hook

SUBJECT_LENGTH_KEY: Final[str] = "subject_length"
BODY_LENGTH_KEY: Final[str] = "commit_message_length"
DEFAULT_SUBJECT_LENGTH: Final[int] = 50
DEFAULT_BODY_LENGTH: Final[int] = 72


class TextWidth(Hook):
    """Warn when the subject or body lines of a commit message run too long."""

    context_name = "CommitMsg"

    def _limit(self, key: str, default: int) -> int:
        value = self.config.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return default

    def run(self) -> HookResult:
        lines = self.context.commit_message_lines()
        if not lines:
            return HookResult.passed()

        max_subject = self._limit(SUBJECT_LENGTH_KEY, DEFAULT_SUBJECT_LENGTH)
        max_body = self._limit(BODY_LENGTH_KEY, DEFAULT_BODY_LENGTH)
        problems: list[str] = []

        subject = lines[0].rstrip()
        if len(subject) > max_subject:
            problems.append(f"Commit message subject should be <= {max_subject} characters")

        for number, line in enumerate(lines[2:], start=3):
            if len(line.rstrip()) > max_body:
                problems.append(f"Line {number} of commit message has > {max_body} characters")

        if problems:
            return HookResult.warning("\n".join(problems))
        return HookResult.passed()


__all__ = ["TextWidth"]
