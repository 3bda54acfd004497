# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn free-text tool output into located diagnostics."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

from ..models import Diagnostic

# example: path/to/file.py:12:4: E501 line too long
DEFAULT_MESSAGE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<file>(?:[A-Za-z]:)?[^:\n]+):(?P<line>\d+)(?::(?P<column>\d+))?:\s",
)

_REQUIRED_GROUPS: Final[frozenset[str]] = frozenset({"file", "line"})


def _ensure_lines(output: str | Sequence[str]) -> list[str]:
    if isinstance(output, str):
        return output.splitlines()
    return [str(item) for item in output]


def compile_message_pattern(pattern: str | re.Pattern[str] | None) -> re.Pattern[str]:
    """Return a compiled pattern exposing ``file`` and ``line`` groups.

    Args:
        pattern: Regular expression (string or compiled) or ``None`` for the default.

    Returns:
        re.Pattern[str]: Compiled pattern.

    Raises:
        ValueError: If the pattern lacks a ``file`` or ``line`` named group.
    """

    if pattern is None:
        return DEFAULT_MESSAGE_PATTERN
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    missing = _REQUIRED_GROUPS - set(compiled.groupindex)
    if missing:
        raise ValueError(f"message pattern must define named groups: {', '.join(sorted(missing))}")
    return compiled


def extract_diagnostics(
    output: str | Sequence[str],
    pattern: str | re.Pattern[str] | None = None,
) -> list[Diagnostic]:
    """Return one :class:`Diagnostic` per output line matching ``pattern``.

    Lines that do not match (headers, summaries, blank lines) are discarded.
    The whole line, without trailing whitespace, becomes the message.

    Args:
        output: Raw tool output or a sequence of lines.
        pattern: Line pattern anchored at the start of the line with ``file``
            and ``line`` named groups.

    Returns:
        list[Diagnostic]: Diagnostics in output order.
    """

    compiled = compile_message_pattern(pattern)
    diagnostics: list[Diagnostic] = []
    for raw_line in _ensure_lines(output):
        line = raw_line.rstrip()
        match = compiled.match(line)
        if match is None:
            continue
        file_name = match.group("file").strip()
        line_number = int(match.group("line"))
        if not file_name or line_number < 1:
            continue
        diagnostics.append(Diagnostic(file=file_name, line=line_number, message=line))
    return diagnostics


__all__ = ["DEFAULT_MESSAGE_PATTERN", "compile_message_pattern", "extract_diagnostics"]
