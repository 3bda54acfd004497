# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for extracting diagnostics from tool output."""

from __future__ import annotations

import pytest

from hookwise.diagnostics import extract_diagnostics
from hookwise.diagnostics.extract import compile_message_pattern


def test_flake8_style_output() -> None:
    output = "app.py:3:1: E302 expected 2 blank lines\n./pkg/mod.py:10:80: E501 line too long\n"

    diagnostics = extract_diagnostics(output)

    assert [(item.file, item.line) for item in diagnostics] == [("app.py", 3), ("./pkg/mod.py", 10)]
    assert diagnostics[0].message == "app.py:3:1: E302 expected 2 blank lines"


def test_non_matching_lines_are_ignored() -> None:
    output = ["1 error found", "", "src/x.py:7: warning: unused"]

    diagnostics = extract_diagnostics(output)

    assert len(diagnostics) == 1
    assert diagnostics[0].line == 7


def test_windows_drive_letters_are_kept() -> None:
    diagnostics = extract_diagnostics(r"C:\repo\app.py:12:4: W291 trailing whitespace")

    assert diagnostics[0].file == r"C:\repo\app.py"
    assert diagnostics[0].line == 12


def test_custom_pattern() -> None:
    output = "line 4 of lib/a.rb: bad style"

    diagnostics = extract_diagnostics(output, r"^line (?P<line>\d+) of (?P<file>[^:]+):")

    assert diagnostics[0].file == "lib/a.rb"
    assert diagnostics[0].line == 4


def test_pattern_without_required_groups_is_rejected() -> None:
    with pytest.raises(ValueError, match="line"):
        compile_message_pattern(r"^(?P<file>[^:]+):")


def test_location_without_message_text_is_not_a_diagnostic() -> None:
    output = ["2024-01-01 12:30:45 flake8 crashed", "listening on localhost:8080", "app.py:12"]

    assert extract_diagnostics(output) == []
