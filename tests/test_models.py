# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the shared data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hookwise.models import HookResult, HookStatus, ProcessResult, StagedFile


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("pass", HookStatus.PASS),
        ("good", HookStatus.PASS),
        ("fail", HookStatus.FAIL),
        ("BAD", HookStatus.FAIL),
        ("warn", HookStatus.WARN),
        (HookStatus.WARN, HookStatus.WARN),
    ],
)
def test_coerce_bare_status(raw: object, expected: HookStatus) -> None:
    result = HookResult.coerce(raw)

    assert result.status is expected
    assert result.message == ""


def test_coerce_status_and_message_pair() -> None:
    result = HookResult.coerce(("bad", "Found a debugger"))

    assert result.status is HookStatus.FAIL
    assert result.message == "Found a debugger"


def test_coerce_returns_existing_result() -> None:
    original = HookResult.warning("careful")

    assert HookResult.coerce(original) is original


def test_coerce_rejects_unknown_values() -> None:
    with pytest.raises(ValueError):
        HookResult.coerce("maybe")
    with pytest.raises(TypeError):
        HookResult.coerce(42)
    with pytest.raises(TypeError):
        HookResult.coerce((1, "message"))


def test_only_fail_is_blocking() -> None:
    assert [status.blocking for status in HookStatus] == [False, True, False]


def test_staged_file_defaults_original_path() -> None:
    staged = StagedFile(path="new.py")
    renamed = StagedFile(path="new.py", original_path="old.py", modified_lines=frozenset({1, 2}))

    assert staged.original_path == "new.py"
    assert renamed.original_path == "old.py"


def test_staged_file_rejects_zero_line() -> None:
    with pytest.raises(ValidationError):
        StagedFile(path="a.py", modified_lines=frozenset({0}))


def test_process_result_success() -> None:
    assert ProcessResult(args=("true",), returncode=0).success
    assert not ProcessResult(args=("false",), returncode=1).success
