# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for scoped and isolated environment handling."""

from __future__ import annotations

import os

import pytest

from hookwise.environment import isolated_environment, run_scoped, scoped_environment

_VARIABLE = "HOOKWISE_TEST_SCOPED_VARIABLE"


def test_scoped_variable_is_removed_after_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(_VARIABLE, raising=False)

    with pytest.raises(RuntimeError):
        with scoped_environment({_VARIABLE: "1"}):
            assert os.environ[_VARIABLE] == "1"
            raise RuntimeError("boom")

    assert _VARIABLE not in os.environ


def test_scoped_variable_restores_previous_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(_VARIABLE, "before")

    result = run_scoped({_VARIABLE: 2}, lambda: os.environ[_VARIABLE])

    assert result == "2"
    assert os.environ[_VARIABLE] == "before"


def test_scoped_environment_targets_given_mapping() -> None:
    environ = {"KEEP": "yes"}

    with scoped_environment({"ADDED": "1", "KEEP": "no"}, environ=environ):
        assert environ == {"KEEP": "no", "ADDED": "1"}

    assert environ == {"KEEP": "yes"}


def test_isolated_environment_leaves_base_untouched() -> None:
    base = {"PATH": "/usr/bin"}

    env = isolated_environment({"FLAKE8_OPTS": "--quiet"}, base=base)

    assert env == {"PATH": "/usr/bin", "FLAKE8_OPTS": "--quiet"}
    assert base == {"PATH": "/usr/bin"}


def test_invalid_variable_name_is_rejected() -> None:
    with pytest.raises(TypeError):
        isolated_environment({"": "value"}, base={})
