# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for running the hooks of a context."""

from __future__ import annotations

import threading
from collections.abc import Callable

import pytest

from hookwise.config import Configuration
from hookwise.context import HookContext
from hookwise.hooks import Hook, HookRegistry, SkipReason
from hookwise.models import HookReturn, HookStatus
from hookwise.runner import HookRunner, default_parallel_jobs

ContextFactory = Callable[..., HookContext]


class Passing(Hook):
    def run(self) -> HookReturn:
        return "pass"


class Cautious(Hook):
    def run(self) -> HookReturn:
        return "warn", "heads up"


class Failing(Hook):
    def run(self) -> HookReturn:
        return "bad", "broken"


class Exploding(Hook):
    def run(self) -> HookReturn:
        raise RuntimeError("kaboom")


class Rendezvous(Hook):
    barrier = threading.Barrier(2, timeout=5)

    def run(self) -> HookReturn:
        self.barrier.wait()
        return "good"


_BUILTINS = {
    "PreCommit": {
        hook.__name__: hook for hook in (Passing, Cautious, Failing, Exploding, Rendezvous)
    },
}


def _runner(config: Configuration, context: HookContext, **kwargs: object) -> HookRunner:
    registry = HookRegistry(builtins=_BUILTINS)
    options = {"jobs": 2, "use_emoji": False, "use_color": False, "environ": {}}
    options.update(kwargs)
    return HookRunner(config=config, context=context, registry=registry, **options)  # type: ignore[arg-type]


def test_results_are_reported_in_declaration_order(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"Cautious": {}, "Passing": {}, "Failing": {}}})

    summary = _runner(config, make_context()).run()

    assert [outcome.name for outcome in summary.outcomes] == ["Cautious", "Passing", "Failing"]
    assert [outcome.result.status for outcome in summary.outcomes if outcome.result] == [
        HookStatus.WARN,
        HookStatus.PASS,
        HookStatus.FAIL,
    ]
    assert summary.exit_code == 1


def test_warnings_do_not_fail_the_run(make_context: ContextFactory, capsys: pytest.CaptureFixture[str]) -> None:
    config = Configuration({"PreCommit": {"Cautious": {"description": "Checking things"}, "Passing": {}}})

    summary = _runner(config, make_context()).run()

    assert summary.exit_code == 0
    output = capsys.readouterr().out
    assert "Checking things... WARNING" in output
    assert "heads up" in output
    assert "Running Passing... OK" in output


def test_hook_exception_becomes_failure(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"Exploding": {}, "Passing": {}}})

    summary = _runner(config, make_context()).run()

    exploding, passing = summary.outcomes
    assert exploding.result is not None
    assert exploding.result.status is HookStatus.FAIL
    assert "RuntimeError: kaboom" in exploding.result.message
    assert passing.result is not None and passing.result.status is HookStatus.PASS
    assert summary.exit_code == 1


def test_disabled_and_gated_hooks_are_not_run(make_context: ContextFactory) -> None:
    config = Configuration(
        {
            "PreCommit": {
                "ALL": {"requires_files": True},
                "Failing": {},
                "Exploding": {"enabled": False},
            },
        },
    )

    summary = _runner(config, make_context()).run()

    assert [outcome.name for outcome in summary.outcomes] == ["Failing"]
    assert summary.outcomes[0].skip_reason is SkipReason.NO_FILES
    assert summary.exit_code == 0


def test_skip_environment_variable(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"Failing": {}, "Passing": {}}})

    summary = _runner(config, make_context(), environ={"SKIP": "failing"}).run()

    assert summary.skipped_by_environment == ("Failing",)
    assert summary.outcomes[0].skip_reason is SkipReason.DISABLED
    assert summary.exit_code == 0


def test_skip_all(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"Failing": {}, "Exploding": {}}})

    summary = _runner(config, make_context(), environ={"SKIP_CHECKS": "ALL"}).run()

    assert all(outcome.skipped for outcome in summary.outcomes)
    assert summary.exit_code == 0


def test_unknown_hook_fails(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"Ghost": {}}})

    summary = _runner(config, make_context()).run()

    assert summary.outcomes[0].result is not None
    assert "Ghost" in summary.outcomes[0].result.message
    assert summary.exit_code == 1


def test_hooks_run_concurrently(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"Rendezvous": {}, "Second": {}}})
    builtins = {"PreCommit": {"Rendezvous": Rendezvous, "Second": Rendezvous}}
    Rendezvous.barrier.reset()

    runner = HookRunner(
        config=config,
        context=make_context(),
        registry=HookRegistry(builtins=builtins),
        jobs=2,
        use_emoji=False,
        use_color=False,
        environ={},
    )
    summary = runner.run()

    assert summary.exit_code == 0
    assert summary.count(HookStatus.PASS) == 2


def test_default_parallel_jobs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("hookwise.runner.os.cpu_count", lambda: 8)
    assert default_parallel_jobs() == 6

    monkeypatch.setattr("hookwise.runner.os.cpu_count", lambda: None)
    assert default_parallel_jobs() == 1


def test_differently_spelled_hook_runs_once_with_its_options(make_context: ContextFactory) -> None:
    config = Configuration({"PreCommit": {"Passing": {}}}).merge(
        {"PreCommit": {"PASSING": {"description": "Custom check"}, "pass_ing": {"flags": ["-q"]}}},
    )

    summary = _runner(config, make_context()).run()

    assert [outcome.name for outcome in summary.outcomes] == ["Passing"]
    assert summary.outcomes[0].description == "Custom check"
