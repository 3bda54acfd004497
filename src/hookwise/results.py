# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Roll hook verdicts up into a process exit code."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

from .hooks.gate import SkipReason
from .models import HookResult, HookStatus


class ExitCode(IntEnum):
    """Process exit codes, following the ``sysexits.h`` values where they apply."""

    OK = 0
    FAILURE = 1
    USAGE = 64
    UNAVAILABLE = 69
    CANT_CREATE = 73


def combine(results: Iterable[HookResult]) -> int:
    """Return the exit code for ``results``.

    Any failing result yields :attr:`ExitCode.FAILURE`; warnings never change
    the outcome and an empty run succeeds.
    """

    if any(result.status.blocking for result in results):
        return int(ExitCode.FAILURE)
    return int(ExitCode.OK)


class HookOutcome(BaseModel):
    """Result of one hook within a run, or the reason it was skipped."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    result: HookResult | None = None
    skip_reason: SkipReason | None = None
    skip_detail: str = ""

    @property
    def skipped(self) -> bool:
        return self.result is None


class RunSummary(BaseModel):
    """Everything a hook run produced, in declaration order."""

    model_config = ConfigDict(frozen=True)

    context: str
    outcomes: tuple[HookOutcome, ...] = Field(default_factory=tuple)
    skipped_by_environment: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def results(self) -> list[HookResult]:
        return [outcome.result for outcome in self.outcomes if outcome.result is not None]

    @property
    def exit_code(self) -> int:
        return combine(self.results)

    def count(self, status: HookStatus) -> int:
        """Return how many hooks finished with ``status``."""

        return sum(1 for result in self.results if result.status is status)


__all__ = ["ExitCode", "HookOutcome", "RunSummary", "combine"]
