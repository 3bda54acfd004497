# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Execute the hooks of one context and report their results."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from .config.store import Configuration
from .console import detect_tty
from .context import HookContext
from .hooks.base import Hook
from .hooks.gate import SkipReason
from .hooks.registry import HookNotFoundError, HookRegistry
from .logging import fail, info, ok, plain, section, warn
from .models import HookResult, HookStatus
from .results import HookOutcome, RunSummary


def default_parallel_jobs() -> int:
    """Return 75% of available CPU cores (minimum of 1)."""

    cores = os.cpu_count() or 1
    return max(1, math.floor(cores * 0.75))


@dataclass(slots=True)
class _Scheduled:
    order: int
    hook: Hook


def _run_hook(hook: Hook) -> HookResult:
    """Run ``hook`` and turn any exception it raises into a failing result."""

    try:
        return hook.run_and_transform()
    except Exception as exc:  # noqa: BLE001
        return HookResult.failure(f"Hook {hook.name} raised {type(exc).__name__}: {exc}")


@dataclass(slots=True)
class HookRunner:
    """Run every enabled hook of ``context`` and collect a :class:`RunSummary`.

    Hooks run concurrently on a thread pool sized by ``jobs``. Results are
    reported in declaration order once every hook has finished.
    """

    config: Configuration
    context: HookContext
    registry: HookRegistry
    jobs: int = field(default_factory=default_parallel_jobs)
    use_emoji: bool = True
    use_color: bool | None = None
    environ: Mapping[str, str] | None = None

    def run(self) -> RunSummary:
        """Execute the context's hooks.

        Returns:
            RunSummary: Outcomes in declaration order with the combined exit code.
        """

        env = os.environ if self.environ is None else self.environ
        skipped = self.config.apply_environment_skips(self.context.name, env, self.registry)
        if skipped:
            info(f"Skipping via environment: {', '.join(skipped)}", use_emoji=self.use_emoji, use_color=self.use_color)

        section(f"Running {self.context.name} hooks", use_color=detect_tty() if self.use_color is None else self.use_color)
        outcomes: dict[int, HookOutcome] = {}
        scheduled: list[_Scheduled] = []
        hook_names = [
            name
            for name in self.config.enabled_hooks(self.context.name)
            if self.config.hook_enabled(self.context.name, name)
        ]
        for order, name in enumerate(hook_names):
            try:
                hook = self.registry.create(self.config, self.context, name)
            except HookNotFoundError as exc:
                outcomes[order] = HookOutcome(name=name, result=HookResult.failure(str(exc)))
                continue
            decision = hook.gate()
            if not decision.run:
                outcomes[order] = HookOutcome(
                    name=hook.name,
                    description=hook.description,
                    skip_reason=decision.reason,
                    skip_detail=decision.detail,
                )
                continue
            scheduled.append(_Scheduled(order=order, hook=hook))

        outcomes.update(self._execute(scheduled))
        ordered = tuple(outcomes[index] for index in sorted(outcomes))
        for outcome in ordered:
            self._report(outcome)

        summary = RunSummary(context=self.context.name, outcomes=ordered, skipped_by_environment=tuple(skipped))
        self._report_summary(summary)
        return summary

    def _execute(self, scheduled: list[_Scheduled]) -> dict[int, HookOutcome]:
        outcomes: dict[int, HookOutcome] = {}
        if not scheduled:
            return outcomes
        workers = max(1, min(self.jobs, len(scheduled)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            future_map = {executor.submit(_run_hook, item.hook): item for item in scheduled}
            for future in as_completed(future_map):
                item = future_map[future]
                outcomes[item.order] = HookOutcome(
                    name=item.hook.name,
                    description=item.hook.description,
                    result=future.result(),
                )
        return outcomes

    def _report(self, outcome: HookOutcome) -> None:
        label = outcome.description or outcome.name
        if outcome.result is None:
            if outcome.skip_reason is SkipReason.MISSING_EXECUTABLE:
                warn(
                    f"{label}... SKIPPED ({outcome.skip_detail} not found)",
                    use_emoji=self.use_emoji,
                    use_color=self.use_color,
                )
            return
        status = outcome.result.status
        if status is HookStatus.PASS:
            ok(f"{label}... OK", use_emoji=self.use_emoji, use_color=self.use_color)
        elif status is HookStatus.WARN:
            warn(f"{label}... WARNING", use_emoji=self.use_emoji, use_color=self.use_color)
        else:
            fail(f"{label}... FAILED", use_emoji=self.use_emoji, use_color=self.use_color)
        if outcome.result.message:
            plain(outcome.result.message, use_color=self.use_color)

    def _report_summary(self, summary: RunSummary) -> None:
        if summary.exit_code:
            fail(f"{self.context.name} hooks failed", use_emoji=self.use_emoji, use_color=self.use_color)
        elif summary.count(HookStatus.WARN):
            warn(f"{self.context.name} hooks passed with warnings", use_emoji=self.use_emoji, use_color=self.use_color)
        else:
            ok(f"All {self.context.name} hooks passed", use_emoji=self.use_emoji, use_color=self.use_color)


__all__ = ["HookRunner", "default_parallel_jobs"]
