# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide whether a hook should run for the current change."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from ..config.types import (
    ENABLED_KEY,
    EXCLUDE_BRANCHES_KEY,
    OPTIONAL_EXECUTABLE_KEY,
    REQUIRES_FILES_KEY,
    SKIP_KEY,
)
from ..context import HookContext
from ..process import in_path

ExecutableCheck = Callable[[str], bool]


class SkipReason(str, Enum):
    """Why the gate kept a hook from running."""

    DISABLED = "disabled"
    NO_FILES = "no files to check"
    MISSING_EXECUTABLE = "executable not found"
    EXCLUDED_BRANCH = "branch excluded"


@dataclass(frozen=True, slots=True)
class GateDecision:
    """Outcome of :func:`evaluate`."""

    run: bool
    reason: SkipReason | None = None
    detail: str = ""

    def __bool__(self) -> bool:
        return self.run


_RUN = GateDecision(run=True)


@lru_cache(maxsize=256)
def branch_pattern(pattern: str) -> re.Pattern[str]:
    """Return an anchored regex for a branch glob where ``*`` matches anything."""

    return re.compile("^" + ".*".join(re.escape(part) for part in pattern.split("*")) + "$")


def branch_excluded(branch: str | None, patterns: Sequence[str]) -> bool:
    """Return ``True`` when ``branch`` matches any of ``patterns``."""

    if not branch:
        return False
    return any(branch_pattern(str(pattern)).match(branch) for pattern in patterns)


def _as_sequence(value: object) -> Sequence[str]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence):
        return tuple(str(item) for item in value)
    return ()


def evaluate(
    hook_config: Mapping[str, object],
    context: HookContext,
    *,
    executable_check: ExecutableCheck | None = None,
) -> GateDecision:
    """Evaluate the run conditions for a hook, in order.

    1. ``enabled`` is ``False`` or the hook is marked ``skip``.
    2. ``requires_files`` is set and the change touches no files.
    3. ``optional_executable`` cannot be resolved.
    4. The current branch matches one of ``exclude_branches``.

    The first condition that holds stops evaluation. Missing options never
    disqualify a hook.

    Args:
        hook_config: Merged, read-only options for the hook.
        context: Snapshot of the change being checked.
        executable_check: Callable reporting whether an executable is available;
            defaults to a PATH lookup.

    Returns:
        GateDecision: Whether to run and, if not, why.
    """

    if hook_config.get(ENABLED_KEY) is False:
        return GateDecision(run=False, reason=SkipReason.DISABLED)
    if hook_config.get(SKIP_KEY) is True:
        return GateDecision(run=False, reason=SkipReason.DISABLED, detail="skipped via environment")

    if hook_config.get(REQUIRES_FILES_KEY) is True and not context.modified_files:
        return GateDecision(run=False, reason=SkipReason.NO_FILES)

    check = executable_check or in_path
    executable = hook_config.get(OPTIONAL_EXECUTABLE_KEY)
    if isinstance(executable, str) and executable and not check(executable):
        return GateDecision(run=False, reason=SkipReason.MISSING_EXECUTABLE, detail=executable)

    excluded = _as_sequence(hook_config.get(EXCLUDE_BRANCHES_KEY))
    if excluded and branch_excluded(context.branch, excluded):
        return GateDecision(run=False, reason=SkipReason.EXCLUDED_BRANCH, detail=context.branch or "")

    return _RUN


def should_run(
    hook_config: Mapping[str, object],
    context: HookContext,
    *,
    executable_check: ExecutableCheck | None = None,
) -> bool:
    """Return ``True`` when the hook passes every gate condition."""

    return evaluate(hook_config, context, executable_check=executable_check).run


__all__ = [
    "GateDecision",
    "SkipReason",
    "branch_excluded",
    "branch_pattern",
    "evaluate",
    "should_run",
]
