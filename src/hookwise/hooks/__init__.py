# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook base class, gate and registry."""

from __future__ import annotations

from .base import Hook
from .gate import GateDecision, SkipReason, evaluate, should_run
from .registry import HookDescriptor, HookNotFoundError, HookRegistry, HookSource

__all__ = [
    "GateDecision",
    "Hook",
    "HookDescriptor",
    "HookNotFoundError",
    "HookRegistry",
    "HookSource",
    "SkipReason",
    "evaluate",
    "should_run",
]
