# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git hook orchestration that only blocks on problems a change introduced."""

from __future__ import annotations

from importlib import metadata

from .config import ConfigError, Configuration, load_config, smart_merge
from .context import HookContext
from .hooks import Hook, HookNotFoundError, HookRegistry
from .models import Diagnostic, HookResult, HookStatus, StagedFile
from .results import ExitCode, RunSummary, combine
from .runner import HookRunner

try:
    __version__ = metadata.version("hookwise")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "ConfigError",
    "Configuration",
    "Diagnostic",
    "ExitCode",
    "Hook",
    "HookContext",
    "HookNotFoundError",
    "HookRegistry",
    "HookResult",
    "HookRunner",
    "HookStatus",
    "RunSummary",
    "StagedFile",
    "__version__",
    "combine",
    "load_config",
    "smart_merge",
]
