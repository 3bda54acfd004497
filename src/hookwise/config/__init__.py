# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration for hook contexts."""

from __future__ import annotations

from .loader import ConfigLoader, load_config
from .merge import smart_merge
from .schema import ConfigError, HookOptions
from .store import Configuration, HookLookup, skipped_hook_tokens

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "Configuration",
    "HookLookup",
    "HookOptions",
    "load_config",
    "skipped_hook_tokens",
    "smart_merge",
]
