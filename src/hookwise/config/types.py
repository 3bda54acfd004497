# SPDX-License-Identifier: MIT
"""Shared typing utilities and reserved keys for configuration payloads."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Final, TypeAlias

ConfigPrimitive: TypeAlias = str | int | float | bool | None
ConfigValue: TypeAlias = ConfigPrimitive | list["ConfigValue"] | dict[str, "ConfigValue"]
ConfigFragment: TypeAlias = Mapping[str, ConfigValue]
MutableConfigFragment: TypeAlias = MutableMapping[str, ConfigValue]

ALL_HOOKS_KEY: Final[str] = "ALL"
PLUGIN_DIRECTORY_KEY: Final[str] = "plugin_directory"
VERIFY_PLUGIN_SIGNATURES_KEY: Final[str] = "verify_plugin_signatures"
NON_CONTEXT_KEYS: Final[frozenset[str]] = frozenset({PLUGIN_DIRECTORY_KEY, VERIFY_PLUGIN_SIGNATURES_KEY})
DEFAULT_PLUGIN_DIRECTORY: Final[str] = ".githooks"

SKIP_ENV_VARS: Final[tuple[str, ...]] = ("SKIP", "SKIP_CHECKS", "SKIP_HOOKS")
SKIP_ALL_TOKENS: Final[frozenset[str]] = frozenset({"all", "ALL"})

ENABLED_KEY: Final[str] = "enabled"
SKIP_KEY: Final[str] = "skip"
REQUIRES_FILES_KEY: Final[str] = "requires_files"
OPTIONAL_EXECUTABLE_KEY: Final[str] = "optional_executable"
EXCLUDE_BRANCHES_KEY: Final[str] = "exclude_branches"
ENV_KEY: Final[str] = "env"

__all__ = [
    "ALL_HOOKS_KEY",
    "ConfigFragment",
    "ConfigPrimitive",
    "ConfigValue",
    "DEFAULT_PLUGIN_DIRECTORY",
    "ENABLED_KEY",
    "ENV_KEY",
    "EXCLUDE_BRANCHES_KEY",
    "MutableConfigFragment",
    "NON_CONTEXT_KEYS",
    "OPTIONAL_EXECUTABLE_KEY",
    "PLUGIN_DIRECTORY_KEY",
    "REQUIRES_FILES_KEY",
    "SKIP_ALL_TOKENS",
    "SKIP_ENV_VARS",
    "SKIP_KEY",
    "VERIFY_PLUGIN_SIGNATURES_KEY",
]
