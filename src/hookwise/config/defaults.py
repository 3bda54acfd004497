# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in configuration shipped with hookwise."""

from __future__ import annotations

import copy
from typing import Final

from .types import ConfigValue

_DEFAULT_CONFIGURATION: Final[dict[str, ConfigValue]] = {
    "plugin_directory": ".githooks",
    "verify_plugin_signatures": True,
    "PreCommit": {
        "ALL": {
            "requires_files": True,
            "exclude": [],
        },
        "PythonFlake8": {
            "description": "Analyzing with flake8",
            "command": ["flake8"],
            "include": ["*.py"],
            "optional_executable": "flake8",
        },
        "DebuggerStatement": {
            "description": "Checking for leftover debugger statements",
            "include": ["*.py"],
        },
        "TrailingWhitespace": {
            "enabled": False,
            "description": "Checking for trailing whitespace",
        },
    },
    "CommitMsg": {
        "ALL": {
            "requires_files": False,
        },
        "TextWidth": {
            "description": "Checking text width",
            "subject_length": 50,
            "commit_message_length": 72,
        },
        "SingleLineSubject": {
            "description": "Checking subject line",
        },
    },
}


def default_configuration_data() -> dict[str, ConfigValue]:
    """Return a fresh copy of the built-in configuration tree."""

    return copy.deepcopy(_DEFAULT_CONFIGURATION)


__all__ = ["default_configuration_data"]
