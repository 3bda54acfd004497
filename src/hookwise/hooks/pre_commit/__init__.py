# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in hooks for the ``pre-commit`` context."""

from __future__ import annotations

from .debugger_statement import DebuggerStatement
from .python_flake8 import PythonFlake8
from .trailing_whitespace import TrailingWhitespace

__all__ = ["DebuggerStatement", "PythonFlake8", "TrailingWhitespace"]
