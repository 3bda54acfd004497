# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic extraction and line attribution."""

from __future__ import annotations

from .attribution import Attribution, StagedFileIndex, attribute, classify
from .extract import DEFAULT_MESSAGE_PATTERN, extract_diagnostics

__all__ = [
    "Attribution",
    "DEFAULT_MESSAGE_PATTERN",
    "StagedFileIndex",
    "attribute",
    "classify",
    "extract_diagnostics",
]
