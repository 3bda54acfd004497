# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in hooks for the ``commit-msg`` context."""

from __future__ import annotations

from .single_line_subject import SingleLineSubject
from .text_width import TextWidth

__all__ = ["SingleLineSubject", "TextWidth"]
