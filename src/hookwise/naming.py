# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Conversions between the hook naming styles used in configuration and on disk."""

from __future__ import annotations

import re
from typing import Final

_WORD_SPLIT: Final[re.Pattern[str]] = re.compile(r"[_\- ]+")
_ACRONYM_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"([a-z\d])([A-Z])")


def camel_case(name: str) -> str:
    """Return ``name`` as ``CamelCase`` (``python_flake8`` -> ``PythonFlake8``).

    Only the first character of each word is upper-cased, so names that are
    already camel-cased are returned unchanged.
    """

    return "".join(part[:1].upper() + part[1:] for part in _WORD_SPLIT.split(name.strip()) if part)


def snake_case(name: str) -> str:
    """Return ``name`` as ``snake_case`` (``PythonFlake8`` -> ``python_flake8``)."""

    converted = _ACRONYM_BOUNDARY.sub(r"\1_\2", name.strip())
    converted = _WORD_BOUNDARY.sub(r"\1_\2", converted)
    return converted.replace("-", "_").replace(" ", "_").lower()


def lookup_key(name: str) -> str:
    """Return a case and separator insensitive key for matching hook names."""

    return snake_case(name).replace("_", "")


__all__ = ["camel_case", "lookup_key", "snake_case"]
