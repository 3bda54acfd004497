# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deep merge of layered configuration trees."""

from __future__ import annotations

import copy
from collections.abc import Mapping

from .types import ConfigValue


def smart_merge(base: Mapping[str, ConfigValue], override: Mapping[str, ConfigValue]) -> dict[str, ConfigValue]:
    """Return ``override`` layered on top of ``base``.

    Keys are merged one by one:

    * two lists are concatenated, ``override`` entries after ``base`` entries;
    * two mappings are merged recursively;
    * anything else takes the ``override`` value.

    Neither input is modified and the result shares no containers with them,
    so callers may mutate it freely.

    Args:
        base: Lower-precedence configuration tree.
        override: Higher-precedence configuration tree.

    Returns:
        dict[str, ConfigValue]: Newly allocated merged tree.
    """

    result: dict[str, ConfigValue] = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, list) and isinstance(value, list):
            result[key] = current + copy.deepcopy(value)
        elif isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = smart_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


__all__ = ["smart_merge"]
