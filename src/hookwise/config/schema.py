# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Boundary validation for configuration documents.

The configuration tree stays a permissive nested mapping so arbitrary
hook-specific options can be merged across layers. The options the engine
itself interprets are validated here with Pydantic before a
:class:`~hookwise.config.store.Configuration` accepts a tree.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr, ValidationError

from ..naming import camel_case, lookup_key
from .types import (
    ALL_HOOKS_KEY,
    NON_CONTEXT_KEYS,
    PLUGIN_DIRECTORY_KEY,
    VERIFY_PLUGIN_SIGNATURES_KEY,
    ConfigValue,
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


EnvValue = StrictStr | StrictInt | StrictFloat | StrictBool


class HookOptions(BaseModel):
    """Options understood by the engine; hook-specific keys pass through untouched."""

    model_config = ConfigDict(extra="allow", strict=True)

    enabled: StrictBool | None = None
    skip: StrictBool | None = None
    requires_files: StrictBool | None = None
    optional_executable: StrictStr | None = None
    exclude_branches: list[StrictStr] | None = None
    env: dict[StrictStr, EnvValue] | None = None
    description: StrictStr | None = None
    command: StrictStr | list[StrictStr] | None = None
    flags: list[StrictStr] | None = None
    include: StrictStr | list[StrictStr] | None = None
    exclude: StrictStr | list[StrictStr] | None = None


class TopLevelOptions(BaseModel):
    """Reserved keys that sit beside the hook contexts."""

    model_config = ConfigDict(strict=True)

    plugin_directory: StrictStr | None = None
    verify_plugin_signatures: StrictBool | None = None


def _format_validation_error(location: str, exc: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
    )
    return f"invalid options for {location}: {details}"


def _normalise_context(context_name: str, raw: object) -> dict[str, ConfigValue]:
    if raw is None:
        return {ALL_HOOKS_KEY: {}}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"context '{context_name}' must be a table of hooks")
    hooks: dict[str, ConfigValue] = {}
    spellings: dict[str, str] = {}
    for hook_key, options in raw.items():
        if not isinstance(hook_key, str) or not hook_key.strip():
            raise ConfigError(f"hook names in '{context_name}' must be non-empty strings")
        if hook_key == ALL_HOOKS_KEY:
            hook_name = ALL_HOOKS_KEY
        else:
            # python_flake8, pythonflake8 and PythonFlake8 share one entry
            hook_name = spellings.setdefault(lookup_key(hook_key), camel_case(hook_key))
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise ConfigError(f"options for {context_name}.{hook_name} must be a table")
        try:
            HookOptions.model_validate(dict(options))
        except ValidationError as exc:
            raise ConfigError(_format_validation_error(f"{context_name}.{hook_name}", exc)) from exc
        existing = hooks.get(hook_name)
        if isinstance(existing, dict):
            existing.update(copy.deepcopy(dict(options)))
        else:
            hooks[hook_name] = copy.deepcopy(dict(options))
    hooks.setdefault(ALL_HOOKS_KEY, {})
    return hooks


def normalise_tree(raw: Mapping[str, object]) -> dict[str, ConfigValue]:
    """Validate ``raw`` and return a normalised deep copy.

    Context and hook names are converted to ``CamelCase`` (``ALL`` is kept) and
    every context is guaranteed an ``ALL`` table, so lookups never yield
    ``None``.

    Args:
        raw: Configuration document as loaded from defaults or a file.

    Returns:
        dict[str, ConfigValue]: Normalised configuration tree.

    Raises:
        ConfigError: If the document has an unsupported shape.
    """

    if not isinstance(raw, Mapping):
        raise ConfigError("configuration must be a table")
    reserved = {key: raw[key] for key in NON_CONTEXT_KEYS if key in raw}
    try:
        TopLevelOptions.model_validate(reserved)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error("top-level settings", exc)) from exc

    tree: dict[str, ConfigValue] = {}
    if PLUGIN_DIRECTORY_KEY in reserved:
        tree[PLUGIN_DIRECTORY_KEY] = reserved[PLUGIN_DIRECTORY_KEY]
    if VERIFY_PLUGIN_SIGNATURES_KEY in reserved:
        tree[VERIFY_PLUGIN_SIGNATURES_KEY] = reserved[VERIFY_PLUGIN_SIGNATURES_KEY]
    for key, value in raw.items():
        if key in NON_CONTEXT_KEYS:
            continue
        if not isinstance(key, str) or not key.strip():
            raise ConfigError("context names must be non-empty strings")
        context_name = camel_case(key)
        normalised = _normalise_context(context_name, value)
        existing = tree.get(context_name)
        if isinstance(existing, dict):
            for hook_name, options in normalised.items():
                current = existing.get(hook_name)
                if isinstance(current, dict) and isinstance(options, dict):
                    current.update(options)
                else:
                    existing[hook_name] = options
        else:
            tree[context_name] = normalised
    return tree


__all__ = ["ConfigError", "HookOptions", "TopLevelOptions", "normalise_tree"]
