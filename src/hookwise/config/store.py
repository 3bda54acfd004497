# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered hook configuration and the enablement queries built on it."""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final, Protocol, cast, runtime_checkable

from ..naming import camel_case, lookup_key
from .merge import smart_merge
from .schema import normalise_tree
from .types import (
    ALL_HOOKS_KEY,
    DEFAULT_PLUGIN_DIRECTORY,
    ENABLED_KEY,
    NON_CONTEXT_KEYS,
    PLUGIN_DIRECTORY_KEY,
    SKIP_ALL_TOKENS,
    SKIP_ENV_VARS,
    SKIP_KEY,
    VERIFY_PLUGIN_SIGNATURES_KEY,
    ConfigValue,
)

_SKIP_TOKEN_SPLIT: Final[re.Pattern[str]] = re.compile(r"[\s,:]+")


@runtime_checkable
class HookLookup(Protocol):
    """Resolve user-supplied hook names to the canonical name of an existing hook."""

    def canonical_name(self, context_name: str, hook_name: str) -> str | None:
        """Return the canonical hook name, or ``None`` when no such hook exists."""

        raise NotImplementedError


def _freeze(value: ConfigValue) -> object:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _declared_name(hooks: Mapping[str, ConfigValue], hook_name: str) -> str | None:
    """Return the key under which ``hook_name`` is declared in ``hooks``, ignoring case and separators."""

    if hook_name in hooks:
        return hook_name
    wanted = lookup_key(hook_name)
    return next((key for key in hooks if key != ALL_HOOKS_KEY and lookup_key(key) == wanted), None)


def _align_hook_names(
    base: Mapping[str, ConfigValue],
    override: Mapping[str, ConfigValue],
) -> dict[str, ConfigValue]:
    """Return ``override`` with hook keys renamed to the spelling ``base`` already uses."""

    aligned: dict[str, ConfigValue] = {}
    for key, value in override.items():
        base_context = base.get(key)
        if key in NON_CONTEXT_KEYS or not isinstance(value, Mapping) or not isinstance(base_context, Mapping):
            aligned[key] = value
            continue
        aligned[key] = {
            (_declared_name(base_context, hook) or hook) if hook != ALL_HOOKS_KEY else hook: options
            for hook, options in value.items()
        }
    return aligned


def skipped_hook_tokens(env: Mapping[str, str]) -> list[str]:
    """Return the hook names listed in ``SKIP``, ``SKIP_CHECKS`` and ``SKIP_HOOKS``.

    Args:
        env: Environment mapping to read.

    Returns:
        list[str]: Tokens in variable order, split on whitespace, commas and colons.
    """

    joined = " ".join(env.get(name, "") for name in SKIP_ENV_VARS)
    return [token for token in _SKIP_TOKEN_SPLIT.split(joined) if token]


class Configuration:
    """Stores configuration for hookwise and the hooks it runs.

    The tree maps context names (``PreCommit``) to hook names (or the reserved
    ``ALL`` key) to option tables. Instances are treated as values: merging
    returns a new object and hooks only ever see read-only views. The single
    exception is :meth:`apply_environment_skips`, which marks hooks as skipped
    on the active configuration right before a run.
    """

    def __init__(self, data: Mapping[str, object]) -> None:
        """Validate and normalise ``data``.

        Args:
            data: Raw configuration tree.

        Raises:
            ConfigError: If ``data`` has an unsupported shape.
        """

        self._data: dict[str, ConfigValue] = normalise_tree(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Configuration(contexts={self.context_names()!r})"

    def to_dict(self) -> dict[str, ConfigValue]:
        """Return a deep copy of the resolved configuration tree."""

        return copy.deepcopy(self._data)

    def merge(self, other: Configuration | Mapping[str, object]) -> Configuration:
        """Return a new configuration with ``other`` layered on top of this one.

        Args:
            other: Configuration (or raw tree) whose options add to or replace
                options defined here.

        Returns:
            Configuration: Merged configuration; neither operand is modified.
        """

        override = other._data if isinstance(other, Configuration) else normalise_tree(other)
        return Configuration(smart_merge(self._data, _align_hook_names(self._data, override)))

    def plugin_directory(self, root: Path) -> Path:
        """Return the directory that plugin hooks are loaded from for ``root``."""

        relative = self._data.get(PLUGIN_DIRECTORY_KEY) or DEFAULT_PLUGIN_DIRECTORY
        return root / str(relative)

    @property
    def verify_plugin_signatures(self) -> bool:
        """Return ``False`` only when signature verification is explicitly disabled."""

        return self._data.get(VERIFY_PLUGIN_SIGNATURES_KEY) is not False

    def context_names(self) -> list[str]:
        """Return every context declared in the configuration."""

        return [key for key in self._data if key not in NON_CONTEXT_KEYS]

    def all_hooks(self) -> dict[str, list[str]]:
        """Return hook names for every context."""

        return {name: self.enabled_hooks(name) for name in self.context_names()}

    def has_context(self, context_name: str) -> bool:
        """Return ``True`` when ``context_name`` is declared."""

        return camel_case(context_name) in self.context_names()

    def _context(self, context_name: str) -> Mapping[str, ConfigValue]:
        context = self._data.get(camel_case(context_name))
        if isinstance(context, Mapping):
            return context
        return {ALL_HOOKS_KEY: {}}

    def _hook_options(self, context_name: str, hook_name: str) -> Mapping[str, ConfigValue]:
        context = self._context(context_name)
        key = hook_name if hook_name == ALL_HOOKS_KEY else _declared_name(context, hook_name)
        options = context.get(key) if key is not None else None
        return options if isinstance(options, Mapping) else {}

    def enabled_hooks(self, context_name: str) -> list[str]:
        """Return every hook declared for ``context_name``, excluding ``ALL``.

        Despite the name this lists declared hooks; pair it with
        :meth:`hook_enabled` to filter disabled ones.
        """

        return [name for name in self._context(context_name) if name != ALL_HOOKS_KEY]

    def hook_enabled(self, context_name: str, hook_name: str) -> bool:
        """Return whether ``hook_name`` is enabled for ``context_name``.

        The hook's own ``enabled`` option wins, then the context's
        ``ALL.enabled``, then the default of ``True``. Only explicit booleans
        take part in the precedence; a missing key falls through.
        """

        individual = self._hook_options(context_name, hook_name).get(ENABLED_KEY)
        if isinstance(individual, bool):
            return individual
        shared = self._hook_options(context_name, ALL_HOOKS_KEY).get(ENABLED_KEY)
        if isinstance(shared, bool):
            return shared
        return True

    def for_hook(self, context_name: str, hook_name: str) -> Mapping[str, object]:
        """Return the read-only options for ``hook_name``.

        The context's ``ALL`` options are merged with the hook's own options,
        the latter taking precedence under the usual merge rule.

        Args:
            context_name: Context the hook belongs to.
            hook_name: Canonical hook name.

        Returns:
            Mapping[str, object]: Immutable view; nested lists become tuples.
        """

        merged = smart_merge(
            self._hook_options(context_name, ALL_HOOKS_KEY),
            self._hook_options(context_name, hook_name),
        )
        return _freeze(merged)  # type: ignore[return-value]

    def apply_environment_skips(
        self,
        context_name: str,
        env: Mapping[str, str],
        lookup: HookLookup,
    ) -> list[str]:
        """Mark hooks named in the ``SKIP`` variables as skipped, in place.

        ``all``/``ALL`` skips the whole context. Other tokens only apply when
        ``lookup`` confirms that a built-in or plugin hook of that name exists;
        unknown names are ignored.

        Args:
            context_name: Context whose hooks are affected.
            env: Environment mapping holding ``SKIP``, ``SKIP_CHECKS`` and
                ``SKIP_HOOKS``.
            lookup: Resolver confirming hook existence and canonical names.

        Returns:
            list[str]: Canonical names marked as skipped (``["ALL"]`` when the
            whole context is skipped).
        """

        tokens = skipped_hook_tokens(env)
        context_key = camel_case(context_name)
        context = cast(dict[str, ConfigValue], self._data.setdefault(context_key, {ALL_HOOKS_KEY: {}}))

        if any(token in SKIP_ALL_TOKENS for token in tokens):
            shared = cast(dict[str, ConfigValue], context.setdefault(ALL_HOOKS_KEY, {}))
            shared[SKIP_KEY] = True
            return [ALL_HOOKS_KEY]

        skipped: list[str] = []
        for token in tokens:
            canonical = lookup.canonical_name(context_key, token)
            if canonical is None or canonical in skipped:
                continue
            declared = _declared_name(context, canonical) or canonical
            options = context.get(declared)
            if not isinstance(options, dict):
                options = {}
                context[declared] = options
            options[SKIP_KEY] = True
            skipped.append(canonical)
        return skipped


__all__ = ["Configuration", "HookLookup", "skipped_hook_tokens"]
