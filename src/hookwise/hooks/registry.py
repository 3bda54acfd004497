# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook registry resolving names to built-in classes or repository plugins."""

from __future__ import annotations

import importlib.util
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

from ..config.store import Configuration
from ..context import HookContext
from ..naming import camel_case, lookup_key, snake_case
from .base import Hook

PLUGIN_SUFFIX: Final[str] = ".py"

HookTable = Mapping[str, Mapping[str, type[Hook]]]


class HookNotFoundError(LookupError):
    """Raised when a hook name matches neither a built-in nor a plugin."""


class HookSource(str, Enum):
    """Where a hook implementation comes from."""

    BUILTIN = "builtin"
    PLUGIN = "plugin"


@dataclass(frozen=True, slots=True)
class HookDescriptor:
    """Resolved location of a hook implementation."""

    context: str
    name: str
    source: HookSource
    path: Path | None = None


class HookRegistry:
    """Two-tier lookup: the built-in table first, then plugin files.

    Plugins live at ``<plugin_directory>/<context_snake>/<hook_snake>.py`` and
    define a :class:`Hook` subclass named after the hook (``MyCheck`` in
    ``pre_commit/my_check.py``).
    """

    def __init__(self, builtins: HookTable | None = None, plugin_directory: Path | None = None) -> None:
        if builtins is None:
            from .builtins import BUILTIN_HOOKS

            builtins = BUILTIN_HOOKS
        self._builtins: dict[str, dict[str, type[Hook]]] = {
            camel_case(context): dict(hooks) for context, hooks in builtins.items()
        }
        self.plugin_directory = plugin_directory
        self._plugin_cache: dict[Path, type[Hook]] = {}

    @classmethod
    def for_configuration(cls, config: Configuration, root: Path) -> HookRegistry:
        """Return a registry reading plugins from the configured directory under ``root``."""

        return cls(plugin_directory=config.plugin_directory(root))

    def builtin_names(self, context_name: str) -> list[str]:
        """Return the names of built-in hooks for ``context_name``."""

        return list(self._builtins.get(camel_case(context_name), {}))

    def _context_dir(self, context_name: str) -> Path | None:
        if self.plugin_directory is None:
            return None
        return self.plugin_directory / snake_case(camel_case(context_name))

    def _plugin_files(self, context_name: str) -> list[tuple[str, Path]]:
        directory = self._context_dir(context_name)
        if directory is None or not directory.is_dir():
            return []
        return [
            (camel_case(path.stem), path)
            for path in sorted(directory.glob(f"*{PLUGIN_SUFFIX}"))
            if path.is_file() and not path.stem.startswith("_")
        ]

    def plugin_names(self, context_name: str) -> list[str]:
        """Return the CamelCase names of plugin files found for ``context_name``."""

        return [name for name, _ in self._plugin_files(context_name)]

    def _iter_candidates(self, context_name: str) -> Iterator[HookDescriptor]:
        context = camel_case(context_name)
        for name in self._builtins.get(context, {}):
            yield HookDescriptor(context=context, name=name, source=HookSource.BUILTIN)
        for name, path in self._plugin_files(context):
            yield HookDescriptor(context=context, name=name, source=HookSource.PLUGIN, path=path)

    def find(self, context_name: str, hook_name: str) -> HookDescriptor | None:
        """Return the descriptor for ``hook_name`` or ``None`` when no hook matches.

        Names are compared ignoring case and ``_``/``-`` separators, so
        ``python_flake8``, ``pythonflake8`` and ``PythonFlake8`` all match.
        """

        wanted = lookup_key(hook_name)
        if not wanted:
            return None
        for descriptor in self._iter_candidates(context_name):
            if lookup_key(descriptor.name) == wanted:
                return descriptor
        return None

    def resolve(self, context_name: str, hook_name: str) -> HookDescriptor:
        """Return the descriptor for ``hook_name``.

        Raises:
            HookNotFoundError: If no built-in or plugin hook matches.
        """

        descriptor = self.find(context_name, hook_name)
        if descriptor is None:
            raise HookNotFoundError(f"no hook named '{hook_name}' for {camel_case(context_name)}")
        return descriptor

    def exists(self, context_name: str, hook_name: str) -> bool:
        return self.find(context_name, hook_name) is not None

    def canonical_name(self, context_name: str, hook_name: str) -> str | None:
        """Return the canonical name of an existing hook, or ``None``."""

        descriptor = self.find(context_name, hook_name)
        return descriptor.name if descriptor is not None else None

    def load(self, context_name: str, hook_name: str) -> type[Hook]:
        """Return the hook class for ``hook_name``.

        Args:
            context_name: Context the hook belongs to.
            hook_name: Hook name in any supported case style.

        Returns:
            type[Hook]: Built-in class or the class defined by the plugin file.

        Raises:
            HookNotFoundError: If the hook does not exist or the plugin file
                does not define a matching :class:`Hook` subclass.
        """

        descriptor = self.resolve(context_name, hook_name)
        if descriptor.source is HookSource.BUILTIN:
            return self._builtins[descriptor.context][descriptor.name]
        if descriptor.path is None:
            raise HookNotFoundError(f"plugin hook '{descriptor.name}' has no source file")
        return self._load_plugin(descriptor.name, descriptor.path)

    def _load_plugin(self, name: str, path: Path) -> type[Hook]:
        cached = self._plugin_cache.get(path)
        if cached is not None:
            return cached
        module_name = f"hookwise_plugin_{snake_case(path.parent.name)}_{snake_case(name)}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise HookNotFoundError(f"unable to load plugin hook from {path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        hook_class = getattr(module, name, None)
        if not isinstance(hook_class, type) or not issubclass(hook_class, Hook):
            raise HookNotFoundError(f"plugin {path} does not define a Hook subclass named '{name}'")
        self._plugin_cache[path] = hook_class
        return hook_class

    def create(self, config: Configuration, context: HookContext, hook_name: str) -> Hook:
        """Instantiate ``hook_name`` for ``context``."""

        descriptor = self.resolve(context.name, hook_name)
        hook_class = self.load(context.name, descriptor.name)
        return hook_class(config, context, name=descriptor.name)


__all__ = [
    "HookDescriptor",
    "HookNotFoundError",
    "HookRegistry",
    "HookSource",
    "HookTable",
]
