# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration sources (defaults, TOML, pyproject) and the layered loader."""

from __future__ import annotations

import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from .defaults import default_configuration_data
from .merge import smart_merge
from .schema import ConfigError, normalise_tree
from .store import Configuration
from .types import ConfigValue

INCLUDE_KEY: Final[str] = "include_config"
PYPROJECT_SECTION: Final[tuple[str, str]] = ("tool", "hookwise")
PROJECT_CONFIG_NAME: Final[str] = ".hookwise.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"


def read_toml(path: Path) -> dict[str, Any]:
    """Return the parsed TOML document at ``path``.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc


class ConfigSource(ABC):
    """One layer of hook configuration."""

    name: str = "source"

    @abstractmethod
    def load(self) -> Mapping[str, ConfigValue]:
        """Return the normalised configuration fragment provided by this source."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human readable description of the source."""


class DefaultConfigSource(ConfigSource):
    """The configuration shipped with hookwise."""

    name = "defaults"

    def load(self) -> Mapping[str, ConfigValue]:
        return normalise_tree(default_configuration_data())

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource(ConfigSource):
    """A ``.hookwise.toml`` style document, optionally pulling in other files.

    ``include_config`` names one file or a list of files, relative to the
    including document. Included files are merged in order and the including
    document is merged over them.
    """

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self.path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, ConfigValue]:
        return self._load_with_includes(self.path, ())

    def _load_with_includes(self, path: Path, chain: tuple[Path, ...]) -> dict[str, ConfigValue]:
        if not path.is_file():
            return {}
        resolved = path.resolve()
        if resolved in chain:
            cycle = " -> ".join(str(entry) for entry in (*chain, resolved))
            raise ConfigError(f"Circular include detected: {cycle}")

        document = read_toml(resolved)
        merged: dict[str, ConfigValue] = {}
        for included in self._includes(document.pop(INCLUDE_KEY, None), resolved):
            merged = smart_merge(merged, self._load_with_includes(included, (*chain, resolved)))
        return smart_merge(merged, normalise_tree(document))

    @staticmethod
    def _includes(raw: object, including: Path) -> list[Path]:
        if raw is None:
            return []
        entries: Sequence[object] = [raw] if isinstance(raw, str) else raw if isinstance(raw, list) else ()
        if not entries or not all(isinstance(entry, str) for entry in entries):
            raise ConfigError(f"{INCLUDE_KEY} in {including} must be a path or a list of paths")
        return [(including.parent / str(entry)) for entry in entries]

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(ConfigSource):
    """The ``[tool.hookwise]`` table of ``pyproject.toml``."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = str(path)

    def load(self) -> Mapping[str, ConfigValue]:
        if not self.path.is_file():
            return {}
        section: object = read_toml(self.path)
        for key in PYPROJECT_SECTION:
            section = section.get(key) if isinstance(section, Mapping) else None
        if not isinstance(section, Mapping):
            return {}
        return normalise_tree(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


@dataclass(slots=True)
class ConfigLoader:
    """Merge configuration sources in order, later sources taking precedence."""

    sources: list[ConfigSource] = field(default_factory=list)

    @classmethod
    def for_root(cls, root: Path, *, project_config: Path | None = None) -> ConfigLoader:
        """Return a loader reading defaults, ``pyproject.toml`` and ``.hookwise.toml``.

        Args:
            root: Repository root used to locate configuration files.
            project_config: Optional explicit path replacing ``.hookwise.toml``.

        Returns:
            ConfigLoader: Loader with the standard source order.
        """

        return cls(
            sources=[
                DefaultConfigSource(),
                PyProjectConfigSource(root / PYPROJECT_NAME),
                TomlConfigSource(project_config or root / PROJECT_CONFIG_NAME),
            ],
        )

    def load(self) -> Configuration:
        """Return the merged :class:`Configuration`.

        Raises:
            ConfigError: If any source is malformed.
        """

        config = Configuration({})
        for source in self.sources:
            fragment = source.load()
            if fragment:
                config = config.merge(fragment)
        return config

    def describe(self) -> list[str]:
        """Return descriptions of the configured sources in precedence order."""

        return [source.describe() for source in self.sources]


def load_config(root: Path, *, project_config: Path | None = None) -> Configuration:
    """Load the layered configuration for the repository at ``root``."""

    return ConfigLoader.for_root(root, project_config=project_config).load()


__all__ = [
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
    "read_toml",
]
