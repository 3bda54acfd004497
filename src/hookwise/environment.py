# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scoped environment overrides applied around hook execution.

Hooks may declare an ``env`` option. Two ways of honouring it are offered:

* :func:`isolated_environment` builds a private copy of the process
  environment with the overrides applied. Hook subprocesses receive that copy,
  so concurrent hooks never see each other's values.
* :func:`scoped_environment` (and :func:`run_scoped`) temporarily writes the
  overrides into :data:`os.environ` for in-process code. Writers are
  serialised by a process-wide lock and every touched variable is restored,
  including removing variables that did not exist beforehand.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from threading import RLock
from typing import TypeVar

T = TypeVar("T")

_ENVIRONMENT_LOCK = RLock()


def _validated(overrides: Mapping[str, object] | None) -> dict[str, str]:
    if not overrides:
        return {}
    validated: dict[str, str] = {}
    for key, value in overrides.items():
        if not isinstance(key, str) or not key:
            raise TypeError("environment variable names must be non-empty strings")
        validated[key] = str(value)
    return validated


def isolated_environment(
    overrides: Mapping[str, object] | None,
    *,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return a copy of ``base`` (default :data:`os.environ`) with ``overrides`` applied.

    Args:
        overrides: Variable names mapped to replacement values.
        base: Environment to copy. Defaults to the current process environment.

    Returns:
        dict[str, str]: Independent environment mapping for a subprocess.
    """

    with _ENVIRONMENT_LOCK:
        merged = dict(os.environ if base is None else base)
    merged.update(_validated(overrides))
    return merged


@contextmanager
def scoped_environment(
    overrides: Mapping[str, object] | None,
    *,
    environ: MutableMapping[str, str] | None = None,
) -> Iterator[None]:
    """Apply ``overrides`` to ``environ`` for the duration of the ``with`` block.

    Args:
        overrides: Variable names mapped to temporary values.
        environ: Mapping to mutate. Defaults to :data:`os.environ`.

    Yields:
        None: Control returns to the caller with the overrides in effect.
    """

    target = os.environ if environ is None else environ
    values = _validated(overrides)
    if not values:
        yield
        return
    with _ENVIRONMENT_LOCK:
        previous: dict[str, str | None] = {key: target.get(key) for key in values}
        try:
            target.update(values)
            yield
        finally:
            for key, old_value in previous.items():
                if old_value is None:
                    target.pop(key, None)
                else:
                    target[key] = old_value


def run_scoped(overrides: Mapping[str, object] | None, body: Callable[[], T]) -> T:
    """Invoke ``body`` with ``overrides`` applied to the process environment.

    Args:
        overrides: Variable names mapped to temporary values.
        body: Zero-argument callable executed inside the scope.

    Returns:
        T: Whatever ``body`` returns.
    """

    with scoped_environment(overrides):
        return body()


__all__ = ["isolated_environment", "run_scoped", "scoped_environment"]
