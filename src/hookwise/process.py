# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution for hook tools."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; commands are argument lists built
# from hook configuration and ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .models import ProcessResult

TIMEOUT_RETURNCODE: Final[int] = 124
NOT_FOUND_RETURNCODE: Final[int] = 127


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    timeout: float | None = None
    check: bool = False
    stdin: str | None = None


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(self, result: ProcessResult) -> None:
        command = result.args[0] if result.args else "<unknown>"
        super().__init__(
            f"Command '{command}' exited with status {result.returncode}. stderr: {result.stderr or '<none>'}",
        )
        self.result = result


def find_executable(cmd: str) -> str | None:
    """Return the fully-qualified path to ``cmd`` if it can be executed.

    Relative paths containing a separator (``./node_modules/.bin/eslint``) are
    checked on disk instead of being searched for on ``PATH``.

    Args:
        cmd: Executable name or path to resolve.

    Returns:
        str | None: Absolute path to the executable, or ``None`` when not found.
    """

    if not cmd:
        return None
    candidate = Path(cmd)
    if candidate.is_absolute() or len(candidate.parts) > 1:
        return shutil.which(str(candidate.resolve()))
    return shutil.which(cmd)


def in_path(cmd: str) -> bool:
    """Return ``True`` when ``cmd`` resolves to an executable."""

    return find_executable(cmd) is not None


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode(errors="ignore")
    return value


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> ProcessResult:
    """Execute ``args`` and capture its output as a :class:`ProcessResult`.

    A missing executable yields a result with status 127 and an explanatory
    stderr rather than raising, so hooks can report it as tool output.

    Args:
        args: Command and argument sequence to execute.
        options: Execution options; defaults run in the current directory.

    Returns:
        ProcessResult: Captured exit status, stdout and stderr.

    Raises:
        ValueError: If ``args`` is empty.
        SubprocessExecutionError: When ``options.check`` is true and the
            process exits with a non-zero status.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")
    resolved = options or CommandOptions()
    command = [str(arg) for arg in args]

    try:
        completed = subprocess.run(  # nosec B603 - argument list, no shell
            command,
            cwd=str(resolved.cwd) if resolved.cwd is not None else None,
            env=dict(resolved.env) if resolved.env is not None else None,
            input=resolved.stdin,
            capture_output=True,
            text=True,
            timeout=resolved.timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        result = ProcessResult(
            args=tuple(command),
            returncode=NOT_FOUND_RETURNCODE,
            stderr=f"{command[0]}: {exc.strerror or 'command not found'}",
        )
    except subprocess.TimeoutExpired as exc:
        timeout_msg = f"Command timed out after {resolved.timeout:.1f}s"
        stderr = _ensure_text(exc.stderr)
        result = ProcessResult(
            args=tuple(command),
            returncode=TIMEOUT_RETURNCODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )
    else:
        result = ProcessResult(
            args=tuple(command),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    if resolved.check and not result.success:
        raise SubprocessExecutionError(result)
    return result


__all__ = [
    "CommandOptions",
    "SubprocessExecutionError",
    "find_executable",
    "in_path",
    "run_command",
]
