# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the hookwise package."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class HookStatus(str, Enum):
    """Verdict vocabulary produced by hooks.

    ``good`` and ``bad`` are accepted as aliases of ``pass`` and ``fail`` so
    hooks that never attribute lines can keep the shorter vocabulary.
    """

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"

    @classmethod
    def _missing_(cls, value: object) -> HookStatus | None:
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised == "good":
                return cls.PASS
            if normalised == "bad":
                return cls.FAIL
            for member in cls:
                if member.value == normalised:
                    return member
        return None

    @property
    def blocking(self) -> bool:
        """Return ``True`` when the status should stop the git operation."""

        return self is HookStatus.FAIL


class HookResult(BaseModel):
    """Outcome of a single hook invocation."""

    model_config = ConfigDict(frozen=True)

    status: HookStatus
    message: str = ""

    @classmethod
    def passed(cls) -> HookResult:
        return cls(status=HookStatus.PASS)

    @classmethod
    def warning(cls, message: str) -> HookResult:
        return cls(status=HookStatus.WARN, message=message)

    @classmethod
    def failure(cls, message: str) -> HookResult:
        return cls(status=HookStatus.FAIL, message=message)

    @classmethod
    def coerce(cls, value: object) -> HookResult:
        """Normalise any value allowed by the hook return contract.

        Hooks may return a :class:`HookResult`, a bare status tag, or a
        ``(tag, message)`` pair where ``tag`` is one of ``pass``, ``fail``,
        ``warn``, ``good`` or ``bad``.

        Args:
            value: Raw value returned from :meth:`Hook.run`.

        Returns:
            HookResult: Normalised result.

        Raises:
            TypeError: If ``value`` does not follow the contract.
            ValueError: If the status tag is unknown.
        """

        if isinstance(value, HookResult):
            return value
        if isinstance(value, (HookStatus, str)):
            return cls(status=HookStatus(value))
        if isinstance(value, Sequence) and len(value) == 2:
            tag, message = value
            if not isinstance(tag, (HookStatus, str)):
                raise TypeError(f"hook status must be a string tag, got {type(tag).__name__}")
            return cls(status=HookStatus(tag), message="" if message is None else str(message))
        raise TypeError(f"hooks must return a status or (status, message) pair, got {value!r}")


HookReturn: TypeAlias = HookResult | HookStatus | str | Sequence[object]


class ProcessResult(BaseModel):
    """Captured outcome of an external command."""

    model_config = ConfigDict(frozen=True)

    args: tuple[str, ...] = Field(default_factory=tuple)
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        """Return ``True`` when the command exited with status zero."""

        return self.returncode == 0


class StagedFile(BaseModel):
    """A file touched by the pending change and the lines it modified."""

    model_config = ConfigDict(frozen=True)

    path: str
    original_path: str = ""
    modified_lines: frozenset[int] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def _default_original_path(self) -> StagedFile:
        if not self.original_path:
            object.__setattr__(self, "original_path", self.path)
        return self

    @field_validator("modified_lines")
    @classmethod
    def _positive_lines(cls, value: frozenset[int]) -> frozenset[int]:
        if any(line < 1 for line in value):
            raise ValueError("modified line numbers are 1-based")
        return value


class Diagnostic(BaseModel):
    """A single issue reported by a tool, located by file and line."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    message: str


__all__ = [
    "Diagnostic",
    "HookResult",
    "HookReturn",
    "HookStatus",
    "ProcessResult",
    "StagedFile",
]
