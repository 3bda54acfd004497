# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Attribute diagnostics to the lines a change actually modified.

Only diagnostics that land on a modified line of a staged file block the
commit. Everything else, including diagnostics whose file cannot be matched
to a staged file, is surfaced as a warning.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Final

from ..models import Diagnostic, HookResult, StagedFile

UNMODIFIED_LINES_HEADER: Final[str] = "Modified files have lints (on lines you didn't modify)"


def normalise_diagnostic_path(path: str) -> str:
    """Return ``path`` as a POSIX string without ``./`` prefixes."""

    posix = path.strip().replace("\\", "/")
    while posix.startswith("./"):
        posix = posix[2:]
    return str(PurePosixPath(posix)) if posix else posix


def _is_suffix(longer: str, shorter: str) -> bool:
    return longer.endswith("/" + shorter)


class StagedFileIndex:
    """Resolve tool-reported paths to staged files."""

    def __init__(self, staged_files: Iterable[StagedFile]) -> None:
        self._files: dict[str, StagedFile] = {}
        for staged in staged_files:
            self._files.setdefault(normalise_diagnostic_path(staged.path), staged)

    def __len__(self) -> int:
        return len(self._files)

    def resolve(self, path: str) -> StagedFile | None:
        """Return the staged file ``path`` refers to.

        An exact match wins. Otherwise a unique suffix match in either
        direction is accepted (tools may print absolute paths or paths relative
        to a subdirectory). Ambiguous suffix matches resolve to ``None``.
        """

        key = normalise_diagnostic_path(path)
        if not key:
            return None
        exact = self._files.get(key)
        if exact is not None:
            return exact
        candidates = [
            staged for name, staged in self._files.items() if _is_suffix(key, name) or _is_suffix(name, key)
        ]
        if len(candidates) == 1:
            return candidates[0]
        return None


@dataclass(slots=True)
class Attribution:
    """Diagnostics split by whether the change touched their line."""

    failing: list[Diagnostic] = field(default_factory=list)
    warning: list[Diagnostic] = field(default_factory=list)
    unresolved: list[Diagnostic] = field(default_factory=list)

    def to_result(self) -> HookResult:
        """Return the hook verdict for this attribution."""

        if self.failing:
            return HookResult.failure(_join(self.failing))
        if self.warning:
            return HookResult.warning(f"{UNMODIFIED_LINES_HEADER}\n{_join(self.warning)}")
        return HookResult.passed()


def _join(diagnostics: Sequence[Diagnostic]) -> str:
    return "\n".join(diagnostic.message for diagnostic in diagnostics)


def attribute(
    diagnostics: Iterable[Diagnostic],
    staged_files: Iterable[StagedFile] | StagedFileIndex,
) -> Attribution:
    """Split ``diagnostics`` into failing and warning sets.

    Args:
        diagnostics: Diagnostics extracted from tool output.
        staged_files: Files touched by the change with their modified lines.

    Returns:
        Attribution: ``failing`` holds diagnostics on modified lines;
        ``warning`` holds the rest, including unresolved ones which are also
        listed in ``unresolved``.
    """

    index = staged_files if isinstance(staged_files, StagedFileIndex) else StagedFileIndex(staged_files)
    attribution = Attribution()
    for diagnostic in diagnostics:
        staged = index.resolve(diagnostic.file)
        if staged is None:
            attribution.unresolved.append(diagnostic)
            attribution.warning.append(diagnostic)
        elif diagnostic.line in staged.modified_lines:
            attribution.failing.append(diagnostic)
        else:
            attribution.warning.append(diagnostic)
    return attribution


def classify(
    diagnostics: Iterable[Diagnostic],
    staged_files: Iterable[StagedFile] | StagedFileIndex,
) -> HookResult:
    """Return the verdict for ``diagnostics`` against ``staged_files``.

    * no diagnostics: ``pass``;
    * any diagnostic on a modified line: ``fail`` listing only those;
    * otherwise: ``warn`` listing every remaining diagnostic.
    """

    return attribute(diagnostics, staged_files).to_result()


__all__ = [
    "Attribution",
    "StagedFileIndex",
    "UNMODIFIED_LINES_HEADER",
    "attribute",
    "classify",
    "normalise_diagnostic_path",
]
