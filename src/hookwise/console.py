# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles used for hook reports."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import NamedTuple

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal.

    Git runs hooks with stdout inherited from the calling process, so this is
    ``False`` for GUI clients and CI logs.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class ConsoleStyle(NamedTuple):
    """Presentation settings a console was built for."""

    color: bool
    emoji: bool
    terminal: bool


class RichConsoleManager:
    """Hand out one Rich :class:`Console` per presentation style."""

    def __init__(self) -> None:
        self._consoles: dict[ConsoleStyle, Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console for ``color`` and ``emoji``.

        Colour is only honoured on a terminal. Consoles are created without a
        fixed file, so they write to whatever ``sys.stdout`` is at print time.

        Args:
            color: ``True`` when ANSI colour output is wanted.
            emoji: ``True`` when emoji glyphs should be rendered.

        Returns:
            Console: Shared console for the requested style.
        """

        terminal = detect_tty()
        style = ConsoleStyle(color=color and terminal, emoji=emoji, terminal=terminal)
        console = self._consoles.get(style)
        if console is None:
            console = Console(
                color_system="auto" if style.color else None,
                force_terminal=terminal,
                no_color=not style.color,
                emoji=emoji,
                highlight=False,
                soft_wrap=True,
            )
            self._consoles[style] = console
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["ConsoleStyle", "RichConsoleManager", "detect_tty", "get_console_manager"]
