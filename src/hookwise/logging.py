# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console reporting helpers for hook runs, with optional colour and emoji."""

from __future__ import annotations

from typing import Final, NamedTuple

from rich.rule import Rule
from rich.text import Text

from .console import detect_tty, get_console_manager


class _Level(NamedTuple):
    symbol: str
    style: str


_INFO: Final[_Level] = _Level("ℹ️ ", "cyan")
_OK: Final[_Level] = _Level("✅ ", "green")
_WARN: Final[_Level] = _Level("⚠️ ", "yellow")
_FAIL: Final[_Level] = _Level("❌ ", "red")


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _emit(msg: str, level: _Level | None, *, use_emoji: bool, use_color: bool | None) -> None:
    """Print one line of ``msg`` styled for ``level``.

    Args:
        msg: Message text.
        level: Symbol and Rich style, or ``None`` for unstyled output.
        use_emoji: Whether to prefix the level symbol.
        use_color: Explicit colour flag; ``None`` follows TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    prefix = emoji(level.symbol, use_emoji) if level is not None else ""
    text = Text(f"{prefix}{msg}")
    if level is not None and color_enabled:
        text.stylize(level.style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Print a header separating the output of one hook context."""

    console = get_console_manager().get(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(Text(f"\n--- {title} ---"))


def plain(msg: str, *, use_color: bool | None = None) -> None:
    """Print ``msg`` without a prefix, used for hook output bodies."""

    _emit(msg, None, use_emoji=False, use_color=use_color)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit(msg, _INFO, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit(msg, _OK, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit(msg, _WARN, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit(msg, _FAIL, use_emoji=use_emoji, use_color=use_color)


__all__ = ["emoji", "fail", "info", "ok", "plain", "section", "warn"]
