# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logging helpers: a ``TRACE`` level for library internals plus Rich console output."""

from __future__ import annotations

import logging
from typing import Final

from rich.logging import RichHandler
from rich.text import Text

from .console import detect_tty, get_console_manager

TRACE: Final[int] = 5
"""Numeric level for per-item chatter, below :data:`logging.DEBUG`."""

logging.addLevelName(TRACE, "TRACE")


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log ``msg`` on ``logger`` at :data:`TRACE` level."""

    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)


def configure_logging(level: int | str = logging.INFO, *, use_color: bool = True) -> logging.Logger:
    """Attach a Rich handler to the ``shopexpander`` logger hierarchy.

    Args:
        level: Threshold applied to the package logger. Accepts ``"TRACE"``.
        use_color: Flag indicating whether colour output is requested.

    Returns:
        logging.Logger: The configured package logger.
    """

    logger = logging.getLogger("shopexpander")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    console = get_console_manager().get(color=use_color, emoji=False)
    handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "TRACE",
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "ok",
    "trace",
    "warn",
]
