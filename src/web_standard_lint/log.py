"""Leveled terminal output for web-standard-lint.

Messages are printed through a rich console: ``warning`` and ``error`` go to
stderr, everything else to stdout. The minimum level comes from
``WEB_STANDARD_LINT_LOG_LEVEL`` until ``set_level`` overrides it, and colors
follow ``NO_COLOR`` until ``set_no_color`` forces them off.
"""

from __future__ import annotations

import sys
from enum import IntEnum

from rich.console import Console
from rich.text import Text

from .config import load_settings
from .constants import PKG_NAME


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


LEVEL_NAMES = tuple(level.name.lower() for level in LogLevel)
_ALIASES = {"warn": LogLevel.WARNING}
_STYLES = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "blue",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}
_STEP_STYLE = "bold blue"

_configured_level: LogLevel | None = None
_no_color: bool | None = None


def _parse_level(value: str | None) -> LogLevel:
    name = (value or "").strip().lower()
    if name in _ALIASES:
        return _ALIASES[name]
    if name in LEVEL_NAMES:
        return LogLevel[name.upper()]
    return LogLevel.INFO


def configured_level() -> LogLevel:
    global _configured_level
    if _configured_level is None:
        _configured_level = _parse_level(load_settings().log_level)
    return _configured_level


def set_level(value: str | None) -> None:
    """Override the minimum level; ``None`` or unknown names mean ``info``."""
    global _configured_level
    _configured_level = _parse_level(value)


def set_no_color(value: bool) -> None:
    """Force colors off, or hand the decision back to the environment."""
    global _no_color
    _no_color = True if value else None


def is_enabled(level: LogLevel) -> bool:
    return level >= configured_level()


def _color_disabled() -> bool:
    if _no_color is not None:
        return _no_color
    return load_settings().no_color


def emit(level: LogLevel, message: str, *, style: str | None = None) -> None:
    """Print ``message`` when ``level`` passes the configured threshold."""
    if not is_enabled(level):
        return
    console = Console(
        file=sys.stderr if level >= LogLevel.WARNING else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=_color_disabled(),
    )
    console.print(Text(message, style=style or _STYLES[level]))


def tagged(message: str) -> str:
    """Prefix ``message`` with the package tag.

    Example:
        >>> tagged("checking")
        '[web-standard-lint] checking'
    """
    return f"[{PKG_NAME}] {message}"


def trace(message: str) -> None:
    emit(LogLevel.TRACE, message)


def debug(message: str) -> None:
    emit(LogLevel.DEBUG, message)


def info(message: str) -> None:
    emit(LogLevel.INFO, message)


def success(message: str) -> None:
    emit(LogLevel.SUCCESS, message)


def warning(message: str) -> None:
    emit(LogLevel.WARNING, message)


def error(message: str) -> None:
    emit(LogLevel.ERROR, message)


def step(number: int, message: str) -> None:
    """Announce the start of numbered init step ``number``."""
    emit(LogLevel.INFO, f"Step {number}. {message}", style=_STEP_STYLE)


def step_done(number: int, message: str) -> None:
    emit(LogLevel.SUCCESS, f"Step {number}. {message} :D")


def step_failed(number: int, message: str) -> None:
    emit(LogLevel.WARNING, f"Step {number}. {message}")
