"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import Sequence

import questionary


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Returns:
        None.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def die(message: str, code: int = 1) -> None:
    """Print an error message and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.

    Returns:
        None. Exits the process via ``sys.exit``.
    """
    print(f"error: {message}", file=sys.stderr)
    sys.exit(code)


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        text: Prompt label shown to the user.
        default: Default answer when the user presses enter.

    Returns:
        ``True`` when the user confirms.
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            die("aborted")
        return bool(response)
    suffix = "[Y/n]" if default else "[y/N]"
    response = input(f"{text} {suffix}: ").strip().lower()
    if response == "":
        return default
    return response in {"y", "yes"}


def select(
    text: str,
    choices: Sequence[tuple[str, str]],
    default: str | None = None,
) -> str:
    """Prompt for one value out of a fixed list.

    Args:
        text: Prompt label shown to the user.
        choices: ``(label, value)`` pairs in display order.
        default: Value preselected when the user presses enter.

    Returns:
        The selected value.
    """
    if not choices:
        raise ValueError("select requires at least one choice")
    values = [value for _, value in choices]
    if _use_questionary():
        response = questionary.select(
            text,
            choices=[questionary.Choice(title=label, value=value) for label, value in choices],
            default=default if default in values else None,
        ).ask()
        if response is None:
            die("aborted")
        return str(response)

    say(text)
    for index, (label, value) in enumerate(choices, start=1):
        marker = "*" if value == default else " "
        say(f" {marker}{index}) {label}")
    default_index = values.index(default) + 1 if default in values else None
    suffix = f" [{default_index}]" if default_index else ""
    while True:
        raw = input(f"Choose 1-{len(choices)}{suffix}: ").strip()
        if raw == "" and default_index is not None:
            return values[default_index - 1]
        if raw in values:
            return raw
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            return values[int(raw) - 1]
