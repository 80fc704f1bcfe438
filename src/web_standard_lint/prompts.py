"""Prompt providers and step numbering for the init flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from . import io

Choices = Sequence[tuple[str, str]]


class Prompter(Protocol):
    """Answers single-choice and yes/no questions."""

    def select(self, text: str, choices: Choices, default: str | None = None) -> str:
        """Return the value of the selected choice."""
        ...

    def confirm(self, text: str, default: bool = False) -> bool:
        """Return the yes/no answer."""
        ...


class TerminalPrompter:
    """Ask the operator on the terminal."""

    def select(self, text: str, choices: Choices, default: str | None = None) -> str:
        return io.select(text, choices, default)

    def confirm(self, text: str, default: bool = False) -> bool:
        return io.confirm(text, default=default)


class DefaultsPrompter:
    """Answer every question with its default, for non-interactive runs."""

    def select(self, text: str, choices: Choices, default: str | None = None) -> str:
        if default is not None:
            return default
        return choices[0][1]

    def confirm(self, text: str, default: bool = False) -> bool:
        return default


@dataclass
class StepCounter:
    """Step numbers shared by every prompt and log line of one run.

    Example:
        >>> steps = StepCounter()
        >>> steps.next(), steps.next(), steps.current
        (1, 2, 2)
    """

    current: int = 0

    def next(self) -> int:
        self.current += 1
        return self.current

    def label(self, text: str) -> str:
        """Advance and prefix ``text`` with the new step number."""
        return f"Step {self.next()}. {text}"


def choose_eslint_type(prompter: Prompter, steps: StepCounter, choices: Choices) -> str:
    return prompter.select(
        steps.label("Select the language (JS/TS) and framework (React/Vue) of the project:"),
        choices,
    )


def choose_enable_stylelint(prompter: Prompter, steps: StepCounter, default: bool) -> bool:
    return prompter.confirm(
        steps.label("Use stylelint (not needed without style files)?"),
        default=default,
    )


def choose_enable_markdownlint(prompter: Prompter, steps: StepCounter) -> bool:
    return prompter.confirm(
        steps.label("Use markdownlint (not needed without Markdown files)?"),
        default=True,
    )


def choose_enable_prettier(prompter: Prompter, steps: StepCounter) -> bool:
    return prompter.confirm(steps.label("Format code with Prettier?"), default=True)
