# ruff: noqa: E402

import builtins
import json
import sys
from pathlib import Path
from typing import Callable, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import web_standard_lint.io as io
import web_standard_lint.log as lint_log


@pytest.fixture(autouse=True)
def _default_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(lint_log, "_configured_level", None)
    monkeypatch.setattr(lint_log, "_no_color", None)
    for name in (
        "WEB_STANDARD_LINT_ENV",
        "NODE_ENV",
        "WEB_STANDARD_LINT_LOG_LEVEL",
        "NO_COLOR",
        "WEB_STANDARD_LINT_NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


class ScriptedPrompter:
    """Prompt double answering from a fixed script and recording questions."""

    def __init__(self, answers: Sequence[object] = ()) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, object]] = []

    def _next(self) -> object:
        if not self.answers:
            raise AssertionError("prompted unexpectedly")
        return self.answers.pop(0)

    def select(
        self, text: str, choices: Sequence[tuple[str, str]], default: str | None = None
    ) -> str:
        self.calls.append(("select", text, default))
        answer = self._next()
        assert answer in [value for _, value in choices]
        return str(answer)

    def confirm(self, text: str, default: bool = False) -> bool:
        self.calls.append(("confirm", text, default))
        return bool(self._next())


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    def factory(*answers: object) -> ScriptedPrompter:
        return ScriptedPrompter(answers)

    return factory


@pytest.fixture
def write_package_json() -> Callable[..., Path]:
    def write(directory: Path, payload: dict | None = None) -> Path:
        path = directory / "package.json"
        path.write_text(
            json.dumps(payload if payload is not None else {"name": "demo"}, indent=2),
            encoding="utf-8",
        )
        return path

    return write

