from __future__ import annotations

from unittest.mock import patch

import pytest

from web_standard_lint import io, prompts
from web_standard_lint.constants import PROJECT_TYPES

CHOICES = [("JavaScript", "index"), ("TypeScript", "typescript"), ("Node", "node")]


def _answers(*values: str):
    responses = iter(values)
    return lambda _prompt: next(responses)


@pytest.mark.parametrize(
    ("responses", "expected"),
    [
        (("2",), "typescript"),
        (("node",), "node"),
        (("",), "index"),
        (("9", "abc", "3"), "node"),
    ],
)
def test_select_reads_number_value_or_default(
    responses: tuple[str, ...], expected: str, capsys: pytest.CaptureFixture[str]
) -> None:
    with patch("builtins.input", _answers(*responses)):
        assert io.select("Pick one:", CHOICES, default="index") == expected

    output = capsys.readouterr().out
    assert "Pick one:" in output
    assert " *1) JavaScript" in output


def test_select_without_default_requires_an_answer() -> None:
    with patch("builtins.input", _answers("", "1")):
        assert io.select("Pick one:", CHOICES) == "index"


def test_select_rejects_empty_choices() -> None:
    with pytest.raises(ValueError):
        io.select("Pick one:", [])


def test_select_uses_questionary_on_a_terminal() -> None:
    with (
        patch("web_standard_lint.io._use_questionary", return_value=True),
        patch("web_standard_lint.io.questionary.select") as select,
    ):
        select.return_value.ask.return_value = "typescript"
        assert io.select("Pick one:", CHOICES, default="missing") == "typescript"

    kwargs = select.call_args.kwargs
    assert kwargs["default"] is None
    assert [choice.value for choice in kwargs["choices"]] == ["index", "typescript", "node"]


def test_cancelled_questionary_prompt_aborts() -> None:
    with (
        patch("web_standard_lint.io._use_questionary", return_value=True),
        patch("web_standard_lint.io.questionary.confirm") as confirm,
    ):
        confirm.return_value.ask.return_value = None
        with pytest.raises(SystemExit):
            io.confirm("Continue?")


@pytest.mark.parametrize(
    ("response", "default", "expected"),
    [("", True, True), ("", False, False), ("y", False, True), ("no", True, False)],
)
def test_confirm_fallback(response: str, default: bool, expected: bool) -> None:
    with patch("builtins.input", _answers(response)):
        assert io.confirm("Continue?", default=default) is expected


def test_defaults_prompter_answers_without_input() -> None:
    prompter = prompts.DefaultsPrompter()

    assert prompter.select("Pick", PROJECT_TYPES) == "index"
    assert prompter.select("Pick", PROJECT_TYPES, default="vue") == "vue"
    assert prompter.confirm("Sure?", default=True) is True
    assert prompter.confirm("Sure?") is False


def test_terminal_prompter_delegates_to_io() -> None:
    with (
        patch("web_standard_lint.prompts.io.select", return_value="react") as select,
        patch("web_standard_lint.prompts.io.confirm", return_value=False) as confirm,
    ):
        prompter = prompts.TerminalPrompter()
        assert prompter.select("Pick", CHOICES, "index") == "react"
        assert prompter.confirm("Sure?", default=True) is False

    select.assert_called_once_with("Pick", CHOICES, "index")
    confirm.assert_called_once_with("Sure?", default=True)


def test_step_labels_continue_across_questions(make_prompter) -> None:
    prompter = make_prompter("vue", False, True)
    steps = prompts.StepCounter()

    assert prompts.choose_eslint_type(prompter, steps, PROJECT_TYPES) == "vue"
    assert prompts.choose_enable_stylelint(prompter, steps, default=True) is False
    assert prompts.choose_enable_prettier(prompter, steps) is True

    texts = [text for _, text, _ in prompter.calls]
    assert [text.split(".")[0] for text in texts] == ["Step 1", "Step 2", "Step 3"]
    assert prompter.calls[1][2] is True
    assert steps.current == 3
