from __future__ import annotations

import json
from pathlib import Path

import pytest

from web_standard_lint import update
from web_standard_lint.exec import CommandRequest, CommandResult


class _FakeRunner:
    def __init__(self, result: CommandResult | None) -> None:
        self.result = result
        self.requests: list[CommandRequest] = []

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        return self.result


def _npm_view(stdout: str, returncode: int = 0) -> _FakeRunner:
    return _FakeRunner(
        CommandResult(
            argv=("npm", "view", "web-standard-lint", "version"),
            returncode=returncode,
            stdout=stdout,
            stderr="",
        )
    )


def _install(cwd: Path, version: str) -> None:
    pkg_dir = cwd / "node_modules" / "web-standard-lint"
    pkg_dir.mkdir(parents=True)
    (pkg_dir / "package.json").write_text(json.dumps({"version": version}), encoding="utf-8")


def test_latest_version_queries_npm_with_timeout() -> None:
    runner = _npm_view("1.4.0\n")

    assert update.latest_version(runner=runner) == "1.4.0"
    request = runner.requests[0]
    assert request.argv == ("npm", "view", "web-standard-lint", "version")
    assert request.inherit_stdio is False
    assert request.timeout_seconds == 10.0


def test_check_update_reports_newer_release(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _install(tmp_path, "1.2.0")

    result = update.check_update(False, cwd=tmp_path, runner=_npm_view("1.10.0"))

    assert result == update.UpdateCheckResult(
        current="1.2.0", latest="1.10.0", update_available=True
    )
    captured = capsys.readouterr()
    assert "npm i -g web-standard-lint@1.10.0" in captured.err


def test_check_update_up_to_date(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _install(tmp_path, "2.0.0")

    result = update.check_update(False, cwd=tmp_path, runner=_npm_view("2.0.0"))

    assert result is not None
    assert result.update_available is False
    assert "latest version" in capsys.readouterr().out


def test_silent_check_prints_nothing_when_current(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _install(tmp_path, "2.0.0")

    update.check_update(True, cwd=tmp_path, runner=_npm_view("1.9.9"))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "runner",
    [
        _FakeRunner(None),
        _npm_view("", returncode=1),
        _npm_view("npm ERR! 404 Not Found"),
    ],
)
def test_lookup_failures_return_none(
    runner: _FakeRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    assert update.check_update(False, runner=runner) is None
    assert "unable to fetch" in capsys.readouterr().err


def test_installed_version_falls_back_to_tool_version(tmp_path: Path) -> None:
    assert update.installed_version(tmp_path) == update.__version__
    assert update.installed_version(None) == update.__version__
