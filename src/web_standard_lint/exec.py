"""Run the package manager and npm queries through a swappable runner.

Two shapes of command are needed: the install, which shares the terminal
with the operator, and ``npm view`` style lookups whose output is captured.
Both go through ``CommandRunner`` so tests can replace the subprocess layer.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

TIMEOUT_RETURNCODE = 124


@dataclass(frozen=True)
class CommandRequest:
    """One command invocation.

    Attributes:
        argv: Executable and arguments.
        cwd: Working directory, or the current one.
        inherit_stdio: Share stdin/stdout/stderr with this process instead of
            capturing output as text.
        timeout_seconds: Kill the command after this many seconds.
    """

    argv: tuple[str, ...]
    cwd: Path | None = None
    inherit_stdio: bool = False
    timeout_seconds: float | None = None


@dataclass(frozen=True)
class CommandResult:
    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.timed_out


class CommandRunner(Protocol):
    """Executes requests; ``None`` means the executable was not found."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else ""


class SubprocessCommandRunner:
    """``CommandRunner`` backed by ``subprocess.run``."""

    def _kwargs(self, request: CommandRequest) -> dict[str, object]:
        kwargs: dict[str, object] = {"cwd": request.cwd, "check": False}
        if not request.inherit_stdio:
            kwargs.update(capture_output=True, text=True)
        if request.timeout_seconds is not None:
            kwargs["timeout"] = request.timeout_seconds
        return kwargs

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(list(request.argv), **self._kwargs(request))
        except FileNotFoundError:
            return None
        except subprocess.TimeoutExpired as exc:
            return CommandResult(
                argv=request.argv,
                returncode=TIMEOUT_RETURNCODE,
                stdout=_as_text(exc.stdout),
                stderr=_as_text(exc.stderr),
                timed_out=True,
            )
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=_as_text(completed.stdout),
            stderr=_as_text(completed.stderr),
        )


_DEFAULT_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    return (runner or _DEFAULT_RUNNER).run(request)


def run_inherited(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> int | None:
    """Run a command attached to the terminal and return its exit status.

    Args:
        cmd: Command and arguments to execute.
        cwd: Optional working directory.
        runner: Optional runner override.

    Returns:
        The exit status, or ``None`` when the executable is missing.
    """
    result = run_with_runner(
        CommandRequest(argv=tuple(cmd), cwd=cwd, inherit_stdio=True), runner=runner
    )
    return None if result is None else result.returncode


def capture_stdout(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    timeout_seconds: float | None = None,
    runner: CommandRunner | None = None,
) -> str | None:
    """Return the stripped stdout of a successful command.

    ``None`` covers a missing executable, a non-zero exit and a timeout.
    """
    result = run_with_runner(
        CommandRequest(argv=tuple(cmd), cwd=cwd, timeout_seconds=timeout_seconds),
        runner=runner,
    )
    if result is None or not result.ok:
        return None
    return result.stdout.strip()
