"""Command-line entry point for web-standard-lint."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Optional

import typer

from . import __version__
from . import log as lint_log
from .commands import check_for_update as update_cmd
from .commands import init_lint as init_cmd
from .constants import PKG_NAME, PROJECT_TYPES

app = typer.Typer(
    name=PKG_NAME,
    help="Set up ESLint, Stylelint, Markdownlint and Prettier for a web project.",
    add_completion=False,
    no_args_is_help=True,
)


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in lint_log.LEVEL_NAMES:
        raise typer.BadParameter(f"expected one of: {', '.join(lint_log.LEVEL_NAMES)}")
    return normalized


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        callback=_validate_log_level,
        help="Minimum log level (trace|debug|info|success|warning|error).",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Set up ESLint, Stylelint, Markdownlint and Prettier for a web project."""
    if log_level is not None:
        lint_log.set_level(log_level)
    if no_color:
        lint_log.set_no_color(True)


def _tri_state(enabled: bool, disabled: bool, name: str) -> Optional[bool]:
    """Collapse an enable/disable flag pair into True, False or unset."""
    if enabled and disabled:
        raise typer.BadParameter(f"cannot combine the enable and disable flags for {name}")
    if enabled:
        return True
    if disabled:
        return False
    return None


@app.command("init")
def init(
    eslint_type: Optional[str] = typer.Option(
        None,
        "--eslint-type",
        help="Project type: " + ", ".join(value for _, value in PROJECT_TYPES),
    ),
    enable_eslint: bool = typer.Option(False, "--enable-eslint", help="Configure ESLint."),
    disable_eslint: bool = typer.Option(False, "--disable-eslint", help="Skip ESLint."),
    enable_stylelint: bool = typer.Option(
        False, "--enable-stylelint", help="Configure Stylelint."
    ),
    disable_stylelint: bool = typer.Option(False, "--disable-stylelint", help="Skip Stylelint."),
    enable_markdownlint: bool = typer.Option(
        False, "--enable-markdownlint", help="Configure Markdownlint."
    ),
    disable_markdownlint: bool = typer.Option(
        False, "--disable-markdownlint", help="Skip Markdownlint."
    ),
    enable_prettier: bool = typer.Option(False, "--enable-prettier", help="Configure Prettier."),
    disable_prettier: bool = typer.Option(False, "--disable-prettier", help="Skip Prettier."),
    cwd: Optional[Path] = typer.Option(
        None, "--cwd", help="Project directory (default: current directory)."
    ),
    check_version_update: bool = typer.Option(
        False, "--check-version-update", help="Check for a newer release first."
    ),
    disable_npm_install: bool = typer.Option(
        False, "--disable-npm-install", help=f"Do not install {PKG_NAME}."
    ),
    rewrite_config: bool = typer.Option(
        False, "--rewrite-config", help="Remove conflicting lint config without asking."
    ),
    keep_config: bool = typer.Option(
        False, "--keep-config", help="Stop instead of removing conflicting lint config."
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept every prompt default."),
) -> None:
    """Add lint config, npm scripts and commit hooks to a project."""
    init_cmd(
        SimpleNamespace(
            eslint_type=eslint_type,
            enable_eslint=_tri_state(enable_eslint, disable_eslint, "eslint"),
            enable_stylelint=_tri_state(enable_stylelint, disable_stylelint, "stylelint"),
            enable_markdownlint=_tri_state(
                enable_markdownlint, disable_markdownlint, "markdownlint"
            ),
            enable_prettier=_tri_state(enable_prettier, disable_prettier, "prettier"),
            cwd=cwd,
            check_version_update=check_version_update,
            disable_npm_install=disable_npm_install,
            rewrite_config=_tri_state(rewrite_config, keep_config, "config rewriting"),
            yes=yes,
        )
    )


@app.command("update")
def update(
    cwd: Optional[Path] = typer.Option(
        None, "--cwd", help="Project directory (default: current directory)."
    ),
) -> None:
    """Check whether a newer release is published."""
    update_cmd(SimpleNamespace(cwd=cwd))


if __name__ == "__main__":
    app()
