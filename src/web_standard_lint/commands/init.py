"""Implementation for the ``web-standard-lint init`` command.

``web-standard-lint init`` adds lint configuration, npm scripts and git
commit hooks to the JavaScript project in the working directory.
"""

import sys
from pathlib import Path

from .. import config
from ..conflict import ConflictResolutionDeclined
from ..io import die, say
from ..models import InitOptions
from ..prompts import DefaultsPrompter, TerminalPrompter
from ..services import (
    InitLintDependencies,
    InitLintRequest,
    InitLintService,
    ServiceFailure,
)


def build_options(args: object) -> InitOptions:
    """Map parsed CLI arguments onto ``InitOptions``."""
    cwd = getattr(args, "cwd", None)
    return InitOptions(
        enable_eslint=getattr(args, "enable_eslint", None),
        eslint_type=getattr(args, "eslint_type", None),
        enable_stylelint=getattr(args, "enable_stylelint", None),
        enable_markdownlint=getattr(args, "enable_markdownlint", None),
        enable_prettier=getattr(args, "enable_prettier", None),
        cwd=Path(cwd).resolve() if cwd else None,
        check_version_update=bool(getattr(args, "check_version_update", False)),
        disable_npm_install=bool(getattr(args, "disable_npm_install", False)),
        rewrite_config=getattr(args, "rewrite_config", None),
    )


def init_lint(args: object) -> None:
    """Initialize lint configuration for the current project.

    Args:
        args: CLI argument object with optional fields such as
            ``eslint_type``, ``enable_stylelint``, ``cwd`` and ``yes``.

    Returns:
        None.

    Example:
        $ web-standard-lint init --eslint-type typescript/react
    """
    yes = bool(getattr(args, "yes", False))
    prompter = DefaultsPrompter() if yes else TerminalPrompter()
    service = InitLintService(InitLintDependencies(prompter=prompter))
    request = InitLintRequest(
        options=build_options(args),
        cwd=Path.cwd(),
        test_mode=config.is_test_mode(),
    )
    try:
        service.run(request)
    except ServiceFailure as exc:
        message = str(exc)
        if exc.recovery_hint:
            message = f"{message}\nhint: {exc.recovery_hint}"
        die(message, code=1)
    except ConflictResolutionDeclined as exc:
        say(f"{exc}; nothing else was changed.")
        sys.exit(0)
