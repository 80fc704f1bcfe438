"""Orchestrate ``web-standard-lint init`` with injectable collaborators."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from pydantic import BaseModel

from .. import conflict, log, npm_type, templates, update
from .. import exec as exec_util
from ..constants import PKG_NAME, PROJECT_TYPES, is_project_type
from ..manifest import (
    PackageManifest,
    add_lint_scripts,
    load_manifest,
    manifest_path,
    set_commit_hooks,
    write_manifest,
)
from ..models import InitOptions, ResolvedConfig
from ..prompts import (
    Prompter,
    StepCounter,
    TerminalPrompter,
    choose_enable_markdownlint,
    choose_enable_prettier,
    choose_enable_stylelint,
    choose_eslint_type,
)
from .errors import ManifestMissingError

_NODE_TYPE_RE = re.compile("node")

CheckUpdate = Callable[[bool, Path], object]
ResolveConflicts = Callable[[Path, bool | None, Prompter], PackageManifest]
RunInstall = Callable[[list[str], Path], int | None]
GenerateTemplates = Callable[[Path, ResolvedConfig], object]


def _default_check_update(silent: bool, cwd: Path) -> object:
    return update.check_update(silent, cwd=cwd)


def _default_run_install(cmd: list[str], cwd: Path) -> int | None:
    return exec_util.run_inherited(cmd, cwd)


@dataclass(frozen=True)
class InitLintDependencies:
    """Collaborators consumed by the init flow."""

    prompter: Prompter = field(default_factory=TerminalPrompter)
    check_update: CheckUpdate = _default_check_update
    resolve_conflicts: ResolveConflicts = conflict.resolve_conflicts
    detect_npm_type: Callable[[], str] = npm_type.detect_npm_type
    run_install: RunInstall = _default_run_install
    generate_templates: GenerateTemplates = templates.generate_templates


class InitLintRequest(BaseModel):
    """Input contract for one init run.

    Attributes:
        options: Caller-supplied init options.
        cwd: Project directory used when ``options.cwd`` is unset.
        test_mode: Skip version checks, conflict handling and installation.
    """

    options: InitOptions
    cwd: Path
    test_mode: bool = False

    @property
    def project_dir(self) -> Path:
        return self.options.cwd or self.cwd


@dataclass(frozen=True)
class InitLintOutcome:
    project_dir: Path
    config: ResolvedConfig
    manifest: PackageManifest
    install_status: int | None
    steps: int


def stylelint_default(eslint_type: str) -> bool:
    """Return the Stylelint prompt default for a project type.

    Example:
        >>> stylelint_default("typescript/node"), stylelint_default("react")
        (False, True)
    """
    return not _NODE_TYPE_RE.search(eslint_type)


class InitLintService:
    """Resolve lint options, patch ``package.json`` and write config files."""

    def __init__(self, dependencies: InitLintDependencies | None = None) -> None:
        self._deps = dependencies or InitLintDependencies()

    def resolve_config(self, options: InitOptions, steps: StepCounter) -> ResolvedConfig:
        """Fill every unset option, prompting in a fixed order."""
        prompter = self._deps.prompter
        enable_eslint = options.enable_eslint if options.enable_eslint is not None else True

        if is_project_type(options.eslint_type):
            eslint_type = str(options.eslint_type)
        else:
            eslint_type = choose_eslint_type(prompter, steps, PROJECT_TYPES)

        if options.enable_stylelint is not None:
            enable_stylelint = options.enable_stylelint
        else:
            enable_stylelint = choose_enable_stylelint(
                prompter, steps, stylelint_default(eslint_type)
            )

        if options.enable_markdownlint is not None:
            enable_markdownlint = options.enable_markdownlint
        else:
            enable_markdownlint = choose_enable_markdownlint(prompter, steps)

        if options.enable_prettier is not None:
            enable_prettier = options.enable_prettier
        else:
            enable_prettier = choose_enable_prettier(prompter, steps)

        return ResolvedConfig(
            enable_eslint=enable_eslint,
            eslint_type=eslint_type,
            enable_stylelint=enable_stylelint,
            enable_markdownlint=enable_markdownlint,
            enable_prettier=enable_prettier,
        )

    def _install(self, cwd: Path, step: int) -> int | None:
        log.step(step, "Installing dependencies")
        npm = self._deps.detect_npm_type()
        status = self._deps.run_install([npm, "i", "-D", PKG_NAME], cwd)
        if status is None:
            log.step_failed(step, f"{npm} was not found; install {PKG_NAME} manually")
        elif status != 0:
            log.step_failed(
                step, f"{npm} exited with status {status}; install {PKG_NAME} manually"
            )
        else:
            log.step_done(step, "Dependencies installed")
        return status

    def run(self, request: InitLintRequest) -> InitLintOutcome:
        """Run the init flow.

        Raises:
            ManifestMissingError: When ``package.json`` is absent.
        """
        options = request.options
        cwd = request.project_dir
        pkg_path = manifest_path(cwd)
        if not pkg_path.exists():
            raise ManifestMissingError(pkg_path)
        # Reject a malformed manifest before prompting.
        load_manifest(pkg_path)
        steps = StepCounter()

        if options.check_version_update and not request.test_mode:
            self._deps.check_update(False, cwd)

        config = self.resolve_config(options, steps)
        log.debug(f"Resolved lint config: {config.model_dump()}")

        install_status: int | None = None
        if not request.test_mode:
            step = steps.next()
            log.step(step, "Checking for conflicting dependencies and config")
            self._deps.resolve_conflicts(cwd, options.rewrite_config, self._deps.prompter)
            log.step_done(step, "Conflicting dependencies and config handled")

            if not options.disable_npm_install:
                install_status = self._install(cwd, steps.next())

        # Collaborators above may have rewritten package.json.
        pkg = load_manifest(pkg_path)
        add_lint_scripts(pkg)

        step = steps.next()
        log.step(step, "Configuring git commit hooks")
        set_commit_hooks(pkg)
        write_manifest(pkg_path, pkg)
        log.step_done(step, "Git commit hooks configured")

        step = steps.next()
        log.step(step, "Writing config files")
        self._deps.generate_templates(cwd, config)
        log.step_done(step, "Config files written")

        log.success(f"{PKG_NAME} initialized :D")
        return InitLintOutcome(
            project_dir=cwd,
            config=config,
            manifest=pkg,
            install_status=install_status,
            steps=steps.current,
        )
