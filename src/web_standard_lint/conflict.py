"""Find and remove lint dependencies and config that clash with the bundle.

The bundled package ships its own ESLint, Stylelint, Markdownlint and
Prettier setup, so project-level copies of those tools, their config files
and their ``package.json`` sections are removed once the operator agrees.
"""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass
from pathlib import Path

from . import log
from .constants import PKG_NAME
from .manifest import PackageManifest, load_manifest, manifest_path, write_manifest
from .prompts import Prompter, TerminalPrompter

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")
MANIFEST_CONFIG_KEYS = ("eslintConfig", "stylelint", "markdownlint", "prettier")

_CONFLICT_PACKAGE_RE = re.compile(
    r"^(eslint|stylelint|markdownlint|prettier|tslint)(-.+)?$"
    r"|^@typescript-eslint/.+$"
    r"|^babel-eslint$"
    r"|^@babel/eslint-parser$"
)
CONFIG_FILE_PATTERNS = (
    ".eslintrc*",
    "eslint.config.*",
    ".eslintignore",
    ".stylelintrc*",
    "stylelint.config.*",
    ".stylelintignore",
    ".markdownlint*",
    ".markdownlintignore",
    ".prettierrc*",
    "prettier.config.*",
    ".prettierignore",
    "tslint.*",
)


class ConflictResolutionDeclined(Exception):
    """Raised when the operator refuses to remove conflicting config."""


@dataclass(frozen=True)
class ConflictReport:
    """Conflicts found in a project before anything is removed."""

    packages: tuple[str, ...]
    config_files: tuple[Path, ...]
    manifest_keys: tuple[str, ...]

    @property
    def empty(self) -> bool:
        return not (self.packages or self.config_files or self.manifest_keys)

    def describe(self, cwd: Path) -> list[str]:
        lines: list[str] = []
        if self.packages:
            lines.append("Dependencies to remove: " + ", ".join(self.packages))
        if self.config_files:
            names = ", ".join(path.relative_to(cwd).as_posix() for path in self.config_files)
            lines.append("Config files to delete: " + names)
        if self.manifest_keys:
            lines.append("package.json fields to remove: " + ", ".join(self.manifest_keys))
        return lines


def is_conflicting_package(name: str) -> bool:
    """Return whether a dependency clashes with the bundled lint stack.

    Example:
        >>> is_conflicting_package("eslint-plugin-react")
        True
        >>> is_conflicting_package("@typescript-eslint/parser")
        True
        >>> is_conflicting_package("web-standard-lint")
        False
        >>> is_conflicting_package("react")
        False
    """
    if name == PKG_NAME:
        return False
    return bool(_CONFLICT_PACKAGE_RE.match(name))


def find_conflicts(cwd: Path, pkg: PackageManifest) -> ConflictReport:
    """Collect conflicting dependencies, config files and manifest keys."""
    packages: list[str] = []
    for section in DEPENDENCY_SECTIONS:
        deps = pkg.get(section)
        if not isinstance(deps, dict):
            continue
        for name in deps:
            if is_conflicting_package(name) and name not in packages:
                packages.append(name)

    config_files = sorted(
        entry
        for entry in cwd.iterdir()
        if entry.is_file()
        and any(fnmatch.fnmatch(entry.name, pattern) for pattern in CONFIG_FILE_PATTERNS)
    )
    manifest_keys = [key for key in MANIFEST_CONFIG_KEYS if key in pkg]
    return ConflictReport(
        packages=tuple(packages),
        config_files=tuple(config_files),
        manifest_keys=tuple(manifest_keys),
    )


def remove_conflicts(pkg: PackageManifest, report: ConflictReport) -> PackageManifest:
    """Drop conflicting dependencies and config keys from ``pkg`` in place."""
    for section in DEPENDENCY_SECTIONS:
        deps = pkg.get(section)
        if not isinstance(deps, dict):
            continue
        for name in report.packages:
            deps.pop(name, None)
    for key in report.manifest_keys:
        pkg.pop(key, None)
    return pkg


def resolve_conflicts(
    cwd: Path,
    rewrite_config: bool | None = None,
    prompter: Prompter | None = None,
) -> PackageManifest:
    """Remove conflicting lint setup from a project and return its manifest.

    Args:
        cwd: Project directory holding ``package.json``.
        rewrite_config: ``True`` removes without asking, ``False`` refuses and
            ``None`` asks the operator.
        prompter: Prompt provider used when asking.

    Returns:
        The manifest after removal, as written to disk.

    Raises:
        ConflictResolutionDeclined: When conflicts exist and removal is
            refused.
    """
    path = manifest_path(cwd)
    pkg = load_manifest(path)
    report = find_conflicts(cwd, pkg)
    if report.empty:
        log.debug("No conflicting lint dependencies or config found")
        return pkg

    for line in report.describe(cwd):
        log.warning(line)
    if rewrite_config is None:
        active = prompter or TerminalPrompter()
        accepted = active.confirm(
            "The items above conflict with the bundled lint setup. Remove them and continue?",
            default=True,
        )
    else:
        accepted = rewrite_config
    if not accepted:
        raise ConflictResolutionDeclined("Conflicting lint configuration was kept")

    for config_file in report.config_files:
        config_file.unlink()
        log.debug(f"Deleted {config_file.name}")
    remove_conflicts(pkg, report)
    write_manifest(path, pkg)
    return pkg
