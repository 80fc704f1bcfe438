"""Template loading and rendering for the lint config files written by init."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Mapping

from . import log
from .constants import PKG_NAME
from .models import ResolvedConfig

ESLINT_TEMPLATES = ("_eslintrc.js", "_eslintignore")
STYLELINT_TEMPLATES = ("_stylelintrc.js", "_stylelintignore")
MARKDOWNLINT_TEMPLATES = ("_markdownlint.json", "_markdownlintignore")
PRETTIER_TEMPLATES = ("_prettierrc.js",)

VSCODE_DIRNAME = ".vscode"
ESLINT_VALIDATE = ("javascript", "javascriptreact", "typescript", "typescriptreact")
STYLELINT_VALIDATE = ("css", "less", "scss", "sass")


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Render a template using a simple {{ key }} substitution.

    Example:
        >>> render_template("extends {{ pkg_name }}", {"pkg_name": "x"})
        'extends x'
    """
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace(f"{{{{ {key} }}}}", value)
    return rendered


def read_template(name: str) -> str:
    """Read a bundled template file from the package."""
    return (
        resources.files("web_standard_lint")
        .joinpath("templates")
        .joinpath(name)
        .read_text(encoding="utf-8")
    )


def output_name(template_name: str) -> str:
    """Map a template file name to the dotfile it is written as.

    Example:
        >>> output_name("_eslintrc.js")
        '.eslintrc.js'
    """
    if template_name.startswith("_"):
        return "." + template_name[1:]
    return template_name


def _extends_block(entries: list[str]) -> str:
    return "\n".join(f"    '{entry}'," for entry in entries)


def template_variables(config: ResolvedConfig) -> dict[str, str]:
    """Build the substitution variables for ``config``."""
    return {
        "pkg_name": PKG_NAME,
        "eslint_extends": _extends_block(eslint_extends(config)),
        "stylelint_extends": _extends_block(stylelint_extends(config)),
    }


def eslint_extends(config: ResolvedConfig) -> list[str]:
    """Return the shareable ESLint configs for ``config``.

    Example:
        >>> eslint_extends(ResolvedConfig(eslint_type="typescript/vue"))
        ['web-standard-lint/eslint/typescript/vue', 'web-standard-lint/eslint/prettier']
    """
    entries = [f"{PKG_NAME}/eslint/{config.eslint_type}"]
    if config.enable_prettier:
        entries.append(f"{PKG_NAME}/eslint/prettier")
    return entries


def stylelint_extends(config: ResolvedConfig) -> list[str]:
    entries = [f"{PKG_NAME}/stylelint"]
    if config.enable_prettier:
        entries.append(f"{PKG_NAME}/stylelint/prettier")
    return entries


def enabled_templates(config: ResolvedConfig) -> list[str]:
    """Return the template names written for ``config``.

    Example:
        >>> enabled_templates(
        ...     ResolvedConfig(enable_stylelint=False, enable_markdownlint=False)
        ... )
        ['_eslintrc.js', '_eslintignore', '_prettierrc.js']
    """
    names: list[str] = []
    if config.enable_eslint:
        names.extend(ESLINT_TEMPLATES)
    if config.enable_stylelint:
        names.extend(STYLELINT_TEMPLATES)
    if config.enable_markdownlint:
        names.extend(MARKDOWNLINT_TEMPLATES)
    if config.enable_prettier:
        names.extend(PRETTIER_TEMPLATES)
    return names


def vscode_settings(config: ResolvedConfig) -> dict[str, object]:
    """Editor settings matching the enabled linters."""
    settings: dict[str, object] = {"editor.formatOnSave": config.enable_prettier}
    if config.enable_prettier:
        settings["editor.defaultFormatter"] = "esbenp.prettier-vscode"
    actions: dict[str, str] = {}
    if config.enable_eslint:
        actions["source.fixAll.eslint"] = "explicit"
        settings["eslint.validate"] = list(ESLINT_VALIDATE)
    if config.enable_stylelint:
        actions["source.fixAll.stylelint"] = "explicit"
        settings["stylelint.validate"] = list(STYLELINT_VALIDATE)
    if config.enable_markdownlint:
        actions["source.fixAll.markdownlint"] = "explicit"
    if actions:
        settings["editor.codeActionsOnSave"] = actions
    return settings


def vscode_extensions(config: ResolvedConfig) -> dict[str, object]:
    """Recommended editor extensions matching the enabled linters."""
    recommendations: list[str] = []
    if config.enable_eslint:
        recommendations.append("dbaeumer.vscode-eslint")
    if config.enable_stylelint:
        recommendations.append("stylelint.vscode-stylelint")
    if config.enable_markdownlint:
        recommendations.append("DavidAnson.vscode-markdownlint")
    if config.enable_prettier:
        recommendations.append("esbenp.prettier-vscode")
    return {"recommendations": recommendations}


def merge_json_settings(
    existing: Mapping[str, object], generated: Mapping[str, object]
) -> dict[str, object]:
    """Merge generated editor JSON into an existing document.

    Existing scalar values win, nested objects merge recursively and lists
    are unioned in order.

    Example:
        >>> merge_json_settings(
        ...     {"a": 1, "l": ["x"], "d": {"k": 1}},
        ...     {"a": 2, "l": ["x", "y"], "d": {"j": 2}, "b": 3},
        ... )
        {'a': 1, 'l': ['x', 'y'], 'd': {'k': 1, 'j': 2}, 'b': 3}
    """
    merged: dict[str, object] = dict(existing)
    for key, value in generated.items():
        current = merged.get(key)
        if key not in merged:
            merged[key] = value
        elif isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_json_settings(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = current + [item for item in value if item not in current]
    return merged


def _write_vscode_json(path: Path, generated: Mapping[str, object]) -> bool:
    existing: object = {}
    if path.exists():
        try:
            existing = json.loads(path.read_text(encoding="utf-8"))
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError both subclass ValueError.
            existing = None
        if not isinstance(existing, dict):
            log.warning(f"Left {path.parent.name}/{path.name} untouched: it is not a JSON object")
            return False
    payload = merge_json_settings(existing, generated)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return True


def generate_templates(cwd: Path, config: ResolvedConfig) -> list[Path]:
    """Write lint config files for ``config`` into ``cwd``.

    Args:
        cwd: Project directory.
        config: Resolved lint configuration.

    Returns:
        Paths written, in write order.
    """
    variables = template_variables(config)
    written: list[Path] = []
    for name in enabled_templates(config):
        target = cwd / output_name(name)
        target.write_text(render_template(read_template(name), variables), encoding="utf-8")
        log.debug(f"Wrote {target.name}")
        written.append(target)

    vscode_dir = cwd / VSCODE_DIRNAME
    for filename, generated in (
        ("settings.json", vscode_settings(config)),
        ("extensions.json", vscode_extensions(config)),
    ):
        target = vscode_dir / filename
        if _write_vscode_json(target, generated):
            written.append(target)
    return written
