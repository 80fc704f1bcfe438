"""Pydantic models for init options and the resolved lint configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class InitOptions(BaseModel):
    """Caller-supplied options for ``web-standard-lint init``.

    Unset values (``None``) are resolved interactively. Toggle fields that
    are not real booleans are treated as unset, and ``eslint_type`` is only
    checked against the supported project types by the init flow.

    Attributes:
        enable_eslint: Whether ESLint is configured (defaults to enabled).
        eslint_type: ESLint project type value, e.g. ``typescript/react``.
        enable_stylelint: Whether Stylelint is configured.
        enable_markdownlint: Whether Markdownlint is configured.
        enable_prettier: Whether Prettier is configured.
        cwd: Project directory holding ``package.json``.
        check_version_update: Check for a newer release before prompting.
        disable_npm_install: Skip installing the bundled package.
        rewrite_config: Remove conflicting config without asking (``True``),
            refuse (``False``) or ask (``None``).

    Example:
        >>> InitOptions(enable_prettier="yes").enable_prettier is None
        True
    """

    model_config = ConfigDict(frozen=True)

    enable_eslint: bool | None = None
    eslint_type: str | None = None
    enable_stylelint: bool | None = None
    enable_markdownlint: bool | None = None
    enable_prettier: bool | None = None
    cwd: Path | None = None
    check_version_update: bool = False
    disable_npm_install: bool = False
    rewrite_config: bool | None = None

    @field_validator(
        "enable_eslint",
        "enable_stylelint",
        "enable_markdownlint",
        "enable_prettier",
        "rewrite_config",
        mode="before",
    )
    @classmethod
    def drop_non_bool(cls, value: object) -> object:
        if isinstance(value, bool):
            return value
        return None

    @field_validator("check_version_update", "disable_npm_install", mode="before")
    @classmethod
    def coerce_flag(cls, value: object) -> object:
        return value is True


class ResolvedConfig(BaseModel):
    """Concrete lint configuration driving template generation.

    Example:
        >>> ResolvedConfig(eslint_type="node").enable_stylelint
        True
    """

    enable_eslint: bool = True
    eslint_type: str = "index"
    enable_stylelint: bool = True
    enable_markdownlint: bool = True
    enable_prettier: bool = True
