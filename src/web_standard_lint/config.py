"""Environment-driven runtime settings for web-standard-lint commands."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict

ENV_VAR = "WEB_STANDARD_LINT_ENV"
FALLBACK_ENV_VAR = "NODE_ENV"
LOG_LEVEL_ENV_VAR = "WEB_STANDARD_LINT_LOG_LEVEL"
NO_COLOR_ENV_VARS = ("NO_COLOR", "WEB_STANDARD_LINT_NO_COLOR")
TEST_ENVIRONMENT = "test"


class RuntimeSettings(BaseModel):
    """Settings read once from the process environment.

    Attributes:
        environment: Runtime environment name (``test`` enables test mode).
        log_level: Raw log level name, normalized by ``log``.
        no_color: Whether colored output is disabled.
    """

    model_config = ConfigDict(frozen=True)

    environment: str = ""
    log_level: str | None = None
    no_color: bool = False

    @property
    def is_test(self) -> bool:
        return self.environment == TEST_ENVIRONMENT


def load_settings(environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Build runtime settings from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``.

    Returns:
        Parsed ``RuntimeSettings``.

    Example:
        >>> load_settings({"NODE_ENV": "test"}).is_test
        True
        >>> load_settings({"WEB_STANDARD_LINT_ENV": "dev", "NODE_ENV": "test"}).is_test
        False
    """
    env = os.environ if environ is None else environ
    environment = env.get(ENV_VAR) or env.get(FALLBACK_ENV_VAR) or ""
    return RuntimeSettings(
        environment=environment.strip().lower(),
        log_level=env.get(LOG_LEVEL_ENV_VAR),
        no_color=any(bool(env.get(name)) for name in NO_COLOR_ENV_VARS),
    )


def is_test_mode() -> bool:
    """Return whether the current process runs in test mode."""
    return load_settings().is_test
