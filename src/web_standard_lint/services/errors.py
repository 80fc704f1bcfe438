"""Service failure contracts.

Services return typed outcomes on success and raise ServiceFailure on expected
user-facing failures. Programmer bugs and collaborator errors raise normal
exceptions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

ServiceFailureCode = Literal["validation_failed"]


class ServiceFailure(Exception):
    """Expected service failure: validation or precondition error.

    Callers catch ServiceFailure and handle it per interface (the CLI prints
    the message and exits non-zero).
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Validation failed (invalid input, missing precondition)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class ManifestMissingError(ValidationFailedError):
    """The project directory has no ``package.json``."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"{path} does not exist",
            recovery_hint=(
                "run the command from the root of an initialized React/Vue/Node.js "
                "project, or pass --cwd"
            ),
        )
        self.path = path
