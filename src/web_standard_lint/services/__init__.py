from .errors import ManifestMissingError, ServiceFailure, ValidationFailedError
from .init_lint import (
    InitLintDependencies,
    InitLintOutcome,
    InitLintRequest,
    InitLintService,
)

__all__ = [
    "InitLintDependencies",
    "InitLintOutcome",
    "InitLintRequest",
    "InitLintService",
    "ManifestMissingError",
    "ServiceFailure",
    "ValidationFailedError",
]
