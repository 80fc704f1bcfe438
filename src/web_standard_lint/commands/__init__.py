"""Command implementations exposed by the web-standard-lint CLI."""

from .init import init_lint
from .update import check_for_update

__all__ = [
    "check_for_update",
    "init_lint",
]
