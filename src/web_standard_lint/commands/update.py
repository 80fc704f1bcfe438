"""Implementation for the ``web-standard-lint update`` command."""

from pathlib import Path

from ..update import check_update


def check_for_update(args: object) -> None:
    """Report whether a newer release of the lint package is published."""
    cwd = getattr(args, "cwd", None)
    check_update(False, cwd=Path(cwd) if cwd else Path.cwd())
