"""Detect which package manager installs the bundled lint package."""

from __future__ import annotations

import shutil


def detect_npm_type() -> str:
    """Return ``pnpm`` when it is on ``PATH``, otherwise ``npm``."""
    if shutil.which("pnpm"):
        return "pnpm"
    return "npm"
