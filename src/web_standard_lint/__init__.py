"""web-standard-lint package metadata.

Exports the package version resolved from the installed distribution.

Example:
    >>> from web_standard_lint import __version__
    >>> isinstance(__version__, str)
    True
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("web-standard-lint")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"
