"""Check whether a newer ``web-standard-lint`` release is published."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from . import __version__, log
from .constants import PKG_NAME
from .exec import CommandRunner, capture_stdout

_LOOKUP_TIMEOUT_SECONDS = 10.0
_VERSION_RE = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


@dataclass(frozen=True)
class UpdateCheckResult:
    """Outcome of comparing the local and the published version."""

    current: str
    latest: str
    update_available: bool


def version_key(value: str) -> tuple[int, int, int] | None:
    """Parse the numeric part of a version string.

    Example:
        >>> version_key("v1.10.2-beta.1")
        (1, 10, 2)
        >>> version_key("latest") is None
        True
    """
    match = _VERSION_RE.match(value.strip())
    if not match:
        return None
    major, minor, patch = (int(part or 0) for part in match.groups())
    return major, minor, patch


def installed_version(cwd: Path | None) -> str:
    """Return the version of the bundled package installed in ``cwd``.

    Falls back to this tool's own version when the package is not installed.
    """
    if cwd is not None:
        pkg_json = cwd / "node_modules" / PKG_NAME / "package.json"
        try:
            payload = json.loads(pkg_json.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("version"), str):
            return payload["version"]
    return __version__


def latest_version(*, runner: CommandRunner | None = None) -> str | None:
    """Return the latest published version, or ``None`` when lookup fails."""
    output = capture_stdout(
        ["npm", "view", PKG_NAME, "version"],
        timeout_seconds=_LOOKUP_TIMEOUT_SECONDS,
        runner=runner,
    )
    if not output:
        return None
    latest = output.splitlines()[-1].strip().strip("'\"")
    if version_key(latest) is None:
        return None
    return latest


def check_update(
    silent: bool = False,
    *,
    cwd: Path | None = None,
    runner: CommandRunner | None = None,
) -> UpdateCheckResult | None:
    """Compare the installed version with the published one and report.

    Args:
        silent: Only print a notice when an update exists.
        cwd: Project directory used to find the installed package.
        runner: Optional command runner override.

    Returns:
        The comparison result, or ``None`` when the lookup failed.
    """
    if not silent:
        log.info(log.tagged("checking for the latest version..."))
    latest = latest_version(runner=runner)
    if latest is None:
        if not silent:
            log.warning(log.tagged("unable to fetch the latest version"))
        return None
    current = installed_version(cwd)
    current_key = version_key(current)
    latest_key = version_key(latest)
    available = current_key is not None and latest_key is not None and latest_key > current_key
    if available:
        log.warning(
            log.tagged(
                f"version {latest} is available (current {current}); "
                f"upgrade with: npm i -g {PKG_NAME}@{latest}"
            )
        )
    elif not silent:
        log.success(log.tagged(f"{current} is the latest version :D"))
    return UpdateCheckResult(current=current, latest=latest, update_available=available)
