"""Read, update and write the host project's ``package.json``."""

from __future__ import annotations

import json
from pathlib import Path

from .constants import (
    COMMIT_MSG_HOOK,
    FIX_SCRIPT,
    MANIFEST_FILENAME,
    PKG_NAME,
    PRE_COMMIT_HOOK,
    SCAN_SCRIPT,
)

PackageManifest = dict[str, object]


def manifest_path(cwd: Path) -> Path:
    """Return the manifest path for a project directory.

    Example:
        >>> manifest_path(Path("/repo")).as_posix()
        '/repo/package.json'
    """
    return cwd / MANIFEST_FILENAME


def load_manifest(path: Path) -> PackageManifest:
    """Parse a manifest file.

    Args:
        path: Path to ``package.json``.

    Returns:
        The parsed JSON object with key order preserved.

    Raises:
        ValueError: When the file does not hold a JSON object.
    """
    with path.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    if not isinstance(payload, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return payload


def write_manifest(path: Path, payload: PackageManifest) -> None:
    """Write a manifest as 2-space-indented UTF-8 JSON."""
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)
        fh.write("\n")


def _ensure_mapping(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key)
    if not isinstance(value, dict):
        value = {}
        payload[key] = value
    return value


def add_lint_scripts(payload: PackageManifest) -> PackageManifest:
    """Add the scan/fix scripts, keeping any existing entries.

    Example:
        >>> pkg = {"scripts": {"web-standard-lint-scan": "custom"}}
        >>> add_lint_scripts(pkg)["scripts"]
        {'web-standard-lint-scan': 'custom', 'web-standard-lint-fix': 'web-standard-lint fix'}
    """
    scripts = _ensure_mapping(payload, "scripts")
    if not scripts.get(SCAN_SCRIPT):
        scripts[SCAN_SCRIPT] = f"{PKG_NAME} scan"
    if not scripts.get(FIX_SCRIPT):
        scripts[FIX_SCRIPT] = f"{PKG_NAME} fix"
    return payload


def set_commit_hooks(payload: PackageManifest) -> PackageManifest:
    """Point the husky ``pre-commit`` and ``commit-msg`` hooks at the scanner.

    Existing hook commands are replaced.

    Example:
        >>> set_commit_hooks({})["husky"]["hooks"]["commit-msg"]
        'web-standard-lint commit-msg-scan'
    """
    husky = _ensure_mapping(payload, "husky")
    hooks = _ensure_mapping(husky, "hooks")
    hooks[PRE_COMMIT_HOOK] = f"{PKG_NAME} commit-file-scan"
    hooks[COMMIT_MSG_HOOK] = f"{PKG_NAME} commit-msg-scan"
    return payload
