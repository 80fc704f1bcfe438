"""Names and fixed choice sets shared across commands."""

from __future__ import annotations

PKG_NAME = "web-standard-lint"
MANIFEST_FILENAME = "package.json"

# (label, value) pairs offered by the project-type prompt.
PROJECT_TYPES: tuple[tuple[str, str], ...] = (
    ("JavaScript project without React, Vue or Node.js", "index"),
    ("TypeScript project without React, Vue or Node.js", "typescript"),
    ("React project (JavaScript)", "react"),
    ("React project (TypeScript)", "typescript/react"),
    ("Vue project (JavaScript)", "vue"),
    ("Vue project (TypeScript)", "typescript/vue"),
    ("Node.js project (JavaScript)", "node"),
    ("Node.js project (TypeScript)", "typescript/node"),
    ("Legacy project using ES5 or earlier", "es5"),
)
PROJECT_TYPE_VALUES = frozenset(value for _, value in PROJECT_TYPES)

SCAN_SCRIPT = f"{PKG_NAME}-scan"
FIX_SCRIPT = f"{PKG_NAME}-fix"
PRE_COMMIT_HOOK = "pre-commit"
COMMIT_MSG_HOOK = "commit-msg"


def is_project_type(value: object) -> bool:
    """Return whether ``value`` names a supported ESLint project type.

    Example:
        >>> is_project_type("typescript/react")
        True
        >>> is_project_type("angular")
        False
    """
    return isinstance(value, str) and value in PROJECT_TYPE_VALUES
