from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parent
PACKAGE = ROOT / "src" / "web_standard_lint"

DOCTEST_MODULES = {
    PACKAGE / "__init__.py",
    PACKAGE / "config.py",
    PACKAGE / "conflict.py",
    PACKAGE / "constants.py",
    PACKAGE / "io.py",
    PACKAGE / "log.py",
    PACKAGE / "manifest.py",
    PACKAGE / "models.py",
    PACKAGE / "prompts.py",
    PACKAGE / "templates.py",
    PACKAGE / "update.py",
    PACKAGE / "services" / "init_lint.py",
}


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
