"""Shared fixtures for the boilgen test suite.

Provides an isolated ``workspace`` directory (cwd is switched into it), a
``write_catalog`` factory, and a fixed timestamp so time variables are
deterministic.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from boilgen.config import TEMPLATES_PATH_ENV
from boilgen.helpers.helpers_logging import set_quiet

WriteCatalog = Callable[..., Path]

# Tuesday 5 March 2024, 14:07:09 at UTC+02:00
FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone(timedelta(hours=2)))
FIXED_NOW_UNIX = 1709640429

BUTTON_CATALOG: dict[str, object] = {
    "Component": {
        "default": {
            "$TM_FILENAME_BASE.tsx": ["export const $TM_FILENAME_BASE = 1;"],
        },
    },
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_quiet() -> Iterator[None]:
    """Each test starts with normal (non-quiet) output."""
    set_quiet(False)
    yield
    set_quiet(False)


@pytest.fixture(autouse=True)
def _no_catalog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore a catalog override set in the developer's shell."""
    monkeypatch.delenv(TEMPLATES_PATH_ENV, raising=False)


@pytest.fixture()
def fixed_now() -> datetime:
    """Timestamp shared by time-variable assertions."""
    return FIXED_NOW


@pytest.fixture()
def fixed_now_unix() -> int:
    """Unix seconds of ``fixed_now``."""
    return FIXED_NOW_UNIX


@pytest.fixture()
def button_catalog() -> dict[str, object]:
    """Single-file catalog producing ``<Name>/<Name>.tsx``."""
    return json.loads(json.dumps(BUTTON_CATALOG))


@pytest.fixture()
def workspace(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated workspace (with ``.vscode/``) and cd into it.

    Yields:
        Path to the workspace root.
    """
    root = tmp_path / "workspace"
    (root / ".vscode").mkdir(parents=True)

    original_cwd = Path.cwd()
    os.chdir(root)
    try:
        yield root
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def write_catalog(workspace: Path) -> WriteCatalog:
    """Return a helper that writes a catalog file into the workspace.

    Usage in tests::

        path = write_catalog({"Component": {...}})
        path = write_catalog("{not json", name="broken.json")

    Strings are written verbatim; anything else is JSON-encoded. The default
    location is ``.vscode/boilgen.templates.json``.
    """

    def _write(content: object, name: str = ".vscode/boilgen.templates.json") -> Path:
        path = workspace / name
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
