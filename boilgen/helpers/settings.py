"""Settings lookup and catalog path resolution.

Settings live in an optional ``boilgen.yaml`` at the workspace root (or in
``.vscode/boilgen.yaml``)::

    # boilgen.yaml
    templates_path: tools/templates.json

A relative ``templates_path`` is resolved against the workspace root.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from ruamel.yaml.error import YAMLError

from boilgen.config import (
    CONFIG_DIR_NAME,
    DEFAULT_TEMPLATES_FILE,
    SETTINGS_FILE,
    SETTINGS_TEMPLATES_PATH_KEY,
    TEMPLATES_PATH_ENV,
)
from boilgen.helpers.helpers_logging import print_warning
from boilgen.helpers.yaml_loader import load_yaml_file


@dataclass(frozen=True)
class Settings:
    """User settings for one workspace.

    Attributes:
        templates_path: Optional catalog path override, as written by the user.
        source: Settings file the values came from, if any.
    """

    templates_path: str | None = None
    source: Path | None = None


def get_settings_candidates(workspace_root: Path) -> list[Path]:
    """Return settings file locations in lookup order."""
    return [
        workspace_root / SETTINGS_FILE,
        workspace_root / CONFIG_DIR_NAME / SETTINGS_FILE,
    ]


def load_settings(workspace_root: Path) -> Settings:
    """Load settings from the first settings file found.

    Missing files yield empty settings. Unreadable or non-mapping files are
    reported with a warning and ignored.
    """
    for candidate in get_settings_candidates(workspace_root):
        if not candidate.is_file():
            continue

        try:
            raw = load_yaml_file(candidate)
        except YAMLError as e:
            print_warning(f"Ignoring invalid settings file {candidate}: {e}")
            return Settings(source=candidate)

        if raw is None:
            return Settings(source=candidate)

        if not isinstance(raw, dict):
            print_warning(
                f"Ignoring settings file {candidate}: expected a mapping, "
                + f"got {type(raw).__name__}"
            )
            return Settings(source=candidate)

        data = cast(dict[str, object], raw)
        templates_path = data.get(SETTINGS_TEMPLATES_PATH_KEY)
        if templates_path is not None and not isinstance(templates_path, str):
            print_warning(
                f"Ignoring '{SETTINGS_TEMPLATES_PATH_KEY}' in {candidate}: "
                + "expected a string"
            )
            templates_path = None

        return Settings(templates_path=templates_path or None, source=candidate)

    return Settings()


def get_default_templates_path(workspace_root: Path) -> Path:
    """Return the conventional catalog location for a workspace."""
    return workspace_root / CONFIG_DIR_NAME / DEFAULT_TEMPLATES_FILE


def resolve_templates_path(
    workspace_root: Path,
    override: str | None = None,
    settings: Settings | None = None,
) -> Path:
    """Resolve the full path to the templates catalog.

    Precedence: explicit ``override`` (e.g. ``--catalog``), then the
    ``BOILGEN_TEMPLATES_PATH`` environment variable, then ``templates_path``
    from settings, then ``.vscode/boilgen.templates.json``.

    Args:
        workspace_root: Workspace root directory.
        override: Path given on the command line, if any.
        settings: Loaded settings; loaded from ``workspace_root`` when None.

    Returns:
        Absolute path to the catalog file.
    """
    user_path = override or os.environ.get(TEMPLATES_PATH_ENV)
    if not user_path:
        if settings is None:
            settings = load_settings(workspace_root)
        user_path = settings.templates_path

    if not user_path:
        return get_default_templates_path(workspace_root)

    candidate = Path(user_path).expanduser()
    if candidate.is_absolute():
        return candidate
    return workspace_root / candidate


def is_in_config_dir(path: Path) -> bool:
    """Return True if ``path`` lies inside a conventional config directory."""
    return CONFIG_DIR_NAME in path.parts
