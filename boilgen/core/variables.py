"""Snippet variable resolution.

Builds the fixed set of variables available to templates. All values are
derived from the target directory, the workspace and an injected timestamp,
so the result is deterministic for given inputs.

Path variables treat the entity as a file named after its directory and
placed inside it: for ``/ws/src/Button`` the file path is
``/ws/src/Button/Button``.
"""

import os
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from types import MappingProxyType

VariableSet = Mapping[str, str]

# Closed vocabulary, in documentation order
VARIABLE_NAMES: tuple[str, ...] = (
    "TM_FILENAME",
    "TM_FILENAME_BASE",
    "TM_DIRECTORY",
    "TM_FILEPATH",
    "RELATIVE_FILEPATH",
    "WORKSPACE_NAME",
    "WORKSPACE_FOLDER",
    "CURRENT_YEAR",
    "CURRENT_YEAR_SHORT",
    "CURRENT_MONTH",
    "CURRENT_MONTH_NAME",
    "CURRENT_MONTH_NAME_SHORT",
    "CURRENT_DATE",
    "CURRENT_DAY_NAME",
    "CURRENT_DAY_NAME_SHORT",
    "CURRENT_HOUR",
    "CURRENT_MINUTE",
    "CURRENT_SECOND",
    "CURRENT_SECONDS_UNIX",
    "CURRENT_TIMEZONE_OFFSET",
)


def _relative_to_workspace(file_path: Path, workspace_root: Path | None) -> str:
    start = str(workspace_root) if workspace_root else os.curdir
    try:
        return os.path.relpath(file_path, start)
    except ValueError:
        # Different drives on Windows: no relative form exists
        return str(file_path)


def _path_variables(
    target_dir: Path,
    workspace_root: Path | None,
    workspace_name: str,
) -> dict[str, str]:
    filename = target_dir.name
    file_path = target_dir / filename
    return {
        "TM_FILENAME": filename,
        "TM_FILENAME_BASE": os.path.splitext(filename)[0],
        "TM_DIRECTORY": str(target_dir),
        "TM_FILEPATH": str(file_path),
        "RELATIVE_FILEPATH": _relative_to_workspace(file_path, workspace_root),
        "WORKSPACE_NAME": workspace_name,
        "WORKSPACE_FOLDER": str(workspace_root) if workspace_root else "",
    }


def _time_variables(now: datetime) -> dict[str, str]:
    year = f"{now.year}"
    return {
        "CURRENT_YEAR": year,
        "CURRENT_YEAR_SHORT": year[-2:],
        "CURRENT_MONTH": f"{now.month:02d}",
        "CURRENT_MONTH_NAME": now.strftime("%B"),
        "CURRENT_MONTH_NAME_SHORT": now.strftime("%b"),
        "CURRENT_DATE": f"{now.day:02d}",
        "CURRENT_DAY_NAME": now.strftime("%A"),
        "CURRENT_DAY_NAME_SHORT": now.strftime("%a"),
        "CURRENT_HOUR": f"{now.hour:02d}",
        "CURRENT_MINUTE": f"{now.minute:02d}",
        "CURRENT_SECOND": f"{now.second:02d}",
        "CURRENT_SECONDS_UNIX": str(int(now.timestamp())),
        # '+0200' style; empty for naive datetimes
        "CURRENT_TIMEZONE_OFFSET": now.strftime("%z"),
    }


def resolve_variables(
    target_dir: Path,
    workspace_root: Path | None,
    workspace_name: str,
    now: datetime,
) -> VariableSet:
    """Resolve every variable for one generation run.

    Args:
        target_dir: Directory of the entity being generated.
        workspace_root: Workspace root, or None when there is no workspace.
        workspace_name: Display name of the workspace.
        now: Timestamp shared by every substitution in the run.

    Returns:
        Read-only mapping of variable name to value.

    Example:
        >>> variables = resolve_variables(
        ...     Path("/ws/src/Button"), Path("/ws"), "ws", datetime(2024, 3, 5),
        ... )
        >>> variables["TM_FILENAME_BASE"], variables["CURRENT_MONTH"]
        ('Button', '03')
    """
    values = {
        **_path_variables(target_dir, workspace_root, workspace_name),
        **_time_variables(now),
    }
    return MappingProxyType(values)
