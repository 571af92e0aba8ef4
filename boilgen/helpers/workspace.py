"""Workspace discovery for the boilgen CLI."""

from pathlib import Path

from boilgen.config import WORKSPACE_MARKERS


def get_workspace_root(start: Path | None = None) -> Path:
    """Get the workspace root directory.

    Searches upwards from ``start`` (default: current working directory) for a
    directory containing a known marker: '.vscode/', '.git/' or 'boilgen.yaml'.
    This allows the tool to work correctly from any subdirectory.

    Returns:
        Path to the workspace root

    Note:
        As a fallback, returns the start directory instead of raising error,
        so a fresh directory can still be used as a workspace.
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        if any((parent / marker).exists() for marker in WORKSPACE_MARKERS):
            return parent

    return current


def get_workspace_name(workspace_root: Path) -> str:
    """Return the display name of a workspace (its directory name)."""
    return workspace_root.name
