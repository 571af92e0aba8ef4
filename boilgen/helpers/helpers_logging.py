"""Terminal notification helpers for the boilgen CLI."""

from pathlib import Path


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


_quiet = False


def set_quiet(quiet: bool) -> None:
    """Suppress info and success lines. Warnings and errors always print."""
    global _quiet  # noqa: PLW0603
    _quiet = quiet


def is_quiet() -> bool:
    """Return True when info and success output is suppressed."""
    return _quiet


def print_header(msg: str) -> None:
    """Print a header message."""
    if _quiet:
        return
    print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.RESET}")


def print_info(msg: str) -> None:
    """Print an info message."""
    if _quiet:
        return
    print(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    """Print a success message."""
    if _quiet:
        return
    print(f"{Colors.GREEN}✓ {msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print an error message."""
    print(f"{Colors.RED}❌ {msg}{Colors.RESET}")


def print_file_tree(root: Path, files: list[Path]) -> None:
    """Print created files relative to ``root``, one per line."""
    if _quiet:
        return
    print(f"{Colors.BOLD}{root.name}/{Colors.RESET}")
    for file_path in sorted(files):
        try:
            rel = file_path.relative_to(root).as_posix()
        except ValueError:
            rel = str(file_path)
        print(f"  {Colors.DIM}└─{Colors.RESET} {rel}")
