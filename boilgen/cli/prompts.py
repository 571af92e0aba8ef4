"""Interactive prompts for the generate workflow.

Both prompts return None when the user cancels with an empty answer.
Ctrl-C / EOF raise ``click.Abort``, handled by ``main()``.
"""

import click

from boilgen.helpers.helpers_logging import Colors, print_error, print_warning


def prompt_select(prompt: str, options: list[str]) -> str | None:
    """Pick one of ``options`` by number or by exact name."""
    if not options:
        print_error(f"No options available for: {prompt}")
        return None

    click.echo(f"\n{Colors.CYAN}{prompt}{Colors.RESET}")
    for i, option in enumerate(options, 1):
        click.echo(f"  {i}. {option}")

    while True:
        choice = click.prompt(
            f"Select (1-{len(options)}, empty to cancel)",
            default="",
            show_default=False,
        ).strip()
        if not choice:
            return None
        if choice in options:
            return choice
        if choice.isdigit():
            idx = int(choice) - 1
            if 0 <= idx < len(options):
                return options[idx]
        print_warning(f"Please enter a number between 1 and {len(options)}")


def prompt_text(prompt: str, placeholder: str = "") -> str | None:
    """Ask for a free-text value."""
    hint = f" (e.g. {placeholder})" if placeholder else ""
    value = click.prompt(f"{prompt}{hint}", default="", show_default=False).strip()
    return value or None
