"""Snippet variable substitution.

Placeholders are ``$`` followed by uppercase letters and underscores, e.g.
``$CURRENT_YEAR``. Unknown placeholders are replaced by the empty string.
There is no escaping: any matching token is a placeholder.

Example:
    >>> substitute("export const $TM_FILENAME_BASE = 1;", {"TM_FILENAME_BASE": "Button"})
    'export const Button = 1;'
"""

import re
from collections.abc import Mapping

PLACEHOLDER_PATTERN = re.compile(r"\$([A-Z_]+)")


def substitute(text: str, variables: Mapping[str, str]) -> str:
    """Replace every placeholder in ``text`` with its value (single pass)."""
    return PLACEHOLDER_PATTERN.sub(
        lambda match: variables.get(match.group(1), ""),
        text,
    )


def find_placeholders(text: str) -> list[str]:
    """Return placeholder names referenced by ``text``, in order of appearance."""
    return [match.group(1) for match in PLACEHOLDER_PATTERN.finditer(text)]
