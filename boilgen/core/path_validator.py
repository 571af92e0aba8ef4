"""File path fragment validation.

Rejects the characters that are illegal in Windows file names, on every
platform, so catalogs stay portable.
"""

import re

RESERVED_CHARACTERS = '<>:"|?*'

_RESERVED_PATTERN = re.compile(r'[<>:"|?*]')


def is_valid_file_path(value: object) -> bool:
    """Return True if ``value`` is a string free of reserved characters.

    The empty string is valid here; an empty resolved path is rejected when
    files are written.

    Example:
        >>> is_valid_file_path("__tests__/buildName.spec.ts")
        True
        >>> is_valid_file_path("bad:file.ts")
        False
        >>> is_valid_file_path(None)
        False
    """
    return isinstance(value, str) and _RESERVED_PATTERN.search(value) is None
