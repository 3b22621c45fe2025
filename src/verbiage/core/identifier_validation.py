"""Identifier and index validation for the path micro-language.

Path segments are checked against two grammars:

Identifier (mapping keys):
    [a-zA-Z_$][a-zA-Z0-9_$]*

    - Start: ASCII letter, underscore or dollar sign
    - Continue: ASCII letter, ASCII digit, underscore or dollar sign
    - The dollar sign is legal so positional keys ($1, $2) are addressable

Index (sequence positions):
    [0-9]+

    - Base-10, ASCII digits only, no sign

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import re

__all__ = [
    "is_index",
    "is_valid_identifier",
]

_IDENTIFIER_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z_$][a-zA-Z0-9_$]*")
_INDEX_PATTERN: re.Pattern[str] = re.compile(r"[0-9]+")


def is_valid_identifier(name: str) -> bool:
    """Check whether a path segment is a legal bare identifier.

    Args:
        name: Path segment to validate

    Returns:
        True if the segment may be used as a mapping key in a path

    Example:
        >>> is_valid_identifier("lastName")
        True
        >>> is_valid_identifier("$1")
        True
        >>> is_valid_identifier("1st")
        False
        >>> is_valid_identifier("")
        False
    """
    return _IDENTIFIER_PATTERN.fullmatch(name) is not None


def is_index(name: str) -> bool:
    """Check whether a path segment is a non-negative base-10 integer.

    str.isdigit() is not used: it accepts non-ASCII digits such as '²'.

    Example:
        >>> is_index("0")
        True
        >>> is_index("-1")
        False
        >>> is_index("٣")
        False
    """
    return _INDEX_PATTERN.fullmatch(name) is not None
