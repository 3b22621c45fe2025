"""Parser for ``.properties`` template bundles.

Bundles are stored in the line-oriented ``.properties`` format::

    # comment
    ! also a comment
    none = Hello.
    one: b.c~Hello, %s.
    two   b.c,a~Hello, %s, %s.
    long = first part \\
           second part
    unicode = caf\\u00e9

Rules:
    - Blank lines and lines whose first non-blank character is ``#`` or
      ``!`` are ignored
    - A line ending in an odd number of backslashes continues on the next
      line; leading whitespace of the continuation is dropped
    - The key ends at the first unescaped ``=``, ``:`` or whitespace; the
      separator may be surrounded by whitespace
    - Escapes: ``\\t \\n \\r \\f \\uXXXX``; any other escaped character
      stands for itself
    - Trailing whitespace of a value is kept; later duplicates win

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["parse_properties"]

_WHITESPACE = " \t\f"
_KEY_TERMINATORS = "=:"
_COMMENT_STARTS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _ends_with_continuation(line: str) -> bool:
    """Check for an odd number of trailing backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> list[str]:
    """Join continued physical lines into logical lines."""
    lines: list[str] = []
    pending: str | None = None
    for physical in text.splitlines():
        line = physical.lstrip(_WHITESPACE) if pending is not None else physical
        if pending is None:
            stripped = line.lstrip(_WHITESPACE)
            if not stripped or stripped[0] in _COMMENT_STARTS:
                continue
        if _ends_with_continuation(line):
            pending = (pending or "") + line[:-1]
            continue
        lines.append((pending or "") + line)
        pending = None
    if pending is not None:
        lines.append(pending)
    return lines


def _unescape(raw: str) -> str:
    """Replace backslash escapes in a key or value.

    Raises:
        ValueError: Malformed \\uXXXX escape
    """
    if "\\" not in raw:
        return raw
    chars: list[str] = []
    pos = 0
    length = len(raw)
    while pos < length:
        ch = raw[pos]
        if ch != "\\" or pos + 1 == length:
            chars.append(ch)
            pos += 1
            continue
        escaped = raw[pos + 1]
        if escaped == "u":
            digits = raw[pos + 2 : pos + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                msg = f"Malformed \\uXXXX escape: {raw[pos : pos + 6]!r}"
                raise ValueError(msg)
            chars.append(chr(int(digits, 16)))
            pos += 6
            continue
        chars.append(_ESCAPES.get(escaped, escaped))
        pos += 2
    return "".join(chars)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw key and raw value."""
    line = line.lstrip(_WHITESPACE)
    pos = 0
    length = len(line)
    while pos < length:
        ch = line[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch in _KEY_TERMINATORS or ch in _WHITESPACE:
            break
        pos += 1
    key = line[:pos]
    # Skip whitespace, at most one '=' or ':', then whitespace again
    while pos < length and line[pos] in _WHITESPACE:
        pos += 1
    if pos < length and line[pos] in _KEY_TERMINATORS:
        pos += 1
    while pos < length and line[pos] in _WHITESPACE:
        pos += 1
    return key, line[pos:]


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``.properties`` text into a key to value dictionary.

    Args:
        text: File contents

    Returns:
        Entries in file order; later duplicates replace earlier ones

    Raises:
        ValueError: A malformed \\uXXXX escape

    Example:
        >>> parse_properties("a = x\\n# c\\nb: y~%s")
        {'a': 'x', 'b': 'y~%s'}
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        entries[_unescape(raw_key)] = _unescape(raw_value)
    return entries
