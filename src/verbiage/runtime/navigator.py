"""Dotted path navigation over variable trees.

A variable tree is a nest of mappings and sequences with arbitrary leaf
values. A path such as ``manager.reports.0.lastName`` is split on ``.``
and followed one segment at a time:

    Mapping   segment must be an identifier; missing key yields None
    Sequence  segment must be an index; out of range is not found
    Leaf      cannot be descended into; not found

Empty segments are kept, so ``""`` is one empty segment and ``"a."``
is ``a`` followed by an empty segment.

Two outcomes other than a value are distinguished:

    - MalformedPathError: the segment is garbage (neither identifier nor
      index). A template authoring bug; always surfaced.
    - ElementNotFoundError: the data is absent. An expected outcome;
      ``get()`` turns it into None.

A missing mapping key and a key mapped to None are the same outcome.

Thread Safety:
    Navigation never mutates the tree and keeps no state.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias

from verbiage.constants import PATH_SEPARATOR
from verbiage.core.identifier_validation import is_index, is_valid_identifier
from verbiage.diagnostics import ElementNotFoundError, MalformedPathError

__all__ = ["VariableNode", "get", "navigate"]

VariableNode: TypeAlias = "Mapping[str, VariableNode] | Sequence[VariableNode] | object"
"""Mapping, sequence (other than text), or opaque leaf value."""

# Text types are sequences to collections.abc, but are leaves in a variable tree.
_TEXT_TYPES = (str, bytes, bytearray)


def _as_index(path: str, segment: str) -> int:
    """Convert a segment applied to a sequence into an integer index.

    Raises:
        ElementNotFoundError: Segment is an identifier (a name, not a position)
        MalformedPathError: Segment is neither an index nor an identifier
    """
    if not is_index(segment):
        if not is_valid_identifier(segment):
            raise MalformedPathError(path, segment)
        raise ElementNotFoundError(path, segment)
    return int(segment, 10)


def navigate(root: VariableNode, path: str) -> VariableNode:
    """Follow a dotted path from the root of a variable tree.

    Args:
        root: Variable tree to read from
        path: Dotted path expression

    Returns:
        The value at the end of the path. None when the last segment names
        a missing mapping key.

    Raises:
        MalformedPathError: A segment is illegal for the node it is applied to
        ElementNotFoundError: The path leads through absent data

    Example:
        >>> tree = {"b": {"e": ["a", "b", "c"]}}
        >>> navigate(tree, "b.e.1")
        'b'
        >>> navigate(tree, "b.z") is None
        True
    """
    current: VariableNode = root
    for segment in path.split(PATH_SEPARATOR):
        match current:
            case Mapping():
                if not is_valid_identifier(segment):
                    raise MalformedPathError(path, segment)
                current = current.get(segment)
            case Sequence() if not isinstance(current, _TEXT_TYPES):
                index = _as_index(path, segment)
                if index >= len(current):
                    raise ElementNotFoundError(path, segment)
                current = current[index]
            case _:
                raise ElementNotFoundError(path, segment)
    return current


def get(variables: VariableNode, path: str) -> VariableNode | None:
    """Get the value at a path, or None when there is no such value.

    Absent data is an expected outcome and yields None. An illegal path
    segment is a programming error and is raised.

    Args:
        variables: Variable tree to read from
        path: Dotted path expression

    Returns:
        The value found, or None

    Raises:
        MalformedPathError: A segment is neither a legal identifier nor,
            in a sequence, a legal index (a ValueError)

    Example:
        >>> get({"a": {"b": 1}}, "a.b")
        1
        >>> get({"a": {"b": 1}}, "a.c.d") is None
        True
    """
    try:
        return navigate(variables, path)
    except ElementNotFoundError:
        return None
