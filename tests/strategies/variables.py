"""Hypothesis strategies for variable trees and path expressions.

Provides reusable strategies for generating navigation test data:
- Legal identifiers and indices per the path grammar
- Malformed segments (neither identifier nor index)
- Recursive variable trees of mappings, sequences and leaves
- Trees paired with a path known to lead to a value

Event-Emitting Strategies (HypoFuzz-Optimized):
- variable_trees: Emits tree_root=mapping|other
- tree_with_path: Emits path_depth=N

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

__all__ = [
    "identifiers",
    "indices",
    "leaf_values",
    "malformed_segments",
    "positional_values",
    "tree_with_path",
    "variable_trees",
]

# Path identifier grammar: [a-zA-Z_$][a-zA-Z0-9_$]*
_ID_FIRST_CHARS = string.ascii_letters + "_$"
_ID_REST_CHARS = string.ascii_letters + string.digits + "_$"


def identifiers() -> SearchStrategy[str]:
    """Generate legal path identifiers."""
    return st.builds(
        lambda first, rest: first + rest,
        st.sampled_from(_ID_FIRST_CHARS),
        st.text(alphabet=_ID_REST_CHARS, max_size=12),
    )


def indices() -> SearchStrategy[str]:
    """Generate legal sequence indices as path segments."""
    return st.integers(min_value=0, max_value=10_000).map(str)


def malformed_segments() -> SearchStrategy[str]:
    """Generate segments that are neither identifiers nor indices.

    Every generated segment contains at least one character outside the
    identifier alphabet (and is not a dot, which would split it).
    """
    bad_chars = "!-+*/ #%&()[]{}<>?'\"=:;@^|~`"
    return st.builds(
        lambda prefix, bad, suffix: prefix + bad + suffix,
        st.text(alphabet=_ID_REST_CHARS, max_size=4),
        st.sampled_from(bad_chars),
        st.text(alphabet=_ID_REST_CHARS + bad_chars, max_size=4),
    )


def leaf_values() -> SearchStrategy[object]:
    """Generate scalar leaves, including None and class descriptors."""
    return st.one_of(
        st.none(),
        st.booleans(),
        st.integers(),
        st.floats(allow_nan=False),
        st.text(max_size=20),
        st.sampled_from([str, int, dict]),
    )


def positional_values() -> SearchStrategy[list[str]]:
    """Generate lists of text values for $1..$n arguments."""
    return st.lists(st.text(max_size=10), max_size=8)


@st.composite
def variable_trees(draw: DrawFn) -> object:
    """Generate recursive variable trees.

    Events emitted:
    - tree_root=mapping|other
    """
    tree = draw(
        st.recursive(
            leaf_values(),
            lambda children: st.one_of(
                st.lists(children, max_size=4),
                st.dictionaries(identifiers(), children, max_size=4),
            ),
            max_leaves=20,
        )
    )
    event(f"tree_root={'mapping' if isinstance(tree, dict) else 'other'}")
    return tree


@st.composite
def tree_with_path(draw: DrawFn) -> tuple[dict[str, object], str, object]:
    """Generate a mapping tree, a path into it, and the value at that path.

    The tree is built outward from the path: each segment gets a container
    of the right kind, so the path is guaranteed to resolve.

    Events emitted:
    - path_depth=N
    """
    depth = draw(st.integers(min_value=1, max_value=5))
    target = draw(leaf_values())
    segments: list[str] = []
    node: object = target
    # Build from the leaf up; the root must be a mapping.
    for level in range(depth):
        use_list = level < depth - 1 and draw(st.booleans())
        if use_list:
            padding = draw(st.lists(leaf_values(), max_size=3))
            position = draw(st.integers(min_value=0, max_value=len(padding)))
            items = [*padding[:position], node, *padding[position:]]
            segments.append(str(position))
            node = items
        else:
            key = draw(identifiers())
            siblings = draw(st.dictionaries(identifiers(), leaf_values(), max_size=3))
            siblings.pop(key, None)
            node = {**siblings, key: node}
            segments.append(key)
    event(f"path_depth={depth}")
    assert isinstance(node, dict)
    return node, ".".join(reversed(segments)), target
