"""Hypothesis strategies for Verbiage property-based testing.

Usage:
    from tests.strategies import identifiers, variable_trees
    from tests.strategies.variables import tree_with_path
"""

from .variables import (
    identifiers,
    indices,
    leaf_values,
    malformed_segments,
    positional_values,
    tree_with_path,
    variable_trees,
)

__all__ = [
    "identifiers",
    "indices",
    "leaf_values",
    "malformed_segments",
    "positional_values",
    "tree_with_path",
    "variable_trees",
]
