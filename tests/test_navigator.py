"""Tests for dotted path navigation (navigate and get).

Covers the three node kinds (mapping, sequence, leaf), the distinction
between absent data (None / ElementNotFoundError) and malformed paths
(MalformedPathError), and the empty-segment boundaries.
"""

from __future__ import annotations

import pytest

from verbiage import MalformedPathError, get
from verbiage.diagnostics import ElementNotFoundError
from verbiage.runtime import navigate


@pytest.fixture
def tree() -> dict[str, object]:
    """Nested tree of mappings, sequences and leaves."""
    return {
        "a": "b",
        "b": {"c": str, "e": ["a", "b", "c"]},
        "f": (1, "a"),
        "n": None,
        "s": "text",
        "$1": "first",
    }


class TestMappingNavigation:
    """Mappings are indexed by identifiers."""

    def test_single_key(self, tree: dict[str, object]) -> None:
        """Top-level key lookup."""
        assert get(tree, "a") == "b"

    def test_nested_key(self, tree: dict[str, object]) -> None:
        """Nested mapping lookup returns the class object itself."""
        assert get(tree, "b.c") is str

    def test_positional_key(self, tree: dict[str, object]) -> None:
        """Dollar keys are legal identifiers."""
        assert get(tree, "$1") == "first"

    def test_missing_key_is_none(self, tree: dict[str, object]) -> None:
        """A missing final key yields None, not an error."""
        assert get(tree, "z") is None
        assert navigate(tree, "z") is None

    def test_missing_intermediate_key_is_none(self, tree: dict[str, object]) -> None:
        """Descending past a missing key yields None from get()."""
        assert get(tree, "g.b") is None
        assert get(tree, "z.y.x") is None

    def test_missing_intermediate_key_raises_not_found(self, tree: dict[str, object]) -> None:
        """navigate() classifies descending past a missing key as not found."""
        with pytest.raises(ElementNotFoundError) as exc_info:
            navigate(tree, "g.b")
        assert exc_info.value.segment == "b"
        assert exc_info.value.path == "g.b"

    def test_none_value_and_missing_key_are_merged(self, tree: dict[str, object]) -> None:
        """A key mapped to None behaves exactly like a missing key."""
        assert get(tree, "n") is None
        assert get(tree, "n.x") is None
        with pytest.raises(ElementNotFoundError):
            navigate(tree, "n.x")

    def test_descending_into_leaf_is_none(self, tree: dict[str, object]) -> None:
        """Leaves cannot be descended into."""
        assert get(tree, "b.c.d") is None
        assert get(tree, "a.length") is None

    def test_strings_are_leaves(self, tree: dict[str, object]) -> None:
        """Text is a leaf even though it is a sequence of characters."""
        assert get(tree, "s.0") is None

    @pytest.mark.parametrize("path", ["b.!", "!", "a-b", "b.1c", "b. c"])
    def test_illegal_segment_raises(self, tree: dict[str, object], path: str) -> None:
        """Illegal identifiers in a mapping context are malformed."""
        with pytest.raises(MalformedPathError):
            get(tree, path)

    def test_index_into_mapping_is_malformed(self, tree: dict[str, object]) -> None:
        """Digits are not identifiers, so indexing a mapping is malformed."""
        with pytest.raises(MalformedPathError) as exc_info:
            get(tree, "b.0")
        assert exc_info.value.segment == "0"

    def test_malformed_is_value_error(self, tree: dict[str, object]) -> None:
        """MalformedPathError is an invalid-argument signal."""
        with pytest.raises(ValueError, match="Illegal segment"):
            get(tree, "b.!")


class TestSequenceNavigation:
    """Sequences are indexed by non-negative integers."""

    def test_list_index(self, tree: dict[str, object]) -> None:
        """Index into a list."""
        assert get(tree, "b.e.1") == "b"
        assert get(tree, "b.e.0") == "a"

    def test_tuple_index(self, tree: dict[str, object]) -> None:
        """Tuples are sequences too."""
        assert get(tree, "f.0") == 1
        assert get(tree, "f.1") == "a"

    def test_leading_zero_index(self, tree: dict[str, object]) -> None:
        """Indices are parsed as base-10 integers."""
        assert get(tree, "b.e.02") == "c"

    @pytest.mark.parametrize("path", ["b.e.3", "b.e.8", "f.10", "b.e.99999999999999999999"])
    def test_out_of_range_is_none(self, tree: dict[str, object], path: str) -> None:
        """index >= length is not found."""
        assert get(tree, path) is None
        with pytest.raises(ElementNotFoundError):
            navigate(tree, path)

    def test_identifier_index_is_none(self, tree: dict[str, object]) -> None:
        """An identifier is the wrong kind of index: not found, not malformed."""
        assert get(tree, "b.e.f") is None
        assert get(tree, "b.e.length") is None

    @pytest.mark.parametrize("path", ["b.e.!", "b.e.-1", "b.e.+1", "f.1x!"])
    def test_garbage_index_raises(self, tree: dict[str, object], path: str) -> None:
        """Neither integer nor identifier is malformed."""
        with pytest.raises(MalformedPathError):
            get(tree, path)

    def test_element_then_descend(self) -> None:
        """Navigation continues through sequence elements."""
        tree = {"sort": [{"name": "x"}, {"name": "y"}]}
        assert get(tree, "sort.1.name") == "y"

    def test_descend_past_leaf_element(self, tree: dict[str, object]) -> None:
        """A leaf element cannot be descended into."""
        assert get(tree, "b.e.0.x") is None


class TestEmptySegments:
    """Empty segments are kept literally and never trimmed."""

    def test_empty_path_on_mapping_is_malformed(self, tree: dict[str, object]) -> None:
        """The empty path is one empty segment, which is not an identifier."""
        with pytest.raises(MalformedPathError) as exc_info:
            get(tree, "")
        assert exc_info.value.segment == ""

    def test_empty_path_on_sequence_is_malformed(self) -> None:
        """The empty segment is neither an index nor an identifier."""
        with pytest.raises(MalformedPathError):
            get(["a"], "")

    def test_empty_path_on_leaf_is_none(self) -> None:
        """A leaf root cannot be descended into at all."""
        assert get("leaf", "") is None

    def test_trailing_dot_on_mapping_is_malformed(self, tree: dict[str, object]) -> None:
        """'b.' applies an empty segment to the mapping at b."""
        with pytest.raises(MalformedPathError):
            get(tree, "b.")

    def test_trailing_dot_on_leaf_is_none(self, tree: dict[str, object]) -> None:
        """'a.' applies an empty segment to a leaf: not found."""
        assert get(tree, "a.") is None

    def test_leading_dot_is_malformed(self, tree: dict[str, object]) -> None:
        """'.a' applies an empty segment to the root mapping."""
        with pytest.raises(MalformedPathError):
            get(tree, ".a")

    def test_double_dot_is_malformed(self, tree: dict[str, object]) -> None:
        """'b..c' has an empty middle segment."""
        with pytest.raises(MalformedPathError):
            get(tree, "b..c")


class TestNoMutation:
    """Navigation only reads the tree."""

    def test_tree_unchanged(self, tree: dict[str, object]) -> None:
        """Successful and failing lookups leave the tree as it was."""
        snapshot = repr(tree)
        get(tree, "b.e.1")
        get(tree, "z.y")
        with pytest.raises(MalformedPathError):
            get(tree, "b.!")
        assert repr(tree) == snapshot
