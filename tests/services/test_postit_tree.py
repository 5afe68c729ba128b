"""
Unit tests for Postit Tree
==========================

Tests insert, update and cascading delete on the postit forest, plus the
traversal helpers.

@author lycosa9527
@made_by MindSpring Team
"""

import sys

import pytest

from models import Coordinate, Postit, PostitPatch, Tag
from services.exceptions import DuplicatePostitIdError
from services.postit_tree import (
    Found,
    NotFound,
    all_coordinates,
    assert_unique_ids,
    collect_subtree_ids,
    count_postits,
    delete_by_id,
    find_by_id,
    find_duplicate_ids,
    insert_under_parent,
    iter_postits,
    update_by_id,
)


def ids(forest):
    return [postit.id for postit in iter_postits(forest)]


class TestInsertUnderParent:
    """Test inserting under a parent."""

    def test_insert_appends_to_nested_parent(self, forest, postit_factory):
        """New node becomes the last child of its parent."""
        new_node = postit_factory("x")

        result = insert_under_parent(forest, "b", new_node)

        assert isinstance(result, Found)
        assert result.node is new_node
        parent = find_by_id(result.forest, "b")
        assert [child.id for child in parent.children] == ["d", "e", "x"]
        assert count_postits(result.forest) == count_postits(forest) + 1

    def test_insert_under_top_level_parent(self, forest, postit_factory):
        result = insert_under_parent(forest, "g", postit_factory("x"))

        assert [child.id for child in result.forest[1].children] == ["x"]

    def test_insert_does_not_mutate_input(self, forest, postit_factory):
        before = ids(forest)

        insert_under_parent(forest, "f", postit_factory("x"))

        assert ids(forest) == before
        assert find_by_id(forest, "x") is None

    def test_untouched_siblings_are_shared(self, forest, postit_factory):
        """Only the path to the parent is rebuilt."""
        result = insert_under_parent(forest, "d", postit_factory("x"))

        assert result.forest[1] is forest[1]
        assert result.forest[0].children[1] is forest[0].children[1]

    def test_insert_missing_parent(self, forest, postit_factory):
        result = insert_under_parent(forest, "missing", postit_factory("x"))

        assert isinstance(result, NotFound)
        assert not result.found
        assert ids(result.forest) == ids(forest)

    def test_insert_into_empty_forest(self, postit_factory):
        result = insert_under_parent([], "a", postit_factory("x"))

        assert not result.found
        assert result.forest == []

    def test_insert_targets_first_preorder_match(self, postit_factory):
        """With a repeated id, only the first pre-order occurrence is used."""
        forest = [
            postit_factory("p", [postit_factory("dup")]),
            postit_factory("dup"),
        ]

        result = insert_under_parent(forest, "dup", postit_factory("x"))

        assert [child.id for child in result.forest[0].children[0].children] == ["x"]
        assert result.forest[1].children == []


class TestUpdateById:
    """Test updating one postit."""

    def test_update_replaces_content_and_tags_only(self, forest):
        patch = PostitPatch(content="Nuevo texto", tags=[Tag(name="Idea", color="#00AA00")])
        original = find_by_id(forest, "a")

        result = update_by_id(forest, "a", patch)

        updated = result.node
        assert result.found
        assert updated.content == "Nuevo texto"
        assert [tag.name for tag in updated.tags] == ["Idea"]
        assert updated.id == original.id
        assert updated.dimension == original.dimension
        assert updated.section == original.section
        assert updated.coordinates == original.coordinates
        assert updated.children == original.children

    def test_update_nested_leaves_others_equal(self, forest):
        """Every other node is structurally unchanged."""
        result = update_by_id(forest, "e", PostitPatch(content="changed"))

        assert find_by_id(result.forest, "e").content == "changed"
        assert ids(result.forest) == ids(forest)
        for postit_id in ["d", "f", "g"]:
            assert find_by_id(result.forest, postit_id) == find_by_id(forest, postit_id)
        assert find_by_id(forest, "e").content == "Postit e"

    def test_update_missing(self, forest):
        result = update_by_id(forest, "missing", PostitPatch(content="x"))

        assert not result.found
        assert result.forest == forest

    def test_patch_requires_content(self):
        with pytest.raises(ValueError):
            PostitPatch(content="")


class TestDeleteById:
    """Test cascading delete."""

    def test_delete_removes_whole_subtree(self, forest):
        """Deleting a node with N descendants removes N + 1 postits."""
        result = delete_by_id(forest, "b")

        assert result.found
        assert result.node.id == "b"
        assert count_postits(result.forest) == count_postits(forest) - 3
        for postit_id in ["b", "d", "e"]:
            assert find_by_id(result.forest, postit_id) is None
        # Children are not promoted
        assert [child.id for child in result.forest[0].children] == ["c"]

    def test_delete_top_level(self, forest):
        result = delete_by_id(forest, "a")

        assert ids(result.forest) == ["g"]
        assert collect_subtree_ids(result.node) == ["a", "b", "d", "e", "c", "f"]

    def test_delete_leaf(self, forest):
        result = delete_by_id(forest, "f")

        assert ids(result.forest) == ["a", "b", "d", "e", "c", "g"]

    def test_delete_prefers_top_level_match(self, postit_factory):
        """A top-level node wins over a deeper node with the same id."""
        forest = [
            postit_factory("p", [postit_factory("dup", content="nested")]),
            postit_factory("dup", content="top"),
        ]

        result = delete_by_id(forest, "dup")

        assert result.node.content == "top"
        assert ids(result.forest) == ["p", "dup"]

    def test_delete_missing(self, forest):
        result = delete_by_id(forest, "missing")

        assert not result.found
        assert result.forest == forest

    def test_insert_then_delete_round_trip(self, forest, postit_factory):
        inserted = insert_under_parent(forest, "c", postit_factory("x"))

        result = delete_by_id(inserted.forest, "x")

        assert result.forest == forest


class TestTraversalHelpers:
    """Test pre-order helpers."""

    def test_iter_postits_preorder(self, forest):
        assert ids(forest) == ["a", "b", "d", "e", "c", "f", "g"]

    def test_find_by_id(self, forest):
        assert find_by_id(forest, "f").id == "f"
        assert find_by_id(forest, "missing") is None

    def test_count_postits(self, forest):
        assert count_postits(forest) == 7
        assert count_postits([]) == 0

    def test_all_coordinates_skips_unplaced(self, forest):
        assert all_coordinates(forest) == [
            Coordinate(x=0.1, y=0.1),
            Coordinate(x=-0.5, y=0.5),
        ]

    def test_unique_ids(self, forest):
        assert find_duplicate_ids(forest) == set()
        assert_unique_ids(forest)

    def test_duplicate_ids_raise(self, forest, postit_factory):
        duplicated = [*forest, postit_factory("z", [postit_factory("d")])]

        assert find_duplicate_ids(duplicated) == {"d"}
        with pytest.raises(DuplicatePostitIdError) as exc_info:
            assert_unique_ids(duplicated)
        assert exc_info.value.duplicate_ids == ["d"]


class TestDeepForest:
    """Test a chain deeper than the interpreter recursion limit."""

    def setup_method(self):
        self.depth = sys.getrecursionlimit() + 500
        node = Postit(id="n0", content="leaf", dimension="A", section="Inner")
        for level in range(1, self.depth):
            node = Postit(id=f"n{level}", content="link", dimension="A", section="Inner", children=[node])
        self.forest = [node]

    def test_traversal(self):
        assert count_postits(self.forest) == self.depth
        assert find_by_id(self.forest, "n0").content == "leaf"
        assert find_duplicate_ids(self.forest) == set()

    def test_insert_under_deepest_node(self, postit_factory):
        result = insert_under_parent(self.forest, "n0", postit_factory("x"))

        assert result.found
        assert count_postits(result.forest) == self.depth + 1
        assert [child.id for child in find_by_id(result.forest, "n0").children] == ["x"]
        assert find_by_id(self.forest, "x") is None

    def test_update_deepest_node(self):
        result = update_by_id(self.forest, "n0", PostitPatch(content="changed"))

        assert result.found
        assert find_by_id(result.forest, "n0").content == "changed"
        assert find_by_id(self.forest, "n0").content == "leaf"

    def test_delete_cascades_through_chain(self):
        result = delete_by_id(self.forest, "n10")

        assert result.found
        assert count_postits(result.forest) == self.depth - 11
        assert find_by_id(result.forest, "n11").children == []
        assert len(collect_subtree_ids(result.node)) == 11
