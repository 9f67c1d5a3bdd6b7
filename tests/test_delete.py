"""Tests for removing branches from a NestedSet."""

import pytest

from nestedsetlib import InvalidNodeOperationError, Node, NodeNotFoundError


class TestDeleteRenumbering:
    """The closing pass collapses the gap left by the removed branch."""

    def test_delete_branch_with_child(self, sample):
        sample.tree.delete(sample.a)

        assert len(sample.tree) == 2
        assert sample.a not in sample.tree
        assert sample.c not in sample.tree
        # B and R each shrink by A's width of 4
        assert (sample.b.left, sample.b.right) == (1, 2)
        assert sample.root.right == 3
        sample.helper.assert_consistent()

    def test_delete_leaf(self, sample):
        sample.tree.delete(sample.c)

        assert sample.helper.snapshot() == {
            0: (0, 5, 0),
            1: (1, 2, 1),
            2: (3, 4, 1),
        }

    def test_delete_last_sibling_keeps_left_side(self, sample):
        sample.tree.delete(sample.b)

        assert sample.helper.snapshot() == {
            0: (0, 5, 0),
            1: (1, 4, 1),
            3: (2, 3, 2),
        }

    def test_survivor_count_drops_by_half_width(self, sample):
        width = sample.a.width()
        before = len(sample.tree)
        sample.tree.delete(sample.a)
        assert len(sample.tree) == before - width // 2

    def test_add_then_delete_round_trip(self, sample):
        before = sample.helper.snapshot()
        d = Node(4, "D")
        sample.tree.add(d, sample.c)
        assert sample.helper.snapshot() != before

        sample.tree.delete(d)
        assert sample.helper.snapshot() == before

    def test_deleted_node_can_be_added_again(self, sample):
        sample.tree.delete(sample.c)
        sample.tree.add(sample.c, sample.b)

        assert sample.tree.parent(sample.c) is sample.b
        sample.helper.assert_consistent()


class TestDeletePreconditions:
    """Rejected deletes leave the structure untouched."""

    def test_delete_root(self, sample):
        before = sample.helper.snapshot()
        with pytest.raises(InvalidNodeOperationError, match="root"):
            sample.tree.delete(sample.root)
        assert sample.helper.snapshot() == before

    def test_delete_none(self, sample):
        with pytest.raises(InvalidNodeOperationError):
            sample.tree.delete(None)

    def test_delete_unknown(self, sample):
        before = sample.helper.snapshot()
        with pytest.raises(NodeNotFoundError):
            sample.tree.delete(Node(1, "A", level=1, left=1, right=4))
        assert sample.helper.snapshot() == before

    def test_delete_twice(self, sample):
        sample.tree.delete(sample.a)
        with pytest.raises(NodeNotFoundError):
            sample.tree.delete(sample.a)
        with pytest.raises(NodeNotFoundError):
            sample.tree.delete(sample.c)
