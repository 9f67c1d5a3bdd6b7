"""Tests for the node capability and the generic Node record."""

from typing import Any, Dict

import pytest

from nestedsetlib import NestedNode, NestedSet, Node


class DictNode(NestedNode):
    """Node keeping its coordinates in a dict, with extra metadata."""

    def __init__(self, node_id: int, title: str, **metadata: Any):
        self.node_id = node_id
        self.title = title
        self.metadata = metadata
        self.coords: Dict[str, int] = {'level': 0, 'left': 0, 'right': 0}

    def identifier(self) -> int:
        return self.node_id

    def display_name(self) -> str:
        return self.title

    def get_level(self) -> int:
        return self.coords['level']

    def get_left(self) -> int:
        return self.coords['left']

    def get_right(self) -> int:
        return self.coords['right']

    def set_level(self, level: int) -> None:
        self.coords['level'] = level

    def set_left(self, left: int) -> None:
        self.coords['left'] = left

    def set_right(self, right: int) -> None:
        self.coords['right'] = right


class TestNode:
    """Node record behavior."""

    def test_defaults(self):
        node = Node(7, "seven")
        assert node.identifier() == 7
        assert node.display_name() == "seven"
        assert (node.get_left(), node.get_right(), node.get_level()) == (0, 0, 0)

    def test_setters_write_attributes(self):
        node = Node(1, "n")
        node.set_left(4)
        node.set_right(9)
        node.set_level(2)
        assert (node.left, node.right, node.level) == (4, 9, 2)

    def test_leaf_and_width(self):
        leaf = Node(1, "leaf", level=1, left=2, right=3)
        inner = Node(2, "inner", level=1, left=1, right=6)
        assert leaf.is_leaf()
        assert leaf.width() == 2
        assert not inner.is_leaf()
        assert inner.width() == 6

    def test_to_dict(self):
        node = Node(3, "three", level=2, left=4, right=5)
        assert node.to_dict() == {
            'id': 3, 'node_name': 'three', 'level': 2, 'left': 4, 'right': 5,
        }

    def test_equality_is_identity(self):
        first = Node(1, "same")
        second = Node(1, "same")
        assert first != second
        assert first == first

    def test_repr_and_str(self):
        node = Node(5, "five", level=1, left=1, right=2)
        assert str(node) == "five"
        assert repr(node) == "Node(id=5, name='five', level=1, left=1, right=2)"

    def test_abstract_interface(self):
        with pytest.raises(TypeError):
            NestedNode()


class TestCustomNodes:
    """The container works with any NestedNode implementation."""

    def test_custom_node_storage(self):
        root = DictNode(0, "catalog")
        tree = NestedSet(root)
        books = DictNode(1, "books", color="blue")
        tree.add(books)

        assert books.coords == {'level': 1, 'left': 1, 'right': 2}
        assert root.coords == {'level': 0, 'left': 0, 'right': 3}
        assert books.metadata == {'color': 'blue'}
        assert tree.parent(books) is root
