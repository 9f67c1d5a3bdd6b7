"""TreeAdapter abstraction for NestedSetLib.

The TreeAdapter gives code that thinks in parent/child terms a navigation
and modification interface. NestedSetAdapter answers every question from
the interval coordinates held by a NestedSet, so no pointers are stored.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .nested_set import NestedSet
from .node import NestedNode
from ..errors import InvalidNodeOperationError, NodeNotFoundError


class TreeAdapter(ABC):
    """Abstract adapter for navigating and editing a tree of nodes.

    Nodes stay plain data containers; the adapter knows HOW to find
    children and parents and how to change the structure.
    """

    @abstractmethod
    def get_children(self, node: NestedNode) -> Iterator[NestedNode]:
        """Get an iterator of the direct children of node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        pass

    @abstractmethod
    def get_parent(self, node: NestedNode) -> Optional[NestedNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is the root
        """
        pass

    def get_depth(self, node: NestedNode) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to the root.
        Adapters can override for more efficient implementations.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: NestedNode) -> Iterator[NestedNode]:
        """Get siblings of the given node (excluding the node itself).

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding sibling nodes
        """
        parent = self.get_parent(node)
        if parent is None:
            return  # Root has no siblings

        for child in self.get_children(parent):
            if child is not node:
                yield child

    # Capability flags - adapters declare what they support

    def supports_random_access(self) -> bool:
        """Check if adapter supports jumping to arbitrary nodes."""
        return True

    def supports_modification(self) -> bool:
        """Check if adapter supports modifying the tree structure."""
        return False

    def estimated_size(self, node: NestedNode) -> Optional[int]:
        """Estimate the number of nodes in the subtree, or None if unknown."""
        return None

    # Tree modification methods - only required if supports_modification() returns True

    def add_child(self, parent: NestedNode, child: NestedNode) -> None:
        """Add a child node to a parent.

        Raises:
            NotImplementedError: If modification not supported
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")

    def remove_child(self, parent: NestedNode, child: NestedNode) -> None:
        """Remove a child node (and its branch) from a parent.

        Raises:
            NotImplementedError: If modification not supported
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")

    def move_node(self, node: NestedNode, new_parent: NestedNode) -> None:
        """Move a node to a new parent.

        Raises:
            NotImplementedError: If modification not supported
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")


class NestedSetAdapter(TreeAdapter):
    """TreeAdapter backed by a NestedSet.

    Example:
        adapter = NestedSetAdapter(tree)
        for child in adapter.get_children(tree.root):
            print(child.display_name())
    """

    def __init__(self, nested_set: NestedSet):
        """Initialize the adapter.

        Args:
            nested_set: The nested set to navigate and edit
        """
        self.nested_set = nested_set

    def get_children(self, node: NestedNode) -> Iterator[NestedNode]:
        return iter(self.nested_set.children(node))

    def get_parent(self, node: NestedNode) -> Optional[NestedNode]:
        return self.nested_set.parent(node)

    def get_depth(self, node: NestedNode) -> int:
        """Depth is stored on the node, no walk needed."""
        if node not in self.nested_set:
            raise NodeNotFoundError("Node not found in structure")
        return node.get_level()

    def supports_modification(self) -> bool:
        return True

    def add_child(self, parent: NestedNode, child: NestedNode) -> None:
        self.nested_set.add(child, parent)

    def remove_child(self, parent: NestedNode, child: NestedNode) -> None:
        """Remove child and its branch, checking it really belongs to parent.

        Raises:
            InvalidNodeOperationError: If child is not a direct child of parent
        """
        if self.nested_set.parent(child) is not parent:
            raise InvalidNodeOperationError(
                f"{child!r} is not a direct child of {parent!r}"
            )
        self.nested_set.delete(child)

    def move_node(self, node: NestedNode, new_parent: NestedNode) -> None:
        self.nested_set.move(node, new_parent)

    def estimated_size(self, node: NestedNode) -> Optional[int]:
        """Number of nodes in the branch, read straight off the interval."""
        if node not in self.nested_set:
            return None
        return node.width() // 2
