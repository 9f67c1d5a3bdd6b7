"""Test fixtures for NestedSetLib consumers.

These fixtures provide controlled access to a nested set's state for
testing purposes without reaching into the container's internals.
"""

import random
from typing import Dict, List, Optional, Tuple

from ..core.nested_set import NestedSet
from ..core.node import NestedNode, Node

Coordinates = Tuple[int, int, int]


class NestedSetTestHelper:
    """Public test fixture for nested set verification.

    Example:
        helper = NestedSetTestHelper(tree)
        before = helper.snapshot()
        tree.move(node, target)
        tree.move(node, old_parent)
        assert helper.snapshot() == before
        helper.assert_consistent()
    """

    def __init__(self, nested_set: NestedSet):
        """Initialize with the nested set under test.

        Args:
            nested_set: The container to inspect
        """
        self.nested_set = nested_set

    def snapshot(self) -> Dict[int, Coordinates]:
        """Return {identifier: (left, right, level)} for every node."""
        return {
            node.identifier(): (node.get_left(), node.get_right(), node.get_level())
            for node in self.nested_set.nodes()
        }

    def coordinates(self, node: NestedNode) -> Coordinates:
        """Return (left, right, level) of a single node."""
        return node.get_left(), node.get_right(), node.get_level()

    def assert_consistent(self) -> None:
        """Fail with every violated invariant listed."""
        problems = self.nested_set.check_integrity()
        assert not problems, "Nested set is inconsistent:\n  " + "\n  ".join(problems)

    def parent_map(self) -> Dict[int, Optional[int]]:
        """Return {identifier: parent identifier} derived from the intervals."""
        result = {}
        for node in self.nested_set.nodes():
            parent = self.nested_set.parent(node)
            result[node.identifier()] = parent.identifier() if parent is not None else None
        return result

    def names(self, nodes: List[NestedNode]) -> List[str]:
        """Display names of a list of nodes, in order."""
        return [node.display_name() for node in nodes]


def build_random_tree(size: int,
                      seed: Optional[int] = None,
                      rng: Optional[random.Random] = None) -> Tuple[NestedSet, List[Node]]:
    """Grow a tree of the given size by adding nodes under random parents.

    Args:
        size: Number of nodes to add below the root
        seed: Seed for a fresh random generator
        rng: Generator to use instead of seeding a new one

    Returns:
        (nested_set, nodes) where nodes[0] is the root and nodes[i] has id i
    """
    rng = rng or random.Random(seed)
    root = Node(0, "root")
    nested_set = NestedSet(root)
    nodes = [root]

    for node_id in range(1, size + 1):
        parent = rng.choice(nodes)
        node = Node(node_id, f"node{node_id}")
        nested_set.add(node, parent)
        nodes.append(node)

    return nested_set, nodes
