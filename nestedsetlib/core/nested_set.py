"""NestedSet container for NestedSetLib.

The NestedSet keeps a flat collection of nodes whose [left, right] intervals
encode the tree: a node's interval strictly contains the intervals of all of
its descendants. Structural changes (add, delete, move) renumber the
intervals of the whole collection so that ancestor/descendant questions can
be answered with two integer comparisons instead of a traversal.

Every public method holds a single lock for its whole duration. The
renumbering passes read and write every node, so they must never interleave.
"""

import logging
import threading
from typing import Dict, Iterable, Iterator, List, Optional

from .node import NestedNode
from ..config import NestedSetConfig
from ..errors import (
    CapacityExceededError,
    ConfigurationError,
    IntegrityError,
    InvalidNodeOperationError,
    NodeNotFoundError,
    UnsupportedMoveError,
)

logger = logging.getLogger(__name__)


def _left_of(node: NestedNode) -> int:
    return node.get_left()


class NestedSet:
    """Tree of nodes stored as nested intervals.

    The container never creates node records. Callers construct their own
    NestedNode instances and hand them over by reference; every operation
    mutates those same objects in place, so any holder of a node sees its
    current coordinates.

    Example:
        >>> root = Node(0, "root")
        >>> tree = NestedSet(root)
        >>> books = Node(1, "books")
        >>> tree.add(books)
        >>> tree.add(Node(2, "fiction"), books)
        >>> [n.display_name() for n in tree.branch(books)]
        ['books', 'fiction']
    """

    def __init__(self, root_node: NestedNode, config: Optional[NestedSetConfig] = None):
        """Create a nested set seeded with its root node.

        Args:
            root_node: Node that becomes the permanent root
            config: Container configuration (defaults to NestedSetConfig())

        Raises:
            InvalidNodeOperationError: If root_node is None
            ConfigurationError: If the configuration is invalid
        """
        if root_node is None:
            raise InvalidNodeOperationError("Root node is required")

        self._setup(root_node, config)

        root_node.set_level(0)
        root_node.set_left(0)
        root_node.set_right(1)
        self._append(root_node)

    @classmethod
    def from_nodes(cls,
                   nodes: Iterable[NestedNode],
                   config: Optional[NestedSetConfig] = None) -> 'NestedSet':
        """Adopt nodes that already carry nested-set coordinates.

        Nothing is renumbered. The single level 0 node becomes the root and
        the whole collection has to pass the integrity check.

        Args:
            nodes: Numbered nodes, in the order they should be kept
            config: Container configuration

        Returns:
            NestedSet holding exactly the given nodes

        Raises:
            IntegrityError: If the coordinates do not form a valid tree
            InvalidNodeOperationError: If a node is listed twice
            CapacityExceededError: If the nodes exceed config.max_nodes
        """
        nodes = list(nodes)
        roots = [node for node in nodes if node.get_level() == 0]
        if len(roots) != 1:
            raise IntegrityError([f"expected exactly one root node, found {len(roots)}"])

        instance = cls.__new__(cls)
        instance._setup(roots[0], config)

        if not instance._config.check_node_limit(len(nodes)):
            raise CapacityExceededError(
                f"{len(nodes)} nodes exceed the limit of {instance._config.max_nodes}"
            )

        for node in nodes:
            if instance._exists(node):
                raise InvalidNodeOperationError(f"Node {node!r} is listed more than once")
            instance._append(node)

        problems = instance._check_integrity()
        if problems:
            raise IntegrityError(problems)

        # The counter tracks inserts past the root
        instance._last_id = len(nodes) - 1
        return instance

    def _setup(self, root_node: NestedNode, config: Optional[NestedSetConfig]) -> None:
        self._config = config or NestedSetConfig()
        errors = self._config.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

        self._root = root_node
        self._nodes: List[NestedNode] = []
        # id(node) -> node; holding the node keeps its id() stable
        self._index: Dict[int, NestedNode] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    # Properties

    @property
    def root(self) -> NestedNode:
        """The root node."""
        return self._root

    @property
    def config(self) -> NestedSetConfig:
        return self._config

    @property
    def last_id(self) -> int:
        """Number of nodes added so far (informational)."""
        with self._lock:
            return self._last_id

    # Structural mutation

    def add(self, new_node: NestedNode, parent: Optional[NestedNode] = None) -> None:
        """Insert a node as the last child of parent.

        Args:
            new_node: Node to insert; its coordinates are overwritten
            parent: Parent node, or None for the root

        Raises:
            InvalidNodeOperationError: If new_node is None or already present
            NodeNotFoundError: If parent is not in the nested set
            CapacityExceededError: If config.max_nodes would be exceeded
        """
        with self._lock:
            if new_node is None:
                raise self._reject(InvalidNodeOperationError("Node to add is required"))

            if self._exists(new_node):
                raise self._reject(InvalidNodeOperationError(
                    f"Node {new_node.identifier()!r} is already in the structure"
                ))

            if parent is not None:
                if not self._exists(parent):
                    raise self._reject(NodeNotFoundError("Parent node not found in structure"))
            else:
                parent = self._root

            if not self._config.check_node_limit(len(self._nodes) + 1):
                raise self._reject(CapacityExceededError(
                    f"Node limit of {self._config.max_nodes} reached"
                ))

            right = parent.get_right()

            new_node.set_level(parent.get_level() + 1)
            new_node.set_left(right)
            new_node.set_right(right + 1)

            # Widen ancestors, shift everything to the right of the insert point
            for node in self._nodes:
                if node.get_right() >= right:
                    node.set_right(node.get_right() + 2)
                    if node.get_left() > right:
                        node.set_left(node.get_left() + 2)

            self._last_id += 1
            self._append(new_node)

            self._log_mutation("Added %r under %r", new_node, parent)
            self._verify()

    def delete(self, node: NestedNode) -> None:
        """Remove a node together with its whole branch.

        Args:
            node: Node to remove

        Raises:
            InvalidNodeOperationError: If node is None or the root
            NodeNotFoundError: If node is not in the nested set
        """
        with self._lock:
            if node is None or node is self._root:
                raise self._reject(InvalidNodeOperationError("Can't delete root node"))

            if not self._exists(node):
                raise self._reject(NodeNotFoundError("Node not found in structure"))

            left = node.get_left()
            right = node.get_right()
            width = right - left + 1

            survivors = []
            for current in self._nodes:
                if current.get_left() < left or current.get_right() > right:
                    # Close the gap left by the removed branch
                    if current.get_right() > right:
                        current.set_right(current.get_right() - width)
                    if current.get_left() > left:
                        current.set_left(current.get_left() - width)
                    survivors.append(current)
                else:
                    del self._index[id(current)]

            removed = len(self._nodes) - len(survivors)
            self._nodes = survivors

            self._log_mutation("Deleted %r (%d nodes removed)", node, removed)
            self._verify()

    def move(self, node: NestedNode, parent: Optional[NestedNode] = None) -> None:
        """Move a node and its branch to become the last child of parent.

        Args:
            node: Node to move
            parent: New parent node, or None for the root

        Raises:
            InvalidNodeOperationError: If node is None or the root, or if
                parent lies inside node's own branch
            NodeNotFoundError: If node or parent is not in the nested set,
                or node's current parent cannot be located
            UnsupportedMoveError: If parent already is node's parent
        """
        with self._lock:
            if node is None:
                raise self._reject(InvalidNodeOperationError("Node to move is required"))

            if not self._exists(node):
                raise self._reject(NodeNotFoundError("Node not found in structure"))

            if node.get_level() == 0 or node is self._root:
                raise self._reject(InvalidNodeOperationError("Can't move root node"))

            if parent is None:
                parent = self._root
            elif not self._exists(parent):
                raise self._reject(NodeNotFoundError("Parent node not found in structure"))

            left = node.get_left()
            right = node.get_right()

            if parent.get_left() >= left and parent.get_right() <= right:
                raise self._reject(InvalidNodeOperationError(
                    "Can't move branch to node within itself"
                ))

            current_parent = self._parent(node)
            if current_parent is None:
                raise self._reject(NodeNotFoundError(
                    "Parent node not found, the structure is broken"
                ))
            if current_parent is parent:
                raise self._reject(UnsupportedMoveError(
                    "Moving within the same parent is not implemented"
                ))

            width = right - left + 1
            target = parent.get_right()
            skew_level = parent.get_level() - node.get_level() + 1

            # Membership must be taken before any coordinate changes
            branch = self._branch(node)
            members = {id(member) for member in branch}

            if target <= right:
                # Destination precedes the branch: open a gap at target
                # by pushing [target, left) forward.
                low, high, shift = target, left - 1, width
                skew_edit = target - left
            else:
                # Destination follows the branch: pull (right, target)
                # back over the vacated space.
                low, high, shift = right + 1, target - 1, -width
                skew_edit = target - right - 1

            for current in self._nodes:
                if id(current) in members:
                    continue
                current_right = current.get_right()
                if low <= current_right <= high:
                    current.set_right(current_right + shift)
                current_left = current.get_left()
                if low <= current_left <= high:
                    current.set_left(current_left + shift)

            for member in branch:
                member.set_left(member.get_left() + skew_edit)
                member.set_right(member.get_right() + skew_edit)
                member.set_level(member.get_level() + skew_level)

            self._log_mutation("Moved %r (%d nodes) under %r", node, len(branch), parent)
            self._verify()

    # Queries

    def parent(self, node: NestedNode) -> Optional[NestedNode]:
        """Return the parent of node.

        Returns:
            Parent node, or None for the root and for nodes not in the set
        """
        with self._lock:
            if node is None or not self._exists(node):
                return None
            return self._parent(node)

    def find_by_id(self, node_id: int) -> Optional[NestedNode]:
        """Return the first node whose identifier matches node_id."""
        with self._lock:
            for node in self._nodes:
                if node.identifier() == node_id:
                    return node
            return None

    def branch(self, node: Optional[NestedNode] = None) -> List[NestedNode]:
        """Return node and all its descendants, ordered by left bound.

        Sorts the internal collection by left bound as a side effect.

        Args:
            node: Branch root, or None for the whole tree

        Returns:
            List of nodes (empty if node is not in the set)
        """
        with self._lock:
            return self._branch(node)

    def children(self, node: Optional[NestedNode] = None) -> List[NestedNode]:
        """Return the direct children of node (root when None), by left bound."""
        with self._lock:
            if node is None:
                node = self._root
            level = node.get_level() + 1
            return [n for n in self._branch(node) if n.get_level() == level]

    def descendants(self, node: Optional[NestedNode] = None) -> List[NestedNode]:
        """Return every node below node (root when None), by left bound."""
        with self._lock:
            if node is None:
                node = self._root
            return [n for n in self._branch(node) if n is not node]

    def ancestors(self, node: NestedNode) -> List[NestedNode]:
        """Return the ancestors of node, root first."""
        with self._lock:
            if node is None or not self._exists(node):
                return []
            left = node.get_left()
            right = node.get_right()
            found = [n for n in self._nodes
                     if n.get_left() < left and n.get_right() > right]
            return sorted(found, key=_left_of)

    def is_ancestor(self, ancestor: NestedNode, node: NestedNode) -> bool:
        """Check if ancestor's interval strictly contains node's interval."""
        with self._lock:
            if ancestor is None or node is None:
                return False
            if not (self._exists(ancestor) and self._exists(node)):
                return False
            return (ancestor.get_left() < node.get_left()
                    and ancestor.get_right() > node.get_right())

    def is_descendant(self, node: NestedNode, ancestor: NestedNode) -> bool:
        """Check if node lies strictly inside ancestor's branch."""
        return self.is_ancestor(ancestor, node)

    def nodes(self) -> List[NestedNode]:
        """Return a copy of the collection in its current order."""
        with self._lock:
            return list(self._nodes)

    def check_integrity(self) -> List[str]:
        """Check every nested-set invariant.

        Returns:
            List of violated invariants (empty if consistent)
        """
        with self._lock:
            return self._check_integrity()

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        with self._lock:
            return self._exists(node)

    def __iter__(self) -> Iterator[NestedNode]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self._root!r}, nodes={len(self._nodes)})"

    # Internal helpers - callers must hold the lock

    def _append(self, node: NestedNode) -> None:
        self._nodes.append(node)
        self._index[id(node)] = node

    def _exists(self, node: object) -> bool:
        return node is not None and self._index.get(id(node)) is node

    def _parent(self, node: NestedNode) -> Optional[NestedNode]:
        left = node.get_left()
        right = node.get_right()
        level = node.get_level() - 1

        for current in self._nodes:
            if (current.get_left() <= left and current.get_right() >= right
                    and current.get_level() == level):
                return current

        return None

    def _branch(self, node: Optional[NestedNode]) -> List[NestedNode]:
        self._nodes.sort(key=_left_of)

        if node is None:
            return list(self._nodes)

        if not self._exists(node):
            return []

        left = node.get_left()
        right = node.get_right()
        return [n for n in self._nodes
                if n.get_left() >= left and n.get_right() <= right]

    def _check_integrity(self) -> List[str]:
        problems = []
        root = self._root

        if root.get_left() != 0:
            problems.append(f"root {root!r} must have left bound 0")

        roots = [n for n in self._nodes if n.get_level() == 0]
        if len(roots) != 1 or roots[0] is not root:
            problems.append(f"root must be the only level 0 node, found {len(roots)}")

        endpoints = []
        for node in self._nodes:
            if node.get_left() >= node.get_right():
                problems.append(f"{node!r} must have left < right")
            endpoints.append(node.get_left())
            endpoints.append(node.get_right())

        if sorted(endpoints) != list(range(len(endpoints))):
            problems.append(
                f"interval endpoints must be 0..{len(endpoints) - 1} with each value used once"
            )

        # Walk in left order keeping the chain of enclosing intervals
        enclosing: List[NestedNode] = []
        for node in sorted(self._nodes, key=_left_of):
            while enclosing and enclosing[-1].get_right() < node.get_left():
                enclosing.pop()

            if enclosing and enclosing[-1].get_right() < node.get_right():
                problems.append(f"{node!r} partially overlaps {enclosing[-1]!r}")
            elif not enclosing and node is not root:
                problems.append(f"{node!r} lies outside the root interval")

            if node.get_level() != len(enclosing):
                problems.append(f"{node!r} should have level {len(enclosing)}")

            enclosing.append(node)

        return problems

    def _verify(self) -> None:
        if not self._config.verify_integrity:
            return
        problems = self._check_integrity()
        if problems:
            logger.error("Nested set integrity check failed: %s", "; ".join(problems))
            raise IntegrityError(problems)

    def _log_mutation(self, message: str, *args) -> None:
        if self._config.log_mutations:
            logger.debug(message, *args)

    @staticmethod
    def _reject(error: Exception) -> Exception:
        logger.debug("Rejected request: %s", error)
        return error
