"""NestedSetLib - Nested Set Model for Hierarchical Data.

NestedSetLib stores a tree as a flat collection of nodes annotated with
left/right/level interval coordinates. Descendant and ancestor questions
become integer comparisons; structural changes renumber the intervals.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from nestedsetlib import NestedSet, Node

    root = Node(0, "root")
    tree = NestedSet(root)
    tree.add(Node(1, "child"))
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .core import NestedNode, Node, NestedSet, TreeAdapter, NestedSetAdapter
from .config import NestedSetConfig, TraversalStrategy
from .errors import (
    NestedSetError,
    NodeNotFoundError,
    InvalidNodeOperationError,
    UnsupportedMoveError,
    IntegrityError,
    CapacityExceededError,
    SerializationError,
    ConfigurationError,
)
from .serialization import dump_records, dumps, load_records, loads
from .api import (
    build_nested_set,
    traverse_tree,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    render_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "NestedNode",
    "Node",
    "NestedSet",
    "TreeAdapter",
    "NestedSetAdapter",
    # Config
    "NestedSetConfig",
    "TraversalStrategy",
    # Errors
    "NestedSetError",
    "NodeNotFoundError",
    "InvalidNodeOperationError",
    "UnsupportedMoveError",
    "IntegrityError",
    "CapacityExceededError",
    "SerializationError",
    "ConfigurationError",
    # Serialization
    "dump_records",
    "dumps",
    "load_records",
    "loads",
    # API
    "build_nested_set",
    "traverse_tree",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
    "render_tree",
]
