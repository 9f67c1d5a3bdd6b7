"""Core abstractions for NestedSetLib.

This module contains the node capability, the NestedSet container and
the adapter that exposes it through parent/child navigation.
"""

from .node import NestedNode, Node
from .nested_set import NestedSet
from .adapter import TreeAdapter, NestedSetAdapter

__all__ = [
    "NestedNode",
    "Node",
    "NestedSet",
    "TreeAdapter",
    "NestedSetAdapter",
]
