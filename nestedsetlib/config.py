"""Configuration system for NestedSetLib.

This module defines how users tune a NestedSet container and how the
functional API walks a branch.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TraversalStrategy(Enum):
    """Order in which a branch is walked.

    All orders come straight from the interval coordinates; no pointer
    chasing is involved.
    """
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children (ascending left)
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent (ascending right)
    BREADTH_FIRST = "bfs"           # Level by level


@dataclass
class NestedSetConfig:
    """Configuration for a NestedSet container."""

    # Re-check every invariant after each mutation (slow, for debugging)
    verify_integrity: bool = False

    # Upper bound on the number of nodes, root included
    max_nodes: Optional[int] = None

    # Emit DEBUG records for successful mutations
    log_mutations: bool = True

    @classmethod
    def debug(cls) -> 'NestedSetConfig':
        """Create config that verifies the whole structure after each change.

        Returns:
            NestedSetConfig with integrity verification enabled
        """
        return cls(verify_integrity=True, log_mutations=True)

    @classmethod
    def bounded(cls, max_nodes: int) -> 'NestedSetConfig':
        """Create config with a node limit.

        Args:
            max_nodes: Maximum number of nodes, root included

        Returns:
            NestedSetConfig with the node limit set
        """
        return cls(max_nodes=max_nodes)

    def check_node_limit(self, node_count: int) -> bool:
        """Check if a node count is within the configured limit.

        Args:
            node_count: Number of nodes after the pending insert

        Returns:
            True if within limits or no limit set
        """
        if self.max_nodes is None:
            return True
        return node_count <= self.max_nodes

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_nodes is not None:
            if isinstance(self.max_nodes, bool) or not isinstance(self.max_nodes, int):
                errors.append("max_nodes must be an integer")
            elif self.max_nodes < 1:
                errors.append("max_nodes must allow at least the root node")

        return errors
