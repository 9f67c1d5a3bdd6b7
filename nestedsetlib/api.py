"""High-level API for NestedSetLib.

This module provides simple, functional interfaces for common operations
on a NestedSet. Every walk here is computed from the interval coordinates
of a single branch query; none of them follows parent/child links.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import NestedSetConfig, TraversalStrategy
from .core.nested_set import NestedSet
from .core.node import NestedNode


def build_nested_set(
    root: NestedNode,
    items: Iterable[Tuple[NestedNode, Optional[NestedNode]]] = (),
    config: Optional[NestedSetConfig] = None,
) -> NestedSet:
    """Create a nested set and add nodes to it in order.

    Args:
        root: Node that becomes the root
        items: (node, parent) pairs; parent None means the root.
            Parents must appear before their children.
        config: Container configuration

    Returns:
        The populated NestedSet

    Example:
        >>> root, a, b = Node(0, "root"), Node(1, "a"), Node(2, "b")
        >>> tree = build_nested_set(root, [(a, None), (b, a)])
        >>> b.get_level()
        2
    """
    nested_set = NestedSet(root, config=config)
    for node, parent in items:
        nested_set.add(node, parent)
    return nested_set


def traverse_tree(
    nested_set: NestedSet,
    start: Optional[NestedNode] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
) -> Iterator[NestedNode]:
    """Walk the branch of start (whole tree when None).

    Args:
        nested_set: Tree to walk
        start: Branch root, or None for the whole tree
        strategy: Walk order (dfs_pre, dfs_post, bfs)
        max_depth: Maximum depth relative to start (None = unlimited)

    Yields:
        Nodes of the branch in the requested order. Nothing is yielded
        when start is not in the nested set.
    """
    order = _parse_strategy(strategy)
    nodes = nested_set.branch(start)
    if not nodes:
        return

    base_level = nodes[0].get_level()
    if max_depth is not None:
        nodes = [n for n in nodes if n.get_level() - base_level <= max_depth]

    if order == TraversalStrategy.DEPTH_FIRST_POST:
        nodes.sort(key=lambda n: n.get_right())
    elif order == TraversalStrategy.BREADTH_FIRST:
        nodes.sort(key=lambda n: (n.get_level(), n.get_left()))

    for node in nodes:
        yield node


def get_leaf_nodes(
    nested_set: NestedSet,
    start: Optional[NestedNode] = None,
) -> Iterator[NestedNode]:
    """Get all leaf nodes of a branch, in pre-order.

    Example:
        >>> for leaf in get_leaf_nodes(tree):
        ...     print(f"Leaf: {leaf.display_name()}")
    """
    for node in traverse_tree(nested_set, start):
        if node.is_leaf():
            yield node


def get_tree_paths(
    nested_set: NestedSet,
    start: Optional[NestedNode] = None,
) -> Iterator[List[str]]:
    """Get the display-name path from start to every node of its branch.

    Yields:
        Lists of names forming paths, in pre-order

    Example:
        >>> for path in get_tree_paths(tree):
        ...     print(" -> ".join(path))
    """
    chain: List[NestedNode] = []

    for node in traverse_tree(nested_set, start):
        # Drop finished branches from the chain of open intervals
        while chain and chain[-1].get_right() < node.get_left():
            chain.pop()
        chain.append(node)
        yield [n.display_name() for n in chain]


def get_tree_stats(
    nested_set: NestedSet,
    start: Optional[NestedNode] = None,
) -> Dict[str, Any]:
    """Get statistics about a branch (whole tree when start is None).

    Returns:
        Dictionary with tree statistics; depths are relative to start

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    base_level = None
    for node in traverse_tree(nested_set, start):
        if base_level is None:
            base_level = node.get_level()
        depth = node.get_level() - base_level

        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every node but the branch root is somebody's child
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


def render_tree(
    nested_set: NestedSet,
    start: Optional[NestedNode] = None,
    indent: str = "  ",
) -> str:
    """Render a branch as an indented outline of display names."""
    lines = []
    base_level = None
    for node in traverse_tree(nested_set, start):
        if base_level is None:
            base_level = node.get_level()
        lines.append(f"{indent * (node.get_level() - base_level)}{node.display_name()}")
    return "\n".join(lines)


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    # Map string names to enum values
    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'post_order': TraversalStrategy.DEPTH_FIRST_POST,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
