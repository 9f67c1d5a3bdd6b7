#!/usr/bin/env python3
"""
Category tree example showing the nested set model at work.

This example demonstrates:
- Building a tree and reading its interval coordinates
- Moving a branch and deleting another
- Ancestor/descendant questions answered without traversal
- Serializing the result to JSON
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from nestedsetlib import (
    NestedSetConfig,
    Node,
    build_nested_set,
    dumps,
    get_tree_stats,
    render_tree,
)


def show(tree, title):
    print(title)
    print("-" * 50)
    for node in tree.branch():
        print(f"{'  ' * node.level}{node.name:<12} [{node.left:>2}, {node.right:>2}]")
    print()


def main():
    """Build, reshape and dump a small catalog."""
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    catalog = Node(0, "catalog")
    books = Node(1, "books")
    music = Node(2, "music")
    fiction = Node(3, "fiction")
    poetry = Node(4, "poetry")
    vinyl = Node(5, "vinyl")
    sheet = Node(6, "sheet music")

    tree = build_nested_set(catalog, [
        (books, None),
        (music, None),
        (fiction, books),
        (poetry, books),
        (vinyl, music),
        (sheet, music),
    ], config=NestedSetConfig.debug())

    show(tree, "Initial catalog")

    # Sheet music is printed matter, so it belongs under books
    tree.move(sheet, books)
    show(tree, "After moving 'sheet music' under 'books'")

    print(f"books is an ancestor of sheet music: {tree.is_ancestor(books, sheet)}")
    print(f"descendants of books: {[n.name for n in tree.descendants(books)]}")
    print()

    tree.delete(music)
    print(render_tree(tree))
    print()

    stats = get_tree_stats(tree)
    print(f"Total nodes: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}")
    print()
    print(dumps(tree))


if __name__ == "__main__":
    main()
