"""Shared fixtures for the NestedSetLib test suite."""

from types import SimpleNamespace

import pytest

from nestedsetlib import NestedSet, Node
from nestedsetlib.testing import NestedSetTestHelper


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long randomized sweeps")


def make_sample_tree():
    """Build the reference tree.

    Structure (left, right, level):
    R (0, 7, 0)
    ├── A (1, 4, 1)
    │   └── C (2, 3, 2)
    └── B (5, 6, 1)
    """
    root = Node(0, "R")
    a = Node(1, "A")
    b = Node(2, "B")
    c = Node(3, "C")

    tree = NestedSet(root)
    tree.add(a)
    tree.add(b)
    tree.add(c, a)

    return SimpleNamespace(tree=tree, root=root, a=a, b=b, c=c,
                           helper=NestedSetTestHelper(tree))


@pytest.fixture
def sample():
    return make_sample_tree()
