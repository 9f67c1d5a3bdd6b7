"""Testing utilities for NestedSetLib consumers."""

from .fixtures import NestedSetTestHelper, build_random_tree

__all__ = ['NestedSetTestHelper', 'build_random_tree']
