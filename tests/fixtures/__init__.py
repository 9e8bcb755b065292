"""
Test fixtures package for merkletree tests.

Usage:
    from fixtures import make_items, make_tree

    def test_something():
        tree = make_tree(5)
"""

from .common import (
    flip_bit,
    make_abc_items,
    make_items,
    make_positional_sha256_config,
    make_tree,
)

__all__ = [
    "flip_bit",
    "make_abc_items",
    "make_items",
    "make_positional_sha256_config",
    "make_tree",
]
