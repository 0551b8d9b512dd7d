"""Array-layout k-ary tree, its index math and its traversals."""

from .indexed_tree import IndexedKAryTree
from .traversal import TraversalOrder, level_order, post_order, pre_order, walk
from .tree_hash import tree_hash

__all__ = [
    "IndexedKAryTree",
    "TraversalOrder",
    "level_order",
    "pre_order",
    "post_order",
    "walk",
    "tree_hash",
]
