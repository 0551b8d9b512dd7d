"""karytree: a k-ary tree stored in array (heap) layout, with traversals and a message decoder."""

from .api.policy import TreePolicy
from .codec.message import MessageCodec, decode
from .exceptions import (
    EmptySlotError,
    IndexOutOfRangeError,
    InvalidBranchingFactorError,
    InvalidTreeError,
    KAryTreeError,
    MessageDecodeError,
)
from .tree import (
    IndexedKAryTree,
    TraversalOrder,
    level_order,
    post_order,
    pre_order,
    tree_hash,
    walk,
)

__version__ = "0.1.0"

__all__ = [
    "IndexedKAryTree",
    "MessageCodec",
    "TreePolicy",
    "TraversalOrder",
    "decode",
    "level_order",
    "pre_order",
    "post_order",
    "walk",
    "tree_hash",
    "KAryTreeError",
    "InvalidBranchingFactorError",
    "InvalidTreeError",
    "IndexOutOfRangeError",
    "EmptySlotError",
    "MessageDecodeError",
    "__version__",
]
