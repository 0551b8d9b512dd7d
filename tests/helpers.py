from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from karytree import IndexedKAryTree
from karytree.tree import tree_math


# Binary tree used by the BANANA decode example.
BANANA_TREE = ["_", "_", "A", "B", "N", None, None]
BANANA_CODE = "001011011"

# Same five nodes with the interior nodes in different places.
BINARY_TREE = ["_", "A", "_", "N", "B", None, None]

TERNARY_TREE = [0, 1, 2, None, 4, 5, 6, None, None, 9, None, None, None]

TERNARY_CODED_TREE = [
    "_", "_", None, "_", "_", None, "_", None, None, None, None, "_",
    "_", "0", None, "7", None, None, None, "9", None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, "5", None, None, "4", None,
]

QUATERNARY_CODED_TREE = [
    "_", "_", "_", "N", "S", "E", "R", "O",
    None, "M", "A", "G", " ", None, None, None, None, None, None, None, None,
]


@dataclass
class DecodeCase:
    snapshot: list[Optional[str]]
    branching_factor: int
    message: str
    expected: str


DECODE_CASES = [
    DecodeCase(BANANA_TREE, 2, BANANA_CODE, "BANANA"),
    DecodeCase(TERNARY_CODED_TREE, 3, "000000020002221002000211", "00974705"),
    DecodeCase(QUATERNARY_CODED_TREE, 4, "1200020112001310113022", "GEORGE MASON"),
]


def occupied(tree: IndexedKAryTree[Any]) -> list[int]:
    return [i for i in range(tree.capacity()) if tree.slot(i) is not None]


def assert_tree_invariants(case, tree: IndexedKAryTree[Any]) -> None:
    """No orphans, size matches occupancy, height matches the deepest node."""
    k = tree.branching_factor()
    indices = occupied(tree)
    for i in indices:
        if i != 0:
            case.assertIsNotNone(tree.slot(tree_math.parent(i, k)), f"orphan at {i}")
    case.assertEqual(tree.size(), len(indices))
    expected_height = max((tree_math.depth(i, k) for i in indices), default=0)
    case.assertEqual(tree.height(), expected_height)
    case.assertEqual(tree.rightmost_index(), max(indices, default=-1))
