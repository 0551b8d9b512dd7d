"""Array-backed k-ary tree (heap layout).

This module provides IndexedKAryTree, a mutable tree of fixed branching
factor stored as a flat list. Index 0 is the root; the children of index
``i`` occupy ``[k*i + 1, k*i + k]``. Absent slots are ``None``.

Invariants kept by every mutation
- No orphans: a slot other than the root is occupied only if its parent is.
- ``size()`` equals the number of occupied slots.
- ``height()`` equals the depth of the rightmost occupied slot.
- Capacity grows one whole level at a time (``capacity*k + 1``) and never shrinks.
"""
from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, Optional, Sequence, TypeVar

from ..api.policy import TreePolicy
from ..exceptions import (
    EmptySlotError,
    IndexOutOfRangeError,
    InvalidBranchingFactorError,
    InvalidTreeError,
)
from . import traversal, tree_math
from .tree_hash import tree_hash

logger = logging.getLogger(__name__)

E = TypeVar("E")


class IndexedKAryTree(Generic[E]):
    """K-ary tree over a dense list with level-by-level growth."""

    def __init__(
        self,
        initial: Optional[Sequence[Optional[E]]],
        branching_factor: int,
        policy: Optional[TreePolicy] = None,
    ):
        """Ingest an array-shaped snapshot.

        The snapshot is copied; later changes to ``initial`` do not reach the tree.

        Raises
        - InvalidBranchingFactorError: ``branching_factor < 2``.
        - InvalidTreeError: ``initial`` is None or empty, or holds a node
          whose parent slot is absent.
        """
        if branching_factor < 2:
            raise InvalidBranchingFactorError(branching_factor)
        if not initial:
            raise InvalidTreeError("tree snapshot must contain at least one slot")
        self._k = branching_factor
        self._policy = policy or TreePolicy()
        self._storage: list[Optional[E]] = list(initial)
        for i in range(1, len(self._storage)):
            if self._storage[i] is not None and self._storage[tree_math.parent(i, self._k)] is None:
                raise InvalidTreeError(f"slot {i} is occupied but its parent slot is empty")
        self._size = sum(1 for v in self._storage if v is not None)
        self._rightmost = -1
        self._height = 0
        self._find_rightmost(len(self._storage) - 1)
        logger.debug(
            "ingested tree k=%d capacity=%d size=%d height=%d",
            self._k, self.capacity(), self._size, self._height,
        )

    # --- Invariant reads ---
    def branching_factor(self) -> int:
        return self._k

    def capacity(self) -> int:
        return len(self._storage)

    def rightmost_index(self) -> int:
        """Index of the rightmost occupied slot, or -1 for an empty tree."""
        return self._rightmost

    @property
    def policy(self) -> TreePolicy:
        return self._policy

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return self._height

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[E]:
        return self.level_order()

    def __contains__(self, value: object) -> bool:
        return value is not None and any(v == value for v in self._storage if v is not None)

    # --- Point access ---
    def slot(self, index: int) -> Optional[E]:
        """Raw slot content; None for absent slots and indices outside storage."""
        if 0 <= index < len(self._storage):
            return self._storage[index]
        return None

    def get(self, index: int) -> E:
        if index < 0 or index >= len(self._storage):
            raise IndexOutOfRangeError(index, len(self._storage))
        value = self._storage[index]
        if value is None:
            raise EmptySlotError(index)
        return value

    def set(self, index: int, value: Optional[E]) -> bool:
        """Create, replace or (with ``value=None``) remove the node at ``index``.

        Returns False for a negative index and for removals that are refused:
        index outside capacity, slot already empty, or slot with children.
        Creating a node whose parent slot is empty raises InvalidTreeError and
        leaves the tree unchanged. An index past capacity grows the storage by
        whole levels.
        """
        if index < 0:
            return False
        if value is None:
            return self._remove(index)
        if index < len(self._storage):
            was_absent = self._storage[index] is None
            if was_absent and index != 0 and not self.has_parent(index):
                raise InvalidTreeError(f"cannot create node {index}: parent slot is empty")
            self._storage[index] = value
            if was_absent:
                self._size += 1
                if index > self._rightmost:
                    self._rightmost = index
                    self._height = tree_math.depth(index, self._k)
            return True
        if not self.has_parent(index):
            raise InvalidTreeError(f"cannot create node {index}: parent slot is empty")
        self._grow_to(index)
        self._storage[index] = value
        self._size += 1
        self._rightmost = index
        self._height = tree_math.depth(index, self._k)
        return True

    def _remove(self, index: int) -> bool:
        if index >= len(self._storage):
            return False
        if self._storage[index] is None or self.has_children(index):
            return False
        self._storage[index] = None
        self._size -= 1
        if index == self._rightmost:
            self._find_rightmost(index - 1)
        logger.debug("removed node %d; size=%d height=%d", index, self._size, self._height)
        return True

    def _grow_to(self, index: int) -> None:
        capacity = len(self._storage)
        while index >= capacity:
            capacity = tree_math.grow(capacity, self._k)
        logger.debug("growing storage %d -> %d for index %d", len(self._storage), capacity, index)
        self._storage.extend([None] * (capacity - len(self._storage)))

    def _find_rightmost(self, start: int) -> None:
        """Scan down from ``start`` for the rightmost occupied slot and refresh height."""
        self._rightmost = -1
        for i in range(start, -1, -1):
            if self._storage[i] is not None:
                self._rightmost = i
                break
        self._height = tree_math.depth(self._rightmost, self._k)

    # --- Structural queries ---
    def has_children(self, index: int) -> bool:
        if index < 0:
            return False
        capacity = len(self._storage)
        return any(
            c < capacity and self._storage[c] is not None
            for c in tree_math.children(index, self._k)
        )

    def has_parent(self, index: int) -> bool:
        """True iff ``index`` is not the root and its parent slot is occupied."""
        if index <= 0:
            return False
        return self.slot(tree_math.parent(index, self._k)) is not None

    # --- Snapshots ---
    def to_array(self) -> Optional[list[Optional[E]]]:
        """Whole levels up to the one holding the rightmost node; None when empty."""
        if self._size == 0:
            return None
        n = min(tree_math.compact_length(self._rightmost, self._k), len(self._storage))
        return self._storage[:n]

    def mirror(self) -> list[Optional[E]]:
        """Snapshot with every level reversed left to right; the tree is not modified.

        The result spans whole levels, so it has length ``capacity`` whenever
        capacity is a whole number of levels.
        """
        k = self._k
        capacity = len(self._storage)
        out: list[Optional[E]] = [None] * tree_math.whole_level_capacity(capacity, k)
        d = 0
        while True:
            start, end = tree_math.level_bounds(d, k)
            if start >= capacity:
                break
            for i in range(start, min(end, capacity)):
                out[start + end - 1 - i] = self._storage[i]
            d += 1
        return out

    def subtree(self, index: int) -> list[Optional[E]]:
        """Array-shaped snapshot of the subtree rooted at ``index``.

        Trailing all-absent levels are dropped, as in ``to_array``.
        """
        root = self.get(index)
        levels: list[list[Optional[E]]] = [[root]]
        last_occupied = 0
        first, width = index, 1
        capacity = len(self._storage)
        while True:
            first, width = first * self._k + 1, width * self._k
            if first >= capacity:
                break
            level = [self.slot(i) for i in range(first, first + width)]
            levels.append(level)
            if any(v is not None for v in level):
                last_occupied = len(levels) - 1
        return [v for level in levels[: last_occupied + 1] for v in level]

    # --- Traversals ---
    def level_order(self) -> Iterator[E]:
        return traversal.level_order(self)

    def pre_order(self) -> Iterator[E]:
        return traversal.pre_order(self)

    def post_order(self) -> Iterator[E]:
        return traversal.post_order(self)

    # --- Rendering ---
    def _render(self, values: Iterator[E]) -> str:
        return self._policy.separator.join(str(v) for v in values)

    def to_string(self) -> str:
        """One line per level of ``to_array``; absent slots use the policy's token."""
        snapshot = self.to_array()
        if snapshot is None:
            return ""
        lines = []
        d = 0
        while True:
            start, end = tree_math.level_bounds(d, self._k)
            if start >= len(snapshot):
                break
            lines.append(
                self._policy.separator.join(
                    self._policy.absent_token if v is None else str(v)
                    for v in snapshot[start:end]
                )
            )
            d += 1
        return "\n".join(lines)

    def to_string_level_order(self) -> str:
        return self._render(self.level_order())

    def to_string_pre_order(self) -> str:
        return self._render(self.pre_order())

    def to_string_post_order(self) -> str:
        return self._render(self.post_order())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"IndexedKAryTree(k={self._k}, capacity={len(self._storage)}, "
            f"size={self._size}, height={self._height})"
        )

    # --- Hashing ---
    def fingerprint(self, encoder: Optional[Callable[[E], bytes]] = None) -> bytes:
        """Merkle-style digest of shape and values; see ``tree_hash.tree_hash``."""
        return tree_hash(self, encoder)
