"""Exception hierarchy for array-backed k-ary trees.

Structural violations (orphans, removing a node that still has children,
malformed snapshots) raise. Capacity and occupancy preconditions that are
part of normal use are reported by ``IndexedKAryTree.set`` returning False.
"""
from __future__ import annotations


class KAryTreeError(Exception):
    """Base class for all errors raised by this package."""


class InvalidBranchingFactorError(KAryTreeError, ValueError):
    """Raised when a tree is constructed with a branching factor below 2."""

    def __init__(self, branching_factor: int):
        super().__init__(f"branching factor must be >= 2, got {branching_factor}")
        self.branching_factor = branching_factor


class InvalidTreeError(KAryTreeError):
    """Raised when an operation would break the tree's structural invariants."""


class IndexOutOfRangeError(KAryTreeError, IndexError):
    """Raised by ``get`` for an index outside ``[0, capacity)``."""

    def __init__(self, index: int, capacity: int):
        super().__init__(f"index {index} out of range for capacity {capacity}")
        self.index = index
        self.capacity = capacity


class EmptySlotError(KAryTreeError, LookupError):
    """Raised by ``get`` when the slot at a valid index holds no node."""

    def __init__(self, index: int):
        super().__init__(f"slot {index} is empty")
        self.index = index


class MessageDecodeError(KAryTreeError, ValueError):
    """Raised by strict message decoding on a malformed digit or walk."""
