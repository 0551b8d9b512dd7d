"""Index arithmetic for k-ary trees stored in array (heap) layout.

Index 0 is the root. For a node at index ``x`` the j-th child (0-indexed)
lives at ``k*x + j + 1`` and, for ``x > 0``, the parent at ``(x - 1) // k``.
Level ``d`` occupies the half-open range ``[level_start(d, k), level_start(d + 1, k))``.
"""
from __future__ import annotations


def parent(x: int, k: int) -> int:
    if x <= 0:
        raise ValueError("root node has no parent")
    return (x - 1) // k


def child(x: int, k: int, j: int) -> int:
    """Index of the j-th child of ``x``; ``j`` is not range-checked."""
    return k * x + j + 1


def children(x: int, k: int) -> range:
    first = k * x + 1
    return range(first, first + k)


def depth(x: int, k: int) -> int:
    """Number of parent hops from ``x`` to the root."""
    d = 0
    while x > 0:
        x = (x - 1) // k
        d += 1
    return d


def level_start(d: int, k: int) -> int:
    # 1 + k + k^2 + ... + k^(d-1)
    return (k**d - 1) // (k - 1)


def level_width(d: int, k: int) -> int:
    return k**d


def level_bounds(d: int, k: int) -> tuple[int, int]:
    start = level_start(d, k)
    return start, start + level_width(d, k)


def grow(capacity: int, k: int) -> int:
    """Capacity after appending one whole level."""
    return capacity * k + 1


def whole_level_capacity(n: int, k: int) -> int:
    """Smallest capacity made of whole levels that holds ``n`` slots."""
    d = 0
    while level_start(d, k) < n:
        d += 1
    return level_start(d, k)


def compact_length(rightmost: int, k: int) -> int:
    """Length of the whole-level prefix that ends with the level of ``rightmost``."""
    if rightmost < 0:
        return 0
    return level_start(depth(rightmost, k) + 1, k)
