"""Lazy traversals over an IndexedKAryTree.

Each iterator owns its own cursor (an index, a stack) and reads the tree's
live storage through ``slot``. Every call to a traversal function returns a
fresh iterator positioned at the start, so several traversals may run side by
side over one tree. Mutating the tree while an iterator is open is not
supported and gives unspecified ordering.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from ..exceptions import InvalidTreeError
from . import tree_math

if TYPE_CHECKING:
    from .indexed_tree import IndexedKAryTree


E = TypeVar("E")


class TraversalOrder(str, Enum):
    LEVEL = "level"
    PRE = "pre"
    POST = "post"


def _occupied_children(tree: "IndexedKAryTree[E]", index: int) -> list[int]:
    capacity = tree.capacity()
    return [
        c
        for c in tree_math.children(index, tree.branching_factor())
        if c < capacity and tree.slot(c) is not None
    ]


class LevelOrderIterator(Generic[E]):
    """Occupied values in increasing storage index, which is breadth-first order.

    Stops after ``size()`` values as counted when the iterator was created.
    Running off the end of storage first means the tree changed underneath
    the iterator and raises InvalidTreeError.
    """

    def __init__(self, tree: "IndexedKAryTree[E]"):
        self._tree = tree
        self._cursor = 0
        self._emitted = 0
        self._total = tree.size()

    def __iter__(self) -> "LevelOrderIterator[E]":
        return self

    def __next__(self) -> E:
        if self._emitted >= self._total:
            raise StopIteration
        capacity = self._tree.capacity()
        while self._cursor < capacity:
            value = self._tree.slot(self._cursor)
            self._cursor += 1
            if value is not None:
                self._emitted += 1
                return value
        raise InvalidTreeError(
            f"storage exhausted after {self._emitted} of {self._total} nodes"
        )


class PreOrderIterator(Generic[E]):
    """Node first, then each child subtree left to right."""

    def __init__(self, tree: "IndexedKAryTree[E]"):
        self._tree = tree
        self._stack: list[int] = [0] if tree.slot(0) is not None else []

    def __iter__(self) -> "PreOrderIterator[E]":
        return self

    def __next__(self) -> E:
        while self._stack:
            index = self._stack.pop()
            value = self._tree.slot(index)
            if value is None:
                continue
            self._stack.extend(reversed(_occupied_children(self._tree, index)))
            return value
        raise StopIteration


class PostOrderIterator(Generic[E]):
    """Each child subtree left to right, then the node itself."""

    def __init__(self, tree: "IndexedKAryTree[E]"):
        self._tree = tree
        # (index, children already scheduled)
        self._stack: list[tuple[int, bool]] = [(0, False)] if tree.slot(0) is not None else []

    def __iter__(self) -> "PostOrderIterator[E]":
        return self

    def __next__(self) -> E:
        while self._stack:
            index, expanded = self._stack.pop()
            if expanded:
                value = self._tree.slot(index)
                if value is not None:
                    return value
                continue
            self._stack.append((index, True))
            for c in reversed(_occupied_children(self._tree, index)):
                self._stack.append((c, False))
        raise StopIteration


def level_order(tree: "IndexedKAryTree[E]") -> Iterator[E]:
    return LevelOrderIterator(tree)


def pre_order(tree: "IndexedKAryTree[E]") -> Iterator[E]:
    return PreOrderIterator(tree)


def post_order(tree: "IndexedKAryTree[E]") -> Iterator[E]:
    return PostOrderIterator(tree)


_WALKERS = {
    TraversalOrder.LEVEL: level_order,
    TraversalOrder.PRE: pre_order,
    TraversalOrder.POST: post_order,
}


def walk(tree: "IndexedKAryTree[E]", order: TraversalOrder | str = TraversalOrder.LEVEL) -> Iterator[E]:
    """Open a traversal by name ("level", "pre" or "post")."""
    return _WALKERS[TraversalOrder(order)](tree)


__all__ = [
    "TraversalOrder",
    "LevelOrderIterator",
    "PreOrderIterator",
    "PostOrderIterator",
    "level_order",
    "pre_order",
    "post_order",
    "walk",
]
