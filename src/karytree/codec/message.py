"""Tree-guided message decoding.

A coded message is a string of decimal digits. Starting at the root, each
digit selects a child of the current node; reaching a leaf emits its value
and moves the walk back to the root before the next digit is read.
"""
from __future__ import annotations

import logging
from typing import Any

from ..exceptions import MessageDecodeError
from ..tree import tree_math
from ..tree.indexed_tree import IndexedKAryTree

logger = logging.getLogger(__name__)


class MessageCodec:
    """Decoder bound to one tree whose leaves carry the message symbols."""

    def __init__(self, tree: IndexedKAryTree[Any]):
        self._tree = tree

    @property
    def tree(self) -> IndexedKAryTree[Any]:
        return self._tree

    def decode(self, coded_message: str, *, strict: bool = False) -> str:
        """Decode ``coded_message`` by walking the tree.

        By default the tree and message are trusted as well formed. With
        ``strict=True`` every digit must lie in ``[0, k)`` and every step must
        land on an occupied slot, otherwise MessageDecodeError is raised.
        Digits left over after the last leaf emit nothing.
        """
        tree = self._tree
        k = tree.branching_factor()
        out: list[str] = []
        current = 0
        for pos, ch in enumerate(coded_message):
            if strict and not ("0" <= ch <= "9" and int(ch) < k):
                raise MessageDecodeError(f"invalid digit {ch!r} at position {pos} for k={k}")
            current = tree_math.child(current, k, int(ch))
            value = tree.slot(current)
            if strict and value is None:
                raise MessageDecodeError(f"digit at position {pos} leads to empty slot {current}")
            if not tree.has_children(current):
                if value is not None:
                    out.append(str(value))
                current = 0
        if current != 0:
            logger.debug("message ended inside the tree at slot %d", current)
        return "".join(out)


def decode(tree: IndexedKAryTree[Any], coded_message: str, *, strict: bool = False) -> str:
    return MessageCodec(tree).decode(coded_message, strict=strict)
