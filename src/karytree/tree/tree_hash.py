"""Content fingerprint for array-shaped trees.

The digest is computed bottom-up like a Merkle tree:

- absent slot:   H(0x00)
- occupied slot: H(0x01 || uint32(len(value_bytes)) || value_bytes || child_0 || ... || child_{k-1})

Children past capacity hash as absent, so two trees with the same branching
factor and the same ``to_array()`` produce the same digest whatever their
trailing capacity.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from cryptography.hazmat.primitives import hashes

from . import tree_math

if TYPE_CHECKING:
    from .indexed_tree import IndexedKAryTree


def write_uint32(x: int) -> bytes:
    return x.to_bytes(4, "big")


def _default_encoder(value: Any) -> bytes:
    return repr(value).encode("utf-8")


def _digest(algo: hashes.HashAlgorithm, data: bytes) -> bytes:
    h = hashes.Hash(algo)
    h.update(data)
    return h.finalize()


def tree_hash(
    tree: "IndexedKAryTree[Any]",
    encoder: Optional[Callable[[Any], bytes]] = None,
) -> bytes:
    """Return the fingerprint of ``tree``, or b"" when it has no nodes."""
    if tree.is_empty():
        return b""
    encode = encoder or _default_encoder
    algo = tree.policy.hash_algo()
    k = tree.branching_factor()
    blank = _digest(algo, b"\x00")

    snapshot = tree.to_array() or []
    node_hashes: dict[int, bytes] = {}
    # Children always sit at higher indices than their parent.
    for index in range(len(snapshot) - 1, -1, -1):
        value = snapshot[index]
        if value is None:
            continue
        payload = encode(value)
        buf = b"\x01" + write_uint32(len(payload)) + payload
        for c in tree_math.children(index, k):
            buf += node_hashes.get(c, blank)
        node_hashes[index] = _digest(algo, buf)
    return node_hashes.get(0, blank)
