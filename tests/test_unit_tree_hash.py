import unittest

from cryptography.hazmat.primitives import hashes

from tests.helpers import BANANA_TREE, BINARY_TREE

from karytree import IndexedKAryTree, TreePolicy, tree_hash
from karytree.tree.tree_hash import write_uint32


class TestTreeHash(unittest.TestCase):
    def test_digest_length_follows_policy(self):
        self.assertEqual(len(IndexedKAryTree(BANANA_TREE, 2).fingerprint()), 32)
        tree = IndexedKAryTree(BANANA_TREE, 2, policy=TreePolicy(hash_algorithm="sha512"))
        self.assertEqual(len(tree.fingerprint()), 64)

    def test_trailing_capacity_does_not_matter(self):
        short = IndexedKAryTree(["a", "b", "c"], 2)
        padded = IndexedKAryTree(["a", "b", "c", None, None, None, None], 2)
        self.assertEqual(short.fingerprint(), padded.fingerprint())
        self.assertEqual(tree_hash(short), short.fingerprint())

    def test_growth_and_removal_restore_digest(self):
        tree = IndexedKAryTree(BINARY_TREE, 2)
        before = tree.fingerprint()
        tree.set(8, "C")
        self.assertNotEqual(tree.fingerprint(), before)
        tree.set(8, None)
        self.assertEqual(tree.fingerprint(), before)

    def test_shape_and_values_both_count(self):
        base = IndexedKAryTree(BANANA_TREE, 2)
        renamed = IndexedKAryTree(["_", "_", "A", "B", "M", None, None], 2)
        mirrored = IndexedKAryTree(base.mirror(), 2)
        self.assertNotEqual(base.fingerprint(), renamed.fingerprint())
        self.assertNotEqual(base.fingerprint(), mirrored.fingerprint())
        # same level order, different shape
        flat = IndexedKAryTree(["_", "_", "A", "B", None, "N", None], 2)
        self.assertNotEqual(base.fingerprint(), flat.fingerprint())

    def test_custom_encoder(self):
        tree = IndexedKAryTree([1, 2, 3], 2)
        seen = []

        def encoder(value):
            seen.append(value)
            return str(value).encode()

        tree.fingerprint(encoder)
        self.assertEqual(sorted(seen), [1, 2, 3])

    def test_empty_tree(self):
        tree = IndexedKAryTree(["x"], 2)
        tree.set(0, None)
        self.assertEqual(tree.fingerprint(), b"")

    def test_write_uint32(self):
        self.assertEqual(write_uint32(5), b"\x00\x00\x00\x05")
        self.assertEqual(write_uint32(0x01020304), b"\x01\x02\x03\x04")
        with self.assertRaises(OverflowError):
            write_uint32(1 << 32)

    def test_leaf_digest_layout(self):
        def sha256(data):
            h = hashes.Hash(hashes.SHA256())
            h.update(data)
            return h.finalize()

        blank = sha256(b"\x00")
        expected = sha256(b"\x01" + b"\x00\x00\x00\x03" + b"'a'" + blank + blank)
        self.assertEqual(IndexedKAryTree(["a"], 2).fingerprint(), expected)


if __name__ == "__main__":
    unittest.main()
