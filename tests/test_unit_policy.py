import unittest

from karytree import TreePolicy


class TestTreePolicy(unittest.TestCase):
    def test_defaults(self):
        policy = TreePolicy()
        self.assertEqual(
            policy.as_runtime_dict(),
            {
                "absent_token": "None",
                "separator": " ",
                "hash_algorithm": "sha256",
            },
        )

    def test_no_orphan_switch(self):
        self.assertFalse(hasattr(TreePolicy, "lenient"))
        with self.assertRaises(TypeError):
            TreePolicy(strict_snapshot=False)

    def test_hash_algorithm_is_normalised(self):
        policy = TreePolicy(hash_algorithm=" SHA384 ")
        self.assertEqual(policy.hash_algorithm, "sha384")
        self.assertEqual(policy.hash_algo().name, "sha384")

    def test_unknown_hash_algorithm(self):
        with self.assertRaises(ValueError):
            TreePolicy(hash_algorithm="md5")


if __name__ == "__main__":
    unittest.main()
