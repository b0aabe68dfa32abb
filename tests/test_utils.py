import unittest
from collections import OrderedDict

from shape_schema import utils


class UtilsTests(unittest.TestCase):
    def test_get_type_categories(self):
        cases = [
            (None, "null"),
            (True, "boolean"),
            (3, "number"),
            (2.5, "number"),
            ("s", "string"),
            (b"s", "bytes"),
            ({"a": 1}, "map"),
            (OrderedDict(), "map"),
            ((1, 2), "tuple"),
            ([1], "list"),
            ({1}, "set"),
            (frozenset(), "set"),
            (len, "function"),
            (object(), "object"),
        ]
        for value, name in cases:
            self.assertEqual(utils.get_type(value), name, repr(value))

    def test_is_pair(self):
        self.assertTrue(utils._is_pair(("a", 1)))
        self.assertFalse(utils._is_pair(["a", 1]))     # lists are data, not pairs
        self.assertFalse(utils._is_pair(("a", 1, 2)))
        self.assertFalse(utils._is_pair(([], 1)))      # unhashable key
        self.assertFalse(utils._is_pair(((1, [2]), "v")))  # tuple key holding a list

    def test_kv_from_list_mixes_pairs_and_indices(self):
        self.assertEqual(
            utils._kv_from_list(["x", ("k", "v"), ["y", 1]]),
            {0: "x", "k": "v", 2: ["y", 1]},
        )

    def test_kv_from_list_later_pairs_win(self):
        self.assertEqual(utils._kv_from_list([("k", 1), ("k", 2)]), {"k": 2})
