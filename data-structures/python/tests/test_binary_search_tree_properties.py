import io
import math
import os
import sys
import unittest

from hypothesis import given, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_search_tree import BinarySearchTree


values = st.lists(st.integers(min_value=-50, max_value=50), max_size=60)
operations = st.lists(
    st.tuples(st.sampled_from(["insert", "remove"]), st.integers(min_value=-20, max_value=20)),
    max_size=80,
)


def _build(xs):
    bst = BinarySearchTree()
    for x in xs:
        bst.insert(x)
    return bst


class TestOrderingProperties(unittest.TestCase):

    @given(values)
    def test_in_order_is_sorted_and_unique(self, xs):
        bst = _build(xs)
        self.assertEqual(bst.in_order(), sorted(set(xs)))

    @given(operations)
    def test_ordering_and_count_survive_mutation(self, ops):
        bst = BinarySearchTree()
        model = set()
        successes = 0
        for op, x in ops:
            if op == "insert":
                inserted = bst.insert(x)
                self.assertEqual(inserted, x not in model)
                model.add(x)
                successes += inserted
            else:
                removed = bst.remove(x)
                self.assertEqual(removed, x in model)
                model.discard(x)
                successes -= removed
            traversal = bst.in_order()
            self.assertEqual(traversal, sorted(model))
            self.assertEqual(bst.count(), successes)
            self.assertEqual(bst.count(), len(traversal))
            self.assertEqual(len(bst), len(traversal))

    @given(values)
    def test_print_matches_in_order(self, xs):
        bst = _build(xs)
        out = io.StringIO()
        bst.print(file=out)
        expected = "".join(f"{x} " for x in sorted(set(xs))) + "\n"
        self.assertEqual(out.getvalue(), expected)


class TestQueryProperties(unittest.TestCase):

    @given(values, st.integers(min_value=-60, max_value=60))
    def test_search_agrees_with_traversal(self, xs, probe):
        bst = _build(xs)
        self.assertEqual(bst.search(probe), probe in bst.in_order())

    @given(values)
    def test_select_agrees_with_traversal(self, xs):
        bst = _build(xs)
        traversal = bst.in_order()
        for k, expected in enumerate(traversal):
            self.assertEqual(bst.select(k), expected)
        self.assertIsNone(bst.select(len(traversal)))
        self.assertIsNone(bst.select(-1))

    @given(values)
    def test_height_bounds(self, xs):
        bst = _build(xs)
        n = bst.count()
        self.assertLessEqual(bst.height(), n)
        self.assertGreaterEqual(bst.height(), math.ceil(math.log2(n + 1)))


class TestRemoveProperties(unittest.TestCase):

    @given(values, st.integers(min_value=-60, max_value=60))
    def test_remove_drops_exactly_one_occurrence(self, xs, target):
        bst = _build(xs)
        before = bst.in_order()
        removed = bst.remove(target)
        after = bst.in_order()
        if target in before:
            self.assertTrue(removed)
            expected = list(before)
            expected.remove(target)
            self.assertEqual(after, expected)
        else:
            self.assertFalse(removed)
            self.assertEqual(after, before)


class TestCopyProperties(unittest.TestCase):

    @given(values, operations)
    def test_copy_is_independent(self, xs, ops):
        original = _build(xs)
        snapshot = original.pre_order()
        clone = original.copy()
        self.assertEqual(clone.pre_order(), snapshot)
        for op, x in ops:
            getattr(clone, op)(x)
        self.assertEqual(original.pre_order(), snapshot)

    @given(values)
    def test_destroy_releases_count_nodes(self, xs):
        bst = _build(xs)
        expected = bst.count()
        self.assertEqual(bst.destroy(), expected)
        self.assertEqual(bst.count(), 0)
        self.assertEqual(bst.destroy(), 0)


if __name__ == "__main__":
    unittest.main()
