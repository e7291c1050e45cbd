#!/usr/bin/env python3
"""
Tests for the sequential sequence operations.
"""

import operator
import unittest
from seqstream import reverse, map, filter, remove, take, drop, foldl, foldr


def is_even(x):
    return x % 2 == 0


class TestSequenceOps(unittest.TestCase):
    """Test list-based transformations."""
    
    def setUp(self):
        """Set up test data."""
        self.data = list(range(1, 11))
    
    def test_reverse(self):
        """Test reverse returns an inverted copy."""
        result = reverse(self.data)
        
        self.assertEqual(result, [10, 9, 8, 7, 6, 5, 4, 3, 2, 1])
        self.assertEqual(reverse(result), self.data)
        self.assertEqual(self.data, list(range(1, 11)))  # Input untouched
        self.assertEqual(reverse([]), [])
    
    def test_map(self):
        """Test map keeps order and length."""
        self.assertEqual(map(lambda x: x * 2, self.data), [2, 4, 6, 8, 10, 12, 14, 16, 18, 20])
        self.assertEqual(map(str, []), [])
    
    def test_map_evaluates_in_index_order(self):
        """Test map calls the function sequentially."""
        seen = []
        map(seen.append, self.data)
        self.assertEqual(seen, self.data)
    
    def test_filter_and_remove(self):
        """Test filter and remove partition the input."""
        self.assertEqual(filter(lambda x: x < 5, self.data), [1, 2, 3, 4])
        self.assertEqual(filter(is_even, self.data), [2, 4, 6, 8, 10])
        self.assertEqual(remove(is_even, self.data), [1, 3, 5, 7, 9])
        
        kept = filter(is_even, self.data)
        dropped = remove(is_even, self.data)
        self.assertEqual(len(kept) + len(dropped), len(self.data))
        self.assertEqual(sorted(kept + dropped, key=self.data.index), self.data)
    
    def test_take(self):
        """Test take at and beyond the boundaries."""
        self.assertEqual(take(3, self.data), [1, 2, 3])
        self.assertEqual(take(0, self.data), [])
        self.assertEqual(take(-2, self.data), [])
        self.assertEqual(take(50, self.data), self.data)
    
    def test_drop(self):
        """Test drop at and beyond the boundaries."""
        self.assertEqual(drop(3, self.data), [4, 5, 6, 7, 8, 9, 10])
        self.assertEqual(drop(10, self.data), [])
        self.assertEqual(drop(50, self.data), [])
        
        copy = drop(-1, self.data)
        self.assertEqual(copy, self.data)
        self.assertIsNot(copy, self.data)
    
    def test_take_drop_split(self):
        """Test take and drop reassemble the input."""
        for n in range(len(self.data) + 1):
            self.assertEqual(take(n, self.data) + drop(n, self.data), self.data)
    
    def test_folds(self):
        """Test fold direction and argument order."""
        data = [1, 2, 3, 4, 5]
        self.assertEqual(foldl(operator.sub, 0, data), -15)
        self.assertEqual(foldr(operator.sub, 0, data), 3)
        
        self.assertEqual(foldl(operator.add, 0, self.data), 55)
        self.assertEqual(foldr(operator.add, 0, self.data), 55)
        self.assertEqual(foldl(operator.mul, 1, self.data), 3628800)
        self.assertEqual(foldr(operator.mul, 1, self.data), 3628800)
    
    def test_fold_argument_order(self):
        """Test foldl passes the accumulator first and foldr passes it second."""
        self.assertEqual(foldl(lambda acc, x: f"({acc}{x})", "z", "abc"), "(((za)b)c)")
        self.assertEqual(foldr(lambda x, acc: f"({x}{acc})", "z", "abc"), "(a(b(cz)))")
    
    def test_folds_on_empty_input(self):
        """Test both folds return the initial value."""
        self.assertEqual(foldl(operator.sub, 42, []), 42)
        self.assertEqual(foldr(operator.sub, 42, []), 42)
    
    def test_folds_do_not_recurse(self):
        """Test folds handle inputs deeper than the recursion limit."""
        data = [1] * 100_000
        self.assertEqual(foldl(operator.add, 0, data), 100_000)
        self.assertEqual(foldr(operator.add, 0, data), 100_000)
    
    def test_errors_propagate(self):
        """Test a failing function surfaces to the caller."""
        def boom(x):
            raise RuntimeError(f"bad {x}")
        
        with self.assertRaises(RuntimeError):
            map(boom, self.data)
        with self.assertRaises(RuntimeError):
            foldl(lambda acc, x: boom(x), 0, self.data)


if __name__ == "__main__":
    unittest.main()
