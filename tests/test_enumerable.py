#!/usr/bin/env python3
"""
Tests for the fluent Enumerable wrapper.
"""

import logging
import unittest

import lq
from lq import Enumerable, from_, values
from lq.streams import sequence as seq


class TestEnumerable(unittest.TestCase):
    """Test fluent chaining and terminal operations."""

    def setUp(self):
        """Set up test data."""
        self.numbers = values(list(range(1, 11)))

    def test_filter(self):
        result = from_(self.numbers).filter(lambda n: n % 2 == 0).to_list()
        self.assertEqual(result, [2, 4, 6, 8, 10])

    def test_map(self):
        result = from_(values([1, 2, 3, 4, 5])).map(lambda n: n * 2).to_list()
        self.assertEqual(result, [2, 4, 6, 8, 10])

    def test_flat_map(self):
        result = (
            from_(values([1, 2, 3]))
            .flat_map(lambda n: values([n, n + 1, n + 2]))
            .to_list()
        )
        self.assertEqual(result, [1, 2, 3, 2, 3, 4, 3, 4, 5])

    def test_reduce(self):
        total = from_(values([1, 2, 3, 4, 5])).reduce(0, lambda acc, n: acc + n)
        self.assertEqual(total, 15)

    def test_reduce_empty_returns_initial(self):
        self.assertEqual(from_(values([])).reduce(42, lambda acc, n: acc + n), 42)

    def test_reduce_to(self):
        joined = from_(values([1, 2, 3])).reduce_to("", lambda acc, n: acc + str(n))
        self.assertEqual(joined, "123")

    def test_chaining(self):
        result = (
            from_(self.numbers)
            .filter(lambda n: n % 2 == 0)
            .map(lambda n: n * 2)
            .to_list()
        )
        self.assertEqual(result, [4, 8, 12, 16, 20])

    def test_for_each(self):
        result = []
        returned = (
            from_(values([1, 2, 3, 4, 5]))
            .filter(lambda n: n % 2 == 0)
            .for_each(result.append)
        )
        self.assertEqual(result, [2, 4])
        self.assertIsNone(returned)

    def test_for_each_empty(self):
        calls = []
        from_(values([])).for_each(calls.append)
        self.assertEqual(calls, [])

    def test_empty_sequence(self):
        result = from_(values([])).filter(lambda n: n % 2 == 0).to_list()
        self.assertEqual(result, [])
        self.assertIsInstance(result, list)

    def test_to_list_returns_new_list(self):
        enumerable = from_(values([1, 2]))
        first = enumerable.to_list()
        first.append(99)
        self.assertEqual(enumerable.to_list(), [1, 2])

    def test_matches_free_functions(self):
        """Fluent chain and nested free functions produce the same output."""
        def keep(n):
            return n % 3 != 0

        def square(n):
            return n * n

        fluent = from_(self.numbers).filter(keep).map(square).to_list()
        nested = from_(seq.map(seq.filter(self.numbers, keep), square)).to_list()

        self.assertEqual(fluent, nested)
        self.assertEqual(fluent, [1, 4, 16, 25, 49, 64, 100])

    def test_transformations_return_new_enumerables(self):
        base = from_(self.numbers)
        evens = base.filter(lambda n: n % 2 == 0)
        doubled = base.map(lambda n: n * 2)

        self.assertIsNot(base, evens)
        self.assertEqual(base.to_list(), list(range(1, 11)))
        self.assertEqual(evens.to_list(), [2, 4, 6, 8, 10])
        self.assertEqual(doubled.to_list(), [n * 2 for n in range(1, 11)])

    def test_chain_is_lazy(self):
        calls = []

        def predicate(n):
            calls.append(n)
            return True

        pipeline = from_(self.numbers).filter(predicate).map(lambda n: n)
        self.assertEqual(calls, [])

        pipeline.to_list()
        self.assertEqual(calls, list(range(1, 11)))

    def test_pipeline_reuse(self):
        pipeline = from_(self.numbers).filter(lambda n: n > 5)
        self.assertEqual(pipeline.to_list(), [6, 7, 8, 9, 10])
        self.assertEqual(pipeline.reduce(0, lambda acc, n: acc + n), 40)
        self.assertEqual(pipeline.to_list(), [6, 7, 8, 9, 10])

    def test_early_stop_through_iteration(self):
        calls = []

        def double(n):
            calls.append(n)
            return n * 2

        pipeline = from_(self.numbers).filter(lambda n: n % 2 == 0).map(double)
        for value in pipeline:
            self.assertEqual(value, 4)
            break

        self.assertEqual(calls, [2])

    def test_enumerable_is_a_sequence(self):
        inner = from_(values([1, 2, 3])).map(lambda n: n + 1)
        outer = from_(inner).filter(lambda n: n > 2)
        self.assertEqual(outer.to_list(), [3, 4])
        self.assertEqual(seq.reduce(inner, 0, lambda acc, n: acc + n), 9)

    def test_callback_error_discards_partial_result(self):
        def explode(n):
            if n == 3:
                raise ValueError(n)
            return n

        with self.assertRaises(ValueError):
            from_(values([1, 2, 3])).map(explode).to_list()

    def test_non_iterable_source(self):
        with self.assertRaises(TypeError):
            Enumerable(42)

    def test_from_iterable(self):
        self.assertEqual(Enumerable.from_iterable(range(3)).to_list(), [0, 1, 2])

    def test_package_level_free_functions(self):
        evens = lq.filter(self.numbers, lambda n: n % 2 == 0)
        self.assertEqual(lq.reduce(evens, 1, lambda acc, n: acc * n), 3840)

    def test_terminal_operations_log_counts(self):
        with self.assertLogs("lq.streams.enumerable", level=logging.DEBUG) as logs:
            from_(self.numbers).to_list()
            from_(self.numbers).filter(lambda n: n > 8).for_each(lambda n: None)

        self.assertIn("to_list collected 10 elements", logs.output[0])
        self.assertIn("for_each visited 2 elements", logs.output[1])


if __name__ == "__main__":
    unittest.main()
