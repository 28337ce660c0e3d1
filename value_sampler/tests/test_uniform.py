"""
Tests for uniform distributions.
"""

import random
import unittest

import numpy as np

from value_sampler.distribution import Distribution, RemovableDistribution, Span, UniformDistribution
from value_sampler.errors import EmptyPopulation, InvalidDistributionInput, NegativeRangeBound


class TestSpan(unittest.TestCase):
    """Test cases for Span."""

    def test_inclusive_and_exclusive_end(self):
        """Test that the end is included unless exclusive is set."""
        self.assertEqual(list(Span(1, 6)), [1, 2, 3, 4, 5, 6])
        self.assertEqual(list(Span(1, 6, exclusive=True)), [1, 2, 3, 4, 5])
        self.assertEqual(len(Span(-2, 7)), 10)
        self.assertEqual(len(Span(2, 2)), 1)
        self.assertEqual(len(Span(0, -1)), 0)

    def test_indexing(self):
        """Test positional access, including negative indices."""
        span = Span(10, 14)
        self.assertEqual(span[0], 10)
        self.assertEqual(span[4], 14)
        self.assertEqual(span[-1], 14)
        self.assertEqual(span[1:3], [11, 12])
        with self.assertRaises(IndexError):
            span[5]

    def test_membership(self):
        """Test membership for integers, floats and unrelated types."""
        span = Span(1, 6, exclusive=True)
        self.assertIn(1, span)
        self.assertIn(5, span)
        self.assertNotIn(6, span)
        self.assertNotIn(0, span)
        self.assertNotIn(2.5, span)
        self.assertNotIn("a", span)

        halves = Span(0.5, 2.5)
        self.assertEqual(list(halves), [0.5, 1.5, 2.5])
        self.assertIn(1.5, halves)
        self.assertNotIn(1.0, halves)

    def test_fractional_endpoints(self):
        """Test that a fractional distance keeps every step below the end."""
        exclusive = Span(0.5, 3.0, exclusive=True)
        self.assertEqual(list(exclusive), [0.5, 1.5, 2.5])
        self.assertIn(2.5, exclusive)
        self.assertNotIn(3.5, exclusive)

        inclusive = Span(0.5, 3.0)
        self.assertEqual(list(inclusive), [0.5, 1.5, 2.5])
        self.assertEqual(len(Span(0, -0.5)), 0)
        self.assertEqual(len(Span(0, 0.5)), 1)

        d = UniformDistribution(exclusive)
        self.assertEqual(d.num_values(), 3)
        self.assertAlmostEqual(d.probability_of(2.5), 1.0 / 3)

    def test_repr(self):
        """Test the range-like representation."""
        self.assertEqual(repr(Span(1, 6)), "Span(1..6)")
        self.assertEqual(repr(Span(1, 6, exclusive=True)), "Span(1...6)")


class TestUniformDistribution(unittest.TestCase):
    """Test cases for UniformDistribution."""

    def setUp(self):
        """Build one distribution per supported input shape."""
        self.ten_strings = ['a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'i', 'j']
        self.cases = {
            "set_single_string": ({"one"}, ["one"]),
            "set_10_string": (set(self.ten_strings), self.ten_strings),
            "set_10_numeric": (set(range(3, 13)), list(range(3, 13))),
            "list_single_numeric": ([22], [22]),
            "list_10_string": (self.ten_strings, self.ten_strings),
            "tuple_10_numeric": (tuple(range(101, 111)), list(range(101, 111))),
            "range_single": (range(1, 2), [1]),
            "range_10": (range(1, 11), list(range(1, 11))),
            "range_stepped": (range(0, 20, 5), [0, 5, 10, 15]),
            "span_single_inclusive": (Span(2, 2), [2]),
            "span_10_inclusive": (Span(-2, 7), list(range(-2, 8))),
            "span_10_exclusive": (Span(1, 11, exclusive=True), list(range(1, 11))),
            "scalar_zero": (0, [0]),
            "scalar_nonzero": (22, list(range(0, 23))),
            "numpy_array": (np.array([[1, 2], [3, 4]]), [1, 2, 3, 4]),
        }

    def test_is_a_removable_distribution(self):
        """Test that the class implements the full capability set."""
        d = UniformDistribution([1, 2, 3])
        self.assertIsInstance(d, Distribution)
        self.assertIsInstance(d, RemovableDistribution)

    def test_error_inputs(self):
        """Test that empty and invalid inputs are rejected."""
        with self.assertRaises(EmptyPopulation):
            UniformDistribution(set())
        with self.assertRaises(EmptyPopulation):
            UniformDistribution([])
        with self.assertRaises(EmptyPopulation):
            UniformDistribution(range(0))
        with self.assertRaises(EmptyPopulation):
            UniformDistribution(Span(0, -1))
        with self.assertRaises(EmptyPopulation):
            UniformDistribution(Span(3, 3, exclusive=True))
        with self.assertRaises(NegativeRangeBound):
            UniformDistribution(-1)
        with self.assertRaises(NegativeRangeBound):
            UniformDistribution(np.int64(-5))
        with self.assertRaises(InvalidDistributionInput):
            UniformDistribution(None)
        with self.assertRaises(InvalidDistributionInput):
            UniformDistribution("abc")
        with self.assertRaises(InvalidDistributionInput):
            UniformDistribution(True)

    def test_errors_are_value_errors(self):
        """Test that errors can be caught as the builtin ValueError."""
        with self.assertRaises(ValueError):
            UniformDistribution([])
        with self.assertRaises(ValueError):
            UniformDistribution(-1)

    def test_num_values_and_values(self):
        """Test the population size and contents for every input shape."""
        for name, (values, expected) in self.cases.items():
            with self.subTest(case=name):
                d = UniformDistribution(values)
                self.assertEqual(d.num_values(), len(expected))
                self.assertEqual(len(d.all_values()), d.num_values())
                self.assertEqual(set(d.all_values()), set(expected))

    def test_numpy_scalar_bound(self):
        """Test that numpy integers are accepted as a range bound."""
        d = UniformDistribution(np.int32(4))
        self.assertEqual(d.all_values(), [0, 1, 2, 3, 4])

    def test_normalization(self):
        """Test that the probabilities of all values sum to one."""
        for name, (values, _) in self.cases.items():
            with self.subTest(case=name):
                d = UniformDistribution(values)
                total = sum(d.probability_of(v) for v in d.all_values())
                self.assertAlmostEqual(total, 1.0, delta=2e-4)

    def test_probability_of_members_and_non_members(self):
        """Test equal mass for members and zero for everything else."""
        d = UniformDistribution({1, 2, 3, 4, 5})
        for x in range(1, 6):
            self.assertEqual(d.probability_of(x), 0.2)
        self.assertEqual(d.probability_of(6), 0.0)
        self.assertEqual(d.probability_of("1"), 0.0)

        r = UniformDistribution(Span(1, 6, exclusive=True))
        self.assertEqual(r.probability_of(5), 0.2)
        self.assertEqual(r.probability_of(6), 0.0)

    def test_duplicates_are_kept(self):
        """Test that duplicated list entries each carry one share of mass."""
        d = UniformDistribution(["x", "x", "y", "z"])
        self.assertEqual(d.num_values(), 4)
        self.assertEqual(d.probability_of("x"), 0.25)
        self.assertEqual(d.probability_of("y"), 0.25)
        self.assertAlmostEqual(d.expectation(lambda v: 1.0 if v == "x" else 0.0), 0.5)

    def test_membership_for_large_lists(self):
        """Test membership on a big list, before and after a removal."""
        d = UniformDistribution([str(i) for i in range(20000)], rng=random.Random(5))
        total = sum(d.probability_of(v) for v in d.all_values())
        self.assertAlmostEqual(total, 1.0, delta=2e-4)
        self.assertEqual(d.probability_of("20000"), 0.0)
        self.assertEqual(d.probability_of(["unhashable"]), 0.0)

        removed = d.sample_from_distribution_and_remove()
        self.assertEqual(d.probability_of(removed), 0.0)
        self.assertEqual(d.probability_of("0" if removed != "0" else "1"), 1.0 / 19999)

    def test_membership_with_unhashable_values(self):
        """Test membership when list entries cannot be hashed."""
        d = UniformDistribution([[1], [2]])
        self.assertEqual(d.probability_of([1]), 0.5)
        self.assertEqual(d.probability_of([3]), 0.0)
        self.assertEqual(d.probability_of(1), 0.0)

    def test_input_list_not_mutated(self):
        """Test that removal works on a copy of the caller's list."""
        values = [1, 2, 3]
        d = UniformDistribution(values, rng=random.Random(1))
        d.sample_from_distribution_and_remove()
        self.assertEqual(values, [1, 2, 3])

    def test_sample_values_are_valid(self):
        """Test that every sample is a member of the population."""
        rng = random.Random(7)
        for name, (values, expected) in self.cases.items():
            with self.subTest(case=name):
                d = UniformDistribution(values, rng=rng)
                valid = set(expected)
                for s in d.sample_n(1000):
                    self.assertIn(s, valid)

    def test_lazy_range_samples_without_materializing(self):
        """Test that a huge range can be sampled and inspected cheaply."""
        d = UniformDistribution(10 ** 12, rng=random.Random(3))
        self.assertEqual(d.num_values(), 10 ** 12 + 1)
        s = d.sample_from_distribution()
        self.assertTrue(0 <= s <= 10 ** 12)
        self.assertEqual(d.probability_of(10 ** 12), 1.0 / (10 ** 12 + 1))
        self.assertEqual(d.probability_of(-1), 0.0)

    def test_sample_and_remove(self):
        """Test that removal shrinks the population until it is empty."""
        d = UniformDistribution(Span(1, 5), rng=random.Random(11))
        drawn = []
        while d.num_values() > 0:
            before = d.num_values()
            value = d.sample_from_distribution_and_remove()
            drawn.append(value)
            self.assertEqual(d.num_values(), before - 1)
            self.assertEqual(d.probability_of(value), 0.0)
            if d.num_values():
                self.assertAlmostEqual(
                    sum(d.probability_of(v) for v in d.all_values()), 1.0
                )
        self.assertEqual(sorted(drawn), [1, 2, 3, 4, 5])

        with self.assertRaises(EmptyPopulation):
            d.sample_from_distribution()

    def test_remove_takes_one_occurrence(self):
        """Test that only a single copy of a duplicated value is removed."""
        d = UniformDistribution(["x", "x"], rng=random.Random(0))
        self.assertEqual(d.sample_from_distribution_and_remove(), "x")
        self.assertEqual(d.all_values(), ["x"])
        self.assertEqual(d.probability_of("x"), 1.0)

    def test_sampling_accuracy(self):
        """Test observed frequencies against the uniform mass."""
        d = UniformDistribution(range(1, 11), rng=random.Random(2024))
        num_samples = 50000
        samples = np.array(d.sample_n(num_samples))
        for value in range(1, 11):
            observed = np.mean(samples == value)
            self.assertAlmostEqual((0.1 - observed) / 0.1, 0.0, delta=0.1)

    def test_seeded_rng_is_reproducible(self):
        """Test that equal seeds give equal draws."""
        a = UniformDistribution(100, rng=random.Random(5))
        b = UniformDistribution(100, rng=random.Random(5))
        self.assertEqual(a.sample_n(50), b.sample_n(50))

    def test_copy_is_independent(self):
        """Test that removing from a copy leaves the original intact."""
        d = UniformDistribution([1, 2, 3], rng=random.Random(9))
        clone = d.copy()
        clone.sample_from_distribution_and_remove()
        self.assertEqual(clone.num_values(), 2)
        self.assertEqual(d.num_values(), 3)

    def test_idempotent_inspection(self):
        """Test that inspection does not change results."""
        d = UniformDistribution(Span(1, 6))
        self.assertEqual(d.all_values(), d.all_values())
        self.assertEqual(d.num_values(), d.num_values())
        self.assertEqual(d.probability_of(3), d.probability_of(3))

    def test_repr(self):
        """Test the abbreviated string representation."""
        self.assertEqual(repr(UniformDistribution([1, 2])), "UniformDistribution([1, 2])")
        self.assertEqual(
            repr(UniformDistribution(list(range(10)))),
            "UniformDistribution([0, 1, 2, ..., 9])"
        )
        self.assertEqual(repr(UniformDistribution(3)), "UniformDistribution(Span(0..3))")


if __name__ == '__main__':
    unittest.main()
