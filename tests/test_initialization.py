# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Tests for centroid seeding.
"""

import unittest
import numpy as np

from spreadkmeans.clusterer import InvalidParameterError
from spreadkmeans.clusterer.initialization import (
    GREEDY_SPREAD,
    RANDOM,
    as_generator,
    greedy_spread,
    init_centroids,
    resolve_method,
    spread_weights,
)


TWO_GROUPS = np.array([[0.0, 0.0], [0.0, 1.0], [10.0, 0.0], [10.0, 1.0]])


class ResolveMethodTest(unittest.TestCase):
    """Test cases for method name resolution."""

    def test_aliases(self):
        for name in ["random", "RAND", "Random"]:
            self.assertEqual(resolve_method(name), RANDOM)
        for name in ["greedy-spread", "kmpp", "KM++", "kp", "k-means++"]:
            self.assertEqual(resolve_method(name), GREEDY_SPREAD)

    def test_unknown_method_warns(self):
        with self.assertWarns(UserWarning):
            self.assertEqual(resolve_method("k-means||"), RANDOM)

    def test_non_string_method_warns(self):
        with self.assertWarns(UserWarning):
            self.assertEqual(resolve_method(5), RANDOM)
        self.assertEqual(resolve_method(None), RANDOM)


class SpreadWeightsTest(unittest.TestCase):
    """Test cases for greedy-spread selection weights."""

    def test_single_centroid(self):
        weights, partitions = spread_weights(TWO_GROUPS, [0])
        far = np.sqrt(101.0)
        np.testing.assert_allclose(weights, [0.0, 1.0 / far, 10.0 / far, 1.0])
        np.testing.assert_array_equal(partitions, [0, 0, 0, 0])
        # the point farthest from the first seed has non-zero weight
        self.assertEqual(int(np.argmax(weights)), 3)
        self.assertGreater(weights[3], 0.0)

    def test_weights_normalised_per_partition(self):
        weights, partitions = spread_weights(TWO_GROUPS, [0, 2])
        np.testing.assert_array_equal(partitions, [0, 0, 1, 1])
        np.testing.assert_allclose(weights, [0.0, 1.0, 0.0, 1.0])
        for p in np.unique(partitions):
            member_weights = weights[partitions == p]
            self.assertEqual(member_weights.min(), 0.0)
            self.assertEqual(member_weights.max(), 1.0)
            self.assertAlmostEqual(member_weights.sum(), 1.0)

    def test_flat_partition_has_zero_weight(self):
        data = np.array([[0.0, 0.0], [1.0, 0.0], [-1.0, 0.0]])
        weights, _ = spread_weights(data, [0])
        np.testing.assert_allclose(weights, [0.0, 1.0, 1.0])
        weights, _ = spread_weights(np.array([[2.0, 2.0], [2.0, 2.0]]), [0])
        np.testing.assert_array_equal(weights, [0.0, 0.0])

    def test_chosen_centroids_have_zero_weight(self):
        rng = np.random.default_rng(3)
        data = rng.uniform(0.0, 1.0, size=(30, 2))
        chosen = [4, 17, 22]
        weights, _ = spread_weights(data, chosen)
        np.testing.assert_array_equal(weights[chosen], 0.0)
        self.assertTrue(np.all((weights >= 0.0) & (weights <= 1.0)))


class GreedySpreadTest(unittest.TestCase):
    """Test cases for greedy-spread seeding."""

    def test_distinct_indices(self):
        rng = np.random.default_rng(5)
        data = rng.uniform(0.0, 100.0, size=(25, 2))
        for seed in range(10):
            indices = greedy_spread(data, 6, seed)
            self.assertEqual(len(indices), 6)
            self.assertEqual(len(set(indices.tolist())), 6)
            self.assertTrue(np.all((indices >= 0) & (indices < 25)))

    def test_duplicates_of_a_seed_are_never_drawn(self):
        data = np.array([[0.0, 0.0]] * 5 + [[10.0, 10.0]])
        for seed in range(20):
            indices = greedy_spread(data, 2, seed).tolist()
            self.assertIn(5, indices)
            self.assertEqual(len(set(indices)), 2)

    def test_reproducible_with_seed(self):
        first = greedy_spread(TWO_GROUPS, 3, 42)
        second = greedy_spread(TWO_GROUPS, 3, np.random.default_rng(42))
        np.testing.assert_array_equal(first, second)

    def test_all_zero_weights_fall_back_to_uniform(self):
        data = np.zeros((3, 2))
        with self.assertLogs("spreadkmeans.clusterer.initialization", level="WARNING"):
            indices = greedy_spread(data, 3, 0)
        self.assertEqual(sorted(indices.tolist()), [0, 1, 2])

    def test_invalid_k(self):
        with self.assertRaises(InvalidParameterError):
            greedy_spread(TWO_GROUPS, 0)
        with self.assertRaises(InvalidParameterError):
            greedy_spread(TWO_GROUPS, 5)


class InitCentroidsTest(unittest.TestCase):
    """Test cases for init_centroids."""

    def test_random_distinct_indices(self):
        for seed in range(10):
            indices = init_centroids("random", 4, 3, TWO_GROUPS, seed)
            self.assertEqual(len(set(indices.tolist())), 3)
            self.assertTrue(np.all((indices >= 0) & (indices < 4)))

    def test_k_equals_n_uses_every_row(self):
        for method in ["random", "greedy-spread"]:
            indices = init_centroids(method, 4, 4, TWO_GROUPS, 9)
            self.assertEqual(sorted(indices.tolist()), [0, 1, 2, 3])

    def test_generator_is_consumed(self):
        rng = as_generator(0)
        first = init_centroids("random", 4, 2, TWO_GROUPS, rng)
        self.assertIs(as_generator(rng), rng)
        self.assertEqual(len(first), 2)

    def test_k_bounds(self):
        with self.assertRaises(InvalidParameterError):
            init_centroids("random", 4, 0, TWO_GROUPS)
        with self.assertRaises(InvalidParameterError):
            init_centroids("random", 4, 5, TWO_GROUPS)


if __name__ == "__main__":
    unittest.main()
