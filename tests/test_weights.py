"""
权重预处理测试
"""

import numpy as np
import pytest

from lpmatching.matching import MatchingGraph, cutoff_weights, default_weights, normalize_weights


class TestDefaultWeights:

    def test_unit_weight_on_edges(self, four_cycle):
        w = default_weights(four_cycle)
        assert w.shape == (4, 4)
        assert w[0, 1] == 1 and w[1, 0] == 1
        assert w[0, 2] == 0
        assert np.trace(w) == 0
        assert w.sum() == 2 * four_cycle.n_edges


class TestNormalizeWeights:

    def test_result_is_symmetric(self, four_cycle):
        rng = np.random.default_rng(0)
        w = rng.uniform(0, 10, size=(4, 4))
        normalized = normalize_weights(four_cycle, w)
        assert np.allclose(normalized, normalized.T)

    def test_non_edges_are_zeroed(self, four_cycle):
        w = np.full((4, 4), 7.0)
        normalized = normalize_weights(four_cycle, w)
        assert normalized[0, 2] == 0 and normalized[2, 0] == 0
        assert normalized[1, 3] == 0
        assert np.all(np.diag(normalized) == 0)
        assert normalized[0, 1] == 7

    def test_lower_triangle_only(self, four_cycle):
        """只填写下三角时使用下三角的值"""
        w = np.zeros((4, 4))
        w[1, 0] = 3
        w[3, 0] = 4
        normalized = normalize_weights(four_cycle, w)
        assert normalized[0, 1] == 3 and normalized[1, 0] == 3
        assert normalized[0, 3] == 4

    def test_larger_entry_wins(self, four_cycle):
        w = np.zeros((4, 4))
        w[0, 1], w[1, 0] = 2, 5
        w[1, 2], w[2, 1] = 6, 1
        normalized = normalize_weights(four_cycle, w)
        assert normalized[0, 1] == 5
        assert normalized[1, 2] == 6

    def test_negative_lower_entry_is_ignored(self, four_cycle):
        w = np.zeros((4, 4))
        w[0, 1], w[1, 0] = -3, -1
        normalized = normalize_weights(four_cycle, w)
        assert normalized[0, 1] == -3

    def test_input_not_modified(self, four_cycle):
        w = np.arange(16, dtype=float).reshape(4, 4)
        original = w.copy()
        normalize_weights(four_cycle, w)
        assert np.array_equal(w, original)

    def test_wrong_shape(self, four_cycle):
        with pytest.raises(ValueError):
            normalize_weights(four_cycle, np.ones((3, 3)))

    def test_accepts_nested_lists(self):
        graph = MatchingGraph.from_edges(2, [(0, 1)])
        normalized = normalize_weights(graph, [[0, 2], [0, 0]])
        assert normalized.tolist() == [[0, 2], [2, 0]]


class TestCutoffWeights:

    def test_entries_below_cutoff_are_zeroed(self):
        w = np.array([[0.0, 0.5, 2.0], [1.0, 0.0, 3.0], [2.0, 0.2, 0.0]])
        out = cutoff_weights(w, 1.0)
        assert np.all(out[w < 1.0] == 0)
        assert np.array_equal(out[w >= 1.0], w[w >= 1.0])

    def test_equal_to_cutoff_is_kept(self):
        out = cutoff_weights(np.array([[0.0, 1.0], [1.0, 0.0]]), 1.0)
        assert out[0, 1] == 1.0

    def test_input_not_modified(self):
        w = np.array([[0.0, 0.5], [0.5, 0.0]])
        cutoff_weights(w, 1.0)
        assert w[0, 1] == 0.5

    def test_idempotent(self):
        rng = np.random.default_rng(3)
        w = rng.uniform(-1, 5, size=(6, 6))
        once = cutoff_weights(w, 2.0)
        twice = cutoff_weights(once, 2.0)
        assert np.array_equal(once, twice)

    def test_negative_cutoff_keeps_matrix(self):
        w = np.array([[0.0, -0.5], [-2.0, 0.0]])
        out = cutoff_weights(w, -1.0)
        assert out[0, 1] == -0.5
        assert out[1, 0] == 0
