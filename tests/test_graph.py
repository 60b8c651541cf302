"""
图接口与二分图检测测试
"""

import networkx as nx
import pytest

from lpmatching.matching import MatchingGraph, as_matching_graph


class TestMatchingGraph:

    def test_edges_are_unique_and_ordered(self, four_cycle):
        edges = four_cycle.edges()
        assert edges == [(0, 1), (0, 3), (1, 2), (2, 3)]
        assert all(i < j for i, j in edges)
        assert four_cycle.n_vertices == 4
        assert four_cycle.n_edges == 4

    def test_duplicate_edges_collapse(self):
        graph = MatchingGraph.from_edges(3, [(0, 1), (1, 0), (1, 2)])
        assert graph.n_edges == 2

    def test_neighbors(self, four_cycle):
        assert four_cycle.neighbors(0) == [1, 3]
        assert four_cycle.degree(2) == 2
        assert four_cycle.has_edge(3, 0)
        assert not four_cycle.has_edge(0, 2)

    def test_isolated_vertex_is_kept(self):
        graph = MatchingGraph.from_edges(3, [(0, 1)])
        assert graph.n_vertices == 3
        assert graph.neighbors(2) == []

    def test_endpoint_out_of_range(self):
        with pytest.raises(ValueError):
            MatchingGraph.from_edges(2, [(0, 2)])

    def test_rejects_self_loop(self):
        g = nx.Graph()
        g.add_edge(0, 0)
        with pytest.raises(ValueError):
            MatchingGraph(g)

    def test_rejects_non_contiguous_labels(self):
        g = nx.Graph()
        g.add_edge(1, 2)
        with pytest.raises(ValueError):
            MatchingGraph(g)

    def test_rejects_directed_graph(self):
        with pytest.raises(ValueError):
            MatchingGraph(nx.DiGraph([(0, 1)]))

    def test_as_matching_graph(self, four_cycle):
        assert as_matching_graph(four_cycle) is four_cycle
        converted = as_matching_graph(nx.path_graph(3))
        assert converted.edges() == [(0, 1), (1, 2)]
        with pytest.raises(TypeError):
            as_matching_graph([(0, 1)])


class TestBipartiteTest:

    def test_even_cycle_is_bipartite(self, four_cycle):
        coloring = four_cycle.bipartite_map()
        assert len(coloring) == 4
        for i, j in four_cycle.edges():
            assert coloring[i] != coloring[j]
        assert four_cycle.is_bipartite()

    def test_triangle_is_not_bipartite(self, triangle):
        assert triangle.bipartite_map() == {}
        assert not triangle.is_bipartite()
        assert triangle.bipartite_sides() is None

    def test_smaller_side_first(self):
        # 星形图：中心0，叶子1..3
        graph = MatchingGraph.from_edges(4, [(0, 1), (0, 2), (0, 3)])
        side_a, side_b = graph.bipartite_sides()
        assert side_a == [0]
        assert side_b == [1, 2, 3]

    def test_isolated_vertices_are_colored(self):
        graph = MatchingGraph.from_edges(5, [(0, 1), (2, 3)])
        side_a, side_b = graph.bipartite_sides()
        assert sorted(side_a + side_b) == list(range(5))

    def test_empty_graph(self):
        graph = MatchingGraph.from_edges(0, [])
        assert graph.is_bipartite()
        assert graph.bipartite_sides() == ([], [])
