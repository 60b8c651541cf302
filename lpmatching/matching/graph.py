"""
匹配问题的图接口
Graph provider for matching formulations

基于NetworkX实现，提供顶点数、边枚举、邻接查询和二分图着色
顶点编号为 0..n-1
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

import networkx as nx

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


class MatchingGraph:
    """无向简单图，顶点编号为 0..n-1"""

    def __init__(self, graph: nx.Graph):
        """
        初始化图

        Args:
            graph: NetworkX无向图，节点必须恰好为 0..n-1
        """
        if graph.is_directed() or graph.is_multigraph():
            raise ValueError("只支持无向简单图 (nx.Graph)")

        n = graph.number_of_nodes()
        if set(graph.nodes) != set(range(n)):
            raise ValueError(f"图的节点必须为 0..{n - 1}")

        loops = list(nx.selfloop_edges(graph))
        if loops:
            raise ValueError(f"图中不允许自环: {loops[:3]}")

        self._graph = graph
        self.n_vertices = n
        self._edges = sorted((min(u, v), max(u, v)) for u, v in graph.edges())

    @classmethod
    def from_edges(cls, n_vertices: int, edges: Iterable[Edge]) -> "MatchingGraph":
        """由顶点数和边列表构造图，重复边只保留一条"""
        graph = nx.Graph()
        graph.add_nodes_from(range(n_vertices))
        for u, v in edges:
            if not (0 <= u < n_vertices and 0 <= v < n_vertices):
                raise ValueError(f"边({u}, {v})的端点超出范围 0..{n_vertices - 1}")
            graph.add_edge(u, v)
        return cls(graph)

    @property
    def n_edges(self) -> int:
        return len(self._edges)

    @property
    def nx_graph(self) -> nx.Graph:
        return self._graph

    def edges(self) -> List[Edge]:
        """所有边，每条无向边出现一次且 i < j，按字典序排列"""
        return list(self._edges)

    def neighbors(self, vertex: int) -> List[int]:
        return sorted(self._graph.neighbors(vertex))

    def degree(self, vertex: int) -> int:
        return self._graph.degree(vertex)

    def has_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def bipartite_map(self) -> Dict[int, int]:
        """
        二分图着色

        Returns:
            顶点 -> 所在侧(0或1)的字典；图不是二分图时返回空字典
        """
        try:
            coloring = nx.bipartite.color(self._graph)
        except nx.NetworkXError:
            logger.debug("图不是二分图")
            return {}
        return dict(coloring)

    def is_bipartite(self) -> bool:
        return len(self.bipartite_map()) == self.n_vertices

    def bipartite_sides(self) -> Optional[Tuple[List[int], List[int]]]:
        """
        返回二分图的两侧顶点，较小的一侧在前

        两侧大小相同时，包含顶点0的一侧在前。
        着色没有覆盖全部顶点时返回None。
        """
        coloring = self.bipartite_map()
        if len(coloring) != self.n_vertices:
            return None
        if self.n_vertices == 0:
            return [], []

        first = coloring[0]
        side_a = [v for v in range(self.n_vertices) if coloring[v] == first]
        side_b = [v for v in range(self.n_vertices) if coloring[v] != first]
        if len(side_a) > len(side_b):
            side_a, side_b = side_b, side_a
        return side_a, side_b

    def __repr__(self) -> str:
        return f"MatchingGraph(n_vertices={self.n_vertices}, n_edges={self.n_edges})"


def as_matching_graph(graph: Union[MatchingGraph, nx.Graph]) -> MatchingGraph:
    """把NetworkX图或MatchingGraph统一转换为MatchingGraph"""
    if isinstance(graph, MatchingGraph):
        return graph
    if isinstance(graph, nx.Graph):
        return MatchingGraph(graph)
    raise TypeError(f"不支持的图类型: {type(graph).__name__}")
