"""
最大权匹配模型
Maximum weight matching

基于CVXPY的匹配模型：
- 二分图: LP松弛，最优顶点解自动为整数
- 非二分图: 整数变量 (MIP)，计算时间可能随规模指数增长
"""

import logging
from typing import Optional, Union

import cvxpy as cp
import networkx as nx
import numpy as np

from .data_structures import UNMATCHED, MatchingResult
from .exceptions import SolverFailure
from .graph import MatchingGraph, as_matching_graph
from .solver import CvxpySolver, MatchingProblem, SolverOutcome
from .weights import default_weights, normalize_weights

logger = logging.getLogger(__name__)

# 求解器数值误差容限
SELECTION_TOLERANCE = 1e-5


class MaximumWeightMatchingModel:
    """最大权匹配模型"""

    def __init__(self, graph: MatchingGraph, weights: Optional[np.ndarray] = None):
        """
        初始化模型

        Args:
            graph: 图对象
            weights: n x n 权重矩阵，默认每条边权重为1
        """
        self.graph = graph
        self.raw_weights = default_weights(graph) if weights is None else weights

        self._extract_data()

        self.matching_problem = None
        if self.n_edges > 0:
            self._build_model()

    def _extract_data(self):
        """整理边集合、权重和关联矩阵"""
        self.n_vertices = self.graph.n_vertices
        self.edges = self.graph.edges()
        self.n_edges = len(self.edges)

        self.weights = normalize_weights(self.graph, self.raw_weights)
        self.edge_weights = np.array([self.weights[i, j] for i, j in self.edges], dtype=float)

        # 顶点-边关联矩阵
        self.A = np.zeros((self.n_vertices, self.n_edges))
        for k, (i, j) in enumerate(self.edges):
            self.A[i, k] = 1
            self.A[j, k] = 1

        self.bipartite = self.graph.is_bipartite()
        # 二分图不需要整数约束
        self.integer = not self.bipartite

    def _build_model(self):
        """构建CVXPY优化模型"""
        self.x = cp.Variable(self.n_edges, integer=self.integer, name="x")

        constraints = [
            self.x >= 0,
            self.A @ self.x <= 1,   # 每个顶点最多被覆盖一次
        ]

        objective = cp.Maximize(self.edge_weights @ self.x)
        self.problem = cp.Problem(objective, constraints)
        self.matching_problem = MatchingProblem(self.problem, self.x, self.edges, self.integer)

        logger.debug(
            f"最大权匹配模型: {self.n_vertices} 个顶点, {self.n_edges} 条边, "
            f"{'MIP' if self.integer else 'LP'}"
        )

    def solve(self, solver=None) -> MatchingResult:
        """
        求解模型

        Args:
            solver: 求解器，需实现 solve(MatchingProblem) -> SolverOutcome

        Returns:
            匹配结果

        Raises:
            SolverFailure: 求解状态不是optimal
        """
        if self.matching_problem is None:
            logger.info("图中没有边，返回空匹配")
            return MatchingResult.empty(self.n_vertices)

        solver = solver or CvxpySolver()
        outcome = solver.solve(self.matching_problem)

        if not outcome.is_optimal:
            raise SolverFailure(outcome.status)

        return self._extract_results(outcome)

    def _extract_results(self, outcome: SolverOutcome) -> MatchingResult:
        """把变量取值解码为配对数组"""
        mate = [UNMATCHED] * self.n_vertices
        for k, (i, j) in enumerate(self.edges):
            if outcome.values[k] >= 1 - SELECTION_TOLERANCE:
                mate[i] = j
                mate[j] = i

        result = MatchingResult(float(outcome.objective), tuple(mate))
        logger.info(f"最大权匹配求解完成: 权重 {result.weight:.6g}, {result.cardinality} 条匹配边")
        return result


def maximum_weight_matching(graph: Union[MatchingGraph, nx.Graph],
                            weights: Optional[np.ndarray] = None,
                            solver=None) -> MatchingResult:
    """
    最大权匹配

    未给出权重矩阵时每条边权重为1（最大基数匹配）。
    权重矩阵中为0的图边仍然是候选边，只是对目标没有贡献。

    Args:
        graph: MatchingGraph或NetworkX图
        weights: n x n 权重矩阵，不会被修改
        solver: 求解器，默认CvxpySolver()

    Returns:
        MatchingResult
    """
    model = MaximumWeightMatchingModel(as_matching_graph(graph), weights)
    return model.solve(solver)
