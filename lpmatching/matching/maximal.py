"""
最大权极大匹配模型（仅限二分图）
Maximum weight maximal matching on bipartite graphs

在包含最多边的匹配中选出总权重最大的一个：
较小一侧(A)的顶点必须全部被匹配（等式约束），另一侧(B)为普通的 <= 1 约束。
二分图上的LP松弛保证整数解，求解后严格检查每个取值是否为0或1。
"""

import logging
from typing import Dict, List, Optional, Union

import cvxpy as cp
import networkx as nx
import numpy as np

from .data_structures import UNMATCHED, MatchingResult
from .exceptions import IntegrityViolation, SolverFailure, StructuralPreconditionError
from .graph import MatchingGraph, as_matching_graph
from .solver import CvxpySolver, MatchingProblem, SolverOutcome
from .weights import cutoff_weights, default_weights, normalize_weights

logger = logging.getLogger(__name__)


class MaximalMatchingModel:
    """二分图最大权极大匹配模型"""

    def __init__(self, graph: MatchingGraph, weights: Optional[np.ndarray] = None):
        """
        初始化模型

        Args:
            graph: 二分图
            weights: n x n 权重矩阵，默认每条边权重为1

        Raises:
            StructuralPreconditionError: 图不是二分图
        """
        self.graph = graph

        sides = graph.bipartite_sides()
        if sides is None:
            raise StructuralPreconditionError("图不是二分图")
        self.side_a, self.side_b = sides

        self.raw_weights = default_weights(graph) if weights is None else weights

        self._extract_data()

        self.matching_problem = None
        if self.n_edges > 0:
            self._build_model()

    def _extract_data(self):
        """只保留权重为正的边作为候选边"""
        self.n_vertices = self.graph.n_vertices
        self.weights = normalize_weights(self.graph, self.raw_weights)

        self.edges = [(i, j) for i, j in self.graph.edges() if self.weights[i, j] > 0]
        self.n_edges = len(self.edges)
        self.edge_index: Dict[tuple, int] = {e: k for k, e in enumerate(self.edges)}
        self.edge_weights = np.array([self.weights[i, j] for i, j in self.edges], dtype=float)

        # 每个顶点关联的候选边下标
        self.incident: Dict[int, List[int]] = {v: [] for v in range(self.n_vertices)}
        for k, (i, j) in enumerate(self.edges):
            self.incident[i].append(k)
            self.incident[j].append(k)

        # 没有候选边的顶点不进入约束，结果中保持未匹配
        self.isolated = [v for v in range(self.n_vertices) if not self.incident[v]]
        if self.isolated:
            logger.debug(f"{len(self.isolated)} 个顶点没有候选边: {self.isolated[:10]}")

    def _build_model(self):
        """构建CVXPY优化模型"""
        self.x = cp.Variable(self.n_edges, name="x")

        constraints = [self.x >= 0]

        # A侧（较小一侧）必须全部匹配
        for v in self.side_a:
            idx = self.incident[v]
            if idx:
                constraints.append(cp.sum(self.x[idx]) == 1)

        # B侧最多匹配一次
        for v in self.side_b:
            idx = self.incident[v]
            if idx:
                constraints.append(cp.sum(self.x[idx]) <= 1)

        objective = cp.Maximize(self.edge_weights @ self.x)
        self.problem = cp.Problem(objective, constraints)
        self.matching_problem = MatchingProblem(self.problem, self.x, self.edges, integer=False)

        logger.debug(
            f"最大权极大匹配模型: |A|={len(self.side_a)}, |B|={len(self.side_b)}, "
            f"{self.n_edges} 条候选边"
        )

    def solve(self, solver=None) -> MatchingResult:
        """
        求解模型

        Raises:
            SolverFailure: 求解状态不是optimal（包括A侧无法全部匹配的情况）
            IntegrityViolation: 解中存在非0/1的取值
        """
        if self.matching_problem is None:
            logger.info("没有权重为正的边，返回空匹配")
            return MatchingResult.empty(self.n_vertices)

        solver = solver or CvxpySolver()
        outcome = solver.solve(self.matching_problem)

        if not outcome.is_optimal:
            raise SolverFailure(outcome.status)

        fractional = [v for v in outcome.values if not (v == 0 or v == 1)]
        if fractional:
            raise IntegrityViolation(fractional)

        return self._extract_results(outcome)

    def _extract_results(self, outcome: SolverOutcome) -> MatchingResult:
        """把0/1取值解码为配对数组"""
        mate = [UNMATCHED] * self.n_vertices
        for i, j in self.edges:
            if outcome.values[self.edge_index[(i, j)]] == 1:
                mate[i] = j
                mate[j] = i

        result = MatchingResult(float(outcome.objective), tuple(mate))
        logger.info(f"最大权极大匹配求解完成: 权重 {result.weight:.6g}, {result.cardinality} 条匹配边")
        return result


def maximum_weight_maximal_matching(graph: Union[MatchingGraph, nx.Graph],
                                    weights: Optional[np.ndarray] = None,
                                    cutoff: Optional[float] = None,
                                    solver=None) -> MatchingResult:
    """
    二分图最大权极大匹配

    Args:
        graph: 二分图（MatchingGraph或NetworkX图）
        weights: n x n 权重矩阵，不会被修改
        cutoff: 若给出，权重小于cutoff的边不参与匹配
        solver: 求解器，默认CvxpySolver()

    Returns:
        MatchingResult

    Raises:
        StructuralPreconditionError: 图不是二分图
        SolverFailure: 求解失败
        IntegrityViolation: 解不是整数
    """
    graph = as_matching_graph(graph)
    if cutoff is not None:
        if weights is None:
            weights = default_weights(graph)
        weights = cutoff_weights(weights, cutoff)

    model = MaximalMatchingModel(graph, weights)
    return model.solve(solver)
