"""
测试公共夹具
"""

import numpy as np
import pytest

from lpmatching.matching import (
    CvxpySolver,
    MatchingGraph,
    SolverOutcome,
    available_solvers
)
from lpmatching.matching.solver import DEFAULT_SOLVER


class StubSolver:
    """返回预设结果的求解器，记录收到的问题"""

    def __init__(self, status="optimal", values=None, objective=None):
        self.status = status
        self.values = values
        self.objective = objective
        self.calls = []

    def solve(self, matching_problem):
        self.calls.append(matching_problem)
        values = None if self.values is None else np.asarray(self.values, dtype=float)
        return SolverOutcome(status=self.status, values=values, objective=self.objective,
                             solver_name="STUB")


class RecordingSolver(CvxpySolver):
    """真实求解并保留最后一次求解结果"""

    def solve(self, matching_problem):
        self.last_problem = matching_problem
        self.last_outcome = super().solve(matching_problem)
        return self.last_outcome


@pytest.fixture
def solver():
    """默认求解器，未安装时跳过"""
    if DEFAULT_SOLVER not in available_solvers(mixed_integer=True):
        pytest.skip(f"{DEFAULT_SOLVER} 求解器不可用")
    return RecordingSolver()


@pytest.fixture
def make_stub():
    return StubSolver


@pytest.fixture
def four_cycle():
    """4环 0-1-2-3-0"""
    return MatchingGraph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def triangle():
    return MatchingGraph.from_edges(3, [(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def square_bipartite():
    """两侧为{0,1}和{2,3}的完全二分图及其权重"""
    graph = MatchingGraph.from_edges(4, [(0, 2), (0, 3), (1, 2), (1, 3)])
    w = np.zeros((4, 4))
    w[0, 2] = 5
    w[0, 3] = 1
    w[1, 2] = 1
    w[1, 3] = 5
    return graph, w
