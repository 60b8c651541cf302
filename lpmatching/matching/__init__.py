"""
基于线性/整数规划的匹配模块
LP/MIP based matching

主要组件:
- data_structures: 匹配结果数据结构
- exceptions: 异常定义
- graph: 图接口和二分图检测
- weights: 权重矩阵对称化和阈值处理
- solver: CVXPY求解器适配层
- general: 最大权匹配
- maximal: 二分图最大权极大匹配
"""

from .data_structures import MatchingResult, UNMATCHED
from .exceptions import (
    MatchingError,
    SolverFailure,
    StructuralPreconditionError,
    IntegrityViolation
)
from .graph import MatchingGraph, as_matching_graph
from .weights import default_weights, normalize_weights, cutoff_weights
from .solver import (
    CvxpySolver,
    SolverConfig,
    MatchingProblem,
    SolverOutcome,
    available_solvers,
    load_solver_config
)
from .general import MaximumWeightMatchingModel, maximum_weight_matching
from .maximal import MaximalMatchingModel, maximum_weight_maximal_matching

__all__ = [
    # 数据结构
    'MatchingResult',
    'UNMATCHED',
    'MatchingGraph',
    'as_matching_graph',

    # 异常
    'MatchingError',
    'SolverFailure',
    'StructuralPreconditionError',
    'IntegrityViolation',

    # 权重处理
    'default_weights',
    'normalize_weights',
    'cutoff_weights',

    # 求解器
    'CvxpySolver',
    'SolverConfig',
    'MatchingProblem',
    'SolverOutcome',
    'available_solvers',
    'load_solver_config',

    # 匹配模型
    'MaximumWeightMatchingModel',
    'maximum_weight_matching',
    'MaximalMatchingModel',
    'maximum_weight_maximal_matching'
]
