"""
lpmatching: 基于线性规划/整数规划的图最大权匹配
"""

from .matching import (
    MatchingResult,
    MatchingGraph,
    MatchingError,
    SolverFailure,
    StructuralPreconditionError,
    IntegrityViolation,
    CvxpySolver,
    SolverConfig,
    default_weights,
    normalize_weights,
    cutoff_weights,
    maximum_weight_matching,
    maximum_weight_maximal_matching
)

__version__ = "1.0.0"

__all__ = [
    "MatchingResult", "MatchingGraph",
    "MatchingError", "SolverFailure", "StructuralPreconditionError", "IntegrityViolation",
    "CvxpySolver", "SolverConfig",
    "default_weights", "normalize_weights", "cutoff_weights",
    "maximum_weight_matching", "maximum_weight_maximal_matching"
]
