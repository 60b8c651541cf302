"""
匹配分析工具函数
提供匹配结果的检查和统计功能

功能模块:
1. 匹配合法性检查
2. 极大性检查
3. 权重统计和报告
"""

import logging
from typing import Any, Dict, Optional, Sequence

import numpy as np

from lpmatching.matching.data_structures import UNMATCHED, MatchingResult
from lpmatching.matching.graph import MatchingGraph
from lpmatching.matching.weights import normalize_weights

logger = logging.getLogger(__name__)


def is_matching(graph: MatchingGraph, mate: Sequence[int]) -> bool:
    """
    检查配对数组是否构成合法匹配

    要求: 长度为n、配对对称、每对顶点之间存在图边
    """
    if len(mate) != graph.n_vertices:
        return False

    for i, j in enumerate(mate):
        if j == UNMATCHED:
            continue
        if not (0 <= j < graph.n_vertices) or j == i:
            return False
        if mate[j] != i:
            logger.debug(f"配对不对称: mate[{i}]={j}, mate[{j}]={mate[j]}")
            return False
        if not graph.has_edge(i, j):
            logger.debug(f"配对({i}, {j})不是图中的边")
            return False
    return True


def is_maximal_matching(graph: MatchingGraph, mate: Sequence[int]) -> bool:
    """合法匹配且不存在两个端点都未匹配的边"""
    if not is_matching(graph, mate):
        return False
    return all(mate[i] != UNMATCHED or mate[j] != UNMATCHED for i, j in graph.edges())


def matching_weight(weights: np.ndarray, mate: Sequence[int]) -> float:
    """按匹配边累加权重，每条边只计一次"""
    return float(sum(weights[i, j] for i, j in enumerate(mate) if j != UNMATCHED and i < j))


def saturated_side(graph: MatchingGraph, mate: Sequence[int]) -> Optional[Dict[str, Any]]:
    """
    二分图两侧的匹配覆盖情况

    Returns:
        较小一侧(A)和另一侧(B)的已匹配顶点数；图不是二分图时返回None
    """
    sides = graph.bipartite_sides()
    if sides is None:
        return None

    side_a, side_b = sides
    matched_a = [v for v in side_a if mate[v] != UNMATCHED]
    matched_b = [v for v in side_b if mate[v] != UNMATCHED]
    return {
        'side_a_size': len(side_a),
        'side_b_size': len(side_b),
        'side_a_matched': len(matched_a),
        'side_b_matched': len(matched_b),
        'side_a_unmatched': [v for v in side_a if mate[v] == UNMATCHED],
    }


def summarize_matching(graph: MatchingGraph, weights: Optional[np.ndarray],
                       result: MatchingResult) -> Dict[str, Any]:
    """
    生成匹配结果报告

    Args:
        graph: 图对象
        weights: 原始权重矩阵，None表示单位权重
        result: 匹配结果
    """
    summary = {
        'n_vertices': graph.n_vertices,
        'n_edges': graph.n_edges,
        'bipartite': graph.is_bipartite(),
        'objective': float(result.weight),
        'cardinality': result.cardinality,
        'pairs': [list(p) for p in result.pairs()],
        'unmatched': [v for v in range(graph.n_vertices) if not result.is_matched(v)],
        'is_matching': is_matching(graph, result.mate),
        'is_maximal': is_maximal_matching(graph, result.mate),
    }

    if weights is not None:
        effective = normalize_weights(graph, weights)
        summary['pair_weight'] = matching_weight(effective, result.mate)

    sides = saturated_side(graph, result.mate)
    if sides is not None:
        summary['sides'] = sides

    return summary
