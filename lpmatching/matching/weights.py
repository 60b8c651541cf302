"""
权重矩阵预处理
Weight matrix preprocessing

1. default_weights: 默认权重（每条边权重为1，即最大基数匹配）
2. normalize_weights: 对称化并屏蔽非图边的权重
3. cutoff_weights: 将低于阈值的权重置零

所有函数都返回新矩阵，不修改调用者传入的矩阵
"""

import logging

import numpy as np

from .graph import MatchingGraph

logger = logging.getLogger(__name__)


def _check_shape(graph: MatchingGraph, weights: np.ndarray):
    n = graph.n_vertices
    if weights.ndim != 2 or weights.shape != (n, n):
        raise ValueError(f"权重矩阵维度应为({n}, {n})，实际为{weights.shape}")


def adjacency_mask(graph: MatchingGraph) -> np.ndarray:
    """图的邻接布尔矩阵（对称，对角线为False）"""
    n = graph.n_vertices
    mask = np.zeros((n, n), dtype=bool)
    for i, j in graph.edges():
        mask[i, j] = True
        mask[j, i] = True
    return mask


def default_weights(graph: MatchingGraph) -> np.ndarray:
    """每条边权重为1，其余为0"""
    return adjacency_mask(graph).astype(float)


def normalize_weights(graph: MatchingGraph, weights) -> np.ndarray:
    """
    权重矩阵对称化

    对每条边 {i, j} (i < j)，取 w[i, j]；若 w[j, i] 为正且大于 w[i, j]，
    则取 w[j, i]。不是图边的位置以及对角线置零。

    Args:
        graph: 图对象
        weights: n x n 权重矩阵，可以只填写一个三角

    Returns:
        新的对称权重矩阵
    """
    w = np.array(weights, dtype=float)
    _check_shape(graph, w)

    upper = np.triu(w, k=1)
    lower = np.tril(w, k=-1).T
    effective = np.where((lower > 0) & (lower > upper), lower, upper)
    effective = np.where(np.triu(adjacency_mask(graph), k=1), effective, 0.0)

    return effective + effective.T


def cutoff_weights(weights, cutoff: float) -> np.ndarray:
    """
    复制权重矩阵，并将小于cutoff的元素置零

    Args:
        weights: 权重矩阵
        cutoff: 阈值，等于阈值的元素保留

    Returns:
        新的权重矩阵
    """
    w = np.array(weights, copy=True)
    below = w < cutoff
    w[below] = 0
    logger.debug(f"cutoff={cutoff}: {int(np.count_nonzero(below))} 个元素被置零")
    return w
