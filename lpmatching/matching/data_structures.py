"""
匹配结果数据结构
Matching result data structures

数据结构特点:
1. MatchingResult: 不可变结果对象，包含总权重和配对数组
2. mate数组: mate[i] = j 表示顶点i与j配对，mate[i] = -1 表示未匹配
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

UNMATCHED = -1


@dataclass(frozen=True)
class MatchingResult:
    """
    匹配结果

    weight为求解器给出的目标函数值，mate由解码过程对称地写入，
    不再单独校验对称性
    """
    weight: float                       # 匹配总权重
    mate: Tuple[int, ...]               # 配对数组，长度为顶点数

    @classmethod
    def empty(cls, n_vertices: int) -> "MatchingResult":
        """所有顶点均未匹配的结果"""
        return cls(0.0, (UNMATCHED,) * n_vertices)

    @property
    def n_vertices(self) -> int:
        return len(self.mate)

    @property
    def cardinality(self) -> int:
        """匹配边数"""
        return sum(1 for j in self.mate if j != UNMATCHED) // 2

    def pairs(self) -> List[Tuple[int, int]]:
        """返回按顶点排序的匹配边 (i, j)，其中 i < j"""
        return [(i, j) for i, j in enumerate(self.mate) if j != UNMATCHED and i < j]

    def is_matched(self, vertex: int) -> bool:
        return self.mate[vertex] != UNMATCHED

    def to_dict(self) -> Dict[str, Any]:
        """转换为可JSON序列化的字典"""
        return {
            'weight': float(self.weight),
            'mate': list(self.mate),
            'pairs': [list(p) for p in self.pairs()],
            'cardinality': self.cardinality,
        }
