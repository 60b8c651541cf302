"""
匹配实例加载器
Matching instance loader

使用pydantic进行数据验证和类型检查
Using pydantic for data validation and type checking

支持两种格式:
1. YAML: vertices / edges / cutoff / maximal / solver
2. CSV: u,v[,weight] 边列表
"""

import logging
import math
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from lpmatching.matching.graph import MatchingGraph
from lpmatching.matching.solver import SolverConfig

logger = logging.getLogger(__name__)


class EdgeSpec(BaseModel):
    """边数据类"""
    u: int = Field(ge=0, description="端点1")
    v: int = Field(ge=0, description="端点2")
    weight: float = Field(1.0, description="边权重")

    @field_validator('v')
    @classmethod
    def validate_different_endpoints(cls, v, info):
        """验证两个端点不同"""
        if v == info.data.get('u'):
            raise ValueError("边的两个端点不能相同")
        return v

    @field_validator('weight')
    @classmethod
    def validate_weight(cls, v):
        """权重必须是有限数"""
        if not math.isfinite(v):
            raise ValueError("边权重必须是有限数")
        return v

    def key(self):
        return (min(self.u, self.v), max(self.u, self.v))


class MatchingInstance(BaseModel):
    """完整匹配实例"""
    n_vertices: int = Field(ge=0, description="顶点数")
    edges: List[EdgeSpec] = Field(default_factory=list)
    cutoff: Optional[float] = Field(None, description="权重阈值")
    maximal: bool = Field(False, description="是否求解最大权极大匹配")
    solver: Optional[SolverConfig] = None
    name: str = "instance"

    @model_validator(mode='after')
    def validate_edges(self):
        """验证端点范围和重复边"""
        seen = set()
        for edge in self.edges:
            if edge.u >= self.n_vertices or edge.v >= self.n_vertices:
                raise ValueError(
                    f"边({edge.u}, {edge.v})的端点超出范围 0..{self.n_vertices - 1}"
                )
            key = edge.key()
            if key in seen:
                raise ValueError(f"重复的边: {key}")
            seen.add(key)
        return self

    def to_graph(self) -> MatchingGraph:
        return MatchingGraph.from_edges(self.n_vertices, [e.key() for e in self.edges])

    def weight_matrix(self) -> np.ndarray:
        """对称权重矩阵"""
        w = np.zeros((self.n_vertices, self.n_vertices))
        for edge in self.edges:
            w[edge.u, edge.v] = edge.weight
            w[edge.v, edge.u] = edge.weight
        return w


class InstanceLoader:
    """实例加载器"""

    def __init__(self, data_dir: str = "data"):
        self.data_dir = Path(data_dir)
        if not self.data_dir.exists():
            raise FileNotFoundError(f"数据目录不存在: {self.data_dir}")

    def _resolve(self, filename: str) -> Path:
        file_path = self.data_dir / filename
        if not file_path.exists():
            raise FileNotFoundError(f"实例文件不存在: {file_path}")
        return file_path

    def load_yaml(self, filename: str) -> MatchingInstance:
        """加载YAML格式实例"""
        file_path = self._resolve(filename)

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if 'vertices' not in data:
            raise ValueError(f"实例文件缺少vertices字段: {file_path}")

        return MatchingInstance(
            n_vertices=data['vertices'],
            edges=[EdgeSpec(**e) for e in data.get('edges') or []],
            cutoff=data.get('cutoff'),
            maximal=data.get('maximal', False),
            solver=SolverConfig(**data['solver']) if data.get('solver') else None,
            name=data.get('name', file_path.stem),
        )

    def load_csv(self, filename: str, n_vertices: Optional[int] = None) -> MatchingInstance:
        """
        加载CSV边列表

        Args:
            filename: 文件名，包含u,v列，weight列可选
            n_vertices: 顶点数，默认为最大顶点编号+1
        """
        file_path = self._resolve(filename)
        df = pd.read_csv(file_path, comment='#')

        missing = {'u', 'v'} - set(df.columns)
        if missing:
            raise ValueError(f"CSV文件缺少列: {sorted(missing)}")
        if 'weight' not in df.columns:
            df['weight'] = 1.0

        if n_vertices is None:
            n_vertices = int(max(df['u'].max(), df['v'].max())) + 1 if len(df) else 0

        edges = [
            EdgeSpec(u=int(row.u), v=int(row.v), weight=float(row.weight))
            for row in df.itertuples(index=False)
        ]
        logger.debug(f"从{file_path}读取 {len(edges)} 条边")

        return MatchingInstance(n_vertices=n_vertices, edges=edges, name=file_path.stem)


def load_instance(path: str) -> MatchingInstance:
    """便捷函数：根据后缀加载实例文件"""
    file_path = Path(path)
    loader = InstanceLoader(str(file_path.parent))

    suffix = file_path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        return loader.load_yaml(file_path.name)
    if suffix == '.csv':
        return loader.load_csv(file_path.name)
    raise ValueError(f"不支持的实例文件格式: {suffix}")
