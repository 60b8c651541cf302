"""
求解器适配层
Solver adapter

将构建好的CVXPY问题交给具体求解器，返回终止状态和变量取值。
适配器不判断状态是否可接受，这由各个匹配模型负责。
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import cvxpy as cp
import numpy as np
from cvxpy.reductions.solvers.defines import SOLVER_MAP_CONIC, SOLVER_MAP_QP
import yaml
from pydantic import BaseModel, Field, field_validator

from .exceptions import SolverFailure

logger = logging.getLogger(__name__)

DEFAULT_SOLVER = "SCIPY"


@dataclass
class MatchingProblem:
    """构建完成、等待求解的匹配问题"""
    problem: cp.Problem                  # CVXPY问题
    x: cp.Variable                       # 每条边对应一个决策变量
    edges: List[Tuple[int, int]]         # 变量下标 -> 边 (i, j)
    integer: bool = False                # 是否为整数变量 (MIP)

    @property
    def n_variables(self) -> int:
        return len(self.edges)


@dataclass
class SolverOutcome:
    """求解结果"""
    status: str
    values: Optional[np.ndarray] = None
    objective: Optional[float] = None
    solver_name: Optional[str] = None
    solve_time: Optional[float] = None

    @property
    def is_optimal(self) -> bool:
        return self.status == cp.OPTIMAL


class SolverConfig(BaseModel):
    """求解器配置"""
    solver: str = Field(DEFAULT_SOLVER, description="CVXPY求解器名称")
    verbose: bool = Field(False, description="是否输出求解器日志")
    options: Dict[str, Any] = Field(default_factory=dict, description="传递给求解器的参数")

    @field_validator('solver')
    @classmethod
    def validate_solver_name(cls, v):
        """求解器名称统一为大写"""
        v = v.strip().upper()
        if not v:
            raise ValueError("求解器名称不能为空")
        return v


def load_solver_config(path: str) -> SolverConfig:
    """从YAML文件读取求解器配置（solver字段）"""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"求解器配置文件不存在: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return SolverConfig(**data.get('solver', {}))


def available_solvers(mixed_integer: bool = False) -> List[str]:
    """
    已安装的CVXPY求解器

    Args:
        mixed_integer: 只返回支持整数变量的求解器
    """
    installed = cp.installed_solvers()
    if mixed_integer:
        installed = [
            s for s in installed
            if getattr(SOLVER_MAP_CONIC.get(s) or SOLVER_MAP_QP.get(s), 'MIP_CAPABLE', False)
        ]
    return list(installed)


class CvxpySolver:
    """基于CVXPY的求解器"""

    def __init__(self, config: Optional[SolverConfig] = None, **overrides):
        """
        Args:
            config: 求解器配置，默认使用SCIPY (HiGHS)
            **overrides: 覆盖config中的字段，如 solver='HIGHS'
        """
        config = config or SolverConfig()
        if overrides:
            config = SolverConfig(**{**config.model_dump(), **overrides})
        self.config = config

    def solve(self, matching_problem: MatchingProblem) -> SolverOutcome:
        """
        求解匹配问题

        Raises:
            SolverFailure: 求解器本身报错
        """
        problem = matching_problem.problem
        logger.debug(
            f"调用求解器 {self.config.solver}: {matching_problem.n_variables} 个变量, "
            f"{len(problem.constraints)} 组约束, integer={matching_problem.integer}"
        )

        try:
            problem.solve(solver=self.config.solver, verbose=self.config.verbose,
                          **self.config.options)
        except cp.error.SolverError as e:
            raise SolverFailure("solver_error", f"求解器{self.config.solver}求解失败: {e}") from e

        values = matching_problem.x.value
        stats = problem.solver_stats
        outcome = SolverOutcome(
            status=problem.status,
            values=None if values is None else np.asarray(values, dtype=float).reshape(-1),
            objective=None if problem.value is None else float(problem.value),
            solver_name=stats.solver_name if stats is not None else self.config.solver,
            solve_time=stats.solve_time if stats is not None else None,
        )
        logger.debug(f"求解状态: {outcome.status}, 目标值: {outcome.objective}")
        return outcome

    def __repr__(self) -> str:
        return f"CvxpySolver(solver={self.config.solver!r})"
