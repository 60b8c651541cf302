"""
匹配求解异常定义
Matching error hierarchy

所有异常都直接抛给调用者，本层不做重试或降级处理
"""

from typing import Optional, Sequence


class MatchingError(Exception):
    """匹配计算失败的基类"""


class SolverFailure(MatchingError):
    """求解器未以optimal状态结束"""

    def __init__(self, status: str, message: Optional[str] = None):
        self.status = status
        if message is None:
            message = f"求解器未找到最优解 (status={status})"
        super().__init__(message)


class StructuralPreconditionError(MatchingError):
    """图结构不满足前提条件（最大极大匹配要求二分图）"""


class IntegrityViolation(MatchingError):
    """最大极大匹配的解中出现非0/1的取值"""

    def __init__(self, values: Sequence[float]):
        self.values = list(values)
        preview = ", ".join(f"{v:.6g}" for v in self.values[:5])
        if len(self.values) > 5:
            preview += ", ..."
        super().__init__(f"求解结果存在非整数解: [{preview}]")
