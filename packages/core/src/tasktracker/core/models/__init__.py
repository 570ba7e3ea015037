"""TaskTracker Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import (
    VALID_TRANSITIONS,
    ListFilter,
    TaskStatus,
    parse_status,
    validate_transition,
)
from .task import Task, TaskListing

__all__ = [
    # 枚举
    "TaskStatus",
    "ListFilter",
    # 状态机
    "VALID_TRANSITIONS",
    "parse_status",
    "validate_transition",
    # Task
    "Task",
    "TaskListing",
]
