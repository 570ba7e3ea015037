"""枚举定义 -- 任务状态机与列表筛选

包含 TaskStatus 状态机、ListFilter 筛选键，
以及 VALID_TRANSITIONS 合法流转映射。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 状态机"""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class ListFilter(StrEnum):
    """list 命令筛选键：all 或任一状态值"""

    ALL = "all"
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    def matches(self, status: TaskStatus) -> bool:
        """判断某状态是否命中该筛选键"""
        return self is ListFilter.ALL or self.value == status.value


# 三个状态之间任意流转均合法（含自流转），无单向工作流
VALID_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.TODO: {TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE},
    TaskStatus.IN_PROGRESS: {
        TaskStatus.TODO,
        TaskStatus.IN_PROGRESS,
        TaskStatus.DONE,
    },
    TaskStatus.DONE: {TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE},
}


def parse_status(value: str) -> TaskStatus | None:
    """将字符串转换为 TaskStatus，非法值返回 None"""
    try:
        return TaskStatus(value)
    except ValueError:
        return None


def validate_transition(from_status: TaskStatus, to_status: str) -> bool:
    """验证状态流转是否合法

    Args:
        from_status: 当前状态
        to_status: 目标状态（允许传入任意字符串）

    Returns:
        True 如果流转合法，否则 False
    """
    target = parse_status(to_status)
    if target is None:
        return False
    allowed = VALID_TRANSITIONS.get(from_status, set())
    return target in allowed
