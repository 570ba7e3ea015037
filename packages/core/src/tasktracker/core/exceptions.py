"""TaskTracker 异常体系

校验类、资源类、容量类失败均从 TaskTrackerError 派生，
reason 字段供命令层映射为失败原因与退出码。
解析类（畸形输入）不抛异常，由解析器记录诊断后跳过。
"""

from enum import StrEnum
from pathlib import Path


class FailureReason(StrEnum):
    """命令失败原因"""

    EMPTY_DESCRIPTION = "empty_description"
    INVALID_DESCRIPTION = "invalid_description"
    INVALID_STATUS = "invalid_status"
    INVALID_FILTER = "invalid_filter"
    TASK_NOT_FOUND = "task_not_found"
    STORAGE_READ = "storage_read"
    STORAGE_WRITE = "storage_write"
    ID_OVERFLOW = "id_overflow"
    USAGE = "usage"


class TaskTrackerError(Exception):
    """TaskTracker 基础异常"""

    reason: FailureReason = FailureReason.USAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(TaskTrackerError):
    """命令行参数错误（未知命令、参数个数错误、ID 非整数等）"""

    reason = FailureReason.USAGE


class EmptyDescriptionError(TaskTrackerError):
    """任务描述为空"""

    reason = FailureReason.EMPTY_DESCRIPTION

    def __init__(self, message: str = "Task description cannot be empty.") -> None:
        super().__init__(message)


class InvalidDescriptionError(TaskTrackerError):
    """任务描述含有无法编码为 UTF-8 的字符（如命令行传入的非法字节）"""

    reason = FailureReason.INVALID_DESCRIPTION

    def __init__(self, message: str = "Task description is not valid UTF-8 text.") -> None:
        super().__init__(message)


class InvalidStatusError(TaskTrackerError):
    """状态值不在 todo / in-progress / done 之中"""

    reason = FailureReason.INVALID_STATUS

    def __init__(self, status: str) -> None:
        super().__init__(
            f"Invalid status '{status}'. Use 'todo', 'in-progress', or 'done'."
        )
        self.status = status


class InvalidFilterError(TaskTrackerError):
    """list 筛选键非法"""

    reason = FailureReason.INVALID_FILTER

    def __init__(self, filter_value: str) -> None:
        super().__init__(
            f"Invalid filter '{filter_value}'. "
            "Use 'all', 'todo', 'in-progress', or 'done'."
        )
        self.filter_value = filter_value


class TaskNotFoundError(TaskTrackerError):
    """按 ID 查找任务失败"""

    reason = FailureReason.TASK_NOT_FOUND

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class TaskIdOverflowError(TaskTrackerError):
    """ID 已达上限，无法继续分配"""

    reason = FailureReason.ID_OVERFLOW

    def __init__(self, max_id: int) -> None:
        super().__init__(
            f"Cannot generate new task ID, maximum value {max_id} reached."
        )
        self.max_id = max_id


class StorageReadError(TaskTrackerError):
    """任务文件不可读"""

    reason = FailureReason.STORAGE_READ

    def __init__(self, path: Path, original_error: Exception) -> None:
        """
        Args:
            path: 任务文件路径
            original_error: 原始异常
        """
        super().__init__(f"Could not read {path}: {original_error}")
        self.path = path
        self.original_error = original_error


class StorageWriteError(TaskTrackerError):
    """任务文件不可写（写入失败时原文件保持不变）"""

    reason = FailureReason.STORAGE_WRITE

    def __init__(self, path: Path, original_error: Exception) -> None:
        """
        Args:
            path: 任务文件路径
            original_error: 原始异常
        """
        super().__init__(f"Could not write {path}: {original_error}")
        self.path = path
        self.original_error = original_error
