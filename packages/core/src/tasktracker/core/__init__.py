"""TaskTracker Core -- 本地任务追踪

packages/core 的公开接口导出。
"""

# 命令
from .commands import CommandResult, TaskCommands

# 异常
from .exceptions import (
    EmptyDescriptionError,
    FailureReason,
    InvalidDescriptionError,
    InvalidFilterError,
    InvalidStatusError,
    StorageReadError,
    StorageWriteError,
    TaskIdOverflowError,
    TaskNotFoundError,
    TaskTrackerError,
    UsageError,
)

# 数据模型
from .models import ListFilter, Task, TaskListing, TaskStatus

# 存储
from .store import TaskStore, create_file_store

__all__ = [
    "Task",
    "TaskListing",
    "TaskStatus",
    "ListFilter",
    "TaskStore",
    "create_file_store",
    "TaskCommands",
    "CommandResult",
    "FailureReason",
    "TaskTrackerError",
    "UsageError",
    "EmptyDescriptionError",
    "InvalidDescriptionError",
    "InvalidStatusError",
    "InvalidFilterError",
    "TaskNotFoundError",
    "TaskIdOverflowError",
    "StorageReadError",
    "StorageWriteError",
]
