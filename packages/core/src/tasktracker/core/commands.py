"""TaskCommands -- 命令业务逻辑

将 TaskStore 的操作包装为 CommandResult：
成功时携带确认信息与受影响的任务 ID，
失败时携带可读原因与 FailureReason，由 CLI 打印并映射退出码。
"""

import structlog
from pydantic import BaseModel, Field

from .exceptions import FailureReason, TaskTrackerError
from .models.enums import ListFilter, TaskStatus
from .models.task import Task, TaskListing
from .store import TaskStore

log = structlog.get_logger()

SEPARATOR = "-------------"


class CommandResult(BaseModel):
    """命令执行结果"""

    ok: bool = Field(description="是否成功")
    message: str = Field(description="面向用户的输出文本")
    reason: FailureReason | None = Field(default=None, description="失败原因")
    task_id: int | None = Field(default=None, description="受影响的任务 ID")

    @classmethod
    def success(cls, message: str, task_id: int | None = None) -> "CommandResult":
        return cls(ok=True, message=message, task_id=task_id)

    @classmethod
    def failure(cls, error: TaskTrackerError) -> "CommandResult":
        return cls(ok=False, message=error.message, reason=error.reason)


def format_task(task: Task) -> str:
    """单个任务的列表展示块"""
    return "\n".join(
        [
            f"ID: {task.id}",
            f"  Description: {task.description}",
            f"  Status: {task.status}",
            f"  Created: {task.created_at}",
            f"  Updated: {task.updated_at}",
            SEPARATOR,
        ]
    )


def format_listing(listing: TaskListing) -> str:
    """list 命令输出：标题 + 任务块，或按筛选键区分的空结果提示"""
    header = "--- Tasks"
    if listing.filter is not ListFilter.ALL:
        header += f" (Status: {listing.filter})"
    header += " ---"

    if listing.is_empty:
        return "\n".join([header, listing.empty_message, SEPARATOR])
    return "\n".join([header, *(format_task(task) for task in listing.tasks)])


class TaskCommands:
    """任务命令服务"""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def add(self, description: str) -> CommandResult:
        """新建任务"""
        try:
            task = self._store.add(description)
        except TaskTrackerError as e:
            return self._fail("add", e)
        return CommandResult.success(
            f"Task added successfully (ID: {task.id})", task_id=task.id
        )

    def update(self, task_id: int, description: str) -> CommandResult:
        """更新任务描述"""
        try:
            task = self._store.update(task_id, description)
        except TaskTrackerError as e:
            return self._fail("update", e, task_id=task_id)
        return CommandResult.success(
            f"Task {task.id} updated successfully.", task_id=task.id
        )

    def delete(self, task_id: int) -> CommandResult:
        """删除任务"""
        try:
            task = self._store.delete(task_id)
        except TaskTrackerError as e:
            return self._fail("delete", e, task_id=task_id)
        return CommandResult.success(
            f"Task {task.id} deleted successfully.", task_id=task.id
        )

    def mark(self, task_id: int, status: str | TaskStatus) -> CommandResult:
        """设置任务状态"""
        try:
            task = self._store.set_status(task_id, status)
        except TaskTrackerError as e:
            return self._fail("mark", e, task_id=task_id)
        return CommandResult.success(f"Task {task.id} status updated.", task_id=task.id)

    def list(self, filter_value: str = ListFilter.ALL) -> CommandResult:
        """按筛选键列出任务"""
        try:
            listing = self._store.list_tasks(filter_value)
        except TaskTrackerError as e:
            return self._fail("list", e)
        return CommandResult.success(format_listing(listing))

    @staticmethod
    def _fail(
        command: str,
        error: TaskTrackerError,
        task_id: int | None = None,
    ) -> CommandResult:
        log.info("command_failed", command=command, reason=error.reason.value, task_id=task_id)
        return CommandResult.failure(error)
