"""TaskStore -- 内存任务集合 + 整文件持久化

所有变更操作遵循同一事务语义：
1. 基于当前集合构造候选集合（不修改当前集合）
2. 渲染并整体写入文档
3. 写入成功后才替换内存集合

任一步失败时内存集合与文档均保持原状，不存在部分写入状态。
"""

from collections.abc import Sequence

import structlog

from ..codec import parse_document, render_document
from ..config import MAX_TASK_ID
from ..exceptions import (
    EmptyDescriptionError,
    InvalidDescriptionError,
    InvalidFilterError,
    InvalidStatusError,
    TaskIdOverflowError,
    TaskNotFoundError,
)
from ..models.enums import ListFilter, TaskStatus, parse_status, validate_transition
from ..models.task import Task, TaskListing
from .clock import Clock, current_timestamp
from .protocols import DocumentBackend

log = structlog.get_logger()


def allocate_id(tasks: Sequence[Task], last_id: int = 0) -> int:
    """分配下一个任务 ID

    Args:
        tasks: 当前集合
        last_id: 本次运行内已分配过的最大 ID（高水位），
            删除最大 ID 后仍不会复用该 ID

    Returns:
        max(当前最大 ID, last_id) + 1；集合为空且无高水位时为 1

    Raises:
        TaskIdOverflowError: 最大 ID 已达 MAX_TASK_ID
    """
    max_id = max((task.id for task in tasks), default=0)
    max_id = max(max_id, last_id)
    if max_id >= MAX_TASK_ID:
        raise TaskIdOverflowError(MAX_TASK_ID)
    return max_id + 1


def _check_description(description: str, empty_message: str | None = None) -> None:
    """描述非空，且可编码为 UTF-8（命令行中的非法字节会以代理字符形式到达）"""
    if not description:
        if empty_message is None:
            raise EmptyDescriptionError()
        raise EmptyDescriptionError(empty_message)
    try:
        description.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidDescriptionError() from None


class TaskStore:
    """任务集合的唯一持有者"""

    def __init__(self, backend: DocumentBackend, clock: Clock = current_timestamp) -> None:
        self._backend = backend
        self._clock = clock
        self._tasks: list[Task] = []
        self._last_id = 0

    @property
    def tasks(self) -> list[Task]:
        """当前集合快照（按插入顺序）"""
        return list(self._tasks)

    def load(self) -> list[Task]:
        """从文档加载集合，文档不存在时为空集合"""
        text = self._backend.read_text()
        self._tasks = [] if text is None else parse_document(text)
        self._last_id = max((task.id for task in self._tasks), default=0)
        log.debug("tasks_loaded", task_count=len(self._tasks))
        return self.tasks

    def get_task(self, task_id: int) -> Task | None:
        """根据 ID 查询任务"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, description: str) -> Task:
        """创建任务，状态为 todo，两个时间戳均为当前时间"""
        _check_description(description)
        task_id = allocate_id(self._tasks, self._last_id)
        now = self._clock()
        task = Task(
            id=task_id,
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        self._commit([*self._tasks, task])
        self._last_id = task_id
        log.info("task_added", task_id=task_id)
        return task

    def update(self, task_id: int, description: str) -> Task:
        """替换任务描述并刷新 updated_at"""
        _check_description(description, "New task description cannot be empty.")
        index = self._index_of(task_id)
        task = self._tasks[index].model_copy(
            update={"description": description, "updated_at": self._clock()}
        )
        self._replace(index, task)
        log.info("task_updated", task_id=task_id)
        return task

    def delete(self, task_id: int) -> Task:
        """删除任务，其余任务保持原顺序"""
        index = self._index_of(task_id)
        removed = self._tasks[index]
        self._commit(self._tasks[:index] + self._tasks[index + 1 :])
        log.info("task_deleted", task_id=task_id)
        return removed

    def set_status(self, task_id: int, status: str) -> Task:
        """设置任务状态并刷新 updated_at

        设置为当前已有状态同样会刷新 updated_at。
        """
        new_status = parse_status(status)
        if new_status is None:
            raise InvalidStatusError(status)
        index = self._index_of(task_id)
        current = self._tasks[index]
        if not validate_transition(current.status, new_status):
            raise InvalidStatusError(status)
        task = current.model_copy(
            update={"status": new_status, "updated_at": self._clock()}
        )
        self._replace(index, task)
        log.info(
            "task_status_changed",
            task_id=task_id,
            from_status=current.status.value,
            to_status=new_status.value,
        )
        return task

    def list_tasks(self, filter_value: str = ListFilter.ALL) -> TaskListing:
        """按筛选键返回命中的任务子序列"""
        try:
            list_filter = ListFilter(filter_value)
        except ValueError:
            raise InvalidFilterError(filter_value) from None
        return TaskListing(
            filter=list_filter,
            tasks=[task for task in self._tasks if list_filter.matches(task.status)],
        )

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)

    def _replace(self, index: int, task: Task) -> None:
        candidate = list(self._tasks)
        candidate[index] = task
        self._commit(candidate)

    def _commit(self, candidate: list[Task]) -> None:
        """先写入文档，成功后再替换内存集合"""
        self._backend.write_text(render_document(candidate))
        self._tasks = candidate
