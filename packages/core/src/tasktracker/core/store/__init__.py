"""TaskTracker Core Store -- JSON 文档持久化实现

提供工厂函数基于任务文件路径创建 TaskStore。
"""

from pathlib import Path

from .backends import FileDocumentBackend, InMemoryDocumentBackend
from .clock import Clock, current_timestamp
from .protocols import DocumentBackend
from .task_store import TaskStore, allocate_id


def create_file_store(
    tasks_file: str | Path,
    clock: Clock = current_timestamp,
) -> TaskStore:
    """创建基于本地文件的 TaskStore 并完成加载

    Args:
        tasks_file: 任务 JSON 文件路径
        clock: 时间戳生成函数

    Returns:
        已加载的 TaskStore 实例
    """
    store = TaskStore(FileDocumentBackend(tasks_file), clock=clock)
    store.load()
    return store


__all__ = [
    "DocumentBackend",
    "FileDocumentBackend",
    "InMemoryDocumentBackend",
    "TaskStore",
    "allocate_id",
    "create_file_store",
    "Clock",
    "current_timestamp",
]
