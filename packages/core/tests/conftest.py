"""packages/core 测试配置 -- 核心层 fixture"""

from datetime import datetime, timedelta
from pathlib import Path

import pytest
from tasktracker.core.store import InMemoryDocumentBackend, TaskStore


class FakeClock:
    """确定性时钟：每次调用前进一秒"""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, 0)) -> None:
        self._now = start
        self.calls = 0

    def __call__(self) -> str:
        value = self._now.strftime("%Y-%m-%d %H:%M:%S")
        self._now += timedelta(seconds=1)
        self.calls += 1
        return value


@pytest.fixture
def clock() -> FakeClock:
    """确定性时钟"""
    return FakeClock()


@pytest.fixture
def memory_backend() -> InMemoryDocumentBackend:
    """空的内存文档后端（文档不存在）"""
    return InMemoryDocumentBackend()


@pytest.fixture
def store(memory_backend: InMemoryDocumentBackend, clock: FakeClock) -> TaskStore:
    """基于内存后端、已加载的 TaskStore"""
    task_store = TaskStore(memory_backend, clock=clock)
    task_store.load()
    return task_store


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    """临时任务文件路径（尚未创建）"""
    return tmp_path / "tasks.json"
