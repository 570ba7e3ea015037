"""Store Protocol 接口定义

定义文档后端的抽象接口，使用 Python Protocol 实现结构化子类型（duck typing）。
TaskStore 只依赖该接口，文件路径作为后端构造参数注入。
"""

from typing import Protocol


class DocumentBackend(Protocol):
    """任务文档读写接口"""

    def read_text(self) -> str | None:
        """读取完整文档文本，文档不存在时返回 None"""
        ...

    def write_text(self, text: str) -> None:
        """整体覆写文档（失败时原文档保持不变）"""
        ...
