"""文档写出 -- 将 Task 列表渲染为格式化 JSON 数组

字段顺序固定为 id, description, status, createdAt, updatedAt，
相同输入始终产出相同字节，重复的无变更重写不会改变文件。
"""

from collections.abc import Iterable

from ..models.task import Task
from .escape import escape_string

INDENT = "  "


def render_task(task: Task) -> str:
    """渲染单个对象块（不含分隔逗号）"""
    inner = INDENT * 2
    lines = [
        f"{INDENT}{{",
        f'{inner}"id": {task.id},',
        f'{inner}"description": "{escape_string(task.description)}",',
        f'{inner}"status": "{escape_string(task.status.value)}",',
        f'{inner}"createdAt": "{escape_string(task.created_at)}",',
        f'{inner}"updatedAt": "{escape_string(task.updated_at)}"',
        f"{INDENT}}}",
    ]
    return "\n".join(lines)


def render_document(tasks: Iterable[Task]) -> str:
    """渲染完整文档，末尾带换行"""
    blocks = [render_task(task) for task in tasks]
    if not blocks:
        return "[\n]\n"
    return "[\n" + ",\n".join(blocks) + "\n]\n"
