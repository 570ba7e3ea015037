"""文档解析 -- 将任务 JSON 数组文本还原为 Task 列表

流程：
1. 去除首尾空白；空文本或 [] 直接返回空列表
2. 定位第一个 [ 与最后一个 ]，缺失或顺序错误时整份文档视为损坏
3. 单遍扫描器在数组边界内切分顶层对象（仅支持单层，遇到嵌套对象即停止）
4. 每个对象经 find_value 提取五个字段，校验失败则跳过该条并记录诊断

解析从不抛异常：畸形输入只会导致加载的记录变少。
"""

from collections.abc import Iterator
from enum import Enum, auto

import structlog
from pydantic import ValidationError

from ..models.enums import parse_status
from ..models.task import Task
from .extractor import find_value, is_integer_text

log = structlog.get_logger()

# 文档字段名 -> Task 字段名
FIELD_NAMES: dict[str, str] = {
    "id": "id",
    "description": "description",
    "status": "status",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
DOCUMENT_KEYS: dict[str, str] = {name: key for key, name in FIELD_NAMES.items()}


class ScanState(Enum):
    """对象切分扫描器状态"""

    OUTSIDE_OBJECT = auto()
    INSIDE_OBJECT = auto()
    INSIDE_STRING = auto()
    ESCAPE_PENDING = auto()


def iter_object_bodies(text: str, start: int, end: int) -> Iterator[str]:
    """在 text[start:end] 内逐个产出顶层对象的内容（不含花括号）

    字符串内的花括号不参与匹配。对象内再次出现 { 视为不支持的嵌套，
    对象在 end 之前未闭合视为越界，两种情况均记录错误并停止。
    """
    state = ScanState.OUTSIDE_OBJECT
    obj_start = -1

    for pos in range(start, end):
        ch = text[pos]
        if state is ScanState.OUTSIDE_OBJECT:
            if ch == "{":
                obj_start = pos
                state = ScanState.INSIDE_OBJECT
        elif state is ScanState.INSIDE_OBJECT:
            if ch == '"':
                state = ScanState.INSIDE_STRING
            elif ch == "{":
                log.error("nested_object_unsupported", offset=pos, object_offset=obj_start)
                return
            elif ch == "}":
                yield text[obj_start + 1 : pos]
                state = ScanState.OUTSIDE_OBJECT
        elif state is ScanState.INSIDE_STRING:
            if ch == "\\":
                state = ScanState.ESCAPE_PENDING
            elif ch == '"':
                state = ScanState.INSIDE_OBJECT
        else:
            state = ScanState.INSIDE_STRING

    if state is not ScanState.OUTSIDE_OBJECT:
        log.error("object_extends_beyond_array", object_offset=obj_start)


def _parse_int(text: str) -> int | None:
    if not is_integer_text(text):
        return None
    return int(text)


def parse_record(body: str) -> Task | None:
    """将单个对象内容组装为 Task，任一字段不合法时返回 None"""
    raw = {key: find_value(body, key) for key in FIELD_NAMES}

    task_id = _parse_int(raw["id"])

    invalid = [key for key, value in raw.items() if not value]
    if raw["id"] and task_id is None:
        invalid.append("id")
    if raw["status"] and parse_status(raw["status"]) is None:
        invalid.append("status")
    if invalid:
        log.warning(
            "task_record_skipped",
            task_id=task_id,
            fields=invalid,
            status=raw["status"] or None,
        )
        return None

    fields: dict[str, object] = {FIELD_NAMES[key]: value for key, value in raw.items()}
    fields["id"] = task_id
    try:
        return Task(**fields)
    except ValidationError as e:
        locs = [str(err["loc"][0]) for err in e.errors()]
        log.warning(
            "task_record_skipped",
            task_id=task_id,
            fields=[DOCUMENT_KEYS.get(loc, loc) for loc in locs],
        )
        return None


def parse_document(text: str) -> list[Task]:
    """解析完整文档文本

    Args:
        text: 任务文件内容

    Returns:
        按文档顺序排列的合法 Task 列表
    """
    content = text.strip()
    if not content or content == "[]":
        return []

    start = content.find("[")
    end = content.rfind("]")
    if start == -1 or end == -1 or start >= end:
        log.error("document_array_brackets_invalid", start=start, end=end)
        return []

    tasks: list[Task] = []
    seen_ids: set[int] = set()
    for body in iter_object_bodies(content, start + 1, end):
        task = parse_record(body)
        if task is None:
            continue
        if task.id in seen_ids:
            log.warning("duplicate_task_id", task_id=task.id)
            continue
        seen_ids.add(task.id)
        tasks.append(task)

    log.debug("document_parsed", task_count=len(tasks))
    return tasks
