"""时钟协作者 -- 生成任务时间戳"""

from collections.abc import Callable
from datetime import datetime

from ..config import TIMESTAMP_FORMAT

Clock = Callable[[], str]


def current_timestamp() -> str:
    """当前本地时间，格式为 TIMESTAMP_FORMAT"""
    return datetime.now().strftime(TIMESTAMP_FORMAT)
