"""配置模块 -- 可通过环境变量覆盖

包含任务文件路径、日志配置，以及 ID 上限、时间戳格式等常量。
从环境变量加载配置，非法值降级为默认值，不阻塞启动。
"""

import os
from pathlib import Path
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

# 任务文件默认文件名
TASKS_FILE_NAME: str = "tasks.json"

# 可分配 ID 的上限（32 位有符号整数最大值），达到后 add 直接失败
MAX_TASK_ID: int = 2**31 - 1

# 时间戳格式（本地时间）
TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class TaskTrackerConfig(BaseModel):
    """运行配置 -- 从环境变量加载

    环境变量:
        TASKTRACKER_TASKS_FILE: 任务文件完整路径（优先）
        TASKTRACKER_DATA_DIR: 任务文件所在目录（默认当前目录）
        TASKTRACKER_LOG_LEVEL: 日志级别（默认 WARNING）
        TASKTRACKER_LOG_FORMAT: 日志渲染模式 dev/json（默认 dev）
    """

    tasks_file: Path = Field(
        default=Path(TASKS_FILE_NAME),
        description="任务 JSON 文件路径",
    )
    log_level: str = Field(default="WARNING", description="日志级别")
    log_format: Literal["dev", "json"] = Field(
        default="dev",
        description="日志渲染模式：dev / json",
    )


def get_tasks_file_path() -> Path:
    """获取任务文件路径"""
    if val := os.environ.get("TASKTRACKER_TASKS_FILE"):
        return Path(val)
    return Path(os.environ.get("TASKTRACKER_DATA_DIR", ".")) / TASKS_FILE_NAME


def load_config() -> TaskTrackerConfig:
    """从环境变量加载运行配置

    Returns:
        TaskTrackerConfig 实例
    """
    kwargs: dict = {"tasks_file": get_tasks_file_path()}

    if val := os.environ.get("TASKTRACKER_LOG_LEVEL"):
        if val.upper() in _LOG_LEVELS:
            kwargs["log_level"] = val.upper()
        else:
            log.warning(
                "invalid_log_level_config",
                env_var="TASKTRACKER_LOG_LEVEL",
                value=val,
                fallback="WARNING",
            )

    if val := os.environ.get("TASKTRACKER_LOG_FORMAT"):
        if val in ("dev", "json"):
            kwargs["log_format"] = val
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="TASKTRACKER_LOG_FORMAT",
                value=val,
                fallback="dev",
            )

    return TaskTrackerConfig(**kwargs)
