"""task-cli 日志初始化

CLI 每次进程只执行一条命令，日志只用于诊断（跳过的记录、写入失败等）：
- 输出到 stderr，stdout 只留给命令结果
- 默认级别 WARNING，正常命令不产生任何日志输出
- TASKTRACKER_LOG_FORMAT=json 时每条诊断输出一行 JSON，便于脚本收集
"""

import logging
import sys

import structlog

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# structlog 事件与第三方标准库日志共用的前置处理器
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
    structlog.processors.StackInfoRenderer(),
]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(log_level: str = "WARNING", log_format: str = "dev") -> None:
    """将 structlog 诊断接入标准库 logging 并输出到 stderr

    Args:
        log_level: 日志级别名，未知值按 WARNING 处理
        log_format: "json" 或 "dev"
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(log_format),
            foreign_pre_chain=_PRE_CHAIN,
        )
    )

    # 只保留一个 handler，重复调用不会产生重复输出
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(stderr_handler)
    root.setLevel(_LEVELS.get(log_level.upper(), logging.WARNING))
