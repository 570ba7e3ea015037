"""文档后端实现 -- 本地文件与内存文本

FileDocumentBackend 通过同目录临时文件 + os.replace 原子替换写入，
写入失败（含编码失败）不会留下截断的文档或临时文件。
"""

import os
import tempfile
from pathlib import Path

import structlog

from ..exceptions import StorageReadError, StorageWriteError

log = structlog.get_logger()


class FileDocumentBackend:
    """DocumentBackend 的本地文件实现"""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str | None:
        """读取任务文件，文件不存在视为空状态

        非 UTF-8 字节以 U+FFFD 替换后继续解析，不因编码问题拒绝整份文档。
        """
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageReadError(self._path, e) from e

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            log.warning(
                "tasks_file_not_utf8",
                path=str(self._path),
                offset=e.start,
            )
            return data.decode("utf-8", errors="replace")

    def write_text(self, text: str) -> None:
        """原子覆写任务文件"""
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=self._path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, self._path)
        except (OSError, UnicodeError) as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            log.error("tasks_file_write_failed", path=str(self._path), error=str(e))
            raise StorageWriteError(self._path, e) from e
        log.debug("tasks_file_written", path=str(self._path), size=len(text))


class InMemoryDocumentBackend:
    """DocumentBackend 的内存实现，用于测试与脱离文件系统的场景"""

    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self.write_count = 0

    def read_text(self) -> str | None:
        return self.text

    def write_text(self, text: str) -> None:
        self.text = text
        self.write_count += 1
