#!filepath: timefixture/utils/filesystem.py
from pathlib import Path
from typing import BinaryIO, TextIO

from timefixture.utils.errors import OutputUnavailableError
from timefixture.utils.logger import logs


class FileSystem:
    """
    统一文件系统工具
    - 打开输出文件（失败 → OutputUnavailableError）
    - 打开输入文件
    - 获取文件大小等
    """

    @staticmethod
    def open_output(path: str | Path) -> TextIO:
        """
        创建 / 截断输出文件。

        不会自动创建父目录：目录不存在即视为输出不可用。
        换行固定为 '\\n'，与平台无关。
        """
        p = Path(path)
        try:
            f = open(p, "w", encoding="ascii", newline="\n")
        except OSError as e:
            raise OutputUnavailableError(p, e.strerror or str(e)) from e
        logs.debug(f"[FS] opened for writing: {p}")
        return f

    @staticmethod
    def open_input(path: str | Path) -> BinaryIO:
        """
        以字节方式打开，解码交给调用方逐行处理（便于报告行号）
        """
        p = Path(path)
        try:
            return open(p, "rb")
        except OSError as e:
            raise OutputUnavailableError(p, e.strerror or str(e)) from e

    @staticmethod
    def get_file_size(path: str | Path) -> int:
        """
        返回文件大小（字节）
        """
        p = Path(path)
        if not p.exists():
            return 0
        return p.stat().st_size

    @staticmethod
    def format_size(size_bytes: int) -> str:
        """
        将字节转换为可读格式（KB / MB）
        """
        size = float(size_bytes)
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size < 1024:
                return f"{size:.2f} {unit}"
            size /= 1024
        return f"{size:.2f} PB"
