# timefixture/utils/errors.py
from pathlib import Path


class TimeFixtureError(RuntimeError):
    """Base class for every error raised by timefixture."""


class UserInputError(TimeFixtureError):
    """
    Raised for invalid user-provided config (paths, spans, steps).
    Should NOT print traceback.
    """


class OutputUnavailableError(TimeFixtureError):
    """
    输出文件无法创建 / 打开。

    发生在任何生成之前：此时不会写入任何内容。
    """

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"output unavailable: {self.path}: {reason}")


class FixtureFormatError(TimeFixtureError):
    """A fixture line is not `<int>\\t<rfc3339>`."""

    def __init__(self, line_no: int, message: str):
        self.line_no = line_no
        super().__init__(f"line {line_no}: {message}")


class FixtureMismatchError(TimeFixtureError):
    """A fixture line is well-formed but disagrees with the expected instant."""

    def __init__(self, line_no: int, message: str):
        self.line_no = line_no
        super().__init__(f"line {line_no}: {message}")
