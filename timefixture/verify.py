#!filepath: timefixture/verify.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from timefixture.generator import Record
from timefixture.utils.datetime_utils import parse_rfc3339_nano
from timefixture.utils.errors import FixtureFormatError, FixtureMismatchError
from timefixture.utils.filesystem import FileSystem
from timefixture.utils.logger import logs


@dataclass(frozen=True)
class VerifyReport:
    path: Path
    lines: int
    first: Optional[Record]
    last: Optional[Record]


def parse_line(line_no: int, raw: bytes) -> Record:
    """`<epoch_seconds>\\t<rfc3339>\\n` → Record（只检查格式）"""
    try:
        line = raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise FixtureFormatError(line_no, f"non-ASCII byte at column {e.start + 1}") from e

    body = line[:-1] if line.endswith("\n") else line

    unix, sep, formatted = body.partition("\t")
    if not sep:
        raise FixtureFormatError(line_no, f"missing tab separator: {body!r}")
    if not (unix.isascii() and unix.isdigit()):
        raise FixtureFormatError(line_no, f"epoch seconds is not an integer: {unix!r}")
    if str(int(unix)) != unix:
        raise FixtureFormatError(line_no, f"non-canonical epoch seconds: {unix!r}")

    return Record(int(unix), formatted)


def check_record(line_no: int, record: Record) -> None:
    """
    逐行校验：
      - 字符串可解析，并且重新格式化后逐字节一致
      - 字符串的整秒 == 第一列
    """
    try:
        instant = parse_rfc3339_nano(record.formatted)
    except ValueError as e:
        raise FixtureMismatchError(line_no, str(e)) from e

    if instant.second != record.epoch_seconds:
        raise FixtureMismatchError(
            line_no,
            f"epoch {record.epoch_seconds} != {instant.second} parsed from {record.formatted}",
        )

    canonical = instant.to_rfc3339()
    if canonical != record.formatted:
        raise FixtureMismatchError(
            line_no, f"non-canonical timestamp {record.formatted!r}, expected {canonical!r}"
        )


def verify_fixture(path: str | Path, step_seconds: int = 86_400) -> VerifyReport:
    """
    读取 fixture 文件并校验每一行，第一处错误即抛出（带行号）。
    """
    path = Path(path)

    first: Optional[Record] = None
    prev: Optional[Record] = None
    count = 0

    with FileSystem.open_input(path) as f:
        for line_no, raw in enumerate(f, start=1):
            record = parse_line(line_no, raw)
            check_record(line_no, record)

            if prev is not None and record.epoch_seconds - prev.epoch_seconds != step_seconds:
                raise FixtureMismatchError(
                    line_no,
                    f"step {record.epoch_seconds - prev.epoch_seconds}s != {step_seconds}s",
                )

            if first is None:
                first = record
            prev = record
            count = line_no

    logs.info(f"[verify] {path}: {count} lines ok")
    return VerifyReport(path=path, lines=count, first=first, last=prev)
