#!filepath: timefixture/generator.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from timefixture.config.fixture_config import FixtureConfig
from timefixture.observability.progress import ProgressReporter
from timefixture.utils.datetime_utils import Instant
from timefixture.utils.errors import OutputUnavailableError
from timefixture.utils.filesystem import FileSystem
from timefixture.utils.logger import logs


@dataclass(frozen=True)
class Record:
    """一行输出：(epoch 秒, RFC3339 nano 字符串)"""

    epoch_seconds: int
    formatted: str

    @classmethod
    def of(cls, instant: Instant) -> Record:
        return cls(instant.second, instant.to_rfc3339())

    def to_line(self) -> str:
        return f"{self.epoch_seconds}\t{self.formatted}\n"


@dataclass(frozen=True)
class GenerationResult:
    path: Path
    records: int
    first: Optional[Record]
    last: Optional[Record]
    bytes_written: int
    elapsed: float


def iter_records(cfg: FixtureConfig | None = None) -> Iterator[Record]:
    """
    从起点开始每次前进 step_seconds，
    直到当前时间点的年份 >= 起始年份 + span_years 为止（不含）。
    """
    cfg = cfg or FixtureConfig()

    instant = Instant.from_unix_nanos(cfg.start_unix_nanos)
    stop_year = instant.year + cfg.span_years

    while instant.year < stop_year:
        yield Record.of(instant)
        instant = instant.add_seconds(cfg.step_seconds)


class FixtureGenerator:
    """
    FixtureGenerator

    职责：
      1. 打开输出文件（失败 → OutputUnavailableError，不生成任何内容）
      2. 顺序写出全部 Record
      3. 任何退出路径上都关闭文件
    """

    TASK = "generate"

    def __init__(
            self,
            cfg: FixtureConfig | None = None,
            progress: ProgressReporter | None = None,
    ) -> None:
        self.cfg = cfg or FixtureConfig()
        self.progress = progress or ProgressReporter(every=self.cfg.progress_every)

    # ------------------------------------------------------------------
    @logs.catch(msg="fixture generation failed", expected=(OutputUnavailableError,))
    def write(self, path: str | Path | None = None) -> GenerationResult:
        path = Path(path if path is not None else self.cfg.output)

        first: Optional[Record] = None
        last: Optional[Record] = None

        with FileSystem.open_output(path) as f:
            logs.info(
                f"[{self.TASK}] start={self.cfg.start_unix_nanos}ns "
                f"span={self.cfg.span_years}y step={self.cfg.step_seconds}s → {path}"
            )
            self.progress.start(self.TASK, unit="records")

            for record in iter_records(self.cfg):
                f.write(record.to_line())
                if first is None:
                    first = record
                last = record
                self.progress.tick(self.TASK, unit="records")

        elapsed = self.progress.done(self.TASK)
        size = FileSystem.get_file_size(path)
        logs.info(
            f"[{self.TASK}] wrote {self.progress.count} records "
            f"({FileSystem.format_size(size)}) → {path}"
        )

        return GenerationResult(
            path=path,
            records=self.progress.count,
            first=first,
            last=last,
            bytes_written=size,
            elapsed=elapsed,
        )
