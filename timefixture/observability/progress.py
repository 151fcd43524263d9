#!filepath: timefixture/observability/progress.py
from time import perf_counter

from timefixture.utils.logger import logs


class ProgressReporter:
    """
    最轻量进度系统（只写日志，不依赖 Rich/TQDM，不影响 pytest）

    每 every 条记录输出一次进度。
    """

    def __init__(self, enabled: bool = True, every: int = 50_000):
        self.enabled = enabled
        self.every = every
        self._count = 0
        self._start = 0.0

    def start(self, task: str, unit: str = ""):
        self._count = 0
        self._start = perf_counter()
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} started {unit}".rstrip())

    def tick(self, task: str, unit: str = "") -> int:
        self._count += 1
        if self.enabled and self._count % self.every == 0:
            elapsed = perf_counter() - self._start
            logs.info(
                f"[Progress] {task}: {self._count} {unit} | elapsed={elapsed:.2f}s"
            )
        return self._count

    def done(self, task: str) -> float:
        elapsed = perf_counter() - self._start
        if self.enabled:
            logs.info(f"[Progress] {task} done count={self._count} total_time={elapsed:.2f}s")
        return elapsed

    @property
    def count(self) -> int:
        return self._count
