#!filepath: tests/observability/test_progress.py
from loguru import logger

from timefixture.observability.progress import ProgressReporter


def test_progress_counts_and_reports_every_n():
    messages = []
    logger.remove()
    logger.add(lambda msg: messages.append(msg.record["message"]), level="INFO")

    p = ProgressReporter(enabled=True, every=2)
    p.start("Task", "records")
    for _ in range(5):
        p.tick("Task", "records")
    elapsed = p.done("Task")

    assert p.count == 5
    assert elapsed >= 0
    assert sum(1 for m in messages if m.startswith("[Progress] Task: ")) == 2
    assert "done count=5" in messages[-1]


def test_progress_disabled():
    messages = []
    logger.remove()
    logger.add(lambda msg: messages.append(msg), level="DEBUG")

    p = ProgressReporter(enabled=False, every=1)
    p.start("Task")
    p.tick("Task")
    p.done("Task")

    assert p.count == 1
    assert messages == []
