# tests/conftest.py
from __future__ import annotations

import os
from pathlib import Path

import pytest
from loguru import logger

from timefixture.config.fixture_config import FixtureConfig


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


ENV_NAMES = (
    "TIMEFIXTURE_OUTPUT",
    "TIMEFIXTURE_LOG_LEVEL",
    "TIMEFIXTURE_LOG_DIR",
    "TIMEFIXTURE_LOG_ENABLED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield
    # .env 里加载的变量 monkeypatch 不知道
    for name in ENV_NAMES:
        os.environ.pop(name, None)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """cwd 切到 tmp_path，time.txt / logs / .env 都落在这里"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def one_year() -> FixtureConfig:
    """1970 年（非闰年）→ 365 行"""
    return FixtureConfig(span_years=1)
