#!filepath: timefixture/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.filesystem import FileSystem
from .utils.datetime_utils import Instant, HumanDate, parse_rfc3339_nano
from .config.app_config import AppConfig

__version__ = "0.1.0"

# alias 简化调用
fs = FileSystem

__all__ = [
    "logs", "Logging", "init_logging",
    "fs",
    "AppConfig",
    "Instant", "HumanDate", "parse_rfc3339_nano",
]
