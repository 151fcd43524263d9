#!filepath: timefixture/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional, Tuple, Type

from loguru import logger


class Logging:
    """
    日志模块
    ---------------------------------------
    - log_dir=None → 只输出到 stderr（WARNING 以上）
    - log_dir 给定 → 按日期切割的文件日志
    - 支持日志保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = "logs",
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir is not None:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        配置全局 logger（会替换之前的所有 sink）
        """

        logger.remove()

        if self.log_dir is None:
            logger.add(
                sink=sys.stderr,
                level="WARNING",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            )
            return

        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            backtrace=True,
            diagnose=True,
        )

        logger.info("-----------Logger initialized successfully.-----------")

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        expected: Tuple[Type[BaseException], ...] = (),
        log_time: bool = True,
    ) -> Callable:
        """
        记录异常后继续抛出。

        expected 中的异常属于业务错误：只记一行 error，不打印 traceback。
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except expected as e:
                    logger.error(f"[ERROR] {func.__name__}: {e}")
                    raise
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(cfg) -> Logging:
    """
    用 LogConfig 原地重新配置全局 logs，已导入的 logs 引用同样生效。
    """
    logs.log_dir = cfg.dir if cfg.enabled else None
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level

    if logs.log_dir is not None:
        os.makedirs(logs.log_dir, exist_ok=True)
    logs._configure()
    return logs


# 默认全局 logs（可被 init_logging 重新配置）
logs = Logging(log_dir=None)
