#!filepath: timefixture/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from timefixture.config.fixture_config import FixtureConfig
from timefixture.config.log_config import LogConfig
from timefixture.utils.errors import UserInputError
from timefixture.utils.logger import logs

DEFAULT_CONFIG_NAME = "timefixture.yml"

# 环境变量 → (section, key)
ENV_OVERRIDES = {
    "TIMEFIXTURE_OUTPUT": ("fixture", "output"),
    "TIMEFIXTURE_LOG_LEVEL": ("log", "level"),
    "TIMEFIXTURE_LOG_DIR": ("log", "dir"),
    "TIMEFIXTURE_LOG_ENABLED": ("log", "enabled"),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    fixture: FixtureConfig = Field(default_factory=FixtureConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 .env + YAML 配置
        - 相对路径全部基于当前工作目录（time.txt 也是）
        - path=None：存在 ./timefixture.yml 就读，否则全部用默认值
        - 显式给出的 path 不存在 → UserInputError
        """
        cwd = os.getcwd()

        # 1) 先加载 .env
        load_dotenv(os.path.join(cwd, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            candidate = os.path.join(cwd, DEFAULT_CONFIG_NAME)
            path = candidate if os.path.exists(candidate) else None
        elif not os.path.exists(path):
            raise UserInputError(f"Config file not found: {path}")

        # 3) 读取 YAML
        raw: dict = {}
        if path is not None:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            if not isinstance(raw, dict):
                raise UserInputError(f"Config file must be a mapping: {path}")
            logs.debug(f"[Config] loaded {path}")

        # 4) 环境变量覆盖
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                raw[section] = {**(raw.get(section) or {}), key: value}

        try:
            return cls(**raw)
        except ValidationError as e:
            raise UserInputError(f"Invalid config: {e}") from e
