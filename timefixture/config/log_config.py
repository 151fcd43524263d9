#!filepath: timefixture/config/log_config.py
from pydantic import BaseModel


class LogConfig(BaseModel):
    # 默认不写日志文件：只有 stderr WARNING；通过 YAML 或 TIMEFIXTURE_LOG_ENABLED 开启
    enabled: bool = False
    dir: str = "logs"
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "INFO"
