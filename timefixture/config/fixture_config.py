#!filepath: timefixture/config/fixture_config.py
from pydantic import BaseModel, Field, model_validator

from timefixture.utils.datetime_utils import (
    MAX_UNIX_SECONDS,
    MAX_YEAR,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    Instant,
)


class FixtureConfig(BaseModel):
    """
    生成参数。默认值生成标准 time.txt：
      - 起点 12_345_678 ns（1970-01-01T00:00:00.012345678Z）
      - 跨度 401 年
      - 步长 1 天

    停止年份（起始年份 + span_years）不能超过 9999；
    步长不超过 365 天，保证最后一次前进也落在 9999 年内。
    """

    output: str = "time.txt"
    start_unix_nanos: int = Field(12_345_678, ge=0)
    span_years: int = Field(401, gt=0)
    step_seconds: int = Field(86_400, gt=0, le=365 * SECONDS_PER_DAY)
    progress_every: int = Field(50_000, gt=0)

    @model_validator(mode="after")
    def _check_calendar_range(self) -> "FixtureConfig":
        if self.start_unix_nanos // NANOS_PER_SECOND > MAX_UNIX_SECONDS:
            raise ValueError(f"start_unix_nanos beyond year {MAX_YEAR}: {self.start_unix_nanos}")

        start_year = Instant.from_unix_nanos(self.start_unix_nanos).year
        if start_year + self.span_years > MAX_YEAR:
            raise ValueError(
                f"stop year {start_year + self.span_years} beyond {MAX_YEAR} "
                f"(start year {start_year}, span_years {self.span_years})"
            )
        return self
