#!filepath: timefixture/utils/datetime_utils.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import ClassVar

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 24 * 60 * 60

# datetime 上限：9999-12-31T23:59:59Z 之后无法换算日历
MAX_YEAR = 9999
MAX_UNIX_SECONDS = 253_402_300_799

_UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339_NANO = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?Z$"
)


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class WeekDay(IntEnum):
    # 与 datetime.weekday() 对齐
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True)
class HumanDate:
    year: int
    month: Month
    day: int
    weekday: WeekDay
    hour: int
    minute: int
    second: int
    nano: int


@dataclass(frozen=True, order=True)
class Instant:
    """
    UTC 单调时间点，始终 >= Unix Epoch

    second: 1970-01-01T00:00:00Z 以来的整秒数
    nano:   秒内纳秒数，0 <= nano < 1e9

    比较顺序 = (second, nano)
    """

    second: int
    nano: int = 0

    EPOCH: ClassVar["Instant"]

    def __post_init__(self):
        if self.second < 0:
            raise ValueError(f"Instant before epoch: second={self.second}")
        if not 0 <= self.nano < NANOS_PER_SECOND:
            raise ValueError(f"nano out of range: {self.nano}")

    # ================================================================
    # 构造
    # ================================================================
    @classmethod
    def unix(cls, second: int, nano: int = 0) -> Instant:
        """
        nano 超过 1 秒的部分进位到 second：
            unix(1633111372, 3_123_456_789) == Instant(1633111375, 123_456_789)
        """
        if nano < 0:
            raise ValueError(f"negative nano: {nano}")
        carry, nano = divmod(nano, NANOS_PER_SECOND)
        return cls(second + carry, nano)

    @classmethod
    def from_unix_nanos(cls, nanos: int) -> Instant:
        second, nano = divmod(nanos, NANOS_PER_SECOND)
        return cls(second, nano)

    # ================================================================
    # 运算
    # ================================================================
    def add_seconds(self, seconds: int) -> Instant:
        """固定时长相加（UTC：无夏令时，无闰秒）"""
        return Instant(self.second + seconds, self.nano)

    def unix_nanos(self) -> int:
        return self.second * NANOS_PER_SECOND + self.nano

    # ================================================================
    # 日历
    # ================================================================
    def to_datetime(self) -> datetime:
        """
        整秒部分的 UTC datetime（datetime 只有微秒精度，nano 不放进去）
        """
        return _UTC_EPOCH + timedelta(seconds=self.second)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    def human_date(self) -> HumanDate:
        d = self.to_datetime()
        return HumanDate(
            year=d.year,
            month=Month(d.month),
            day=d.day,
            weekday=WeekDay(d.weekday()),
            hour=d.hour,
            minute=d.minute,
            second=d.second,
            nano=self.nano,
        )

    # ================================================================
    # 格式化
    # ================================================================
    def to_rfc3339(self, fixed: bool = False) -> str:
        """
        "2006-01-02T15:04:05.999999999Z"

        默认去掉小数部分末尾的 0，nano == 0 时整个小数部分省略；
        fixed=True 时始终输出 9 位小数。

        See <https://rfc-editor.org/rfc/rfc3339.html>.
        """
        d = self.to_datetime()
        frac = f"{self.nano:09d}"
        if not fixed:
            frac = frac.rstrip("0")
        frac = f".{frac}" if frac else ""
        return (
            f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
            f"T{d.hour:02d}:{d.minute:02d}:{d.second:02d}{frac}Z"
        )

    def __str__(self) -> str:
        return self.to_rfc3339()


Instant.EPOCH = Instant(0, 0)


def parse_rfc3339_nano(text: str) -> Instant:
    """
    解析 "YYYY-MM-DDTHH:MM:SS[.f{1,9}]Z"，只接受 UTC 'Z'
    """
    m = _RFC3339_NANO.match(text)
    if m is None:
        raise ValueError(f"not an RFC3339 UTC timestamp: {text!r}")

    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    frac = m.group(7) or ""

    d = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    seconds = (d - _UTC_EPOCH) // timedelta(seconds=1)
    nano = int(frac.ljust(9, "0")) if frac else 0
    return Instant(seconds, nano)
