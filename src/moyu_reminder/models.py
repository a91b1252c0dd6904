from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Payday:
    label: str
    day: int


@dataclass(frozen=True)
class Holiday:
    key: str
    name: str
    month_index: int
    day: int


# Stored values are reproduced as-is; (9, 30) normalises to October 30.
PAYDAYS = (
    Payday(label="01", day=1),
    Payday(label="05", day=5),
    Payday(label="08", day=8),
    Payday(label="10", day=10),
    Payday(label="15", day=15),
    Payday(label="20", day=20),
    Payday(label="25", day=25),
    Payday(label="30", day=30),
)

HOLIDAYS = (
    Holiday(key="national_day", name="国庆", month_index=9, day=30),
    Holiday(key="mid_autumn", name="中秋", month_index=8, day=14),
)


@dataclass(frozen=True)
class WeekendCountdowns:
    double_weekend: int
    single_weekend: int


@dataclass(frozen=True)
class YearEndCountdowns:
    next_year: int
    next_chinese_new_year: int


@dataclass(frozen=True)
class AppConfig:
    timezone: str
    daily_send_time: str
