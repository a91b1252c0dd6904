from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from moyu_reminder.models import (
    HOLIDAYS,
    PAYDAYS,
    Holiday,
    Payday,
    WeekendCountdowns,
    YearEndCountdowns,
)

ONE_DAY = timedelta(days=1)

WEEKDAY_NAMES = ("星期日", "星期一", "星期二", "星期三", "星期四", "星期五", "星期六")

# Not leap-year aware. Applied only when the target is already in the past.
PAST_DATE_ADJUSTMENT_DAYS = 365


def format_date(moment: datetime) -> str:
    return f"{moment.year}年{moment.month:02d}月{moment.day:02d}日"


def day_of_week(moment: datetime) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (moment.weekday() + 1) % 7


def weekday_name(moment: datetime) -> str:
    return WEEKDAY_NAMES[day_of_week(moment)]


def calendar_date(year: int, month_index: int, day: int, tz: tzinfo | None = None) -> datetime:
    """Midnight of (year, 0-based month, day) with overflow normalisation.

    Out-of-range values roll forward instead of raising: day 30 of February
    lands in March and month index 12 is January of the following year.
    """
    year += month_index // 12
    month_index %= 12
    return datetime(year, month_index + 1, 1, tzinfo=tz) + timedelta(days=day - 1)


def add_months(moment: datetime, months: int) -> datetime:
    return calendar_date(moment.year, moment.month - 1 + months, moment.day, moment.tzinfo)


def days_between(start: datetime, end: datetime) -> int:
    days, remainder = divmod(end - start, ONE_DAY)
    if remainder:
        days += 1
    if days < 0:
        return days + PAST_DATE_ADJUSTMENT_DAYS
    return days


def next_payday(payday: Payday, reference: datetime) -> datetime:
    candidate = calendar_date(reference.year, reference.month - 1, payday.day, reference.tzinfo)
    if candidate < reference:
        candidate = add_months(candidate, 1)
    return candidate


def payday_countdowns(reference: datetime, paydays: tuple[Payday, ...] = PAYDAYS) -> dict[str, int]:
    return {payday.label: days_between(reference, next_payday(payday, reference)) for payday in paydays}


def weekend_countdowns(reference: datetime) -> WeekendCountdowns:
    dow = day_of_week(reference)
    return WeekendCountdowns(
        double_weekend=6 if dow == 0 else 6 - dow,
        single_weekend=7 if dow == 0 else 7 - dow,
    )


def next_holiday(holiday: Holiday, reference: datetime) -> datetime:
    candidate = calendar_date(reference.year, holiday.month_index, holiday.day, reference.tzinfo)
    if candidate < reference:
        candidate = calendar_date(reference.year + 1, candidate.month - 1, candidate.day, reference.tzinfo)
    return candidate


def holiday_countdowns(reference: datetime, holidays: tuple[Holiday, ...] = HOLIDAYS) -> dict[str, int]:
    return {holiday.name: days_between(reference, next_holiday(holiday, reference)) for holiday in holidays}


def chinese_new_year_proxy(reference: datetime) -> datetime:
    month_index = reference.month - 1
    if month_index > 1 or (month_index == 1 and reference.day > 10):
        year = reference.year + 1
    else:
        year = reference.year
    return calendar_date(year, 1, 10, reference.tzinfo)


def year_end_countdowns(reference: datetime) -> YearEndCountdowns:
    new_year = calendar_date(reference.year + 1, 0, 1, reference.tzinfo)
    return YearEndCountdowns(
        next_year=days_between(reference, new_year),
        next_chinese_new_year=days_between(reference, chinese_new_year_proxy(reference)),
    )
