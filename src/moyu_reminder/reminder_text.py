from __future__ import annotations

from datetime import datetime

from moyu_reminder.date_logic import (
    format_date,
    holiday_countdowns,
    payday_countdowns,
    weekday_name,
    weekend_countdowns,
    year_end_countdowns,
)

MORNING_GREETING = "早上好"
AFTERNOON_GREETING = "下午好"
EVENING_GREETING = "晚上好"

HEADER_TEMPLATE = (
    "【摸鱼办】提醒您：\n"
    "今天是{date}，{weekday}。{greeting}，摸鱼人！即使今天是开工第天，也一定不要忘记摸鱼哦！"
    "有事没事起身去茶水间，去厕所，去廊道走走，别总在工位上坐着，钱是老板的，但健康是自己的。\n"
    "温馨提示："
)
PAYDAY_LINE = "离【{label}号发工资】：{days}天"
DOUBLE_WEEKEND_LINE = "离【双休周末】还有：{days}天"
SINGLE_WEEKEND_LINE = "离【单休周末】还有：{days}天"
HOLIDAY_LINE = "距离【 {name} 】还有：{days}天"
NEXT_YEAR_LINE = "距离【{year}年】还有：{days}天"
CHINESE_NEW_YEAR_LINE = "距离【下次过年】还有：{days}天"


def greeting_for_hour(hour: int) -> str:
    if hour < 12:
        return MORNING_GREETING
    if hour < 18:
        return AFTERNOON_GREETING
    return EVENING_GREETING


def generate_reminder_text(reference: datetime | None = None) -> str:
    if reference is None:
        reference = datetime.now()

    paydays = payday_countdowns(reference)
    weekends = weekend_countdowns(reference)
    holidays = holiday_countdowns(reference)
    year_ends = year_end_countdowns(reference)

    lines = [
        HEADER_TEMPLATE.format(
            date=format_date(reference),
            weekday=weekday_name(reference),
            greeting=greeting_for_hour(reference.hour),
        )
    ]
    lines.extend(PAYDAY_LINE.format(label=label, days=days) for label, days in paydays.items())
    lines.append(DOUBLE_WEEKEND_LINE.format(days=weekends.double_weekend))
    lines.append(SINGLE_WEEKEND_LINE.format(days=weekends.single_weekend))
    lines.extend(HOLIDAY_LINE.format(name=name, days=days) for name, days in holidays.items())
    lines.append(NEXT_YEAR_LINE.format(year=reference.year + 1, days=year_ends.next_year))
    lines.append(CHINESE_NEW_YEAR_LINE.format(days=year_ends.next_chinese_new_year))
    return "\n".join(lines)
