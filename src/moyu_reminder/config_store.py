from __future__ import annotations

import os
import tempfile
import tomllib
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from moyu_reminder.models import AppConfig

DEFAULT_TIMEZONE = "Asia/Shanghai"
DEFAULT_DAILY_SEND_TIME = "00:00"


def _toml_escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _parse_daily_send_time(value: str) -> str:
    pieces = value.split(":")
    if len(pieces) != 2:
        raise ValueError("daily_send_time must be in HH:MM format")

    hour, minute = pieces
    if not hour.isdigit() or not minute.isdigit():
        raise ValueError("daily_send_time must contain numeric hour/minute")

    hour_i = int(hour)
    minute_i = int(minute)
    if hour_i < 0 or hour_i > 23 or minute_i < 0 or minute_i > 59:
        raise ValueError("daily_send_time must be a valid 24-hour time")

    return f"{hour_i:02d}:{minute_i:02d}"


def parse_time_string(value: str) -> tuple[int, int]:
    hour, minute = _parse_daily_send_time(value).split(":")
    return int(hour), int(minute)


def validate_config(config: AppConfig) -> AppConfig:
    timezone = config.timezone.strip()
    if not timezone:
        raise ValueError("timezone must not be empty")
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {timezone}") from exc

    return AppConfig(
        timezone=timezone,
        daily_send_time=_parse_daily_send_time(config.daily_send_time),
    )


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("rb") as file_obj:
        data = tomllib.load(file_obj)

    config = AppConfig(
        timezone=str(data.get("timezone", DEFAULT_TIMEZONE)),
        daily_send_time=str(data.get("daily_send_time", DEFAULT_DAILY_SEND_TIME)),
    )
    return validate_config(config)


def render_config(config: AppConfig) -> str:
    validated = validate_config(config)

    lines: list[str] = [
        f'timezone = "{_toml_escape(validated.timezone)}"',
        "",
        "# Local time of the daily reminder push. 00:00 refreshes at each day boundary.",
        f'daily_send_time = "{validated.daily_send_time}"',
    ]
    return "\n".join(lines) + "\n"


def save_config_atomic(path: Path, config: AppConfig) -> None:
    rendered = render_config(config)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        delete=False,
    ) as temp_file:
        temp_file.write(rendered)
        temp_name = temp_file.name

    os.replace(temp_name, path)


def ensure_default_config(path: Path) -> None:
    if path.exists():
        return

    default_config = AppConfig(
        timezone=DEFAULT_TIMEZONE,
        daily_send_time=DEFAULT_DAILY_SEND_TIME,
    )
    save_config_atomic(path, default_config)
