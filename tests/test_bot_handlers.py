from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from moyu_reminder.bot_handlers import _render_help, build_handlers, is_authorized, parse_reference_text
from moyu_reminder.settings import Settings


def _settings() -> Settings:
    return Settings(
        telegram_bot_token="token",
        telegram_allowed_user_id=111,
        telegram_allowed_chat_id=222,
        config_path=Path("config/moyu.toml"),
    )


def test_parse_reference_text_date_only_is_midnight() -> None:
    assert parse_reference_text("2024-01-01") == datetime(2024, 1, 1)


def test_parse_reference_text_with_time() -> None:
    assert parse_reference_text("  2024-01-01   09:30 ") == datetime(2024, 1, 1, 9, 30)


def test_parse_reference_text_attaches_timezone() -> None:
    tz = ZoneInfo("Asia/Shanghai")
    assert parse_reference_text("2024-02-10 18:00", tz).tzinfo is tz


def test_parse_reference_text_rejects_bad_format() -> None:
    with pytest.raises(ValueError):
        parse_reference_text("01/01/2024")


def test_parse_reference_text_rejects_invalid_date() -> None:
    with pytest.raises(ValueError):
        parse_reference_text("2023-02-29")


def test_help_lists_commands() -> None:
    message = _render_help()
    assert "/today" in message
    assert "/date" in message
    assert "/help" in message


def test_build_handlers_registers_commands() -> None:
    commands = set()
    for handler in build_handlers(_settings()):
        commands.update(handler.commands)
    assert commands == {"help", "start", "today", "date"}


@dataclass
class FakeUser:
    id: int


@dataclass
class FakeChat:
    id: int


@dataclass
class FakeUpdate:
    effective_user: FakeUser
    effective_chat: FakeChat


def test_is_authorized_true() -> None:
    update = FakeUpdate(effective_user=FakeUser(id=111), effective_chat=FakeChat(id=222))
    assert is_authorized(update, _settings()) is True


def test_is_authorized_false() -> None:
    update = FakeUpdate(effective_user=FakeUser(id=111), effective_chat=FakeChat(id=999))
    assert is_authorized(update, _settings()) is False
