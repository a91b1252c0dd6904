from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from telegram import Update
from telegram.ext import CallbackContext, CommandHandler

from moyu_reminder.config_store import load_config
from moyu_reminder.reminder_service import ChatTextSink, ReminderService
from moyu_reminder.settings import Settings

LOGGER = logging.getLogger(__name__)

DATE_USAGE = "Usage: /date YYYY-MM-DD or /date YYYY-MM-DD HH:MM"


@dataclass(frozen=True)
class HandlerDependencies:
    settings: Settings


def is_authorized(update: Update, settings: Settings) -> bool:
    effective_user = update.effective_user
    effective_chat = update.effective_chat
    if effective_user is None or effective_chat is None:
        return False
    return (
        effective_user.id == settings.telegram_allowed_user_id
        and effective_chat.id == settings.telegram_allowed_chat_id
    )


async def _deny_unauthorized(update: Update) -> None:
    if update.effective_message:
        await update.effective_message.reply_text("This bot is restricted to its configured owner.")


def parse_reference_text(raw_text: str, tz: tzinfo | None = None) -> datetime:
    value = " ".join(raw_text.split())

    match = re.fullmatch(r"(\d{4})-(\d{2})-(\d{2})(?: (\d{2}):(\d{2}))?", value)
    if not match:
        raise ValueError("Reference must use YYYY-MM-DD or YYYY-MM-DD HH:MM")

    year, month, day = (int(group) for group in match.group(1, 2, 3))
    hour = int(match.group(4)) if match.group(4) is not None else 0
    minute = int(match.group(5)) if match.group(5) is not None else 0
    return datetime(year, month, day, hour, minute, tzinfo=tz)


def _render_help() -> str:
    return (
        "Commands:\n"
        "/today - Show today's 摸鱼办 reminder\n"
        "/date - Preview the reminder for another moment\n"
        "/help - Show this help message\n\n"
        "Date format examples:\n"
        "- 2024-01-01\n"
        "- 2024-01-01 09:00\n\n"
        "The reminder is also pushed to this chat once a day."
    )


async def help_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return
    await update.effective_message.reply_text(_render_help())


async def today_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    settings = deps.settings
    if not is_authorized(update, settings):
        await _deny_unauthorized(update)
        return

    config = load_config(settings.config_path)
    now = datetime.now(ZoneInfo(config.timezone))

    service: ReminderService = context.application.bot_data["reminder_service"]
    await service.publish(now, sink=ChatTextSink(context.bot, update.effective_chat.id))


async def date_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    settings = deps.settings
    if not is_authorized(update, settings):
        await _deny_unauthorized(update)
        return

    config = load_config(settings.config_path)
    raw_text = " ".join(context.args or [])

    try:
        reference = parse_reference_text(raw_text, ZoneInfo(config.timezone))
    except ValueError as exc:
        await update.effective_message.reply_text(f"{exc}. {DATE_USAGE}")
        return

    service: ReminderService = context.application.bot_data["reminder_service"]
    await service.publish(reference, sink=ChatTextSink(context.bot, update.effective_chat.id))
    LOGGER.info("Previewed reminder for %s", reference.isoformat())


def build_handlers(settings: Settings) -> list:
    return [
        CommandHandler("help", help_command),
        CommandHandler("start", help_command),
        CommandHandler("today", today_command),
        CommandHandler("date", date_command),
    ]
