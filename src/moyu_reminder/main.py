from __future__ import annotations

import logging
from datetime import datetime, time
from pathlib import Path
from zoneinfo import ZoneInfo

from telegram.ext import Application, CallbackContext

from moyu_reminder.bot_handlers import HandlerDependencies, build_handlers
from moyu_reminder.config_store import ensure_default_config, load_config, parse_time_string
from moyu_reminder.reminder_service import ChatTextSink, LoggingNotifier, ReminderService
from moyu_reminder.settings import load_settings


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


async def scheduled_reminder_callback(context: CallbackContext) -> None:
    service: ReminderService = context.application.bot_data["reminder_service"]
    config = load_config(context.application.bot_data["settings"].config_path)
    now = datetime.now(ZoneInfo(config.timezone))
    await service.publish(now)


def main() -> None:
    configure_logging()

    settings = load_settings()
    _ensure_parent(settings.config_path)

    ensure_default_config(settings.config_path)
    config = load_config(settings.config_path)

    tz = ZoneInfo(config.timezone)
    hour, minute = parse_time_string(config.daily_send_time)

    application = Application.builder().token(settings.telegram_bot_token).build()
    application.bot_data["settings"] = settings
    application.bot_data["handler_deps"] = HandlerDependencies(settings=settings)

    reminder_service = ReminderService(
        sink=ChatTextSink(application.bot, settings.telegram_allowed_chat_id),
        notifier=LoggingNotifier(),
    )
    application.bot_data["reminder_service"] = reminder_service

    for handler in build_handlers(settings):
        application.add_handler(handler)

    application.job_queue.run_daily(
        scheduled_reminder_callback,
        time=time(hour=hour, minute=minute, tzinfo=tz),
        name="daily-moyu-reminder",
    )

    application.run_polling()


if __name__ == "__main__":
    main()
