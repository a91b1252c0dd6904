from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

from telegram import Bot
from telegram.error import TelegramError

from moyu_reminder.reminder_text import generate_reminder_text

LOGGER = logging.getLogger(__name__)

DELIVERY_SUCCESS_MESSAGE = "文本已发送！"
DELIVERY_FAILURE_MESSAGE = "发送失败，请手动复制"


class DeliveryError(RuntimeError):
    pass


class TextSink(Protocol):
    async def write_text(self, text: str) -> None: ...


class Notifier(Protocol):
    async def notify_success(self, message: str) -> None: ...

    async def notify_failure(self, message: str) -> None: ...


class ChatTextSink:
    """Posts the report into a single Telegram chat."""

    def __init__(self, bot: Bot, chat_id: int) -> None:
        self._bot = bot
        self._chat_id = chat_id

    async def write_text(self, text: str) -> None:
        try:
            await self._bot.send_message(chat_id=self._chat_id, text=text)
        except TelegramError as exc:
            raise DeliveryError(f"Could not send reminder to chat {self._chat_id}: {exc}") from exc


class LoggingNotifier:
    async def notify_success(self, message: str) -> None:
        LOGGER.info(message)

    async def notify_failure(self, message: str) -> None:
        LOGGER.warning(message)


class ReminderService:
    def __init__(self, *, sink: TextSink, notifier: Notifier) -> None:
        self._sink = sink
        self._notifier = notifier

    async def publish(self, now: datetime, sink: TextSink | None = None) -> bool:
        text = generate_reminder_text(now)
        target = sink if sink is not None else self._sink

        try:
            await target.write_text(text)
        except DeliveryError:
            LOGGER.exception("Reminder delivery failed for %s", now.isoformat())
            await self._notifier.notify_failure(DELIVERY_FAILURE_MESSAGE)
            return False

        await self._notifier.notify_success(DELIVERY_SUCCESS_MESSAGE)
        LOGGER.info("Published reminder for %s", now.date().isoformat())
        return True
