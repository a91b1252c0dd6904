from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str
    telegram_allowed_user_id: int
    telegram_allowed_chat_id: int
    config_path: Path


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise ValueError(f"Missing required environment variable: {name}")
    return value.strip()


def _required_int_env(name: str) -> int:
    raw = _required_env(name)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer") from exc


def load_settings() -> Settings:
    root = Path.cwd()

    return Settings(
        telegram_bot_token=_required_env("TELEGRAM_BOT_TOKEN"),
        telegram_allowed_user_id=_required_int_env("TELEGRAM_ALLOWED_USER_ID"),
        telegram_allowed_chat_id=_required_int_env("TELEGRAM_ALLOWED_CHAT_ID"),
        config_path=Path(os.getenv("MOYU_CONFIG_PATH", root / "config" / "moyu.toml")),
    )
