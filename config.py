"""config.py

Startup configuration, read once from the environment.

A `.env` file next to this module (or in the working directory) is loaded
first with python-dotenv; real environment variables win over it.

The result is an immutable BotConfig that is handed to the dispatcher and
the trigger engine. Nothing else reads os.environ.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import pytz
from dotenv import find_dotenv, load_dotenv

from utils.errors import ConfigError
from utils.helpers import clamp
from utils.logging import log_warning

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_REPLY_WORD = "людей"
DEFAULT_PROBABILITY = 5
DEFAULT_DB_PATH = "data/bot.db"
DEFAULT_PENDING_TTL_S = 300
DEFAULT_LOG_TZ = "Europe/Moscow"


@dataclass(frozen=True)
class BotConfig:
    bot_token: str
    default_word: str = DEFAULT_REPLY_WORD
    probability: int = DEFAULT_PROBABILITY
    db_path: str = DEFAULT_DB_PATH
    pending_ttl_s: float = DEFAULT_PENDING_TTL_S
    log_tz: str = DEFAULT_LOG_TZ


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log_warning(f"{name}={raw!r} is not an integer, using {default}")
        return default


def load_config(env: Optional[Mapping[str, str]] = None) -> BotConfig:
    """Build a BotConfig from `env` (defaults to os.environ after loading .env).

    Raises ConfigError when the bot token is missing.
    """
    if env is None:
        load_dotenv(BASE_DIR / ".env")
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    token = (env.get("TELEGRAM_BOT_TOKEN") or env.get("TelegramBotToken") or "").strip()
    if not token:
        raise ConfigError("Bot token not found: set TELEGRAM_BOT_TOKEN in the environment or .env")

    word = (env.get("TARGET_WORD") or "").strip() or DEFAULT_REPLY_WORD

    probability = _read_int(env, "PROBABILITY", DEFAULT_PROBABILITY)
    if not 0 <= probability <= 100:
        log_warning(f"PROBABILITY={probability} is outside 0..100, clamping")
        probability = int(clamp(probability, 0, 100))

    ttl = _read_int(env, "PENDING_TTL_SECONDS", DEFAULT_PENDING_TTL_S)
    if ttl <= 0:
        log_warning(f"PENDING_TTL_SECONDS={ttl} must be positive, using {DEFAULT_PENDING_TTL_S}")
        ttl = DEFAULT_PENDING_TTL_S

    log_tz = (env.get("LOG_TZ") or "").strip() or DEFAULT_LOG_TZ
    if log_tz not in pytz.all_timezones_set:
        log_warning(f"LOG_TZ={log_tz!r} is not a known timezone, using {DEFAULT_LOG_TZ}")
        log_tz = DEFAULT_LOG_TZ

    return BotConfig(
        bot_token=token,
        default_word=word,
        probability=probability,
        db_path=(env.get("BOT_DB_PATH") or "").strip() or DEFAULT_DB_PATH,
        pending_ttl_s=float(ttl),
        log_tz=log_tz,
    )
