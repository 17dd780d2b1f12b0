"""Logging utilities for the Telegram bot."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import pytz

if TYPE_CHECKING:
    from pytz.tzinfo import BaseTzInfo

# Default timezone for timestamps
DEFAULT_TZ: BaseTzInfo = pytz.timezone("Europe/Moscow")


def set_default_tz(tz_name: str) -> BaseTzInfo:
    """Switch the timezone used by log() when no explicit tz is passed."""
    global DEFAULT_TZ
    DEFAULT_TZ = pytz.timezone(tz_name)
    return DEFAULT_TZ


def log(message: str, tz: BaseTzInfo | None = None) -> None:
    """Print console messages with a local timestamp."""
    tz = tz or DEFAULT_TZ
    ts = datetime.now(tz).strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] {message}", flush=True)


def log_warning(message: str) -> None:
    log(f"[WARN] {message}")
