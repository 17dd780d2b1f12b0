# utils package - shared utilities for the Telegram bot
from utils.helpers import clamp, monotonic
from utils.logging import log, log_warning, set_default_tz, DEFAULT_TZ
from utils.errors import BotError, StoreError, ConfigError, log_error, wrap_handler_errors
from utils.text import extract_usernames, long_words, command_args, validate_word

__all__ = [
    # helpers
    "clamp",
    "monotonic",
    # logging
    "log",
    "log_warning",
    "set_default_tz",
    "DEFAULT_TZ",
    # errors
    "BotError",
    "StoreError",
    "ConfigError",
    "log_error",
    "wrap_handler_errors",
    # text
    "extract_usernames",
    "long_words",
    "command_args",
    "validate_word",
]
