"""
Error handling and reporting utilities for the roster bot.

This module provides:
- Standardized error base class (`BotError`) for all custom exceptions
- Store / configuration failures (`StoreError`, `ConfigError`)
- Logging helper for error events (`log_error`)
- Decorator for error-wrapping async update handlers (`wrap_handler_errors`)

Usage Examples:
---------------

1. Raising a store error from a sqlite failure:
	from utils.errors import StoreError
	try:
		...
	except sqlite3.Error as exc:
		raise StoreError("Could not clear roster.", cause=exc) from exc

2. Logging an error with traceback:
	from utils.errors import log_error
	try:
		...
	except Exception as exc:
		log_error("Failed to process update.", exc)

3. Wrapping a Telegram update handler:
	from utils.errors import wrap_handler_errors

	@wrap_handler_errors
	async def on_message(update, context):
		...

All errors are logged with timestamps and tracebacks. A failing handler never
stops the receive loop.
"""

from __future__ import annotations
import functools
import traceback
from typing import Any, Callable, Coroutine, TypeVar
from utils.logging import log

__all__ = ["BotError", "StoreError", "ConfigError", "log_error", "wrap_handler_errors"]

class BotError(Exception):
	"""Base exception for roster bot errors."""
	def __init__(self, message: str, *, cause: Exception | None = None):
		super().__init__(message)
		self.cause = cause

class StoreError(BotError):
	"""Unexpected failure while reading or writing the database."""

class ConfigError(BotError):
	"""Startup configuration is missing or unusable."""

def log_error(message: str, exc: BaseException | None = None) -> None:
	"""Log an error with traceback if available."""
	if exc:
		tb = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
		log(f"[ERROR] {message}\n{tb}")
	else:
		log(f"[ERROR] {message}")

F = TypeVar("F", bound=Callable[..., Coroutine[Any, Any, Any]])
def wrap_handler_errors(func: F) -> F:
	"""Decorator: catch and log errors escaping update handlers."""
	@functools.wraps(func)
	async def wrapper(*args, **kwargs):
		try:
			return await func(*args, **kwargs)
		except Exception as exc:
			log_error(f"Unhandled error in {func.__name__}.", exc)
			return None
	return wrapper  # type: ignore
