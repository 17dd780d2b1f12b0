"""Common utility helpers used across the project."""

from __future__ import annotations

import time

__all__ = ["clamp", "monotonic"]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a value between lo and hi (inclusive)."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        v = 0.0
    return max(lo, min(hi, v))


def monotonic() -> float:
    """Monotonic clock in seconds, used for expiry bookkeeping."""
    return time.monotonic()
