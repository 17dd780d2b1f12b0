"""
Everything a handler needs, built once at startup.
Provides:
- ChatPlatform: the one platform capability handlers call directly (admin check)
- BotContext: config + stores + trigger + pending prompts + platform
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config import BotConfig
from pending import PendingPrompts
from roster_store import RosterStore
from settings_store import SettingsStore
from triggers import RudeTrigger

__all__ = ["ChatPlatform", "BotContext"]


class ChatPlatform(Protocol):
    async def is_bot_admin(self, chat_id: int) -> bool:
        """True only when the bot is confirmed administrator of the chat."""
        ...


@dataclass
class BotContext:
    config: BotConfig
    roster: RosterStore
    settings: SettingsStore
    trigger: RudeTrigger
    pending: PendingPrompts
    platform: ChatPlatform
    # Without the leading "@"; filled in once the platform reports it
    bot_username: str = ""
