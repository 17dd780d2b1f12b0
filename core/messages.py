"""Platform-neutral message and reply records.

The Telegram adapter converts updates into IncomingMessage; handlers answer
with at most one Reply, which the adapter sends.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

__all__ = ["IncomingMessage", "Reply", "GROUP_CHAT_TYPES"]

GROUP_CHAT_TYPES = frozenset({"group", "supergroup"})


@dataclass(frozen=True)
class IncomingMessage:
    chat_id: int
    chat_type: str
    message_id: int
    text: str
    sender_id: Optional[int] = None
    # "@name" strings of every mention entity in the text
    mentions: Tuple[str, ...] = ()
    reply_to_message_id: Optional[int] = None

    @property
    def is_group(self) -> bool:
        return self.chat_type in GROUP_CHAT_TYPES

    @property
    def is_command(self) -> bool:
        return self.text.startswith("/")


@dataclass(frozen=True)
class Reply:
    chat_id: int
    text: str
    reply_to_message_id: Optional[int] = None
    disable_notification: bool = False
