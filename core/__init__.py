# core package - message model and handler context

from .messages import IncomingMessage, Reply, GROUP_CHAT_TYPES
from .context import BotContext, ChatPlatform

__all__ = [
    "IncomingMessage",
    "Reply",
    "GROUP_CHAT_TYPES",
    "BotContext",
    "ChatPlatform",
]
