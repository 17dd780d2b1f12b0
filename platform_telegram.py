"""platform_telegram.py

The thin layer between python-telegram-bot and the handlers.

- to_incoming(): Update -> IncomingMessage (None for anything without text)
- TelegramPlatform.is_bot_admin(): chat member lookup for the bot itself
- TelegramPlatform.send(): deliver a Reply; failures are logged, not raised
"""

from __future__ import annotations

from typing import Optional

from telegram import Bot, MessageEntity, ReplyParameters, Update
from telegram.constants import ChatMemberStatus
from telegram.error import TelegramError

from core.messages import IncomingMessage, Reply
from utils.errors import log_error


def to_incoming(update: Update) -> Optional[IncomingMessage]:
    message = update.message
    if message is None or not message.text:
        return None

    mentions = tuple(message.parse_entities([MessageEntity.MENTION]).values())
    replied = message.reply_to_message
    return IncomingMessage(
        chat_id=message.chat.id,
        chat_type=str(message.chat.type),
        message_id=message.message_id,
        text=message.text,
        sender_id=message.from_user.id if message.from_user else None,
        mentions=mentions,
        reply_to_message_id=replied.message_id if replied else None,
    )


class TelegramPlatform:
    def __init__(self, bot: Bot):
        self.bot = bot

    async def is_bot_admin(self, chat_id: int) -> bool:
        try:
            member = await self.bot.get_chat_member(chat_id, self.bot.id)
        except TelegramError as exc:
            log_error(f"[Telegram] Admin lookup failed for chat {chat_id}", exc)
            return False
        return member.status == ChatMemberStatus.ADMINISTRATOR

    async def send(self, reply: Reply) -> bool:
        reply_parameters = None
        if reply.reply_to_message_id is not None:
            reply_parameters = ReplyParameters(
                message_id=reply.reply_to_message_id,
                allow_sending_without_reply=True,
            )
        try:
            await self.bot.send_message(
                chat_id=reply.chat_id,
                text=reply.text,
                reply_parameters=reply_parameters,
                disable_notification=reply.disable_notification,
            )
        except TelegramError as exc:
            log_error(f"[Telegram] Failed to send reply to chat {reply.chat_id}", exc)
            return False
        return True
