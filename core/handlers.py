"""Message classification for the roster bot.
Every inbound text message goes through on_message(); the first matching
rule decides what (if anything) the bot answers.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from commands.core import handle_mention
from commands_main import handle_commands, handle_pending
from core.context import BotContext
from core.messages import IncomingMessage, Reply
from utils.logging import log


async def on_message(message: IncomingMessage, ctx: BotContext) -> Optional[Reply]:
    """
    Main message handler.
    Order:
    1) Plain text in a group: maybe a rude auto-reply (stop if one fires)
    2) Commands, matched by prefix
    3) Answer to a pending usage prompt from the same user
    4) Mention of the bot: help text
    """
    if not message.text:
        return None

    if not message.is_command and message.is_group:
        rude = await asyncio.to_thread(ctx.trigger.maybe_reply, message.chat_id, message.text)
        if rude:
            log(f"[Rude] chat {message.chat_id}: {rude}")
            return Reply(
                chat_id=message.chat_id,
                text=rude,
                reply_to_message_id=message.message_id,
                disable_notification=True,
            )

    if message.is_command:
        # A new command supersedes whatever prompt the sender left open
        if message.sender_id is not None:
            ctx.pending.discard(message.chat_id, message.sender_id)
        reply = await handle_commands(message, ctx)
        if reply is not None:
            return reply

    if message.sender_id is not None:
        kind = ctx.pending.pop(message.chat_id, message.sender_id)
        if kind is not None:
            return await handle_pending(message, ctx, kind)

    if ctx.bot_username and _mentions_bot(message, ctx.bot_username):
        return await handle_mention(message)

    return None


def _mentions_bot(message: IncomingMessage, bot_username: str) -> bool:
    me = "@" + bot_username.lstrip("@").lower()
    return any(m.lower() == me for m in message.mentions)
