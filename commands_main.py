"""commands_main.py

Command routing, delegated to the split modules in commands/.

Keywords are matched by leading substring in a fixed order, so
/rude_mode_enable is tested before anything shorter could swallow it.
"""

from typing import Optional

from commands.core import handle_start
from commands.roster import handle_add, handle_add_answer, handle_all, handle_clear
from commands.rude import handle_rude_enable, handle_rude_disable, handle_set_word, handle_set_word_answer
from core.context import BotContext
from core.messages import IncomingMessage, Reply
from pending import PendingKind

async def handle_commands(message: IncomingMessage, ctx: BotContext) -> Optional[Reply]:
    """
    Central command router.
    Returns the reply if a command matched, None otherwise.
    """
    text = message.text
    if text.startswith("/start"):
        return await handle_start(message)
    if text.startswith("/rude_mode_enable"):
        return await handle_rude_enable(message, ctx)
    if text.startswith("/rude_mode_disable"):
        return await handle_rude_disable(message, ctx)
    if text.startswith("/set_rude_word"):
        return await handle_set_word(message, ctx)
    if text.startswith("/add"):
        return await handle_add(message, ctx)
    if text.startswith("/all"):
        return await handle_all(message, ctx)
    if text.startswith("/clear"):
        return await handle_clear(message, ctx)
    return None

async def handle_pending(message: IncomingMessage, ctx: BotContext, kind: PendingKind) -> Reply:
    """Treat the message as the answer to an earlier usage prompt."""
    if kind is PendingKind.AWAITING_USERNAMES:
        return await handle_add_answer(message, ctx)
    return await handle_set_word_answer(message, ctx)
