"""Rude mode commands: enable/disable and the per-chat reply word."""
import asyncio
from core.context import BotContext
from core.messages import IncomingMessage, Reply
from pending import PendingKind
from utils.errors import StoreError, log_error
from utils.logging import log
from utils.text import MAX_WORD_LEN, command_args, validate_word

RUDE_ON = "Грубый режим включён"
RUDE_OFF = "Грубый режим выключен"
WORD_USAGE = "Укажите слово после команды: /set_rude_word слово\nили ответьте на это сообщение словом"
WORD_EMPTY = "Укажите слово после команды"
WORD_TOO_LONG = f"Слово слишком длинное (максимум {MAX_WORD_LEN} символов)"
WORD_NOT_ALPHA = "Слово должно состоять только из букв"
SAVE_FAILED = "Не удалось сохранить настройки, попробуйте позже"

_WORD_ERRORS = {
	"empty": WORD_EMPTY,
	"too_long": WORD_TOO_LONG,
	"not_alpha": WORD_NOT_ALPHA,
}

def _reply(message: IncomingMessage, text: str) -> Reply:
	return Reply(chat_id=message.chat_id, text=text, reply_to_message_id=message.message_id)

async def _set_enabled(message: IncomingMessage, ctx: BotContext, enabled: bool) -> Reply:
	try:
		await asyncio.to_thread(ctx.settings.set_enabled, message.chat_id, enabled)
	except StoreError as exc:
		log_error(f"[Rude] Could not toggle rude mode in chat {message.chat_id}", exc)
		return _reply(message, SAVE_FAILED)
	log(f"[Rude] chat {message.chat_id}: rude mode {'on' if enabled else 'off'}")
	return _reply(message, RUDE_ON if enabled else RUDE_OFF)

async def handle_rude_enable(message: IncomingMessage, ctx: BotContext) -> Reply:
	return await _set_enabled(message, ctx, True)

async def handle_rude_disable(message: IncomingMessage, ctx: BotContext) -> Reply:
	return await _set_enabled(message, ctx, False)

async def _apply_word(message: IncomingMessage, ctx: BotContext, word: str) -> Reply:
	problem = validate_word(word)
	if problem:
		return _reply(message, _WORD_ERRORS[problem])
	try:
		await asyncio.to_thread(ctx.settings.set_word, message.chat_id, word)
	except StoreError as exc:
		log_error(f"[Rude] Could not save word {word!r} in chat {message.chat_id}", exc)
		return _reply(message, SAVE_FAILED)
	log(f"[Rude] chat {message.chat_id}: word set to {word!r}")
	return _reply(message, f"Слово для грубого режима установлено: {word}")

async def handle_set_word(message: IncomingMessage, ctx: BotContext) -> Reply:
	word = command_args(message.text, "/set_rude_word")
	if not word:
		if message.sender_id is not None:
			ctx.pending.set(message.chat_id, message.sender_id, PendingKind.AWAITING_WORD)
		return _reply(message, WORD_USAGE)
	return await _apply_word(message, ctx, word)

async def handle_set_word_answer(message: IncomingMessage, ctx: BotContext) -> Reply:
	return await _apply_word(message, ctx, message.text.strip())
