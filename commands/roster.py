"""Roster commands: /add, /all, /clear and the answer to an /add prompt."""
import asyncio
from typing import List

from core.context import BotContext
from core.messages import IncomingMessage, Reply
from pending import PendingKind
from roster_store import AddResult
from utils.errors import StoreError, log_error
from utils.logging import log
from utils.text import command_args, extract_usernames

ADD_USAGE = "Укажите никнеймы: /add @username1 @username2\nили ответьте на это сообщение никнеймами"
ADD_RETRY = "Укажите никнеймы через пробел, например: @username1 @username2"
ALL_PRESENT = "Все пользователи уже добавлены"
ONLY_GROUPS = "Только для групп"
NEED_ADMIN = "Сделайте бота администратором"
ROSTER_EMPTY = "Список пуст. Используйте /add"
CLEARED = "Список очищен"
ALREADY_EMPTY = "Список уже пуст"
ROSTER_FAILED = "Не удалось обработать список, попробуйте позже"

def _reply(message: IncomingMessage, text: str) -> Reply:
	return Reply(chat_id=message.chat_id, text=text, reply_to_message_id=message.message_id)

def _add_all(ctx: BotContext, chat_id: int, usernames: List[str]) -> List[str]:
	added: List[str] = []
	for username in usernames:
		if ctx.roster.add(chat_id, username) is AddResult.INSERTED:
			added.append(username)
	return added

async def _report_added(message: IncomingMessage, ctx: BotContext, usernames: List[str]) -> Reply:
	try:
		added = await asyncio.to_thread(_add_all, ctx, message.chat_id, usernames)
	except StoreError as exc:
		log_error(f"[Roster] /add failed in chat {message.chat_id}", exc)
		return _reply(message, ROSTER_FAILED)
	if added:
		log(f"[Roster] chat {message.chat_id}: added {', '.join(added)}")
		return _reply(message, f"Добавлены: {', '.join(added)}")
	return _reply(message, ALL_PRESENT)

async def handle_add(message: IncomingMessage, ctx: BotContext) -> Reply:
	usernames = extract_usernames(command_args(message.text, "/add"))
	if not usernames:
		if message.sender_id is not None:
			ctx.pending.set(message.chat_id, message.sender_id, PendingKind.AWAITING_USERNAMES)
		return _reply(message, ADD_USAGE)
	return await _report_added(message, ctx, usernames)

async def handle_add_answer(message: IncomingMessage, ctx: BotContext) -> Reply:
	usernames = extract_usernames(message.text)
	if not usernames:
		return _reply(message, ADD_RETRY)
	return await _report_added(message, ctx, usernames)

async def handle_all(message: IncomingMessage, ctx: BotContext) -> Reply:
	if not message.is_group:
		return Reply(chat_id=message.chat_id, text=ONLY_GROUPS)
	if not await ctx.platform.is_bot_admin(message.chat_id):
		return _reply(message, NEED_ADMIN)
	try:
		users = await asyncio.to_thread(ctx.roster.list, message.chat_id)
	except StoreError as exc:
		log_error(f"[Roster] /all failed in chat {message.chat_id}", exc)
		return _reply(message, ROSTER_FAILED)
	if not users:
		return _reply(message, ROSTER_EMPTY)
	return Reply(chat_id=message.chat_id, text=" ".join(sorted(users)))

async def handle_clear(message: IncomingMessage, ctx: BotContext) -> Reply:
	try:
		deleted = await asyncio.to_thread(ctx.roster.clear, message.chat_id)
	except StoreError as exc:
		log_error(f"[Roster] /clear failed in chat {message.chat_id}", exc)
		return _reply(message, ROSTER_FAILED)
	if deleted:
		log(f"[Roster] chat {message.chat_id}: cleared {deleted} entries")
	return _reply(message, CLEARED if deleted > 0 else ALREADY_EMPTY)
