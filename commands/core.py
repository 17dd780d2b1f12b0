"""Help / start command."""
from core.messages import IncomingMessage, Reply

COMMANDS_MESSAGE = (
	"Команды:\n"
	"/add - добавить пользователей\n"
	"Пример: /add @username1 @username2\n"
	"/all - тегнуть всех\n"
	"/clear - очистить список\n"
	"/rude_mode_enable - включить грубый режим\n"
	"/rude_mode_disable - выключить грубый режим\n"
	"/set_rude_word - задать слово для грубого режима\n"
	"Пример: /set_rude_word слово\n"
	"А больше ничего тупые эникейщики в меня не засунули"
)

async def handle_start(message: IncomingMessage) -> Reply:
	return Reply(chat_id=message.chat_id, text=COMMANDS_MESSAGE)

async def handle_mention(message: IncomingMessage) -> Reply:
	return Reply(chat_id=message.chat_id, text=COMMANDS_MESSAGE, reply_to_message_id=message.message_id)
