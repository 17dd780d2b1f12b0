"""
Telegram roster bot (mention-all + rude mode)

Key rules:
- One text message in, at most one reply out.
- Classification order lives in core/handlers.py; commands live in commands/.
- Roster and settings persist in one SQLite file (BOT_DB_PATH).

Notes:
- A missing bot token is fatal: we log it and exit before polling.
- Polling errors are logged and the receive loop keeps going.
"""

from __future__ import annotations

import logging
import sys

from telegram import Update
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from config import BotConfig, load_config
from core.context import BotContext
from core.handlers import on_message
from db import Database
from pending import PendingPrompts
from platform_telegram import TelegramPlatform, to_incoming
from roster_store import RosterStore
from settings_store import SettingsStore
from triggers import RudeTrigger
from utils.errors import ConfigError, log_error, wrap_handler_errors
from utils.logging import log, log_warning, set_default_tz


# =========================
# Third-party logging
# =========================

logging.basicConfig(
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    level=logging.WARNING,
)
logging.getLogger("httpx").setLevel(logging.WARNING)


# =========================
# Wiring
# =========================

def build_context(config: BotConfig, db: Database, platform) -> BotContext:
    settings = SettingsStore(db)
    return BotContext(
        config=config,
        roster=RosterStore(db),
        settings=settings,
        trigger=RudeTrigger(
            settings,
            probability=config.probability,
            default_word=config.default_word,
        ),
        pending=PendingPrompts(ttl_s=config.pending_ttl_s),
        platform=platform,
    )


@wrap_handler_errors
async def on_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Convert the update, classify it, send whatever comes back."""
    ctx: BotContext = context.bot_data["ctx"]
    incoming = to_incoming(update)
    if incoming is None:
        return
    reply = await on_message(incoming, ctx)
    if reply is not None:
        await ctx.platform.send(reply)


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    log_error("[Telegram] Error while receiving updates", context.error)


async def _post_init(application: Application) -> None:
    ctx: BotContext = application.bot_data["ctx"]
    ctx.bot_username = application.bot.username or ""
    log(f"Listening as @{ctx.bot_username}")


async def _post_shutdown(application: Application) -> None:
    db = application.bot_data.get("db")
    if db is not None:
        db.close()
    log("Stopped.")


def build_application(config: BotConfig) -> Application:
    db = Database(config.db_path)
    application = (
        Application.builder()
        .token(config.bot_token)
        .post_init(_post_init)
        .post_shutdown(_post_shutdown)
        .build()
    )
    application.bot_data["db"] = db
    application.bot_data["ctx"] = build_context(config, db, TelegramPlatform(application.bot))

    application.add_handler(MessageHandler(filters.TEXT & filters.UpdateType.MESSAGE, on_update))
    application.add_error_handler(on_error)
    return application


def main() -> int:
    try:
        config = load_config()
    except ConfigError as exc:
        log_warning(str(exc))
        return 1

    set_default_tz(config.log_tz)
    log(f"Starting (probability={config.probability}%, default word={config.default_word!r}, db={config.db_path})")
    application = build_application(config)
    application.run_polling(allowed_updates=Update.ALL_TYPES)
    return 0


# =========================
# Start bot
# =========================

if __name__ == "__main__":
    sys.exit(main())
