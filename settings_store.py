"""settings_store.py

Per-chat rude-mode settings (table `user_settings`).

Rows are created lazily by the first write. Each write is a single
INSERT ... ON CONFLICT DO UPDATE, so the flag and the word are upserted
independently and without a read-then-write race:
- set_enabled() leaves rude_word alone
- set_word() leaves rude_mode_enabled alone (new rows start disabled)

Words are validated by the caller before they get here.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional

from db import Database
from utils.errors import StoreError


@dataclass(frozen=True)
class ChatSettings:
    chat_id: int
    auto_reply_enabled: bool = False
    reply_word: Optional[str] = None


class SettingsStore:
    """SQLite-backed per-chat settings."""

    def __init__(self, db: Database):
        self.db = db

    def get(self, chat_id: int) -> Optional[ChatSettings]:
        try:
            with self.db.cursor() as cur:
                cur.execute(
                    "SELECT chat_id, rude_mode_enabled, rude_word FROM user_settings WHERE chat_id=?",
                    (int(chat_id),),
                )
                row = cur.fetchone()
        except sqlite3.Error as exc:
            raise StoreError(f"Could not read settings of chat {chat_id}", cause=exc) from exc

        if not row:
            return None
        word = row["rude_word"]
        return ChatSettings(
            chat_id=int(row["chat_id"]),
            auto_reply_enabled=bool(row["rude_mode_enabled"]),
            reply_word=str(word) if word else None,
        )

    def set_enabled(self, chat_id: int, enabled: bool) -> None:
        try:
            with self.db.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO user_settings(chat_id, rude_mode_enabled)
                    VALUES(?, ?)
                    ON CONFLICT(chat_id) DO UPDATE SET
                      rude_mode_enabled=excluded.rude_mode_enabled
                    """,
                    (int(chat_id), 1 if enabled else 0),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"Could not save rude mode for chat {chat_id}", cause=exc) from exc

    def set_word(self, chat_id: int, word: str) -> None:
        try:
            with self.db.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO user_settings(chat_id, rude_mode_enabled, rude_word)
                    VALUES(?, 0, ?)
                    ON CONFLICT(chat_id) DO UPDATE SET
                      rude_word=excluded.rude_word
                    """,
                    (int(chat_id), word),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"Could not save rude word for chat {chat_id}", cause=exc) from exc
