"""roster_store.py

Per-chat roster of mentionable @usernames.

A chat's roster is a set: the (chat_id, username) primary key rejects
duplicates, and that rejection is reported as ALREADY_PRESENT instead of an
error so concurrent /add calls for the same name are harmless.
"""

from __future__ import annotations

import sqlite3
from enum import Enum
from typing import Set

from db import Database
from utils.errors import StoreError


class AddResult(Enum):
    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"


class RosterStore:
    """SQLite-backed roster rows (table `users`)."""

    def __init__(self, db: Database):
        self.db = db

    def add(self, chat_id: int, username: str) -> AddResult:
        try:
            with self.db.cursor() as cur:
                cur.execute(
                    "INSERT INTO users(chat_id, username) VALUES(?, ?)",
                    (int(chat_id), username),
                )
        except sqlite3.IntegrityError:
            return AddResult.ALREADY_PRESENT
        except sqlite3.Error as exc:
            raise StoreError(f"Could not add {username} to chat {chat_id}", cause=exc) from exc
        return AddResult.INSERTED

    def list(self, chat_id: int) -> Set[str]:
        try:
            with self.db.cursor() as cur:
                cur.execute("SELECT username FROM users WHERE chat_id=?", (int(chat_id),))
                rows = cur.fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"Could not read roster of chat {chat_id}", cause=exc) from exc
        return {str(r["username"]) for r in rows}

    def clear(self, chat_id: int) -> int:
        """Delete every roster row of the chat; returns how many were removed."""
        try:
            with self.db.cursor() as cur:
                cur.execute("DELETE FROM users WHERE chat_id=?", (int(chat_id),))
                return int(cur.rowcount)
        except sqlite3.Error as exc:
            raise StoreError(f"Could not clear roster of chat {chat_id}", cause=exc) from exc
