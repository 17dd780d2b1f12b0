"""db.py

One SQLite database shared by the roster and settings stores.

Tables:
- users: (chat_id, username) roster rows, primary key on the pair
- user_settings: one row per chat with the rude-mode flag and word

Note:
- python-telegram-bot runs handlers on one event loop thread, so a single
  connection is fine; writes are still serialized with a lock so the stores
  can be used from thread executors too.
"""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class Database:
    """Shared sqlite3 handle with per-call scoped access."""

    def __init__(self, db_path: str = "data/bot.db"):
        self.db_path = str(db_path)
        parent = Path(self.db_path).parent
        if str(parent) != ".":
            parent.mkdir(parents=True, exist_ok=True)

        self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self._init_schema()

    def _init_schema(self) -> None:
        with self.cursor() as cur:
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    chat_id INTEGER NOT NULL,
                    username TEXT NOT NULL,
                    PRIMARY KEY (chat_id, username)
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS user_settings (
                    chat_id INTEGER PRIMARY KEY,
                    rude_mode_enabled INTEGER NOT NULL DEFAULT 0,
                    rude_word TEXT
                )
                """
            )

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Hold the lock for one unit of work; commit on success, roll back on error."""
        with self._lock:
            cur = self.conn.cursor()
            try:
                yield cur
                self.conn.commit()
            except BaseException:
                self.conn.rollback()
                raise
            finally:
                cur.close()

    def close(self) -> None:
        with self._lock:
            self.conn.close()
